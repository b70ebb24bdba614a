#
# Copyright (c) 2023 Radiance Technologies, Inc.
#
# This file is part of utensils.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program. If not, see
# <http://www.gnu.org/licenses/>.
#
"""
Utilities for comparing values and building comparison chains.
"""

from .chain import (  # noqa: F401
    ChainState,
    ComparisonChain,
    chain,
    chain_key,
    comparison_chain,
)
from .ordering import (  # noqa: F401
    Bottom,
    Comparable,
    Comparator,
    Top,
    compare_bool,
    compare_char,
    compare_float32,
    compare_float64,
    compare_ignoring_case,
    compare_ignoring_case_null_first,
    compare_ignoring_case_null_last,
    compare_int8,
    compare_int16,
    compare_int32,
    compare_int64,
    compare_natural,
    compare_null_first,
    compare_null_last,
    compare_scalar,
    null_first_key,
    null_last_key,
)
