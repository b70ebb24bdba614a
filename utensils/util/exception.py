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
Provides general-purpose exception utilities.
"""

from typing import NoReturn


class UtensilsError(Exception):
    """
    Base class for errors raised by this package.
    """

    pass


class MissingValueError(UtensilsError, ValueError):
    """
    Raised when a required value is None.
    """

    pass


class ConstraintViolationError(UtensilsError, ValueError):
    """
    Raised when a value violates a constraint, such as positivity.
    """

    pass


def raise_(exc: Exception) -> NoReturn:
    """
    Raise the given exception.

    Useful for raising exceptions in lambda functions.
    """
    raise exc
