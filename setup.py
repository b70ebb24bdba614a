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
utensils: Comparison chains, null-safe orderings, and precondition checks.
"""

from setuptools import find_packages, setup

setup(
    name="utensils",
    version="1.0.0",
    description=(
        "Comparison chains, null-safe orderings, and precondition checks"),
    license="LGPL-3.0-or-later",
    python_requires=">=3.8",
    packages=find_packages(include=["utensils",
                                    "utensils.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]})
