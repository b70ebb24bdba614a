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
Null-safe ordering primitives and total orders for scalar keys.

Every ``compare_*`` function returns a signed integer whose sign orders
`left` relative to `right`: negative if `left` comes first, zero if the
two are equivalent, and positive if `right` comes first.
Only the sign is meaningful.
"""
import functools
from functools import total_ordering
from numbers import Integral
from typing import (
    Any,
    Callable,
    List,
    Optional,
    Protocol,
    Type,
    TypeVar,
    Union,
    runtime_checkable,
)

import numpy as np

T = TypeVar('T')

Comparator = Callable[[T, T], int]
"""
A three-way comparison function in the style of `functools.cmp_to_key`.
"""

_FLOAT_TYPES = (float, np.floating)


@runtime_checkable
class Comparable(Protocol):
    """
    A protocol for comparable objects.

    This class can be used with `isinstance` checks and ensures
    compatibility with builtin functions based on comparisons, which
    exclusively use the less-than operator.
    """

    def __lt__(self, other: Any) -> bool:  # noqa: D105
        ...


@total_ordering
class Bottom:
    """
    A value that is less than any other.

    A generalization of negative infinity to any type.
    """

    def __eq__(self, other: Any) -> bool:  # noqa: D105
        return isinstance(other, Bottom)

    def __gt__(self, _: Any) -> bool:  # noqa: D105
        return False

    __hash__ = object.__hash__


@total_ordering
class Top:
    """
    A value that is greater than any other.

    A generalization of positive infinity to any type.
    """

    def __eq__(self, other: Any) -> bool:  # noqa: D105
        return isinstance(other, Top)

    def __lt__(self, _: Any) -> bool:  # noqa: D105
        return False

    __hash__ = object.__hash__


def null_first_key(value: Optional[T]) -> Union[T, Bottom]:
    """
    Get a sort key that places None before every other value.
    """
    return Bottom() if value is None else value


def null_last_key(value: Optional[T]) -> Union[T, Top]:
    """
    Get a sort key that places None after every other value.
    """
    return Top() if value is None else value


def compare_natural(left: Comparable, right: Comparable) -> int:
    """
    Compare two values by their natural order.

    Only the less-than operator is used, so any type that can be passed
    to `sorted` can be compared.
    Values that are mutually not less than each other are equivalent.
    """
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def _is_nan(value: Any) -> bool:
    return isinstance(value, _FLOAT_TYPES) and bool(np.isnan(value))


def _sign_bit(value: Any) -> bool:
    return isinstance(value, _FLOAT_TYPES) and bool(np.signbit(value))


def _compare_total(left: Any, right: Any) -> int:
    """
    Compare two numbers under a total order of floating-point values.

    Negative zero is less than positive zero, and NaN is equal to
    itself and greater than every other value, including infinity.
    """
    if left < right:
        return -1
    if right < left:
        return 1
    left_nan = _is_nan(left)
    right_nan = _is_nan(right)
    if left_nan or right_nan:
        return int(left_nan) - int(right_nan)
    return int(_sign_bit(right)) - int(_sign_bit(left))


def _fixed_width(dtype: Type[np.integer], value: Integral) -> np.integer:
    """
    Convert `value` to a fixed-width integer without wrapping around.

    Raises
    ------
    TypeError
        If `value` is not an integer.
    OverflowError
        If `value` cannot be represented by `dtype`.
    """
    if not isinstance(value, Integral):
        raise TypeError(
            f"Expected an integer, got {type(value).__name__}: {value!r}")
    info = np.iinfo(dtype)
    if not info.min <= value <= info.max:
        raise OverflowError(
            f"{value!r} is out of bounds for {np.dtype(dtype).name}")
    return dtype(value)


def compare_bool(left: bool, right: bool) -> int:
    """
    Compare two booleans, with False ordered before True.
    """
    return compare_natural(bool(left), bool(right))


def compare_int8(left: Integral, right: Integral) -> int:
    """
    Compare two signed 8-bit integers.
    """
    return compare_natural(
        _fixed_width(np.int8, left),
        _fixed_width(np.int8, right))


def compare_int16(left: Integral, right: Integral) -> int:
    """
    Compare two signed 16-bit integers.
    """
    return compare_natural(
        _fixed_width(np.int16, left),
        _fixed_width(np.int16, right))


def compare_int32(left: Integral, right: Integral) -> int:
    """
    Compare two signed 32-bit integers.
    """
    return compare_natural(
        _fixed_width(np.int32, left),
        _fixed_width(np.int32, right))


def compare_int64(left: Integral, right: Integral) -> int:
    """
    Compare two signed 64-bit integers.
    """
    return compare_natural(
        _fixed_width(np.int64, left),
        _fixed_width(np.int64, right))


def compare_float32(left: float, right: float) -> int:
    """
    Compare two numbers after rounding them to single precision.

    See Also
    --------
    compare_float64 : For the total order that is applied.
    """
    return _compare_total(np.float32(left), np.float32(right))


def compare_float64(left: float, right: float) -> int:
    """
    Compare two numbers as double precision floats.

    The comparison is a total order: ``-0.0`` is less than ``0.0`` and
    NaN is equal to NaN and greater than any other value.

    Parameters
    ----------
    left : float
        The left value.
    right : float
        The right value.

    Returns
    -------
    int
        The signed result of the comparison.
    """
    return _compare_total(np.float64(left), np.float64(right))


def compare_char(left: str, right: str) -> int:
    """
    Compare two single characters by code point.

    Characters outside the Basic Multilingual Plane are single code
    points, so they order after every BMP character rather than being
    compared as UTF-16 surrogate pairs.

    Raises
    ------
    TypeError
        If either argument is not a string of length one.
    """
    return compare_natural(ord(left), ord(right))


@functools.singledispatch
def compare_scalar(left: Any, right: Any) -> int:
    """
    Compare two scalars by their natural order.

    Floating-point operands (builtin or numpy) are compared with the
    total order of `compare_float64` so that NaN and signed zeros have
    a defined position.
    Further scalar types may be supported by registering an
    implementation for the type of the left operand.
    """
    if isinstance(right, _FLOAT_TYPES):
        return _compare_total(left, right)
    return compare_natural(left, right)


@compare_scalar.register(float)
@compare_scalar.register(np.floating)
def _(left: float, right: Any) -> int:
    return _compare_total(left, right)


def _compare(
        left: T,
        right: T,
        comparator: Optional[Comparator[T]]) -> int:
    if comparator is None:
        return compare_natural(left, right)
    return comparator(left, right)


def compare_null_first(
        left: Optional[T],
        right: Optional[T],
        comparator: Optional[Comparator[T]] = None) -> int:
    """
    Compare two objects in a null-safe manner.

    None is considered equal to None and less than any other value.
    Two references to the same object are equal without inspecting
    them further.

    Parameters
    ----------
    left : Optional[T]
        The left object.
    right : Optional[T]
        The right object.
    comparator : Optional[Comparator[T]], optional
        An explicit comparison function for two non-None objects.
        It never receives None.
        By default, the natural order of the objects is used.

    Returns
    -------
    int
        The signed result of the comparison.
    """
    if left is right:
        return 0
    if right is None:
        # left is present
        return 1
    if left is None:
        return -1
    return _compare(left, right, comparator)


def compare_null_last(
        left: Optional[T],
        right: Optional[T],
        comparator: Optional[Comparator[T]] = None) -> int:
    """
    Compare two objects in a null-safe manner.

    None is considered equal to None and greater than any other value.
    Otherwise identical to `compare_null_first`.
    """
    if left is right:
        return 0
    if right is None:
        # left is present
        return -1
    if left is None:
        return 1
    return _compare(left, right, comparator)


def _fold_char(c: str) -> str:
    upper = c.upper()
    if len(upper) != 1:
        upper = c
    lower = upper.lower()
    return lower if len(lower) == 1 else upper


def _fold_case(s: str) -> List[str]:
    return [_fold_char(c) for c in s]


def compare_ignoring_case(left: str, right: str) -> int:
    """
    Compare two strings without regard to case.

    The strings are compared one character at a time after mapping each
    character to upper case and then to lower case.
    Mappings that would expand a character into several (such as the
    upper case of "ß") leave the character unchanged, so the length of
    a string never changes and "straße" differs from "STRASSE".
    """
    return compare_natural(_fold_case(left), _fold_case(right))


def compare_ignoring_case_null_first(
        left: Optional[str],
        right: Optional[str]) -> int:
    """
    Compare two strings case-insensitively with None ordered first.
    """
    return compare_null_first(left, right, compare_ignoring_case)


def compare_ignoring_case_null_last(
        left: Optional[str],
        right: Optional[str]) -> int:
    """
    Compare two strings case-insensitively with None ordered last.
    """
    return compare_null_last(left, right, compare_ignoring_case)
