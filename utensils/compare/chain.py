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
Fluent, short-circuiting comparison chains.

A chain compares two records key by key in priority order, like the
lexicographic comparison of tuples::

    def compare_people(a, b):
        return (
            chain()
            .ascending_null_last(a.surname, b.surname)
            .ascending_null_last(a.name, b.name)
            .descending_int(a.age, b.age)
            .result())

The first key that tells the records apart decides the result.
Later steps are still accepted for the sake of the fluent syntax but
are not evaluated.
"""
import functools
from enum import IntEnum
from typing import Any, Callable, NoReturn, Optional, TypeVar

from utensils.compare import ordering
from utensils.compare.ordering import Comparator

T = TypeVar('T')


class ChainState(IntEnum):
    """
    The states of a comparison chain.

    The value of each member is the result reported by a chain in that
    state.
    """

    LESS = -1
    """
    A previous step decided that the left record is less.
    """
    ACTIVE = 0
    """
    No step has told the records apart yet.
    """
    GREATER = 1
    """
    A previous step decided that the left record is greater.
    """


class ComparisonChain:
    """
    An immutable accumulator of key comparisons.

    Obtain the initial chain with `chain` or `comparison_chain`.
    The factories and every step return one of three shared instances,
    one per `ChainState`, so a chain may be freely reused across
    independent comparisons and threads.

    Each ``ascending*`` step compares `left` to `right`; the matching
    ``descending*`` step swaps the operands before comparing them.
    The swap also mirrors the placement of None, so
    ``descending_null_first`` places None last.
    """

    __slots__ = ('_state',)

    def __init__(self, state: ChainState) -> None:
        object.__setattr__(self, '_state', ChainState(state))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        """
        Forbid modification of the chain.
        """
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        """
        Unpickle (and copy) to the shared instance for the state.
        """
        return (_from_state, (self._state,))

    def __repr__(self) -> str:  # noqa: D105
        return f"{type(self).__name__}({self._state.name})"

    @property
    def state(self) -> ChainState:
        """
        Get the state of the chain.
        """
        return self._state

    @property
    def is_decided(self) -> bool:
        """
        Return True if the result of the chain can no longer change.
        """
        return self._state is not ChainState.ACTIVE

    def accept(self, result: int) -> 'ComparisonChain':
        """
        Advance the chain with the result of an arbitrary comparison.

        Parameters
        ----------
        result : int
            A signed comparison result.
            Only its sign is considered.

        Returns
        -------
        ComparisonChain
            This chain if it is already decided or `result` is zero, the
            chain decided by the sign of `result` otherwise.
        """
        if self.is_decided or result == 0:
            return self
        return _LESS if result < 0 else _GREATER

    def _step(
            self,
            compare: Callable[..., int],
            left: Any,
            right: Any,
            *args: Any) -> 'ComparisonChain':
        if self.is_decided:
            return self
        return self.accept(compare(left, right, *args))

    def ascending(self, left: Any, right: Any) -> 'ComparisonChain':
        """
        Compare two scalars by their natural order.

        See `ordering.compare_scalar` for the treatment of floats.
        """
        return self._step(ordering.compare_scalar, left, right)

    def ascending_bool(self, left: bool, right: bool) -> 'ComparisonChain':
        """
        Compare two booleans, with False ordered before True.
        """
        return self._step(ordering.compare_bool, left, right)

    def ascending_byte(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 8-bit integers.

        Raises
        ------
        OverflowError
            If a value does not fit in 8 bits.
        """
        return self._step(ordering.compare_int8, left, right)

    def ascending_short(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 16-bit integers.
        """
        return self._step(ordering.compare_int16, left, right)

    def ascending_int(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 32-bit integers.
        """
        return self._step(ordering.compare_int32, left, right)

    def ascending_long(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 64-bit integers.
        """
        return self._step(ordering.compare_int64, left, right)

    def ascending_float(self, left: float, right: float) -> 'ComparisonChain':
        """
        Compare two single precision floats.
        """
        return self._step(ordering.compare_float32, left, right)

    def ascending_double(self,
                         left: float,
                         right: float) -> 'ComparisonChain':
        """
        Compare two double precision floats.

        ``-0.0`` is less than ``0.0`` and NaN is greater than any other
        value.
        """
        return self._step(ordering.compare_float64, left, right)

    def ascending_char(self, left: str, right: str) -> 'ComparisonChain':
        """
        Compare two single characters by code point.
        """
        return self._step(ordering.compare_char, left, right)

    def ascending_null_first(
            self,
            left: Optional[T],
            right: Optional[T],
            comparator: Optional[Comparator[T]] = None) -> 'ComparisonChain':
        """
        Compare two objects with None ordered before any other value.

        Parameters
        ----------
        left : Optional[T]
            The left object.
        right : Optional[T]
            The right object.
        comparator : Optional[Comparator[T]], optional
            An explicit comparison function, which never receives None.
            By default, the natural order of the objects is used.
            Any exception it raises is propagated.

        Returns
        -------
        ComparisonChain
            The advanced chain.
        """
        return self._step(ordering.compare_null_first, left, right, comparator)

    def ascending_null_last(
            self,
            left: Optional[T],
            right: Optional[T],
            comparator: Optional[Comparator[T]] = None) -> 'ComparisonChain':
        """
        Compare two objects with None ordered after any other value.

        See Also
        --------
        ascending_null_first : For a description of the arguments.
        """
        return self._step(ordering.compare_null_last, left, right, comparator)

    def ascending_ignoring_case_null_first(
            self,
            left: Optional[str],
            right: Optional[str]) -> 'ComparisonChain':
        """
        Compare two strings case-insensitively, None first.
        """
        return self._step(
            ordering.compare_ignoring_case_null_first,
            left,
            right)

    def ascending_ignoring_case_null_last(
            self,
            left: Optional[str],
            right: Optional[str]) -> 'ComparisonChain':
        """
        Compare two strings case-insensitively, None last.
        """
        return self._step(
            ordering.compare_ignoring_case_null_last,
            left,
            right)

    def descending(self, left: Any, right: Any) -> 'ComparisonChain':
        """
        Compare two scalars by their reversed natural order.
        """
        return self._step(ordering.compare_scalar, right, left)

    def descending_bool(self, left: bool, right: bool) -> 'ComparisonChain':
        """
        Compare two booleans, with True ordered before False.
        """
        return self._step(ordering.compare_bool, right, left)

    def descending_byte(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 8-bit integers in reverse.
        """
        return self._step(ordering.compare_int8, right, left)

    def descending_short(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 16-bit integers in reverse.
        """
        return self._step(ordering.compare_int16, right, left)

    def descending_int(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 32-bit integers in reverse.
        """
        return self._step(ordering.compare_int32, right, left)

    def descending_long(self, left: int, right: int) -> 'ComparisonChain':
        """
        Compare two signed 64-bit integers in reverse.
        """
        return self._step(ordering.compare_int64, right, left)

    def descending_float(self,
                         left: float,
                         right: float) -> 'ComparisonChain':
        """
        Compare two single precision floats in reverse.
        """
        return self._step(ordering.compare_float32, right, left)

    def descending_double(self,
                          left: float,
                          right: float) -> 'ComparisonChain':
        """
        Compare two double precision floats in reverse.
        """
        return self._step(ordering.compare_float64, right, left)

    def descending_char(self, left: str, right: str) -> 'ComparisonChain':
        """
        Compare two single characters by reversed code point.
        """
        return self._step(ordering.compare_char, right, left)

    def descending_null_first(
            self,
            left: Optional[T],
            right: Optional[T],
            comparator: Optional[Comparator[T]] = None) -> 'ComparisonChain':
        """
        Compare two objects in reverse, swapping them before comparison.

        The swapped pair is compared with None first, so for the caller
        None effectively sorts after any other value.
        """
        return self._step(ordering.compare_null_first, right, left, comparator)

    def descending_null_last(
            self,
            left: Optional[T],
            right: Optional[T],
            comparator: Optional[Comparator[T]] = None) -> 'ComparisonChain':
        """
        Compare two objects in reverse, swapping them before comparison.

        The swapped pair is compared with None last, so for the caller
        None effectively sorts before any other value.
        """
        return self._step(ordering.compare_null_last, right, left, comparator)

    def descending_ignoring_case_null_first(
            self,
            left: Optional[str],
            right: Optional[str]) -> 'ComparisonChain':
        """
        Compare two strings case-insensitively in reverse, None last.
        """
        return self._step(
            ordering.compare_ignoring_case_null_first,
            right,
            left)

    def descending_ignoring_case_null_last(
            self,
            left: Optional[str],
            right: Optional[str]) -> 'ComparisonChain':
        """
        Compare two strings case-insensitively in reverse, None first.
        """
        return self._step(
            ordering.compare_ignoring_case_null_last,
            right,
            left)

    def result(self) -> int:
        """
        Get the result of the chain.

        Returns
        -------
        int
            Zero if no step told the records apart, otherwise a negative
            or positive value following the deciding step.
            Callers should rely only on the sign.
        """
        return int(self._state)

    def result_inverted(self) -> int:
        """
        Get the negated result of the chain.
        """
        return -int(self._state)


_ACTIVE = ComparisonChain(ChainState.ACTIVE)
_LESS = ComparisonChain(ChainState.LESS)
_GREATER = ComparisonChain(ChainState.GREATER)

_INSTANCES = {
    ChainState.ACTIVE: _ACTIVE,
    ChainState.LESS: _LESS,
    ChainState.GREATER: _GREATER,
}


def _from_state(state: ChainState) -> ComparisonChain:
    return _INSTANCES[ChainState(state)]


def chain() -> ComparisonChain:
    """
    Get a new (active) comparison chain.
    """
    return _ACTIVE


def comparison_chain() -> ComparisonChain:
    """
    Get a new (active) comparison chain.

    An alias of `chain` that reads better in some call sites.
    """
    return _ACTIVE


def chain_key(
        compare: Callable[[T, T], ComparisonChain]) -> Callable[[T], Any]:
    """
    Convert a chain-building comparison into a key function.

    Parameters
    ----------
    compare : Callable[[T, T], ComparisonChain]
        A function that compares two objects by building a chain.

    Returns
    -------
    Callable[[T], Any]
        A key function for `sorted`, `min`, `max`, and the like.

    Examples
    --------
    >>> def by_name(x, y):
    ...     return chain().ascending_ignoring_case_null_first(x, y)
    >>> sorted(["b", "A", "c"], key=chain_key(by_name))
    ['A', 'b', 'c']
    """
    return functools.cmp_to_key(lambda a, b: compare(a, b).result())
