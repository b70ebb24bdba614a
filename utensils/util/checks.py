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
Precondition checks that raise on violation.

Each check returns the validated value so that it can be used inline::

    self.capacity = require_positive(capacity, "capacity")

Message templates are formatted with `str.format` using positional
fields.
"""
import logging
from numbers import Integral
from typing import Any, Optional, TypeVar

from utensils.util.exception import ConstraintViolationError, MissingValueError
from utensils.util.logging import default_log_level, log_and_raise

logger: logging.Logger = logging.getLogger(__name__)
logger.setLevel(default_log_level())

T = TypeVar('T')

REQUIRE_NOT_NULL_MSG = "{0} must be not-null"
"""
Default message of `require_not_null`.

``{0}`` is the name of the value.
"""
REQUIRE_POSITIVE_MSG = "{1} must be positive, actual: {0}"
"""
Default message of `require_positive`.

``{0}`` is the value and ``{1}`` its name.
"""


def _fail(error: type, template: str, *args: Any) -> None:
    log_and_raise(logger, template.format(*args), error)


def require_not_null(value: Optional[T], value_name: str) -> T:
    """
    Check that a value is not None.

    Parameters
    ----------
    value : Optional[T]
        The value to check.
    value_name : str
        The name of the value, used in the error message.

    Returns
    -------
    T
        The validated value.

    Raises
    ------
    MissingValueError
        If `value` is None.
    """
    if value is None:
        _fail(MissingValueError, REQUIRE_NOT_NULL_MSG, value_name)
    return value


def require_not_null_with_msg(
        value: Optional[T],
        error_message: str,
        *args: Any) -> T:
    """
    Check that a value is not None, with a custom error message.

    The message is formatted with `args` as positional fields.
    """
    if value is None:
        _fail(MissingValueError, error_message, *args)
    return value


def _require_integer(value: Any) -> None:
    # bool is rejected even though it is Integral
    if isinstance(value, bool) or not isinstance(value, Integral):
        log_and_raise(
            logger,
            f"Expected an integer, got {type(value).__name__}: {value!r}",
            TypeError)


def require_positive(value: int, value_name: str) -> int:
    """
    Check that an integer is positive (greater than zero).

    Parameters
    ----------
    value : int
        The value to check.
    value_name : str
        The name of the value, used in the error message.

    Returns
    -------
    int
        The validated value.

    Raises
    ------
    TypeError
        If `value` is not an integer.
    ConstraintViolationError
        If `value` is not positive.
        The message is formatted from `REQUIRE_POSITIVE_MSG`.
    """
    _require_integer(value)
    if value <= 0:
        _fail(ConstraintViolationError, REQUIRE_POSITIVE_MSG, value, value_name)
    return value


def require_positive_with_msg(
        value: int,
        error_message: str,
        *other_args: Any) -> int:
    """
    Check that an integer is positive, with a custom error message.

    Parameters
    ----------
    value : int
        The value to check.
    error_message : str
        The message template.
        Field ``{0}`` is `value`, and fields ``{1}``, ``{2}``, and so
        on are the elements of `other_args`.
    other_args : Any
        Further arguments to the message template.

    Returns
    -------
    int
        The validated value.

    Raises
    ------
    TypeError
        If `value` is not an integer.
    ConstraintViolationError
        If `value` is not positive.
    """
    _require_integer(value)
    if value <= 0:
        _fail(ConstraintViolationError, error_message, value, *other_args)
    return value
