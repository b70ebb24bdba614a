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
Test suite for `utensils.util.checks`.
"""
import logging
import unittest

import numpy as np

from utensils.util import checks
from utensils.util.checks import (
    require_not_null,
    require_not_null_with_msg,
    require_positive,
    require_positive_with_msg,
)
from utensils.util.exception import (
    ConstraintViolationError,
    MissingValueError,
    UtensilsError,
)


class TestRequireNotNull(unittest.TestCase):
    """
    Tests for the not-null checks.
    """

    def test_returns_value(self):  # noqa: D102
        value = object()
        self.assertIs(require_not_null(value, "value"), value)
        self.assertEqual(require_not_null(0, "zero"), 0)
        self.assertEqual(require_not_null("", "empty"), "")
        self.assertEqual(require_not_null_with_msg([], "unused {0}", 1), [])

    def test_default_message(self):  # noqa: D102
        with self.assertRaisesRegex(MissingValueError,
                                    "^name must be not-null$"):
            require_not_null(None, "name")

    def test_custom_message(self):  # noqa: D102
        with self.assertRaisesRegex(MissingValueError, "^no key given$"):
            require_not_null_with_msg(None, "no key given")
        with self.assertRaisesRegex(MissingValueError,
                                    "^key 3 of row 7 is missing$"):
            require_not_null_with_msg(None, "key {0} of row {1} is missing", 3, 7)

    def test_error_hierarchy(self):  # noqa: D102
        with self.assertRaises(ValueError):
            require_not_null(None, "name")
        with self.assertRaises(UtensilsError):
            require_not_null(None, "name")


class TestRequirePositive(unittest.TestCase):
    """
    Tests for the positivity checks.
    """

    def test_returns_value(self):  # noqa: D102
        self.assertEqual(require_positive(1, "count"), 1)
        self.assertEqual(require_positive(np.int32(5), "count"), 5)
        self.assertEqual(require_positive_with_msg(2**70, "{0}"), 2**70)

    def test_default_message(self):  # noqa: D102
        for value in [0, -1, -(2**40)]:
            with self.subTest(value=value):
                with self.assertRaises(ConstraintViolationError) as cm:
                    require_positive(value, "count")
                self.assertEqual(
                    str(cm.exception),
                    f"count must be positive, actual: {value}")

    def test_custom_message(self):  # noqa: D102
        with self.assertRaisesRegex(ConstraintViolationError,
                                    r"^bad size -2$"):
            require_positive_with_msg(-2, "bad size {0}")
        with self.assertRaisesRegex(ConstraintViolationError,
                                    r"^width of frame must be > 0, got 0$"):
            require_positive_with_msg(
                0,
                "{1} of {2} must be > 0, got {0}",
                "width",
                "frame")

    def test_rejects_non_integers(self):  # noqa: D102
        for value in [1.5, "3", True, None]:
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    require_positive(value, "count")
                with self.assertRaises(TypeError):
                    require_positive_with_msg(value, "{0}")

    def test_logs_violation(self):
        """
        Verify that violations are logged as errors before they are raised.
        """
        self.assertLessEqual(checks.logger.getEffectiveLevel(), logging.ERROR)
        with self.assertLogs(checks.logger, logging.ERROR) as cm:
            with self.assertRaises(ConstraintViolationError):
                require_positive(0, "count")
            with self.assertRaises(MissingValueError):
                require_not_null(None, "name")
            with self.assertRaises(TypeError):
                require_positive(1.5, "count")
        self.assertEqual(len(cm.output), 3)
        self.assertEqual(
            cm.output[0],
            f"ERROR:{checks.__name__}:count must be positive, actual: 0")


if __name__ == '__main__':
    unittest.main()
