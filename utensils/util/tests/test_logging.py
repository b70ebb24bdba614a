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
Test suite for `utensils.util.logging`.
"""
import logging
import unittest

from utensils.util.debug import Debug
from utensils.util.exception import ConstraintViolationError, raise_
from utensils.util.logging import default_log_level, log_and_raise


class TestLogging(unittest.TestCase):
    """
    Tests for the logging utilities.
    """

    def tearDown(self) -> None:
        """
        Restore the debugging status.
        """
        Debug.is_debug = False

    def test_default_log_level(self):  # noqa: D102
        self.assertEqual(default_log_level(), logging.INFO)
        Debug.is_debug = True
        self.assertEqual(default_log_level(), logging.DEBUG)

    def test_log_and_raise(self):
        """
        Verify that the message is both logged and raised.
        """
        logger = logging.getLogger("utensils.tests.log_and_raise")
        with self.assertLogs(logger, logging.ERROR) as cm:
            with self.assertRaisesRegex(ConstraintViolationError, "^oops$"):
                log_and_raise(logger, "oops", ConstraintViolationError)
        self.assertEqual(
            cm.output,
            ["ERROR:utensils.tests.log_and_raise:oops"])
        with self.assertLogs(logger, logging.WARNING) as cm:
            with self.assertRaises(KeyError):
                log_and_raise(logger, "missing", KeyError, logging.WARNING)
        self.assertEqual(len(cm.output), 1)

    def test_raise_(self):  # noqa: D102
        error = RuntimeError("from a lambda")
        with self.assertRaises(RuntimeError) as cm:
            (lambda: raise_(error))()
        self.assertIs(cm.exception, error)


if __name__ == '__main__':
    unittest.main()
