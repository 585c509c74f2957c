#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import re

# Now, import the base unittest environment.  We will override things
# specifically later
from unittest import *
import unittest as _unittest

from hashset.common.log import LoggingIntercept
from hashset.common.sorting import sorted_robust

from unittest import mock


class _AssertRaisesContext_NormalizeWhitespace(_unittest.case._AssertRaisesContext):
    def __exit__(self, exc_type, exc_value, tb):
        try:
            _save_re = self.expected_regex
            self.expected_regex = None
            if not super().__exit__(exc_type, exc_value, tb):
                return False
        finally:
            self.expected_regex = _save_re

        exc_value = re.sub(r'(?s)\s+', ' ', str(exc_value))
        if not _save_re.search(exc_value):
            self._raiseFailure(
                '"{}" does not match "{}"'.format(_save_re.pattern, exc_value)
            )
        return True


class TestCase(_unittest.TestCase):
    """A hashset-specific class whose instances are single test cases.

    This class derives from unittest.TestCase and provides the following
    additional functionality:

    * additional assertions:
       - :py:meth:`assertMembersEqual`

    * updated assertions:
       - :py:meth:`assertRaisesRegex`

    """

    # By default, we always want to spend the time to create the full
    # diff of the test result and the baseline
    maxDiff = None

    def assertMembersEqual(self, first, second, msg=None):
        """Assert that two collections hold the same members.

        Both arguments are reduced to their distinct members and
        compared after sorting with :py:func:`sorted_robust`, so the
        comparison never depends on iteration order.  On failure, the
        (sorted) member lists are shown in the diff.

        """
        self.assertEqual(
            sorted_robust(dict.fromkeys(first)),
            sorted_robust(dict.fromkeys(second)),
            msg,
        )

    def assertRaisesRegex(self, expected_exception, expected_regex, *args, **kwargs):
        """Asserts that the message in a raised exception matches a regex.

        This is a light weight wrapper around
        :py:meth:`unittest.TestCase.assertRaisesRegex` that adds
        handling of a `normalize_whitespace` keyword argument that
        normalizes all consecutive whitespace in the exception message
        to a single space before checking the regular expression.

        Parameters
        ----------
        expected_exception : Exception
            Exception class expected to be raised.

        expected_regex : `re.Pattern` or str
            Regular expression expected to be found in error message.

        *args :
            Function to be called and extra positional args.

        **kwargs :
            Extra keyword args.

        msg : str
            Optional message used in case of failure. Can only be used
            when assertRaisesRegex is used as a context manager.

        normalize_whitespace : bool, default=False
            If True, collapses consecutive whitespace (including
            newlines) into a single space before checking against the
            regular expression

        """
        normalize_whitespace = kwargs.pop('normalize_whitespace', False)
        if normalize_whitespace:
            contextClass = _AssertRaisesContext_NormalizeWhitespace
        else:
            contextClass = _unittest.case._AssertRaisesContext
        context = contextClass(expected_exception, self, expected_regex)
        return context.handle('assertRaisesRegex', args, kwargs)
