#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import inspect
import textwrap


def format_exception(msg, exception=None, width=76):
    """Line-wrap an exception message for display on the console.

    Parameters
    ----------
    msg: str
        The raw exception message.  Messages that already contain
        newlines are returned unchanged.

    exception: Exception, optional
        The exception (class or instance) that will carry the message.
        The first line is shortened by the length of the
        ``module.ExceptionName: `` prefix that a traceback prints
        before it.

    width: int, optional
        The line length to wrap the exception message to.

    Returns
    -------
    str
    """
    if '\n' in msg:
        return msg
    prefix = 0
    if exception is not None:
        if not inspect.isclass(exception):
            exception = exception.__class__
        prefix = len(exception.__name__) + 2
        if exception.__module__ != 'builtins':
            prefix += len(exception.__module__) + 1
    return textwrap.fill(
        msg,
        width=width,
        initial_indent=' ' * prefix,
        subsequent_indent=' ' * 4,
        break_long_words=False,
        break_on_hyphens=False,
    ).lstrip()


class HashSetException(Exception):
    """
    Exception class for other hashset exceptions to inherit from,
    allowing hashset exceptions to be caught in a general way.
    Subclasses can define a class-level `default_message` attribute.
    """

    def __init__(self, *args):
        if not args and getattr(self, 'default_message', None):
            args = (self.default_message,)
        super().__init__(*args)


class UnhashableElementError(HashSetException, TypeError):
    """A hashset-specific TypeError raised when an element does not
    provide a hash consistent with its equality.

    Sets can only hold elements that can be hashed.  This is raised
    when an offending element is inserted into (or looked up in) a
    set; the set is left unchanged.

    """

    default_message = "set elements must be hashable"
