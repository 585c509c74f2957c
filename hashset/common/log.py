#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________
#
# The hashset package logger and utilities for testing log output
#
import io
import logging
import sys
import textwrap


def is_debug_set(logger):
    """Return True only if DEBUG output was explicitly requested.

    ``Logger.isEnabledFor(DEBUG)`` is also True when no level was set
    anywhere in the hierarchy (NOTSET); this is used to guard the
    construction of expensive debug messages.
    """
    if logger.manager.disable >= logging.DEBUG:
        return False
    return logging.NOTSET < logger.getEffectiveLevel() <= logging.DEBUG


class WrappingFormatter(logging.Formatter):
    """Formatter that line-wraps each paragraph of a log message.

    Whitespace within a paragraph (including the indentation of
    triple-quoted messages) is collapsed, paragraphs are separated by
    blank lines, and continuation lines are indented by `hang` spaces.
    Tracebacks are appended unwrapped.
    """

    def __init__(self, fmt='%(levelname)s: %(message)s', wrap=78, hang=4):
        super().__init__(fmt)
        self._wrapper = textwrap.TextWrapper(
            width=wrap,
            subsequent_indent=' ' * hang,
            break_long_words=False,
            break_on_hyphens=False,
        )

    def formatMessage(self, record):
        text = super().formatMessage(record)
        return '\n\n'.join(
            self._wrapper.fill(' '.join(par.split())) for par in text.split('\n\n')
        )


class _GlobalLogFilter(object):
    def __init__(self):
        self.logger = logging.getLogger()

    def filter(self, record):
        # Do not emit messages through the default hashset handler if
        # the application has registered a global handler.
        return not self.logger.handlers


hashset_logger = logging.getLogger('hashset')
hashset_handler = logging.StreamHandler(sys.stdout)
hashset_handler.setFormatter(WrappingFormatter())
hashset_handler.addFilter(_GlobalLogFilter())
hashset_logger.addHandler(hashset_handler)


class LoggingIntercept(object):
    r"""Context manager capturing the messages sent to one logger.

    While active, the logger's own handlers are detached, propagation
    is disabled, and every message at or above `level` is written to
    `output` (a new :py:class:`io.StringIO` if not given), which the
    ``with`` statement returns.

    >>> import logging
    >>> with LoggingIntercept(module='hashset') as OUT:
    ...     logging.getLogger('hashset').warning('a simple message')
    >>> OUT.getvalue()
    'a simple message\n'

    """

    def __init__(self, output=None, module=None, level=logging.WARNING, formatter=None):
        self.output = io.StringIO() if output is None else output
        self._logger = logging.getLogger(module)
        self._level = level
        self._handler = logging.StreamHandler(self.output)
        self._handler.setFormatter(formatter or logging.Formatter('%(message)s'))
        self._handler.setLevel(level)
        self._saved = None

    def __enter__(self):
        logger = self._logger
        self._saved = logger.level, logger.propagate, logger.handlers
        logger.handlers = [self._handler]
        logger.propagate = False
        logger.setLevel(self._level)
        return self.output

    def __exit__(self, et, ev, tb):
        logger = self._logger
        level, logger.propagate, logger.handlers = self._saved
        logger.setLevel(level)
