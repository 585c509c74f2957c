#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import logging
from collections import defaultdict

from hashset.common.errors import UnhashableElementError, format_exception
from hashset.common.log import is_debug_set

logger = logging.getLogger(__name__)


def _reject(val):
    return UnhashableElementError(
        format_exception(
            "Cannot use %r (type '%s') as a set element: set elements "
            "must be hashable, with a hash consistent with equality."
            % (val, type(val).__name__),
            exception=UnhashableElementError,
        )
    )


class HashDispatcher(defaultdict):
    """Dispatch table validating that objects can be used as set elements.

    Set elements must provide a hash consistent with their equality.
    Calling ``hasher[type(obj)](obj)`` returns ``obj`` (the key used by
    the backing ``dict``) or raises :py:class:`UnhashableElementError`.
    A strategy is selected once per type, the first time an instance
    of that type is seen:

      - Tuples (and tuple subclasses) are checked element by element.
      - Types that disable hashing (``__hash__ = None``, e.g., ``list``
        or a class defining ``__eq__`` without ``__hash__``) are
        rejected.
      - All other types are accepted, but every instance is still
        hashed when it is checked, as whether an instance is hashable
        can depend on its contents (e.g., a frozen dataclass holding a
        list).
    """

    def __init__(self, *args, **kwargs):
        super().__init__(lambda: self._missing_impl, *args, **kwargs)
        self[tuple] = self._tuple

    def _missing_impl(self, val):
        cls = val.__class__
        if isinstance(val, tuple):
            self[cls] = self._tuple
        elif cls.__hash__ is None:
            self[cls] = self._unhashable
        else:
            self[cls] = self._hashable
        if is_debug_set(logger):
            logger.debug(
                "Registered element type '%s' as %s",
                cls.__qualname__,
                'unhashable' if self[cls] is self._unhashable else 'hashable',
            )
        return self[cls](val)

    @staticmethod
    def _hashable(val):
        try:
            hash(val)
        except TypeError:
            raise _reject(val) from None
        return val

    @staticmethod
    def _unhashable(val):
        raise _reject(val)

    def _tuple(self, val):
        for i in val:
            self[i.__class__](i)
        return val

    def hashable(self, obj):
        """Query the strategy selected for a type.

        Parameters
        ----------
        obj: type or object
            The type (or an instance of the type) to query

        Returns
        -------
        bool
            False if instances of the type are always rejected, True if
            they are accepted (subject to each instance hashing
            successfully).  Raises KeyError if no instance of the type
            has been checked yet.

        """
        if isinstance(obj, type):
            cls = obj
        else:
            cls = type(obj)
        fcn = self.get(cls, None)
        if fcn is None:
            raise KeyError(obj)
        return fcn is not self._unhashable


#: The global 'hasher' instance validating set elements.
#:
#: This instance of the :class:`HashDispatcher` is shared by every
#: :class:`~hashset.common.collections.hash_set.HashSet` in the process
#: and checks every element they store or look up.
hasher = HashDispatcher()
