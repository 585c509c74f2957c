#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

from collections.abc import MutableSet, Set

from hashset.common.sorting import sorted_robust

from ._hasher import hasher


class HashSet(MutableSet):
    """An unordered collection of unique, hashable elements.

    Elements are stored as the keys of a ``dict``, so membership tests,
    insertions and removals are O(1) expected.  Two elements are the
    same member if they compare equal (and, as Python requires, hash
    equal), regardless of which instance was inserted.

    Elements must be hashable with a hash consistent with their
    equality.  Storing (or looking up) an element that is not raises
    :py:class:`~hashset.common.errors.UnhashableElementError`.

    The iteration order of a HashSet is unspecified: it is not part of
    the interface, and code needing ordered output must sort explicitly
    (see :py:func:`~hashset.common.sorting.sorted_robust`).

    Mutating methods (:py:meth:`add`, :py:meth:`remove` and
    :py:meth:`foreach`) return the set itself so that calls can be
    chained::

        >>> s = HashSet().add(1, 2).add(3).remove(2)
        >>> sorted(s)
        [1, 3]

    All other operations (:py:meth:`filter`, :py:meth:`intersection`,
    :py:meth:`union`, :py:meth:`difference` and the operators inherited
    from :py:class:`collections.abc.Set`) return new sets and never
    modify their operands.

    HashSet performs no synchronization: concurrent mutation, or
    mutation from another thread while iterating, is not supported.

    """

    __slots__ = ('_dict',)

    def __init__(self, iterable=None):
        # maps element -> None
        self._dict = {}
        if iterable is not None:
            self.update(iterable)

    @classmethod
    def of(cls, *elements):
        """Return a new set holding the distinct values in `elements`."""
        return cls(elements)

    @classmethod
    def _from_dict(cls, data):
        # `data` keys have already been validated by the hasher
        ans = cls()
        ans._dict = data
        return ans

    def _coerce(self, other):
        if isinstance(other, Set):
            return other
        return self.__class__(other)

    def __str__(self):
        """String representation of the set.

        Elements are sorted with :py:func:`sorted_robust`, so equal sets
        always print the same way.
        """
        return "%s(%s)" % (
            type(self).__name__,
            ', '.join(repr(val) for val in sorted_robust(self._dict)),
        )

    __repr__ = __str__

    def update(self, iterable):
        """Add all elements of `iterable` to this set."""
        if isinstance(iterable, HashSet):
            self._dict.update(iterable._dict)
        else:
            # Check every element before changing the set
            self._dict.update(
                dict.fromkeys(hasher[val.__class__](val) for val in iterable)
            )

    def copy(self):
        """Return a shallow copy of this set."""
        return self._from_dict(dict(self._dict))

    __copy__ = copy

    #
    # This method must be defined for deepcopy/pickling
    # because this class is slotized.
    #
    def __setstate__(self, state):
        self._dict = state

    def __getstate__(self):
        return self._dict

    #
    # Implement MutableSet abstract methods
    #

    def __contains__(self, val):
        return hasher[val.__class__](val) in self._dict

    def __iter__(self):
        return iter(self._dict)

    def __len__(self):
        return len(self._dict)

    def discard(self, val):
        """Remove an element. Do not raise an exception if absent."""
        self._dict.pop(hasher[val.__class__](val), None)

    def clear(self):
        """Remove all elements from this set."""
        self._dict.clear()

    #
    # Queries
    #

    def empty(self):
        """Return True if the set has no elements."""
        return not self._dict

    def has(self, val):
        """Return True if an element equal to `val` is in the set."""
        return hasher[val.__class__](val) in self._dict

    def len(self):
        """Return the number of elements in the set."""
        return len(self._dict)

    def subset(self, other):
        """Return True if every element of this set is in `other`.

        The empty set is a subset of every set (including itself), and
        every set is a subset of itself.
        """
        other = self._coerce(other)
        if len(self._dict) > len(other):
            return False
        return all(val in other for val in self._dict)

    def slice(self):
        """Return the elements as a list, in unspecified order."""
        return list(self._dict)

    #
    # Mutation (these return the set itself to support chaining)
    #

    def add(self, *vals):
        """Add each of `vals` to the set.

        Elements already in the set are left unchanged.  If any of
        `vals` is unhashable, the set is not modified.  Returns the set.
        """
        self.update(vals)
        return self

    def remove(self, *vals):
        """Remove each of `vals` from the set.

        Unlike :py:meth:`set.remove`, elements that are not in the set
        are silently ignored.  If any of `vals` is unhashable, the set
        is not modified.  Returns the set.
        """
        keys = [hasher[val.__class__](val) for val in vals]
        for key in keys:
            self._dict.pop(key, None)
        return self

    #
    # Iteration / transformation
    #

    def foreach(self, fn):
        """Call ``fn(element)`` once for each element; return the set.

        The elements are collected before the first call, so `fn` is
        called exactly once for every element present when foreach()
        was called, even if `fn` adds or removes elements.  Exceptions
        raised by `fn` stop the iteration and propagate to the caller.
        """
        for val in tuple(self._dict):
            fn(val)
        return self

    def filter(self, fn):
        """Return a new set of the elements for which ``fn(element)`` is true."""
        return self._from_dict({val: None for val in self._dict if fn(val)})

    #
    # Set algebra (all return new sets)
    #

    def intersection(self, other):
        """Return a new set of the elements in both this set and `other`."""
        other = self._coerce(other)
        if isinstance(other, HashSet) and len(other._dict) < len(self._dict):
            data = {val: None for val in other._dict if val in self._dict}
        else:
            data = {val: None for val in self._dict if val in other}
        return self._from_dict(data)

    def union(self, other):
        """Return a new set of the elements in this set or `other`."""
        ans = self.copy()
        ans.update(other)
        return ans

    def difference(self, other):
        """Return a new set of the elements in this set but not in `other`."""
        other = self._coerce(other)
        return self._from_dict({val: None for val in self._dict if val not in other})


def new():
    """Return a new, empty :py:class:`HashSet`."""
    return HashSet()


def of(*elements):
    """Return a new :py:class:`HashSet` of the distinct values in `elements`."""
    return HashSet.of(*elements)
