#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

"""Deterministic ordering for arbitrary (possibly mixed-type) elements.

Sets never define an iteration order.  Any code that needs ordered
output (printing, reports, test comparisons) must sort explicitly, and
:py:func:`sorted_robust` does that even when the elements are of types
that cannot be compared with each other.

"""

# Sort classes for the second entry of the generated key
_COMPARABLE = 1
_BY_STRING = 2
_BY_ID = 3
_TUPLE = 4
_SET = 5


class _robust_sort_keyfcn(object):
    """Callable generating sortable keys for arbitrary data.

    Keys are ``(type_name, val)``, where ``val`` is the value itself if
    its type is comparable, its ``str()`` if not, and its ``id()`` as a
    last resort.  Types whose instances compare with floats share the
    ``'float'`` type name so that mixed numeric data sort together.

    """

    _typemap = {
        int: (_COMPARABLE, float.__name__),
        float: (_COMPARABLE, float.__name__),
        str: (_COMPARABLE, str.__name__),
        tuple: (_TUPLE, tuple.__name__),
        set: (_SET, set.__name__),
        frozenset: (_SET, frozenset.__name__),
    }

    def __init__(self, key=None):
        self._key = key

    def __call__(self, val):
        if self._key is not None:
            val = self._key(val)
        return self._generate_sort_key(val)

    def _classify_type(self, val):
        _type = val.__class__
        _typename = _type.__name__
        if isinstance(val, (set, frozenset)):
            # subset comparison is only a partial order
            self._typemap[_type] = _SET, _typename
            return
        try:
            val < val
            sort_class = _COMPARABLE
            try:
                if bool(val < 1.0) != bool(1.0 < val or 1.0 == val):
                    _typename = float.__name__
            except TypeError:
                pass
        except TypeError:
            try:
                str(val)
                sort_class = _BY_STRING
            except Exception:
                # id() is not deterministic run-to-run, but is
                # consistent within this run
                sort_class = _BY_ID
        self._typemap[_type] = sort_class, _typename

    def _generate_sort_key(self, val):
        if val.__class__ not in self._typemap:
            self._classify_type(val)
        sort_class, _typename = self._typemap[val.__class__]
        if sort_class == _COMPARABLE:
            return _typename, val
        elif sort_class == _TUPLE:
            return _typename, tuple(self._generate_sort_key(v) for v in val)
        elif sort_class == _SET:
            return _typename, tuple(sorted(self._generate_sort_key(v) for v in val))
        elif sort_class == _BY_STRING:
            return _typename, str(val)
        else:
            return _typename, id(val)


def _totally_ordered(vals):
    # list.sort() only uses "<", so partially ordered values (e.g.,
    # frozensets) can "sort" without error into an arbitrary order
    return all(a <= b or b <= a for a, b in zip(vals, vals[1:]))


def sorted_robust(iterable, key=None, reverse=False):
    """Utility to sort an arbitrary iterable.

    This returns ``sorted(iterable)`` in a consistent order by first
    trying the standard sort, and if that fails (for example with the
    elements of a mixed-type set) or the values are only partially
    ordered (e.g., frozensets), falling back on keys generated by
    :py:class:`_robust_sort_keyfcn`.

    Parameters
    ----------
    iterable: iterable
        the source of items to sort
    key: function
        a function of one argument that is used to extract the
        comparison key from each element in `iterable`
    reverse: bool
        if True, the iterable is sorted as if each comparison was reversed.

    Returns
    -------
    list
    """
    # Copy everything up front: the incoming iterable may be a
    # generator (or a set's element view) and the fallback sort needs
    # the values a second time.
    ans = list(iterable)
    try:
        ans.sort(key=key, reverse=reverse)
        if _totally_ordered(ans if key is None else list(map(key, ans))):
            return ans
    except TypeError:
        pass
    ans.sort(key=_robust_sort_keyfcn(key), reverse=reverse)
    return ans
