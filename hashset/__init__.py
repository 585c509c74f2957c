#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

"""hashset: unordered collections of unique elements

:py:class:`HashSet` stores hashable elements without duplicates and
provides membership, subset, union, intersection, difference, filtering
and bulk mutation operations.  Iteration order is never part of the
interface.
"""

from . import common
from .common.collections import HashSet, new, of
from .version import __version__
