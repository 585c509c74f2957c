#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

from ._hasher import hasher, HashDispatcher
from .hash_set import HashSet, new, of
