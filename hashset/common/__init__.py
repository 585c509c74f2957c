#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

# The log should be imported first so that the hashset log handler can
# be set up as soon as possible
from . import log

from .errors import HashSetException, UnhashableElementError
from .sorting import sorted_robust
