#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

# NOTE: releaselevel should be left at 'devel' on main and set to
#     'final' for releases.  During development, major.minor.micro
#     should point to the NEXT release.
major = 1
minor = 0
micro = 0
releaselevel = 'final'
serial = 0

version_info = (major, minor, micro, releaselevel, serial)

__version__ = '.'.join(str(x) for x in version_info[:3])
if releaselevel.startswith('devel'):
    __version__ += ".dev%d" % (serial,)

version = __version__
if releaselevel != 'final':
    version += ' (' + releaselevel + ')'
