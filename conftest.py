#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

import pytest

_implicit_markers = {'default'}


def pytest_collection_modifyitems(items):
    """
    This method will mark any unmarked tests with the implicit marker ('default')

    """
    for item in items:
        try:
            next(item.iter_markers())
        except StopIteration:
            for marker in _implicit_markers:
                item.add_marker(getattr(pytest.mark, marker))


def pytest_configure(config):
    """
    Register the implicit marker.
    This stops pytest from printing a warning about an unregistered marker.
    """
    config.addinivalue_line("markers", "default: mark test to run by default")
