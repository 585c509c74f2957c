#  ___________________________________________________________________________
#
#  hashset: Unordered collections with set-algebraic operations
#  Copyright (c) 2024-2025 The hashset developers
#  This software is distributed under the 3-clause BSD License.
#  ___________________________________________________________________________

"""
Script to generate the installer for hashset.
"""

import os
from setuptools import setup, find_packages


def read(*rnames):
    with open(os.path.join(os.path.dirname(__file__), *rnames)) as README:
        return README.read()


def import_hashset_module(*path):
    _module_globals = dict(globals())
    _module_globals['__name__'] = None
    _source = os.path.join(os.path.dirname(__file__), *path)
    with open(_source) as _FILE:
        exec(_FILE.read(), _module_globals)
    return _module_globals


def get_version():
    # Source hashset/version/info.py to get the version number
    return import_hashset_module('hashset', 'version', 'info.py')['__version__']


setup_kwargs = dict(
    name='hashset',
    version=get_version(),
    description='Unordered collections with set-algebraic operations',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    license='BSD-3-Clause',
    python_requires='>=3.9',
    classifiers=[
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    install_requires=[],
    extras_require={
        'tests': ['coverage', 'parameterized', 'pytest'],
    },
    packages=find_packages(include=('hashset', 'hashset.*')),
)

setup(**setup_kwargs)
