#!/usr/bin/python3

# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2024 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

#
# A setup.py file
#

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

version = "1.0.0"

with open(path.join(here, 'README.md'), 'r') as f:
    long_description = f.read()

setup(
    name='libad',
    license='GPLv3+',
    version=version,
    description='Data access objects for validating and shaping Active ' +
                'Directory user entries',
    long_description=long_description,
    long_description_content_type='text/markdown',

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: System :: Systems Administration :: Authentication/Directory :: LDAP'],

    keywords='active directory ldap user',
    packages=find_packages(exclude=['tests*']),
    python_requires='>=3.8',

    install_requires=[
        'python-dateutil',
        'python-ldap',
        ],

    extras_require={
        'test': ['pytest'],
    },
)
