#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="keyboard-shortcuts",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Keyboard shortcuts with modifier requirements, for games and other tick-driven apps",
    long_description="Match keyboard shortcuts (a key plus Ctrl/Alt/Shift/Super requirements) against per-tick keyboard state.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Games/Entertainment",
        "Topic :: Software Development :: Libraries",
    ],
    keywords=["keyboard", "shortcuts", "hotkeys", "keybindings"],
    python_requires=">=3.11",
    install_requires=[
        "attrs",
        "cattrs>=22.2.0",
        "msgspec",
    ],
    tests_require=["pytest>=6.2.4"],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
)
