#!/usr/bin/env python3
#
# This file is part of jose-keys.
#
# jose-keys is free software: you can redistribute it and/or modify it under the terms of the GNU
# General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# jose-keys is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with jose-keys.  If not,
# see <http://www.gnu.org/licenses/>.

"""setuptools based setup.py file for jose-keys."""

import os

from setuptools import find_packages
from setuptools import setup

BASE_DIR = os.path.dirname(os.path.abspath(__file__))  # directory of this file
package_root = os.path.join(BASE_DIR, "src", "jose_keys")


def find_package_data(path):
    """Find static package data for given path."""
    data = []
    prefix = len(package_root) + 1
    for root, _dirs, files in os.walk(os.path.join(package_root, path)):
        for file in files:
            data.append(os.path.join(root, file)[prefix:])
    return data


setup(
    packages=find_packages("src"),
    package_dir={"": "src"},
    package_data={"jose_keys": find_package_data(os.path.join("tests", "fixtures")) + ["py.typed"]},
)
