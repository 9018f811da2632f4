# This file is part of jose-keys.
#
# jose-keys is free software: you can redistribute it and/or modify it under the terms of the GNU General
# Public License as published by the Free Software Foundation, either version 3 of the License, or (at your
# option) any later version.
#
# jose-keys is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
# implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License along with jose-keys. If not, see
# <http://www.gnu.org/licenses/>.

"""pytest configuration."""

import importlib.metadata
import sys

from _pytest.config import Config as PytestConfig

# NOTE: Assertion rewrites are in __init__.py

# Load fixtures from local "plugin":
pytest_plugins = ["jose_keys.tests.base.fixtures"]


def pytest_configure(config: "PytestConfig") -> None:  # pylint: disable=unused-argument
    """Output libraries."""
    # Add a header to log important software versions
    print("Testing with:")
    print("* Python: ", sys.version.replace("\n", ""))
    installed_versions = {p.metadata["Name"]: p.version for p in importlib.metadata.distributions()}
    for pkg in sorted(["cryptography", "idna", "pydantic", "requests"]):
        print(f"* {pkg}: {installed_versions.get(pkg, 'not installed')}")
