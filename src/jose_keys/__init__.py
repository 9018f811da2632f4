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

"""jose-keys root module."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jose-keys")
except PackageNotFoundError:  # pragma: no cover  # package is not installed
    __version__ = "0.0.0"
