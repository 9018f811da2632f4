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

"""Application configuration for jose-keys.

Settings are read from environment variables prefixed with ``JOSE_KEYS_``. For example, to set the timeout
for retrieving certificate chains from ``x5u`` URLs to five seconds:

.. code-block:: console

   $ export JOSE_KEYS_X5U_TIMEOUT=5
"""

import os
from collections.abc import Iterable, Mapping
from typing import Annotated, Any

from annotated_types import Ge, Gt
from pydantic import BaseModel, ConfigDict

from jose_keys.exceptions import ImproperlyConfigured
from jose_keys.typehints import ThumbprintHashAlgorithmName

#: Prefix for environment variables that configure jose-keys.
ENVIRONMENT_PREFIX = "JOSE_KEYS_"


class SettingsModel(BaseModel):
    """Pydantic model defining available settings."""

    model_config = ConfigDict(frozen=True)

    X5U_TIMEOUT: Annotated[float, Gt(0)] = 10.0
    X5U_MAX_SIZE: Annotated[int, Ge(1)] = 1048576
    THUMBPRINT_HASH_ALGORITHM: ThumbprintHashAlgorithmName = "sha256"


class SettingsProxy:
    """Proxy class to access settings from the model.

    This class exists to enable reloading of settings in test cases.
    """

    __settings: SettingsModel

    def __init__(self) -> None:
        self.reload()

    def __dir__(self, object: Any = None) -> Iterable[str]:  # pylint: disable=redefined-builtin
        # Used by ipython for tab completion, see:
        #   http://ipython.org/ipython-doc/dev/config/integrating.html
        return list(super().__dir__()) + list(SettingsModel.model_fields)

    def reload(self, environ: Mapping[str, str] | None = None) -> None:
        """Reload settings model from the environment (or the given mapping)."""
        if environ is None:
            environ = os.environ

        values = {
            key[len(ENVIRONMENT_PREFIX) :]: value
            for key, value in environ.items()
            if key.startswith(ENVIRONMENT_PREFIX)
        }
        try:
            self.__settings = SettingsModel.model_validate(values)
        except ValueError as ex:
            raise ImproperlyConfigured(str(ex)) from ex

    def __getattr__(self, item: str) -> Any:
        return getattr(self.__settings, item)


model_settings = SettingsProxy()
