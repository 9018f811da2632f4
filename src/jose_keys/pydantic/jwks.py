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

"""Model for JWK Sets (see RFC 7517, section 5)."""

import json
import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, SerializeAsAny, model_validator

from jose_keys.conf import model_settings
from jose_keys.exceptions import InvalidJwksError, JwkNotFoundError
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.parse import parse_jwk
from jose_keys.typehints import JwkParameters

log = logging.getLogger(__name__)

# Lock for assigning key identifiers to keys that are shared between sets.
_KID_LOCK = threading.Lock()


class JwkSet(BaseModel):
    """Model for a JWK Set.

    Keys without a key identifier (``kid``) are assigned their base64url encoded thumbprint as key identifier
    when the set is created. Key identifiers must be unique within the set.

    >>> from jose_keys.pydantic import OctJwk
    >>> jwks = JwkSet(keys=[OctJwk(kty="oct", k="c2VjcmV0")])
    >>> jwks.keys[0].kid
    'DWBh0SEIAPYh1x5uvot4z3AhaikHkxNJa3Ada2fT-Cg'
    >>> jwks.get(lambda key: key.kty == "oct").k
    'c2VjcmV0'
    """

    keys: list[SerializeAsAny[JwkModel]]  # type: ignore[type-arg]

    @model_validator(mode="before")
    @classmethod
    def validate_keys(cls, data: Any) -> Any:
        """Validate that `keys` is a non-empty list of JWK models."""
        keys = data.get("keys") if isinstance(data, Mapping) else None
        if not isinstance(keys, (list, tuple)) or len(keys) == 0:
            raise TypeError('Invalid parameter "keys".')
        if any(not isinstance(key, JwkModel) for key in keys):
            raise TypeError('Invalid parameter "keys".')
        return {"keys": list(keys)}

    @model_validator(mode="after")
    def validate_key_identifiers(self) -> "JwkSet":
        """Assign missing key identifiers and validate that they are unique."""
        with _KID_LOCK:
            for key in self.keys:
                if key.kid is None:
                    key.kid = key.get_thumbprint_b64(model_settings.THUMBPRINT_HASH_ALGORITHM)
                    log.debug("Assigned key identifier %s.", key.kid)

        identifiers = [key.kid for key in self.keys]
        if len(set(identifiers)) != len(identifiers):
            raise InvalidJwksError("The use of duplicate key identifiers is forbidden.")
        return self

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | str | bytes) -> "JwkSet":
        """Create a JWK Set from its JSON representation (``{"keys": [...]}``).

        `data` may also be a JSON encoded string. Every key is parsed with
        :py:func:`~jose_keys.pydantic.parse.parse_jwk`.
        """
        if isinstance(data, (str, bytes)):
            try:
                data = json.loads(data)
            except ValueError as ex:
                raise InvalidJwksError() from ex

        keys = data.get("keys") if isinstance(data, Mapping) else None
        if not isinstance(keys, list):
            raise InvalidJwksError()
        return cls(keys=[parse_jwk(key) for key in keys])

    def find(self, predicate: Callable[[JwkModel[Any]], bool]) -> JwkModel[Any] | None:
        """Get the first key matching `predicate`, or ``None`` if no key matches."""
        return next((key for key in self.keys if predicate(key)), None)

    def get(self, predicate: Callable[[JwkModel[Any]], bool]) -> JwkModel[Any]:
        """Get the first key matching `predicate`.

        Unlike :py:meth:`~jose_keys.pydantic.jwks.JwkSet.find`, this method raises
        :py:class:`~jose_keys.exceptions.JwkNotFoundError` if no key matches.
        """
        key = self.find(predicate)
        if key is None:
            raise JwkNotFoundError()
        return key

    def to_json(self) -> dict[str, list[JwkParameters]]:
        """Get the JSON representation of this set."""
        return {"keys": [key.to_json() for key in self.keys]}

    def __len__(self) -> int:
        return len(self.keys)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return any(key.kid == item for key in self.keys)
        return any(key is item for key in self.keys)
