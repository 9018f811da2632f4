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

"""Model for symmetric (``oct``) JWKs."""

from typing import Literal

from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.validators import b64url_size_validator, kty_validator
from jose_keys.typehints import ParameterValidator
from jose_keys.utils import b64url_decode

OCT_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    kty_validator("oct"),
    b64url_size_validator("k"),
)


class OctJwk(JwkModel[bytes]):
    """Model for a symmetric key.

    The key is the base64url encoded secret (``k``), which must not be empty. The ``cryptography`` property
    returns the decoded secret.

    >>> OctJwk(kty="oct", k="c2VjcmV0").cryptography
    b'secret'
    """

    parameter_validators = OCT_PARAMETER_VALIDATORS
    thumbprint_parameters = ("k", "kty")

    kty: Literal["oct"]
    k: str

    def load_cryptography(self) -> bytes:
        return b64url_decode(self.k)
