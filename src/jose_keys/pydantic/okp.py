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

"""Models for octet key pair (``OKP``) JWKs, see RFC 8037."""

from typing import ClassVar, Literal

from jose_keys.constants import OKP_PRIVATE_KEY_TYPES, OKP_PUBLIC_KEY_TYPES
from jose_keys.exceptions import InvalidJwkError
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.validators import choice_parameter_validator, kty_validator, str_parameter_validator
from jose_keys.typehints import (
    OctetKeyPairCurveName,
    OctetKeyPairPrivateKeyTypes,
    OctetKeyPairPublicKeyTypes,
    ParameterValidator,
)
from jose_keys.utils import b64url_decode

OKP_PUBLIC_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    kty_validator("OKP"),
    choice_parameter_validator("crv", tuple(OKP_PUBLIC_KEY_TYPES)),
    str_parameter_validator("x"),
)

OKP_PRIVATE_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    str_parameter_validator("d"),
    *OKP_PUBLIC_PARAMETER_VALIDATORS,
)


class OkpPublicJwk(JwkModel[OctetKeyPairPublicKeyTypes]):
    """Model for a public Ed25519, Ed448, X25519 or X448 key."""

    parameter_validators = OKP_PUBLIC_PARAMETER_VALIDATORS
    thumbprint_parameters = ("crv", "kty", "x")

    #: Curves supported by this model.
    supported_elliptic_curves: ClassVar[tuple[OctetKeyPairCurveName, ...]] = tuple(OKP_PUBLIC_KEY_TYPES)

    kty: Literal["OKP"]
    crv: OctetKeyPairCurveName
    x: str

    def load_cryptography(self) -> OctetKeyPairPublicKeyTypes:
        try:
            return OKP_PUBLIC_KEY_TYPES[self.crv].from_public_bytes(b64url_decode(self.x))
        except ValueError as ex:
            raise InvalidJwkError("Invalid OKP key material.") from ex


class OkpPrivateJwk(JwkModel[OctetKeyPairPrivateKeyTypes]):
    """Model for a private Ed25519, Ed448, X25519 or X448 key.

    The public key (``x``) must match the public key derived from the private key (``d``).
    """

    parameter_validators = OKP_PRIVATE_PARAMETER_VALIDATORS
    thumbprint_parameters = ("crv", "kty", "x")
    private = True

    #: Curves supported by this model.
    supported_elliptic_curves: ClassVar[tuple[OctetKeyPairCurveName, ...]] = tuple(OKP_PRIVATE_KEY_TYPES)

    kty: Literal["OKP"]
    crv: OctetKeyPairCurveName
    x: str
    d: str

    def load_cryptography(self) -> OctetKeyPairPrivateKeyTypes:
        try:
            private_key = OKP_PRIVATE_KEY_TYPES[self.crv].from_private_bytes(b64url_decode(self.d))
            public_bytes = b64url_decode(self.x)
        except ValueError as ex:
            raise InvalidJwkError("Invalid OKP key material.") from ex

        if private_key.public_key().public_bytes_raw() != public_bytes:
            raise InvalidJwkError("Invalid OKP key material.")
        return private_key
