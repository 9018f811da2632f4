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

"""Models for elliptic curve (``EC``) JWKs."""

from typing import ClassVar, Literal

from cryptography.hazmat.primitives.asymmetric import ec

from jose_keys.constants import ELLIPTIC_CURVE_TYPES
from jose_keys.exceptions import InvalidJwkError
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.validators import choice_parameter_validator, kty_validator, str_parameter_validator
from jose_keys.typehints import EllipticCurveName, ParameterValidator
from jose_keys.utils import b64url_to_int

EC_PUBLIC_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    kty_validator("EC"),
    choice_parameter_validator("crv", tuple(ELLIPTIC_CURVE_TYPES)),
    str_parameter_validator("x"),
    str_parameter_validator("y"),
)

EC_PRIVATE_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    str_parameter_validator("d"),
    *EC_PUBLIC_PARAMETER_VALIDATORS,
)


def _load_public_numbers(crv: EllipticCurveName, x: str, y: str) -> ec.EllipticCurvePublicNumbers:
    curve = ELLIPTIC_CURVE_TYPES[crv]()
    return ec.EllipticCurvePublicNumbers(b64url_to_int(x), b64url_to_int(y), curve)


class EcPublicJwk(JwkModel[ec.EllipticCurvePublicKey]):
    """Model for a public elliptic curve key.

    >>> from cryptography.hazmat.primitives.asymmetric import ec
    >>> private_key = ec.generate_private_key(ec.SECP256R1())
    >>> jwk = EcPublicJwk.model_validate(private_key.public_key())
    >>> jwk.crv
    'P-256'
    >>> jwk.cryptography == private_key.public_key()
    True
    """

    parameter_validators = EC_PUBLIC_PARAMETER_VALIDATORS
    thumbprint_parameters = ("crv", "kty", "x", "y")

    #: Elliptic curves supported by this model.
    supported_elliptic_curves: ClassVar[tuple[EllipticCurveName, ...]] = tuple(ELLIPTIC_CURVE_TYPES)

    kty: Literal["EC"]
    crv: EllipticCurveName
    x: str
    y: str

    def load_cryptography(self) -> ec.EllipticCurvePublicKey:
        try:
            return _load_public_numbers(self.crv, self.x, self.y).public_key()
        except ValueError as ex:
            raise InvalidJwkError("Invalid EC key material.") from ex


class EcPrivateJwk(JwkModel[ec.EllipticCurvePrivateKey]):
    """Model for a private elliptic curve key."""

    parameter_validators = EC_PRIVATE_PARAMETER_VALIDATORS
    thumbprint_parameters = ("crv", "kty", "x", "y")
    private = True

    #: Elliptic curves supported by this model.
    supported_elliptic_curves: ClassVar[tuple[EllipticCurveName, ...]] = tuple(ELLIPTIC_CURVE_TYPES)

    kty: Literal["EC"]
    crv: EllipticCurveName
    x: str
    y: str
    d: str

    def load_cryptography(self) -> ec.EllipticCurvePrivateKey:
        try:
            public_numbers = _load_public_numbers(self.crv, self.x, self.y)
            return ec.EllipticCurvePrivateNumbers(b64url_to_int(self.d), public_numbers).private_key()
        except ValueError as ex:
            raise InvalidJwkError("Invalid EC key material.") from ex
