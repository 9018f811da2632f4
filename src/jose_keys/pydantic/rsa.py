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

"""Models for RSA JWKs."""

from typing import Literal

from cryptography.hazmat.primitives.asymmetric import rsa

from jose_keys.constants import RSA_MIN_MODULUS_SIZE
from jose_keys.exceptions import InvalidJwkError
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.validators import b64url_size_validator, kty_validator, str_parameter_validator
from jose_keys.typehints import ParameterValidator
from jose_keys.utils import b64url_to_int

RSA_PUBLIC_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    kty_validator("RSA"),
    b64url_size_validator("n", min_size=RSA_MIN_MODULUS_SIZE),
    str_parameter_validator("e"),
)

RSA_PRIVATE_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    str_parameter_validator("d"),
    str_parameter_validator("p"),
    str_parameter_validator("q"),
    str_parameter_validator("dp"),
    str_parameter_validator("dq"),
    str_parameter_validator("qi"),
    *RSA_PUBLIC_PARAMETER_VALIDATORS,
)


class RsaPublicJwk(JwkModel[rsa.RSAPublicKey]):
    """Model for a public RSA key.

    The modulus (``n``) must have at least 2048 bits.
    """

    parameter_validators = RSA_PUBLIC_PARAMETER_VALIDATORS
    thumbprint_parameters = ("e", "kty", "n")

    kty: Literal["RSA"]
    n: str
    e: str

    def load_cryptography(self) -> rsa.RSAPublicKey:
        try:
            return rsa.RSAPublicNumbers(e=b64url_to_int(self.e), n=b64url_to_int(self.n)).public_key()
        except ValueError as ex:
            raise InvalidJwkError("Invalid RSA key material.") from ex


class RsaPrivateJwk(JwkModel[rsa.RSAPrivateKey]):
    """Model for a private RSA key.

    All private parameters (including the CRT parameters ``p``, ``q``, ``dp``, ``dq`` and ``qi``) are
    required.
    """

    parameter_validators = RSA_PRIVATE_PARAMETER_VALIDATORS
    thumbprint_parameters = ("e", "kty", "n")
    private = True

    kty: Literal["RSA"]
    n: str
    e: str
    d: str
    p: str
    q: str
    dp: str
    dq: str
    qi: str

    def load_cryptography(self) -> rsa.RSAPrivateKey:
        try:
            public_numbers = rsa.RSAPublicNumbers(e=b64url_to_int(self.e), n=b64url_to_int(self.n))
            private_numbers = rsa.RSAPrivateNumbers(
                p=b64url_to_int(self.p),
                q=b64url_to_int(self.q),
                d=b64url_to_int(self.d),
                dmp1=b64url_to_int(self.dp),
                dmq1=b64url_to_int(self.dq),
                iqmp=b64url_to_int(self.qi),
                public_numbers=public_numbers,
            )
            return private_numbers.private_key()
        except ValueError as ex:
            raise InvalidJwkError("Invalid RSA key material.") from ex
