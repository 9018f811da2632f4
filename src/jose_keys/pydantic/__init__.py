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

"""Pydantic models included in jose-keys."""

from jose_keys.pydantic.ec import EcPrivateJwk, EcPublicJwk
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.jwks import JwkSet
from jose_keys.pydantic.oct import OctJwk
from jose_keys.pydantic.okp import OkpPrivateJwk, OkpPublicJwk
from jose_keys.pydantic.parse import jwk_from_cryptography, parse_jwk
from jose_keys.pydantic.rsa import RsaPrivateJwk, RsaPublicJwk

__all__ = (
    "EcPrivateJwk",
    "EcPublicJwk",
    "JwkModel",
    "JwkSet",
    "OctJwk",
    "OkpPrivateJwk",
    "OkpPublicJwk",
    "RsaPrivateJwk",
    "RsaPublicJwk",
    "jwk_from_cryptography",
    "parse_jwk",
)
