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

"""Functions to create the matching JWK model for parameters or cryptography keys."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from jose_keys.exceptions import InvalidJwkError
from jose_keys.pydantic.ec import EcPrivateJwk, EcPublicJwk
from jose_keys.pydantic.jwk import JwkModel
from jose_keys.pydantic.oct import OctJwk
from jose_keys.pydantic.okp import OkpPrivateJwk, OkpPublicJwk
from jose_keys.pydantic.rsa import RsaPrivateJwk, RsaPublicJwk
from jose_keys.typehints import JwkKeyTypes
from jose_keys.utils import key_to_jwk_parameters

#: Map of ``kty`` and if the key is private to the model class.
JWK_MODELS: MappingProxyType[tuple[str, bool], type[JwkModel[Any]]] = MappingProxyType(
    {
        ("EC", False): EcPublicJwk,
        ("EC", True): EcPrivateJwk,
        ("RSA", False): RsaPublicJwk,
        ("RSA", True): RsaPrivateJwk,
        ("OKP", False): OkpPublicJwk,
        ("OKP", True): OkpPrivateJwk,
        ("oct", False): OctJwk,
        ("oct", True): OctJwk,
    }
)


def parse_jwk(params: Mapping[str, Any]) -> JwkModel[Any]:
    """Parse JWK parameters into the matching model.

    The model is selected based on the ``kty`` parameter and on whether the private parameter ``d`` is
    present:

    >>> jwk = parse_jwk({"kty": "oct", "k": "c2VjcmV0"})
    >>> type(jwk).__name__
    'OctJwk'
    """
    if not isinstance(params, Mapping):
        raise TypeError('Invalid parameter "params".')

    private = params.get("d") is not None
    try:
        model_class = JWK_MODELS[(params.get("kty"), private)]  # type: ignore[index]
    except (KeyError, TypeError) as ex:
        raise InvalidJwkError('Invalid jwk parameter "kty".') from ex
    return model_class.model_validate(params)


def jwk_from_cryptography(key: JwkKeyTypes, **params: Any) -> JwkModel[Any]:
    """Create a JWK from a cryptography key (or raw bytes for a symmetric key).

    Any keyword arguments are added as additional JWK parameters:

    >>> jwk_from_cryptography(b"secret", kid="my-key").to_json()
    {'kty': 'oct', 'kid': 'my-key', 'k': 'c2VjcmV0'}
    """
    try:
        parameters: dict[str, Any] = key_to_jwk_parameters(key)
    except ValueError as ex:
        raise TypeError('Invalid parameter "params".') from ex
    parameters.update(params)
    return parse_jwk(parameters)
