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

"""Validators for JWK parameters.

Every validator receives the full dictionary of JWK parameters (with ``None`` values already removed) and
raises :py:class:`~jose_keys.exceptions.InvalidJwkError` if a parameter is invalid. Validators are composed
into tuples by the key models and always run in the order given there.
"""

import ipaddress
from collections.abc import Collection
from urllib.parse import urlsplit

import idna

from jose_keys import constants
from jose_keys.exceptions import InvalidJwkError
from jose_keys.typehints import JwkKeyType, JwkParameters, ParameterValidator
from jose_keys.utils import b64url_decode


def invalid_parameter(name: str) -> InvalidJwkError:
    """Get the exception for an invalid parameter with the given name.

    >>> invalid_parameter("crv")
    InvalidJwkError('Invalid jwk parameter "crv".')
    """
    return InvalidJwkError(f'Invalid jwk parameter "{name}".')


def kty_validator(expected: JwkKeyType) -> ParameterValidator:
    """Get a validator ensuring that the ``kty`` parameter has the `expected` value."""

    def validator(params: JwkParameters) -> None:
        kty = params.get("kty")
        if kty != expected:
            raise InvalidJwkError(f'Invalid jwk parameter "kty". Expected "{expected}", got "{kty}".')

    return validator


def str_parameter_validator(name: str, required: bool = True) -> ParameterValidator:
    """Get a validator ensuring that the parameter `name` is a string.

    If `required` is ``False``, the validator only checks the type if the parameter is present.
    """

    def validator(params: JwkParameters) -> None:
        if name not in params and not required:
            return
        if not isinstance(params.get(name), str):
            raise invalid_parameter(name)

    return validator


def choice_parameter_validator(name: str, choices: Collection[str]) -> ParameterValidator:
    """Get a validator ensuring that the required parameter `name` is one of `choices`."""

    def validator(params: JwkParameters) -> None:
        value = params.get(name)
        if not isinstance(value, str) or value not in choices:
            raise invalid_parameter(name)

    return validator


def b64url_size_validator(name: str, min_size: int = 1) -> ParameterValidator:
    """Get a validator ensuring that the parameter `name` decodes to at least `min_size` bytes."""

    def validator(params: JwkParameters) -> None:
        value = params.get(name)
        if not isinstance(value, str):
            raise invalid_parameter(name)
        try:
            decoded = b64url_decode(value)
        except ValueError as ex:
            raise invalid_parameter(name) from ex
        if len(decoded) < min_size:
            raise invalid_parameter(name)

    return validator


def use_validator(params: JwkParameters) -> None:
    """Validate the optional ``use`` parameter."""
    if "use" in params and params["use"] not in constants.JWK_USES:
        raise invalid_parameter("use")


def key_ops_validator(params: JwkParameters) -> None:
    """Validate the optional ``key_ops`` parameter.

    The parameter must be a non-empty list of known key operations without any duplicates.
    """
    if "key_ops" not in params:
        return

    key_ops = params["key_ops"]
    if not isinstance(key_ops, (list, tuple)) or len(key_ops) == 0:
        raise invalid_parameter("key_ops")
    if any(not isinstance(op, str) or op not in constants.JWK_KEY_OPERATIONS for op in key_ops):
        raise invalid_parameter("key_ops")
    if len(set(key_ops)) != len(key_ops):
        raise InvalidJwkError('The jwk parameter "key_ops" cannot have repeated operations.')


def use_key_ops_validator(params: JwkParameters) -> None:
    """Validate that the ``use`` and ``key_ops`` parameters are consistent with each other."""
    if "use" not in params or "key_ops" not in params:
        return

    allowed = constants.JWK_USE_KEY_OPERATIONS[params["use"]]
    if any(op not in allowed for op in params["key_ops"]):
        raise InvalidJwkError('Invalid combination of "use" and "key_ops".')


def certificate_thumbprint_validator(params: JwkParameters) -> None:
    """Validate that certificate thumbprints are only present together with a certificate chain."""
    has_thumbprint = "x5t" in params or "x5t#S256" in params
    if has_thumbprint and "x5u" not in params and "x5c" not in params:
        raise InvalidJwkError("Cannot have a certificate thumbprint without a certificate chain.")


def certificate_chain_exclusive_validator(params: JwkParameters) -> None:
    """Validate that only one of ``x5u`` and ``x5c`` is present."""
    if "x5u" in params and "x5c" in params:
        raise InvalidJwkError('Cannot have both "x5u" and "x5c" jwk parameters.')


def url_validator(url: str) -> str:
    """Validate an HTTP(S) URL.

    This function raises ``ValueError`` if the URL is not valid and returns it unchanged otherwise.

    Examples::

        >>> url_validator('https://example.com/chain.pem')
        'https://example.com/chain.pem'
        >>> url_validator('https://exämple.com:8000/chain.pem')
        'https://exämple.com:8000/chain.pem'
        >>> url_validator('ftp://example.com/chain.pem')
        Traceback (most recent call last):
            ...
        ValueError: URL must use http or https: ftp://example.com/chain.pem
    """
    try:
        parsed = urlsplit(url)
    except ValueError as ex:
        raise ValueError(f"Could not parse URL: {url}: {ex}") from ex

    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"URL must use http or https: {url}")
    if not parsed.netloc or not parsed.hostname:
        raise ValueError(f"URL requires scheme and network location: {url}")

    try:
        # Just reading the port may raise ValueError if it cannot be parsed as integer.
        parsed.port  # noqa: B018
    except ValueError as ex:
        raise ValueError(f"Invalid port: {url}: {ex}") from ex

    try:
        ipaddress.ip_address(parsed.hostname)
    except ValueError:
        try:
            idna.encode(parsed.hostname, uts46=True)
        except idna.IDNAError as ex:
            raise ValueError(f"Invalid domain: {parsed.hostname}: {ex}") from ex

    return url


def x5u_validator(params: JwkParameters) -> None:
    """Validate the optional ``x5u`` parameter."""
    if "x5u" not in params:
        return

    x5u = params["x5u"]
    if not isinstance(x5u, str):
        raise invalid_parameter("x5u")
    try:
        url_validator(x5u)
    except ValueError as ex:
        raise invalid_parameter("x5u") from ex


def x5c_validator(params: JwkParameters) -> None:
    """Validate the optional ``x5c`` parameter."""
    if "x5c" not in params:
        return

    x5c = params["x5c"]
    if not isinstance(x5c, (list, tuple)) or len(x5c) == 0:
        raise invalid_parameter("x5c")
    if any(not isinstance(cert, str) for cert in x5c):
        raise invalid_parameter("x5c")


#: Validators for the parameters shared by all key types, in the order in which they are applied.
JWK_PARAMETER_VALIDATORS: tuple[ParameterValidator, ...] = (
    use_validator,
    key_ops_validator,
    use_key_ops_validator,
    str_parameter_validator("alg", required=False),
    str_parameter_validator("kid", required=False),
    certificate_thumbprint_validator,
    certificate_chain_exclusive_validator,
    x5u_validator,
    x5c_validator,
    str_parameter_validator("x5t", required=False),
    str_parameter_validator("x5t#S256", required=False),
)

