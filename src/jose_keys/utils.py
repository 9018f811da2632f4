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

"""Reusable utility functions used throughout jose-keys."""

import base64
import json
from collections.abc import Mapping
from typing import Any

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from jose_keys import constants
from jose_keys.typehints import JwkKeyTypes, JwkPrivateKeyTypes, JwkPublicKeyTypes


def b64url_encode(value: bytes) -> str:
    """Encode the given bytes as base64url without padding.

    >>> b64url_encode(b"test")
    'dGVzdA'
    """
    return base64.urlsafe_b64encode(value).rstrip(b"=").decode("ascii")


def b64url_decode(value: str) -> bytes:
    """Decode an (unpadded) base64url encoded string.

    This is the inverse of :py:func:`~jose_keys.utils.b64url_encode`. Characters outside of the base64url
    alphabet (including padding) raise ``ValueError``.

    >>> b64url_decode("dGVzdA")
    b'test'
    >>> b64url_decode("dGVzdA==")
    Traceback (most recent call last):
        ...
    ValueError: dGVzdA==: Invalid base64url encoded value.
    """
    if constants.B64URL_RE.fullmatch(value) is None:
        raise ValueError(f"{value}: Invalid base64url encoded value.")
    padding = "=" * (-len(value) % 4)
    return base64.b64decode(f"{value}{padding}", altchars=b"-_", validate=True)


def int_to_b64url(value: int, length: int | None = None) -> str:
    """Encode an unsigned integer as big endian base64url string.

    If `length` is given, the integer is padded with null bytes to the given number of bytes, as required
    e.g. for the coordinates of an elliptic curve point.

    >>> int_to_b64url(65537)
    'AQAB'
    >>> int_to_b64url(1, length=4)
    'AAAAAQ'
    """
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return b64url_encode(value.to_bytes(length, "big"))


def b64url_to_int(value: str) -> int:
    """Decode a base64url encoded big endian unsigned integer.

    >>> b64url_to_int("AQAB")
    65537
    """
    return int.from_bytes(b64url_decode(value), "big")


def canonical_json(parameters: Mapping[str, Any]) -> bytes:
    """Serialize parameters as compact JSON with sorted keys, as used for JWK thumbprints (RFC 7638).

    >>> canonical_json({"kty": "oct", "k": "AAEC"})
    b'{"k":"AAEC","kty":"oct"}'
    """
    return json.dumps(parameters, separators=(",", ":"), sort_keys=True, ensure_ascii=False).encode("utf-8")


def get_hash_algorithm(algorithm: str | hashes.HashAlgorithm) -> hashes.HashAlgorithm:
    """Get a hash algorithm instance for the given name.

    Instances of :py:class:`~cg:cryptography.hazmat.primitives.hashes.HashAlgorithm` are returned unchanged.

    >>> get_hash_algorithm("sha256").name
    'sha256'
    >>> get_hash_algorithm("sha3-256").name
    'sha3-256'
    """
    if isinstance(algorithm, hashes.HashAlgorithm):
        return algorithm
    try:
        return constants.THUMBPRINT_HASH_ALGORITHM_TYPES[algorithm]()  # type: ignore[index]
    except KeyError as ex:
        raise ValueError(f"{algorithm}: Unknown hash algorithm.") from ex


def public_key_to_jwk_parameters(public_key: JwkPublicKeyTypes) -> dict[str, str]:
    """Get the public JWK parameters for the given public key.

    Raises ``ValueError`` if the key (or its elliptic curve) cannot be represented as JWK.
    """
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        curve_name = constants.ELLIPTIC_CURVE_NAMES.get(type(public_key.curve))
        if curve_name is None:
            raise ValueError(f"{public_key.curve.name}: Unsupported elliptic curve.")
        size = (public_key.curve.key_size + 7) // 8
        public_numbers = public_key.public_numbers()
        return {
            "kty": "EC",
            "crv": curve_name,
            "x": int_to_b64url(public_numbers.x, size),
            "y": int_to_b64url(public_numbers.y, size),
        }
    if isinstance(public_key, rsa.RSAPublicKey):
        rsa_numbers = public_key.public_numbers()
        return {"kty": "RSA", "n": int_to_b64url(rsa_numbers.n), "e": int_to_b64url(rsa_numbers.e)}

    for okp_curve_name, key_type in constants.OKP_PUBLIC_KEY_TYPES.items():
        if isinstance(public_key, key_type):
            return {"kty": "OKP", "crv": okp_curve_name, "x": b64url_encode(public_key.public_bytes_raw())}

    raise ValueError(f"{type(public_key).__name__}: Unsupported key type.")


def private_key_to_jwk_parameters(private_key: JwkPrivateKeyTypes) -> dict[str, str]:
    """Get the (public and private) JWK parameters for the given private key."""
    parameters = public_key_to_jwk_parameters(private_key.public_key())

    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        size = (private_key.curve.key_size + 7) // 8
        parameters["d"] = int_to_b64url(private_key.private_numbers().private_value, size)
    elif isinstance(private_key, rsa.RSAPrivateKey):
        private_numbers = private_key.private_numbers()
        parameters["d"] = int_to_b64url(private_numbers.d)
        parameters["p"] = int_to_b64url(private_numbers.p)
        parameters["q"] = int_to_b64url(private_numbers.q)
        parameters["dp"] = int_to_b64url(private_numbers.dmp1)
        parameters["dq"] = int_to_b64url(private_numbers.dmq1)
        parameters["qi"] = int_to_b64url(private_numbers.iqmp)
    else:
        parameters["d"] = b64url_encode(private_key.private_bytes_raw())
    return parameters


def key_to_jwk_parameters(key: JwkKeyTypes) -> dict[str, str]:
    """Get JWK parameters for any key supported by jose-keys.

    Private keys include the private parameters, raw ``bytes`` are converted to a symmetric (``oct``) key.

    >>> key_to_jwk_parameters(b"secret")
    {'kty': 'oct', 'k': 'c2VjcmV0'}
    """
    if isinstance(key, bytes):
        return {"kty": "oct", "k": b64url_encode(key)}
    if isinstance(key, constants.PRIVATE_KEY_TYPES):
        return private_key_to_jwk_parameters(key)  # type: ignore[arg-type]
    if isinstance(key, constants.PUBLIC_KEY_TYPES):
        return public_key_to_jwk_parameters(key)  # type: ignore[arg-type]
    raise ValueError(f"{type(key).__name__}: Unsupported key type.")
