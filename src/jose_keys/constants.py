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

"""Collection of constants used by jose-keys."""

import re
from types import MappingProxyType

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa, x448, x25519

# IMPORTANT: Do **not** import any module from jose_keys at runtime here, or you risk circular imports.
from jose_keys.typehints import (
    EllipticCurveName,
    JwkKeyOperation,
    JwkUse,
    OctetKeyPairCurveName,
    ThumbprintHashAlgorithmName,
)

#: Valid values for the ``use`` parameter.
JWK_USES: tuple[JwkUse, ...] = ("enc", "sig")

#: Valid values for the ``key_ops`` parameter.
JWK_KEY_OPERATIONS: tuple[JwkKeyOperation, ...] = (
    "decrypt",
    "deriveBits",
    "deriveKey",
    "encrypt",
    "sign",
    "unwrapKey",
    "verify",
    "wrapKey",
)

#: Key operations that may be combined with a given value of the ``use`` parameter.
JWK_USE_KEY_OPERATIONS: MappingProxyType[JwkUse, frozenset[JwkKeyOperation]] = MappingProxyType(
    {
        "enc": frozenset(["decrypt", "deriveBits", "deriveKey", "encrypt", "unwrapKey", "wrapKey"]),
        "sig": frozenset(["sign", "verify"]),
    }
)

ELLIPTIC_CURVE_TYPES: MappingProxyType[EllipticCurveName, type[ec.EllipticCurve]] = MappingProxyType(
    {
        "P-256": ec.SECP256R1,
        "P-384": ec.SECP384R1,
        "P-521": ec.SECP521R1,
    }
)

ELLIPTIC_CURVE_NAMES: MappingProxyType[type[ec.EllipticCurve], EllipticCurveName] = MappingProxyType(
    {v: k for k, v in ELLIPTIC_CURVE_TYPES.items()}
)

#: Public key classes for curves of ``OKP`` keys.
OKP_PUBLIC_KEY_TYPES: MappingProxyType[
    OctetKeyPairCurveName,
    type[ed25519.Ed25519PublicKey]
    | type[ed448.Ed448PublicKey]
    | type[x25519.X25519PublicKey]
    | type[x448.X448PublicKey],
] = MappingProxyType(
    {
        "Ed25519": ed25519.Ed25519PublicKey,
        "Ed448": ed448.Ed448PublicKey,
        "X25519": x25519.X25519PublicKey,
        "X448": x448.X448PublicKey,
    }
)

#: Private key classes for curves of ``OKP`` keys.
OKP_PRIVATE_KEY_TYPES: MappingProxyType[
    OctetKeyPairCurveName,
    type[ed25519.Ed25519PrivateKey]
    | type[ed448.Ed448PrivateKey]
    | type[x25519.X25519PrivateKey]
    | type[x448.X448PrivateKey],
] = MappingProxyType(
    {
        "Ed25519": ed25519.Ed25519PrivateKey,
        "Ed448": ed448.Ed448PrivateKey,
        "X25519": x25519.X25519PrivateKey,
        "X448": x448.X448PrivateKey,
    }
)

#: Tuple of all private key classes that can be converted to a JWK.
PRIVATE_KEY_TYPES = (ec.EllipticCurvePrivateKey, rsa.RSAPrivateKey, *OKP_PRIVATE_KEY_TYPES.values())

#: Tuple of all public key classes that can be converted to a JWK.
PUBLIC_KEY_TYPES = (ec.EllipticCurvePublicKey, rsa.RSAPublicKey, *OKP_PUBLIC_KEY_TYPES.values())

#: Map of hash algorithm names to hash algorithm types usable for JWK thumbprints.
THUMBPRINT_HASH_ALGORITHM_TYPES: MappingProxyType[ThumbprintHashAlgorithmName, type[hashes.HashAlgorithm]] = (
    MappingProxyType(
        {
            "sha1": hashes.SHA1,
            "sha224": hashes.SHA224,
            "sha256": hashes.SHA256,
            "sha384": hashes.SHA384,
            "sha512": hashes.SHA512,
            "sha3-256": hashes.SHA3_256,
            "sha3-384": hashes.SHA3_384,
            "sha3-512": hashes.SHA3_512,
        }
    )
)

#: Minimum size of the RSA modulus (``n``) in bytes.
RSA_MIN_MODULUS_SIZE = 256

#: Regular expression matching PEM encoded certificates. The match group is the base64 encoded DER body.
PEM_CERTIFICATE_RE = re.compile(r"-----BEGIN CERTIFICATE-----(.*?)-----END CERTIFICATE-----", re.DOTALL)

#: Regular expression matching unpadded base64url encoded values.
B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")
