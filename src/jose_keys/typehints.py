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

"""Various type aliases used in throughout jose-keys."""

from collections.abc import Callable
from typing import Any, Literal

from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa, x448, x25519

# IMPORTANT: Do **not** import any module from jose_keys at runtime here, or you risk circular imports.

#: JWK parameters as they are passed to or returned by a key model.
JwkParameters = dict[str, Any]

#: A single validation rule applied to JWK parameters. Rules raise an exception if a parameter is invalid.
ParameterValidator = Callable[[JwkParameters], None]

############
# Literals #
############

#: Key types (the ``kty`` parameter) supported by this library.
JwkKeyType = Literal["EC", "RSA", "OKP", "oct"]

#: Valid values for the ``use`` parameter.
JwkUse = Literal["enc", "sig"]

#: Valid values for the ``key_ops`` parameter.
JwkKeyOperation = Literal[
    "decrypt", "deriveBits", "deriveKey", "encrypt", "sign", "unwrapKey", "verify", "wrapKey"
]

#: Names of elliptic curves for ``EC`` keys.
EllipticCurveName = Literal["P-256", "P-384", "P-521"]

#: Names of curves for ``OKP`` keys.
OctetKeyPairCurveName = Literal["Ed25519", "Ed448", "X25519", "X448"]

ThumbprintHashAlgorithmName = Literal[
    "sha1", "sha224", "sha256", "sha384", "sha512", "sha3-256", "sha3-384", "sha3-512"
]
"""Names of hash algorithms that can be used for computing JWK thumbprints."""

##########################
# Cryptography key types #
##########################

OctetKeyPairPublicKeyTypes = (
    ed25519.Ed25519PublicKey | ed448.Ed448PublicKey | x25519.X25519PublicKey | x448.X448PublicKey
)
OctetKeyPairPrivateKeyTypes = (
    ed25519.Ed25519PrivateKey | ed448.Ed448PrivateKey | x25519.X25519PrivateKey | x448.X448PrivateKey
)

#: Public key types that can be converted to a JWK.
JwkPublicKeyTypes = ec.EllipticCurvePublicKey | rsa.RSAPublicKey | OctetKeyPairPublicKeyTypes

#: Private key types that can be converted to a JWK.
JwkPrivateKeyTypes = ec.EllipticCurvePrivateKey | rsa.RSAPrivateKey | OctetKeyPairPrivateKeyTypes

#: Any key that can be converted to a JWK. Raw bytes are converted to an ``oct`` key.
JwkKeyTypes = JwkPublicKeyTypes | JwkPrivateKeyTypes | bytes
