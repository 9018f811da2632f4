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

"""Utility functions used in testing."""

import base64
from datetime import datetime, timedelta, timezone as tz
from typing import Any

from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ed448, ed25519
from cryptography.hazmat.primitives.asymmetric.types import (
    CertificateIssuerPrivateKeyTypes,
    CertificatePublicKeyTypes,
)
from cryptography.hazmat.primitives.serialization import Encoding
from cryptography.x509.oid import NameOID


def build_certificate(
    common_name: str,
    public_key: CertificatePublicKeyTypes,
    issuer_name: str,
    signing_key: CertificateIssuerPrivateKeyTypes,
    not_before: datetime | None = None,
    not_after: datetime | None = None,
    ca: bool = False,
) -> x509.Certificate:
    """Build a minimal certificate.

    Unless given, the certificate is valid from one day ago until one day from now.
    """
    now = datetime.now(tz=tz.utc)
    if not_before is None:
        not_before = now - timedelta(days=1)
    if not_after is None:
        not_after = now + timedelta(days=1)

    algorithm: hashes.SHA256 | None = hashes.SHA256()
    if isinstance(signing_key, (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey)):
        algorithm = None

    builder = (
        x509.CertificateBuilder()
        .subject_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)]))
        .issuer_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, issuer_name)]))
        .public_key(public_key)
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_before)
        .not_valid_after(not_after)
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
    )
    return builder.sign(private_key=signing_key, algorithm=algorithm)


def certificate_chain(
    public_key: CertificatePublicKeyTypes, ca_key: CertificateIssuerPrivateKeyTypes, **kwargs: Any
) -> list[x509.Certificate]:
    """Get a chain of a leaf certificate for `public_key` and a self-signed CA using `ca_key`.

    Any keyword arguments are passed to :py:func:`~jose_keys.tests.base.utils.build_certificate` for the
    leaf certificate.
    """
    ca = build_certificate("Test CA", ca_key.public_key(), "Test CA", ca_key, ca=True)
    leaf = build_certificate("Test Leaf", public_key, "Test CA", ca_key, **kwargs)
    return [leaf, ca]


def x5c(chain: list[x509.Certificate]) -> list[str]:
    """Convert a list of certificates into the format used by the ``x5c`` parameter."""
    return [base64.b64encode(cert.public_bytes(Encoding.DER)).decode("ascii") for cert in chain]
