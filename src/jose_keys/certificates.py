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

"""Functions for binding JWKs to X.509 certificate chains (the ``x5u`` and ``x5c`` parameters)."""

import base64
import logging
from collections.abc import Sequence
from datetime import datetime, timezone

import requests
import urllib3

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes

from jose_keys.conf import model_settings
from jose_keys.constants import PEM_CERTIFICATE_RE
from jose_keys.exceptions import CertificateChainFetchError, InvalidCertificateChainError
from jose_keys.typehints import JwkParameters
from jose_keys.utils import b64url_encode, public_key_to_jwk_parameters

log = logging.getLogger(__name__)


def fetch_certificate_chain(url: str, timeout: float | None = None) -> list[str]:
    """Retrieve a PEM encoded certificate chain from `url`.

    The function returns the base64 encoded DER certificates in the order found in the response body. If
    `timeout` is not given, the ``X5U_TIMEOUT`` setting is used.
    """
    if timeout is None:
        timeout = model_settings.X5U_TIMEOUT
    max_size = model_settings.X5U_MAX_SIZE

    log.debug("Fetching certificate chain from %s", url)
    try:
        with requests.get(url, timeout=timeout, stream=True) as response:
            response.raise_for_status()

            # Read one byte more than allowed to detect oversized responses. Errors while reading the body
            # come from urllib3 directly.
            body = response.raw.read(max_size + 1, decode_content=True)
    except (requests.RequestException, urllib3.exceptions.HTTPError) as ex:
        log.warning("%s: Could not retrieve certificate chain: %s", url, ex)
        raise CertificateChainFetchError() from ex

    if len(body) > max_size:
        log.warning("%s: Response exceeds the maximum size of %d bytes.", url, max_size)
        raise CertificateChainFetchError()

    blocks = PEM_CERTIFICATE_RE.findall(body.decode("utf-8", errors="replace"))
    if not blocks:
        raise InvalidCertificateChainError("Invalid X.509 URL.")

    log.debug("%s: Found %d certificate(s).", url, len(blocks))
    return ["".join(block.split()) for block in blocks]


def load_certificate_chain(chain: Sequence[str]) -> list[x509.Certificate]:
    """Load a list of base64 encoded DER certificates (as used in the ``x5c`` parameter)."""
    try:
        return [x509.load_der_x509_certificate(base64.b64decode(cert, validate=True)) for cert in chain]
    except ValueError as ex:
        raise InvalidCertificateChainError("One or more certificates are invalid.") from ex


def get_certificate_thumbprint(certificate: x509.Certificate, algorithm: hashes.HashAlgorithm) -> str:
    """Get the base64url encoded fingerprint of a certificate, as used in ``x5t`` and ``x5t#S256``."""
    return b64url_encode(certificate.fingerprint(algorithm))


def validate_certificate_chain(chain: Sequence[x509.Certificate], params: JwkParameters) -> None:
    """Validate a certificate chain for the JWK with the given parameters.

    The first certificate in the chain must contain the public key of the JWK and every certificate must be
    directly issued by the next certificate in the chain. All certificates must be currently valid.
    """
    now = datetime.now(tz=timezone.utc)

    if any(now < cert.not_valid_before_utc for cert in chain):
        raise InvalidCertificateChainError("One or more certificates are not yet valid.")
    if any(now >= cert.not_valid_after_utc for cert in chain):
        raise InvalidCertificateChainError("One or more certificates are expired.")

    try:
        leaf_parameters = public_key_to_jwk_parameters(chain[0].public_key())  # type: ignore[arg-type]
    except ValueError as ex:
        raise InvalidCertificateChainError("The provided certificate does not match the jwk.") from ex

    if any(params.get(key) != value for key, value in leaf_parameters.items()):
        raise InvalidCertificateChainError("The provided certificate does not match the jwk.")

    for cert, issuer in zip(chain, chain[1:]):
        try:
            cert.verify_directly_issued_by(issuer)
        except (ValueError, TypeError, InvalidSignature) as ex:
            raise InvalidCertificateChainError("Invalid certificate chain.") from ex


def validate_certificate_parameters(params: JwkParameters) -> None:
    """Validate the certificate chain given by ``x5c`` or ``x5u`` and the certificate thumbprints.

    This function does nothing if neither ``x5c`` nor ``x5u`` is present in `params`.
    """
    if "x5c" in params:
        encoded_chain = params["x5c"]
    elif "x5u" in params:
        encoded_chain = fetch_certificate_chain(params["x5u"])
    else:
        return

    chain = load_certificate_chain(encoded_chain)
    validate_certificate_chain(chain, params)
    log.debug("Validated certificate chain with %d certificate(s).", len(chain))

    leaf = chain[0]
    if "x5t" in params and params["x5t"] != get_certificate_thumbprint(leaf, hashes.SHA1()):
        raise InvalidCertificateChainError("Mismatching certificate sha-1 thumbprint.")
    if "x5t#S256" in params and params["x5t#S256"] != get_certificate_thumbprint(leaf, hashes.SHA256()):
        raise InvalidCertificateChainError("Mismatching certificate sha-256 thumbprint.")
