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

"""Pytest fixtures used throughout the test suite."""

# pylint: disable=redefined-outer-name  # requested pytest fixtures show up this way.

import io
from collections.abc import Callable, Iterator

from cryptography.hazmat.primitives.asymmetric import ec, ed25519

import pytest
import requests_mock
from urllib3.response import HTTPResponse

from jose_keys.conf import ENVIRONMENT_PREFIX, model_settings
from jose_keys.tests.base.constants import X5C_CHAIN_PEM, X5U


@pytest.fixture
def ca_key() -> ec.EllipticCurvePrivateKey:
    """Fixture for a private key used for signing test certificates."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def ec_private_key() -> ec.EllipticCurvePrivateKey:
    """Fixture for a fresh elliptic curve private key."""
    return ec.generate_private_key(ec.SECP384R1())


@pytest.fixture
def ed25519_private_key() -> ed25519.Ed25519PrivateKey:
    """Fixture for a fresh Ed25519 private key."""
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture
def reload_settings() -> Iterator[Callable[..., None]]:
    """Fixture to reload settings with the given values.

    Settings are reloaded from the environment after the test.
    """

    def reload(**values: str) -> None:
        model_settings.reload({f"{ENVIRONMENT_PREFIX}{key}": value for key, value in values.items()})

    yield reload
    model_settings.reload()


@pytest.fixture
def x5u_mock() -> Iterator[requests_mock.Mocker]:
    """Fixture mocking the response for the ``x5u`` URL used in tests."""
    with requests_mock.Mocker() as req_mock:
        req_mock.get(X5U, raw=HTTPResponse(body=io.BytesIO(X5C_CHAIN_PEM), status=200, preload_content=False))
        yield req_mock
