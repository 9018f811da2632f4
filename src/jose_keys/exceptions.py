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

"""Collection of exception classes used by jose-keys."""

import typing


class JoseError(Exception):
    """Base class for all exceptions raised by jose-keys.

    If no message is passed, the exception uses the ``default_message`` of the class.
    """

    default_message = "An unknown error occurred."

    def __init__(self, message: str | None = None, *args: typing.Any) -> None:
        if message is None:
            message = self.default_message
        super().__init__(message, *args)

    @property
    def message(self) -> str:
        """The message of this exception."""
        return typing.cast(str, self.args[0])


class ImproperlyConfigured(JoseError):
    """Exception raised when jose-keys is configured with invalid settings."""

    default_message = "jose-keys is improperly configured."


class InvalidJwkError(JoseError):
    """Exception raised when JWK parameters are not valid."""

    default_message = "The provided JWK is invalid."


class InvalidCertificateChainError(InvalidJwkError):
    """Exception raised when the X.509 certificate chain of a JWK cannot be validated."""


class CertificateChainFetchError(InvalidCertificateChainError):
    """Exception raised when the certificate chain could not be retrieved from the ``x5u`` URL."""

    default_message = "Error reading the certificate chain from the url."


class InvalidJwksError(JoseError):
    """Exception raised when a JWK Set is not valid."""

    default_message = "The provided JWK Set is invalid."


class JwkNotFoundError(JoseError):
    """Exception raised when no JWK in a JWK Set matches the given criteria."""

    default_message = "No JWK matches the criteria at the JWK Set."
