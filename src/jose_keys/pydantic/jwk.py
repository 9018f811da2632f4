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

"""Base model for JSON Web Keys (JWKs, see RFC 7517)."""

import abc
import typing
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import ConfigDict, Field, PrivateAttr, model_validator

from cryptography.hazmat.primitives import hashes

from jose_keys.certificates import validate_certificate_parameters
from jose_keys.constants import PRIVATE_KEY_TYPES, PUBLIC_KEY_TYPES
from jose_keys.pydantic.base import CryptographyModel, CryptographyModelTypeVar
from jose_keys.pydantic.validators import JWK_PARAMETER_VALIDATORS
from jose_keys.typehints import JwkKeyOperation, JwkKeyType, JwkParameters, JwkUse, ParameterValidator
from jose_keys.utils import b64url_encode, canonical_json, get_hash_algorithm, key_to_jwk_parameters


class JwkModel(CryptographyModel[CryptographyModelTypeVar], typing.Generic[CryptographyModelTypeVar]):
    """Abstract base model for all JSON Web Keys.

    Subclasses define the fields specific to the key type, the validators for these fields (in
    ``parameter_validators``) and the fields used for computing the thumbprint (in
    ``thumbprint_parameters``). Parameters are validated in a fixed order: First the validators of the key
    type, then the validators for parameters shared by all keys and finally the certificate chain (if any).

    Parameters not defined by the model are kept as additional fields. Parameters that are ``None`` are
    treated as if they were not given at all.

    Models can also be created from a matching :py:mod:`~cg:cryptography` key, in which case the key is
    converted to parameters first. Private keys are converted to public keys if the model represents a public
    key.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    #: Validators specific to the key type, applied before any other validation.
    parameter_validators: ClassVar[tuple[ParameterValidator, ...]] = ()

    #: Required parameters used for computing the thumbprint (see RFC 7638), in lexicographic order.
    thumbprint_parameters: ClassVar[tuple[str, ...]] = ()

    #: If the model represents a private key.
    private: ClassVar[bool] = False

    kty: JwkKeyType
    use: JwkUse | None = None
    key_ops: list[JwkKeyOperation] | None = None
    alg: str | None = None
    kid: str | None = None
    x5u: str | None = None
    x5c: list[str] | None = None
    x5t: str | None = None
    x5t_s256: str | None = Field(default=None, alias="x5t#S256")

    _cryptography: Any = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def validate_parameters(cls, data: Any) -> Any:
        """Model validator running all validation rules for JWK parameters.

        The rules raise :py:class:`~jose_keys.exceptions.InvalidJwkError` (and not ``ValueError``), so a
        validation error is never wrapped in a Pydantic ``ValidationError``.
        """
        if isinstance(data, PRIVATE_KEY_TYPES) and not cls.private:
            data = data.public_key()
        if isinstance(data, (*PRIVATE_KEY_TYPES, *PUBLIC_KEY_TYPES)):
            data = key_to_jwk_parameters(data)

        if not isinstance(data, Mapping):
            raise TypeError('Invalid parameter "params".')

        params = {key: value for key, value in data.items() if value is not None}
        if "x5t_s256" in params:
            params.setdefault("x5t#S256", params.pop("x5t_s256"))

        for validator in cls.parameter_validators:
            validator(params)
        for validator in JWK_PARAMETER_VALIDATORS:
            validator(params)
        validate_certificate_parameters(params)
        return params

    def model_post_init(self, __context: Any) -> None:
        self._cryptography = self.load_cryptography()

    @abc.abstractmethod
    def load_cryptography(self) -> CryptographyModelTypeVar:
        """Load the cryptography key from the (already validated) parameters.

        Implementations raise :py:class:`~jose_keys.exceptions.InvalidJwkError` if the key material is
        rejected by cryptography.
        """

    @property
    def cryptography(self) -> CryptographyModelTypeVar:
        """The cryptography key for this JWK."""
        return typing.cast(CryptographyModelTypeVar, self._cryptography)

    def get_thumbprint_parameters(self) -> dict[str, str]:
        """Get the parameters used for computing the thumbprint of this JWK."""
        return {name: getattr(self, name) for name in self.thumbprint_parameters}

    def get_thumbprint(self, algorithm: str | hashes.HashAlgorithm = "sha256") -> bytes:
        """Get the thumbprint of this JWK as defined in RFC 7638.

        Only the required public parameters of the key type are part of the thumbprint, so the public and
        the private JWK of the same key have the same thumbprint.
        """
        digest = hashes.Hash(get_hash_algorithm(algorithm))
        digest.update(canonical_json(self.get_thumbprint_parameters()))
        return digest.finalize()

    def get_thumbprint_b64(self, algorithm: str | hashes.HashAlgorithm = "sha256") -> str:
        """Get the thumbprint of this JWK as base64url encoded string (as used for key identifiers)."""
        return b64url_encode(self.get_thumbprint(algorithm))

    def to_json(self) -> JwkParameters:
        """Get the parameters of this JWK as dictionary, omitting any parameters that are not set."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
