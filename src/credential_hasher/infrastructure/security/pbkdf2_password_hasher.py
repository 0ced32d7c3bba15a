"""Salted PBKDF2-HMAC password hasher adapter."""

from __future__ import annotations

import hashlib
import hmac
import logging
import secrets

from credential_hasher.application.ports.entropy_source_port import EntropySource
from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.credential_record import (
    StoredCredentialRecord,
    format_credential_record,
    parse_credential_record,
)
from credential_hasher.domain.errors import DerivationError, EntropySourceError
from credential_hasher.domain.kdf_parameters import DEFAULT_KDF_PARAMETERS, KdfParameters
from credential_hasher.domain.passwords import encode_password

logger = logging.getLogger(__name__)


class Pbkdf2PasswordHasher(PasswordHasherPort):
    """Password hashing adapter producing ``salt_hex:key_hex`` records.

    Holds no mutable state, so one instance may serve concurrent callers.
    """

    def __init__(
        self,
        *,
        parameters: KdfParameters = DEFAULT_KDF_PARAMETERS,
        entropy_source: EntropySource = secrets.token_bytes,
    ) -> None:
        self._parameters = parameters
        self._entropy_source = entropy_source

    @property
    def parameters(self) -> KdfParameters:
        """Return the key-derivation parameters in use."""

        return self._parameters

    def hash_password(self, password: str | bytes) -> str:
        salt = self._generate_salt()
        derived_key = self.derive_key(password, salt)
        return format_credential_record(StoredCredentialRecord(salt=salt, derived_key=derived_key))

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        record = parse_credential_record(password_hash)
        if record is None:
            logger.warning("credential_verify_rejected reason=malformed_record")
            return False
        if (
            len(record.salt) != self._parameters.salt_length
            or len(record.derived_key) != self._parameters.derived_key_length
        ):
            logger.warning("credential_verify_rejected reason=unexpected_field_length")
            return False

        candidate = self.derive_key(password, record.salt)
        return hmac.compare_digest(candidate, record.derived_key)

    def derive_key(self, password: str | bytes, salt: bytes) -> bytes:
        """Run PBKDF2 for one password and salt with the configured parameters."""

        password_bytes = encode_password(password)
        try:
            return hashlib.pbkdf2_hmac(
                self._parameters.digest,
                password_bytes,
                salt,
                self._parameters.iterations,
                dklen=self._parameters.derived_key_length,
            )
        except (ValueError, OverflowError, MemoryError) as error:
            raise DerivationError(f"key derivation failed: {error}") from error

    def _generate_salt(self) -> bytes:
        expected = self._parameters.salt_length
        try:
            salt = self._entropy_source(expected)
        except (OSError, NotImplementedError) as error:
            raise EntropySourceError(f"secure random source failed: {error}") from error
        if not isinstance(salt, bytes) or len(salt) != expected:
            raise EntropySourceError(
                f"secure random source returned an invalid {expected}-byte read"
            )
        return salt
