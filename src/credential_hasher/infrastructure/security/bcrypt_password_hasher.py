"""Bcrypt password hasher adapter."""

from __future__ import annotations

import base64
import hashlib
import logging

import bcrypt

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.domain.passwords import encode_password

logger = logging.getLogger(__name__)

DEFAULT_BCRYPT_ROUNDS = 12


def _prehash_password(password: str | bytes) -> bytes:
    # bcrypt reads at most 72 bytes; base64(sha256) is 44 bytes with no NUL.
    return base64.b64encode(hashlib.sha256(encode_password(password)).digest())


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt.

    Passwords are SHA-256 pre-hashed and base64 encoded before bcrypt, so
    inputs of any length are accepted and every byte affects the result.
    """

    def __init__(self, *, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self._rounds = rounds

    def hash_password(self, password: str | bytes) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_prehash_password(password), salt).decode("utf-8")

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash_password(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError, UnicodeEncodeError):
            logger.warning("credential_verify_rejected reason=malformed_record")
            return False
