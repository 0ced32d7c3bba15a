"""Key-derivation parameters for salted PBKDF2 credential hashing."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class KdfParameters:
    """Immutable PBKDF2 parameter set shared by hash and verify paths."""

    salt_length: int = 32
    iterations: int = 100_000
    derived_key_length: int = 64
    digest: str = "sha512"

    def __post_init__(self) -> None:
        for name in ("salt_length", "iterations", "derived_key_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")
        try:
            hashlib.pbkdf2_hmac(self.digest, b"", b"", 1)
        except (ValueError, TypeError) as error:
            raise ValueError(f"unsupported digest: {self.digest}") from error

    @property
    def salt_hex_length(self) -> int:
        """Return hex-encoded salt length in characters."""

        return self.salt_length * 2

    @property
    def derived_key_hex_length(self) -> int:
        """Return hex-encoded derived key length in characters."""

        return self.derived_key_length * 2


DEFAULT_KDF_PARAMETERS = KdfParameters()
