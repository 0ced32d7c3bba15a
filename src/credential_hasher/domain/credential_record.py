"""Stored credential record encoding: ``hex(salt):hex(derived_key)``."""

from __future__ import annotations

import string
from dataclasses import dataclass

RECORD_SEPARATOR = ":"
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class StoredCredentialRecord:
    """Decoded salt and derived key carried by one persisted record."""

    salt: bytes
    derived_key: bytes


def format_credential_record(record: StoredCredentialRecord) -> str:
    """Encode one record as lowercase ``salt_hex:key_hex`` text."""

    return f"{record.salt.hex()}{RECORD_SEPARATOR}{record.derived_key.hex()}"


def parse_credential_record(value: object) -> StoredCredentialRecord | None:
    """Decode one persisted record or return None when it is malformed."""

    if not isinstance(value, str):
        return None
    salt_hex, separator, key_hex = value.partition(RECORD_SEPARATOR)
    if not separator:
        return None
    salt = _decode_hex(salt_hex)
    derived_key = _decode_hex(key_hex)
    if salt is None or derived_key is None:
        return None
    return StoredCredentialRecord(salt=salt, derived_key=derived_key)


def _decode_hex(value: str) -> bytes | None:
    # bytes.fromhex tolerates whitespace; stored records never contain any.
    if not value or not _HEX_DIGITS.issuperset(value):
        return None
    try:
        return bytes.fromhex(value)
    except ValueError:
        return None
