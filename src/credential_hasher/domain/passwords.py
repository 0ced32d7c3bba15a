"""Plaintext password encoding shared by hasher adapters."""

from __future__ import annotations


def encode_password(password: str | bytes) -> bytes:
    """Return password bytes; text is UTF-8 encoded, bytes pass through unchanged.

    Lone surrogates are encoded as-is so every ``str`` maps to stable bytes.
    """

    if isinstance(password, str):
        return password.encode("utf-8", "surrogatepass")
    return password
