"""Failures raised when the cryptographic environment is unusable."""

from __future__ import annotations


class CredentialHasherError(RuntimeError):
    """Base class for fatal credential hashing failures."""


class EntropySourceError(CredentialHasherError):
    """Raised when the secure random source cannot supply salt bytes."""


class DerivationError(CredentialHasherError):
    """Raised when the key-derivation primitive fails unexpectedly."""
