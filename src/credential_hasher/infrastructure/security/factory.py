"""Build the configured password hasher adapter."""

from __future__ import annotations

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort
from credential_hasher.config.settings import Settings, load_settings
from credential_hasher.infrastructure.logging import configure_logging
from credential_hasher.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from credential_hasher.infrastructure.security.pbkdf2_password_hasher import (
    Pbkdf2PasswordHasher,
)


def build_password_hasher(settings: Settings) -> PasswordHasherPort:
    """Return the password hasher selected by runtime settings."""

    if settings.password_hasher == "bcrypt":
        return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    return Pbkdf2PasswordHasher()


def bootstrap_password_hasher(settings: Settings | None = None) -> PasswordHasherPort:
    """Configure process logging from settings and return the selected hasher."""

    resolved_settings = settings or load_settings()
    configure_logging(level=resolved_settings.log_level)
    return build_password_hasher(resolved_settings)
