"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BcryptRounds = Annotated[int, Field(ge=4, le=31)]


class Settings(BaseSettings):
    """Environment-driven hasher settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    password_hasher: Literal["pbkdf2", "bcrypt"] = Field(
        default="pbkdf2",
        validation_alias="PASSWORD_HASHER",
    )
    bcrypt_rounds: BcryptRounds = Field(default=12, validation_alias="BCRYPT_ROUNDS")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache hasher settings."""

    return Settings()
