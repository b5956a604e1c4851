"""Central configuration loaded from environment variables."""

from __future__ import annotations

import hashlib
from enum import StrEnum
from typing import Any, Callable

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Unpadded Base32 length of a SHA-512 digest (ceil(512 / 5))
MAX_SECRET_KEY_LENGTH = 103


class Algorithm(StrEnum):
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def digestmod(self) -> Callable[..., Any]:
        """hashlib constructor, as pyotp expects for ``digest``."""
        return getattr(hashlib, self.value)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TOTP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Engine defaults
    default_digits: int = Field(default=6, gt=0, le=10)
    default_period: int = Field(default=30, gt=0)
    default_algorithm: Algorithm = Algorithm.SHA1

    # Secret generation
    secret_word_count: int = Field(default=16, gt=0)
    secret_word_min_length: int = Field(default=4, gt=0)
    secret_word_max_length: int = Field(default=10, gt=0)
    secret_key_length: int = Field(default=16, gt=0, le=MAX_SECRET_KEY_LENGTH)

    @model_validator(mode="after")
    def _check_word_lengths(self) -> Settings:
        if self.secret_word_min_length > self.secret_word_max_length:
            raise ValueError(
                f"secret_word_min_length ({self.secret_word_min_length}) exceeds "
                f"secret_word_max_length ({self.secret_word_max_length})"
            )
        return self


settings = Settings()
