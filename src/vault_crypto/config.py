# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Configuration management for vault_crypto."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from VAULT_CRYPTO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VAULT_CRYPTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Vault key derivation (PBKDF2-HMAC-SHA256)
    vault_kdf_iterations: int = Field(
        default=600_000, ge=1, description="PBKDF2 iterations for vault key derivation"
    )
    vault_key_length: int = Field(
        default=32, ge=1, description="Derived vault key length in bytes (32 for AES-256)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level for the self-test entry point")


# Global settings instance
settings = Settings()
