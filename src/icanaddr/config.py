"""Library configuration using pydantic-settings.

Settings only affect the outer layers (service and CLI). The derivation and
encoding functions take every input as an argument and never read settings.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from icanaddr.networks import NetworkType


class Settings(BaseSettings):
    """Settings loaded from ``ICAN_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ICAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Derivation
    # ======================
    default_network: NetworkType = Field(
        default=NetworkType.MAINNET,
        description="Network used when a request does not name one",
    )

    # ======================
    # Logging
    # ======================
    log_level: str = Field(default="INFO", description="Root log level")
    debug: bool = Field(default=False, description="Force DEBUG logging")

    @field_validator("default_network", mode="before")
    @classmethod
    def parse_network(cls, v):
        """Accept a network name ("mainnet") or its prefix ("cb")."""
        if not isinstance(v, str):
            return v
        name = v.strip().lower()
        if name in {network.value for network in NetworkType}:
            return name
        return NetworkType.from_prefix(name)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def effective_log_level(self) -> int:
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
