"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from texthash.models.algorithm import AlgorithmIdentifier


class Config(BaseSettings):
    """Settings loaded from ``TEXTHASH_*`` environment variables and a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTHASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "WARNING"
    max_workers: int = 4
    offload_threshold_bytes: int = 1_048_576
    default_algorithm: str = AlgorithmIdentifier.SHA256.value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, value: int) -> int:
        """Worker pool size must be between 1 and 32."""
        if value < 1 or value > 32:
            msg = "max_workers must be between 1 and 32"
            raise ValueError(msg)
        return value

    @field_validator("offload_threshold_bytes")
    @classmethod
    def validate_offload_threshold_bytes(cls, value: int) -> int:
        if value < 0:
            msg = "offload_threshold_bytes must not be negative"
            raise ValueError(msg)
        return value

    @field_validator("default_algorithm")
    @classmethod
    def validate_default_algorithm(cls, value: str) -> str:
        """Default algorithm must name a supported algorithm."""
        return AlgorithmIdentifier.parse(value).value

    @property
    def algorithm(self) -> AlgorithmIdentifier:
        return AlgorithmIdentifier(self.default_algorithm)
