"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for structval.

    Values are read from ``STRUCTVAL_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Validation
    max_depth: int = 256  # array/object nesting levels before DEPTH_ERROR

    # Document loading
    max_document_size: int = 5_000_000  # characters
    max_node_count: int = 50_000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
