"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    api_title: str = _get_env("API_TITLE", "Product Catalog Service")
    # Empty path selects the built-in sample catalog.
    catalog_path: str = _get_env("CATALOG_PATH", "")
    log_level: str = _get_env("LOG_LEVEL", "INFO")
    cors_allow_origins: tuple[str, ...] = tuple(
        origin.strip() for origin in _get_env("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
    )


settings = Settings()
