"""Configuration via environment variables using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class CatalogConfig(BaseSettings):
    """Catalog front-end settings, loaded from env vars with RESEARCH_CATALOG_ prefix."""

    model_config = {"env_prefix": "RESEARCH_CATALOG_", "extra": "ignore", "env_file": ".env"}

    # --- Data source ---
    posts_source: str = "posts.json"  # http(s) URL or file path
    http_timeout_seconds: int = 10

    # --- Presentation ---
    dark_theme: bool = True
