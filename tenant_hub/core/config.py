# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
TenantHub Configuration — Environment-driven settings.

All configuration is loaded from environment variables (or .env file).
Uses the HUB_ prefix, e.g. HUB_PORT=8080.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class HubSettings(BaseSettings):
    """Process-wide configuration loaded from environment."""

    # --- Server ---
    HOST: str = Field(default="0.0.0.0", description="Bind host")
    PORT: int = Field(default=3000, description="Bind port")

    # --- Storage ---
    UPLOADS_DIR: str = Field(
        default="uploads",
        description="Root directory for uploaded blobs (one subdirectory per tenant)",
    )

    # --- Identity ---
    IDENTITY_FILE: Optional[str] = Field(
        default=None,
        description="YAML file with the token -> user table; built-in seed users if unset",
    )

    # --- Platform ---
    LOG_LEVEL: str = Field(default="INFO")
    ENV: str = Field(
        default="dev",
        description="Environment: dev | prod",
    )
    LOG_JSON: Optional[bool] = Field(
        default=None,
        description="Force JSON (true) or text (false) logs; defaults to JSON in prod",
    )

    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "prod"

    @property
    def json_logs(self) -> bool:
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.is_production

    model_config = {
        "env_prefix": "HUB_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


_settings_singleton: HubSettings | None = None


def get_settings() -> HubSettings:
    """Return a cached HubSettings singleton."""
    global _settings_singleton
    if _settings_singleton is None:
        _settings_singleton = HubSettings()
    return _settings_singleton
