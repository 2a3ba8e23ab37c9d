"""
Copyright (c) 2024, 2026, Oracle and/or its affiliates.
Licensed under the Universal Permissive License v1.0 as shown at http://oss.oracle.com/licenses/upl.

Application settings loaded from environment variables and .env file.
"""

import os
import secrets
from functools import cached_property
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from foundry_server.app.core.paths import (
    DEFAULT_APPLICATION_DIR,
    DEFAULT_DATA_DIR,
    PROJECT_ROOT,
    resolve_foundry_script_path,
)


class Settings(BaseSettings):
    """Application settings populated from environment variables / .env file.

    Build one instance at startup and hand it to whatever needs it.
    """

    model_config = SettingsConfigDict(
        env_prefix="FOUNDRY_",
        env_file=PROJECT_ROOT / f".env.{os.getenv('FOUNDRY_ENV', 'dev')}",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    # Server
    env: str = "dev"
    server_url_prefix: str = ""
    server_port: int = 8000
    log_level: str = "INFO"

    # Auth
    api_key: Optional[str] = None

    # Foundry VTT install (unprefixed, shared with the container image)
    application_dir: Path = Field(
        default=Path(DEFAULT_APPLICATION_DIR), validation_alias="APPLICATION_DIR"
    )
    data_dir: Path = Field(default=Path(DEFAULT_DATA_DIR), validation_alias="DATA_DIR")
    node_binary: str = "node"

    @model_validator(mode="after")
    def _generate_api_key_if_missing(self) -> "Settings":
        if self.api_key is None:
            object.__setattr__(self, "_api_key_generated", True)
            self.api_key = secrets.token_urlsafe(32)
        else:
            object.__setattr__(self, "_api_key_generated", False)
        return self

    @property
    def api_key_generated(self) -> bool:
        """True when api_key was auto-generated (FOUNDRY_API_KEY not set)."""
        return getattr(self, "_api_key_generated", False)

    @cached_property
    def foundry_script_path(self) -> Path:
        """Entry script of the Foundry VTT install, resolved on first access."""
        return resolve_foundry_script_path(self.application_dir)
