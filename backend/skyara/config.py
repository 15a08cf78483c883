"""Runtime settings read from the environment.

A ``.env`` file in the working directory is loaded first; variables already
set in the environment win.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


class Settings(BaseModel):
    """Skyara runtime settings."""

    cost_reference_path: Path | None = None
    cors_origins: list[str] = Field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level '{v}'"
            raise ValueError(msg)
        return level


def load_settings(env_file: Path | None = None) -> Settings:
    """Build Settings from SKYARA_* environment variables."""
    load_dotenv(env_file)

    reference = os.environ.get("SKYARA_COST_REFERENCE", "").strip()
    origins = os.environ.get("SKYARA_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    return Settings(
        cost_reference_path=Path(reference) if reference else None,
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        log_level=os.environ.get("SKYARA_LOG_LEVEL", "INFO"),
    )
