from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from tocmerge.models.configs import UrlType

load_dotenv(override=False)


_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _env_workers() -> int:
    raw = os.getenv("TOCMERGE_MAX_WORKERS")
    if raw:
        return int(raw)
    return os.cpu_count() or 1


class Settings(BaseModel):
    """Defaults taken from ``TOCMERGE_*`` environment variables (and ``.env``)."""

    docset_dir: Path = Field(default_factory=lambda: Path(os.getenv("TOCMERGE_DOCSET", ".")))
    output_dir: Path = Field(default_factory=lambda: Path(os.getenv("TOCMERGE_OUTPUT", "_site")))
    url_type: UrlType = Field(default_factory=lambda: UrlType(os.getenv("TOCMERGE_URL_TYPE", "ugly").lower()))
    max_workers: int = Field(default_factory=_env_workers, ge=1)
    log_level: str = Field(
        default_factory=lambda: os.getenv("TOCMERGE_LOG_LEVEL", "INFO"),
        validate_default=True,
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"TOCMERGE_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
