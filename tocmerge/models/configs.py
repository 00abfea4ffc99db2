from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator


class UrlType(str, Enum):
    """Shape of the URLs a rendered site is served under."""

    UGLY = "ugly"
    PRETTY = "pretty"


def _default_workers() -> int:
    return os.cpu_count() or 1


class MergeConfig(BaseModel):
    docset_dir: Path = Field(default=Path("."))
    output_dir: Path = Field(default=Path("_site"))
    url_type: UrlType = UrlType.UGLY
    main_tag: str = "main"
    max_workers: int = Field(default_factory=_default_workers, ge=1)
    encoding: str = "utf-8"
    output_suffix: str = Field(default=".pdf.html", description="Replaces the TOC file extension")
    tocs: List[Path] = Field(default_factory=list)

    @field_validator("output_suffix")
    @classmethod
    def _require_leading_dot(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("output_suffix must start with '.'")
        return value

    @field_validator("main_tag")
    @classmethod
    def _normalize_tag(cls, value: str) -> str:
        return value.strip().lower()

    def resolve_paths(self, base_path: Path) -> "MergeConfig":
        values = self.model_dump()
        for key in ("docset_dir", "output_dir"):
            raw = Path(values[key])
            values[key] = raw if raw.is_absolute() else (base_path / raw).resolve()

        values["tocs"] = [
            Path(p) if Path(p).is_absolute() else (values["docset_dir"] / Path(p)).resolve()
            for p in values.get("tocs", [])
        ]
        return MergeConfig.model_validate(values)


__all__ = ["MergeConfig", "UrlType"]
