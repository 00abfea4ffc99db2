from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from tocmerge.models.configs import MergeConfig


def load_structured_file(path: Path) -> Any:
    """Parse a YAML, TOML or JSON file according to its extension."""

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if ext == ".toml":
        return tomllib.loads(text)
    if ext == ".json":
        return json.loads(text)
    raise ValueError(f"Unsupported file format '{ext}' for {path}")


def load_merge_config(path: Path) -> MergeConfig:
    data = load_structured_file(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    config = MergeConfig.model_validate(data)
    return config.resolve_paths(path.parent)


__all__ = ["load_merge_config", "load_structured_file"]
