from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class MergeStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class MergeResult:
    """Summarizes the merged artifact produced for one table of contents."""

    toc_path: Path
    status: MergeStatus
    output_path: Optional[Path] = None
    nodes_visited: int = 0
    pages_written: int = 0
    pages_missing: int = 0
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status is MergeStatus.SUCCEEDED


__all__ = ["MergeResult", "MergeStatus"]
