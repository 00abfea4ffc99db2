from __future__ import annotations

from pathlib import Path
from typing import TextIO


class Output:
    """The rendered site on disk; merged documents are written next to its pages."""

    def __init__(self, output_dir: Path, *, encoding: str = "utf-8") -> None:
        self.output_dir = Path(output_dir)
        self.encoding = encoding

    def path_of(self, relative_path: str) -> Path:
        return self.output_dir / relative_path

    def write_stream(self, relative_path: str) -> TextIO:
        path = self.path_of(relative_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("w", encoding=self.encoding, newline="")


__all__ = ["Output"]
