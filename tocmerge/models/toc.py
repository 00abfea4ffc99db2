from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True, slots=True)
class Document:
    """A source document of the docset, addressed by its POSIX relative path."""

    file_path: str

    def __str__(self) -> str:
        return self.file_path


@dataclass(slots=True)
class TocNode:
    """Represents one entry of a table of contents."""

    name: str = ""
    href: Optional[str] = None
    document: Optional[Document] = None
    children: List["TocNode"] = field(default_factory=list)

    def add_child(self, child: "TocNode") -> None:
        """Append a child node; insertion order is the merge order."""

        self.children.append(child)


__all__ = ["Document", "TocNode"]
