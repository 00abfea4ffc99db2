from __future__ import annotations

import threading
from pathlib import Path
from typing import Iterator, List, Optional

from tocmerge.models.toc import Document


class MergeError(Exception):
    """Base class for failures that abort the merge of one table of contents."""

    def __init__(
        self,
        message: str,
        *,
        document: Optional[Document] = None,
        toc: Optional[Path] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.document = document
        self.toc = toc

    def __str__(self) -> str:
        parts = [self.message]
        if self.document is not None:
            parts.append(f"document={self.document}")
        if self.toc is not None:
            parts.append(f"toc={self.toc}")
        return " ".join(parts)


class ReadFailure(MergeError):
    """A rendered page exists on disk but could not be read."""


class MalformedTocReference(MergeError):
    """A TOC entry references a document the docset does not know about."""


class ErrorLog:
    """Thread-safe collector for errors reported while building several TOCs."""

    def __init__(self) -> None:
        self._errors: List[MergeError] = []
        self._lock = threading.Lock()

    def add(self, error: MergeError) -> None:
        with self._lock:
            self._errors.append(error)

    @property
    def errors(self) -> List[MergeError]:
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return len(self) > 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)

    def __iter__(self) -> Iterator[MergeError]:
        return iter(self.errors)


__all__ = ["ErrorLog", "MalformedTocReference", "MergeError", "ReadFailure"]
