"""Data model shared by the TOC loader, the document provider and the merge."""

from .configs import MergeConfig, UrlType
from .result import MergeResult, MergeStatus
from .toc import Document, TocNode

__all__ = [
    "Document",
    "MergeConfig",
    "MergeResult",
    "MergeStatus",
    "TocNode",
    "UrlType",
]
