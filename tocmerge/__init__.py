"""Merge the rendered pages of a table of contents into one HTML document."""

from .merge.builder import PdfBuilder
from .models.configs import MergeConfig, UrlType
from .models.toc import Document, TocNode

__all__ = ["Document", "MergeConfig", "PdfBuilder", "TocNode", "UrlType"]
