"""Merging the rendered pages of a table of contents into one document."""

from .builder import PdfBuilder
from .transformer import PageTransformer

__all__ = ["PageTransformer", "PdfBuilder"]
