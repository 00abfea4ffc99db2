"""Table of contents loading and traversal."""

from .flatten import flatten_toc, walk_toc
from .loader import TocLoader, YamlTocLoader

__all__ = ["TocLoader", "YamlTocLoader", "flatten_toc", "walk_toc"]
