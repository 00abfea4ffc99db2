"""HTML tag rewriting for merged documents."""

from .engine import LinkKind, TagCallback, link_kind, transform_html
from .rewriter import LinkRewriter

__all__ = ["LinkKind", "LinkRewriter", "TagCallback", "link_kind", "transform_html"]
