"""Site layout helpers: URL classification, page identifiers, document lookup."""

from .documents import DocumentProvider
from .identity import page_id
from .urls import LinkType, canonical_url, combine, get_link_type, split_url

__all__ = [
    "DocumentProvider",
    "LinkType",
    "canonical_url",
    "combine",
    "get_link_type",
    "page_id",
    "split_url",
]
