from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from bs4 import BeautifulSoup, Tag


TagCallback = Callable[[Tag], None]


class LinkKind(str, Enum):
    NAVIGATION = "navigation"
    RESOURCE = "resource"


_LINK_ATTRIBUTES: Dict[Tuple[str, str], LinkKind] = {
    ("a", "href"): LinkKind.NAVIGATION,
    ("area", "href"): LinkKind.NAVIGATION,
    ("img", "src"): LinkKind.RESOURCE,
    ("link", "href"): LinkKind.RESOURCE,
    ("script", "src"): LinkKind.RESOURCE,
    ("source", "src"): LinkKind.RESOURCE,
    ("video", "src"): LinkKind.RESOURCE,
    ("video", "poster"): LinkKind.RESOURCE,
    ("audio", "src"): LinkKind.RESOURCE,
    ("track", "src"): LinkKind.RESOURCE,
    ("iframe", "src"): LinkKind.RESOURCE,
    ("embed", "src"): LinkKind.RESOURCE,
    ("object", "data"): LinkKind.RESOURCE,
    ("input", "src"): LinkKind.RESOURCE,
}


def link_kind(tag_name: str, attribute: str) -> Optional[LinkKind]:
    """Return how an attribute carries a URL, or ``None`` if it does not."""

    return _LINK_ATTRIBUTES.get((tag_name.lower(), attribute.lower()))


def transform_html(html: str, callback: TagCallback) -> str:
    """Run ``callback`` on every start tag of ``html`` in document order.

    The callback mutates ``tag.attrs`` in place; the document is serialized
    back once every tag has been visited.
    """

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(True):
        callback(tag)
    return str(soup)


__all__ = ["LinkKind", "TagCallback", "link_kind", "transform_html"]
