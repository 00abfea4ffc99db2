from __future__ import annotations

import posixpath
import re
from enum import Enum
from typing import Tuple

from tocmerge.models.configs import UrlType


_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")
_WINDOWS_PATH_PATTERN = re.compile(r"^[a-zA-Z]:[\\/]")

_INDEX_PAGE = "index.html"
_HTML_SUFFIX = ".html"


class LinkType(str, Enum):
    EXTERNAL = "external"
    ABSOLUTE_PATH = "absolute_path"
    WINDOWS_ABSOLUTE_PATH = "windows_absolute_path"
    RELATIVE_PATH = "relative_path"
    SELF_BOOKMARK = "self_bookmark"


def get_link_type(link: str) -> LinkType:
    """Classify a URL as it appears in an href or src attribute."""

    link = link.strip()
    if not link or link.startswith("#"):
        return LinkType.SELF_BOOKMARK
    if _WINDOWS_PATH_PATTERN.match(link):
        return LinkType.WINDOWS_ABSOLUTE_PATH
    if link.startswith("//") or _SCHEME_PATTERN.match(link):
        return LinkType.EXTERNAL
    if link.startswith("/") or link.startswith("\\"):
        return LinkType.ABSOLUTE_PATH
    return LinkType.RELATIVE_PATH


def split_url(link: str) -> Tuple[str, str, str]:
    """Split a URL into path, query and fragment.

    Query and fragment keep their leading ``?`` and ``#`` so the three parts
    concatenate back to the input.
    """

    path, sep, fragment = link.partition("#")
    fragment = sep + fragment
    path, sep, query = path.partition("?")
    return path, sep + query, fragment


def combine(base_dir: str, path: str) -> str:
    """Resolve ``path`` against a site relative directory.

    The result is a normalized site relative path without a leading slash.
    ``..`` segments never climb above the site root, and a trailing slash on
    ``path`` is kept so directory links stay recognizable.
    """

    path = path.replace("\\", "/")
    joined = posixpath.join(base_dir, path) if base_dir else path
    normalized = posixpath.normpath("/" + joined).lstrip("/")
    if path.endswith("/") and normalized:
        normalized += "/"
    return normalized


def canonical_url(site_path: str, url_type: UrlType = UrlType.UGLY) -> str:
    """Map a site relative file path to the URL the page is served under."""

    path = site_path.replace("\\", "/").lstrip("/")
    if not path or path.endswith("/"):
        path += _INDEX_PAGE

    if url_type is UrlType.PRETTY:
        if path == _INDEX_PAGE or path.endswith("/" + _INDEX_PAGE):
            path = path[: -len(_INDEX_PAGE)]
        elif path.endswith(_HTML_SUFFIX):
            path = path[: -len(_HTML_SUFFIX)]
        path = path.rstrip("/")

    return "/" + path


def directory_of(site_path: str) -> str:
    return posixpath.dirname(site_path.replace("\\", "/").lstrip("/"))


def relative_to(target: str, base_dir: str) -> str:
    """Express a site relative path relative to another site directory."""

    relative = posixpath.relpath("/" + target, "/" + base_dir)
    if target.endswith("/") and not relative.endswith("/"):
        relative += "/"
    return relative


__all__ = [
    "LinkType",
    "canonical_url",
    "combine",
    "directory_of",
    "get_link_type",
    "relative_to",
    "split_url",
]
