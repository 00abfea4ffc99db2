from __future__ import annotations

import logging
import posixpath
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from tocmerge.config_loader import load_structured_file
from tocmerge.models.toc import Document, TocNode
from tocmerge.site.urls import LinkType, combine, get_link_type, split_url


logger = logging.getLogger(__name__)

_TOC_FILE_NAMES = {"toc.yml", "toc.yaml", "toc.json"}


class TocLoader(ABC):
    """Abstract base class for turning TOC files into TocNode trees."""

    @abstractmethod
    def load(self, toc_path: Path) -> TocNode:
        """Parse a single TOC file and return its root node."""


class YamlTocLoader(TocLoader):
    """Load ``toc.yml`` / ``toc.json`` files made of nested ``items`` lists.

    Entry hrefs are resolved against the directory of the TOC file. Entries
    pointing outside of the docset (external URLs, absolute paths, bookmarks)
    and references to nested TOC files or folders become grouping nodes.
    """

    def __init__(self, docset_dir: Path) -> None:
        self.docset_dir = Path(docset_dir)

    def load(self, toc_path: Path) -> TocNode:
        full_path = toc_path if toc_path.is_absolute() else self.docset_dir / toc_path
        data = load_structured_file(full_path)
        toc_dir = self._docset_relative_dir(full_path)

        if isinstance(data, dict):
            items = data.get("items") or []
        elif isinstance(data, list):
            items = data
        elif data is None:
            items = []
        else:
            raise ValueError(f"TOC file {full_path} must contain a list or an 'items' mapping")

        root = TocNode(name=full_path.stem)
        for child in self._load_items(items, toc_dir, full_path):
            root.add_child(child)
        return root

    def _load_items(self, items: Any, toc_dir: str, source: Path) -> List[TocNode]:
        if not isinstance(items, list):
            raise ValueError(f"'items' in {source} must be a list, got {type(items).__name__}")
        return [self._load_item(item, toc_dir, source) for item in items]

    def _load_item(self, item: Any, toc_dir: str, source: Path) -> TocNode:
        if not isinstance(item, dict):
            raise ValueError(f"TOC entry in {source} must be a mapping, got {type(item).__name__}")

        href = item.get("topicHref") or item.get("href")
        if href is not None and not isinstance(href, str):
            raise ValueError(f"href of TOC entry '{item.get('name')}' in {source} must be a string")

        node = TocNode(
            name=str(item.get("name") or ""),
            href=href,
            document=self._resolve_document(href, toc_dir),
        )
        for child in self._load_items(item.get("items") or [], toc_dir, source):
            node.add_child(child)
        return node

    def _resolve_document(self, href: Optional[str], toc_dir: str) -> Optional[Document]:
        if not href or get_link_type(href) is not LinkType.RELATIVE_PATH:
            return None

        path, _, _ = split_url(href)
        if not path or path.endswith("/") or posixpath.basename(path).lower() in _TOC_FILE_NAMES:
            logger.debug("Skipping TOC href %s: not a document", href)
            return None
        return Document(combine(toc_dir, path))

    def _docset_relative_dir(self, toc_path: Path) -> str:
        try:
            relative = toc_path.resolve().relative_to(self.docset_dir.resolve())
        except ValueError as exc:
            raise ValueError(f"TOC {toc_path} is outside of docset {self.docset_dir}") from exc
        parent = relative.parent.as_posix()
        return "" if parent == "." else parent


__all__ = ["TocLoader", "YamlTocLoader"]
