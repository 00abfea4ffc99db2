from __future__ import annotations

from typing import Iterator, List

from tocmerge.models.toc import TocNode


def walk_toc(node: TocNode) -> Iterator[TocNode]:
    yield node
    for child in node.children:
        yield from walk_toc(child)


def flatten_toc(root: TocNode) -> List[TocNode]:
    """Return the nodes of a TOC tree in depth-first pre-order, root first."""

    return list(walk_toc(root))


__all__ = ["flatten_toc", "walk_toc"]
