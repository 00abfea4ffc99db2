from __future__ import annotations

from dataclasses import dataclass

from bs4 import Tag

from tocmerge.html.engine import LinkKind, link_kind
from tocmerge.models.configs import UrlType
from tocmerge.site.identity import page_id as target_page_id
from tocmerge.site.urls import LinkType, canonical_url, combine, get_link_type, relative_to, split_url


_RETARGETED_LINK_TYPES = {LinkType.RELATIVE_PATH, LinkType.SELF_BOOKMARK}


@dataclass(frozen=True, slots=True)
class LinkRewriter:
    """Tag callback that moves one page into the namespace of the merged document.

    ``page_dir`` is the site relative directory the page is served from and
    ``merged_dir`` the directory of the merged document. Both are used only to
    resolve relative URLs; the rewriter holds no mutable state and may be
    shared across threads.
    """

    page_id: str
    page_dir: str
    page_url: str
    merged_dir: str = ""
    url_type: UrlType = UrlType.UGLY
    main_tag: str = "main"

    def __call__(self, tag: Tag) -> None:
        for name, value in list(tag.attrs.items()):
            if not isinstance(value, str):
                continue

            if name.lower() == "id":
                tag[name] = self.page_id + value
                continue

            kind = link_kind(tag.name, name)
            if kind is LinkKind.NAVIGATION:
                tag[name] = self.rewrite_link(value)
            elif kind is LinkKind.RESOURCE:
                tag[name] = self.rebase_resource(value)

        if tag.name == self.main_tag:
            tag["id"] = self.page_id

    def rewrite_link(self, link: str) -> str:
        """Point a same-site link at the anchor of its target page."""

        if get_link_type(link) not in _RETARGETED_LINK_TYPES:
            return link

        path, _query, fragment = split_url(link.strip())
        if path:
            target_url = canonical_url(combine(self.page_dir, path), self.url_type)
        else:
            target_url = self.page_url
        return "#" + target_page_id(target_url) + fragment.lstrip("#")

    def rebase_resource(self, link: str) -> str:
        """Make a page relative resource URL relative to the merged document."""

        if get_link_type(link) is not LinkType.RELATIVE_PATH:
            return link

        path, query, fragment = split_url(link.strip())
        if not path:
            return link
        target = combine(self.page_dir, path)
        return relative_to(target, self.merged_dir) + query + fragment


__all__ = ["LinkRewriter"]
