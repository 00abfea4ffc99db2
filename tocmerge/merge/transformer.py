from __future__ import annotations

import logging
from typing import Optional

from tocmerge.errors import ReadFailure
from tocmerge.html.engine import transform_html
from tocmerge.html.rewriter import LinkRewriter
from tocmerge.models.configs import UrlType
from tocmerge.models.toc import TocNode
from tocmerge.output import Output
from tocmerge.site.documents import DocumentProvider
from tocmerge.site.identity import page_id
from tocmerge.site.urls import directory_of


logger = logging.getLogger(__name__)


class PageTransformer:
    """Turn the rendered HTML of one TOC entry into a fragment of the merged document."""

    def __init__(
        self,
        provider: DocumentProvider,
        output: Output,
        *,
        merged_dir: str = "",
        main_tag: str = "main",
    ) -> None:
        self.provider = provider
        self.output = output
        self.merged_dir = merged_dir
        self.main_tag = main_tag

    @property
    def url_type(self) -> UrlType:
        return self.provider.url_type

    def transform(self, node: TocNode) -> Optional[str]:
        """Return the rewritten page HTML, or ``None`` when there is nothing to merge."""

        document = node.document
        if document is None:
            return None

        html_path = self.output.path_of(self.provider.get_output_path(document))
        if not html_path.exists():
            logger.debug("No rendered HTML for %s at %s", document, html_path)
            return None

        site_url = self.provider.get_site_url(document)
        rewriter = LinkRewriter(
            page_id=page_id(site_url),
            page_dir=directory_of(self.provider.get_site_path(document)),
            page_url=site_url,
            merged_dir=self.merged_dir,
            url_type=self.url_type,
            main_tag=self.main_tag,
        )

        try:
            html = html_path.read_text(encoding=self.output.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadFailure(f"Failed to read {html_path}: {exc}", document=document) from exc

        return transform_html(html, rewriter)


__all__ = ["PageTransformer"]
