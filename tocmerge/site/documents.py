from __future__ import annotations

import posixpath
from pathlib import Path, PurePosixPath

from tocmerge.errors import MalformedTocReference
from tocmerge.models.configs import UrlType
from tocmerge.models.toc import Document
from tocmerge.site.urls import canonical_url


_HTML_EXTENSIONS = {".html", ".htm"}


class DocumentProvider:
    """Locate the rendered output and the served URL of docset documents.

    A document is known when its source file exists under ``docset_dir``.
    """

    def __init__(self, docset_dir: Path, *, url_type: UrlType = UrlType.UGLY) -> None:
        self.docset_dir = Path(docset_dir)
        self.url_type = url_type

    def is_known(self, document: Document) -> bool:
        if document.file_path.startswith("../") or PurePosixPath(document.file_path).is_absolute():
            return False
        return (self.docset_dir / document.file_path).is_file()

    def get_site_path(self, document: Document) -> str:
        """Return the output file of ``document``, relative to the site root."""

        if not self.is_known(document):
            raise MalformedTocReference("Document not found in docset", document=document)

        stem, ext = posixpath.splitext(document.file_path)
        if ext.lower() in _HTML_EXTENSIONS:
            return document.file_path
        if self.url_type is UrlType.PRETTY and posixpath.basename(stem) != "index":
            return f"{stem}/index.html"
        return f"{stem}.html"

    def get_output_path(self, document: Document) -> str:
        return self.get_site_path(document)

    def get_site_url(self, document: Document) -> str:
        return canonical_url(self.get_site_path(document), self.url_type)

    def get_toc_output_path(self, toc_path: Path, suffix: str) -> str:
        """Return the merged artifact path of a TOC file, relative to the site root."""

        toc_path = Path(toc_path)
        if toc_path.is_absolute():
            try:
                toc_path = toc_path.resolve().relative_to(self.docset_dir.resolve())
            except ValueError as exc:
                raise ValueError(f"TOC {toc_path} is outside of docset {self.docset_dir}") from exc
        return PurePosixPath(toc_path.as_posix()).with_suffix(suffix).as_posix()


__all__ = ["DocumentProvider"]
