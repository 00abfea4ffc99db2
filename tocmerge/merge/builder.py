from __future__ import annotations

import logging
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path
from time import perf_counter
from typing import Dict, Iterable, List, Optional, Sequence, TextIO, Tuple

from tocmerge.errors import ErrorLog, MergeError
from tocmerge.merge.transformer import PageTransformer
from tocmerge.models.configs import MergeConfig
from tocmerge.models.result import MergeResult, MergeStatus
from tocmerge.models.toc import TocNode
from tocmerge.output import Output
from tocmerge.site.documents import DocumentProvider
from tocmerge.site.urls import directory_of
from tocmerge.toc.flatten import flatten_toc
from tocmerge.toc.loader import TocLoader, YamlTocLoader


logger = logging.getLogger(__name__)


class PdfBuilder:
    """Merges the pages of each table of contents into a single HTML document.

    Pages are transformed concurrently; the merged document always follows
    the depth-first order of the TOC. A failure while transforming any page
    aborts the merge of that TOC only and is reported to ``errors``.
    """

    def __init__(
        self,
        provider: DocumentProvider,
        loader: TocLoader,
        output: Output,
        *,
        errors: Optional[ErrorLog] = None,
        max_workers: int = 1,
        main_tag: str = "main",
        output_suffix: str = ".pdf.html",
    ) -> None:
        self.provider = provider
        self.loader = loader
        self.output = output
        self.errors = errors if errors is not None else ErrorLog()
        self.max_workers = max(max_workers, 1)
        self.main_tag = main_tag
        self.output_suffix = output_suffix

    @classmethod
    def from_config(cls, config: MergeConfig, *, errors: Optional[ErrorLog] = None) -> "PdfBuilder":
        return cls(
            DocumentProvider(config.docset_dir, url_type=config.url_type),
            YamlTocLoader(config.docset_dir),
            Output(config.output_dir, encoding=config.encoding),
            errors=errors,
            max_workers=config.max_workers,
            main_tag=config.main_tag,
            output_suffix=config.output_suffix,
        )

    # ---- Multi-TOC build ----------------------------------------------------

    def build(self, toc_paths: Iterable[Path]) -> List[MergeResult]:
        """Merge every TOC; results are returned in input order."""

        toc_paths = [Path(p) for p in toc_paths]
        if not toc_paths:
            return []

        logger.info("Building PDF HTML for %d TOC(s)", len(toc_paths))
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(toc_paths))) as executor:
            return list(executor.map(self._build_and_report, toc_paths))

    def _build_and_report(self, toc_path: Path) -> MergeResult:
        try:
            return self.build_toc(toc_path)
        except MergeError as exc:
            if exc.toc is None:
                exc.toc = toc_path
            error = exc
        except (OSError, ValueError) as exc:
            error = MergeError(f"Failed to load TOC: {exc}", toc=toc_path)

        self.errors.add(error)
        logger.error("PDF build failed: %s", error)
        return MergeResult(toc_path=toc_path, status=MergeStatus.FAILED, error=str(error))

    # ---- Single TOC ---------------------------------------------------------

    def build_toc(self, toc_path: Path) -> MergeResult:
        start = perf_counter()
        root = self.loader.load(toc_path)
        merged_path = self.provider.get_toc_output_path(toc_path, self.output_suffix)
        transformer = self._transformer(directory_of(merged_path))

        nodes = flatten_toc(root)
        htmls = self._render_nodes(nodes, transformer)

        # Opened only once every page rendered so a failed merge leaves no artifact.
        with self.output.write_stream(merged_path) as stream:
            pages_written = self._write(htmls, stream)

        pages_missing = _count_missing(nodes, htmls)
        logger.info(
            "Merged %s -> %s: %d page(s), %d missing (%.1fs)",
            toc_path,
            merged_path,
            pages_written,
            pages_missing,
            perf_counter() - start,
        )
        return MergeResult(
            toc_path=toc_path,
            status=MergeStatus.SUCCEEDED,
            output_path=self.output.path_of(merged_path),
            nodes_visited=len(nodes),
            pages_written=pages_written,
            pages_missing=pages_missing,
        )

    def render(self, root: TocNode) -> List[Optional[str]]:
        """Transform every node of ``root``; the list follows flatten order."""

        return self._render_nodes(flatten_toc(root), self._transformer(""))

    def merge(self, root: TocNode, stream: TextIO) -> Tuple[int, int]:
        """Write the merged document of ``root`` to ``stream``.

        Returns the number of pages written and the number of documents
        without rendered HTML.
        """

        nodes = flatten_toc(root)
        htmls = self._render_nodes(nodes, self._transformer(""))
        return self._write(htmls, stream), _count_missing(nodes, htmls)

    def _transformer(self, merged_dir: str) -> PageTransformer:
        return PageTransformer(
            self.provider,
            self.output,
            merged_dir=merged_dir,
            main_tag=self.main_tag,
        )

    def _render_nodes(
        self,
        nodes: Sequence[TocNode],
        transformer: PageTransformer,
    ) -> List[Optional[str]]:
        htmls: List[Optional[str]] = [None] * len(nodes)
        if not nodes:
            return htmls

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures: Dict[Future[Optional[str]], int] = {
                executor.submit(transformer.transform, node): index for index, node in enumerate(nodes)
            }
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()

            failed = sorted(
                (futures[future], future) for future in done if future.exception() is not None
            )
            if failed:
                raise failed[0][1].exception()  # type: ignore[misc]

            for future, index in futures.items():
                htmls[index] = future.result()
        return htmls

    @staticmethod
    def _write(htmls: Iterable[Optional[str]], stream: TextIO) -> int:
        written = 0
        for html in htmls:
            if html is None:
                continue
            stream.write(html)
            written += 1
        return written


def _count_missing(nodes: Sequence[TocNode], htmls: Sequence[Optional[str]]) -> int:
    return sum(1 for node, html in zip(nodes, htmls) if node.document is not None and html is None)


__all__ = ["PdfBuilder"]
