"""Command line entry point: merge the rendered pages of TOC files for PDF conversion."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from tocmerge.config_loader import load_merge_config
from tocmerge.errors import ErrorLog
from tocmerge.merge.builder import PdfBuilder
from tocmerge.models.configs import MergeConfig, UrlType
from tocmerge.settings import Settings, get_settings


logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or get_settings()
    parser = argparse.ArgumentParser(
        description="Merge the rendered pages of each TOC into one HTML document for PDF conversion."
    )
    parser.add_argument(
        "tocs",
        nargs="*",
        type=Path,
        help="TOC files to merge (default: the 'tocs' list of --config)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML, TOML or JSON merge config")
    parser.add_argument("--docset", type=Path, default=None, help="Docset root holding the source documents")
    parser.add_argument("--output", type=Path, default=None, help="Directory of the rendered site")
    parser.add_argument(
        "--url-type",
        choices=[url_type.value for url_type in UrlType],
        default=None,
        help="URL style the site was rendered with",
    )
    parser.add_argument("--max-workers", type=int, default=None, help="Pages transformed in parallel")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace, settings: Settings) -> MergeConfig:
    """Combine CLI flags, the config file and environment settings, in that priority."""

    if args.config is not None:
        config = load_merge_config(args.config)
    else:
        config = MergeConfig(
            docset_dir=settings.docset_dir.resolve(),
            output_dir=settings.output_dir.resolve(),
            url_type=settings.url_type,
            max_workers=settings.max_workers,
        )

    overrides: Dict[str, Any] = {}
    if args.docset is not None:
        overrides["docset_dir"] = args.docset.resolve()
    if args.output is not None:
        overrides["output_dir"] = args.output.resolve()
    if args.url_type is not None:
        overrides["url_type"] = UrlType(args.url_type)
    if args.max_workers is not None:
        overrides["max_workers"] = args.max_workers
    if args.tocs:
        overrides["tocs"] = [toc.resolve() for toc in args.tocs]

    if not overrides:
        return config
    return MergeConfig.model_validate({**config.model_dump(), **overrides})


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValueError as exc:
        logging.basicConfig(format=_LOG_FORMAT)
        logger.error("Invalid TOCMERGE_* environment settings: %s", exc)
        return 1

    args = parse_args(argv, settings)
    logging.basicConfig(level=args.log_level.upper(), format=_LOG_FORMAT)

    try:
        config = resolve_config(args, settings)
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if not config.tocs:
        logger.error("No TOC files to merge; pass them as arguments or list them under 'tocs'")
        return 1

    errors = ErrorLog()
    builder = PdfBuilder.from_config(config, errors=errors)
    results = builder.build(config.tocs)

    succeeded = sum(1 for result in results if result.succeeded)
    logger.info("PDF HTML build finished: %d succeeded, %d failed", succeeded, len(errors))
    return 1 if errors.has_errors else 0


if __name__ == "__main__":
    sys.exit(main())
