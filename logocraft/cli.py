"""Command line interface for LogoCraft."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from .archive import DEFAULT_ARCHIVE_NAME, write_archive
from .catalog import DEFAULT_CATALOG, FormatCatalog
from .errors import DecodeError
from .parameters import DEFAULT_PARAMETERS, ProcessingParameters
from .pipeline import render_batch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a logo into PNG and monochrome BMP variants"
    )
    parser.add_argument("source", type=Path, nargs="?", help="Path to the source logo")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_ARCHIVE_NAME),
        help=f"Archive to write, or a directory for {DEFAULT_ARCHIVE_NAME}",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="formats",
        action="append",
        default=None,
        help="Format key to render (repeatable; default: every catalog entry)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help=f"Binarization cut point for BMP output (default: {DEFAULT_PARAMETERS.threshold})",
    )
    parser.add_argument(
        "--dpi",
        type=int,
        default=None,
        help=f"Resolution written into BMP headers (default: {DEFAULT_PARAMETERS.dpi})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of formats rendered in parallel",
    )
    parser.add_argument(
        "--params",
        type=Path,
        default=None,
        help="Optional JSON file overriding the default processing parameters",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Optional JSON file replacing the built-in format catalog",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        default=None,
        help="Optional path to write a JSON summary of the rendered formats",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="Print the format catalog and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    return parser


def load_parameters(path: Path | None) -> ProcessingParameters:
    if path is None:
        return DEFAULT_PARAMETERS
    with Path(path).open("r", encoding="utf-8") as fp:
        data = json.load(fp)
    return ProcessingParameters(**data)


def load_catalog(path: Path | None) -> FormatCatalog:
    if path is None:
        return DEFAULT_CATALOG
    return FormatCatalog.from_json(path)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    catalog = load_catalog(args.catalog)
    if args.list_formats:
        for spec in catalog.values():
            print(f"{spec.format_key}\t{spec.width}x{spec.height}\t{spec.content_type}")
        return 0

    if args.source is None:
        parser.error("the following arguments are required: source")

    overrides = {
        name: value
        for name, value in (
            ("threshold", args.threshold),
            ("dpi", args.dpi),
            ("max_workers", args.workers),
        )
        if value is not None
    }
    try:
        params = dataclasses.replace(load_parameters(args.params), **overrides)
    except ValueError as exc:
        parser.error(str(exc))

    formats = args.formats or list(catalog)
    try:
        source = args.source.read_bytes()
        result = render_batch(source, formats, catalog, params)
    except (DecodeError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for key, reason in result.failures.items():
        print(f"skipped {key}: {reason}", file=sys.stderr)
    if not result.ok:
        return 1

    archive_path = write_archive(
        args.output, result.assets, compress_level=params.archive_compress_level
    )
    logger.info("Wrote %d files to %s", len(result.assets), archive_path)

    if args.metadata:
        summary = json.dumps(result.as_dict(), indent=2, ensure_ascii=False)
        args.metadata.write_text(summary, encoding="utf-8")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
