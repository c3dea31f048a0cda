"""Command-line front door for treeingest.

Parses CLI options, resolves the target directory, discovers and aggregates
its files, then writes the rendered document to stdout or a file.
"""

from __future__ import annotations

import argparse
import locale
import logging
import sys
from datetime import datetime
from pathlib import Path

from . import config
from .aggregate import scan
from .discovery import discover_files
from .export import render_document

LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"

logger = logging.getLogger(__name__)


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def configure_logging(verbose: bool) -> None:
    """Attach one stderr handler to the package logger."""
    package_logger = logging.getLogger("treeingest")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if package_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeingest",
        description="Aggregate a project's tree and text files into one prompt-friendly document.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Project directory. Defaults to current directory.")
    parser.add_argument(
        "--format",
        choices=config.EXPORT_FORMATS,
        default=None,
        help="Output document format (default: configured format, else text).",
    )
    parser.add_argument("-o", "--output", default=None, help="Write the document to this file instead of stdout.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="GLOB",
        help="Extra exclusion glob matched against root-relative paths; supports **, *, ? and {a,b}. Repeatable.",
    )
    parser.add_argument(
        "--no-default-excludes",
        action="store_true",
        help="Do not apply the configured/default exclusion globs.",
    )
    parser.add_argument("--skip-gitignored", action="store_true", help="Skip paths ignored by git.")
    parser.add_argument("--no-hidden", action="store_true", help="Skip dot-prefixed files and directories.")
    parser.add_argument(
        "--max-concurrency",
        type=_nonnegative_int,
        default=None,
        help="Maximum concurrent file reads; 0 means unbounded.",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist the given --format and --max-concurrency as config defaults.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-file diagnostics to stderr.")
    return parser


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments, scan the target directory, and emit the document.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error as exc:
        logger.warning("Cannot apply user locale, numbers use default grouping: %s", exc)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)
    if not root.exists():
        raise SystemExit(f"Path not found: {root}")
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")

    if args.save_defaults:
        if args.format is not None:
            config.save_default_format(args.format)
        if args.max_concurrency is not None:
            config.save_max_concurrency(args.max_concurrency)

    excludes = [] if args.no_default_excludes else list(config.load_exclude_globs())
    excludes.extend(args.exclude)
    max_concurrency = args.max_concurrency if args.max_concurrency is not None else config.load_max_concurrency()
    fmt = args.format or config.load_default_format()

    discovered = discover_files(
        root,
        excludes,
        show_hidden=not args.no_hidden,
        skip_gitignored=args.skip_gitignored,
    )
    result = scan(
        root,
        discovered,
        extensions=config.load_text_extensions(),
        max_concurrency=max_concurrency or None,
    )
    document = render_document(result, fmt, generated_at=datetime.now())

    if args.output is None:
        sys.stdout.write(document)
        return
    output_path = Path(args.output)
    try:
        output_path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot write {output_path}: {exc}") from exc
    logger.info("Wrote %s document for %d files to %s", fmt, result.summary.file_count, output_path)


if __name__ == "__main__":
    main()
