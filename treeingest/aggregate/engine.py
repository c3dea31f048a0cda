"""Concurrent aggregation of discovered paths into one scan result.

Text-classified files are stat'ed and read on an asyncio event loop, with the
blocking filesystem calls pushed to worker threads and fan-out bounded by a
semaphore. Totals are a fold over per-file outcomes, so they never depend on
completion order. The tree is built from every discovered path, text or not.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from ..classifier import is_text_file
from ..file_tree_model import build_path_tree, relative_posix_path, render_structure
from .reader import FileOutcome, read_file_outcome
from .types import ScanResult, SummaryInfo

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 64
NO_WORKSPACE_MESSAGE = "No workspace folder open"

PathInput = str | os.PathLike[str]


def unavailable_result() -> ScanResult:
    """Return the sentinel result used when no root directory is available."""
    return ScanResult(structure=NO_WORKSPACE_MESSAGE, summary=SummaryInfo(), contents=())


def resolve_root(root: PathInput | None) -> Path | None:
    """Return ``root`` as an absolute directory path, or ``None`` if unusable."""
    if root is None or os.fspath(root) == "":
        return None
    candidate = Path(os.path.abspath(os.fspath(root)))
    if not candidate.is_dir():
        return None
    return candidate


def summarize(file_count: int, outcomes: Iterable[FileOutcome]) -> SummaryInfo:
    """Fold per-file contributions into final totals."""
    total_size = 0
    estimated_tokens = 0
    for outcome in outcomes:
        total_size += outcome.size
        estimated_tokens += outcome.tokens
    return SummaryInfo(file_count=file_count, total_size=total_size, estimated_tokens=estimated_tokens)


def check_max_concurrency(max_concurrency: int | None) -> None:
    """Reject negative read bounds before any task is scheduled."""
    if max_concurrency is not None and max_concurrency < 0:
        raise ValueError(f"max_concurrency must be >= 0 or None, got {max_concurrency}")


async def read_file_outcomes(
    root: Path,
    paths: Sequence[PathInput],
    max_concurrency: int | None = DEFAULT_MAX_CONCURRENCY,
) -> list[FileOutcome]:
    """Read ``paths`` concurrently and return outcomes in input order.

    ``max_concurrency`` of ``None`` or ``0`` schedules every read at once.
    """
    check_max_concurrency(max_concurrency)
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def read_one(path: PathInput) -> FileOutcome:
        relative = relative_posix_path(root, path)
        target = Path(path) if os.path.isabs(os.fspath(path)) else root / path
        if semaphore is None:
            return await asyncio.to_thread(read_file_outcome, target, relative)
        async with semaphore:
            return await asyncio.to_thread(read_file_outcome, target, relative)

    return list(await asyncio.gather(*(read_one(path) for path in paths)))


async def scan_async(
    root: PathInput | None,
    discovered_paths: Iterable[PathInput],
    *,
    extensions: frozenset[str] | None = None,
    max_concurrency: int | None = DEFAULT_MAX_CONCURRENCY,
) -> ScanResult:
    """Aggregate ``discovered_paths`` under ``root`` into a ``ScanResult``.

    Raises ``ValueError`` for a negative ``max_concurrency``; every other
    problem is folded into the result.
    """
    check_max_concurrency(max_concurrency)
    root_path = resolve_root(root)
    if root_path is None:
        logger.info("No root directory available for scan: %r", root)
        return unavailable_result()

    discovered = list(discovered_paths)
    text_paths = [path for path in discovered if is_text_file(path, extensions)]
    logger.debug(
        "Scanning %s: %d discovered, %d text files",
        root_path,
        len(discovered),
        len(text_paths),
    )

    outcomes = await read_file_outcomes(root_path, text_paths, max_concurrency)
    summary = summarize(len(text_paths), outcomes)
    failures = sum(1 for outcome in outcomes if not outcome.ok)
    if failures:
        logger.info("%d of %d text files could not be read", failures, len(text_paths))

    tree = build_path_tree(root_path, discovered)
    return ScanResult(
        structure=render_structure(tree),
        summary=summary,
        contents=tuple(outcome.record for outcome in outcomes),
        root=root_path,
    )


def scan(
    root: PathInput | None,
    discovered_paths: Iterable[PathInput],
    *,
    extensions: frozenset[str] | None = None,
    max_concurrency: int | None = DEFAULT_MAX_CONCURRENCY,
) -> ScanResult:
    """Blocking wrapper around ``scan_async`` for non-async callers."""
    return asyncio.run(
        scan_async(
            root,
            discovered_paths,
            extensions=extensions,
            max_concurrency=max_concurrency,
        )
    )


__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "check_max_concurrency",
    "NO_WORKSPACE_MESSAGE",
    "read_file_outcomes",
    "resolve_root",
    "scan",
    "scan_async",
    "summarize",
    "unavailable_result",
]
