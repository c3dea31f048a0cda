"""Directory-structure aggregation engine.

Filters discovered paths by extension, reads and measures text files
concurrently, and assembles tree, summary, and labeled contents into one
immutable ``ScanResult``.
"""

from __future__ import annotations

from .types import FileRecord, ScanResult, SummaryInfo
from .reader import READ_ERROR_PREFIX, FileOutcome, escape_markup, estimate_tokens, read_file_outcome
from .engine import (
    DEFAULT_MAX_CONCURRENCY,
    check_max_concurrency,
    NO_WORKSPACE_MESSAGE,
    read_file_outcomes,
    resolve_root,
    scan,
    scan_async,
    summarize,
    unavailable_result,
)

__all__ = [
    "FileRecord",
    "ScanResult",
    "SummaryInfo",
    "READ_ERROR_PREFIX",
    "FileOutcome",
    "escape_markup",
    "estimate_tokens",
    "read_file_outcome",
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
