"""Public package surface for treeingest.

Exports ``scan`` and ``discover_files`` for programmatic use and ``main``
for CLI invocation. Implementation lives in submodules.
"""

from __future__ import annotations

from .aggregate import FileRecord, ScanResult, SummaryInfo, scan, scan_async
from .classifier import is_text_file
from .discovery import discover_files


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "FileRecord",
    "ScanResult",
    "SummaryInfo",
    "discover_files",
    "is_text_file",
    "main",
    "scan",
    "scan_async",
]
