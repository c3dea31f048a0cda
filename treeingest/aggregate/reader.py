"""Per-file stat/read with local failure recovery."""

from __future__ import annotations

import html
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .types import FileRecord

logger = logging.getLogger(__name__)

CHARS_PER_TOKEN = 16
READ_ERROR_PREFIX = "Error reading file: "


def estimate_tokens(text: str) -> int:
    """Return ``ceil(len(text) / 16)``."""
    return -(-len(text) // CHARS_PER_TOKEN)


def escape_markup(text: str) -> str:
    """Escape ``& < > " '`` for embedding in a markup document."""
    return html.escape(text, quote=True)


@dataclass(frozen=True)
class FileOutcome:
    """One file's record plus its size/token contribution to the summary."""

    record: FileRecord
    size: int = 0
    tokens: int = 0
    ok: bool = True


def read_file_outcome(path: str | os.PathLike[str], relative_path: str) -> FileOutcome:
    """Stat and strictly UTF-8 decode ``path``.

    Failures return an error record contributing nothing to the totals.
    """
    target = Path(path)
    try:
        size = int(target.stat().st_size)
        content = target.read_bytes().decode("utf-8")
    except (OSError, ValueError) as exc:
        logger.debug("Skipping %s: not readable as text (%s)", target, exc)
        return FileOutcome(
            record=FileRecord(path=relative_path, content=f"{READ_ERROR_PREFIX}{escape_markup(str(exc))}"),
            ok=False,
        )
    return FileOutcome(
        record=FileRecord(path=relative_path, content=escape_markup(content)),
        size=size,
        tokens=estimate_tokens(content),
    )


__all__ = [
    "CHARS_PER_TOKEN",
    "READ_ERROR_PREFIX",
    "FileOutcome",
    "escape_markup",
    "estimate_tokens",
    "read_file_outcome",
]
