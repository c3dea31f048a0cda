"""Extension-based text/non-text classification.

Content is never inspected: a binary file carrying an allow-listed extension
still classifies as text and is attempted for reading downstream.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

TEXT_FILE_EXTENSIONS: frozenset[str] = frozenset(
    {
        # Programming languages
        ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".c", ".cpp", ".cs", ".go", ".rb", ".php",
        ".html", ".css", ".scss", ".sass", ".less", ".vue", ".svelte",
        # Data formats
        ".json", ".xml", ".yaml", ".yml", ".toml", ".ini", ".env",
        # Documentation
        ".md", ".txt", ".rst", ".tex",
        # Configuration
        ".config", ".conf", ".cfg",
        # Shell scripts
        ".sh", ".bash", ".zsh", ".fish",
        # Other common text formats
        ".csv", ".sql", ".graphql", ".prisma",
    }
)


def normalize_extension(ext: str) -> str:
    """Return ``ext`` lowercased with exactly one leading dot, or ``""``."""
    stripped = ext.strip().lower().lstrip(".")
    return f".{stripped}" if stripped else ""


def build_text_extensions(
    extra: Iterable[str] = (),
    excluded: Iterable[str] = (),
) -> frozenset[str]:
    """Derive an allow-list from the defaults plus additions and removals."""
    allowed = set(TEXT_FILE_EXTENSIONS)
    allowed.update(ext for ext in map(normalize_extension, extra) if ext)
    allowed.difference_update(map(normalize_extension, excluded))
    return frozenset(allowed)


def file_extension(path: str | os.PathLike[str]) -> str:
    """Return the lowercased final extension of the last path segment."""
    name = os.path.basename(os.fspath(path))
    return os.path.splitext(name)[1].lower()


def is_text_file(path: str | os.PathLike[str], extensions: frozenset[str] | None = None) -> bool:
    """Return whether ``path`` carries an allow-listed text extension."""
    allowed = TEXT_FILE_EXTENSIONS if extensions is None else extensions
    ext = file_extension(path)
    return bool(ext) and ext in allowed


__all__ = [
    "TEXT_FILE_EXTENSIONS",
    "build_text_extensions",
    "file_extension",
    "is_text_file",
    "normalize_extension",
]
