"""Immutable result datatypes produced by one aggregation scan."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SummaryInfo:
    """Scan totals.

    ``file_count`` counts every text-classified file whether or not it could
    be read; ``total_size`` and ``estimated_tokens`` only include successful
    reads.
    """

    file_count: int = 0
    total_size: int = 0
    estimated_tokens: int = 0

    def to_dict(self) -> dict[str, int]:
        """Serialize with the camelCase keys downstream documents expect."""
        return {
            "fileCount": self.file_count,
            "totalSize": self.total_size,
            "estimatedTokens": self.estimated_tokens,
        }


@dataclass(frozen=True)
class FileRecord:
    """One labeled file body: escaped text or an ``Error reading file:`` line."""

    path: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "content": self.content}


@dataclass(frozen=True)
class ScanResult:
    """Terminal value of a scan; never mutated after construction."""

    structure: str
    summary: SummaryInfo
    contents: tuple[FileRecord, ...] = ()
    root: Path | None = None

    @property
    def available(self) -> bool:
        """Return whether the scan ran against a real root directory."""
        return self.root is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "structure": self.structure,
            "summary": self.summary.to_dict(),
            "contents": [record.to_dict() for record in self.contents],
        }


__all__ = [
    "FileRecord",
    "ScanResult",
    "SummaryInfo",
]
