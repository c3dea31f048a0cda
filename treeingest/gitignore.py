"""Git-ignore lookups keyed by root-relative POSIX paths.

One ``git ls-files`` call run from the scan root lists every ignored path
below it, already relative to that root. Discovery then checks its own
relative strings against the snapshot without touching the filesystem.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_LIST_IGNORED_ARGS = ("ls-files", "-z", "--others", "--ignored", "--exclude-standard", "--directory")


@dataclass(frozen=True)
class IgnoredPaths:
    """Ignored files and directories under a scan root, as ``a/b`` strings."""

    files: frozenset[str] = frozenset()
    dirs: frozenset[str] = frozenset()

    def covers(self, rel_path: str) -> bool:
        """Return whether ``rel_path`` or one of its parent directories is ignored."""
        if rel_path in self.files or rel_path in self.dirs:
            return True
        parent, sep, _name = rel_path.rpartition("/")
        while sep:
            if parent in self.dirs:
                return True
            parent, sep, _name = parent.rpartition("/")
        return False

    @classmethod
    def parse(cls, listing: bytes) -> "IgnoredPaths":
        """Split NUL-separated ``ls-files --directory`` output into files and dirs."""
        files: set[str] = set()
        dirs: set[str] = set()
        for raw in listing.split(b"\x00"):
            entry = raw.decode("utf-8", errors="surrogateescape")
            if not entry:
                continue
            if entry.endswith("/"):
                dirs.add(entry.rstrip("/"))
            else:
                files.add(entry)
        return cls(files=frozenset(files), dirs=frozenset(dirs))


def list_ignored_paths(root: Path) -> IgnoredPaths | None:
    """Ask git which paths under ``root`` are ignored.

    Returns ``None`` when git is missing or ``root`` is outside a work tree,
    which discovery treats as "nothing ignored".
    """
    if shutil.which("git") is None:
        logger.debug("git not found; gitignore filtering disabled")
        return None
    try:
        proc = subprocess.run(
            ["git", "-C", str(root), *_LIST_IGNORED_ARGS],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("Cannot list git-ignored paths under %s: %s", root, exc)
        return None
    return IgnoredPaths.parse(proc.stdout)


__all__ = [
    "IgnoredPaths",
    "list_ignored_paths",
]
