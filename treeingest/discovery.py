"""Ordered recursive file enumeration with glob exclusions.

Stands in for the host-provided ``findFiles('**/*', exclude)`` lister: it
returns every file under a root in a stable order, with excluded
directories pruned before descent.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .gitignore import IgnoredPaths, list_ignored_paths

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_GLOBS: tuple[str, ...] = ("**/node_modules/**", "**/.git/**")


def _split_alternatives(body: str) -> list[str]:
    """Split a brace body on top-level commas (``a,{b,c}`` -> ``a``, ``{b,c}``)."""
    parts: list[str] = []
    depth = 0
    start = 0
    for idx, ch in enumerate(body):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(body[start:idx])
            start = idx + 1
    parts.append(body[start:])
    return parts


def _closing_brace(pattern: str, open_idx: int) -> int:
    """Return the index of the ``}`` matching ``pattern[open_idx]``, or -1."""
    depth = 0
    for idx in range(open_idx, len(pattern)):
        if pattern[idx] == "{":
            depth += 1
        elif pattern[idx] == "}":
            depth -= 1
            if depth == 0:
                return idx
    return -1


def _translate(pattern: str) -> str:
    out: list[str] = []
    idx = 0
    while idx < len(pattern):
        if pattern.startswith("**/", idx):
            out.append("(?:.*/)?")
            idx += 3
        elif pattern.startswith("**", idx):
            out.append(".*")
            idx += 2
        elif pattern[idx] == "*":
            out.append("[^/]*")
            idx += 1
        elif pattern[idx] == "?":
            out.append("[^/]")
            idx += 1
        elif pattern[idx] == "{" and (close := _closing_brace(pattern, idx)) != -1:
            alternatives = _split_alternatives(pattern[idx + 1 : close])
            out.append("(?:" + "|".join(_translate(alt) for alt in alternatives) + ")")
            idx = close + 1
        else:
            out.append(re.escape(pattern[idx]))
            idx += 1
    return "".join(out)


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``/``-separated glob.

    ``**/`` matches zero or more leading segments, ``**`` matches anything,
    ``*`` and ``?`` stay within one segment, and ``{a,b}`` matches either
    alternative. An unmatched ``{`` is literal.
    """
    return re.compile(_translate(pattern))


@dataclass(frozen=True)
class ExcludeMatcher:
    """Compiled exclusion globs matched against root-relative POSIX paths."""

    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def from_globs(cls, globs: Iterable[str]) -> "ExcludeMatcher":
        return cls(patterns=tuple(glob_to_regex(glob) for glob in globs if glob))

    def matches_file(self, rel_path: str) -> bool:
        return any(pattern.fullmatch(rel_path) for pattern in self.patterns)

    def matches_dir(self, rel_dir: str) -> bool:
        """Return whether everything below ``rel_dir`` is excluded."""
        candidate = f"{rel_dir}/"
        return any(pattern.fullmatch(candidate) for pattern in self.patterns)


def _classify_entry(entry: os.DirEntry[str]) -> str | None:
    """Return ``"dir"`` for real directories, ``"file"`` for files, else ``None``.

    Symlinks to directories, broken symlinks, and special files are skipped.
    Symlinks to regular files count as files.
    """
    try:
        if entry.is_dir(follow_symlinks=False):
            return "dir"
        if entry.is_symlink() and entry.is_dir():
            return None
        return "file" if entry.is_file() else None
    except OSError:
        return None


def discover_files(
    root: str | os.PathLike[str],
    exclude: Iterable[str] = DEFAULT_EXCLUDE_GLOBS,
    *,
    show_hidden: bool = True,
    skip_gitignored: bool = False,
) -> list[Path]:
    """Return absolute paths of all files under ``root`` in discovery order.

    Each directory lists its files (by name) before descending into its
    subdirectories (by name). Symlinked directories are not followed and do
    not appear. ``show_hidden=False`` drops dot-prefixed files and
    directories. Unreadable directories are logged and skipped.
    """
    root_path = Path(os.path.abspath(os.fspath(root)))
    matcher = ExcludeMatcher.from_globs(exclude)
    ignored: IgnoredPaths | None = list_ignored_paths(root_path) if skip_gitignored else None
    found: list[Path] = []

    def excluded(rel: str, is_dir: bool) -> bool:
        if matcher.matches_dir(rel) if is_dir else matcher.matches_file(rel):
            return True
        return ignored is not None and ignored.covers(rel)

    def walk(directory: Path, rel_prefix: str) -> None:
        files: list[tuple[str, Path]] = []
        subdirs: list[tuple[str, Path]] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    if not show_hidden and entry.name.startswith("."):
                        continue
                    kind = _classify_entry(entry)
                    if kind == "dir":
                        subdirs.append((entry.name, Path(entry.path)))
                    elif kind == "file":
                        files.append((entry.name, Path(entry.path)))
        except OSError as exc:
            logger.warning("Cannot list %s: %s", directory, exc)
            return

        for name, path in sorted(files):
            if not excluded(f"{rel_prefix}{name}", is_dir=False):
                found.append(path)
        for name, path in sorted(subdirs):
            rel = f"{rel_prefix}{name}"
            if not excluded(rel, is_dir=True):
                walk(path, f"{rel}/")

    walk(root_path, "")
    logger.debug("Discovered %d files under %s", len(found), root_path)
    return found


__all__ = [
    "DEFAULT_EXCLUDE_GLOBS",
    "ExcludeMatcher",
    "discover_files",
    "glob_to_regex",
]
