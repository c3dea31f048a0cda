"""Fold discovered file paths into a nested, insertion-ordered tree."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path, PurePath

from .types import DirectoryNode, FileNode, TreeNode

_NestedLevel = dict[str, "_NestedLevel"]


def relative_path_parts(root: str | os.PathLike[str] | None, path: str | os.PathLike[str]) -> tuple[str, ...]:
    """Split ``path`` into segments relative to ``root``.

    Relative inputs are taken as already root-relative. ``.`` and empty
    segments are dropped so a path equal to ``root`` yields ``()``.
    """
    raw = os.fspath(path)
    if root is not None and os.path.isabs(raw):
        raw = os.path.relpath(raw, os.fspath(root))
    return tuple(part for part in PurePath(raw).parts if part not in ("", "."))


def relative_posix_path(root: str | os.PathLike[str] | None, path: str | os.PathLike[str]) -> str:
    """Return ``path`` relative to ``root`` joined with ``/`` separators."""
    return "/".join(relative_path_parts(root, path))


def _freeze(level: _NestedLevel) -> tuple[TreeNode, ...]:
    """Convert a nested dict level into tagged nodes, keeping key order."""
    nodes: list[TreeNode] = []
    for name, sublevel in level.items():
        if sublevel:
            nodes.append(DirectoryNode(name=name, children=_freeze(sublevel)))
        else:
            nodes.append(FileNode(name=name))
    return tuple(nodes)


def build_path_tree(
    root: str | os.PathLike[str] | None,
    paths: Iterable[str | os.PathLike[str]],
    root_name: str | None = None,
) -> DirectoryNode:
    """Build a tree from ``paths`` in discovery order.

    Siblings appear in the order their first descendant was discovered; no
    sorting is applied. A segment with descendants becomes a directory, a
    segment without any becomes a file.
    """
    nested: _NestedLevel = {}
    for path in paths:
        current = nested
        for part in relative_path_parts(root, path):
            current = current.setdefault(part, {})

    if root_name is None:
        root_name = Path(root).name if root is not None else ""
    return DirectoryNode(name=root_name, children=_freeze(nested))


__all__ = [
    "build_path_tree",
    "relative_path_parts",
    "relative_posix_path",
]
