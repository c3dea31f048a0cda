"""Domain datatypes for discovery-ordered path trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileNode:
    """Leaf entry for one discovered file."""

    name: str


@dataclass(frozen=True)
class DirectoryNode:
    """Directory entry whose children keep discovery insertion order."""

    name: str
    children: tuple["TreeNode", ...] = ()


TreeNode = DirectoryNode | FileNode


__all__ = [
    "FileNode",
    "DirectoryNode",
    "TreeNode",
]
