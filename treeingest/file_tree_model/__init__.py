"""Domain model for path trees rendered in aggregated project documents.

This package contains the non-I/O tree primitives:
- tagged file/directory node datatypes with ordered children
- folding of discovery-ordered paths into a nested tree
- ASCII branch rendering of a built tree
"""

from __future__ import annotations

from .types import DirectoryNode, FileNode, TreeNode
from .build import build_path_tree, relative_path_parts, relative_posix_path
from .render import TREE_BASE_PREFIX, format_root_label, render_structure, render_tree

__all__ = [
    "DirectoryNode",
    "FileNode",
    "TreeNode",
    "build_path_tree",
    "relative_path_parts",
    "relative_posix_path",
    "TREE_BASE_PREFIX",
    "format_root_label",
    "render_structure",
    "render_tree",
]
