"""ASCII rendering for discovery-ordered path trees."""

from __future__ import annotations

from .types import DirectoryNode, TreeNode

TREE_BASE_PREFIX = "   "
BRANCH_MARKER = "├── "
LAST_BRANCH_MARKER = "└── "
BRANCH_CONTINUATION = "│   "
LAST_BRANCH_CONTINUATION = "    "
STRUCTURE_HEADING = "Directory structure:"


def format_root_label(root_name: str) -> str:
    """Return the heading line(s) placed above a rendered tree."""
    return f"{STRUCTURE_HEADING}\n{root_name}/"


def render_tree(root: DirectoryNode, prefix: str = TREE_BASE_PREFIX) -> str:
    """Render ``root``'s descendants depth-first, one newline-terminated row each.

    Directories get a trailing ``/``. The last sibling at each level is the
    final child in insertion order.
    """
    lines: list[str] = []

    def walk(children: tuple[TreeNode, ...], line_prefix: str) -> None:
        for idx, child in enumerate(children):
            last = idx == len(children) - 1
            marker = LAST_BRANCH_MARKER if last else BRANCH_MARKER
            if isinstance(child, DirectoryNode) and child.children:
                lines.append(f"{line_prefix}{marker}{child.name}/\n")
                walk(child.children, line_prefix + (LAST_BRANCH_CONTINUATION if last else BRANCH_CONTINUATION))
            else:
                lines.append(f"{line_prefix}{marker}{child.name}\n")

    walk(root.children, prefix)
    return "".join(lines)


def render_structure(root: DirectoryNode) -> str:
    """Return the root label followed by the rendered tree."""
    return f"{format_root_label(root.name)}\n{render_tree(root)}"


__all__ = [
    "TREE_BASE_PREFIX",
    "format_root_label",
    "render_structure",
    "render_tree",
]
