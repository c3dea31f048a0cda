"""Tests for folding discovery-ordered paths into tagged tree nodes."""

from __future__ import annotations

import unittest
from pathlib import Path

from treeingest.file_tree_model import (
    DirectoryNode,
    FileNode,
    build_path_tree,
    relative_path_parts,
    relative_posix_path,
)


class BuildPathTreeTests(unittest.TestCase):
    def test_children_follow_discovery_order_without_sorting(self) -> None:
        tree = build_path_tree("/proj", ["zeta.py", "src/b.py", "alpha.md", "src/a.py"])

        self.assertEqual(tree.name, "proj")
        self.assertEqual([child.name for child in tree.children], ["zeta.py", "src", "alpha.md"])
        src = tree.children[1]
        self.assertIsInstance(src, DirectoryNode)
        self.assertEqual(src.children, (FileNode("b.py"), FileNode("a.py")))

    def test_absolute_paths_are_made_relative_to_root(self) -> None:
        root = Path("/work/proj")
        tree = build_path_tree(root, [root / "pkg" / "mod.py", root / "setup.cfg"])

        self.assertEqual(
            tree.children,
            (DirectoryNode("pkg", (FileNode("mod.py"),)), FileNode("setup.cfg")),
        )

    def test_repeated_paths_insert_once(self) -> None:
        tree = build_path_tree(None, ["a/b.txt", "a/b.txt"], root_name="root")
        self.assertEqual(tree.children, (DirectoryNode("a", (FileNode("b.txt"),)),))

    def test_relative_helpers_drop_dot_segments(self) -> None:
        self.assertEqual(relative_path_parts("/r", "/r"), ())
        self.assertEqual(relative_path_parts("/r", "./x/y.py"), ("x", "y.py"))
        self.assertEqual(relative_posix_path("/r", "/r/x/y.py"), "x/y.py")


if __name__ == "__main__":
    unittest.main()
