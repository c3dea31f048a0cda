"""Tests for text, HTML, and JSON document rendering."""

from __future__ import annotations

import json
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from treeingest.aggregate import scan, unavailable_result
from treeingest.export import (
    language_for_path,
    render_document,
    render_html_document,
    render_text_document,
)


class ExportTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "demo"
        self.root.mkdir()
        (self.root / "src").mkdir()
        (self.root / "src" / "app.py").write_text("if a < b and c > d:\n    pass\n", encoding="utf-8")
        (self.root / "README.md").write_text("Use ```code``` & enjoy\n", encoding="utf-8")
        (self.root / "logo.png").write_bytes(b"\x89PNG")
        self.result = scan(self.root, ["src/app.py", "README.md", "logo.png"])

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_text_document_has_summary_tree_and_unescaped_sections(self) -> None:
        document = render_text_document(self.result)

        self.assertTrue(document.startswith("Summary:\nFiles analyzed: 2\n"))
        self.assertIn("Estimated Tokens: 4", document)
        self.assertIn("Directory structure:\ndemo/\n   ├── src/\n", document)
        self.assertIn("   └── logo.png\n", document)
        self.assertIn("File: src/app.py\n", document)
        self.assertIn("```python\nif a < b and c > d:\n    pass\n```\n", document)
        self.assertNotIn("File: logo.png", document)

    def test_text_document_fence_outgrows_backticks_in_body(self) -> None:
        document = render_text_document(self.result)
        self.assertIn("````markdown\nUse ```code``` & enjoy\n````", document)

    def test_html_document_embeds_escaped_content_once(self) -> None:
        document = render_html_document(self.result, generated_at=datetime(2024, 1, 2, 3, 4, 5))

        self.assertIn("<title>demo</title>", document)
        self.assertIn("if a &lt; b and c &gt; d:", document)
        self.assertNotIn("&amp;lt;", document)
        self.assertIn("Use ```code``` &amp; enjoy", document)
        self.assertIn("Files analyzed: 2", document)
        self.assertIn("Updated 03:04:05", document)

    def test_json_document_uses_camel_case_summary(self) -> None:
        payload = json.loads(render_document(self.result, "json"))

        self.assertEqual(payload["summary"]["fileCount"], 2)
        self.assertEqual([item["path"] for item in payload["contents"]], ["src/app.py", "README.md"])
        self.assertEqual(payload["structure"], self.result.structure)

    def test_unavailable_result_renders_sentinel(self) -> None:
        document = render_text_document(unavailable_result())
        self.assertIn("No workspace folder open", document)
        self.assertIn("Size: 0.00 B", document)

    def test_unknown_format_raises(self) -> None:
        with self.assertRaises(ValueError):
            render_document(self.result, "pdf")


class LanguageForPathTests(unittest.TestCase):
    def test_known_and_unknown_extensions(self) -> None:
        self.assertEqual(language_for_path("src/app.py"), "python")
        self.assertEqual(language_for_path("notes.unknownext"), "")


if __name__ == "__main__":
    unittest.main()
