"""CLI argument and default-path behavior tests.

Verifies how ``treeingest.cli.main`` chooses the target directory, applies
excludes, and where it writes the rendered document.
"""

from __future__ import annotations

import io
import json
import locale
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treeingest import cli, config


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name).resolve()
        patcher = mock.patch("treeingest.config.CONFIG_PATH", self.base / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

        self.root = self.base / "proj"
        (self.root / "node_modules").mkdir(parents=True)
        (self.root / "node_modules" / "dep.js").write_text("x", encoding="utf-8")
        (self.root / "main.py").write_text("print(1)\n", encoding="utf-8")
        (self.root / "notes.log").write_text("log\n", encoding="utf-8")

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.root)
            with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
                cli.main([])
        finally:
            os.chdir(previous_cwd)

        output = stdout.getvalue()
        self.assertIn("Files analyzed: 1", output)
        self.assertIn("proj/\n", output)
        self.assertIn("File: main.py", output)
        self.assertNotIn("node_modules", output)

    def test_json_output_written_to_file_with_extra_excludes(self) -> None:
        out_path = self.base / "out.json"

        cli.main(["--format", "json", "--exclude", "*.log", "-o", str(out_path), str(self.root)])

        payload = json.loads(out_path.read_text(encoding="utf-8"))
        self.assertEqual(payload["summary"], {"fileCount": 1, "totalSize": 9, "estimatedTokens": 1})
        self.assertNotIn("notes.log", payload["structure"])

    def test_no_default_excludes_includes_dependency_directories(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(["--no-default-excludes", "--format", "json", "--max-concurrency", "0", str(self.root)])

        payload = json.loads(stdout.getvalue())
        self.assertEqual([item["path"] for item in payload["contents"]], ["main.py", "node_modules/dep.js"])

    def test_main_applies_user_locale_before_formatting(self) -> None:
        with mock.patch("treeingest.cli.locale.setlocale") as setlocale, mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ):
            cli.main([str(self.root)])

        setlocale.assert_called_once_with(locale.LC_ALL, "")

    def test_unavailable_user_locale_is_not_fatal(self) -> None:
        with mock.patch("treeingest.cli.locale.setlocale", side_effect=locale.Error("unsupported locale setting")), mock.patch(
            "sys.stdout", new_callable=io.StringIO
        ) as stdout:
            cli.main([str(self.root)])

        self.assertIn("Files analyzed: 1", stdout.getvalue())

    def test_no_hidden_skips_dot_entries(self) -> None:
        (self.root / ".secrets.env").write_text("TOKEN=1\n", encoding="utf-8")

        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main(["--format", "json", "--no-hidden", str(self.root)])

        payload = json.loads(stdout.getvalue())
        self.assertNotIn(".secrets.env", payload["structure"])
        self.assertEqual([item["path"] for item in payload["contents"]], ["main.py"])

    def test_save_defaults_persists_format_and_concurrency(self) -> None:
        out_path = self.base / "out.html"

        cli.main(["--format", "html", "--max-concurrency", "3", "--save-defaults", "-o", str(out_path), str(self.root)])

        self.assertEqual(config.load_default_format(), "html")
        self.assertEqual(config.load_max_concurrency(), 3)
        self.assertTrue(out_path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>"))

        with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
            cli.main([str(self.root)])
        self.assertTrue(stdout.getvalue().startswith("<!DOCTYPE html>"))

    def test_options_are_not_persisted_without_save_defaults(self) -> None:
        with mock.patch("sys.stdout", new_callable=io.StringIO):
            cli.main(["--format", "json", str(self.root)])

        self.assertEqual(config.load_config(), {})

    def test_missing_path_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.base / "missing")])
        self.assertIn("Path not found", str(ctx.exception))

    def test_file_path_is_rejected(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            cli.main([str(self.root / "main.py")])
        self.assertIn("Not a directory", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
