import contextlib
import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ui.cli import EXIT_BAD_SETTINGS, EXIT_EMPTY_INPUT, EXIT_NO_TERMS, main

NOTE_A = "# Graphs\n\nKnowledge graphs link entities. Knowledge graphs power search.\n"
NOTE_B = "Entity linking feeds knowledge graphs, and search ranks knowledge graphs.\n"


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.vault = self.root / "vault"
        self.vault.mkdir()
        self.settings_path = self.root / "termindex.json"
        env = mock.patch.dict(os.environ, {"TERMINDEX_LOG_FILE": "", "TERMINDEX_LOG_LEVEL": "WARNING"})
        env.start()
        self.addCleanup(env.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *args: str) -> tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            code = main(["--vault", str(self.vault), "--settings", str(self.settings_path), *args])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_generate_vault_index(self) -> None:
        (self.vault / "a.md").write_text(NOTE_A, encoding="utf-8")
        (self.vault / "b.md").write_text(NOTE_B, encoding="utf-8")

        code, out, _ = self._run("generate", "--min-occurrences", "2")

        self.assertEqual(code, 0)
        self.assertIn("written to vault-index.md", out)
        content = (self.vault / "vault-index.md").read_text(encoding="utf-8")
        self.assertIn("- **knowledge graphs** (4 references)", content)

    def test_generate_with_bm25(self) -> None:
        (self.vault / "a.md").write_text(NOTE_A, encoding="utf-8")
        (self.vault / "b.md").write_text(NOTE_B, encoding="utf-8")

        code, _, _ = self._run("generate", "--min-occurrences", "2", "--weighting", "bm25")

        self.assertEqual(code, 0)
        self.assertTrue((self.vault / "vault-index.md").exists())

    def test_generate_empty_vault(self) -> None:
        code, _, err = self._run("generate")
        self.assertEqual(code, EXIT_EMPTY_INPUT)
        self.assertIn("No markdown files found in scope", err)

    def test_generate_no_terms(self) -> None:
        (self.vault / "a.md").write_text(NOTE_A, encoding="utf-8")
        (self.vault / "b.md").write_text(NOTE_B, encoding="utf-8")

        code, _, err = self._run("generate", "--min-occurrences", "99")

        self.assertEqual(code, EXIT_NO_TERMS)
        self.assertIn("min 99 occurrences", err)
        self.assertFalse((self.vault / "vault-index.md").exists())

    def test_settings_set_and_show(self) -> None:
        code, out, _ = self._run("settings", "set", "--top-n", "20", "--exclude", "templates, daily")
        self.assertEqual(code, 0)
        self.assertIn("top_n: 20", out)

        code, out, _ = self._run("settings", "show")
        self.assertEqual(code, 0)
        self.assertIn("excluded_folders: templates, daily", out)
        self.assertIn("min_occurrences: 10", out)

    def test_invalid_settings_file(self) -> None:
        self.settings_path.write_text('{"topN": -5}', encoding="utf-8")
        code, _, err = self._run("settings", "show")
        self.assertEqual(code, EXIT_BAD_SETTINGS)
        self.assertIn("Invalid settings file", err)

    def test_rejects_non_positive_numbers(self) -> None:
        with self.assertRaises(SystemExit):
            self._run("generate", "--top-n", "0")


if __name__ == "__main__":
    unittest.main()
