import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from skillchat.tutorials import (  # noqa: E402
    CuratedCatalog,
    CuratedEntry,
    clean_skill_name,
    get_default_catalog,
    normalize_skill,
)


class SkillNormalizerTests(unittest.TestCase):
    def test_lowercases_and_trims(self):
        self.assertEqual(normalize_skill("  Machine Learning \n"), "machine learning")

    def test_empty_and_blank_inputs(self):
        self.assertEqual(normalize_skill(""), "")
        self.assertEqual(normalize_skill("   "), "")

    def test_clean_skill_name_strips_punctuation(self):
        self.assertEqual(clean_skill_name(" Node.js "), "Nodejs")
        self.assertEqual(clean_skill_name("CI/CD"), "CICD")
        self.assertEqual(clean_skill_name("data-driven"), "data-driven")
        self.assertEqual(clean_skill_name("!!!"), "")


class CuratedCatalogTests(unittest.TestCase):
    def setUp(self):
        self.catalog = get_default_catalog()

    def test_default_catalog_keeps_declaration_order(self):
        keys = [entry.normalized_key for entry in self.catalog]
        self.assertEqual(len(keys), 15)
        self.assertEqual(keys[:3], ["python", "javascript", "react"])
        self.assertEqual(keys[-1], "kubernetes")

    def test_exact_match(self):
        self.assertEqual(self.catalog.lookup("docker"), "https://www.youtube.com/watch?v=fqMOX6JJhGo")
        found = self.catalog.match("docker")
        self.assertTrue(found.exact)

    def test_partial_match_when_input_contains_key(self):
        found = self.catalog.match("react native")
        self.assertIsNotNone(found)
        self.assertFalse(found.exact)
        self.assertEqual(found.entry.normalized_key, "react")

    def test_partial_match_when_key_contains_input(self):
        self.assertEqual(self.catalog.lookup("kube"), self.catalog.lookup("kubernetes"))

    def test_partial_match_takes_first_key_in_declaration_order(self):
        # Both "html" and "css" overlap; "html" is declared first.
        self.assertEqual(self.catalog.lookup("html css"), self.catalog.lookup("html"))

    def test_overlapping_keys_tie_break_follows_entry_order(self):
        java_first = CuratedCatalog(
            [
                CuratedEntry("java", "https://example.test/java"),
                CuratedEntry("javascript", "https://example.test/js"),
            ]
        )
        js_first = CuratedCatalog(
            [
                CuratedEntry("javascript", "https://example.test/js"),
                CuratedEntry("java", "https://example.test/java"),
            ]
        )
        self.assertEqual(java_first.lookup("javascript basics"), "https://example.test/java")
        self.assertEqual(js_first.lookup("javascript basics"), "https://example.test/js")
        # Exact match beats any earlier partial match.
        self.assertEqual(java_first.lookup("javascript"), "https://example.test/js")

    def test_no_match_returns_none(self):
        self.assertIsNone(self.catalog.lookup("authentication"))

    def test_empty_query_takes_first_declared_entry(self):
        # "" is contained in every key.
        found = self.catalog.match("")
        self.assertFalse(found.exact)
        self.assertEqual(self.catalog.lookup(""), self.catalog.lookup("python"))

    def test_duplicate_keys_are_rejected(self):
        with self.assertRaises(ValueError):
            CuratedCatalog(
                [
                    CuratedEntry("git", "https://example.test/a"),
                    CuratedEntry("git", "https://example.test/b"),
                ]
            )

    def test_from_json_rejects_duplicate_keys_after_normalization(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "videos.json"
            path.write_text('{"Git": "https://example.test/a", "git ": "https://example.test/b"}', encoding="utf-8")
            with self.assertRaises(ValueError):
                CuratedCatalog.from_json(path)

    def test_from_json_preserves_file_order(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "videos.json"
            path.write_text(
                json.dumps({"zeta": "https://example.test/z", "alpha": "https://example.test/a"}),
                encoding="utf-8",
            )
            catalog = CuratedCatalog.from_json(path)
        self.assertEqual([entry.normalized_key for entry in catalog], ["zeta", "alpha"])


if __name__ == "__main__":
    unittest.main()
