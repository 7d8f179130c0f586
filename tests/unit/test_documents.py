import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from posterforge_core.documents import PosterDocumentError, load_poster_document, save_poster_document
from posterforge_renderer.presets import GRADIENTS, default_poster


class PosterDocumentTests(unittest.TestCase):
    def test_missing_keys_come_from_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "poster.json"
            path.write_text(json.dumps({"title": "Launch Night", "align": "left"}), encoding="utf-8")
            poster = load_poster_document(path)
            self.assertEqual(poster.title, "Launch Night")
            self.assertEqual(poster.align, "left")
            self.assertEqual(poster.cta, default_poster().cta)

    def test_unknown_ids_fall_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "poster.json"
            path.write_text(json.dumps({"gradient": "plaid", "accent": "stars", "font": "comic"}), encoding="utf-8")
            with self.assertLogs("posterforge.renderer", level="WARNING"):
                poster = load_poster_document(path)
            self.assertIs(poster.gradient, GRADIENTS[0])
            self.assertEqual(poster.accent_preset.id, "waves")
            self.assertEqual(poster.font.id, "clash")

    def test_invalid_json_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "poster.json"
            path.write_text("[1, 2", encoding="utf-8")
            with self.assertRaises(PosterDocumentError):
                load_poster_document(path)
            path.write_text("[1, 2]", encoding="utf-8")
            with self.assertRaises(PosterDocumentError):
                load_poster_document(path)

    def test_missing_file_raises(self):
        with self.assertRaises(PosterDocumentError):
            load_poster_document(Path("/nonexistent/poster.json"))

    def test_save_writes_ids(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = save_poster_document(default_poster(), Path(tmp) / "nested" / "poster.json")
            raw = json.loads(path.read_text(encoding="utf-8"))
            self.assertEqual(raw["gradient"], "dawn")
            self.assertEqual(raw["date"], "SEP 15 • 8 PM")
            self.assertEqual(load_poster_document(path), default_poster())


if __name__ == "__main__":
    unittest.main()
