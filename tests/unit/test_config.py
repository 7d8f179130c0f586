import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from posterforge_core.config import AppConfig, load_config, normalize_pixel_ratio, resolve_output_dir, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.render.device_pixel_ratio, 1.0)
            self.assertEqual(cfg.export.filename_prefix, "poster")

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.render.device_pixel_ratio = 2.0
            cfg.export.output_dir = tmp
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.render.device_pixel_ratio, 2.0)
            self.assertEqual(resolve_output_dir(reloaded), Path(tmp))

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "render": {"device_pixel_ratio": 12, "font_dirs": "not-a-list"},
                "export": {"filename_prefix": "  "},
                "diagnostics": {"keep_log_files": 0},
                "unknown": {"x": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.device_pixel_ratio, 4.0)
            self.assertEqual(cfg.render.font_dirs, [])
            self.assertEqual(cfg.export.filename_prefix, "poster")
            self.assertEqual(cfg.diagnostics.keep_log_files, 2)

    def test_unreadable_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg, AppConfig())

    def test_malformed_numbers_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "abc",
                "render": {"device_pixel_ratio": "wide"},
                "diagnostics": {"keep_log_files": "many", "renderer_log_level": "loud"},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 1)
            self.assertEqual(cfg.render.device_pixel_ratio, 1.0)
            self.assertEqual(cfg.diagnostics.keep_log_files, 7)
            self.assertEqual(cfg.diagnostics.renderer_log_level, "WARNING")

    def test_renderer_log_level_is_upper_cased(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"diagnostics": {"renderer_log_level": " debug "}}), encoding="utf-8")
            self.assertEqual(load_config(path).diagnostics.renderer_log_level, "DEBUG")

    def test_normalize_pixel_ratio(self):
        self.assertEqual(normalize_pixel_ratio(100), 4.0)
        self.assertEqual(normalize_pixel_ratio(0.25), 1.0)
        self.assertEqual(normalize_pixel_ratio("2.5"), 2.5)
        self.assertEqual(normalize_pixel_ratio(None), 1.0)
        self.assertEqual(normalize_pixel_ratio(float("nan")), 1.0)


if __name__ == "__main__":
    unittest.main()
