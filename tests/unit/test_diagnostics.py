import json
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from posterforge_core.config import load_config
from posterforge_core.diagnostics import build_doctor_payload, redact


class DiagnosticsTests(unittest.TestCase):
    def test_payload_shape(self):
        cfg = load_config(Path("/tmp/nonexistent-posterforge-config.json"))
        payload = build_doctor_payload(cfg)
        for key in ("ts_utc", "platform", "python", "pillow", "config", "fonts"):
            self.assertIn(key, payload)
        self.assertEqual([f["id"] for f in payload["fonts"]], ["clash", "inter", "borel", "archivo"])
        for entry in payload["fonts"]:
            self.assertEqual(set(entry["faces"]), {"500", "900"})
        json.dumps(payload)

    def test_redact_nested_secrets(self):
        out = redact({"api_key": "x", "nested": [{"password": "y", "ok": 1}]})
        self.assertEqual(out["api_key"], "***REDACTED***")
        self.assertEqual(out["nested"][0]["password"], "***REDACTED***")
        self.assertEqual(out["nested"][0]["ok"], 1)


if __name__ == "__main__":
    unittest.main()
