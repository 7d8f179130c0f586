import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from posterforge_core.logging_setup import JsonFormatter, configure_logging, get_logger, set_renderer_level


class LoggingTests(unittest.TestCase):
    def test_json_formatter_includes_event(self):
        record = logging.LogRecord("posterforge", logging.INFO, __file__, 1, "hello", None, None)
        record.event = "poster_exported"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["msg"], "hello")
        self.assertEqual(payload["event"], "poster_exported")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["component"], "app")

    def test_json_formatter_names_renderer_component(self):
        record = logging.LogRecord("posterforge.renderer", logging.WARNING, __file__, 1, "fallback", None, None)
        record.event = "font_fallback"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["component"], "renderer")
        self.assertEqual(payload["event"], "font_fallback")

    def test_set_renderer_level(self):
        renderer = logging.getLogger("posterforge.renderer")
        saved = renderer.level
        try:
            self.assertIs(set_renderer_level("debug"), renderer)
            self.assertEqual(renderer.level, logging.DEBUG)
            set_renderer_level("nonsense")
            self.assertEqual(renderer.level, logging.WARNING)
            set_renderer_level(logging.ERROR)
            self.assertEqual(renderer.level, logging.ERROR)
        finally:
            renderer.setLevel(saved)

    def test_configure_logging_writes_file(self):
        logger = get_logger()
        saved = list(logger.handlers)
        for handler in saved:
            logger.removeHandler(handler)
        try:
            with tempfile.TemporaryDirectory() as tmp:
                configured = configure_logging(console=False, directory=Path(tmp), renderer_level="INFO")
                self.assertEqual(logging.getLogger("posterforge.renderer").level, logging.INFO)
                self.assertIs(configured, logger)
                self.assertIs(configure_logging(console=False, directory=Path(tmp)), logger)
                for handler in logger.handlers:
                    handler.flush()
                lines = (Path(tmp) / "posterforge.log").read_text(encoding="utf-8").splitlines()
                self.assertEqual(json.loads(lines[0])["event"], "logging_configured")
                for handler in list(logger.handlers):
                    logger.removeHandler(handler)
                    handler.close()
        finally:
            for handler in saved:
                logger.addHandler(handler)
            logging.getLogger("posterforge.renderer").setLevel(logging.NOTSET)


if __name__ == "__main__":
    unittest.main()
