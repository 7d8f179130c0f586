import sys
import tempfile
import unittest
from io import BytesIO
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from PIL import Image

from posterforge_renderer.export import export_filename, export_raster, preview_data_url, save_raster
from posterforge_renderer.surface import PosterSurface


class ExportTests(unittest.TestCase):
    def _surface(self, ratio: float = 1.0) -> PosterSurface:
        surface = PosterSurface(device_pixel_ratio=ratio)
        surface.scale(ratio)
        surface.fill_style = "#341d7d"
        surface.fill_rect(0, 0, 1080, 1350)
        return surface

    def test_png_is_logical_size(self):
        data = export_raster(self._surface(2.0))
        self.assertTrue(data.startswith(b"\x89PNG"))
        with Image.open(BytesIO(data)) as img:
            self.assertEqual(img.size, (1080, 1350))

    def test_lossy_format_rejected(self):
        with self.assertRaises(ValueError):
            export_raster(self._surface(), format="JPEG")

    def test_filename_uses_epoch_millis(self):
        self.assertEqual(export_filename(now=1.5), "poster-1500.png")
        self.assertEqual(export_filename("flyer", now=2), "flyer-2000.png")

    def test_save_raster_writes_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = save_raster(self._surface(), Path(tmp) / "out", name="x.png")
            self.assertTrue(path.exists())
            self.assertEqual(path.name, "x.png")

    def test_preview_data_url(self):
        url = preview_data_url(self._surface())
        self.assertTrue(url.startswith("data:image/png;base64,"))


if __name__ == "__main__":
    unittest.main()
