import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from posterforge_renderer.surface import PosterSurface, SurfaceUnavailableError


class SurfaceTests(unittest.TestCase):
    def test_backing_store_follows_pixel_ratio(self):
        surface = PosterSurface(device_pixel_ratio=2.0)
        self.assertEqual(surface.pixel_size, (2160, 2700))
        self.assertEqual(surface.logical_image().size, (1080, 1350))

    def test_resize_resets_transform_and_state(self):
        surface = PosterSurface()
        surface.scale(3.0)
        surface.global_alpha = 0.3
        surface.text_align = "right"
        surface.resize(1.5)
        self.assertEqual(surface.current_scale, 1.0)
        self.assertEqual(surface.global_alpha, 1.0)
        self.assertEqual(surface.text_align, "left")

    def test_global_alpha_clamped(self):
        surface = PosterSurface(width=4, height=4)
        surface.global_alpha = 3
        self.assertEqual(surface.global_alpha, 1.0)
        surface.global_alpha = -1
        self.assertEqual(surface.global_alpha, 0.0)

    def test_fill_rect_applies_global_alpha(self):
        surface = PosterSurface(width=10, height=10)
        surface.fill_style = "#ffffff"
        surface.global_alpha = 0.5
        surface.fill_rect(0, 0, 10, 10)
        r, g, b, a = surface.image.getpixel((5, 5))
        self.assertEqual((r, g, b), (255, 255, 255))
        self.assertAlmostEqual(a, 128, delta=1)

    def test_scaled_fill_uses_logical_coordinates(self):
        surface = PosterSurface(width=10, height=10, device_pixel_ratio=2.0)
        surface.scale(2.0)
        surface.fill_style = "#ff0000"
        surface.fill_rect(0, 0, 5, 5)
        self.assertEqual(surface.image.getpixel((9, 9)), (255, 0, 0, 255))
        self.assertEqual(surface.image.getpixel((10, 10))[3], 0)

    def test_clear_rect(self):
        surface = PosterSurface(width=10, height=10)
        surface.fill_style = "#00ff00"
        surface.fill_rect(0, 0, 10, 10)
        surface.clear_rect(0, 0, 10, 10)
        self.assertIsNone(surface.image.getchannel("A").getbbox())

    def test_measure_text_grows_with_text(self):
        surface = PosterSurface()
        surface.font = "700 40px sans-serif"
        self.assertGreater(surface.measure_text("WWWW"), surface.measure_text("W"))
        self.assertEqual(surface.measure_text(""), 0.0)

    def test_release_makes_surface_unavailable(self):
        surface = PosterSurface(width=4, height=4)
        surface.release()
        self.assertFalse(surface.available)
        with self.assertRaises(SurfaceUnavailableError):
            _ = surface.image


if __name__ == "__main__":
    unittest.main()
