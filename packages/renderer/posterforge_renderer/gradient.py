"""Two-stop linear gradients and their rasterization."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageColor

from .models import POSTER_HEIGHT, POSTER_WIDTH, GradientDirection, GradientPreset


def parse_color(value: str) -> tuple[int, int, int, int]:
    """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (or any Pillow colour name) to RGBA."""
    return ImageColor.getcolor(value, "RGBA")  # type: ignore[return-value]


@dataclass(frozen=True)
class LinearGradient:
    """Gradient line from (x0, y0) to (x1, y1) in logical units.

    Stop 0 is ``start`` and stop 1 is ``end``; points are projected onto the
    line and clamped, matching a canvas linear gradient.
    """

    x0: float
    y0: float
    x1: float
    y1: float
    start: str
    end: str

    def render(self, width: int, height: int, scale: float = 1.0) -> Image.Image:
        c0 = np.array(parse_color(self.start), dtype=np.float64)
        c1 = np.array(parse_color(self.end), dtype=np.float64)

        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        length_sq = dx * dx + dy * dy

        xs = (np.arange(width, dtype=np.float64) + 0.5) / scale
        ys = (np.arange(height, dtype=np.float64) + 0.5) / scale
        if length_sq == 0:
            t = np.zeros((height, width), dtype=np.float64)
        else:
            t = ((xs[None, :] - self.x0) * dx + (ys[:, None] - self.y0) * dy) / length_sq
            t = np.clip(t, 0.0, 1.0)

        rgba = c0[None, None, :] + (c1 - c0)[None, None, :] * t[:, :, None]
        arr = np.rint(rgba).astype(np.uint8)
        return Image.fromarray(arr)

    def color_at(self, x: float, y: float) -> tuple[int, int, int, int]:
        c0 = parse_color(self.start)
        c1 = parse_color(self.end)
        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        length_sq = dx * dx + dy * dy
        t = 0.0 if length_sq == 0 else ((x - self.x0) * dx + (y - self.y0) * dy) / length_sq
        t = max(0.0, min(1.0, t))
        return tuple(int(round(a + (b - a) * t)) for a, b in zip(c0, c1))  # type: ignore[return-value]


def linear_gradient(x0: float, y0: float, x1: float, y1: float, start: str, end: str) -> LinearGradient:
    return LinearGradient(x0=x0, y0=y0, x1=x1, y1=y1, start=start, end=end)


def build_gradient(
    preset: GradientPreset,
    width: float = POSTER_WIDTH,
    height: float = POSTER_HEIGHT,
) -> LinearGradient:
    start, end = preset.colors
    if preset.direction == GradientDirection.HORIZONTAL.value:
        return linear_gradient(0, 0, width, 0, start, end)
    if preset.direction == GradientDirection.VERTICAL.value:
        return linear_gradient(0, 0, 0, height, start, end)
    # Diagonal, and anything unrecognised.
    return linear_gradient(0, 0, width, height, start, end)
