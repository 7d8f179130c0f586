"""Procedural accent overlays drawn between the background and the text."""

from __future__ import annotations

from .geometry import Path, rounded_rect_path
from .gradient import linear_gradient
from .models import PatternStyle
from .surface import PosterSurface

ACCENT_ALPHA = 0.22
RINGS_ALPHA = 0.28
RING_LINE_WIDTH = 14
BAR_RADIUS = 18
BAR_FADE_COLOR = "#ffffff22"
WAVE_BLEED = 200


def _draw_waves(surface: PosterSurface) -> None:
    w, h = surface.width, surface.height
    wave_height = h * 0.18
    for i in range(3):
        offset_y = h * 0.25 + i * wave_height * 0.4
        path = Path()
        path.move_to(-WAVE_BLEED, offset_y)
        path.bezier_curve_to(
            w * 0.25,
            offset_y - wave_height * 0.6,
            w * 0.75,
            offset_y + wave_height * 0.6,
            w + WAVE_BLEED,
            offset_y,
        )
        path.line_to(w + WAVE_BLEED, offset_y + wave_height)
        path.line_to(-WAVE_BLEED, offset_y + wave_height)
        path.close()
        surface.fill_path(path)


def ring_radii(width: float) -> list[float]:
    radii = []
    start, stop, step = width * 0.2, width * 0.8, width * 0.12
    # Indexed steps with a tolerance so float drift never adds a ring at 0.8 W.
    i = 0
    while start + i * step < stop - 1e-6:
        radii.append(start + i * step)
        i += 1
    return radii


def _draw_rings(surface: PosterSurface, accent_color: str) -> None:
    w, h = surface.width, surface.height
    surface.stroke_style = accent_color
    surface.line_width = RING_LINE_WIDTH
    surface.global_alpha = RINGS_ALPHA
    for radius in ring_radii(w):
        surface.stroke_circle(w * 0.75, h * 0.3, radius)


def bar_lefts(width: float) -> list[float]:
    bar_width = width * 0.1
    return [width * 0.1 + i * bar_width * 1.2 for i in range(4)]


def _draw_bars(surface: PosterSurface, accent_color: str) -> None:
    w, h = surface.width, surface.height
    bar_width = w * 0.1
    for x in bar_lefts(w):
        surface.fill_style = linear_gradient(x, 0, x + bar_width, 0, accent_color, BAR_FADE_COLOR)
        surface.fill_path(rounded_rect_path(x, h * 0.15, bar_width, h * 0.65, BAR_RADIUS))


def draw_accent(surface: PosterSurface, style: str, accent_color: str) -> None:
    """Paint the accent pattern at reduced opacity.

    Unknown styles draw nothing. Global alpha is back at 1.0 on return
    whichever branch ran.
    """
    surface.global_alpha = ACCENT_ALPHA
    surface.fill_style = accent_color
    try:
        if style == PatternStyle.WAVES.value:
            _draw_waves(surface)
        elif style == PatternStyle.RINGS.value:
            _draw_rings(surface, accent_color)
        elif style == PatternStyle.BARS.value:
            _draw_bars(surface, accent_color)
    finally:
        surface.global_alpha = 1.0
