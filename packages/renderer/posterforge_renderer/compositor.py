"""Poster composer for the 1080x1350 logical canvas."""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from .accents import draw_accent
from .export import export_raster, preview_data_url
from .geometry import rounded_rect_path
from .gradient import build_gradient
from .models import POSTER_HEIGHT, POSTER_WIDTH, PlacedLine, PosterConfig, TextAlign
from .surface import PosterSurface, SurfaceUnavailableError
from .text_layout import wrap_text

W = POSTER_WIDTH
H = POSTER_HEIGHT

PADDING = W * 0.12
TEXT_WIDTH = W - PADDING * 2

BAND_COLOR = "#ffffff18"
BAND_TOP = H * 0.78
BAND_HEIGHT = H * 0.22

HEADLINE_COLOR = "#f8fafc"
HEADLINE_SHADOW = "#00000033"
HEADLINE_SHADOW_BLUR = 12
HEADLINE_SIZE = round(W * 0.11)
HEADLINE_Y = H * 0.3
HEADLINE_LINE_HEIGHT = W * 0.12
HEADLINE_SPACING = 1.15

SUBTITLE_COLOR = "#e2e8f0"
SUBTITLE_SIZE = round(W * 0.035)
SUBTITLE_Y = H * 0.58
SUBTITLE_LINE_HEIGHT = W * 0.05
SUBTITLE_SPACING = 1.4

DATE_SIZE = round(W * 0.04)
DATE_Y = H * 0.78

CTA_FILL = "#0f172a"
CTA_TEXT_COLOR = "#f8fafc"
CTA_SIZE = round(W * 0.036)
CTA_WIDTH = W - PADDING * 2
CTA_HEIGHT = H * 0.08
CTA_Y = H * 0.84
CTA_RADIUS = 24
CTA_BASELINE_OFFSET = W * 0.014


@dataclass
class RenderReport:
    anchor_x: float
    headline: list[PlacedLine] = field(default_factory=list)
    subtitle: list[PlacedLine] = field(default_factory=list)
    date_drawn: bool = False
    cta_box: tuple[float, float, float, float] | None = None


def anchor_x_for(align: str) -> float:
    if align == TextAlign.LEFT.value:
        return PADDING
    if align == TextAlign.RIGHT.value:
        return W - PADDING
    return W / 2


def cta_x_for(align: str, badge_width: float = CTA_WIDTH) -> float:
    if align == TextAlign.LEFT.value:
        return PADDING
    if align == TextAlign.RIGHT.value:
        return W - PADDING - badge_width
    return (W - badge_width) / 2


def _text_align_for(align: str) -> str:
    if align in (TextAlign.LEFT.value, TextAlign.RIGHT.value):
        return align
    return TextAlign.CENTER.value


def render_poster(surface: PosterSurface | None, config: PosterConfig) -> RenderReport:
    """Repaint ``surface`` from ``config``.

    Every call starts from a resized, cleared backing store, so the output
    depends on nothing but ``config`` and the surface's pixel ratio.
    """
    if surface is None or not surface.available:
        raise SurfaceUnavailableError("No drawing surface to render the poster onto")

    surface.resize(surface.device_pixel_ratio)
    surface.reset_transform()
    surface.scale(surface.device_pixel_ratio)
    surface.global_alpha = 1.0
    surface.shadow_blur = 0
    surface.clear_rect(0, 0, W, H)

    surface.fill_style = build_gradient(config.gradient, W, H)
    surface.fill_rect(0, 0, W, H)

    draw_accent(surface, config.accent_preset.style, config.accent_color)

    surface.fill_style = BAND_COLOR
    surface.fill_rect(0, BAND_TOP, W, BAND_HEIGHT)

    align = config.align
    report = RenderReport(anchor_x=anchor_x_for(align))
    surface.text_align = _text_align_for(align)
    family = config.font.value

    surface.fill_style = HEADLINE_COLOR
    surface.shadow_color = HEADLINE_SHADOW
    surface.shadow_blur = HEADLINE_SHADOW_BLUR
    surface.font = f"900 {HEADLINE_SIZE}px {family}"
    report.headline = wrap_text(
        surface,
        config.title.upper(),
        report.anchor_x,
        HEADLINE_Y,
        TEXT_WIDTH,
        HEADLINE_LINE_HEIGHT,
        HEADLINE_SPACING,
    )

    surface.shadow_blur = 0
    surface.fill_style = SUBTITLE_COLOR
    surface.font = f"500 {SUBTITLE_SIZE}px {family}"
    report.subtitle = wrap_text(
        surface,
        config.subtitle,
        report.anchor_x,
        SUBTITLE_Y,
        TEXT_WIDTH,
        SUBTITLE_LINE_HEIGHT,
        SUBTITLE_SPACING,
    )

    if config.date.strip():
        surface.fill_style = config.accent_color
        surface.font = f"700 {DATE_SIZE}px {family}"
        surface.fill_text(config.date, report.anchor_x, DATE_Y)
        report.date_drawn = True

    if config.cta.strip():
        cta_x = cta_x_for(align)
        surface.fill_style = CTA_FILL
        surface.fill_path(rounded_rect_path(cta_x, CTA_Y, CTA_WIDTH, CTA_HEIGHT, CTA_RADIUS))
        surface.fill_style = CTA_TEXT_COLOR
        surface.font = f"700 {CTA_SIZE}px {family}"
        surface.text_align = TextAlign.CENTER.value
        surface.fill_text(config.cta, cta_x + CTA_WIDTH / 2, CTA_Y + CTA_HEIGHT / 2 + CTA_BASELINE_OFFSET)
        report.cta_box = (cta_x, CTA_Y, CTA_WIDTH, CTA_HEIGHT)

    return report


class PosterRenderer:
    """Renders poster configurations onto fresh surfaces."""

    def __init__(self, device_pixel_ratio: float = 1.0, font_dirs: tuple[str, ...] = ()) -> None:
        self.device_pixel_ratio = device_pixel_ratio
        self.font_dirs = tuple(font_dirs)

    def new_surface(self) -> PosterSurface:
        return PosterSurface(W, H, device_pixel_ratio=self.device_pixel_ratio, font_dirs=self.font_dirs)

    def render(self, config: PosterConfig) -> PosterSurface:
        surface = self.new_surface()
        render_poster(surface, config)
        return surface

    def render_image(self, config: PosterConfig) -> Image.Image:
        return self.render(config).logical_image()

    def render_png(self, config: PosterConfig) -> bytes:
        return export_raster(self.render(config))

    def preview_data_url(self, config: PosterConfig) -> str:
        return preview_data_url(self.render(config))
