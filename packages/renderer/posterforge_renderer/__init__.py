"""Renderer package for PosterForge poster composition."""

from .accents import draw_accent
from .compositor import PosterRenderer, RenderReport, anchor_x_for, render_poster
from .export import export_raster, preview_data_url, save_raster
from .geometry import Path, rounded_rect_path
from .gradient import LinearGradient, build_gradient
from .models import (
    POSTER_HEIGHT,
    POSTER_WIDTH,
    AccentPreset,
    FontOption,
    GradientPreset,
    PlacedLine,
    PosterConfig,
)
from .presets import (
    build_poster,
    default_poster,
    get_accent,
    get_font,
    get_gradient,
    list_accents,
    list_fonts,
    list_gradients,
)
from .surface import PosterSurface, SurfaceUnavailableError
from .text_layout import wrap_text

__all__ = [
    "POSTER_HEIGHT",
    "POSTER_WIDTH",
    "AccentPreset",
    "FontOption",
    "GradientPreset",
    "LinearGradient",
    "Path",
    "PlacedLine",
    "PosterConfig",
    "PosterRenderer",
    "PosterSurface",
    "RenderReport",
    "SurfaceUnavailableError",
    "anchor_x_for",
    "build_gradient",
    "build_poster",
    "default_poster",
    "draw_accent",
    "export_raster",
    "get_accent",
    "get_font",
    "get_gradient",
    "list_accents",
    "list_fonts",
    "list_gradients",
    "preview_data_url",
    "render_poster",
    "rounded_rect_path",
    "save_raster",
    "wrap_text",
]
