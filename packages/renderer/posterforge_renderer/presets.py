"""Built-in poster catalogs and lookups with first-entry fallback."""

from __future__ import annotations

import logging

from PIL import ImageColor

from .models import AccentPreset, FontOption, GradientPreset, PosterConfig, TextAlign

logger = logging.getLogger("posterforge.renderer")

GRADIENTS: tuple[GradientPreset, ...] = (
    GradientPreset(id="dawn", name="Neon Dawn", colors=("#341d7d", "#f72585"), direction="diagonal"),
    GradientPreset(id="sunset", name="Tropical Sunset", colors=("#f97316", "#4338ca"), direction="vertical"),
    GradientPreset(id="mint", name="Future Mint", colors=("#22d3ee", "#0f172a"), direction="horizontal"),
    GradientPreset(id="rose", name="Rose Noir", colors=("#111827", "#ef4444"), direction="diagonal"),
    GradientPreset(id="forest", name="Aurora Forest", colors=("#0f172a", "#22c55e"), direction="vertical"),
    GradientPreset(id="ultra", name="Ultra Violet", colors=("#1f2937", "#8b5cf6"), direction="horizontal"),
)

ACCENTS: tuple[AccentPreset, ...] = (
    AccentPreset(id="waves", name="Liquid Waves", style="waves"),
    AccentPreset(id="rings", name="Holographic Rings", style="rings"),
    AccentPreset(id="bars", name="Plasma Bars", style="bars"),
    AccentPreset(id="none", name="Minimal", style="none"),
)

FONTS: tuple[FontOption, ...] = (
    FontOption(id="clash", label="Clash Display", value="'Clash Display', 'Inter Tight', sans-serif"),
    FontOption(id="inter", label="Inter Tight", value="'Inter Tight', sans-serif"),
    FontOption(id="borel", label="Borel", value="'Borel', cursive"),
    FontOption(id="archivo", label="Archivo Black", value="'Archivo Black', sans-serif"),
)

ALIGNMENTS: tuple[str, ...] = tuple(a.value for a in TextAlign)

COLOR_SWATCHES: tuple[str, ...] = (
    "#f97316",
    "#22d3ee",
    "#facc15",
    "#38bdf8",
    "#f472b6",
    "#c084fc",
    "#34d399",
    "#f87171",
)

DEFAULT_ACCENT_COLOR = "#22d3ee"
DEFAULT_ALIGN = TextAlign.CENTER.value

DEFAULT_POSTER_FIELDS: dict[str, str] = {
    "title": "Night Pulse Experience",
    "subtitle": "Immersive audio-visual performance featuring the city's top DJs and digital artists.",
    "date": "SEP 15 • 8 PM",
    "cta": "RSVP NOW",
    "accent_color": DEFAULT_ACCENT_COLOR,
    "gradient": "dawn",
    "accent": "waves",
    "align": DEFAULT_ALIGN,
    "font": "clash",
}


def _lookup(catalog, preset_id: str | None, kind: str):
    for entry in catalog:
        if entry.id == preset_id:
            return entry
    fallback = catalog[0]
    logger.warning(
        f"unknown {kind} preset {preset_id!r}, using {fallback.id!r}",
        extra={"event": "preset_fallback"},
    )
    return fallback


def get_gradient(preset_id: str | None) -> GradientPreset:
    return _lookup(GRADIENTS, preset_id, "gradient")


def get_accent(preset_id: str | None) -> AccentPreset:
    return _lookup(ACCENTS, preset_id, "accent")


def get_font(option_id: str | None) -> FontOption:
    return _lookup(FONTS, option_id, "font")


def list_gradients() -> list[GradientPreset]:
    return list(GRADIENTS)


def list_accents() -> list[AccentPreset]:
    return list(ACCENTS)


def list_fonts() -> list[FontOption]:
    return list(FONTS)


def normalize_align(align: str | None) -> str:
    if align in ALIGNMENTS:
        return align  # type: ignore[return-value]
    return DEFAULT_ALIGN


def normalize_color(color: str | None, default: str = DEFAULT_ACCENT_COLOR) -> str:
    if not color:
        return default
    try:
        ImageColor.getrgb(color)
    except ValueError:
        logger.warning(f"invalid accent color {color!r}, using {default}", extra={"event": "color_fallback"})
        return default
    return color


def build_poster(
    title: str = "",
    subtitle: str = "",
    date: str = "",
    cta: str = "",
    accent_color: str | None = None,
    gradient: str | None = None,
    accent: str | None = None,
    align: str | None = None,
    font: str | None = None,
) -> PosterConfig:
    """Resolve catalog ids into a render-ready configuration.

    Unknown ids resolve to the first catalog entry, so the result always renders.
    """
    return PosterConfig(
        title=title or "",
        subtitle=subtitle or "",
        date=date or "",
        cta=cta or "",
        accent_color=normalize_color(accent_color),
        gradient=get_gradient(gradient),
        accent_preset=get_accent(accent),
        align=normalize_align(align),
        font=get_font(font),
    )


def default_poster() -> PosterConfig:
    return build_poster(**DEFAULT_POSTER_FIELDS)


def poster_to_fields(config: PosterConfig) -> dict[str, str]:
    return {
        "title": config.title,
        "subtitle": config.subtitle,
        "date": config.date,
        "cta": config.cta,
        "accent_color": config.accent_color,
        "gradient": config.gradient.id,
        "accent": config.accent_preset.id,
        "align": config.align,
        "font": config.font.id,
    }
