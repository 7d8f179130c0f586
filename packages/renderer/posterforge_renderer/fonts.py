"""Resolve CSS-like font strings to Pillow faces."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from PIL import ImageFont

logger = logging.getLogger("posterforge.renderer")

_FONT_RE = re.compile(r"^\s*(?:(?P<weight>\d{3}|normal|bold)\s+)?(?P<size>\d+(?:\.\d+)?)px\s+(?P<families>.+?)\s*$")

# Known file names per family, bold faces first under "bold".
FAMILY_FILES: dict[str, dict[str, tuple[str, ...]]] = {
    "clash display": {
        "bold": ("ClashDisplay-Bold.otf", "ClashDisplay-Semibold.otf"),
        "regular": ("ClashDisplay-Medium.otf", "ClashDisplay-Regular.otf"),
    },
    "inter tight": {
        "bold": ("InterTight-Black.ttf", "InterTight-Bold.ttf"),
        "regular": ("InterTight-Medium.ttf", "InterTight-Regular.ttf"),
    },
    "borel": {
        "bold": ("Borel-Regular.ttf",),
        "regular": ("Borel-Regular.ttf",),
    },
    "archivo black": {
        "bold": ("ArchivoBlack-Regular.ttf",),
        "regular": ("ArchivoBlack-Regular.ttf",),
    },
    "sans-serif": {
        "bold": ("DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf"),
        "regular": ("DejaVuSans.ttf", "LiberationSans-Regular.ttf", "Arial.ttf", "arial.ttf"),
    },
    "cursive": {
        "bold": ("DejaVuSerif-BoldItalic.ttf", "Comic Sans MS Bold.ttf", "comicbd.ttf"),
        "regular": ("DejaVuSerif-Italic.ttf", "Comic Sans MS.ttf", "comic.ttf"),
    },
}

DEFAULT_FONT = "400 16px sans-serif"


@dataclass(frozen=True)
class FontSpec:
    weight: int
    size: float
    families: tuple[str, ...]

    @property
    def bold(self) -> bool:
        return self.weight >= 600


def parse_font(spec: str) -> FontSpec:
    match = _FONT_RE.match(spec or "")
    if not match:
        raise ValueError(f"Unparseable font: {spec!r}")
    weight_raw = match.group("weight") or "normal"
    if weight_raw == "normal":
        weight = 400
    elif weight_raw == "bold":
        weight = 700
    else:
        weight = int(weight_raw)
    families = tuple(
        part.strip().strip("'\"").strip().lower()
        for part in match.group("families").split(",")
        if part.strip().strip("'\"").strip()
    )
    return FontSpec(weight=weight, size=float(match.group("size")), families=families)


def _candidates(spec: FontSpec) -> list[str]:
    names: list[str] = []
    style = "bold" if spec.bold else "regular"
    other = "regular" if spec.bold else "bold"
    for family in spec.families:
        files = FAMILY_FILES.get(family)
        if not files:
            continue
        names.extend(files[style])
        names.extend(files[other])
    return names


def _load(name: str, size: int, font_dirs: tuple[str, ...]) -> ImageFont.FreeTypeFont | None:
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        pass
    for directory in font_dirs:
        path = Path(directory).expanduser() / name
        if path.exists():
            try:
                return ImageFont.truetype(str(path), size)
            except OSError:
                logger.warning(f"unreadable font file {path}", extra={"event": "font_unreadable"})
    return None


@lru_cache(maxsize=64)
def _resolve(spec_text: str, scale: float, font_dirs: tuple[str, ...]):
    spec = parse_font(spec_text)
    size = max(1, int(round(spec.size * scale)))
    for name in _candidates(spec):
        font = _load(name, size, font_dirs)
        if font is not None:
            return font, name
    logger.info(f"no face found for {spec_text!r}, using Pillow default", extra={"event": "font_fallback"})
    return ImageFont.load_default(size=size), "default"


def resolve_font(spec_text: str, scale: float = 1.0, font_dirs: tuple[str, ...] = ()):
    """Return a Pillow face sized for ``scale`` physical pixels per logical unit."""
    return _resolve(spec_text, float(scale), tuple(font_dirs))[0]


def resolved_face_name(spec_text: str, font_dirs: tuple[str, ...] = ()) -> str:
    return _resolve(spec_text, 1.0, tuple(font_dirs))[1]
