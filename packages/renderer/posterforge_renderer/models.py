"""Typed poster models and preset records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

POSTER_WIDTH = 1080
POSTER_HEIGHT = 1350


class GradientDirection(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


class PatternStyle(str, Enum):
    WAVES = "waves"
    RINGS = "rings"
    BARS = "bars"
    NONE = "none"


class TextAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class GradientPreset:
    id: str
    name: str
    colors: tuple[str, str]
    direction: str


@dataclass(frozen=True)
class AccentPreset:
    id: str
    name: str
    style: str


@dataclass(frozen=True)
class FontOption:
    id: str
    label: str
    value: str


@dataclass(frozen=True)
class PosterConfig:
    title: str
    subtitle: str
    date: str
    cta: str
    accent_color: str
    gradient: GradientPreset
    accent_preset: AccentPreset
    align: str
    font: FontOption


@dataclass(frozen=True)
class PlacedLine:
    text: str
    x: float
    y: float
    width: float
