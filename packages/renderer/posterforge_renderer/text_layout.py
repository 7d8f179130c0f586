"""Greedy word wrapping and line placement."""

from __future__ import annotations

import logging
from typing import Callable

from .models import PlacedLine
from .surface import PosterSurface

logger = logging.getLogger("posterforge.renderer")


def break_lines(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """Pack words into lines no wider than ``max_width`` where possible.

    A word that is wider than ``max_width`` on its own keeps a line to itself
    and is never split. Blank input gives no lines.
    """
    words = text.split()
    if not words:
        return []
    if max_width <= 0:
        logger.debug(f"non-positive wrap width {max_width}, one word per line", extra={"event": "wrap_width"})

    lines: list[str] = []
    current = ""
    for word in words:
        candidate = f"{current} {word}" if current else word
        if measure(candidate) > max_width and current:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def layout_lines(
    lines: list[str],
    anchor_x: float,
    start_y: float,
    line_height: float,
    line_spacing: float,
    measure: Callable[[str], float],
) -> list[PlacedLine]:
    return [
        PlacedLine(text=line, x=anchor_x, y=start_y + index * line_height * line_spacing, width=measure(line))
        for index, line in enumerate(lines)
    ]


def wrap_text(
    surface: PosterSurface,
    text: str,
    anchor_x: float,
    start_y: float,
    max_width: float,
    line_height: float,
    line_spacing: float,
) -> list[PlacedLine]:
    """Wrap and draw ``text`` with the surface's current font and alignment."""
    lines = break_lines(text, max_width, surface.measure_text)
    placed = layout_lines(lines, anchor_x, start_y, line_height, line_spacing, surface.measure_text)
    for line in placed:
        surface.fill_text(line.text, line.x, line.y)
    return placed
