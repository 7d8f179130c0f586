"""Path construction for filled shapes.

Curves are flattened into polygon points when they are added, so a finished
``Path`` is just a list of closed or open point runs in logical units.
"""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]

QUADRATIC_SEGMENTS = 12
CUBIC_SEGMENTS = 48


@dataclass
class Path:
    subpaths: list[list[Point]] = field(default_factory=list)
    closed: list[bool] = field(default_factory=list)

    def move_to(self, x: float, y: float) -> None:
        self.subpaths.append([(float(x), float(y))])
        self.closed.append(False)

    def line_to(self, x: float, y: float) -> None:
        self._current().append((float(x), float(y)))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        points = self._current()
        x0, y0 = points[-1]
        for i in range(1, QUADRATIC_SEGMENTS + 1):
            t = i / QUADRATIC_SEGMENTS
            u = 1.0 - t
            points.append(
                (
                    u * u * x0 + 2 * u * t * cx + t * t * x,
                    u * u * y0 + 2 * u * t * cy + t * t * y,
                )
            )

    def bezier_curve_to(self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float) -> None:
        points = self._current()
        x0, y0 = points[-1]
        for i in range(1, CUBIC_SEGMENTS + 1):
            t = i / CUBIC_SEGMENTS
            u = 1.0 - t
            points.append(
                (
                    u**3 * x0 + 3 * u * u * t * c1x + 3 * u * t * t * c2x + t**3 * x,
                    u**3 * y0 + 3 * u * u * t * c1y + 3 * u * t * t * c2y + t**3 * y,
                )
            )

    def close(self) -> None:
        if self.closed:
            self.closed[-1] = True

    def bounds(self) -> tuple[float, float, float, float]:
        xs = [p[0] for run in self.subpaths for p in run]
        ys = [p[1] for run in self.subpaths for p in run]
        if not xs:
            return (0.0, 0.0, 0.0, 0.0)
        return (min(xs), min(ys), max(xs), max(ys))

    def _current(self) -> list[Point]:
        if not self.subpaths:
            # Drawing without a move_to starts at the origin, as canvas paths do.
            self.move_to(0.0, 0.0)
        return self.subpaths[-1]


def rounded_rect_path(x: float, y: float, width: float, height: float, radius: float) -> Path:
    """Closed rectangle path with quadratic corners.

    The radius is clamped to half the shorter side so thin bars never fold over.
    """
    r = max(0.0, min(radius, width / 2, height / 2))
    path = Path()
    path.move_to(x + r, y)
    path.line_to(x + width - r, y)
    path.quadratic_curve_to(x + width, y, x + width, y + r)
    path.line_to(x + width, y + height - r)
    path.quadratic_curve_to(x + width, y + height, x + width - r, y + height)
    path.line_to(x + r, y + height)
    path.quadratic_curve_to(x, y + height, x, y + height - r)
    path.line_to(x, y + r)
    path.quadratic_curve_to(x, y, x + r, y)
    path.close()
    return path
