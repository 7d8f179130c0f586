"""Pillow-backed drawing surface addressed in logical poster units."""

from __future__ import annotations

from PIL import Image, ImageChops, ImageDraw, ImageFilter

from .fonts import DEFAULT_FONT, resolve_font
from .geometry import Path
from .gradient import LinearGradient, parse_color
from .models import POSTER_HEIGHT, POSTER_WIDTH, TextAlign

_TEXT_ANCHORS = {
    TextAlign.LEFT.value: "ls",
    TextAlign.CENTER.value: "ms",
    TextAlign.RIGHT.value: "rs",
}


class SurfaceUnavailableError(RuntimeError):
    """Raised when there is no backing raster to draw on."""


class PosterSurface:
    """Raster surface with a canvas-like paint state.

    Drawing calls take logical coordinates; the current scale maps them onto
    the backing store, whose size is the logical size times the device pixel
    ratio.
    """

    def __init__(
        self,
        width: int = POSTER_WIDTH,
        height: int = POSTER_HEIGHT,
        device_pixel_ratio: float = 1.0,
        font_dirs: tuple[str, ...] = (),
    ) -> None:
        self.width = width
        self.height = height
        self.font_dirs = tuple(font_dirs)
        self._image: Image.Image | None = None
        self._scale = 1.0
        self.device_pixel_ratio = 1.0
        self.resize(device_pixel_ratio)

    def _reset_state(self) -> None:
        self.fill_style: str | LinearGradient = "#000000"
        self.stroke_style: str = "#000000"
        self.line_width = 1.0
        self.text_align = TextAlign.LEFT.value
        self.font = DEFAULT_FONT
        self.shadow_color = "#00000000"
        self.shadow_blur = 0.0
        self._global_alpha = 1.0

    @property
    def available(self) -> bool:
        return self._image is not None

    @property
    def image(self) -> Image.Image:
        if self._image is None:
            raise SurfaceUnavailableError("Surface has no backing raster")
        return self._image

    @property
    def pixel_size(self) -> tuple[int, int]:
        return self.image.size

    def resize(self, device_pixel_ratio: float) -> None:
        ratio = float(device_pixel_ratio) if device_pixel_ratio and device_pixel_ratio > 0 else 1.0
        self.device_pixel_ratio = ratio
        size = (max(1, round(self.width * ratio)), max(1, round(self.height * ratio)))
        self._image = Image.new("RGBA", size, (0, 0, 0, 0))
        # Resizing discards the paint state along with the pixels.
        self._reset_state()
        self.reset_transform()

    def release(self) -> None:
        self._image = None

    def logical_image(self) -> Image.Image:
        image = self.image
        if image.size == (self.width, self.height):
            return image.copy()
        return image.resize((self.width, self.height), Image.Resampling.LANCZOS)

    @property
    def current_scale(self) -> float:
        return self._scale

    def reset_transform(self) -> None:
        self._scale = 1.0

    def scale(self, factor: float) -> None:
        self._scale *= factor

    @property
    def global_alpha(self) -> float:
        return self._global_alpha

    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        self._global_alpha = max(0.0, min(1.0, float(value)))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = self._box(x, y, width, height)
        if box is None:
            return
        image = self.image
        image.paste((0, 0, 0, 0), box)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        box = self._box(x, y, width, height)
        if box is None:
            return
        mask = self._new_mask()
        mask.paste(255, box)
        self._composite(mask, self.fill_style)

    def fill_path(self, path: Path) -> None:
        mask = self._new_mask()
        draw = ImageDraw.Draw(mask)
        for run in path.subpaths:
            if len(run) < 3:
                continue
            draw.polygon([self._pt(px, py) for px, py in run], fill=255)
        self._composite(mask, self.fill_style)

    def stroke_circle(self, cx: float, cy: float, radius: float) -> None:
        s = self._scale
        half = self.line_width / 2
        outer = (radius + half) * s
        width = max(1, int(round(self.line_width * s)))
        mask = self._new_mask()
        draw = ImageDraw.Draw(mask)
        draw.ellipse((cx * s - outer, cy * s - outer, cx * s + outer, cy * s + outer), outline=255, width=width)
        self._composite(mask, self.stroke_style)

    def measure_text(self, text: str) -> float:
        font = resolve_font(self.font, self._scale, self.font_dirs)
        return float(font.getlength(text)) / self._scale

    def fill_text(self, text: str, x: float, y: float) -> None:
        if not text:
            return
        font = resolve_font(self.font, self._scale, self.font_dirs)
        mask = self._new_mask()
        draw = ImageDraw.Draw(mask)
        anchor = _TEXT_ANCHORS.get(self.text_align, "ls")
        draw.text(self._pt(x, y), text, font=font, fill=255, anchor=anchor)
        self._composite(mask, self.fill_style)

    def _pt(self, x: float, y: float) -> tuple[float, float]:
        return (x * self._scale, y * self._scale)

    def _box(self, x: float, y: float, width: float, height: float) -> tuple[int, int, int, int] | None:
        w, h = self.image.size
        s = self._scale
        x0 = max(0, int(round(x * s)))
        y0 = max(0, int(round(y * s)))
        x1 = min(w, int(round((x + width) * s)))
        y1 = min(h, int(round((y + height) * s)))
        if x1 <= x0 or y1 <= y0:
            return None
        return (x0, y0, x1, y1)

    def _new_mask(self) -> Image.Image:
        return Image.new("L", self.image.size, 0)

    def _source(self, style: str | LinearGradient) -> Image.Image:
        size = self.image.size
        if isinstance(style, LinearGradient):
            return style.render(size[0], size[1], self._scale)
        return Image.new("RGBA", size, parse_color(style))

    def _scaled_alpha(self, alpha: Image.Image) -> Image.Image:
        if self._global_alpha >= 1.0:
            return alpha
        factor = self._global_alpha
        return alpha.point(lambda v: int(round(v * factor)))

    def _composite(self, mask: Image.Image, style: str | LinearGradient) -> None:
        image = self.image
        self._composite_shadow(mask)

        layer = self._source(style)
        alpha = ImageChops.multiply(layer.getchannel("A"), mask)
        layer.putalpha(self._scaled_alpha(alpha))
        image.alpha_composite(layer)

    def _composite_shadow(self, mask: Image.Image) -> None:
        if self.shadow_blur <= 0:
            return
        color = parse_color(self.shadow_color)
        if color[3] == 0:
            return
        blurred = mask.filter(ImageFilter.GaussianBlur(self.shadow_blur * self._scale / 2))
        shadow = Image.new("RGBA", mask.size, color)
        alpha = ImageChops.multiply(shadow.getchannel("A"), blurred)
        shadow.putalpha(self._scaled_alpha(alpha))
        self.image.alpha_composite(shadow)
