"""Encode finished surfaces as lossless images."""

from __future__ import annotations

import base64
import time
from io import BytesIO
from pathlib import Path

from .surface import PosterSurface

LOSSLESS_FORMATS = ("PNG", "WEBP", "TIFF")


def export_raster(surface: PosterSurface, format: str = "PNG") -> bytes:
    """Encode the logical 1080x1350 content, not the pixel-ratio backing store."""
    fmt = format.upper()
    if fmt not in LOSSLESS_FORMATS:
        raise ValueError(f"Lossless format required, got {format!r}")
    image = surface.logical_image()
    buf = BytesIO()
    if fmt == "WEBP":
        image.save(buf, format=fmt, lossless=True)
    else:
        image.save(buf, format=fmt)
    return buf.getvalue()


def export_filename(prefix: str = "poster", now: float | None = None, extension: str = "png") -> str:
    stamp = int((time.time() if now is None else now) * 1000)
    return f"{prefix}-{stamp}.{extension}"


def save_raster(surface: PosterSurface, output_dir: Path, prefix: str = "poster", name: str | None = None) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / (name or export_filename(prefix))
    path.write_bytes(export_raster(surface))
    return path


def preview_data_url(surface: PosterSurface) -> str:
    b64 = base64.b64encode(export_raster(surface)).decode("ascii")
    return f"data:image/png;base64,{b64}"
