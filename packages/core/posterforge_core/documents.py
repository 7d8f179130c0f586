"""Poster documents: JSON files naming catalog ids and free text fields."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from posterforge_renderer.models import PosterConfig
from posterforge_renderer.presets import DEFAULT_POSTER_FIELDS, build_poster, poster_to_fields

from .logging_setup import get_logger


class PosterDocumentError(ValueError):
    """Raised when a poster document cannot be read as a JSON object."""


def poster_from_fields(raw: dict[str, Any]) -> PosterConfig:
    fields = dict(DEFAULT_POSTER_FIELDS)
    for key in DEFAULT_POSTER_FIELDS:
        if key in raw and raw[key] is not None:
            fields[key] = str(raw[key])
    unknown = sorted(set(raw) - set(DEFAULT_POSTER_FIELDS))
    if unknown:
        get_logger().info(f"ignoring poster keys {unknown}", extra={"event": "poster_unknown_keys"})
    return build_poster(**fields)


def load_poster_document(path: Path) -> PosterConfig:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PosterDocumentError(f"Cannot read poster document {path}: {exc}") from exc
    except ValueError as exc:
        raise PosterDocumentError(f"Poster document {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise PosterDocumentError(f"Poster document {path} must contain a JSON object")
    return poster_from_fields(raw)


def save_poster_document(config: PosterConfig, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(poster_to_fields(config), indent=2, ensure_ascii=False), encoding="utf-8")
    return path
