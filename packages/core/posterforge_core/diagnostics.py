"""Doctor payload for local troubleshooting."""

from __future__ import annotations

import platform
import re
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import PIL

from posterforge_renderer.fonts import resolved_face_name
from posterforge_renderer.presets import list_fonts

from .config import AppConfig, config_path


_SECRET_RE = re.compile(r"(token|secret|password|apikey|api_key|auth)", re.IGNORECASE)

_PROBE_WEIGHTS = (500, 900)


def redact(value: Any) -> Any:
    if isinstance(value, dict):
        out: dict[str, Any] = {}
        for k, v in value.items():
            if _SECRET_RE.search(k):
                out[k] = "***REDACTED***"
            else:
                out[k] = redact(v)
        return out
    if isinstance(value, list):
        return [redact(v) for v in value]
    return value


def font_report(cfg: AppConfig) -> list[dict[str, Any]]:
    dirs = tuple(cfg.render.font_dirs)
    return [
        {
            "id": option.id,
            "label": option.label,
            "faces": {str(w): resolved_face_name(f"{w} 32px {option.value}", dirs) for w in _PROBE_WEIGHTS},
        }
        for option in list_fonts()
    ]


def build_doctor_payload(cfg: AppConfig) -> dict[str, Any]:
    return {
        "ts_utc": datetime.now(timezone.utc).isoformat(),
        "platform": platform.platform(),
        "python": platform.python_version(),
        "pillow": PIL.__version__,
        "config_path": str(config_path()),
        "config": redact(asdict(cfg)),
        "fonts": font_report(cfg),
    }
