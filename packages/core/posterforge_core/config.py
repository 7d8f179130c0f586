"""Persistent app settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1
MIN_PIXEL_RATIO = 1.0
MAX_PIXEL_RATIO = 4.0
RENDERER_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class RenderConfig:
    device_pixel_ratio: float = 1.0
    font_dirs: list[str] = field(default_factory=list)


@dataclass
class ExportConfig:
    output_dir: str | None = None
    filename_prefix: str = "poster"


@dataclass
class DiagnosticsConfig:
    keep_log_files: int = 7
    renderer_log_level: str = "WARNING"


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    render: RenderConfig = field(default_factory=RenderConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)


def config_root() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "PosterForge"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "PosterForge"
    return Path.home() / ".config" / "posterforge"


def config_path() -> Path:
    return config_root() / "config.json"


def default_output_dir() -> Path:
    return Path.home() / "Pictures" / "PosterForge"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def normalize_pixel_ratio(value: Any) -> float:
    try:
        ratio = float(value)
    except (TypeError, ValueError):
        ratio = 1.0
    if ratio != ratio:
        ratio = 1.0
    return max(MIN_PIXEL_RATIO, min(MAX_PIXEL_RATIO, ratio))


def _normalize_render(cfg: AppConfig) -> None:
    cfg.render.device_pixel_ratio = normalize_pixel_ratio(cfg.render.device_pixel_ratio)
    if not isinstance(cfg.render.font_dirs, list):
        cfg.render.font_dirs = []
    cfg.render.font_dirs = [str(d) for d in cfg.render.font_dirs if d]


def _normalize_export(cfg: AppConfig) -> None:
    if not cfg.export.filename_prefix or not str(cfg.export.filename_prefix).strip():
        cfg.export.filename_prefix = "poster"


def _normalize_diagnostics(cfg: AppConfig) -> None:
    cfg.diagnostics.keep_log_files = max(2, _as_int(cfg.diagnostics.keep_log_files, 7))
    level = str(cfg.diagnostics.renderer_log_level).strip().upper()
    if level not in RENDERER_LOG_LEVELS:
        level = "WARNING"
    cfg.diagnostics.renderer_log_level = level


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=_as_int(data.get("config_version", CONFIG_VERSION), CONFIG_VERSION),
        render=_merge(RenderConfig, data.get("render", {})),
        export=_merge(ExportConfig, data.get("export", {})),
        diagnostics=_merge(DiagnosticsConfig, data.get("diagnostics", {})),
    )

    _normalize_render(cfg)
    _normalize_export(cfg)
    _normalize_diagnostics(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path


def resolve_output_dir(cfg: AppConfig) -> Path:
    if cfg.export.output_dir:
        return Path(cfg.export.output_dir).expanduser()
    return default_output_dir()
