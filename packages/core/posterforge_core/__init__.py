"""Core app services for settings, logging, poster documents, and diagnostics."""

from .config import AppConfig, load_config, resolve_output_dir, save_config
from .diagnostics import build_doctor_payload
from .documents import PosterDocumentError, load_poster_document, poster_from_fields, save_poster_document

__all__ = [
    "AppConfig",
    "PosterDocumentError",
    "build_doctor_payload",
    "load_config",
    "load_poster_document",
    "poster_from_fields",
    "resolve_output_dir",
    "save_config",
    "save_poster_document",
]
