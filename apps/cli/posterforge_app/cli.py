"""CLI entrypoints for PosterForge rendering, presets, and diagnostics."""

from __future__ import annotations

import argparse
import hashlib
import json
from pathlib import Path

from posterforge_core import (
    build_doctor_payload,
    load_config,
    load_poster_document,
    poster_from_fields,
    resolve_output_dir,
    save_poster_document,
)
from posterforge_core.config import normalize_pixel_ratio
from posterforge_core.logging_setup import configure_logging, get_logger
from posterforge_renderer import PosterRenderer, default_poster, list_accents, list_fonts, list_gradients
from posterforge_renderer.export import export_raster, save_raster
from posterforge_renderer.presets import ALIGNMENTS, COLOR_SWATCHES, poster_to_fields

_OVERRIDES = ("title", "subtitle", "date", "cta", "accent_color", "gradient", "accent", "align", "font")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    log = get_logger()

    if args.poster:
        fields = poster_to_fields(load_poster_document(Path(args.poster).expanduser()))
    else:
        fields = poster_to_fields(default_poster())
    for key in _OVERRIDES:
        value = getattr(args, key, None)
        if value is not None:
            fields[key] = value
    poster = poster_from_fields(fields)

    ratio = cfg.render.device_pixel_ratio if args.pixel_ratio is None else args.pixel_ratio
    ratio = normalize_pixel_ratio(ratio)
    renderer = PosterRenderer(device_pixel_ratio=ratio, font_dirs=tuple(cfg.render.font_dirs))
    surface = renderer.render(poster)

    if args.out:
        out_path = Path(args.out).expanduser()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        data = export_raster(surface)
        out_path.write_bytes(data)
    else:
        out_path = save_raster(surface, resolve_output_dir(cfg), prefix=cfg.export.filename_prefix)
        data = out_path.read_bytes()

    log.info(f"poster exported to {out_path}", extra={"event": "poster_exported"})
    _print_json(
        {
            "path": str(out_path),
            "bytes": len(data),
            "sha256": hashlib.sha256(data).hexdigest(),
            "size": [surface.width, surface.height],
            "device_pixel_ratio": surface.device_pixel_ratio,
            "poster": poster_to_fields(poster),
        }
    )
    return 0


def cmd_presets(_args: argparse.Namespace) -> int:
    _print_json(
        {
            "gradients": [
                {"id": g.id, "name": g.name, "colors": list(g.colors), "direction": g.direction}
                for g in list_gradients()
            ],
            "accents": [{"id": a.id, "name": a.name, "style": a.style} for a in list_accents()],
            "fonts": [{"id": f.id, "label": f.label, "value": f.value} for f in list_fonts()],
            "alignments": list(ALIGNMENTS),
            "swatches": list(COLOR_SWATCHES),
        }
    )
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    path = save_poster_document(default_poster(), Path(args.out).expanduser())
    _print_json({"path": str(path)})
    return 0


def cmd_doctor(_args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(load_config()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="posterforge", description="PosterForge poster renderer and tools")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a poster to PNG")
    render_cmd.add_argument("--poster", default=None, help="Poster document (JSON) to start from")
    render_cmd.add_argument("--title", default=None)
    render_cmd.add_argument("--subtitle", default=None)
    render_cmd.add_argument("--date", default=None)
    render_cmd.add_argument("--cta", default=None)
    render_cmd.add_argument("--accent-color", dest="accent_color", default=None)
    render_cmd.add_argument("--gradient", default=None, help="Gradient preset id")
    render_cmd.add_argument("--accent", default=None, help="Accent preset id")
    render_cmd.add_argument("--align", default=None, choices=list(ALIGNMENTS))
    render_cmd.add_argument("--font", default=None, help="Font option id")
    render_cmd.add_argument("--pixel-ratio", dest="pixel_ratio", type=float, default=None)
    render_cmd.add_argument("--out", default=None, help="Output file; defaults to the export directory")
    render_cmd.set_defaults(func=cmd_render)

    presets_cmd = sub.add_parser("presets", help="List gradient, accent, and font catalogs")
    presets_cmd.set_defaults(func=cmd_presets)

    init_cmd = sub.add_parser("init", help="Write the default poster document")
    init_cmd.add_argument("--out", default="poster.json")
    init_cmd.set_defaults(func=cmd_init)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics and resolved fonts")
    doctor_cmd.set_defaults(func=cmd_doctor)

    return parser


def main(argv: list[str] | None = None) -> int:
    diagnostics = load_config().diagnostics
    configure_logging(
        keep_files=diagnostics.keep_log_files,
        console=False,
        renderer_level=diagnostics.renderer_log_level,
    )
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
