from __future__ import annotations

import argparse
from dataclasses import asdict
import logging
from pathlib import Path

from manimate_core import (
    Color,
    FontWeight,
    PathStyle,
    RasterRenderer,
    RenderConfig,
    Renderer,
    SvgRenderer,
    TextAlignment,
    TextStyle,
    Vector2D,
    load_render_config,
)
from manimate_core.errors import ExportError
from manimate_core.render import Path as ShapePath

# Cubic control-point offset for a quarter circle of radius 1.
CIRCLE_KAPPA = 0.5519150244935106


def circle_path(radius: float, center: Vector2D = Vector2D(0.0, 0.0)) -> ShapePath:
    k = radius * CIRCLE_KAPPA
    cx, cy = center.x, center.y
    return (
        ShapePath()
        .move_to(Vector2D(cx + radius, cy))
        .cubic_to(Vector2D(cx + radius, cy + k), Vector2D(cx + k, cy + radius), Vector2D(cx, cy + radius))
        .cubic_to(Vector2D(cx - k, cy + radius), Vector2D(cx - radius, cy + k), Vector2D(cx - radius, cy))
        .cubic_to(Vector2D(cx - radius, cy - k), Vector2D(cx - k, cy - radius), Vector2D(cx, cy - radius))
        .cubic_to(Vector2D(cx + k, cy - radius), Vector2D(cx + radius, cy - k), Vector2D(cx + radius, cy))
        .close()
    )


def draw_demo_frame(renderer: Renderer, background: Color) -> None:
    width, height = renderer.dimensions()
    half_w = width / 2.0
    half_h = height / 2.0
    radius = 0.35 * min(width, height)

    with renderer.frame():
        renderer.clear(background)
        axes = (
            ShapePath()
            .move_to(Vector2D(-half_w, 0.0))
            .line_to(Vector2D(half_w, 0.0))
            .move_to(Vector2D(0.0, -half_h))
            .line_to(Vector2D(0.0, half_h))
        )
        renderer.draw_path(axes, PathStyle.stroke(Color.WHITE.with_alpha(0.4), 1.0))
        renderer.draw_path(
            circle_path(radius),
            PathStyle.stroke(Color.BLUE, 4.0).with_fill(Color.BLUE.with_alpha(0.25)),
        )
        arc = (
            ShapePath()
            .move_to(Vector2D(-radius, -radius * 0.5))
            .quadratic_to(Vector2D(0.0, radius * 1.2), Vector2D(radius, -radius * 0.5))
        )
        renderer.draw_path(arc, PathStyle.stroke(Color.YELLOW, 3.0))
        renderer.draw_text(
            "manimate",
            Vector2D(0.0, -half_h * 0.8),
            TextStyle(
                color=Color.WHITE,
                font_size=max(12.0, height / 12.0),
                font_weight=FontWeight.BOLD,
                alignment=TextAlignment.CENTER,
            ),
        )


def _build_config(args: argparse.Namespace) -> RenderConfig:
    config = load_render_config(args.config) if args.config is not None else RenderConfig()
    width = args.width if args.width is not None else config.width
    height = args.height if args.height is not None else config.height
    return config.with_size(width, height)


def main() -> None:
    parser = argparse.ArgumentParser(prog="manimate")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="render the demo frame to SVG or PNG")
    render.add_argument("output", type=Path)
    render.add_argument("--format", choices=["svg", "png"], default=None)
    render.add_argument("--width", type=int, default=None)
    render.add_argument("--height", type=int, default=None)
    render.add_argument("--config", type=Path, default=None)

    show = sub.add_parser("config", help="print the effective render config")
    show.add_argument("--config", type=Path, default=None)
    show.add_argument("--width", type=int, default=None)
    show.add_argument("--height", type=int, default=None)

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _build_config(args)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if args.command == "config":
        for key, value in asdict(config).items():
            print(f"{key} = {value!r}")
        return

    fmt = args.format or ("png" if args.output.suffix.lower() == ".png" else "svg")
    renderer: SvgRenderer | RasterRenderer
    if fmt == "png":
        renderer = RasterRenderer.from_config(config)
    else:
        renderer = SvgRenderer.from_config(config)
    draw_demo_frame(renderer, config.background_color())
    try:
        out = renderer.save(args.output)
    except ExportError as exc:
        raise SystemExit(f"error: {exc}") from exc
    print(f"wrote {fmt} frame {config.width}x{config.height} to {out}")


if __name__ == "__main__":
    main()
