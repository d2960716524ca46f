from __future__ import annotations

import math
from pathlib import Path

from manimate_core import (
    Color,
    Degrees,
    FillRule,
    PathCursor,
    PathStyle,
    RasterRenderer,
    Renderer,
    SvgRenderer,
    TextAlignment,
    TextStyle,
    Transform,
    Vector2D,
)
from manimate_core.render import PathStyleBuilder


def _star(outer: float, inner: float, points: int = 5) -> PathCursor:
    cursor = PathCursor()
    for i in range(points * 2):
        radius = outer if i % 2 == 0 else inner
        theta = math.pi / 2 + i * math.pi / points
        p = Vector2D(radius * math.cos(theta), radius * math.sin(theta))
        if i == 0:
            cursor.move_to(p)
        else:
            cursor.line_to(p)
    return cursor.close()


def _wave(width: float, amplitude: float, waves: int = 4) -> PathCursor:
    step = width / (waves * 2)
    cursor = PathCursor().move_to(Vector2D(-width / 2, 0.0))
    for i in range(waves * 2):
        sign = 1.0 if i % 2 == 0 else -1.0
        cursor.quadratic_to(
            cursor.position + Vector2D(step / 2, sign * amplitude * 2),
            cursor.position + Vector2D(step, 0.0),
        )
    return cursor


def _render(renderer: Renderer) -> None:
    star = _star(120.0, 50.0).build()
    star.apply_transform(Transform.translate(-160.0, 20.0) @ Transform.rotate(Degrees(12.0)))
    wave = _wave(360.0, 30.0).build().translate(80.0, -90.0)

    star_style = (
        PathStyleBuilder()
        .stroke(Color.parse("#FFD166"), 3.0)
        .fill(Color.parse("rgba(255, 209, 102, 0.35)"))
        .fill_rule(FillRule.EVENODD)
        .build()
    )
    with renderer.frame():
        renderer.clear(Color.parse("#1B1B2F"))
        renderer.draw_path(star, star_style)
        renderer.draw_path(wave, PathStyle.stroke(Color.CYAN, 4.0))
        renderer.draw_text(
            "paths + styles",
            Vector2D(120.0, 120.0),
            TextStyle(color=Color.WHITE, font_size=32.0, alignment=TextAlignment.CENTER),
        )


def main() -> None:
    out_dir = Path(__file__).resolve().parent / "out"
    svg = SvgRenderer(640, 360)
    raster = RasterRenderer(640, 360)
    for renderer in (svg, raster):
        _render(renderer)
    print(f"wrote {svg.save(out_dir / 'render_basic.svg')}")
    print(f"wrote {raster.save_png(out_dir / 'render_basic.png')}")


if __name__ == "__main__":
    main()
