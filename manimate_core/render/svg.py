"""SVG element model and encoders for paths and styles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
import xml.etree.ElementTree as ET

from manimate_core.geometry import Vector2D

from .color import Color
from .coordinates import CoordinateFrame
from .path import Close, CubicTo, LineTo, MoveTo, Path, PathCommand, QuadraticTo
from .style import PathStyle, TextStyle


SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_PRECISION = 2

Attrs = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class SvgRect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    opacity: float = 1.0

    def to_element(self, precision: int = DEFAULT_PRECISION) -> ET.Element:
        elem = ET.Element(
            "rect",
            {
                "x": format_number(self.x, precision),
                "y": format_number(self.y, precision),
                "width": format_number(self.width, precision),
                "height": format_number(self.height, precision),
                "fill": self.fill,
            },
        )
        if self.opacity < 1.0:
            elem.set("fill-opacity", format_number(self.opacity, 3))
        return elem


@dataclass(frozen=True)
class SvgPath:
    d: str
    attrs: Attrs

    def to_element(self, precision: int = DEFAULT_PRECISION) -> ET.Element:
        elem = ET.Element("path", {"d": self.d})
        for key, value in self.attrs:
            elem.set(key, value)
        return elem


@dataclass(frozen=True)
class SvgText:
    content: str
    x: float
    y: float
    attrs: Attrs

    def to_element(self, precision: int = DEFAULT_PRECISION) -> ET.Element:
        elem = ET.Element("text", {"x": format_number(self.x, precision), "y": format_number(self.y, precision)})
        for key, value in self.attrs:
            elem.set(key, value)
        elem.text = self.content
        return elem


SvgElement = SvgRect | SvgPath | SvgText


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Shortest decimal for `value` rounded to `precision` places (`10`, `2.5`, never `-0`)."""
    rounded = round(float(value), precision)
    if rounded == 0.0:
        return "0"
    if rounded == int(rounded):
        return str(int(rounded))
    text = f"{rounded:.{precision}f}".rstrip("0").rstrip(".")
    return text


def path_to_svg_d(
    path: Path,
    frame: CoordinateFrame | None = None,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Encode path commands as SVG path data.

    Without a frame, coordinates are written as authored. With a frame they are
    mapped through `frame.to_screen` first.
    """
    if frame is None:
        def project(p: Vector2D) -> tuple[float, float]:
            return (p.x, p.y)
    else:
        project = frame.to_screen
    return " ".join(path_command_to_svg(cmd, project, precision) for cmd in path.commands)


def path_command_to_svg(
    command: PathCommand,
    project: Callable[[Vector2D], tuple[float, float]],
    precision: int = DEFAULT_PRECISION,
) -> str:
    if isinstance(command, Close):
        return "Z"
    if isinstance(command, MoveTo):
        letter = "M"
    elif isinstance(command, LineTo):
        letter = "L"
    elif isinstance(command, QuadraticTo):
        letter = "Q"
    elif isinstance(command, CubicTo):
        letter = "C"
    else:
        raise TypeError(f"unsupported path command: {command!r}")
    coords: list[str] = [letter]
    for point in command.points():
        x, y = project(point)
        coords.append(format_number(x, precision))
        coords.append(format_number(y, precision))
    return " ".join(coords)


def color_to_svg(color: Color) -> str:
    return color.to_hex()


def path_style_to_svg_attrs(style: PathStyle, precision: int = DEFAULT_PRECISION) -> Attrs:
    attrs: list[tuple[str, str]] = []
    if style.stroke_color is not None:
        attrs.append(("stroke", color_to_svg(style.stroke_color)))
        attrs.append(("stroke-width", format_number(style.stroke_width, precision)))
        stroke_alpha = style.effective_stroke_alpha()
        if stroke_alpha < 1.0:
            attrs.append(("stroke-opacity", format_number(stroke_alpha, 3)))
        attrs.append(("stroke-linecap", "round"))
        attrs.append(("stroke-linejoin", "round"))
    else:
        attrs.append(("stroke", "none"))
    if style.fill_color is not None:
        attrs.append(("fill", color_to_svg(style.fill_color)))
        fill_alpha = style.effective_fill_alpha()
        if fill_alpha < 1.0:
            attrs.append(("fill-opacity", format_number(fill_alpha, 3)))
        attrs.append(("fill-rule", style.fill_rule.value))
    else:
        attrs.append(("fill", "none"))
    return tuple(attrs)


def text_style_to_svg_attrs(style: TextStyle, precision: int = DEFAULT_PRECISION) -> Attrs:
    attrs: list[tuple[str, str]] = [("fill", color_to_svg(style.color))]
    alpha = style.effective_alpha()
    if alpha < 1.0:
        attrs.append(("fill-opacity", format_number(alpha, 3)))
    attrs.append(("font-size", format_number(style.font_size, precision)))
    attrs.append(("font-family", style.font_family))
    attrs.append(("font-weight", style.font_weight.value))
    attrs.append(("text-anchor", style.alignment.value))
    return tuple(attrs)


def build_document(
    width: int,
    height: int,
    elements: list[SvgElement],
    precision: int = DEFAULT_PRECISION,
) -> str:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "version": "1.1",
            "width": str(width),
            "height": str(height),
            "viewBox": f"0 0 {width} {height}",
        },
    )
    for element in elements:
        root.append(element.to_element(precision))
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode", short_empty_elements=True)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
