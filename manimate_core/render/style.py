from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
import math

from .color import Color


class FillRule(str, Enum):
    NONZERO = "nonzero"
    EVENODD = "evenodd"


class FontWeight(str, Enum):
    NORMAL = "normal"
    BOLD = "bold"


class TextAlignment(str, Enum):
    LEFT = "start"
    CENTER = "middle"
    RIGHT = "end"


def _clamp_opacity(value: float) -> float:
    value = float(value)
    if math.isnan(value):
        raise ValueError("opacity must not be NaN")
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class PathStyle:
    """Stroke and fill for one draw_path call.

    `None` for a color means "not painted". Opacity multiplies the alpha of
    both colors and is clamped into [0, 1].
    """

    stroke_color: Color | None = Color.WHITE
    stroke_width: float = 2.0
    fill_color: Color | None = None
    fill_rule: FillRule = FillRule.NONZERO
    opacity: float = 1.0

    def __post_init__(self) -> None:
        width = float(self.stroke_width)
        if math.isnan(width) or width < 0.0:
            raise ValueError("stroke_width must be >= 0")
        object.__setattr__(self, "stroke_width", width)
        object.__setattr__(self, "opacity", _clamp_opacity(self.opacity))
        object.__setattr__(self, "fill_rule", FillRule(self.fill_rule))

    @classmethod
    def stroke(cls, color: Color, width: float) -> "PathStyle":
        return cls(stroke_color=color, stroke_width=width, fill_color=None)

    @classmethod
    def fill(cls, color: Color) -> "PathStyle":
        return cls(stroke_color=None, stroke_width=0.0, fill_color=color)

    @property
    def has_stroke(self) -> bool:
        return self.stroke_color is not None

    @property
    def has_fill(self) -> bool:
        return self.fill_color is not None

    def with_stroke(self, color: Color, width: float) -> "PathStyle":
        return replace(self, stroke_color=color, stroke_width=width)

    def without_stroke(self) -> "PathStyle":
        return replace(self, stroke_color=None, stroke_width=0.0)

    def with_fill(self, color: Color) -> "PathStyle":
        return replace(self, fill_color=color)

    def without_fill(self) -> "PathStyle":
        return replace(self, fill_color=None)

    def with_fill_rule(self, rule: FillRule) -> "PathStyle":
        return replace(self, fill_rule=rule)

    def with_opacity(self, opacity: float) -> "PathStyle":
        return replace(self, opacity=opacity)

    def effective_stroke_alpha(self) -> float:
        return 0.0 if self.stroke_color is None else self.stroke_color.a * self.opacity

    def effective_fill_alpha(self) -> float:
        return 0.0 if self.fill_color is None else self.fill_color.a * self.opacity


@dataclass(frozen=True)
class TextStyle:
    color: Color = Color.WHITE
    font_size: float = 48.0
    font_family: str = "sans-serif"
    font_weight: FontWeight = FontWeight.NORMAL
    alignment: TextAlignment = TextAlignment.LEFT
    opacity: float = 1.0

    def __post_init__(self) -> None:
        size = float(self.font_size)
        if not size > 0.0 or math.isinf(size):
            raise ValueError("font_size must be a positive number")
        if not isinstance(self.font_family, str) or not self.font_family.strip():
            raise ValueError("font_family must be a non-empty string")
        object.__setattr__(self, "font_size", size)
        object.__setattr__(self, "opacity", _clamp_opacity(self.opacity))
        object.__setattr__(self, "font_weight", FontWeight(self.font_weight))
        object.__setattr__(self, "alignment", TextAlignment(self.alignment))

    def with_font_family(self, family: str) -> "TextStyle":
        return replace(self, font_family=family)

    def with_font_size(self, size: float) -> "TextStyle":
        return replace(self, font_size=size)

    def with_weight(self, weight: FontWeight) -> "TextStyle":
        return replace(self, font_weight=weight)

    def with_alignment(self, alignment: TextAlignment) -> "TextStyle":
        return replace(self, alignment=alignment)

    def with_opacity(self, opacity: float) -> "TextStyle":
        return replace(self, opacity=opacity)

    def effective_alpha(self) -> float:
        return self.color.a * self.opacity


class PathStyleBuilder:
    """Mutable, chainable PathStyle construction; `build()` returns the frozen value."""

    def __init__(self, base: PathStyle | None = None) -> None:
        base = base or PathStyle()
        self._fields = {
            "stroke_color": base.stroke_color,
            "stroke_width": base.stroke_width,
            "fill_color": base.fill_color,
            "fill_rule": base.fill_rule,
            "opacity": base.opacity,
        }

    def stroke(self, color: Color | None, width: float | None = None) -> "PathStyleBuilder":
        self._fields["stroke_color"] = color
        if width is not None:
            self._fields["stroke_width"] = width
        return self

    def stroke_width(self, width: float) -> "PathStyleBuilder":
        self._fields["stroke_width"] = width
        return self

    def fill(self, color: Color | None) -> "PathStyleBuilder":
        self._fields["fill_color"] = color
        return self

    def fill_rule(self, rule: FillRule) -> "PathStyleBuilder":
        self._fields["fill_rule"] = rule
        return self

    def opacity(self, opacity: float) -> "PathStyleBuilder":
        self._fields["opacity"] = opacity
        return self

    def build(self) -> PathStyle:
        return PathStyle(**self._fields)


class TextStyleBuilder:
    def __init__(self, base: TextStyle | None = None) -> None:
        base = base or TextStyle()
        self._fields = {
            "color": base.color,
            "font_size": base.font_size,
            "font_family": base.font_family,
            "font_weight": base.font_weight,
            "alignment": base.alignment,
            "opacity": base.opacity,
        }

    def color(self, color: Color) -> "TextStyleBuilder":
        self._fields["color"] = color
        return self

    def font_size(self, size: float) -> "TextStyleBuilder":
        self._fields["font_size"] = size
        return self

    def font_family(self, family: str) -> "TextStyleBuilder":
        self._fields["font_family"] = family
        return self

    def weight(self, weight: FontWeight) -> "TextStyleBuilder":
        self._fields["font_weight"] = weight
        return self

    def alignment(self, alignment: TextAlignment) -> "TextStyleBuilder":
        self._fields["alignment"] = alignment
        return self

    def opacity(self, opacity: float) -> "TextStyleBuilder":
        self._fields["opacity"] = opacity
        return self

    def build(self) -> TextStyle:
        return TextStyle(**self._fields)
