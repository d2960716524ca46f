from __future__ import annotations

from dataclasses import dataclass
import re
from typing import ClassVar

from manimate_core.errors import ColorParseError


RGBA8 = tuple[int, int, int, int]

_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]+$")


def _clamp01(value: float) -> float:
    value = float(value)
    if value != value:
        raise ColorParseError("color channel must not be NaN")
    return max(0.0, min(1.0, value))


def _to_byte(value: float) -> int:
    return int(round(value * 255.0))


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels clamped into [0, 1] on construction."""

    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp01(self.r))
        object.__setattr__(self, "g", _clamp01(self.g))
        object.__setattr__(self, "b", _clamp01(self.b))
        object.__setattr__(self, "a", _clamp01(self.a))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @classmethod
    def rgba8(cls, r: int, g: int, b: int, a: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`; the `#` is optional."""
        if not isinstance(value, str):
            raise ColorParseError(f"hex color must be a string, got {type(value).__name__}")
        hex_value = value.strip()
        if hex_value.startswith("#"):
            hex_value = hex_value[1:]
        if not hex_value or not _HEX_DIGITS.match(hex_value):
            raise ColorParseError(f"invalid hex color: {value!r}")
        if len(hex_value) in (3, 4):
            channels = [int(ch * 2, 16) for ch in hex_value]
        elif len(hex_value) in (6, 8):
            channels = [int(hex_value[i : i + 2], 16) for i in range(0, len(hex_value), 2)]
        else:
            raise ColorParseError(f"hex color must have 3, 4, 6 or 8 digits: {value!r}")
        if len(channels) == 3:
            channels.append(255)
        return cls.rgba8(*channels)

    @classmethod
    def parse(cls, value: str) -> "Color":
        """Parse a hex color, `rgb(...)`/`rgba(...)` notation, or a named color."""
        if not isinstance(value, str):
            raise ColorParseError(f"color must be a string, got {type(value).__name__}")
        text = value.strip()
        named = _NAMED.get(text.lower())
        if named is not None:
            return named
        lowered = text.lower()
        if lowered.startswith("rgb"):
            return _parse_functional(text)
        return cls.from_hex(text)

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba8()
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_rgba8(self) -> RGBA8:
        return (_to_byte(self.r), _to_byte(self.g), _to_byte(self.b), _to_byte(self.a))

    def lerp(self, other: "Color", t: float) -> "Color":
        return Color(
            self.r + (other.r - self.r) * t,
            self.g + (other.g - self.g) * t,
            self.b + (other.b - self.b) * t,
            self.a + (other.a - self.a) * t,
        )

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.r, self.g, self.b, alpha)


def _parse_functional(text: str) -> Color:
    open_idx = text.find("(")
    close_idx = text.rfind(")")
    if open_idx < 0 or close_idx < open_idx:
        raise ColorParseError(f"invalid color function: {text!r}")
    name = text[:open_idx].strip().lower()
    parts = [p.strip() for p in text[open_idx + 1 : close_idx].split(",")]
    expected = 4 if name == "rgba" else 3
    if name not in ("rgb", "rgba") or len(parts) != expected:
        raise ColorParseError(f"invalid color function: {text!r}")
    try:
        r, g, b = (int(p) for p in parts[:3])
        alpha = float(parts[3]) if expected == 4 else 1.0
    except ValueError as exc:
        raise ColorParseError(f"invalid color component in {text!r}") from exc
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ColorParseError(f"color component out of range in {text!r}")
    return Color(r / 255.0, g / 255.0, b / 255.0, alpha)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.YELLOW = Color(1.0, 1.0, 0.0, 1.0)
Color.CYAN = Color(0.0, 1.0, 1.0, 1.0)
Color.MAGENTA = Color(1.0, 0.0, 1.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)

_NAMED = {
    "white": Color.WHITE,
    "black": Color.BLACK,
    "red": Color.RED,
    "green": Color.GREEN,
    "blue": Color.BLUE,
    "yellow": Color.YELLOW,
    "cyan": Color.CYAN,
    "magenta": Color.MAGENTA,
    "transparent": Color.TRANSPARENT,
}
