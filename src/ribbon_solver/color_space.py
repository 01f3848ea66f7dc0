"""Hex, RGB and normalized HSL conversions.

Public API:
- Color: immutable 8-bit RGB triple with canonical ``#RRGGBB`` hex
- parse_hex(value) -> Color
- normalize_hex(value) -> str
- rgb_to_hsl(color) -> HSL  (h in degrees [0,360), s and l in [0,1])
- hsl_to_rgb(h, s, l) -> Color
- hue_distance(a, b) -> float

Hex input accepts an optional leading ``#`` and either case; anything else
raises ``InvalidColorFormat``. Output hex is always uppercase.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple, Union

from .errors import InvalidColorFormat

__all__ = [
    "Color",
    "HSL",
    "ColorLike",
    "parse_hex",
    "normalize_hex",
    "as_color",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hue_distance",
]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")
_HEX_ERR = "Color must be a #RRGGBB hex string: {value!r}"


class HSL(NamedTuple):
    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class Color:
    """An sRGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or not 0 <= v <= 255:
                raise InvalidColorFormat(
                    f"Channel {name} must be an int in 0..255: {v!r}",
                    context={"value": v, "channel": name},
                )

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_hsl(self) -> HSL:
        return rgb_to_hsl(self)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.hex


ColorLike = Union[str, Color]


def parse_hex(value: str) -> Color:
    if not isinstance(value, str):
        raise InvalidColorFormat(_HEX_ERR.format(value=value), context={"value": value})
    m = _HEX_RE.match(value.strip())
    if m is None:
        raise InvalidColorFormat(_HEX_ERR.format(value=value), context={"value": value})
    return Color(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def normalize_hex(value: str) -> str:
    return parse_hex(value).hex


def as_color(value: ColorLike) -> Color:
    if isinstance(value, Color):
        return value
    return parse_hex(value)


def _to_byte(c: float) -> int:
    v = int(round(c * 255))
    return 0 if v < 0 else 255 if v > 255 else v


def rgb_to_hsl(color: ColorLike) -> HSL:
    c = as_color(color)
    r, g, b = c.r / 255.0, c.g / 255.0, c.b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2  # noqa: E741
    if mx == mn:
        return HSL(0.0, 0.0, l)
    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return HSL((h * 60.0) % 360.0, s, l)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Color:  # noqa: E741
    """Convert HSL (h in degrees, s/l in [0,1]) to an 8-bit colour.

    Saturation and lightness are clamped to [0,1]; hue wraps modulo 360.
    """
    s = min(1.0, max(0.0, s))
    l = min(1.0, max(0.0, l))  # noqa: E741
    if s == 0:
        v = _to_byte(l)
        return Color(v, v, v)
    hn = (h % 360.0) / 360.0
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return Color(
        _to_byte(_hue_to_channel(p, q, hn + 1 / 3)),
        _to_byte(_hue_to_channel(p, q, hn)),
        _to_byte(_hue_to_channel(p, q, hn - 1 / 3)),
    )


def hue_distance(a: float, b: float) -> float:
    d = abs((a % 360.0) - (b % 360.0))
    return min(d, 360.0 - d)
