"""RGB, HSL and HEX conversions used by the correction pipeline."""

from __future__ import annotations

import re

from .const import HEX_COLOR_PATTERN
from .helpers.numeric import clamp_channel, round_half_up
from .models import HSLColor, RGBColor

__all__ = [
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_valid_hex",
    "rgb_to_hex",
    "rgb_to_hsl",
]

_HEX_RE = re.compile(HEX_COLOR_PATTERN)
_HEX_GROUPS_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def rgb_to_hsl(r: float, g: float, b: float) -> HSLColor:
    """Convert 0-255 channels to whole-degree hue and whole-percent S/L.

    Achromatic input yields hue and saturation of zero. When several channels
    share the maximum, red wins over green and green over blue. A hue that
    rounds up to 360 wraps to 0.
    """

    r /= 255
    g /= 255
    b /= 255

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        delta = high - low
        if lightness > 0.5:
            saturation = delta / (2 - high - low)
        else:
            saturation = delta / (high + low)

        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return HSLColor(
        h=round_half_up(hue * 360) % 360,
        s=round_half_up(saturation * 100),
        l=round_half_up(lightness * 100),
    )


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


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:  # noqa: E741
    """Convert HSL back to rounded 0-255 channels.

    The result is not clamped; callers pin it into range when needed.
    """

    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        red = green = blue = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        red = _hue_to_channel(p, q, h + 1 / 3)
        green = _hue_to_channel(p, q, h)
        blue = _hue_to_channel(p, q, h - 1 / 3)

    return (
        round_half_up(red * 255),
        round_half_up(green * 255),
        round_half_up(blue * 255),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Return ``#RRGGBB`` in uppercase, clamping and rounding each channel first."""

    return "#" + "".join(f"{clamp_channel(channel):02X}" for channel in (r, g, b))


def hex_to_rgb(value: str) -> RGBColor | None:
    """Parse ``#RRGGBB`` (``#`` optional, any case); ``None`` when malformed."""

    if not isinstance(value, str):
        return None
    match = _HEX_GROUPS_RE.fullmatch(value)
    if match is None:
        return None
    red, green, blue = (int(group, 16) for group in match.groups())
    return RGBColor(r=red, g=green, b=blue)


def is_valid_hex(value: str) -> bool:
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None
