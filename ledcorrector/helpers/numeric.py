"""Rounding and clamping shared by the color math."""

from __future__ import annotations

import math

from ..const import CHANNEL_MAX, CHANNEL_MIN

__all__ = ["clamp", "clamp_channel", "round_half_up"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards positive infinity."""

    return int(math.floor(value + 0.5))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def clamp_channel(value: float) -> int:
    """Round ``value`` and pin it inside the 0-255 channel range."""

    return int(clamp(round_half_up(value), CHANNEL_MIN, CHANNEL_MAX))
