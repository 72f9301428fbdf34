"""Hue categories and the advisory text shown next to a corrected color."""

from __future__ import annotations

from .const import (
    BRIGHTNESS_TIP_TEMPLATE,
    CATEGORY_RED,
    COLOR_TIPS,
    DEFAULT_TIP,
    GENERIC_BRIGHTNESS_TIP,
    HUE_CATEGORIES,
    SOFTWARE_HINT_TEMPLATE,
)
from .models import ColorCategory, DeviceProfile

__all__ = [
    "brightness_tip",
    "classify_hue",
    "software_hint",
    "tip_for_category",
]


def classify_hue(hue: float) -> ColorCategory:
    """Bucket a hue angle into one of the eight named color categories."""

    wrapped = hue % 360
    for lower, upper, category in HUE_CATEGORIES:
        if lower <= wrapped < upper:
            return category  # type: ignore[return-value]
    return CATEGORY_RED  # pragma: no cover - HUE_CATEGORIES covers [0, 360)


def tip_for_category(category: str) -> str:
    return COLOR_TIPS.get(category, DEFAULT_TIP)


def software_hint(profile: DeviceProfile) -> str:
    return SOFTWARE_HINT_TEMPLATE.format(software=profile.software)


def brightness_tip(profile: DeviceProfile) -> str:
    """Recommend the profile's brightness level, or fall back to the generic hint."""

    if profile.brightness_recommendation:
        return BRIGHTNESS_TIP_TEMPLATE.format(
            name=profile.name, percent=profile.brightness_recommendation
        )
    return GENERIC_BRIGHTNESS_TIP
