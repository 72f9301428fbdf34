"""Device-specific color correction for addressable LED hardware."""

from __future__ import annotations

import logging

from .classifier import brightness_tip, classify_hue, software_hint, tip_for_category
from .const import (
    COOL_BLUE_DAMPING,
    COOL_HUE_PEAK,
    COOL_HUE_RANGE,
    COOL_HUE_SPREAD,
    RECONCILE_HUE_THRESHOLD,
    RECONCILE_SATURATION_THRESHOLD,
    WARM_HUE_RANGE,
)
from .conversion import hsl_to_rgb, rgb_to_hsl
from .helpers.numeric import clamp, round_half_up
from .models import CorrectionResult, DeviceProfile, HueCorrectionRule, RGBColor
from .profiles import require_profile

__all__ = [
    "apply_brightness",
    "build_result",
    "correct_color",
    "match_hue_rule",
]

_LOGGER = logging.getLogger(__name__)


def match_hue_rule(profile: DeviceProfile, hue: float) -> HueCorrectionRule | None:
    """Return the first declared rule whose inclusive range contains ``hue``."""

    for rule in profile.hue_corrections:
        if rule.contains(hue):
            return rule
    return None


def correct_color(rgb: RGBColor, profile_key: str) -> RGBColor:
    """Map a target color to the value that should be sent to the device.

    Raises :class:`~ledcorrector.profiles.UnknownProfileError` when
    ``profile_key`` is not registered. Applying the correction twice is not
    expected to be a no-op.
    """

    profile = require_profile(profile_key)
    hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)

    red: float = rgb.r
    green: float = rgb.g
    blue: float = rgb.b
    hue: float = hsl.h

    rule = match_hue_rule(profile, hsl.h)
    if rule is not None:
        _LOGGER.debug(
            "hue_rule_match device=%s hue=%s range=%s-%s",
            profile.key,
            hsl.h,
            rule.hue_min,
            rule.hue_max,
        )
        if rule.green_multiplier is not None:
            green = round_half_up(rgb.g * rule.green_multiplier)
        if rule.blue_multiplier is not None:
            blue = round_half_up(rgb.b * rule.blue_multiplier)
        hue = clamp(hsl.h + rule.hue_shift, 0, 360)
    else:
        # Warm and cool bands are evaluated independently.
        warm_min, warm_max = WARM_HUE_RANGE
        if warm_min <= hsl.h <= warm_max:
            warm_factor = 1 - hsl.h / warm_max
            green_reduction = warm_factor * (1 - profile.green_reduction)
            green = round_half_up(rgb.g * (1 - green_reduction))
            hue = max(0, hsl.h + profile.hue_shift * warm_factor)

        cool_min, cool_max = COOL_HUE_RANGE
        if cool_min <= hsl.h <= cool_max:
            cool_factor = 1 - abs((hsl.h - COOL_HUE_PEAK) / COOL_HUE_SPREAD)
            blue_reduction = cool_factor * (1 - profile.blue_reduction)
            blue = round_half_up(rgb.b * (1 - blue_reduction * COOL_BLUE_DAMPING))

    saturation = min(100, hsl.s * profile.saturation_boost)

    if (
        abs(hue - hsl.h) > RECONCILE_HUE_THRESHOLD
        or abs(saturation - hsl.s) > RECONCILE_SATURATION_THRESHOLD
    ):
        # Anchor the HSL reconstruction to the direct channel correction.
        hsl_red, hsl_green, hsl_blue = hsl_to_rgb(hue, saturation, hsl.l)
        red = round_half_up((red + hsl_red) / 2)
        green = round_half_up((green + hsl_green) / 2)
        blue = round_half_up((blue + hsl_blue) / 2)

    return RGBColor.clamped(red, green, blue)


def apply_brightness(rgb: RGBColor, brightness: float) -> RGBColor:
    """Scale every channel by ``brightness`` percent, clamping above 100%."""

    factor = brightness / 100
    return RGBColor.clamped(rgb.r * factor, rgb.g * factor, rgb.b * factor)


def build_result(rgb: RGBColor, profile_key: str, brightness: int = 100) -> CorrectionResult:
    """Correct ``rgb`` for ``profile_key`` and assemble the presentation view."""

    profile = require_profile(profile_key)
    hsl = rgb_to_hsl(rgb.r, rgb.g, rgb.b)
    category = classify_hue(hsl.h)
    corrected = correct_color(rgb, profile.key)
    adjusted = apply_brightness(corrected, brightness)

    return CorrectionResult(
        device=profile.key,
        target=rgb,
        target_hex=rgb.hex,
        target_rgb_text=rgb.rgb_text,
        hue=hsl.h,
        category=category,
        corrected=corrected,
        brightness=brightness,
        adjusted=adjusted,
        corrected_hex=adjusted.hex,
        corrected_rgb_text=adjusted.rgb_text,
        tip=tip_for_category(category),
        software_hint=software_hint(profile),
        brightness_tip=brightness_tip(profile),
    )
