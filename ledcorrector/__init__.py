"""Color correction for addressable RGB LED fans, strips and pumps."""

from __future__ import annotations

from .classifier import classify_hue, tip_for_category
from .conversion import hex_to_rgb, hsl_to_rgb, is_valid_hex, rgb_to_hex, rgb_to_hsl
from .correction import apply_brightness, build_result, correct_color, match_hue_rule
from .models import (
    CorrectionRequest,
    CorrectionResult,
    DeviceProfile,
    HSLColor,
    HueCorrectionRule,
    ProfileSummary,
    RGBColor,
)
from .profiles import (
    DEVICE_PROFILES,
    UnknownBrandError,
    UnknownProfileError,
    get_profile,
    require_profile,
)
from .session import CorrectorSession

__version__ = "0.1.0"

__all__ = [
    "DEVICE_PROFILES",
    "CorrectionRequest",
    "CorrectionResult",
    "CorrectorSession",
    "DeviceProfile",
    "HSLColor",
    "HueCorrectionRule",
    "ProfileSummary",
    "RGBColor",
    "UnknownBrandError",
    "UnknownProfileError",
    "apply_brightness",
    "build_result",
    "classify_hue",
    "correct_color",
    "get_profile",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_valid_hex",
    "match_hue_rule",
    "require_profile",
    "rgb_to_hex",
    "rgb_to_hsl",
    "tip_for_category",
]
