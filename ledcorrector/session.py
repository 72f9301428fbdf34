"""Caller-owned selection state driving the correction pipeline."""

from __future__ import annotations

import logging
import re

from .const import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    CLIPBOARD_HEX,
    CLIPBOARD_RGB,
    DEFAULT_BRAND,
    DEFAULT_BRIGHTNESS,
    DEFAULT_COLOR,
    DEFAULT_DEVICE,
    DEFAULT_MAX_BRIGHTNESS,
)
from .conversion import hex_to_rgb, is_valid_hex
from .correction import build_result
from .helpers.numeric import clamp
from .models import CorrectionResult, RGBColor
from .profiles import default_profile_for_brand, require_brand, require_profile

__all__ = ["CorrectorSession"]

_LOGGER = logging.getLogger(__name__)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
_CHANNELS = ("r", "g", "b")


def _parse_channel(raw: str | int | float | None) -> int:
    """Parse typed channel input; anything without a leading integer becomes 0."""

    if isinstance(raw, bool) or raw is None:
        return 0
    if isinstance(raw, (int, float)):
        return int(raw)
    match = _LEADING_INT_RE.match(raw)
    return int(match.group(1)) if match else 0


class CorrectorSession:
    """Current color, device and brightness for one user or request.

    The correction core is stateless; a session holds the current selection
    and feeds it into :func:`~ledcorrector.correction.build_result`.
    """

    def __init__(
        self,
        *,
        color: RGBColor | None = None,
        device: str = DEFAULT_DEVICE,
        brightness: int = DEFAULT_BRIGHTNESS,
        max_brightness: int = DEFAULT_MAX_BRIGHTNESS,
    ) -> None:
        profile = require_profile(device)
        self._color = color or RGBColor(r=DEFAULT_COLOR[0], g=DEFAULT_COLOR[1], b=DEFAULT_COLOR[2])
        self._device = profile.key
        self._brand = profile.brand
        self._max_brightness = max(0, max_brightness)
        self._brightness = self._clamp_brightness(brightness)

    @property
    def color(self) -> RGBColor:
        return self._color

    @property
    def device(self) -> str:
        return self._device

    @property
    def brand(self) -> str:
        return self._brand

    @property
    def brightness(self) -> int:
        return self._brightness

    def set_hex(self, text: str) -> bool:
        """Apply typed hex input; invalid text is ignored and the color kept."""

        value = text if text.startswith("#") else f"#{text}"
        if not is_valid_hex(value):
            return False
        parsed = hex_to_rgb(value)
        if parsed is None:  # pragma: no cover - guarded by is_valid_hex
            return False
        self._color = parsed
        return True

    def normalized_hex(self) -> str:
        """Canonical hex of the current color, shown when the hex field loses focus."""

        return self._color.hex

    def set_channel(self, channel: str, raw: str | int | float | None) -> RGBColor:
        """Update one of ``r``, ``g`` or ``b`` from typed input, clamped to 0-255."""

        if channel not in _CHANNELS:
            raise ValueError(f"Unknown channel: {channel!r}")
        value = int(clamp(_parse_channel(raw), CHANNEL_MIN, CHANNEL_MAX))
        self._color = self._color.model_copy(update={channel: value})
        return self._color

    def set_rgb(self, r: float, g: float, b: float) -> RGBColor:
        self._color = RGBColor.clamped(r, g, b)
        return self._color

    def apply_preset(self, hex_value: str) -> bool:
        parsed = hex_to_rgb(hex_value)
        if parsed is None:
            _LOGGER.debug("Ignoring invalid preset color %s", hex_value)
            return False
        self._color = parsed
        return True

    def select_brand(self, brand: str) -> str:
        """Switch brand tabs, selecting that brand's first device."""

        require_brand(brand)
        profile = default_profile_for_brand(brand)
        if profile is not None:
            self._device = profile.key
        self._brand = brand
        return self._device

    def select_device(self, key: str) -> str:
        profile = require_profile(key)
        self._device = profile.key
        self._brand = profile.brand
        return self._device

    def set_brightness(self, value: str | int | float | None) -> int:
        self._brightness = self._clamp_brightness(_parse_channel(value))
        return self._brightness

    def render(self) -> CorrectionResult:
        return build_result(self._color, self._device, self._brightness)

    def clipboard_text(self, kind: str = CLIPBOARD_HEX) -> str:
        """Text placed on the clipboard for the corrected ``hex`` or ``rgb`` value."""

        result = self.render()
        if kind == CLIPBOARD_HEX:
            return result.corrected_hex
        if kind == CLIPBOARD_RGB:
            return result.corrected_rgb_text
        raise ValueError(f"Unknown clipboard format: {kind!r}")

    def _clamp_brightness(self, value: int) -> int:
        return int(clamp(value, 0, self._max_brightness))
