"""Shared data models for LED color correction."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .const import HEX_COLOR_PATTERN
from .helpers.numeric import clamp_channel

__all__ = [
    "RGBColor",
    "HSLColor",
    "HueCorrectionRule",
    "DeviceProfile",
    "ProfileSummary",
    "CorrectionRequest",
    "CorrectionResult",
    "ColorCategory",
    "BrandSummary",
]

ColorCategory = Literal["red", "orange", "yellow", "green", "teal", "blue", "purple", "pink"]


class RGBColor(BaseModel):
    """Integer RGB triple with every channel inside 0-255."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> "RGBColor":
        """Build a color from arbitrary numbers, rounding and clamping each channel."""

        return cls(r=clamp_channel(r), g=clamp_channel(g), b=clamp_channel(b))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb_text(self) -> str:
        return f"{self.r}, {self.g}, {self.b}"


class HSLColor(BaseModel):
    """Hue in whole degrees, saturation and lightness in whole percent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    h: int = Field(ge=0, lt=360)
    s: int = Field(ge=0, le=100)
    l: int = Field(ge=0, le=100)  # noqa: E741


class HueCorrectionRule(BaseModel):
    """Override applied when a hue falls inside ``[hue_min, hue_max]``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hue_min: float = Field(ge=0, le=360)
    hue_max: float = Field(ge=0, le=360)
    green_multiplier: float | None = Field(default=None, ge=0)
    blue_multiplier: float | None = Field(default=None, ge=0)
    hue_shift: float = 0

    @model_validator(mode="after")
    def _check_range(self) -> "HueCorrectionRule":
        if self.hue_min > self.hue_max:
            raise ValueError("hue_min must not exceed hue_max")
        return self

    def contains(self, hue: float) -> bool:
        return self.hue_min <= hue <= self.hue_max


class DeviceProfile(BaseModel):
    """Correction characteristics of a physical LED product."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str
    name: str
    brand: str
    software: str
    green_reduction: float = Field(gt=0, le=1)
    hue_shift: float
    saturation_boost: float = Field(ge=1)
    blue_reduction: float = Field(gt=0, le=1)
    brightness_recommendation: int | None = Field(default=None, ge=0, le=100)
    hue_corrections: tuple[HueCorrectionRule, ...] = ()


class ProfileSummary(BaseModel):
    """Listing entry for a device profile."""

    model_config = ConfigDict(extra="forbid")

    key: str
    name: str
    brand: str
    software: str
    brightness_recommendation: int | None = None

    @classmethod
    def from_profile(cls, profile: DeviceProfile) -> "ProfileSummary":
        return cls(
            key=profile.key,
            name=profile.name,
            brand=profile.brand,
            software=profile.software,
            brightness_recommendation=profile.brightness_recommendation,
        )


class CorrectionRequest(BaseModel):
    """Target color, device and brightness submitted for correction."""

    model_config = ConfigDict(extra="forbid")

    hex: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    rgb: RGBColor | None = None
    device: str | None = None
    brightness: int = Field(default=100, ge=0)

    @model_validator(mode="after")
    def _check_target(self) -> "CorrectionRequest":
        if (self.hex is None) == (self.rgb is None):
            raise ValueError("Provide exactly one of 'hex' or 'rgb'")
        return self

    def target(self) -> RGBColor:
        """Return the requested color as :class:`RGBColor`."""

        if self.rgb is not None:
            return self.rgb

        digits = (self.hex or "").lstrip("#")
        return RGBColor(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))


class CorrectionResult(BaseModel):
    """Corrected color plus the advisory text shown alongside it."""

    model_config = ConfigDict(extra="forbid")

    device: str
    target: RGBColor
    target_hex: str
    target_rgb_text: str
    hue: int
    category: ColorCategory
    corrected: RGBColor
    brightness: int
    adjusted: RGBColor
    corrected_hex: str
    corrected_rgb_text: str
    tip: str
    software_hint: str
    brightness_tip: str


class BrandSummary(BaseModel):
    """Brand tab with the device keys listed under it."""

    model_config = ConfigDict(extra="forbid")

    brand: str
    name: str
    devices: list[str] = Field(default_factory=list)
