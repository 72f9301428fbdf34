"""Static registry of LED device correction profiles."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .const import BRAND_NAMES, UNKNOWN_PROFILE_MESSAGE
from .models import BrandSummary, DeviceProfile, HueCorrectionRule, ProfileSummary

__all__ = [
    "DEVICE_PROFILES",
    "UnknownBrandError",
    "UnknownProfileError",
    "default_profile_for_brand",
    "get_profile",
    "list_brand_summaries",
    "list_brands",
    "list_profiles",
    "profiles_for_brand",
    "require_brand",
    "require_profile",
]


class UnknownProfileError(LookupError):
    """Raised when a device profile key is not registered."""

    def __init__(self, key: str) -> None:
        super().__init__(f"{UNKNOWN_PROFILE_MESSAGE}: {key!r}")
        self.key = key


class UnknownBrandError(LookupError):
    """Raised when a brand has no registered device profiles."""

    def __init__(self, brand: str) -> None:
        super().__init__(f"Unknown brand: {brand!r}")
        self.brand = brand


def _rule(
    hue_min: float,
    hue_max: float,
    *,
    green: float | None = None,
    blue: float | None = None,
    shift: float = 0,
) -> HueCorrectionRule:
    return HueCorrectionRule(
        hue_min=hue_min,
        hue_max=hue_max,
        green_multiplier=green,
        blue_multiplier=blue,
        hue_shift=shift,
    )


_PROFILES: tuple[DeviceProfile, ...] = (
    # Lian Li
    DeviceProfile(
        key="tl-fans",
        name="Lian Li TL Fans",
        brand="lianli",
        software="L-Connect",
        green_reduction=0.85,
        hue_shift=-8,
        saturation_boost=1.15,
        blue_reduction=0.7,
        hue_corrections=(
            _rule(15, 45, green=0.08, shift=-10),
            _rule(45, 65, green=0.15, shift=-5),
            _rule(270, 300, blue=0.85, shift=5),
            _rule(170, 200, green=0.9, shift=3),
        ),
    ),
    DeviceProfile(
        key="strimer",
        name="Lian Li Strimer",
        brand="lianli",
        software="L-Connect",
        green_reduction=0.80,
        hue_shift=-10,
        saturation_boost=1.2,
        blue_reduction=0.65,
        brightness_recommendation=40,
        hue_corrections=(
            _rule(15, 45, green=0.10, shift=-12),
            _rule(45, 65, green=0.18, shift=-6),
            _rule(270, 300, blue=0.82, shift=6),
            _rule(170, 200, green=0.88, shift=4),
        ),
    ),
    DeviceProfile(
        key="sl-fans",
        name="Lian Li SL Fans",
        brand="lianli",
        software="L-Connect",
        green_reduction=0.88,
        hue_shift=-6,
        saturation_boost=1.1,
        blue_reduction=0.75,
        hue_corrections=(
            _rule(15, 45, green=0.12, shift=-8),
            _rule(45, 65, green=0.20, shift=-4),
            _rule(270, 300, blue=0.88, shift=4),
            _rule(170, 200, green=0.92, shift=2),
        ),
    ),
    # Corsair
    DeviceProfile(
        key="corsair-ql",
        name="Corsair QL Fans",
        brand="corsair",
        software="iCUE",
        green_reduction=0.73,
        hue_shift=-12,
        saturation_boost=1.2,
        blue_reduction=0.7,
        hue_corrections=(
            # R255 G24 B0 reads as orange on QL rings
            _rule(15, 45, green=0.09, shift=-15),
            _rule(45, 65, green=0.12, shift=-8),
            _rule(270, 300, blue=0.80, shift=8),
            _rule(170, 200, green=0.85, shift=5),
        ),
    ),
    DeviceProfile(
        key="corsair-ll",
        name="Corsair LL Fans",
        brand="corsair",
        software="iCUE",
        green_reduction=0.78,
        hue_shift=-10,
        saturation_boost=1.15,
        blue_reduction=0.72,
        hue_corrections=(
            _rule(15, 45, green=0.10, shift=-12),
            _rule(45, 65, green=0.15, shift=-6),
            _rule(270, 300, blue=0.82, shift=6),
            _rule(170, 200, green=0.88, shift=4),
        ),
    ),
    DeviceProfile(
        key="corsair-sp",
        name="Corsair SP/ML Fans",
        brand="corsair",
        software="iCUE",
        green_reduction=0.80,
        hue_shift=-8,
        saturation_boost=1.1,
        blue_reduction=0.75,
        hue_corrections=(
            # tuned against #FF4500
            _rule(15, 45, green=0.27, shift=-10),
            _rule(45, 65, green=0.18, shift=-5),
            _rule(270, 300, blue=0.85, shift=5),
            _rule(170, 200, green=0.90, shift=3),
        ),
    ),
    # NZXT
    DeviceProfile(
        key="nzxt-aer",
        name="NZXT Aer RGB",
        brand="nzxt",
        software="CAM",
        green_reduction=0.82,
        hue_shift=-8,
        saturation_boost=1.15,
        blue_reduction=0.70,
        hue_corrections=(
            _rule(15, 45, green=0.05, shift=-12),
            _rule(45, 65, green=0.10, shift=-8),
            _rule(270, 300, blue=0.80, shift=8),
            _rule(170, 200, green=0.85, shift=5),
        ),
    ),
    DeviceProfile(
        key="nzxt-kraken",
        name="NZXT Kraken",
        brand="nzxt",
        software="CAM",
        green_reduction=0.80,
        hue_shift=-10,
        saturation_boost=1.2,
        blue_reduction=0.68,
        hue_corrections=(
            _rule(15, 45, green=0.02, shift=-15),
            _rule(45, 65, green=0.08, shift=-10),
            _rule(270, 300, blue=0.78, shift=10),
            _rule(170, 200, green=0.82, shift=6),
        ),
    ),
    DeviceProfile(
        key="nzxt-hue",
        name="NZXT Hue 2",
        brand="nzxt",
        software="CAM",
        green_reduction=0.85,
        hue_shift=-6,
        saturation_boost=1.1,
        blue_reduction=0.75,
        hue_corrections=(
            _rule(15, 45, green=0.08, shift=-10),
            _rule(45, 65, green=0.12, shift=-6),
            _rule(270, 300, blue=0.85, shift=5),
            _rule(170, 200, green=0.88, shift=4),
        ),
    ),
    # Cooler Master
    DeviceProfile(
        key="cm-masterfan",
        name="CM MasterFan",
        brand="coolermaster",
        software="MasterPlus+",
        green_reduction=0.85,
        hue_shift=-5,
        saturation_boost=1.1,
        blue_reduction=0.78,
        hue_corrections=(
            _rule(15, 45, green=0.15, shift=-8),
            _rule(45, 65, green=0.20, shift=-4),
            _rule(270, 300, blue=0.88, shift=4),
            _rule(170, 200, green=0.90, shift=2),
        ),
    ),
    DeviceProfile(
        key="cm-sickleflow",
        name="CM SickleFlow",
        brand="coolermaster",
        software="MasterPlus+",
        green_reduction=0.82,
        hue_shift=-7,
        saturation_boost=1.15,
        blue_reduction=0.75,
        hue_corrections=(
            _rule(15, 45, green=0.12, shift=-10),
            _rule(45, 65, green=0.18, shift=-5),
            _rule(270, 300, blue=0.85, shift=5),
            _rule(170, 200, green=0.88, shift=3),
        ),
    ),
    DeviceProfile(
        key="cm-halos",
        name="CM MasterFan Halo",
        brand="coolermaster",
        software="MasterPlus+",
        green_reduction=0.80,
        hue_shift=-8,
        saturation_boost=1.2,
        blue_reduction=0.72,
        hue_corrections=(
            _rule(15, 45, green=0.10, shift=-12),
            _rule(45, 65, green=0.15, shift=-6),
            _rule(270, 300, blue=0.82, shift=6),
            _rule(170, 200, green=0.85, shift=4),
        ),
    ),
)

DEVICE_PROFILES: Mapping[str, DeviceProfile] = MappingProxyType(
    {profile.key: profile for profile in _PROFILES}
)


def get_profile(key: str) -> DeviceProfile | None:
    """Return the profile registered under ``key`` or ``None``."""

    return DEVICE_PROFILES.get(key)


def require_profile(key: str) -> DeviceProfile:
    """Return the profile registered under ``key`` or raise :class:`UnknownProfileError`."""

    profile = DEVICE_PROFILES.get(key)
    if profile is None:
        raise UnknownProfileError(key)
    return profile


def list_brands() -> list[str]:
    """Brand identifiers in presentation order."""

    return [brand for brand in BRAND_NAMES if profiles_for_brand(brand)]


def require_brand(brand: str) -> str:
    if not profiles_for_brand(brand):
        raise UnknownBrandError(brand)
    return brand


def profiles_for_brand(brand: str) -> list[DeviceProfile]:
    return [profile for profile in DEVICE_PROFILES.values() if profile.brand == brand]


def default_profile_for_brand(brand: str) -> DeviceProfile | None:
    """First declared device of ``brand``, selected when its tab is opened."""

    profiles = profiles_for_brand(brand)
    return profiles[0] if profiles else None


def list_profiles(brand: str | None = None) -> list[ProfileSummary]:
    profiles = DEVICE_PROFILES.values() if brand is None else profiles_for_brand(brand)
    return [ProfileSummary.from_profile(profile) for profile in profiles]


def list_brand_summaries() -> list[BrandSummary]:
    return [
        BrandSummary(
            brand=brand,
            name=BRAND_NAMES[brand],
            devices=[profile.key for profile in profiles_for_brand(brand)],
        )
        for brand in list_brands()
    ]
