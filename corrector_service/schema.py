"""Re-export shared Pydantic models for the corrector service."""

from ledcorrector.models import (
    BrandSummary,
    CorrectionRequest,
    CorrectionResult,
    DeviceProfile,
    ProfileSummary,
    RGBColor,
)

__all__ = [
    "BrandSummary",
    "CorrectionRequest",
    "CorrectionResult",
    "DeviceProfile",
    "ProfileSummary",
    "RGBColor",
]
