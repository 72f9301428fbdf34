"""FastAPI application exposing device profiles and color correction."""

from __future__ import annotations

import logging
import os
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Final

from fastapi import FastAPI, HTTPException
from starlette import status

from ledcorrector.const import (
    DEFAULT_CACHE_SIZE,
    DEFAULT_DEVICE,
    DEFAULT_MAX_BRIGHTNESS,
    DEFAULT_TELEMETRY_EVENTS,
    ENV_CACHE_SIZE,
    ENV_DEFAULT_DEVICE,
    ENV_MAX_BRIGHTNESS,
    ENV_TELEMETRY_EVENTS,
    TITLE,
)
from ledcorrector.correction import build_result
from ledcorrector.profiles import (
    UnknownProfileError,
    get_profile,
    list_brand_summaries,
    list_profiles,
    require_profile,
)
from ledcorrector.telemetry import CorrectionRecorder

from .schema import BrandSummary, CorrectionRequest, CorrectionResult, DeviceProfile, ProfileSummary

_LOGGER = logging.getLogger(__name__)

CacheKey = tuple[tuple[int, int, int], str, int]


@dataclass(frozen=True)
class Settings:
    """Service configuration derived from environment variables."""

    default_device: str
    max_brightness: int
    cache_size: int
    telemetry_events: int


def _parse_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _parse_device(value: str | None, default: str) -> str:
    if not value:
        return default
    if get_profile(value) is None:
        _LOGGER.warning("Unknown default device %s; falling back to %s", value, default)
        return default
    return value


def _load_settings() -> Settings:
    """Load service configuration from environment variables."""

    return Settings(
        default_device=_parse_device(os.getenv(ENV_DEFAULT_DEVICE), DEFAULT_DEVICE),
        max_brightness=_parse_int(os.getenv(ENV_MAX_BRIGHTNESS), DEFAULT_MAX_BRIGHTNESS),
        cache_size=_parse_int(os.getenv(ENV_CACHE_SIZE), DEFAULT_CACHE_SIZE),
        telemetry_events=_parse_int(os.getenv(ENV_TELEMETRY_EVENTS), DEFAULT_TELEMETRY_EVENTS),
    )


def _now() -> float:
    """Obtain a monotonic timestamp for duration measurements."""

    return time.perf_counter()


class CorrectionCache:
    """LRU cache of correction results keyed by color, device and brightness."""

    def __init__(self, max_size: int) -> None:
        self._max_size = max_size
        self._data: OrderedDict[CacheKey, CorrectionResult] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(
        self, key: CacheKey, builder: Callable[[], CorrectionResult]
    ) -> tuple[CorrectionResult, bool]:
        """Return the cached result for ``key`` and whether it was a hit."""

        if key in self._data:
            value = self._data.pop(key)
            self._data[key] = value
            self.hits += 1
            return value, True

        value = builder()
        self.misses += 1
        self._data[key] = value
        while len(self._data) > self._max_size:
            self._data.popitem(last=False)
        return value, False

    def stats(self) -> dict[str, int]:
        return {
            "size": len(self._data),
            "max_size": self._max_size,
            "hits": self.hits,
            "misses": self.misses,
        }


SETTINGS: Final[Settings] = _load_settings()
CORRECTION_CACHE = CorrectionCache(SETTINGS.cache_size)
RECORDER = CorrectionRecorder(max_events=SETTINGS.telemetry_events)
app = FastAPI(title=TITLE)


@app.get("/brands", response_model=list[BrandSummary])
async def brands() -> list[BrandSummary]:
    """List brand tabs with their device keys."""

    return list_brand_summaries()


@app.get("/profiles", response_model=list[ProfileSummary])
async def profiles(brand: str | None = None) -> list[ProfileSummary]:
    """List device profiles, optionally limited to one brand."""

    return list_profiles(brand)


@app.get("/profiles/{key}", response_model=DeviceProfile)
async def profile_detail(key: str) -> DeviceProfile:
    try:
        return require_profile(key)
    except UnknownProfileError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@app.post("/correct", response_model=CorrectionResult)
async def correct(payload: CorrectionRequest) -> CorrectionResult:
    """Correct the requested color for a device and record telemetry."""

    device = payload.device or SETTINGS.default_device
    try:
        require_profile(device)
    except UnknownProfileError as exc:
        _LOGGER.warning("correct_rejected device=%s reason=unknown_profile", device)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    target = payload.target()
    brightness = min(payload.brightness, SETTINGS.max_brightness)

    start = _now()
    result, cached = CORRECTION_CACHE.get(
        (target.as_tuple(), device, brightness),
        lambda: build_result(target, device, brightness),
    )
    duration_ms = max((_now() - start) * 1000, 0.0)
    RECORDER.record(result, duration_ms=duration_ms, cached=cached)
    return result


@app.get("/diagnostics")
async def diagnostics() -> dict[str, Any]:
    """Expose recent corrections and cache statistics."""

    events = RECORDER.as_dicts()
    return {
        "settings": {
            "default_device": SETTINGS.default_device,
            "max_brightness": SETTINGS.max_brightness,
        },
        "cache": CORRECTION_CACHE.stats(),
        "total_corrections": RECORDER.total,
        "recent_count": len(events),
        "recent_corrections": events,
    }
