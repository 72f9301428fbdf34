"""Shared pytest fixtures for ledcorrector tests."""

from __future__ import annotations

import pytest

from ledcorrector.models import DeviceProfile, RGBColor
from ledcorrector.profiles import require_profile
from ledcorrector.session import CorrectorSession


@pytest.fixture
def tl_fans() -> DeviceProfile:
    return require_profile("tl-fans")


@pytest.fixture
def orange() -> RGBColor:
    """Default target color of the corrector."""

    return RGBColor(r=255, g=102, b=0)


@pytest.fixture
def session() -> CorrectorSession:
    return CorrectorSession()
