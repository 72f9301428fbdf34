"""Tests for hue categories and advisory text."""

from __future__ import annotations

import pytest

from ledcorrector.classifier import brightness_tip, classify_hue, software_hint, tip_for_category
from ledcorrector.const import COLOR_TIPS, DEFAULT_TIP, GENERIC_BRIGHTNESS_TIP
from ledcorrector.profiles import require_profile

CATEGORIES = {"red", "orange", "yellow", "green", "teal", "blue", "purple", "pink"}


@pytest.mark.parametrize(
    ("hue", "category"),
    [
        (0, "red"),
        (14, "red"),
        (15, "orange"),
        (44, "orange"),
        (45, "yellow"),
        (69, "yellow"),
        (70, "green"),
        (149, "green"),
        (150, "teal"),
        (199, "teal"),
        (200, "blue"),
        (259, "blue"),
        (260, "purple"),
        (309, "purple"),
        (310, "pink"),
        (339, "pink"),
        (340, "red"),
        (359, "red"),
        (360, "red"),
    ],
)
def test_classify_hue_boundaries(hue, category) -> None:
    assert classify_hue(hue) == category


def test_classify_hue_is_total_over_integer_hues() -> None:
    seen = {classify_hue(hue) for hue in range(360)}

    assert seen == CATEGORIES


def test_classify_hue_handles_fractional_hues() -> None:
    assert classify_hue(14.9) == "red"
    assert classify_hue(339.5) == "pink"


def test_every_category_has_a_tip() -> None:
    for category in CATEGORIES:
        assert tip_for_category(category) == COLOR_TIPS[category]


def test_unknown_category_falls_back_to_default_tip() -> None:
    assert tip_for_category("ultraviolet") == DEFAULT_TIP


def test_software_hint_names_companion_software() -> None:
    assert software_hint(require_profile("corsair-ql")) == (
        "Enter this value in iCUE to get your desired color"
    )


def test_brightness_tip_uses_profile_recommendation() -> None:
    tip = brightness_tip(require_profile("strimer"))

    assert "Lian Li Strimer" in tip
    assert "~40%" in tip


def test_brightness_tip_falls_back_to_generic_hint() -> None:
    assert brightness_tip(require_profile("tl-fans")) == GENERIC_BRIGHTNESS_TIP
