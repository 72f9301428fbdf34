"""Tests for corrector service settings loading."""

from __future__ import annotations

import importlib


def test_load_settings_rejects_non_positive_values(monkeypatch) -> None:
    """Numeric environment variables should fall back when non-positive."""

    monkeypatch.setenv("CORRECTOR_MAX_BRIGHTNESS", "0")
    monkeypatch.setenv("CORRECTOR_CACHE_SIZE", "-10")
    monkeypatch.setenv("CORRECTOR_TELEMETRY_EVENTS", "many")

    import corrector_service.main as main

    importlib.reload(main)
    settings = main._load_settings()

    assert settings.max_brightness == 100
    assert settings.cache_size == 256
    assert settings.telemetry_events == 50


def test_load_settings_reads_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CORRECTOR_DEFAULT_DEVICE", "nzxt-kraken")
    monkeypatch.setenv("CORRECTOR_MAX_BRIGHTNESS", "150")
    monkeypatch.setenv("CORRECTOR_CACHE_SIZE", "8")

    import corrector_service.main as main

    main = importlib.reload(main)

    assert main.SETTINGS.default_device == "nzxt-kraken"
    assert main.SETTINGS.max_brightness == 150
    assert main.CORRECTION_CACHE.stats()["max_size"] == 8


def test_unknown_default_device_falls_back(monkeypatch, caplog) -> None:
    monkeypatch.setenv("CORRECTOR_DEFAULT_DEVICE", "rgb-toaster")

    import corrector_service.main as main

    caplog.set_level("WARNING")
    settings = importlib.reload(main)._load_settings()

    assert settings.default_device == "tl-fans"
    assert "rgb-toaster" in caplog.text
