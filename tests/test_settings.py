"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from dominant_color.config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_cache() -> None:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENVIRONMENT", "FETCH_TIMEOUT", "MAX_IMAGE_BYTES", "SAMPLE_MAX_SIDE"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.environment == "dev"
    assert settings.fetch_timeout == 10.0
    assert settings.max_image_bytes == 10 * 1024 * 1024
    assert settings.sample_max_side == 0


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FETCH_TIMEOUT", "2.5")
    monkeypatch.setenv("MAX_IMAGE_BYTES", "1024")
    monkeypatch.setenv("SAMPLE_MAX_SIDE", "128")

    settings = get_settings()

    assert settings.fetch_timeout == 2.5
    assert settings.max_image_bytes == 1024
    assert settings.sample_max_side == 128
    assert get_settings() is settings
