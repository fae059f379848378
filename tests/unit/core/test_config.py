"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RadarConfig
from core.constants import DEFAULT_VIEWPORT_HEIGHT
from core.errors import RadarConfigError


def test_from_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to defaults."""
    for name in ("RADAR_VIEWPORT_HEIGHT", "RADAR_HTTP_TIMEOUT_SECONDS", "RADAR_GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    config = RadarConfig.from_env()

    assert (config.viewport_height, config.http_timeout_seconds, config.google_api_key) == (
        DEFAULT_VIEWPORT_HEIGHT,
        30.0,
        None,
    )


def test_from_env_reads_google_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Google credentials should be read from the environment."""
    monkeypatch.setenv("RADAR_GOOGLE_API_KEY", "key-1")
    monkeypatch.setenv("RADAR_GOOGLE_ACCOUNT", "a@x.com")

    config = RadarConfig.from_env()

    assert (config.google_api_key, config.google_account) == ("key-1", "a@x.com")


def test_from_env_raises_for_invalid_viewport(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric viewport height."""
    monkeypatch.setenv("RADAR_VIEWPORT_HEIGHT", "tall")

    with pytest.raises(RadarConfigError):
        RadarConfig.from_env()


def test_from_env_raises_for_non_positive_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a zero timeout."""
    monkeypatch.setenv("RADAR_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(RadarConfigError):
        RadarConfig.from_env()


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level names should be accepted in any case."""
    monkeypatch.setenv("RADAR_LOG_LEVEL", " debug ")

    assert RadarConfig.from_env().log_level == "DEBUG"


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a level name logging does not define."""
    monkeypatch.setenv("RADAR_LOG_LEVEL", "verbose")

    with pytest.raises(RadarConfigError):
        RadarConfig.from_env()
