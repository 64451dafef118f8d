"""
Unit tests for settings loading.
"""

from day_planner.core.config import Settings


def test_defaults():
    settings = Settings()

    assert settings.TIMELINE_VALIDATE_BASELINE is True
    assert settings.TIMELINE_CLAMP_CURSOR_TO_DAY is False
    assert settings.DAY_END_MINUTES == 1440


def test_env_override(monkeypatch):
    monkeypatch.setenv("TIMELINE_VALIDATE_BASELINE", "false")
    monkeypatch.setenv("DAY_START_MINUTES", "480")

    settings = Settings()

    assert settings.TIMELINE_VALIDATE_BASELINE is False
    assert settings.DAY_START_MINUTES == 480
