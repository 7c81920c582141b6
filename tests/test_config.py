"""Tests for settings loading and timezone helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from jobhub import config
from jobhub.utils import datetime as datetime_utils


@pytest.fixture(autouse=True)
def clear_caches():
    config.reset_settings_cache()
    datetime_utils.configure_app_timezone(None)
    yield
    config.reset_settings_cache()
    datetime_utils.configure_app_timezone(None)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MARK_READ_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("NOTIFICATION_PANEL_LIMIT", "5")

    settings = config.get_settings()

    assert settings.mark_read_delay_seconds == 0.5
    assert settings.notification_panel_limit == 5
    assert settings.resubscribe_attempts == 3
    assert config.get_settings() is settings


def test_offset_timezone_is_accepted(monkeypatch):
    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")

    tz = datetime_utils.get_app_timezone()

    assert tz.utcoffset(None) == timedelta(hours=2)


def test_naive_round_trip_keeps_the_instant(monkeypatch):
    monkeypatch.setenv("APP_TIMEZONE", "UTC-05:00")
    instant = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    stored = datetime_utils.ensure_app_naive_datetime(instant)
    restored = datetime_utils.ensure_app_timezone(stored)

    assert stored == datetime(2024, 3, 1, 7, 0)
    assert restored == instant
    assert datetime_utils.isoformat_or_none(None) is None


def test_create_app_applies_the_timezone_of_its_settings(monkeypatch, database_url):
    from main import create_app

    monkeypatch.delenv("APP_TIMEZONE", raising=False)

    create_app(config.Settings(database_url=database_url, app_timezone="UTC"))

    assert str(datetime_utils.get_app_timezone()) == "UTC"
    assert datetime_utils.now_in_app_timezone().utcoffset() == timedelta(0)
