"""
Unit tests for environ_backend.utils.datetime_utils
"""
from datetime import datetime, timedelta, timezone

from environ_backend.utils.datetime_utils import ensure_utc, now_iso, to_iso, utc_now


class TestEnsureUtc:
    """Tests for ensure_utc - no config needed"""

    def test_none_returns_none(self):
        assert ensure_utc(None) is None

    def test_naive_assumed_utc(self):
        dt = datetime(2025, 1, 15, 12, 0, 0)
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_converted_to_utc(self):
        # UTC+5:30
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
        result = ensure_utc(dt)
        assert result.tzinfo == timezone.utc
        assert result.hour == 6  # 12 - 5.5 = 6:30
        assert result.minute == 30


class TestUtcNow:
    def test_is_timezone_aware(self):
        assert utc_now().tzinfo == timezone.utc


class TestToIso:
    """Tests for to_iso"""

    def test_none_returns_none(self, mock_settings):
        assert to_iso(None) is None

    def test_utc_uses_z_suffix(self, mock_settings):
        dt = datetime(2025, 1, 15, 12, 0, 0, 123456, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-01-15T12:00:00Z"

    def test_invalid_timezone_falls_back_to_utc(self, mock_settings):
        mock_settings.local_timezone = "Not/AZone"
        dt = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)
        assert to_iso(dt) == "2025-01-15T12:00:00Z"

    def test_now_iso_is_string(self, mock_settings):
        assert now_iso().endswith("Z")
