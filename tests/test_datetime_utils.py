"""
Unit tests for datetime utilities.
Tests timestamp parsing, RFC3339 formatting, epoch conversion and local display.
"""

import unittest
from datetime import datetime, timezone, timedelta
import os
from unittest.mock import patch
from zoneinfo import ZoneInfo
from wanikani_api.utils.datetime_utils import (
    EPOCH,
    get_local_tz,
    ensure_utc,
    parse_timestamp,
    to_rfc3339,
    from_epoch_seconds,
    to_local,
    format_local,
)


class TestDatetimeUtils(unittest.TestCase):
    """Test suite for datetime utility functions."""

    def test_parse_timestamp_with_z(self):
        """Test parsing an API timestamp with 'Z' suffix and microseconds."""
        result = parse_timestamp("2018-03-29T23:13:14.064836Z")

        self.assertEqual(result.year, 2018)
        self.assertEqual(result.month, 3)
        self.assertEqual(result.day, 29)
        self.assertEqual(result.hour, 23)
        self.assertEqual(result.microsecond, 64836)
        self.assertEqual(result.tzinfo, timezone.utc)

    def test_parse_timestamp_with_offset(self):
        """Test parsing a timestamp with a non-UTC offset converts it to UTC."""
        result = parse_timestamp("2018-03-30T08:13:14+09:00")

        self.assertEqual(result.hour, 23)
        self.assertEqual(result.day, 29)
        self.assertEqual(result.tzinfo, timezone.utc)

    def test_parse_timestamp_empty_raises_error(self):
        """Test that empty string raises ValueError."""
        with self.assertRaises(ValueError):
            parse_timestamp("")

    def test_ensure_utc_naive_datetime(self):
        """Test that naive datetimes are treated as UTC."""
        result = ensure_utc(datetime(2023, 1, 1, 12, 0))

        self.assertEqual(result, datetime(2023, 1, 1, 12, 0, tzinfo=timezone.utc))

    def test_to_rfc3339_aware_datetime(self):
        """Test formatting an aware datetime as RFC3339."""
        dt = datetime(2023, 5, 1, 12, 30, 0, tzinfo=timezone.utc)

        self.assertEqual(to_rfc3339(dt), "2023-05-01T12:30:00+00:00")

    def test_to_rfc3339_keeps_microseconds(self):
        """Test that sub-second precision is kept."""
        dt = datetime(2023, 5, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)

        self.assertEqual(to_rfc3339(dt), "2023-05-01T12:30:00.123456+00:00")

    def test_to_rfc3339_converts_offset_to_utc(self):
        """Test that other offsets are normalised to UTC."""
        dt = datetime(2023, 5, 1, 21, 30, 0, tzinfo=timezone(timedelta(hours=9)))

        self.assertEqual(to_rfc3339(dt), "2023-05-01T12:30:00+00:00")

    def test_from_epoch_seconds(self):
        """Test converting rate limit reset seconds to a UTC datetime."""
        self.assertEqual(from_epoch_seconds(0), EPOCH)
        self.assertEqual(
            from_epoch_seconds(1700000000),
            datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc),
        )

    def test_to_local_with_string(self):
        """Test converting an API timestamp string to local time."""
        result = to_local("2025-10-15T14:30:00Z")

        self.assertIsNotNone(result.tzinfo)
        self.assertEqual(result, datetime(2025, 10, 15, 14, 30, tzinfo=timezone.utc))

    def test_to_local_with_datetime(self):
        """Test converting datetime object to local time."""
        dt = datetime(2025, 10, 15, 14, 30, 0, tzinfo=timezone.utc)
        result = to_local(dt)

        self.assertIsNotNone(result.tzinfo)
        self.assertEqual(result, dt)

    @patch.dict(os.environ, {"TIMEZONE": "Asia/Tokyo"})
    def test_format_local_uses_timezone_env(self):
        """Test formatting uses the TIMEZONE environment variable."""
        try:
            ZoneInfo("Asia/Tokyo")
        except (KeyError, ValueError):
            self.skipTest("IANA timezone data is not installed")

        result = format_local("2025-10-15T14:30:00Z", "%Y-%m-%d %H:%M")

        self.assertEqual(result, "2025-10-15 23:30")

    @patch("wanikani_api.utils.datetime_utils.get_local_tz", return_value=timezone.utc)
    def test_format_local_default_format(self, mock_tz):
        """Test formatting datetime with default format."""
        result = format_local("2025-10-15T14:30:00Z")

        self.assertEqual(result, "Oct 15, 2025, 02:30 PM")

    def test_format_local_none(self):
        """Test that a missing timestamp is displayed as 'never'."""
        self.assertEqual(format_local(None), "never")

    @patch.dict(os.environ, {"TIMEZONE": "Not/AZone"})
    def test_get_local_tz_invalid_env_falls_back(self):
        """Test that an unknown zone name falls back to the system timezone."""
        tz = get_local_tz()

        self.assertIsNotNone(tz)

    def test_get_local_tz_fallback(self):
        """Test getting local timezone falls back to system timezone."""
        original = os.getenv("TIMEZONE")
        os.environ.pop("TIMEZONE", None)

        try:
            tz = get_local_tz()
            self.assertIsNotNone(tz)
        finally:
            if original:
                os.environ["TIMEZONE"] = original


if __name__ == "__main__":
    unittest.main()
