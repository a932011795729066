"""Unit tests for calendar-day normalization."""

from datetime import date, datetime, timezone as dt_timezone

import pytest

from apps.core.exceptions import InvalidDate
from apps.core.utils.dates import normalize_day


class TestNormalizeDay:

    def test_canonical_day_passes_through(self):
        assert normalize_day("2025-03-10") == "2025-03-10"

    def test_idempotent(self):
        once = normalize_day("Mon Mar 10 2025 00:00:00 GMT+0530 (India Standard Time)")
        assert normalize_day(once) == once

    def test_surrounding_whitespace_is_ignored(self):
        assert normalize_day("  2025-03-10 ") == "2025-03-10"

    def test_javascript_date_string(self):
        value = "Mon Mar 10 2025 00:00:00 GMT+0530 (India Standard Time)"
        assert normalize_day(value) == "2025-03-10"

    def test_utc_instant_uses_venue_calendar(self):
        # 20:00 UTC is 01:30 the next day in Asia/Kolkata
        assert normalize_day("2025-03-10T20:00:00Z") == "2025-03-11"

    def test_aware_datetime(self):
        value = datetime(2025, 3, 10, 20, 0, tzinfo=dt_timezone.utc)
        assert normalize_day(value) == "2025-03-11"

    def test_date_instance(self):
        assert normalize_day(date(2025, 12, 31)) == "2025-12-31"

    def test_loose_format(self):
        assert normalize_day("March 10, 2025") == "2025-03-10"

    @pytest.mark.parametrize("value", [None, "", "   ", "not a date", "2025-02-30", "2025-13-01", 20250310])
    def test_invalid_values(self, value):
        with pytest.raises(InvalidDate):
            normalize_day(value)
