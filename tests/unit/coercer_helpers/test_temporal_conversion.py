"""Tests for date and date-time conversion helpers."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from safeparam.coercer_helpers.date_conversion import convert_date, date_from_days, parse_date_text
from safeparam.coercer_helpers.datetime_conversion import (
    BUILTIN_DATETIME_FORMATS,
    convert_datetime,
    datetime_from_seconds,
    parse_datetime_text,
)
from safeparam.coercer_helpers.timezones import resolve_timezone, start_of_day, to_timezone, validate_timezone
from safeparam.exceptions import CoercionError
from safeparam.options import DEFAULT_DATE_FORMATS, CoercionOptions


@pytest.fixture
def date_options() -> CoercionOptions:
    return CoercionOptions(target="date")


@pytest.fixture
def datetime_options() -> CoercionOptions:
    return CoercionOptions(target="datetime", timezone="Europe/Madrid")


class TestParseDateText:
    """Tests for parse_date_text."""

    def test_first_matching_format_wins(self) -> None:
        """Patterns are tried in order."""
        assert parse_date_text("03/04/2024", ["%d/%m/%Y", "%m/%d/%Y"]) == date(2024, 4, 3)

    def test_month_abbreviation_is_case_insensitive(self) -> None:
        """Abbreviated month names match regardless of case."""
        assert parse_date_text("15-JAN-2024", DEFAULT_DATE_FORMATS) == date(2024, 1, 15)

    def test_no_match_raises(self) -> None:
        """Text matching no pattern raises CoercionError."""
        with pytest.raises(CoercionError):
            parse_date_text("15.01.2024", DEFAULT_DATE_FORMATS)

    @pytest.mark.parametrize("text", ["2024-01-15T00:00:00", "2024-01-15 09:30:00", "01/15/2024 23:59"])
    def test_trailing_text_after_date_is_ignored(self, text) -> None:
        """A time of day after the matched date does not prevent a match."""
        assert parse_date_text(text, DEFAULT_DATE_FORMATS) == date(2024, 1, 15)

    def test_invalid_leading_date_still_raises(self) -> None:
        """Only a valid calendar date at the start of the text is accepted."""
        with pytest.raises(CoercionError):
            parse_date_text("2024-02-30T00:00:00", DEFAULT_DATE_FORMATS)

    def test_empty_format_list_raises(self) -> None:
        """No patterns means no date."""
        with pytest.raises(CoercionError):
            parse_date_text("2024-01-15", [])


class TestDateFromDays:
    """Tests for date_from_days."""

    def test_fraction_rounds_down(self) -> None:
        """Fractional days round toward negative infinity."""
        assert date_from_days(1.9) == date(1970, 1, 2)
        assert date_from_days(-0.5) == date(1969, 12, 31)

    @pytest.mark.parametrize("days", [float("inf"), 1e12])
    def test_invalid_offsets_raise(self, days) -> None:
        """Non-finite and out-of-range offsets raise CoercionError."""
        with pytest.raises(CoercionError):
            date_from_days(days)


class TestConvertDate:
    """Tests for convert_date."""

    def test_pandas_timestamp(self, date_options) -> None:
        """Timestamps contribute their calendar date."""
        assert convert_date(pd.Timestamp("2024-03-01 23:00"), date_options) == date(2024, 3, 1)

    def test_numpy_datetime64(self, date_options) -> None:
        """numpy datetime64 values are supported."""
        assert convert_date(np.datetime64("2024-03-01"), date_options) == date(2024, 3, 1)

    def test_result_is_plain_date(self, date_options) -> None:
        """Date-times never leak through as dates."""
        result = convert_date(datetime(2024, 3, 1, 5, 0), date_options)
        assert type(result) is date

    def test_boolean_rejected(self, date_options) -> None:
        """Booleans are not day counts."""
        with pytest.raises(CoercionError):
            convert_date(True, date_options)


class TestParseDatetimeText:
    """Tests for parse_datetime_text."""

    def test_builtin_formats(self) -> None:
        """Built-in patterns cover the documented layouts."""
        assert BUILTIN_DATETIME_FORMATS[0] == "%Y-%m-%d %H:%M:%S"
        assert len(BUILTIN_DATETIME_FORMATS) == 5

    def test_localized_to_options_timezone(self, datetime_options) -> None:
        """Naive text is wall-clock time in the configured timezone."""
        result = parse_datetime_text("2024-07-01 12:00:00", datetime_options)
        assert result.utcoffset() == timedelta(hours=2)

    def test_explicit_offset_is_kept(self, datetime_options) -> None:
        """Offsets in the text win over the configured timezone."""
        result = parse_datetime_text("2024-07-01T12:00:00+00:00", datetime_options)
        assert result == datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)

    def test_best_effort_accepts_complete_dates(self, datetime_options) -> None:
        """Free-form text naming a full calendar date is parsed."""
        result = parse_datetime_text("15 July 2024 18:45", datetime_options)
        assert result.replace(tzinfo=None) == datetime(2024, 7, 15, 18, 45)
        assert result.utcoffset() == timedelta(hours=2)

    @pytest.mark.parametrize("text", ["10:15", "5", "12", "March", "March 2024", "July 15"])
    def test_best_effort_rejects_partial_dates(self, text, datetime_options) -> None:
        """Text that leaves the year, month or day open is not completed from defaults."""
        with pytest.raises(CoercionError):
            parse_datetime_text(text, datetime_options)

    def test_unparseable_raises(self, datetime_options) -> None:
        """Text no strategy understands raises CoercionError."""
        with pytest.raises(CoercionError):
            parse_datetime_text("not-a-datetime", datetime_options)


class TestConvertDatetime:
    """Tests for convert_datetime."""

    def test_aware_values_pass_through(self, datetime_options) -> None:
        """Aware datetimes keep their own timezone."""
        value = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert convert_datetime(value, datetime_options) is value

    def test_date_expands_to_local_midnight(self, datetime_options) -> None:
        """Dates become midnight in the configured timezone."""
        result = convert_datetime(date(2024, 1, 1), datetime_options)
        assert (result.hour, result.minute) == (0, 0)
        assert result.utcoffset() == timedelta(hours=1)

    def test_pandas_timestamp_becomes_datetime(self, datetime_options) -> None:
        """Timestamps are returned as datetime.datetime."""
        result = convert_datetime(pd.Timestamp("2024-01-01 08:00", tz="UTC"), datetime_options)
        assert type(result) is datetime
        assert result == datetime(2024, 1, 1, 8, tzinfo=timezone.utc)

    def test_seconds_expressed_in_timezone(self, datetime_options) -> None:
        """Epoch seconds are an instant shown in the configured timezone."""
        result = datetime_from_seconds(0, datetime_options)
        assert result == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert result.hour == 1

    @pytest.mark.parametrize("seconds", [float("inf"), 1e20])
    def test_invalid_seconds_raise(self, datetime_options, seconds) -> None:
        """Non-finite and out-of-range offsets raise CoercionError."""
        with pytest.raises(CoercionError):
            datetime_from_seconds(seconds, datetime_options)

    def test_unsupported_type(self, datetime_options) -> None:
        """Other types raise CoercionError."""
        with pytest.raises(CoercionError):
            convert_datetime([2024, 1, 1], datetime_options)


class TestTimezones:
    """Tests for timezone helpers."""

    def test_validate_timezone(self) -> None:
        """Known identifiers validate; unknown ones do not."""
        assert validate_timezone("America/New_York") is True
        assert validate_timezone("Nowhere/Special") is False

    def test_resolve_timezone_is_cached(self) -> None:
        """Repeated lookups return the same object."""
        assert resolve_timezone("Europe/Madrid") is resolve_timezone("Europe/Madrid")

    def test_localize_handles_daylight_saving(self) -> None:
        """Summer and winter offsets differ for the same zone."""
        tz = resolve_timezone("Europe/Madrid")
        assert start_of_day(date(2024, 1, 1), tz).utcoffset() == timedelta(hours=1)
        assert start_of_day(date(2024, 7, 1), tz).utcoffset() == timedelta(hours=2)

    def test_to_timezone_converts_aware_values(self) -> None:
        """Aware values are converted, not relabelled."""
        tz = resolve_timezone("America/New_York")
        result = to_timezone(datetime(2024, 1, 1, 12, tzinfo=timezone.utc), tz)
        assert result.hour == 7
