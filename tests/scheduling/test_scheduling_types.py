"""Tests for the scheduling data model."""

from datetime import UTC, date, datetime, time, timedelta, timezone

import pytest
from pydantic import ValidationError

from meeting_equity.scheduling.errors import InvalidDateError
from meeting_equity.scheduling.types import (
    CountryConfig,
    EquityScore,
    Holiday,
    Meeting,
    Participant,
    ScoreQuality,
    StatusCounts,
)
from meeting_equity.scheduling.work_week import Weekday


def _config(**overrides) -> CountryConfig:
    values = {
        "green_start": "09:00",
        "green_end": "17:00:00",
        "orange_morning_start": "08:00",
        "orange_morning_end": "09:00",
        "orange_evening_start": "17:00",
        "orange_evening_end": "18:00",
    }
    values.update(overrides)
    return CountryConfig(**values)


class TestCountryConfig:
    def test_parses_time_strings(self):
        config = _config()
        assert config.green_start == time(9, 0)
        assert config.green_end == time(17, 0)

    def test_defaults_to_monday_to_friday_without_holidays(self):
        config = _config()
        assert config.work_days == frozenset(Weekday(day) for day in range(1, 6))
        assert config.holidays == ()

    def test_accepts_work_week_pattern(self):
        config = _config(work_days="SuMTWTh")
        assert Weekday.SUNDAY in config.work_days
        assert Weekday.FRIDAY not in config.work_days

    def test_rejects_invalid_work_week(self):
        with pytest.raises(ValidationError):
            _config(work_days="XYZ")

    @pytest.mark.parametrize("work_days", [None, [None], 5, [1, 2.5j]])
    def test_malformed_work_days_fail_validation(self, work_days):
        with pytest.raises(ValidationError):
            _config(work_days=work_days)

    @pytest.mark.parametrize("holidays", [5, [None], [3.5]])
    def test_malformed_holidays_fail_validation(self, holidays):
        with pytest.raises(ValidationError):
            _config(holidays=holidays)

    def test_holidays_from_dates_strings_and_records(self):
        config = _config(
            holidays=[
                date(2024, 12, 25),
                "2024-12-26",
                Holiday(date=date(2024, 1, 1), name="New Year's Day", local_name="Nouvel An"),
            ]
        )
        assert config.holiday_dates == {date(2024, 12, 25), date(2024, 12, 26), date(2024, 1, 1)}
        assert config.holiday_on(date(2024, 1, 1)).display_name == "Nouvel An"
        assert config.holiday_on(date(2024, 12, 25)).display_name == "Holiday"
        assert config.holiday_on(date(2024, 7, 4)) is None

    def test_country_code_upper_cased(self):
        assert _config(country_code="de").country_code == "DE"

    def test_is_frozen(self):
        config = _config()
        with pytest.raises(ValidationError):
            config.green_start = time(10, 0)


class TestParticipant:
    def test_country_code_normalised(self):
        participant = Participant(id="p1", timezone="Europe/Paris", country_code="fr")
        assert participant.country_code == "FR"

    @pytest.mark.parametrize("code", ["FRA", "F", "1A", ""])
    def test_country_code_must_be_two_letters(self, code):
        with pytest.raises(ValidationError):
            Participant(id="p1", timezone="Europe/Paris", country_code=code)

    def test_optional_override(self):
        participant = Participant(id="p1", timezone="Europe/Paris", country_code="FR", config=_config())
        assert participant.config is not None


class TestMeeting:
    def test_naive_start_read_as_utc(self):
        meeting = Meeting(start=datetime(2024, 6, 5, 14, 0))
        assert meeting.start == datetime(2024, 6, 5, 14, 0, tzinfo=UTC)

    def test_aware_start_converted_to_utc(self):
        paris = timezone(timedelta(hours=2))
        meeting = Meeting(start=datetime(2024, 6, 5, 16, 0, tzinfo=paris))
        assert meeting.start == datetime(2024, 6, 5, 14, 0, tzinfo=UTC)
        assert meeting.start.utcoffset() == timedelta(0)

    def test_iso_string_start(self):
        meeting = Meeting(start="2024-06-05T14:00:00Z", duration_minutes=30)
        assert meeting.start.hour == 14
        assert meeting.end == datetime(2024, 6, 5, 14, 30, tzinfo=UTC)

    def test_malformed_start_raises_named_error(self):
        with pytest.raises(InvalidDateError) as exc_info:
            Meeting(start="next tuesday-ish")
        assert exc_info.value.code == "INVALID_DATE"

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            Meeting(start="2024-06-05T14:00:00Z", duration_minutes=0)


class TestEquityScore:
    @pytest.mark.parametrize(
        ("normalized", "expected"),
        [(29.1666, 29), (62.5, 63), (99.5, 100), (0.0, 0)],
    )
    def test_display_score_rounds_half_up(self, normalized, expected):
        equity = EquityScore(
            raw_score=0,
            max_score=0,
            normalized_score=normalized,
            counts=StatusCounts(),
            quality=ScoreQuality.POOR,
        )
        assert equity.score == expected

    def test_counts_total(self):
        assert StatusCounts(green=2, orange=1, red=3, critical_red=4).total == 10
