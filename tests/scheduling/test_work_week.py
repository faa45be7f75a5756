"""Tests for work-week pattern parsing."""

import pytest

from meeting_equity.scheduling.work_week import MONDAY_TO_FRIDAY, Weekday, coerce_work_days, parse_work_week_pattern


class TestParseWorkWeekPattern:
    def test_monday_to_friday(self):
        assert parse_work_week_pattern("MTWTF") == MONDAY_TO_FRIDAY

    def test_explicit_thursday_token(self):
        assert parse_work_week_pattern("MTWThF") == MONDAY_TO_FRIDAY

    def test_sunday_to_thursday(self):
        assert parse_work_week_pattern("SuMTWTh") == {
            Weekday.SUNDAY,
            Weekday.MONDAY,
            Weekday.TUESDAY,
            Weekday.WEDNESDAY,
            Weekday.THURSDAY,
        }

    def test_bare_s_after_friday_is_saturday(self):
        assert parse_work_week_pattern("MTWTFS") == MONDAY_TO_FRIDAY | {Weekday.SATURDAY}

    def test_leading_bare_s_is_sunday(self):
        assert Weekday.SUNDAY in parse_work_week_pattern("SMTWT")
        assert Weekday.THURSDAY in parse_work_week_pattern("SMTWT")

    def test_tuesday_thursday_only(self):
        assert parse_work_week_pattern("TTh") == {Weekday.TUESDAY, Weekday.THURSDAY}

    @pytest.mark.parametrize("pattern", ["", "   ", "MXF", "mtwtf"])
    def test_invalid_patterns_rejected(self, pattern):
        with pytest.raises(ValueError):
            parse_work_week_pattern(pattern)


class TestCoerceWorkDays:
    def test_iso_numbers(self):
        assert coerce_work_days([1, 2, 3, 4, 5]) == MONDAY_TO_FRIDAY

    def test_day_names(self):
        assert coerce_work_days(["sun", "Monday", "TUE"]) == {Weekday.SUNDAY, Weekday.MONDAY, Weekday.TUESDAY}

    def test_weekday_members(self):
        assert coerce_work_days({Weekday.FRIDAY}) == {Weekday.FRIDAY}

    def test_pattern_string(self):
        assert coerce_work_days("MTWTF") == MONDAY_TO_FRIDAY

    def test_out_of_range_number(self):
        with pytest.raises(ValueError, match="1 \\(Monday\\) to 7 \\(Sunday\\)"):
            coerce_work_days([0, 1])

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown day name"):
            coerce_work_days(["funday"])

    def test_empty_collection(self):
        with pytest.raises(ValueError, match="at least one day"):
            coerce_work_days([])
