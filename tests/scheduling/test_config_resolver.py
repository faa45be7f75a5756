"""Tests for effective configuration resolution."""

from datetime import date, time

from meeting_equity.scheduling.config_resolver import resolve, resolve_source
from meeting_equity.scheduling.types import ConfigSource, CountryConfig, Participant


def _config(green_start: int, holidays=()) -> CountryConfig:
    return CountryConfig(
        green_start=time(green_start, 0),
        green_end=time(green_start + 8, 0),
        orange_morning_start=time(green_start - 1, 0),
        orange_morning_end=time(green_start, 0),
        orange_evening_start=time(green_start + 8, 0),
        orange_evening_end=time(green_start + 9, 0),
        holidays=holidays,
    )


class TestResolve:
    def test_participant_override_wins(self, default_config):
        own = _config(7)
        participant = Participant(id="p", timezone="Europe/Berlin", country_code="DE", config=own)
        registry = {"DE": _config(8)}
        assert resolve(participant, registry, default_config) is own
        assert resolve_source(participant, registry) is ConfigSource.PARTICIPANT

    def test_country_config_beats_default(self, default_config):
        country = _config(8)
        participant = Participant(id="p", timezone="Europe/Berlin", country_code="DE")
        assert resolve(participant, {"DE": country}, default_config) is country
        assert resolve_source(participant, {"DE": country}) is ConfigSource.COUNTRY

    def test_unknown_country_falls_through_to_default(self, default_config):
        participant = Participant(id="p", timezone="Europe/Berlin", country_code="DE")
        assert resolve(participant, {"FR": _config(8)}, default_config) is default_config
        assert resolve_source(participant, {}) is ConfigSource.DEFAULT

    def test_lower_case_registry_key_matches(self, default_config):
        country = _config(8)
        participant = Participant(id="p", timezone="Europe/Berlin", country_code="de")
        assert resolve(participant, {"de": country}, default_config) is country

    def test_override_is_wholesale_not_merged(self, default_config):
        christmas = date(2024, 12, 25)
        country = _config(8, holidays=[christmas])
        own = _config(10)
        participant = Participant(id="p", timezone="Europe/Berlin", country_code="DE", config=own)

        effective = resolve(participant, {"DE": country}, default_config)

        assert effective.holiday_dates == frozenset()
        assert effective.green_start == time(10, 0)

    def test_injected_default_is_used(self):
        custom_default = _config(6)
        participant = Participant(id="p", timezone="Asia/Tokyo", country_code="JP")
        assert resolve(participant, {}, custom_default) is custom_default
