"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from datetime import time

import pytest

from meeting_equity.core.logger import setup_logger
from meeting_equity.scheduling.constants import build_default_config
from meeting_equity.scheduling.timezone_projector import ZoneInfoProjector
from meeting_equity.scheduling.types import CountryConfig, Holiday, Participant


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Route engine debug logs to stderr for the whole test session."""
    setup_logger(level="DEBUG")
    yield


@pytest.fixture
def default_config() -> CountryConfig:
    return build_default_config()


@pytest.fixture
def projector() -> ZoneInfoProjector:
    return ZoneInfoProjector()


@pytest.fixture
def uae_config() -> CountryConfig:
    """Sunday-Thursday work week."""
    return CountryConfig(
        country_code="AE",
        green_start=time(9, 0),
        green_end=time(17, 0),
        orange_morning_start=time(8, 0),
        orange_morning_end=time(9, 0),
        orange_evening_start=time(17, 0),
        orange_evening_end=time(18, 0),
        work_days="SuMTWTh",
    )


@pytest.fixture
def worked_example_participants() -> list[Participant]:
    """Four participants across four timezones.

    At 2024-06-05 02:00 UTC (a Wednesday) New York and Los Angeles are out of
    hours on Tuesday evening; London and Tokyo are on a configured holiday.
    """
    return [
        Participant(id="nyc", name="Ada", timezone="America/New_York", country_code="US"),
        Participant(id="lax", name="Grace", timezone="America/Los_Angeles", country_code="US"),
        Participant(id="lon", name="Alan", timezone="Europe/London", country_code="GB"),
        Participant(id="tyo", name="Yukihiro", timezone="Asia/Tokyo", country_code="JP"),
    ]


@pytest.fixture
def worked_example_configs(default_config: CountryConfig) -> dict[str, CountryConfig]:
    base = default_config.model_dump(exclude={"holidays", "country_code"})
    return {
        "GB": CountryConfig(**base, country_code="GB", holidays=[Holiday(date="2024-06-05", name="Company Day")]),
        "JP": CountryConfig(**base, country_code="JP", holidays=["2024-06-05"]),
    }
