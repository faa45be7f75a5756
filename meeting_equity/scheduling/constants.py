"""Scoring constants and the default working-hour convention.

Point values per participant status. The normalization offset equals the
magnitude of the critical-red penalty so the normalized score stays
non-negative even when every participant is critically red.
"""

from datetime import time

from meeting_equity.scheduling.types import CountryConfig
from meeting_equity.scheduling.work_week import MONDAY_TO_FRIDAY

GREEN_POINTS = 10
ORANGE_POINTS = 5
RED_POINTS = -15
CRITICAL_RED_POINTS = -50

# Added to both numerator and denominator, once per participant
NORMALIZATION_OFFSET = 50

HOURS_PER_DAY = 24
DEFAULT_TOP_N = 3


def build_default_config() -> CountryConfig:
    """Build the fallback configuration used when no override exists.

    Green 09:00-17:00, orange 08:00-09:00 and 17:00-18:00, Monday-Friday,
    no holidays. Callers inject the result (or their own default) into the
    engine rather than relying on a shared module-level instance.
    """
    return CountryConfig(
        green_start=time(9, 0),
        green_end=time(17, 0),
        orange_morning_start=time(8, 0),
        orange_morning_end=time(9, 0),
        orange_evening_start=time(17, 0),
        orange_evening_end=time(18, 0),
        holidays=(),
        work_days=MONDAY_TO_FRIDAY,
    )
