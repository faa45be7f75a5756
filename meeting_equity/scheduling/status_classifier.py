"""Participant comfort classification.

Rules are evaluated in strict priority order, first match wins:

1. Critical red: the local date is a holiday or not a work day
2. Red: the local time is outside the green and both orange ranges
3. Orange: the local time is inside either orange range
4. Green: the local time is inside the green range

Ranges are half-open, [start, end). Overlapping or gapped ranges still
produce exactly one result; this component never raises.
"""

from datetime import date, time

from meeting_equity.scheduling.timezone_projector import LocalProjection
from meeting_equity.scheduling.types import ClassificationResult, ColorStatus, CountryConfig, Holiday
from meeting_equity.scheduling.work_week import Weekday

REASON_HOLIDAY = "National holiday"
REASON_NON_WORKING_DAY = "Non-working day"
REASON_OUTSIDE_HOURS = "Outside working hours"
REASON_ORANGE_EARLY = "Acceptable (early)"
REASON_ORANGE_LATE = "Acceptable (late)"
REASON_GREEN = "Optimal working hours"


def in_range(value: time, start: time, end: time) -> bool:
    """Check whether a time of day falls within [start, end)."""
    return start <= value < end


def find_holiday(local_date: date, config: CountryConfig) -> Holiday | None:
    """Return the configured holiday on a participant's local date, if any."""
    return config.holiday_on(local_date)


def classify(local_date: date, local_time: time, weekday: Weekday, config: CountryConfig) -> ClassificationResult:
    """Classify one participant's local date and time.

    Args:
        local_date: Participant's local calendar date
        local_time: Participant's local time of day
        weekday: Weekday of the local date
        config: Participant's effective configuration

    Returns:
        ClassificationResult with status, critical flag and reason
    """
    holiday = find_holiday(local_date, config)
    if holiday is not None:
        return ClassificationResult(
            status=ColorStatus.RED,
            is_critical_red=True,
            reason=f"{REASON_HOLIDAY}: {holiday.display_name}",
        )
    if weekday not in config.work_days:
        return ClassificationResult(status=ColorStatus.RED, is_critical_red=True, reason=REASON_NON_WORKING_DAY)

    in_green = in_range(local_time, config.green_start, config.green_end)
    in_morning = in_range(local_time, config.orange_morning_start, config.orange_morning_end)
    in_evening = in_range(local_time, config.orange_evening_start, config.orange_evening_end)

    if not (in_green or in_morning or in_evening):
        return ClassificationResult(status=ColorStatus.RED, is_critical_red=False, reason=REASON_OUTSIDE_HOURS)

    if in_morning:
        return ClassificationResult(status=ColorStatus.ORANGE, is_critical_red=False, reason=REASON_ORANGE_EARLY)
    if in_evening:
        return ClassificationResult(status=ColorStatus.ORANGE, is_critical_red=False, reason=REASON_ORANGE_LATE)

    return ClassificationResult(status=ColorStatus.GREEN, is_critical_red=False, reason=REASON_GREEN)


def classify_projection(projection: LocalProjection, config: CountryConfig) -> ClassificationResult:
    """Classify a projected local time."""
    return classify(projection.local_date, projection.local_time, projection.weekday, config)
