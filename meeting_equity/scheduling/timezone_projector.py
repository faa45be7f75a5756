"""Timezone projection for meeting candidates.

Converts a UTC instant into a participant's local wall-clock date and time
using the IANA timezone database through zoneinfo. The offset is looked up
for the specific instant, so daylight-saving transitions between the
organizer's planning date and the meeting date are honoured.

The projected local date can differ from the UTC date. Holiday and work-day
checks must use the projected date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from meeting_equity.scheduling.errors import InvalidDateError, InvalidTimezoneError
from meeting_equity.scheduling.work_week import Weekday


@dataclass(frozen=True)
class LocalProjection:
    """A UTC instant as seen on a participant's wall clock.

    Attributes:
        timezone_id: IANA timezone identifier used for the projection
        utc_instant: The projected instant (UTC)
        local_datetime: Timezone-aware local datetime
        utc_offset: Offset from UTC in effect at the instant
        is_dst: Whether daylight-saving time is in effect at the instant
        abbreviation: Zone abbreviation at the instant (e.g., "EST", "BST")
    """

    timezone_id: str
    utc_instant: datetime
    local_datetime: datetime
    utc_offset: timedelta
    is_dst: bool
    abbreviation: str

    @property
    def local_date(self) -> date:
        return self.local_datetime.date()

    @property
    def local_time(self) -> time:
        return self.local_datetime.time().replace(tzinfo=None)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.local_datetime.isoweekday())


class TimeZoneProjector(Protocol):
    """Interface the engine depends on for UTC to local projection."""

    def project(self, utc_instant: datetime, timezone_id: str) -> LocalProjection:
        """Project a UTC instant into the given timezone.

        Raises:
            InvalidTimezoneError: If the timezone identifier is unknown
        """
        ...


def parse_utc_instant(value: datetime | str) -> datetime:
    """Normalise a candidate instant to an aware UTC datetime.

    Naive datetimes are read as UTC. ISO-8601 strings may use a trailing "Z".

    Args:
        value: Datetime or ISO-8601 string

    Returns:
        Datetime in UTC timezone

    Raises:
        InvalidDateError: If the value cannot be parsed as an instant
    """
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidDateError(value, "Unparsable ISO-8601 instant") from e
        value = parsed

    if not isinstance(value, datetime):
        raise InvalidDateError(value, "Expected a datetime or ISO-8601 string")

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def load_zone(timezone_id: str) -> ZoneInfo:
    """Load a ZoneInfo, raising InvalidTimezoneError for unknown identifiers.

    No fallback zone is ever substituted.
    """
    if not isinstance(timezone_id, str) or not timezone_id.strip():
        raise InvalidTimezoneError(str(timezone_id))
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimezoneError(timezone_id) from e


def is_valid_timezone(timezone_id: str) -> bool:
    """Check whether a timezone identifier is known to the timezone database."""
    try:
        load_zone(timezone_id)
    except InvalidTimezoneError:
        return False
    return True


class ZoneInfoProjector:
    """TimeZoneProjector backed by the standard zoneinfo database."""

    def project(self, utc_instant: datetime, timezone_id: str) -> LocalProjection:
        zone = load_zone(timezone_id)
        instant = parse_utc_instant(utc_instant)
        local = instant.astimezone(zone)

        dst = local.dst()
        return LocalProjection(
            timezone_id=timezone_id,
            utc_instant=instant,
            local_datetime=local,
            utc_offset=local.utcoffset() or timedelta(0),
            is_dst=bool(dst),
            abbreviation=local.tzname() or "",
        )

    def to_utc(self, local_datetime: datetime, timezone_id: str) -> datetime:
        """Convert a naive local wall-clock datetime in a timezone to UTC.

        Ambiguous wall-clock times (the repeated hour when clocks fall back)
        resolve to the first occurrence. Non-existent times (the skipped hour
        when clocks spring forward) resolve using the offset before the
        transition, as zoneinfo does for fold=0.

        Args:
            local_datetime: Naive local datetime (an aware one is converted directly)
            timezone_id: IANA timezone identifier

        Returns:
            Datetime in UTC timezone
        """
        zone = load_zone(timezone_id)
        if local_datetime.tzinfo is not None:
            return local_datetime.astimezone(timezone.utc)
        return local_datetime.replace(tzinfo=zone, fold=0).astimezone(timezone.utc)
