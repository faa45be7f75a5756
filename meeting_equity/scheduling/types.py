"""Scheduling engine data model.

Inputs (participants, country configurations, meetings) are frozen pydantic
models so they validate at construction and cannot be mutated by the engine.
Outputs are frozen dataclasses, produced fresh for every evaluation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime, time, timedelta
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meeting_equity.scheduling.timezone_projector import LocalProjection, parse_utc_instant
from meeting_equity.scheduling.work_week import MONDAY_TO_FRIDAY, Weekday, coerce_work_days


class ColorStatus(StrEnum):
    GREEN = "green"
    ORANGE = "orange"
    RED = "red"


class ConfigSource(StrEnum):
    """Which precedence level supplied a participant's effective configuration."""

    PARTICIPANT = "participant"
    COUNTRY = "country"
    DEFAULT = "default"


class ScoreQuality(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Holiday(BaseModel):
    """A non-working calendar date in a participant's local calendar."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    name: str = "Holiday"
    local_name: str | None = None

    @property
    def display_name(self) -> str:
        return self.local_name or self.name


class CountryConfig(BaseModel):
    """Working-hour conventions for a country or a single participant.

    Time ranges are half-open, [start, end). Ranges are evaluated
    independently; contiguity between orange and green is conventional but
    never assumed.

    Attributes:
        country_code: Optional ISO 3166-1 alpha-2 label
        green_start: Start of optimal hours
        green_end: End of optimal hours
        orange_morning_start: Start of the acceptable morning buffer
        orange_morning_end: End of the acceptable morning buffer
        orange_evening_start: Start of the acceptable evening buffer
        orange_evening_end: End of the acceptable evening buffer
        holidays: Non-working dates (local calendar)
        work_days: Working weekdays; any other weekday is a rest day
    """

    model_config = ConfigDict(frozen=True)

    country_code: str | None = None

    green_start: time
    green_end: time
    orange_morning_start: time
    orange_morning_end: time
    orange_evening_start: time
    orange_evening_end: time

    holidays: tuple[Holiday, ...] = ()
    work_days: frozenset[Weekday] = MONDAY_TO_FRIDAY

    @field_validator("holidays", mode="before")
    @classmethod
    def coerce_holidays(cls, value: Any) -> Any:
        """Accept bare dates (or ISO date strings) alongside Holiday records."""
        if value is None:
            return ()
        if not isinstance(value, Iterable):
            raise ValueError(f"Holidays must be a collection of dates or holiday records, got {value!r}")
        coerced = []
        for item in value:
            if isinstance(item, date_type | str):
                coerced.append({"date": item})
            else:
                coerced.append(item)
        return tuple(coerced)

    @field_validator("work_days", mode="before")
    @classmethod
    def coerce_work_week(cls, value: Any) -> frozenset[Weekday]:
        return coerce_work_days(value)

    @field_validator("country_code")
    @classmethod
    def normalise_country_code(cls, value: str | None) -> str | None:
        return value.upper() if value else value

    @property
    def holiday_dates(self) -> frozenset[date_type]:
        return frozenset(holiday.date for holiday in self.holidays)

    def holiday_on(self, day: date_type) -> Holiday | None:
        """Return the holiday falling on a local date, if any."""
        for holiday in self.holidays:
            if holiday.date == day:
                return holiday
        return None


class Participant(BaseModel):
    """A meeting participant.

    Attributes:
        id: Opaque participant identifier
        timezone: IANA timezone identifier (validated when projected)
        country_code: ISO 3166-1 alpha-2 country code
        name: Optional display name
        config: Optional participant-level override of the country configuration
    """

    model_config = ConfigDict(frozen=True)

    id: str
    timezone: str
    country_code: str = Field(..., pattern=r"^[A-Za-z]{2}$")
    name: str | None = None
    config: CountryConfig | None = None

    @field_validator("country_code")
    @classmethod
    def normalise_country_code(cls, value: str) -> str:
        return value.upper()


class Meeting(BaseModel):
    """A candidate meeting. Only the start instant drives classification.

    Attributes:
        start: Start instant (UTC)
        duration_minutes: Duration, kept for display context
        title: Optional title
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    duration_minutes: int = Field(default=60, gt=0)
    title: str | None = None

    @field_validator("start", mode="before")
    @classmethod
    def normalise_start(cls, value: Any) -> datetime:
        return parse_utc_instant(value)

    @property
    def end(self) -> datetime:
        return self.start + timedelta(minutes=self.duration_minutes)


@dataclass(frozen=True)
class ClassificationResult:
    """Comfort classification for one participant at one instant.

    Attributes:
        status: Green, Orange or Red
        is_critical_red: True only when Red came from the holiday/rest-day rule
        reason: Human-readable reason for the status
    """

    status: ColorStatus
    is_critical_red: bool
    reason: str


@dataclass(frozen=True)
class ParticipantStatus:
    """Classification of one participant plus the local time it was derived from."""

    participant_id: str
    classification: ClassificationResult
    projection: LocalProjection
    config_source: ConfigSource

    @property
    def status(self) -> ColorStatus:
        return self.classification.status

    @property
    def is_critical_red(self) -> bool:
        return self.classification.is_critical_red


@dataclass(frozen=True)
class StatusCounts:
    """Participants per status bucket. Critical reds are not counted as plain reds."""

    green: int = 0
    orange: int = 0
    red: int = 0
    critical_red: int = 0

    @property
    def total(self) -> int:
        return self.green + self.orange + self.red + self.critical_red


@dataclass(frozen=True)
class EquityScore:
    """Aggregate equity score for one candidate time.

    Attributes:
        raw_score: Sum of per-participant points
        max_score: Score if every participant were Green
        normalized_score: Normalized score in [0, 100], unrounded
        counts: Participants per status bucket
        quality: Display band for the normalized score
    """

    raw_score: int
    max_score: int
    normalized_score: float
    counts: StatusCounts
    quality: ScoreQuality

    @property
    def score(self) -> int:
        """Normalized score rounded half-up for display."""
        return int(self.normalized_score + 0.5)


@dataclass(frozen=True)
class HeatmapEntry:
    """Equity of one candidate UTC start hour."""

    hour: int
    start: datetime
    equity: EquityScore

    @property
    def normalized_score(self) -> float:
        return self.equity.normalized_score

    @property
    def counts(self) -> StatusCounts:
        return self.equity.counts

    @property
    def is_sweet_spot(self) -> bool:
        return self.equity.quality is ScoreQuality.EXCELLENT


@dataclass(frozen=True)
class MeetingEvaluation:
    """Result of evaluating a single proposed meeting time."""

    meeting: Meeting
    statuses: tuple[ParticipantStatus, ...]
    equity: EquityScore

    def status_for(self, participant_id: str) -> ParticipantStatus | None:
        for status in self.statuses:
            if status.participant_id == participant_id:
                return status
        return None


@dataclass(frozen=True)
class MeetingAnalysis:
    """Evaluation of the proposal together with its day's heatmap and suggestions."""

    evaluation: MeetingEvaluation
    heatmap: tuple[HeatmapEntry, ...]
    suggestions: tuple[HeatmapEntry, ...]

    @property
    def sweet_spots(self) -> tuple[HeatmapEntry, ...]:
        return tuple(entry for entry in self.heatmap if entry.is_sweet_spot)
