"""24-hour equity heatmap.

Scores every UTC start hour (0-23) of one calendar day. All 24 slots share
the position within the hour (minute, second, microsecond) of the
organizer's proposal, or :00 when only a day is given, so entries are
comparable and the proposal's own hour is scored at exactly the proposed
instant. Each slot is an independent, pure evaluation; with more than one
worker the slots are fanned out to a thread pool and joined in hour order.
Results are identical either way.
"""

from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, time, timezone

from loguru import logger

from meeting_equity.config.settings import settings
from meeting_equity.scheduling.cache import ClassificationCache
from meeting_equity.scheduling.constants import HOURS_PER_DAY, build_default_config
from meeting_equity.scheduling.equity_scorer import QualityBands, score
from meeting_equity.scheduling.errors import InvalidDateError, SchedulingConfigurationError, log_configuration_failure
from meeting_equity.scheduling.pipeline import evaluate_participants
from meeting_equity.scheduling.timezone_projector import TimeZoneProjector, ZoneInfoProjector, parse_utc_instant
from meeting_equity.scheduling.types import CountryConfig, HeatmapEntry, Participant


def resolve_candidate_day(candidate: date | datetime | str) -> tuple[date, time]:
    """Split a candidate day into its UTC calendar date and offset within the hour.

    A datetime (or ISO instant string) keeps its minute, second and
    microsecond; a bare date (or "YYYY-MM-DD" string) uses :00. The returned
    offset always has hour 0.

    Raises:
        InvalidDateError: If the value is not a date, datetime or parsable string
    """
    if isinstance(candidate, str):
        text = candidate.strip()
        if len(text) == 10:
            try:
                return date.fromisoformat(text), time(0)
            except ValueError as e:
                raise InvalidDateError(candidate, "Unparsable ISO-8601 date") from e
        candidate = parse_utc_instant(text)

    if isinstance(candidate, datetime):
        instant = parse_utc_instant(candidate)
        return instant.date(), time(0, instant.minute, instant.second, instant.microsecond)

    if isinstance(candidate, date):
        return candidate, time(0)

    raise InvalidDateError(candidate, "Expected a date, datetime or ISO-8601 string")


def candidate_slots(day: date, offset: time = time(0)) -> list[datetime]:
    """UTC start instants for every hour of a day at a fixed offset within the hour."""
    return [
        datetime.combine(day, offset.replace(hour=hour), tzinfo=timezone.utc)
        for hour in range(HOURS_PER_DAY)
    ]


def generate(
    candidate_day: date | datetime | str,
    participants: Iterable[Participant],
    country_configs: Mapping[str, CountryConfig] | None = None,
    *,
    default_config: CountryConfig | None = None,
    projector: TimeZoneProjector | None = None,
    bands: QualityBands | None = None,
    max_workers: int | None = None,
    cache: ClassificationCache | None = None,
    config_version: str = "",
) -> list[HeatmapEntry]:
    """Generate the 24-entry equity heatmap for a UTC calendar day.

    No slot is ever omitted, however poorly it scores.

    Args:
        candidate_day: UTC day, or the organizer's proposed instant (its position within the hour is reused)
        participants: Participants to evaluate
        country_configs: Registry of configurations keyed by country code
        default_config: Fallback configuration (defaults to the standard 09:00-17:00 convention)
        projector: Timezone projector (defaults to zoneinfo)
        bands: Quality bands (defaults from settings)
        max_workers: Thread pool size; 0 or 1 evaluates sequentially (defaults from settings)
        cache: Optional caller-owned classification cache
        config_version: Version tag for cache keys

    Returns:
        24 HeatmapEntry values ordered by UTC hour

    Raises:
        InvalidTimezoneError: If any participant's timezone is unknown
        InvalidDateError: If the candidate day is malformed
    """
    roster: Sequence[Participant] = tuple(participants)
    registry = country_configs or {}
    fallback = default_config or build_default_config()
    zone_projector = projector or ZoneInfoProjector()
    quality_bands = bands or QualityBands.from_settings()
    workers = settings.heatmap_max_workers if max_workers is None else max_workers

    try:
        day, offset = resolve_candidate_day(candidate_day)

        def entry_for(slot: datetime) -> HeatmapEntry:
            statuses = evaluate_participants(
                roster,
                slot,
                registry,
                fallback,
                zone_projector,
                cache=cache,
                config_version=config_version,
            )
            return HeatmapEntry(hour=slot.hour, start=slot, equity=score(statuses, quality_bands))

        slots = candidate_slots(day, offset)
        if workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                entries = list(executor.map(entry_for, slots))
        else:
            entries = [entry_for(slot) for slot in slots]
    except SchedulingConfigurationError as e:
        log_configuration_failure(e, {"operation": "heatmap", "participants": len(roster)})
        raise

    best = max(entries, key=lambda entry: entry.normalized_score)
    logger.debug(
        "heatmap: Generated",
        day=day.isoformat(),
        offset=offset.isoformat(),
        participants=len(roster),
        workers=workers,
        best_hour=best.hour,
        best_score=round(best.normalized_score, 2),
        sweet_spots=sum(1 for entry in entries if entry.is_sweet_spot),
    )
    return entries
