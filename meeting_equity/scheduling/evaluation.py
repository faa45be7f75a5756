"""Single-time evaluation and the engine facade.

evaluate_meeting scores one proposed time. analyze_meeting adds the heatmap
for the proposal's UTC day (at the proposal's position within the hour)
and the ranked suggestions, using the proposal's hour as the tie-break
anchor.

EquityEngine bundles the injected collaborators (default configuration,
projector, quality bands, worker count, optional cache) so callers wire them
once. It holds no computed state between calls.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime

from loguru import logger

from meeting_equity.config.settings import settings
from meeting_equity.scheduling.cache import ClassificationCache
from meeting_equity.scheduling.constants import build_default_config
from meeting_equity.scheduling.equity_scorer import QualityBands, score
from meeting_equity.scheduling.errors import SchedulingConfigurationError, log_configuration_failure
from meeting_equity.scheduling.heatmap import generate as generate_heatmap
from meeting_equity.scheduling.pipeline import evaluate_participants
from meeting_equity.scheduling.suggestions import rank
from meeting_equity.scheduling.timezone_projector import TimeZoneProjector, ZoneInfoProjector
from meeting_equity.scheduling.types import (
    CountryConfig,
    HeatmapEntry,
    Meeting,
    MeetingAnalysis,
    MeetingEvaluation,
    Participant,
)


def _as_meeting(meeting: Meeting | datetime | str) -> Meeting:
    if isinstance(meeting, Meeting):
        return meeting
    return Meeting(start=meeting)


def evaluate_meeting(
    meeting: Meeting | datetime | str,
    participants: Iterable[Participant],
    country_configs: Mapping[str, CountryConfig] | None = None,
    *,
    default_config: CountryConfig | None = None,
    projector: TimeZoneProjector | None = None,
    bands: QualityBands | None = None,
    cache: ClassificationCache | None = None,
    config_version: str = "",
) -> MeetingEvaluation:
    """Classify every participant at the meeting's start and score the result.

    Args:
        meeting: Meeting, or its UTC start instant
        participants: Participants to evaluate
        country_configs: Registry of configurations keyed by country code
        default_config: Fallback configuration
        projector: Timezone projector (defaults to zoneinfo)
        bands: Quality bands (defaults from settings)
        cache: Optional caller-owned classification cache
        config_version: Version tag for cache keys

    Returns:
        MeetingEvaluation with per-participant statuses and the equity score

    Raises:
        InvalidTimezoneError: If any participant's timezone is unknown
        InvalidDateError: If the meeting start is malformed
    """
    roster = tuple(participants)
    try:
        candidate = _as_meeting(meeting)
        statuses = evaluate_participants(
            roster,
            candidate.start,
            country_configs or {},
            default_config or build_default_config(),
            projector or ZoneInfoProjector(),
            cache=cache,
            config_version=config_version,
        )
    except SchedulingConfigurationError as e:
        log_configuration_failure(e, {"operation": "evaluate", "participants": len(roster)})
        raise

    equity = score(statuses, bands)
    logger.debug(
        "evaluation: Scored meeting",
        start=candidate.start.isoformat(),
        participants=len(roster),
        score=round(equity.normalized_score, 2),
        quality=equity.quality.value,
    )
    return MeetingEvaluation(meeting=candidate, statuses=statuses, equity=equity)


def analyze_meeting(
    meeting: Meeting | datetime | str,
    participants: Iterable[Participant],
    country_configs: Mapping[str, CountryConfig] | None = None,
    *,
    top_n: int | None = None,
    default_config: CountryConfig | None = None,
    projector: TimeZoneProjector | None = None,
    bands: QualityBands | None = None,
    max_workers: int | None = None,
    cache: ClassificationCache | None = None,
    config_version: str = "",
) -> MeetingAnalysis:
    """Evaluate a proposal and suggest better times on the same UTC day.

    Returns:
        MeetingAnalysis with the evaluation, 24-entry heatmap and suggestions
    """
    roster = tuple(participants)
    try:
        candidate = _as_meeting(meeting)
    except SchedulingConfigurationError as e:
        log_configuration_failure(e, {"operation": "analyze", "participants": len(roster)})
        raise
    registry = country_configs or {}
    fallback = default_config or build_default_config()
    zone_projector = projector or ZoneInfoProjector()
    quality_bands = bands or QualityBands.from_settings()

    evaluation = evaluate_meeting(
        candidate,
        roster,
        registry,
        default_config=fallback,
        projector=zone_projector,
        bands=quality_bands,
        cache=cache,
        config_version=config_version,
    )
    entries = generate_heatmap(
        candidate.start,
        roster,
        registry,
        default_config=fallback,
        projector=zone_projector,
        bands=quality_bands,
        max_workers=max_workers,
        cache=cache,
        config_version=config_version,
    )
    ranked = rank(entries, top_n=top_n, proposed_hour=candidate.start.hour)
    return MeetingAnalysis(evaluation=evaluation, heatmap=tuple(entries), suggestions=tuple(ranked))


class EquityEngine:
    """Facade over the scheduling pipeline with injected collaborators.

    Args:
        default_config: Fallback configuration (defaults to the standard convention)
        projector: Timezone projector (defaults to zoneinfo)
        bands: Quality bands (defaults from settings)
        max_workers: Heatmap thread pool size (defaults from settings)
        cache: Optional caller-owned classification cache
    """

    def __init__(
        self,
        default_config: CountryConfig | None = None,
        projector: TimeZoneProjector | None = None,
        bands: QualityBands | None = None,
        max_workers: int | None = None,
        cache: ClassificationCache | None = None,
    ) -> None:
        self.default_config = default_config or build_default_config()
        self.projector = projector or ZoneInfoProjector()
        self.bands = bands or QualityBands.from_settings()
        self.max_workers = settings.heatmap_max_workers if max_workers is None else max_workers
        self.cache = cache

    def evaluate(
        self,
        meeting: Meeting | datetime | str,
        participants: Iterable[Participant],
        country_configs: Mapping[str, CountryConfig] | None = None,
        config_version: str = "",
    ) -> MeetingEvaluation:
        return evaluate_meeting(
            meeting,
            participants,
            country_configs,
            default_config=self.default_config,
            projector=self.projector,
            bands=self.bands,
            cache=self.cache,
            config_version=config_version,
        )

    def heatmap(
        self,
        candidate_day: date | datetime | str,
        participants: Iterable[Participant],
        country_configs: Mapping[str, CountryConfig] | None = None,
        config_version: str = "",
    ) -> list[HeatmapEntry]:
        return generate_heatmap(
            candidate_day,
            participants,
            country_configs,
            default_config=self.default_config,
            projector=self.projector,
            bands=self.bands,
            max_workers=self.max_workers,
            cache=self.cache,
            config_version=config_version,
        )

    def suggest(
        self,
        entries: Iterable[HeatmapEntry],
        top_n: int | None = None,
        proposed_hour: int | None = None,
    ) -> list[HeatmapEntry]:
        return rank(entries, top_n=top_n, proposed_hour=proposed_hour)

    def analyze(
        self,
        meeting: Meeting | datetime | str,
        participants: Iterable[Participant],
        country_configs: Mapping[str, CountryConfig] | None = None,
        top_n: int | None = None,
        config_version: str = "",
    ) -> MeetingAnalysis:
        return analyze_meeting(
            meeting,
            participants,
            country_configs,
            top_n=top_n,
            default_config=self.default_config,
            projector=self.projector,
            bands=self.bands,
            max_workers=self.max_workers,
            cache=self.cache,
            config_version=config_version,
        )
