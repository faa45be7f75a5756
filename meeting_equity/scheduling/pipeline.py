"""Per-participant evaluation pipeline.

ConfigResolver -> TimeZoneProjector -> StatusClassifier for one participant
at one UTC instant. Shared by the single-time path and the heatmap.
"""

from collections.abc import Iterable, Mapping
from datetime import datetime

from meeting_equity.scheduling.cache import ClassificationCache
from meeting_equity.scheduling.config_resolver import resolve, resolve_source
from meeting_equity.scheduling.errors import InvalidTimezoneError
from meeting_equity.scheduling.status_classifier import classify_projection
from meeting_equity.scheduling.timezone_projector import TimeZoneProjector
from meeting_equity.scheduling.types import CountryConfig, Participant, ParticipantStatus


def evaluate_participant(
    participant: Participant,
    utc_instant: datetime,
    country_configs: Mapping[str, CountryConfig],
    default_config: CountryConfig,
    projector: TimeZoneProjector,
    cache: ClassificationCache | None = None,
    config_version: str = "",
) -> ParticipantStatus:
    """Classify one participant at one UTC instant.

    Raises:
        InvalidTimezoneError: If the participant's timezone is unknown
    """
    if cache is not None:
        cached = cache.get(participant.id, utc_instant, config_version)
        if cached is not None:
            return cached

    config = resolve(participant, country_configs, default_config)
    try:
        projection = projector.project(utc_instant, participant.timezone)
    except InvalidTimezoneError as e:
        raise e.for_participant(participant.id) from e

    status = ParticipantStatus(
        participant_id=participant.id,
        classification=classify_projection(projection, config),
        projection=projection,
        config_source=resolve_source(participant, country_configs),
    )

    if cache is not None:
        cache.set(participant.id, utc_instant, config_version, status)
    return status


def evaluate_participants(
    participants: Iterable[Participant],
    utc_instant: datetime,
    country_configs: Mapping[str, CountryConfig],
    default_config: CountryConfig,
    projector: TimeZoneProjector,
    cache: ClassificationCache | None = None,
    config_version: str = "",
) -> tuple[ParticipantStatus, ...]:
    """Classify every participant at one UTC instant, failing on the first invalid one."""
    return tuple(
        evaluate_participant(
            participant,
            utc_instant,
            country_configs,
            default_config,
            projector,
            cache=cache,
            config_version=config_version,
        )
        for participant in participants
    )
