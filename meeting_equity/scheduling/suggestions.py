"""Ranking of heatmap entries into suggested meeting times.

Order: normalized score descending, then fewer critical reds, then fewer
reds, then the hour numerically closest to the organizer's proposed hour,
then the earlier hour. Entries are never mutated or invented.
"""

from collections.abc import Iterable

from loguru import logger

from meeting_equity.config.settings import settings
from meeting_equity.scheduling.types import HeatmapEntry


def _rank_key(entry: HeatmapEntry, proposed_hour: int | None) -> tuple[float, int, int, int, int]:
    distance = abs(entry.hour - proposed_hour) if proposed_hour is not None else 0
    return (
        -entry.normalized_score,
        entry.counts.critical_red,
        entry.counts.red,
        distance,
        entry.hour,
    )


def sort_entries(entries: Iterable[HeatmapEntry], proposed_hour: int | None = None) -> list[HeatmapEntry]:
    """Return every entry in suggestion order."""
    return sorted(entries, key=lambda entry: _rank_key(entry, proposed_hour))


def rank(
    entries: Iterable[HeatmapEntry],
    top_n: int | None = None,
    proposed_hour: int | None = None,
) -> list[HeatmapEntry]:
    """Select the best alternative times from a heatmap.

    Args:
        entries: Heatmap entries (typically all 24 hours)
        top_n: Maximum number of suggestions (defaults from settings, usually 3)
        proposed_hour: Organizer's originally proposed UTC hour, used as a tie-break anchor

    Returns:
        At most top_n entries in suggestion order; all entries when fewer exist
    """
    limit = settings.default_top_n if top_n is None else top_n
    if limit <= 0:
        return []

    ordered = sort_entries(entries, proposed_hour)
    suggestions = ordered[:limit]
    logger.debug(
        "suggestions: Ranked",
        candidates=len(ordered),
        returned=len(suggestions),
        proposed_hour=proposed_hour,
        hours=[entry.hour for entry in suggestions],
    )
    return suggestions
