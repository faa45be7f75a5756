"""Equity scoring for a candidate meeting time.

Points per participant: Green +10, Orange +5, Red -15, critical Red -50.

    normalized = (raw + n * 50) / (max + n * 50) * 100,  max = n * 10

The same offset is applied to numerator and denominator. With the point
values above the result is always within [0, 100]; it is clamped anyway in
case point values change. With no participants the score is 100.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from meeting_equity.config.settings import settings
from meeting_equity.scheduling.constants import (
    CRITICAL_RED_POINTS,
    GREEN_POINTS,
    NORMALIZATION_OFFSET,
    ORANGE_POINTS,
    RED_POINTS,
)
from meeting_equity.scheduling.types import ColorStatus, EquityScore, ScoreQuality, StatusCounts


class Classified(Protocol):
    @property
    def status(self) -> ColorStatus: ...

    @property
    def is_critical_red(self) -> bool: ...


@dataclass(frozen=True)
class QualityBands:
    """Lowest normalized score for each display band."""

    excellent: float = 95.0
    good: float = 85.0
    fair: float = 65.0

    @classmethod
    def from_settings(cls) -> "QualityBands":
        return cls(
            excellent=settings.quality_excellent,
            good=settings.quality_good,
            fair=settings.quality_fair,
        )


def points_for(item: Classified) -> int:
    """Points contributed by one classified participant."""
    if item.is_critical_red:
        return CRITICAL_RED_POINTS
    if item.status is ColorStatus.GREEN:
        return GREEN_POINTS
    if item.status is ColorStatus.ORANGE:
        return ORANGE_POINTS
    return RED_POINTS


def score_quality(normalized_score: float, bands: QualityBands | None = None) -> ScoreQuality:
    """Map a normalized score to its display band."""
    bands = bands or QualityBands.from_settings()
    if normalized_score >= bands.excellent:
        return ScoreQuality.EXCELLENT
    if normalized_score >= bands.good:
        return ScoreQuality.GOOD
    if normalized_score >= bands.fair:
        return ScoreQuality.FAIR
    return ScoreQuality.POOR


def count_statuses(items: Iterable[Classified]) -> StatusCounts:
    """Bucket classified participants. A critical red counts only as critical."""
    green = orange = red = critical = 0
    for item in items:
        if item.is_critical_red:
            critical += 1
        elif item.status is ColorStatus.GREEN:
            green += 1
        elif item.status is ColorStatus.ORANGE:
            orange += 1
        else:
            red += 1
    return StatusCounts(green=green, orange=orange, red=red, critical_red=critical)


def score(classifications: Iterable[Classified], bands: QualityBands | None = None) -> EquityScore:
    """Aggregate per-participant classifications into an equity score.

    Args:
        classifications: ClassificationResult or ParticipantStatus values
        bands: Quality bands (defaults from settings)

    Returns:
        EquityScore with raw, max and normalized scores plus counts
    """
    items = list(classifications)
    participant_count = len(items)
    counts = count_statuses(items)

    raw_score = sum(points_for(item) for item in items)
    max_score = participant_count * GREEN_POINTS

    if participant_count == 0:
        normalized = 100.0
    else:
        offset = participant_count * NORMALIZATION_OFFSET
        normalized = (raw_score + offset) / (max_score + offset) * 100
        normalized = max(0.0, min(100.0, normalized))

    return EquityScore(
        raw_score=raw_score,
        max_score=max_score,
        normalized_score=normalized,
        counts=counts,
        quality=score_quality(normalized, bands),
    )
