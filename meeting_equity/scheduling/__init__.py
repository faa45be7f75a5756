"""Scheduling module - timezone-equity engine for distributed meetings.

This module provides:
- Effective configuration resolution (participant > country > default)
- UTC to local projection with daylight-saving awareness
- Priority-ordered comfort classification (green / orange / red / critical red)
- Normalized 0-100 equity scoring
- 24-hour heatmaps and ranked time suggestions
"""

from meeting_equity.scheduling.cache import ClassificationCache
from meeting_equity.scheduling.config_resolver import resolve, resolve_source
from meeting_equity.scheduling.constants import build_default_config
from meeting_equity.scheduling.equity_scorer import QualityBands, score, score_quality
from meeting_equity.scheduling.errors import InvalidDateError, InvalidTimezoneError, SchedulingConfigurationError
from meeting_equity.scheduling.evaluation import EquityEngine, analyze_meeting, evaluate_meeting
from meeting_equity.scheduling.heatmap import generate
from meeting_equity.scheduling.status_classifier import classify, classify_projection, find_holiday
from meeting_equity.scheduling.suggestions import rank
from meeting_equity.scheduling.timezone_projector import (
    LocalProjection,
    TimeZoneProjector,
    ZoneInfoProjector,
    is_valid_timezone,
    parse_utc_instant,
)
from meeting_equity.scheduling.types import (
    ClassificationResult,
    ColorStatus,
    ConfigSource,
    CountryConfig,
    EquityScore,
    HeatmapEntry,
    Holiday,
    Meeting,
    MeetingAnalysis,
    MeetingEvaluation,
    Participant,
    ParticipantStatus,
    ScoreQuality,
    StatusCounts,
)
from meeting_equity.scheduling.work_week import Weekday, parse_work_week_pattern

__all__ = [
    "ClassificationCache",
    "ClassificationResult",
    "ColorStatus",
    "ConfigSource",
    "CountryConfig",
    "EquityEngine",
    "EquityScore",
    "HeatmapEntry",
    "Holiday",
    "InvalidDateError",
    "InvalidTimezoneError",
    "LocalProjection",
    "Meeting",
    "MeetingAnalysis",
    "MeetingEvaluation",
    "Participant",
    "ParticipantStatus",
    "QualityBands",
    "SchedulingConfigurationError",
    "ScoreQuality",
    "StatusCounts",
    "TimeZoneProjector",
    "Weekday",
    "ZoneInfoProjector",
    "analyze_meeting",
    "build_default_config",
    "classify",
    "classify_projection",
    "find_holiday",
    "evaluate_meeting",
    "generate",
    "is_valid_timezone",
    "parse_utc_instant",
    "parse_work_week_pattern",
    "rank",
    "resolve",
    "resolve_source",
    "score",
    "score_quality",
]
