"""Work-week definitions.

Countries do not share a work week: most use Monday-Friday, several Gulf
states use Sunday-Thursday. Country configurations describe the work week
either as a collection of weekdays or as a compact pattern string such as
"MTWTF" or "SuMTWTh".
"""

from collections.abc import Iterable
from enum import IntEnum


class Weekday(IntEnum):
    """ISO weekday numbering (Monday=1 ... Sunday=7), matching date.isoweekday()."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


MONDAY_TO_FRIDAY: frozenset[Weekday] = frozenset(
    {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY, Weekday.FRIDAY}
)

_DAY_NAMES: dict[str, Weekday] = {
    "mon": Weekday.MONDAY,
    "monday": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "tuesday": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "thursday": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "friday": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
    "saturday": Weekday.SATURDAY,
    "sun": Weekday.SUNDAY,
    "sunday": Weekday.SUNDAY,
}

# Two-letter tokens are matched before single letters
_UNAMBIGUOUS_TOKENS: dict[str, Weekday] = {
    "Th": Weekday.THURSDAY,
    "Sa": Weekday.SATURDAY,
    "Su": Weekday.SUNDAY,
    "M": Weekday.MONDAY,
    "W": Weekday.WEDNESDAY,
    "F": Weekday.FRIDAY,
}


def _resolve_bare_t(seen: set[Weekday]) -> Weekday:
    if Weekday.TUESDAY in seen or Weekday.WEDNESDAY in seen:
        return Weekday.THURSDAY
    return Weekday.TUESDAY


def _resolve_bare_s(seen: set[Weekday]) -> Weekday:
    if Weekday.FRIDAY in seen and Weekday.SATURDAY not in seen:
        return Weekday.SATURDAY
    return Weekday.SUNDAY


def parse_work_week_pattern(pattern: str) -> frozenset[Weekday]:
    """Parse a compact work-week pattern into a set of weekdays.

    Tokens are M, T, W, Th, F, Sa, Su and a bare S. The pattern lists days in
    week order, so the second bare T of "MTWTF" is Thursday and a bare S after
    F is Saturday.

    Args:
        pattern: Pattern string (e.g., "MTWTF", "SuMTWTh", "MTWThF")

    Returns:
        Frozen set of weekdays

    Raises:
        ValueError: If the pattern contains an unknown token or is empty
    """
    stripped = pattern.strip()
    if not stripped:
        raise ValueError("Work week pattern must not be empty")

    seen: set[Weekday] = set()
    index = 0
    while index < len(stripped):
        pair = stripped[index : index + 2]
        single = stripped[index]
        if pair in _UNAMBIGUOUS_TOKENS:
            seen.add(_UNAMBIGUOUS_TOKENS[pair])
            index += 2
        elif single in _UNAMBIGUOUS_TOKENS:
            seen.add(_UNAMBIGUOUS_TOKENS[single])
            index += 1
        elif single == "T":
            seen.add(_resolve_bare_t(seen))
            index += 1
        elif single == "S":
            seen.add(_resolve_bare_s(seen))
            index += 1
        else:
            raise ValueError(f"Unknown token {single!r} at position {index} in work week pattern {pattern!r}")

    return frozenset(seen)


def coerce_work_days(value: str | Iterable[int | str | Weekday]) -> frozenset[Weekday]:
    """Normalise any supported work-week representation to a set of weekdays.

    Accepts a pattern string, ISO weekday numbers, Weekday members or day
    names ("mon", "Tuesday").

    Raises:
        ValueError: If a value cannot be mapped to a weekday or the result is empty
    """
    if isinstance(value, str):
        return parse_work_week_pattern(value)
    if not isinstance(value, Iterable):
        raise ValueError(f"Work week must be a pattern string or a collection of days, got {value!r}")

    days: set[Weekday] = set()
    for item in value:
        if isinstance(item, str):
            day = _DAY_NAMES.get(item.strip().lower())
            if day is None:
                raise ValueError(f"Unknown day name: {item!r}")
            days.add(day)
        else:
            try:
                days.add(Weekday(int(item)))
            except (TypeError, ValueError) as e:
                raise ValueError(f"Weekday numbers must be 1 (Monday) to 7 (Sunday), got {item!r}") from e

    if not days:
        raise ValueError("Work week must contain at least one day")
    return frozenset(days)
