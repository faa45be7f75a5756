"""Scheduling configuration error types.

Every error the engine raises is a configuration error: the caller handed it
input that cannot be evaluated without guessing. Degenerate-but-valid input
(no participants, gapped time ranges, empty holiday sets) never raises.

Standard error codes:
- INVALID_TIMEZONE: Timezone identifier is unknown to the timezone database
- INVALID_DATE: Candidate instant or day could not be parsed
"""

from loguru import logger


class SchedulingConfigurationError(RuntimeError):
    """Raised when scheduling input cannot be evaluated.

    Attributes:
        code: Error code (e.g., "INVALID_TIMEZONE", "INVALID_DATE")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {'; '.join(details)}")


class InvalidTimezoneError(SchedulingConfigurationError):
    """Raised when a timezone identifier is not a recognised IANA zone.

    Attributes:
        timezone_id: The rejected identifier
        participant_id: Participant whose record carried it, when known
    """

    def __init__(self, timezone_id: str, participant_id: str | None = None):
        self.timezone_id = timezone_id
        self.participant_id = participant_id
        details = [f"Unknown timezone identifier: {timezone_id!r}"]
        if participant_id is not None:
            details.append(f"participant={participant_id}")
        super().__init__("INVALID_TIMEZONE", details)

    def for_participant(self, participant_id: str) -> "InvalidTimezoneError":
        """Return a copy of this error attributed to a participant."""
        return InvalidTimezoneError(self.timezone_id, participant_id=participant_id)


class InvalidDateError(SchedulingConfigurationError):
    """Raised when a candidate instant or day is malformed."""

    def __init__(self, value: object, reason: str):
        self.value = value
        super().__init__("INVALID_DATE", [f"{reason}: {value!r}"])


def log_configuration_failure(err: SchedulingConfigurationError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a configuration failure with context.

    Call this before re-raising a SchedulingConfigurationError to the caller.

    Args:
        err: The SchedulingConfigurationError that occurred
        context: Additional context dictionary for logging
    """
    logger.error(
        "SCHEDULING_CONFIGURATION_FAILED",
        code=err.code,
        details=err.details,
        **context,
    )
