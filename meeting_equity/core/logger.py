"""Logger configuration for the meeting equity engine.

The engine only emits records through loguru; it never installs sinks on
import. Applications (and the test suite) call setup_logger once.
"""

import sys
from pathlib import Path

from loguru import logger

from meeting_equity.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    serialize: bool = False,
) -> None:
    """Configure loguru with a console sink and an optional rotating file sink.

    Sinks are enqueued because heatmap hours may be scored on worker threads.

    Args:
        level: Logging level; defaults to MEETING_EQUITY_LOG_LEVEL
        log_file: Optional path to log file. If None, only console logging.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        serialize: Write the file sink as JSON lines instead of text
    """
    effective_level = (level or settings.log_level).upper()
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=effective_level,
        colorize=True,
        enqueue=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=effective_level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            serialize=serialize,
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )

    logger.info(f"Logger initialized with level={effective_level}")
