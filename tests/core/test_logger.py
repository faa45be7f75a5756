"""Tests for logger configuration."""

from loguru import logger

from meeting_equity.core.logger import setup_logger


def test_file_sink_receives_structured_messages(tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    try:
        setup_logger(level="DEBUG", log_file=str(log_file))
        logger.debug("heatmap: Generated", best_hour=9)
        logger.complete()

        contents = log_file.read_text()
        assert "Logger initialized with level=DEBUG" in contents
        assert "heatmap: Generated" in contents
        assert "'best_hour': 9" in contents
    finally:
        setup_logger(level="DEBUG")


def test_serialized_file_sink(tmp_path):
    log_file = tmp_path / "engine.jsonl"
    try:
        setup_logger(level="INFO", log_file=str(log_file), serialize=True)
        logger.info("evaluation: Scored meeting", score=29.17)
        logger.complete()

        last_line = log_file.read_text().strip().splitlines()[-1]
        assert '"score": 29.17' in last_line
        assert '"message": "evaluation: Scored meeting"' in last_line
    finally:
        setup_logger(level="DEBUG")
