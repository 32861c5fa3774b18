"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story lifecycle events.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Extra record attributes copied into JSON log lines when present
_EXTRA_FIELDS = ("story_id", "operation", "error_type", "method", "path")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in _EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class StoryLogger:
    """Logger for story lifecycle events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_service.stories")

    def story_created(self, story_id: str, status: str) -> None:
        self.logger.info(
            "Story created",
            extra={"story_id": story_id, "operation": "create"},
        )
        self.logger.debug(f"Story {story_id} created with status {status}")

    def story_updated(self, story_id: str, fields: list[str]) -> None:
        self.logger.info(
            f"Story updated: {', '.join(fields) or 'no fields'}",
            extra={"story_id": story_id, "operation": "update"},
        )

    def story_deleted(self, story_id: str) -> None:
        self.logger.info(
            "Story deleted",
            extra={"story_id": story_id, "operation": "delete"},
        )

    def validation_failed(self, operation: str, error_count: int) -> None:
        self.logger.info(
            f"Validation failed with {error_count} error(s)",
            extra={"operation": operation},
        )

    def persistence_failed(self, operation: str, error: Exception, story_id: str = None) -> None:
        extra = {"operation": operation, "error_type": type(error).__name__}
        if story_id:
            extra["story_id"] = story_id
        self.logger.error(f"Story {operation} failed: {error}", extra=extra)


# Global story logger instance
story_logger = StoryLogger()
