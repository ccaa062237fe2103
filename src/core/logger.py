"""Logging configuration and service."""
import json
import logging
from typing import Any, Dict, Optional

from .settings import Settings

REDACTED = "***"

# Extra fields whose values must never reach the log output
SENSITIVE_FIELDS = frozenset(
    {
        "authorization",
        "api_key",
        "bearer_token",
        "token",
        "x-api-key",
        "x-goog-api-key",
    }
)


def redact(key: str, value: Any) -> Any:
    """Mask a value when the key names a secret.

    Header dictionaries are redacted one level deep so that a logged
    ``headers`` mapping keeps its names but loses its credentials.

    Args:
        key: Field or header name
        value: Value to inspect

    Returns:
        The value, or a redaction marker for secrets
    """
    if key.lower() in SENSITIVE_FIELDS:
        return REDACTED
    if isinstance(value, dict):
        return {k: redact(str(k), v) for k, v in value.items()}
    return value


def _non_serializable(value: Any) -> str:
    return f"<non-serializable: {type(value).__name__}>"


class BaseFormatter(logging.Formatter):
    """Base formatter: common record fields plus redacted extras."""

    # LogRecord attributes that are not extra fields
    STANDARD_LOG_RECORD_ATTRIBUTES = frozenset(
        logging.makeLogRecord({}).__dict__
    ) | {"message", "asctime"}

    def __init__(self, settings_instance: Settings) -> None:
        """Initialize formatter.

        Args:
            settings_instance: Settings instance for configuration
        """
        super().__init__()
        self.settings = settings_instance

    def get_fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        """Get record fields in output order, secrets redacted.

        Extra fields passed with ``extra=`` follow the common fields. Fields
        listed in ``LOG_EXTRA_FIELDS`` are included even when their names
        shadow standard record attributes.
        """
        fields: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_LOG_RECORD_ATTRIBUTES:
                fields[key] = redact(key, value)
        for field in self.settings.LOG_EXTRA_FIELDS:
            if hasattr(record, field):
                fields[field] = redact(field, getattr(record, field))
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)
        return fields


class JsonFormatter(BaseFormatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.get_fields(record), default=_non_serializable)


class TextFormatter(BaseFormatter):
    """Human-readable ``time - level - name - message`` lines."""

    def format(self, record: logging.LogRecord) -> str:
        fields = self.get_fields(record)
        exception = fields.pop("exception", None)
        head = [fields.pop(key) for key in ("time", "level", "name", "message")]
        msg = " - ".join(head)
        if fields:
            msg += f" - extra={fields}"
        if exception:
            msg += f"\n{exception}"
        return msg


class LoggerService:
    """Service for configuring and providing loggers."""

    FORMATTERS = {
        "json": JsonFormatter,
        "text": TextFormatter,
    }

    def __init__(self, settings_instance: Settings) -> None:
        """Initialize logging configuration.

        Args:
            settings_instance: Settings instance to use
        """
        self.settings = settings_instance
        logging.getLogger().setLevel(getattr(logging, settings_instance.LOG_LEVEL.upper()))

    def get_logger(self, name: str, format: Optional[str] = None) -> logging.Logger:
        """Get logger instance.

        The handler is installed on first use; later calls return the same
        logger unchanged, whatever format they ask for.

        Args:
            name: Logger name, typically __name__
            format: Optional format override (json, text)

        Returns:
            Logger instance
        """
        logger = logging.getLogger(name)

        if not logger.handlers:
            formatter_class = self.FORMATTERS[format or self.settings.LOG_FORMAT]
            handler = logging.StreamHandler()
            handler.setFormatter(formatter_class(self.settings))
            logger.addHandler(handler)

        return logger
