"""Logging configuration and utilities."""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from cloud_relay.core.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_initialized = False


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Add extra fields
        if hasattr(record, "extra_fields"):
            log_data["extra"] = record.extra_fields

        return json.dumps(log_data, default=str)


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger once from settings.

    Args:
        level: Override for LOG_LEVEL
        log_format: Override for LOG_FORMAT ('text' or 'json')
        force: Reconfigure even if logging was already set up
    """
    global _initialized
    if _initialized and not force:
        return

    level = (level or settings.log_level).upper()
    log_format = (log_format or settings.log_format).lower()

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    _initialized = True


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    exc_info: bool = False,
    **context: Any
) -> None:
    """Log a message with additional context.

    Args:
        logger: Logger instance
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        message: Log message
        exc_info: Attach the current exception traceback
        **context: Additional context to include in the log
    """
    logger.log(
        getattr(logging, level.upper()),
        message,
        exc_info=exc_info,
        extra={"extra_fields": context},
    )


api_logger = logging.getLogger("cloud_relay.api")
provider_logger = logging.getLogger("cloud_relay.provider")


class ProcessingTimer:
    """Context manager for timing provider calls and logging."""

    def __init__(
        self,
        operation: str,
        logger: Optional[logging.Logger] = None,
        log_level: str = "INFO"
    ):
        """Initialize timer.

        Args:
            operation: Name of the operation being timed
            logger: Logger to use (defaults to provider_logger)
            log_level: Level to log at (default INFO)
        """
        self.operation = operation
        self.logger = logger or provider_logger
        self.log_level = log_level
        self.start_time: Optional[datetime] = None
        self.end_time: Optional[datetime] = None

    def __enter__(self):
        self.start_time = datetime.now(timezone.utc)
        log_with_context(
            self.logger,
            "DEBUG",
            f"Starting {self.operation}",
            operation=self.operation,
            start_time=self.start_time.isoformat()
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = datetime.now(timezone.utc)
        duration = (self.end_time - self.start_time).total_seconds()

        if exc_type:
            log_with_context(
                self.logger,
                "ERROR",
                f"Failed {self.operation}",
                operation=self.operation,
                duration_seconds=duration,
                error_type=exc_type.__name__
            )
        else:
            log_with_context(
                self.logger,
                self.log_level,
                f"Completed {self.operation}",
                operation=self.operation,
                duration_seconds=duration
            )
        # Never suppress the exception
        return False

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds."""
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None


def log_api_request(
    method: str,
    path: str,
    status_code: int,
    duration: float,
    **extra: Any
) -> None:
    """Log API request details.

    Args:
        method: HTTP method
        path: Request path
        status_code: Response status code
        duration: Request duration in seconds
        **extra: Additional context
    """
    context = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_seconds": duration,
    }
    context.update(extra)

    level = "ERROR" if status_code >= 500 else "INFO"
    message = f"{method} {path} - {status_code}"

    log_with_context(api_logger, level, message, **context)
