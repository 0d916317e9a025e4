"""Logging configuration for bitbucket-v1."""

import logging
import os
import sys
import time
import types
from typing import Any

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
ROOT_LOGGER_NAME = "bitbucket-v1"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    log_format: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """
    Configures and returns a logger writing to stderr.

    Calling it again for the same name replaces the handler instead of
    stacking a second one.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.), falls back to LOG_LEVEL
        log_format: Log format, falls back to LOG_FORMAT
        stream: Stream for the console handler (default: sys.stderr)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    for handler in list(logger.handlers):
        if getattr(handler, "_bitbucket_v1_handler", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler._bitbucket_v1_handler = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


class LoggingContextManager:
    """Context manager that logs the start, end and duration of an operation."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        self.logger = logger
        self.operation = operation
        self.context = context
        self.start_time = 0.0

    def _describe(self) -> str:
        if not self.context:
            return self.operation
        details = ",".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.operation} [{details}]"

    def __enter__(self) -> "LoggingContextManager":
        self.start_time = time.monotonic()
        self.logger.debug(f"Operation started: {self._describe()}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.monotonic() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self._describe()} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self._describe()} in {duration:.3f}s"
            )


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger to write to
        operation: Name of the operation
        **context: Additional key/value pairs included in every message

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a credential for log output, keeping only its last characters.

    Args:
        value: Secret to mask
        keep_chars: Number of trailing characters left visible

    Returns:
        Masked string ("Not Provided" when empty)
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return "*" * (len(value) - keep_chars) + value[-keep_chars:]
