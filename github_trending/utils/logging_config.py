"""Opt-in console logging for the github_trending package.

Library modules only create loggers with ``logging.getLogger(__name__)``
and never configure anything. Applications that want the package's
output on stdout call setup_logging() once at startup:

    >>> from github_trending.utils.logging_config import setup_logging
    >>> setup_logging(use_json=True)

The handler is attached to the ``github_trending`` logger, so the root
logger's level and handlers stay under the host application's control.
"""

import json
import logging
import sys
from typing import Any, Optional

from github_trending.utils.config import Settings, get_settings

PACKAGE_LOGGER = "github_trending"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, tagged with the application name and environment."""

    def __init__(self, app_name: str = "github-trending", environment: str = "development") -> None:
        super().__init__()
        self.app_name = app_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "app_name": self.app_name,
            "environment": self.environment,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Passed through logger calls as extra={"extra_fields": {...}}
        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        return json.dumps(log_data)


class StandardFormatter(logging.Formatter):
    """Plain text: ``[time] LEVEL - logger - message``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_console_handler: Optional[logging.Handler] = None


def setup_logging(
    settings: Optional[Settings] = None,
    use_json: bool = False,
    force_reconfigure: bool = False,
) -> logging.Logger:
    """
    Send the package's log records to stdout.

    Args:
        settings: Source of LOG_LEVEL, APP_NAME and ENVIRONMENT; read from the
            environment when omitted
        use_json: If True, use JSON format. If False, use standard text format.
        force_reconfigure: Replace an existing console handler instead of
            keeping it

    Returns:
        The configured ``github_trending`` logger
    """
    global _console_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is not None and not force_reconfigure:
        return package_logger

    settings = settings or get_settings()
    if _console_handler is not None:
        package_logger.removeHandler(_console_handler)

    log_level = getattr(logging, settings.LOG_LEVEL)
    package_logger.setLevel(log_level)

    if use_json:
        formatter = JsonFormatter(settings.APP_NAME, settings.ENVIRONMENT)
    else:
        formatter = StandardFormatter()

    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setLevel(log_level)
    _console_handler.setFormatter(formatter)
    package_logger.addHandler(_console_handler)

    package_logger.debug(
        f"Logging configured: level={settings.LOG_LEVEL}, "
        f"format={'json' if use_json else 'standard'}"
    )
    return package_logger


def reset_logging() -> None:
    """Detach the console handler and restore the package logger's defaults."""
    global _console_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is not None:
        package_logger.removeHandler(_console_handler)
        _console_handler = None
    package_logger.setLevel(logging.NOTSET)
