"""Logging configuration."""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler

from greenledger_api.settings import Settings

LOG_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s", "module": "%(name)s"}'


def configure_logging(settings: Settings) -> None:
    """Log to stdout and, if enabled, to a daily-rotated file under log_dir."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if settings.log_to_file:
        try:
            settings.log_dir.mkdir(parents=True, exist_ok=True)
            handlers.append(
                TimedRotatingFileHandler(settings.log_dir / "app.log", when="midnight", encoding="utf-8")
            )
        except OSError as e:
            print(f"Failed to open log file in {settings.log_dir}: {e}", file=sys.stderr)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, handlers=handlers, force=True)
