"""Logging setup driven by LoggingSettings."""

import logging
import sys

from rich.logging import RichHandler

from funfood.shared.config.settings import LoggingSettings


def setup_logging(settings: LoggingSettings) -> None:
    """Configure the root logger for the application."""
    handlers: list[logging.Handler] = []
    if settings.console_enabled:
        if settings.console_colored:
            handlers.append(RichHandler(rich_tracebacks=True, show_path=False))
        else:
            handlers.append(logging.StreamHandler(sys.stdout))

    logging.basicConfig(
        level=settings.level.upper(),
        format="%(message)s" if settings.console_colored else settings.format,
        handlers=handlers or [logging.NullHandler()],
        force=True,
    )
