"""Logging setup for the mediator package."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_schema import LoggingConfig

LOGGER_NAME = "mediator"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    config: LoggingConfig, console: Optional[Console] = None
) -> logging.Logger:
    """Attach a single handler to the ``mediator`` logger and set its level.

    Calling it again replaces the handler installed by a previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_mediator_handler", False):
            logger.removeHandler(handler)

    if config.rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True), show_path=False
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
    handler._mediator_handler = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(config.level)
    return logger


__all__ = ["configure_logging", "LOGGER_NAME"]
