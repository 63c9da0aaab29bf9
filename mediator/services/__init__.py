"""Entrypoint for services package."""

from mediator.services.config_service import ConfigService
from mediator.services.logging_service import configure_logging

__all__ = ["ConfigService", "configure_logging"]
