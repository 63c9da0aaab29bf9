from typing import Literal

from pydantic import BaseModel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging setup for the ``mediator`` logger."""

    level: LogLevel = "WARNING"
    rich: bool = True  # RichHandler instead of a plain StreamHandler


class NotifierConfig(BaseModel):
    """Behaviour of multicast publishing."""

    log_failures: bool = True  # Failures are swallowed either way


class MediatorConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()
    notifier: NotifierConfig = NotifierConfig()
