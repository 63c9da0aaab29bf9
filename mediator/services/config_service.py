"""Mediator configuration service."""

from pathlib import Path
from typing import Any, Optional

import yaml

from .config_schema import MediatorConfig


class ConfigService:
    """Read and write the mediator YAML configuration.

    Without a path every setting keeps its default; with one, the file must
    exist.
    """

    def __init__(self, path: Optional[str] = None):
        self._path = Path(path) if path else None

    def load_config(self) -> MediatorConfig:
        if self._path is None:
            return MediatorConfig()
        if not self._path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        return MediatorConfig.model_validate(raw)

    def save_config(self, config: Any) -> None:
        """Write ``config`` (a model or a plain dict) to the configured path."""
        if self._path is None:
            raise ValueError("No configuration path to save to")
        if hasattr(config, "model_dump"):
            config = config.model_dump()
        with self._path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(config, f, default_flow_style=False)

    def get_config_path(self) -> Optional[str]:
        """Absolute path of the configuration file, if any."""
        return str(self._path.absolute()) if self._path else None
