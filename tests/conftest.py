"""Global fixtures and pytest configuration.

- Provides an isolated ChannelRegistry per test
- Exposes a valid configuration and a temporary YAML file holding it
- Exposes a shared CliRunner for CLI tests
"""

import logging

import pytest
import yaml
from typer.testing import CliRunner

from mediator.registry import ChannelRegistry
from mediator.services.config_schema import MediatorConfig


@pytest.fixture
def registry():
    """Fresh registry so channel ids never collide across tests."""
    return ChannelRegistry()


@pytest.fixture
def valid_config():
    """Fixture for a valid mediator configuration."""
    return MediatorConfig.model_validate(
        {
            "logging": {"level": "DEBUG", "rich": False},
            "notifier": {"log_failures": False},
        }
    )


@pytest.fixture
def config_file(valid_config, tmp_path):
    """Fixture for a temporary configuration file."""
    config_path = tmp_path / "mediator.yaml"
    with open(config_path, "w") as f:
        yaml.dump(valid_config.model_dump(), f)
    return str(config_path)


@pytest.fixture(autouse=True)
def isolate_env_and_logging(monkeypatch):
    """No config file from the environment, and no handlers left behind."""
    monkeypatch.delenv("MEDIATOR_CONFIG", raising=False)
    logger = logging.getLogger("mediator")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture(scope="session")
def cli():
    """Shared CliRunner for all CLI tests."""
    return CliRunner()
