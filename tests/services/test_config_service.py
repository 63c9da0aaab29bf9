import tempfile
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from mediator.services import ConfigService
from mediator.services.config_schema import MediatorConfig


def test_no_path_uses_defaults():
    service = ConfigService()
    assert service.get_config_path() is None
    assert service.load_config() == MediatorConfig()


def test_save_without_path_fails(valid_config):
    with pytest.raises(ValueError):
        ConfigService().save_config(valid_config)


def test_init_custom_path():
    service = ConfigService("/custom/path.yaml")
    assert service._path == Path("/custom/path.yaml")


def test_load_config(config_file, valid_config):
    service = ConfigService(config_file)
    config = service.load_config()

    assert isinstance(config, MediatorConfig)
    assert config.model_dump() == valid_config.model_dump()


def test_load_config_file_not_found():
    service = ConfigService("/non/existent/path.yaml")
    with pytest.raises(FileNotFoundError):
        service.load_config()


def test_load_config_empty_file_uses_defaults(tmp_path):
    empty_path = tmp_path / "empty.yaml"
    empty_path.write_text("")
    config = ConfigService(str(empty_path)).load_config()
    assert config.logging.level == "WARNING"
    assert config.logging.rich is True
    assert config.notifier.log_failures is True


def test_load_config_partial_section(tmp_path):
    path = tmp_path / "partial.yaml"
    path.write_text("logging:\n  level: INFO\n")
    config = ConfigService(str(path)).load_config()
    assert config.logging.level == "INFO"
    assert config.notifier.log_failures is True


@pytest.mark.parametrize(
    "content",
    [
        "logging:\n  level: LOUD\n",
        "notifier:\n  log_failures: [1, 2]\n",
    ],
)
def test_load_config_invalid(tmp_path, content):
    path = tmp_path / "invalid.yaml"
    path.write_text(content)
    with pytest.raises(ValidationError):
        ConfigService(str(path)).load_config()


def test_save_config_with_pydantic_model(tmp_path, valid_config):
    config_path = tmp_path / "save_test_pydantic.yaml"
    service = ConfigService(str(config_path))
    service.save_config(valid_config)
    assert config_path.exists()
    with open(config_path, "r") as f:
        saved_config = yaml.safe_load(f)
    assert saved_config == valid_config.model_dump()


def test_save_config_with_dict(tmp_path):
    config_path = tmp_path / "save_test.yaml"
    service = ConfigService(str(config_path))
    test_config = {"logging": {"level": "ERROR", "rich": True}}
    service.save_config(test_config)
    with open(config_path, "r") as f:
        saved_config = yaml.safe_load(f)
    assert saved_config == test_config
    assert service.load_config().logging.level == "ERROR"


def test_get_config_path():
    with tempfile.NamedTemporaryFile() as temp:
        service = ConfigService(temp.name)
        path = service.get_config_path()
        assert path == str(Path(temp.name).absolute())
