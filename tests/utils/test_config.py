"""Tests for the configuration module."""

import pytest
import yaml

from seqprover.utils import config as config_module
from seqprover.utils.config import Config, get_config, reset_config


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({
        "search": {"strategy": "backward"},
        "format": {"output": "${TEST_SEQPROVER_FORMAT:ascii}"},
        "logging": {"level": "INFO"},
        "names": ["${TEST_SEQPROVER_NAME}"],
    }))
    return path


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestConfig:
    """Test Config loading and access."""

    def test_dot_access(self, config_file):
        config = Config(str(config_file))
        assert config.get("search.strategy") == "backward"
        assert config["logging.level"] == "INFO"
        assert config.get("search.missing") is None
        assert config.get("search.missing", 5) == 5

    def test_environment_default(self, config_file, monkeypatch):
        monkeypatch.delenv("TEST_SEQPROVER_FORMAT", raising=False)
        assert Config(str(config_file)).get("format.output") == "ascii"

    def test_environment_override(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_SEQPROVER_FORMAT", "sequent")
        monkeypatch.setenv("TEST_SEQPROVER_NAME", "x")
        config = Config(str(config_file))
        assert config.get("format.output") == "sequent"
        assert config.get("names") == ["x"]

    def test_update(self, config_file):
        config = Config(str(config_file))
        config.update({"logging": {"format": "%(message)s"}})
        assert config.get("logging.level") == "INFO"
        assert config.get("logging.format") == "%(message)s"

    def test_shipped_default(self, monkeypatch, tmp_path):
        """Without a local config the packaged default is used."""
        monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
        monkeypatch.chdir(tmp_path)
        config = Config()
        assert config.config_path.endswith("default.yaml")
        assert config.get("search.strategy") == "backward"
        assert config.get("output.show_rules") is False

    def test_env_var_path(self, config_file, monkeypatch):
        monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(config_file))
        assert Config().config_path == str(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "nope.yaml"))


class TestGlobalConfig:
    def test_singleton(self, config_file):
        first = get_config(str(config_file))
        assert get_config() is first

    def test_reset(self, config_file):
        first = get_config(str(config_file))
        reset_config()
        assert get_config(str(config_file)) is not first
