"""
Unit tests for configuration and logging helpers.
"""

import logging

import pytest

from disteval.config import (
    Settings,
    load_config,
    get_default_config_path,
    get_settings,
    reset_settings,
)
from disteval.core.exceptions import ConfigurationError
from disteval.utils.logging import setup_logger, get_logger


class TestSettings:
    """Tests for Settings and load_config."""

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.label_results is True

    def test_dict_round_trip(self):
        settings = Settings(log_level="DEBUG", label_results=False)
        assert Settings.from_dict(settings.to_dict()) == settings

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys"):
            Settings.from_dict({"metric": "manhattan"})

    def test_log_level_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["verbose", "", 10, None])
    def test_invalid_log_level(self, level):
        with pytest.raises(ConfigurationError, match="log_level"):
            Settings.from_dict({"log_level": level})

    @pytest.mark.parametrize("value", ["no", 0, None])
    def test_invalid_label_results(self, value):
        with pytest.raises(ConfigurationError, match="label_results"):
            Settings.from_dict({"label_results": value})

    @pytest.mark.parametrize("key", ["log_format", "log_file"])
    def test_invalid_optional_string(self, key):
        with pytest.raises(ConfigurationError, match=key):
            Settings.from_dict({key: 42})

    def test_invalid_yaml_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: verbose\n")

        with pytest.raises(ConfigurationError, match="log_level"):
            load_config(str(path))

    def test_invalid_env_config(self, tmp_path, monkeypatch):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: verbose\n")
        monkeypatch.setenv("DISTEVAL_CONFIG", str(path))
        reset_settings()

        with pytest.raises(ConfigurationError):
            get_settings()
        with pytest.raises(ConfigurationError):
            get_logger("disteval.test.bad_config")

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "disteval.yaml"
        path.write_text("log_level: DEBUG\nlabel_results: false\n")

        settings = load_config(str(path))

        assert settings.log_level == "DEBUG"
        assert settings.label_results is False

    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / "nope.yaml")) == Settings()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == Settings()

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(str(path))

    def test_packaged_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DISTEVAL_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)

        path = get_default_config_path()

        assert path.name == "default_config.yaml"
        assert path.exists()
        assert load_config() == Settings()

    def test_local_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DISTEVAL_CONFIG", raising=False)
        monkeypatch.chdir(tmp_path)
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "disteval.yaml").write_text("log_level: ERROR\n")

        assert load_config().log_level == "ERROR"

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("label_results: false\n")
        monkeypatch.setenv("DISTEVAL_CONFIG", str(path))
        reset_settings()

        assert get_default_config_path() == path
        assert get_settings().label_results is False

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first


class TestLogging:
    """Tests for logging helpers."""

    def test_setup_logger_level(self):
        logger = setup_logger("disteval.test.level", level="debug")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logger_file(self, tmp_path):
        log_file = tmp_path / "disteval.log"
        logger = setup_logger("disteval.test.file", level="INFO", log_file=str(log_file))
        logger.info("resolved metric")
        for handler in logger.handlers:
            handler.flush()

        assert "resolved metric" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()

    def test_get_logger_cached(self):
        assert get_logger("disteval.test.cached") is get_logger("disteval.test.cached")

    def test_get_logger_uses_settings(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("log_level: ERROR\n")
        monkeypatch.setenv("DISTEVAL_CONFIG", str(path))
        reset_settings()

        assert get_logger("disteval.test.settings").level == logging.ERROR

