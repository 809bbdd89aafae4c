"""Tests for verparse configuration loading."""

import pytest
from pydantic import ValidationError

from verparse.config import Settings, get_settings, load_config


class TestLoadConfig:
    """Test YAML config loading."""

    def test_missing_default_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_config() == {}

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_reads_verparse_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  log_level: DEBUG\n  check_output: false\nother: 1\n")
        assert load_config(path) == {"log_level": "DEBUG", "check_output": False}

    def test_default_file_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / "verparse.yaml").write_text("verparse:\n  fixture_separator: ';'\n")
        monkeypatch.chdir(tmp_path)
        assert load_config() == {"fixture_separator": ";"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == {}


class TestGetSettings:
    """Test settings resolution."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = get_settings()
        assert settings == Settings()
        assert settings.log_level == "WARNING"
        assert settings.ignored_entries == ["list"]
        assert settings.check_output is True

    def test_file_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  ignored_entries: [list, skip]\n")
        assert get_settings(path).ignored_entries == ["list", "skip"]

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  log_level: DEBUG\n")
        monkeypatch.setenv("VERPARSE_LOG_LEVEL", "ERROR")
        assert get_settings(path).log_level == "ERROR"

    def test_lowercase_environment_overrides_file(self, tmp_path, monkeypatch):
        """Test env names match case-insensitively, as pydantic-settings does."""
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  log_level: DEBUG\n")
        monkeypatch.setenv("verparse_log_level", "ERROR")
        assert get_settings(path).log_level == "ERROR"

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  log_levl: DEBUG\n")
        with pytest.raises(ValidationError):
            get_settings(path)


class TestLogLevel:
    """Test log level validation."""

    def test_normalized_to_upper_case(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="loud")


class TestMalformedConfig:
    """Test config files with the wrong shape."""

    def test_document_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_section_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verparse: DEBUG\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_non_string_keys(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("verparse:\n  1: DEBUG\n")
        with pytest.raises(ValueError):
            load_config(path)
