"""Unit tests for SettingsManager."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

from reading_tracker.services import SettingsManager

MANAGED_VARS = (
    SettingsManager.DATA_DIR_VAR,
    SettingsManager.LOG_LEVEL_VAR,
    SettingsManager.PAGES_PER_DAY_VAR,
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Clear reading tracker variables before and after each test."""
    saved = {name: os.environ.pop(name, None) for name in MANAGED_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


def make_settings(env_dir, content):
    (env_dir / ".env").write_text(content)
    return SettingsManager(project_root=env_dir)


class TestDataDir:
    def test_default_is_in_home(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "")

        assert settings.get_data_dir() == Path.home() / ".reading_tracker"

    def test_read_from_env_file(self, temp_env_dir, clean_env):
        target = temp_env_dir / "library"
        settings = make_settings(temp_env_dir, f"READING_TRACKER_DATA_DIR={target}\n")

        assert settings.get_data_dir() == target

    def test_blank_value_uses_default(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "READING_TRACKER_DATA_DIR=   \n")

        assert settings.get_data_dir() == Path.home() / ".reading_tracker"


class TestLogLevel:
    def test_default_is_info(self, temp_env_dir, clean_env):
        assert make_settings(temp_env_dir, "").get_log_level() == logging.INFO

    def test_name_is_case_insensitive(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "READING_TRACKER_LOG_LEVEL=debug\n")

        assert settings.get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_with_warning(self, temp_env_dir, clean_env, caplog):
        settings = make_settings(temp_env_dir, "READING_TRACKER_LOG_LEVEL=chatty\n")

        assert settings.get_log_level() == logging.INFO
        assert "Unknown log level" in caplog.text


class TestDefaultPagesPerDay:
    def test_default_pace(self, temp_env_dir, clean_env):
        assert make_settings(temp_env_dir, "").get_default_pages_per_day() == 20.0

    def test_configured_pace(self, temp_env_dir, clean_env):
        settings = make_settings(temp_env_dir, "READING_TRACKER_DEFAULT_PAGES_PER_DAY=35\n")

        assert settings.get_default_pages_per_day() == 35.0

    @pytest.mark.parametrize("raw", ["fast", "0", "-5"])
    def test_invalid_pace_uses_default(self, temp_env_dir, clean_env, raw):
        settings = make_settings(temp_env_dir, f"READING_TRACKER_DEFAULT_PAGES_PER_DAY={raw}\n")

        assert settings.get_default_pages_per_day() == 20.0


def test_reload_env_picks_up_changes(temp_env_dir, clean_env):
    """reload_env should pick up changes to .env file."""
    settings = make_settings(temp_env_dir, "READING_TRACKER_DEFAULT_PAGES_PER_DAY=10\n")
    assert settings.get_default_pages_per_day() == 10.0

    (temp_env_dir / ".env").write_text("READING_TRACKER_DEFAULT_PAGES_PER_DAY=42\n")
    settings.reload_env()

    assert settings.get_default_pages_per_day() == 42.0
