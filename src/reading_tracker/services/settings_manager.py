"""Settings Manager - Handles data location, logging and pace configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages application settings.

    Reads values from the process environment, seeded from a .env file in
    the project root.
    """

    DATA_DIR_VAR = "READING_TRACKER_DATA_DIR"
    LOG_LEVEL_VAR = "READING_TRACKER_LOG_LEVEL"
    PAGES_PER_DAY_VAR = "READING_TRACKER_DEFAULT_PAGES_PER_DAY"

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_PAGES_PER_DAY = 20.0

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_data_dir(self) -> Path:
        """Directory holding the persisted library."""
        value = os.getenv(self.DATA_DIR_VAR)
        if value and value.strip():
            return Path(value.strip()).expanduser()
        return Path.home() / ".reading_tracker"

    def get_log_level(self) -> int:
        name = (os.getenv(self.LOG_LEVEL_VAR) or self.DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning("Unknown log level %r, using %s", name, self.DEFAULT_LOG_LEVEL)
            return logging.INFO
        return level

    def get_default_pages_per_day(self) -> float:
        """Fallback reading pace for books without logged history."""
        raw = os.getenv(self.PAGES_PER_DAY_VAR)
        if not raw or not raw.strip():
            return self.DEFAULT_PAGES_PER_DAY
        try:
            value = float(raw)
        except ValueError:
            logger.warning("Invalid %s=%r, using default", self.PAGES_PER_DAY_VAR, raw)
            return self.DEFAULT_PAGES_PER_DAY
        if value <= 0:
            logger.warning("%s must be positive, using default", self.PAGES_PER_DAY_VAR)
            return self.DEFAULT_PAGES_PER_DAY
        return value

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
