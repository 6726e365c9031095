"""
Contains the configuration options for the Daybook application
"""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings

USERPROFILE: Path = Path(os.getenv("userprofile", os.getenv("HOME", "")))
BASE_FOLDER: Path = (USERPROFILE / ".daybook").resolve()
SETTINGS_FILE_PATH: Path = BASE_FOLDER / "config.json"


class Settings(BaseSettings):
    """Settings class for the Daybook application"""

    # Relative to the working directory, next to the executable
    DATABASE_FILE_PATH: Path = Path("diary.db")
    LOGGING_DIR_PATH: Path = BASE_FOLDER / "logging"

    # Window
    WINDOW_TITLE: str = "Diary"
    WINDOW_WIDTH: int = 400
    WINDOW_HEIGHT: int = 600
    HIGHLIGHT_COLOR: str = "green"
    STATUS_MESSAGE_TIMEOUT: int = 3000  # in milliseconds
    TRAY_ENABLED: bool = True

    @classmethod
    def load_from_file(cls, path: Path) -> "Settings":
        """Loads settings from a JSON file."""
        if not path.exists():
            return cls()  # Return default

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls(**data)
        except (json.JSONDecodeError, ValidationError) as e:
            logging.getLogger("Config").error("Error loading settings: %s", e)
            return cls()  # Return defaults

    def save_to_file(self, path: Path):
        """Saves settings to JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(path, "w", encoding="utf-8") as f:
                _ = f.write(self.model_dump_json(indent=2))
        except OSError as e:
            logging.getLogger("Config").error("Error saving settings: %s", e)


settings = Settings.load_from_file(SETTINGS_FILE_PATH)
