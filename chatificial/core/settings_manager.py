# chatificial/core/settings_manager.py

import json
import os
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

from platformdirs import user_config_dir

from chatificial.config import APP_NAME, APP_AUTHOR, DEFAULT_MAX_TOTAL_CHARS, SETTINGS_FILENAME
from chatificial.core import template_engine
from chatificial.utils.logger import logger

# Persisted key names
KEY_MAX_TOTAL_CHARS = "maxTotalChars"
KEY_FILE_TEMPLATE = "fileTemplate"

FIELD_MAX_TOTAL_CHARS = "max_total_chars"
FIELD_FILE_TEMPLATE = "file_template"


@dataclass
class Settings:
    max_total_chars: int = DEFAULT_MAX_TOTAL_CHARS
    file_template: str = template_engine.DEFAULT_TEMPLATE

    def normalized(self) -> "Settings":
        return Settings(
            max_total_chars=max(1, self.max_total_chars),
            file_template=template_engine.validate(self.file_template),
        )

    def copy(self, **changes: Any) -> "Settings":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {KEY_MAX_TOTAL_CHARS: self.max_total_chars, KEY_FILE_TEMPLATE: self.file_template}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        s = cls()
        max_chars = data.get(KEY_MAX_TOTAL_CHARS)
        if isinstance(max_chars, int) and not isinstance(max_chars, bool):
            s.max_total_chars = max_chars
        template = data.get(KEY_FILE_TEMPLATE)
        if isinstance(template, str):
            s.file_template = template
        return s


def default_settings_path() -> Path:
    return Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR)) / SETTINGS_FILENAME


class SettingsManager:
    """
    Holds the copy settings for one process. Nothing is global: construct one,
    call load() at startup and save() after changes.
    """

    def __init__(self, settings_path: str | os.PathLike | None = None):
        self.storage_path = Path(settings_path) if settings_path else default_settings_path()
        self._state = Settings()
        self.last_error: str | None = None

    def get(self) -> Settings:
        """Snapshot of the current settings."""
        return self._state.copy()

    def set(self, new_state: Settings) -> None:
        self._state = new_state.normalized()

    def reset(self, *fields: str) -> None:
        """Restore defaults for the named fields, or for all of them."""
        defaults = Settings()
        if not fields:
            self._state = defaults
            return
        changes = {}
        for name in fields:
            if name not in (FIELD_MAX_TOTAL_CHARS, FIELD_FILE_TEMPLATE):
                raise ValueError(f"Unknown setting: {name}")
            changes[name] = getattr(defaults, name)
        self._state = self._state.copy(**changes)

    def load(self) -> Settings:
        self.last_error = None
        path = self.storage_path
        if not path.exists():
            logger.info("No settings file found to load.")
            self._state = Settings()
            return self.get()
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object in {path}")
            self._state = Settings.from_dict(data).normalized()
            logger.info("Settings loaded from %s", path)
        except Exception as e:
            self.last_error = str(e)
            self._state = Settings()
            logger.error("Failed to load settings from %s: %s", path, e, exc_info=True)
        return self.get()

    def save(self) -> bool:
        self.last_error = None
        path = self.storage_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("w", encoding="utf-8", delete=False, dir=path.parent) as tmp:
                json.dump(self._state.to_dict(), tmp, indent=4)
                tmp_path = tmp.name
            os.replace(tmp_path, path)
            logger.info("Settings saved to %s", path)
            return True
        except Exception as e:
            self.last_error = str(e)
            logger.error("Failed to save settings: %s", e, exc_info=True)
            return False
