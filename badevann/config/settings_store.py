"""JSON-backed user settings with defaults and per-key updates."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from badevann.config.schema import UserSettings

logger = logging.getLogger(__name__)


class SettingsCorrupt(Exception):
    """Raised when the settings file exists but cannot be used."""


class SettingsStore:
    """Loads, creates and updates the settings file.

    The in-memory copy returned by ``get()`` always reflects the last
    successful ``load()`` or ``update()``.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._settings = UserSettings()

    def get(self) -> UserSettings:
        return self._settings.model_copy()

    def load(self) -> UserSettings:
        """Read settings from disk, writing defaults if missing or corrupt."""
        logger.debug("Reading settings from %s", self.path)
        try:
            self._settings = self._read()
        except FileNotFoundError:
            logger.debug("No settings file found, creating one")
            self._settings = self._write_defaults()
        except SettingsCorrupt as e:
            logger.debug("Settings file unusable (%s), regenerating defaults", e)
            self._settings = self._write_defaults()
        return self.get()

    def update(self, key: str, value: Any) -> bool:
        """Set one setting by its JSON key and persist the full object.

        Returns False for unknown keys, invalid values or write failures.
        """
        current = self._settings.to_json_dict()
        if key not in current:
            logger.error("Invalid setting key: %s", key)
            return False

        current[key] = value
        try:
            updated = UserSettings.model_validate(current)
        except ValidationError as e:
            logger.error("Invalid value for %s: %r (%s)", key, value, e)
            return False

        try:
            self._save(updated)
        except OSError as e:
            logger.error("Failed to update setting: %s", e)
            return False

        self._settings = updated
        logger.debug("Updated setting: %s = %r", key, value)
        return True

    def _read(self) -> UserSettings:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise SettingsCorrupt(f"unreadable: {e}") from e
        logger.debug("Settings file size: %d bytes", len(text.encode("utf-8")))
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise SettingsCorrupt(f"invalid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise SettingsCorrupt("settings file is not a JSON object")
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as e:
            raise SettingsCorrupt(str(e)) from e

    def _write_defaults(self) -> UserSettings:
        defaults = UserSettings()
        try:
            self._save(defaults)
        except OSError as e:
            logger.error("Failed to create settings file: %s", e)
        return defaults

    def _save(self, settings: UserSettings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(settings.to_json_dict(), f, indent=2, ensure_ascii=False)
