"""Persistent user preferences.

Preferences are stored as a JSON object in an OS-appropriate config
location and survive application restarts. Edit history is never stored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import FormatterConstants

logger = logging.getLogger(__name__)


class SettingsKeys:
    """Constants for preference keys."""

    EXPORT_DIRECTORY = "export_directory"
    HISTORY_LIMIT = "history_limit"


DEFAULTS: Dict[str, Any] = {
    SettingsKeys.EXPORT_DIRECTORY: None,
    SettingsKeys.HISTORY_LIMIT: FormatterConstants.DEFAULT_HISTORY_LIMIT,
}


class SettingsPersistence:
    """Loads and saves the preferences file."""

    def __init__(self):
        self._config_dir = Path(platformdirs.user_config_dir("discansi", "discansi"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    def _ensure_config_dir(self) -> None:
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def _load_all(self) -> Dict[str, Any]:
        """Read the preferences file, returning {} when missing or unreadable."""
        if self._settings_cache is not None:
            return self._settings_cache

        if not self._settings_file.exists():
            self._settings_cache = {}
            return self._settings_cache

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return self._settings_cache

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            data = {}
        self._settings_cache = data
        return self._settings_cache

    def load_settings(self) -> Dict[str, Any]:
        """Return stored preferences merged over the defaults.

        Values failing validation are replaced by their default.
        """
        settings = dict(DEFAULTS)
        for key, value in self._load_all().items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid value for setting {key}: {value!r}")
        return settings

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save preferences atomically.

        Args:
            settings: Preferences to store; invalid entries are rejected.

        Returns:
            True if save was successful, False otherwise.
        """
        for key, value in settings.items():
            if not self.validate_setting(key, value):
                logger.warning(f"Refusing to save invalid value for setting {key}: {value!r}")
                return False

        self._ensure_config_dir()

        # Use atomic write pattern (temp file + rename)
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def validate_setting(self, key: str, value: Any) -> bool:
        if value is None:
            return True  # None means "not set"

        if key == SettingsKeys.EXPORT_DIRECTORY:
            return isinstance(value, str)

        if key == SettingsKeys.HISTORY_LIMIT:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            return 1 <= value <= 100_000

        # Unknown settings are considered valid (forward compatibility)
        return True

    def clear_cache(self) -> None:
        self._settings_cache = None


# Global instance
_persistence: Optional[SettingsPersistence] = None


def get_persistence() -> SettingsPersistence:
    """Get the global settings persistence instance."""
    global _persistence
    if _persistence is None:
        _persistence = SettingsPersistence()
    return _persistence
