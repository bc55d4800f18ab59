"""
Settings management for bindery

Persistent settings that shape the exposed module: its name, which feature
modules are loaded and how entry-name collisions between feature modules
are handled.

Lookup order for the settings file:
1. explicit path argument
2. BINDERY_SETTINGS environment variable
3. settings.json in the platform user config directory
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

from bindery.utils.message import Log

SETTINGS_ENV_VAR = "BINDERY_SETTINGS"

# Default settings
DEFAULT_SETTINGS = {
    # Name of the module object handed to scripting consumers
    "module_name": "bindery_api",

    # "last_write_wins" or "error"
    "conflict_policy": "last_write_wins",

    # Feature module names (see bindery.features.FEATURE_MODULES) to skip
    "disabled_features": [],

    "log_level": "INFO",
}


def resolve_settings_path(path: Optional[str] = None) -> Path:
    """Return the settings file path per the lookup order above."""
    if path:
        return Path(path)
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)
    from bindery.utils.paths import get_settings_path
    return get_settings_path()


class Settings:
    """Application settings manager"""

    def __init__(self, path: Optional[str] = None):
        self.path = resolve_settings_path(path)
        self.settings = copy.deepcopy(DEFAULT_SETTINGS)
        self.load_settings()

    @classmethod
    def defaults(cls) -> "Settings":
        """Settings with default values only, no file involved."""
        instance = cls.__new__(cls)
        instance.path = None
        instance.settings = copy.deepcopy(DEFAULT_SETTINGS)
        return instance

    def load_settings(self):
        """Load settings from file, falling back to defaults"""
        if not self.path.exists():
            Log.debug(f"Settings: No settings file at {self.path}, using defaults")
            return
        try:
            with open(self.path, 'r', encoding='utf-8') as file:
                saved_settings = json.load(file)
        except (OSError, json.JSONDecodeError) as e:
            Log.error(f"Settings: Failed to load {self.path}: {e}")
            self.settings = copy.deepcopy(DEFAULT_SETTINGS)
            return

        if not isinstance(saved_settings, dict):
            Log.error(f"Settings: Expected a JSON object in {self.path}, using defaults")
            return

        unknown = set(saved_settings) - set(DEFAULT_SETTINGS)
        if unknown:
            Log.warning(f"Settings: Ignoring unknown keys: {sorted(unknown)}")
        self.settings.update({k: v for k, v in saved_settings.items() if k in DEFAULT_SETTINGS})
        Log.info(f"Settings: Loaded {self.path}")

    def save_settings(self):
        """Save settings to file"""
        if self.path is None:
            raise ValueError("Settings created from defaults have no file to save to")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as file:
            json.dump(self.settings, file, indent=4)
        Log.info(f"Settings: Saved {self.path}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value"""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any):
        """Set a setting value (not persisted until save_settings)"""
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        self.settings[key] = value

    @property
    def module_name(self) -> str:
        return self.settings["module_name"]

    @property
    def conflict_policy(self) -> str:
        return self.settings["conflict_policy"]

    @property
    def disabled_features(self) -> list:
        return list(self.settings["disabled_features"] or [])
