"""
Where bindery keeps its own files.

Only two things live on disk: the optional settings.json read at startup
and the timestamped log files written when BINDERY_LOG_TO_FILE is set.
"""
import os
import sys
from pathlib import Path


APP_NAME = "bindery"


def _platform_base() -> Path:
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    if sys.platform == "win32":
        return Path(os.getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
    return Path(os.getenv("XDG_DATA_HOME", Path.home() / ".local" / "share"))


def get_user_data_dir() -> Path:
    """Per-user directory holding the logs/ folder."""
    user_data_dir = _platform_base() / APP_NAME
    user_data_dir.mkdir(parents=True, exist_ok=True)
    return user_data_dir


def get_user_config_dir() -> Path:
    """Per-user directory holding settings.json; ~/.config/bindery on Linux."""
    if sys.platform in ("darwin", "win32"):
        return get_user_data_dir()

    config_dir = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / APP_NAME
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_logs_dir() -> Path:
    """Target of the file handler set up by bindery.utils.message.init_logger."""
    logs_dir = get_user_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_settings_path() -> Path:
    """Default settings file, used when neither --settings nor BINDERY_SETTINGS is given."""
    return get_user_config_dir() / "settings.json"
