"""
Utils module - Logging, paths, and settings.

Contents:
- message.py: Log class for application logging
- paths.py: Platform-specific path utilities
- settings.py: JSON-backed settings
"""
from bindery.utils.message import Log
from bindery.utils.paths import (
    get_user_data_dir,
    get_user_config_dir,
    get_logs_dir,
    get_settings_path,
)
from bindery.utils.settings import Settings, DEFAULT_SETTINGS

__all__ = [
    'Log',
    'get_user_data_dir',
    'get_user_config_dir',
    'get_logs_dir',
    'get_settings_path',
    'Settings',
    'DEFAULT_SETTINGS',
]
