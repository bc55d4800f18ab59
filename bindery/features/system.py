"""Host platform queries."""
import os
import platform
import sys

from bindery.registry import register_api, set_entry


def platform_name() -> str:
    """Short platform identifier: "linux", "darwin", "win32", ..."""
    return sys.platform


def cpu_count() -> int:
    # os.cpu_count() may return None on exotic platforms
    return os.cpu_count() or 1


def python_version() -> str:
    return platform.python_version()


@register_api(name="system")
def register(exports):
    set_entry(exports, "PLATFORM", platform_name())
    set_entry(exports, "platform_name", platform_name)
    set_entry(exports, "cpu_count", cpu_count)
    set_entry(exports, "python_version", python_version)
