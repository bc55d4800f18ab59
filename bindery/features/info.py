"""Package metadata exposed to scripts."""
from bindery import __version__
from bindery.features import FEATURE_MODULES
from bindery.registry import register_api, set_entry


def _version_info():
    parts = []
    for part in __version__.split("."):
        parts.append(int(part) if part.isdigit() else part)
    return tuple(parts)


@register_api(name="info")
def register(exports):
    set_entry(exports, "__version__", __version__)
    set_entry(exports, "VERSION_INFO", _version_info())
    set_entry(exports, "FEATURES", FEATURE_MODULES)
