"""
Application layer: startup routine that assembles the exposed module.
"""
from .bootstrap import (
    create_module,
    enabled_features,
    get_module,
    install_module,
    load_features,
)

__all__ = [
    'create_module',
    'enabled_features',
    'get_module',
    'install_module',
    'load_features',
]
