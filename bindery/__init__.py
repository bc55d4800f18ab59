"""
bindery - aggregates independent feature bindings into one module object.

Structure:
    registry/       - APIRegistry, RegistrationHandle, target helpers
    application/    - startup routine building the exposed module
    features/       - self-registering feature modules
    utils/          - logging, paths, settings

Usage:
    import bindery
    api = bindery.install_module()
    api.digest("hello")
"""
__version__ = "0.1.0"

from bindery.registry import (
    APIRegistry,
    Add,
    ConflictPolicy,
    RegistrationHandle,
    register_api,
    set_entry,
    set_type,
)
from bindery.application import create_module, get_module, install_module

__all__ = [
    '__version__',
    'APIRegistry',
    'Add',
    'ConflictPolicy',
    'RegistrationHandle',
    'register_api',
    'set_entry',
    'set_type',
    'create_module',
    'get_module',
    'install_module',
]
