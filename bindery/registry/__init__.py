"""
Registry module.

Deferred registration of feature module contributions:
- APIRegistry: process-wide ordered collection of registration callbacks
- RegistrationHandle / register_api: register a callback at import time
- exports helpers: populate the target module object
"""
from .api_registry import (
    APIRegistry,
    Add,
    ConflictPolicy,
    RegistrationHandle,
    RegistrationRecord,
    RegistryFactory,
    RegistryPhase,
    register_api,
)
from .errors import (
    BadArgumentsError,
    ExportConflictError,
    RegistryError,
    RegistrySealedError,
)
from .exports import exported_entries, require_args, set_entry, set_type

__all__ = [
    'APIRegistry',
    'Add',
    'ConflictPolicy',
    'RegistrationHandle',
    'RegistrationRecord',
    'RegistryFactory',
    'RegistryPhase',
    'register_api',
    'BadArgumentsError',
    'ExportConflictError',
    'RegistryError',
    'RegistrySealedError',
    'exported_entries',
    'require_args',
    'set_entry',
    'set_type',
]
