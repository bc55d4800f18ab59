"""
Application Bootstrap

Startup routine that builds the module object exposed to scripting
consumers. Feature modules are loaded in the declared order of
bindery.features.FEATURE_MODULES, then the registry applies every
registration callback to a fresh module object exactly once.
"""
import importlib
import sys
import threading
import types
from typing import List, Optional

from bindery.features import FEATURES_PACKAGE, FEATURE_MODULES
from bindery.registry import APIRegistry
from bindery.utils.message import Log
from bindery.utils.settings import Settings


_module: Optional[types.ModuleType] = None
_module_lock = threading.Lock()


def enabled_features(settings: Optional[Settings] = None) -> List[str]:
    """
    Feature module names to load, in declared order.

    Raises:
        ValueError: If settings disable a feature that does not exist
    """
    settings = settings or Settings.defaults()
    disabled = settings.disabled_features
    unknown = [name for name in disabled if name not in FEATURE_MODULES]
    if unknown:
        raise ValueError(f"Unknown feature module(s) in disabled_features: {unknown}")
    return [name for name in FEATURE_MODULES if name not in disabled]


def load_features(
    settings: Optional[Settings] = None,
    registry: Optional[APIRegistry] = None,
) -> List[types.ModuleType]:
    """
    Import every enabled feature module in declared order.

    Importing a feature module registers it with the process-wide registry.
    Disabled features are not imported here; create_module also leaves them
    out of aggregation in case they were imported elsewhere.
    When an owned registry is injected, each module's register function is
    added to it explicitly instead.

    Args:
        settings: Settings selecting the features (defaults if None)
        registry: Owned registry to populate; None means the process-wide one

    Returns:
        The imported feature modules
    """
    explicit = registry is not None and registry is not APIRegistry.get_instance()
    modules = []
    for name in enabled_features(settings):
        module = importlib.import_module(f"{FEATURES_PACKAGE}.{name}")
        if explicit:
            registry.add_registry_callback(module.register, name=name)
        modules.append(module)
        Log.debug(f"Bootstrap: Loaded feature '{name}'")
    return modules


def create_module(
    settings: Optional[Settings] = None,
    registry: Optional[APIRegistry] = None,
) -> types.ModuleType:
    """
    Build a populated module object.

    Each call runs one aggregation pass. Against the process-wide registry
    that should happen once per process; use get_module() for that.

    Args:
        settings: Module name, features and conflict policy (defaults if None)
        registry: Owned registry; None means the process-wide one

    Returns:
        The populated module object
    """
    settings = settings or Settings.defaults()
    if registry is None:
        registry = APIRegistry.get_instance()

    load_features(settings, registry)
    registry.conflict_policy = settings.conflict_policy

    module = types.ModuleType(settings.module_name, f"{settings.module_name}: host capabilities exposed by bindery")
    # Feature modules imported before startup are registered even when disabled
    registry.register_all_apis(module, exclude=settings.disabled_features)
    Log.info(f"Bootstrap: Module '{settings.module_name}' ready ({registry.count()} feature callback(s))")
    return module


def get_module(settings: Optional[Settings] = None) -> types.ModuleType:
    """
    The process-wide module object, built on first call.

    Later calls return the same object and ignore settings.
    """
    global _module
    with _module_lock:
        if _module is None:
            _module = create_module(settings)
        return _module


def install_module(settings: Optional[Settings] = None) -> types.ModuleType:
    """
    Build (once) and insert the module into sys.modules so scripts can import it.
    """
    module = get_module(settings)
    sys.modules[module.__name__] = module
    Log.info(f"Bootstrap: Installed '{module.__name__}' into sys.modules")
    return module
