"""
Shared test setup.

Feature modules register with the process-wide registry when first
imported, and the registry refuses registrations once sealed. Import them
all up front so tests that seal the process-wide registry cannot break
later imports.
"""
import importlib

from bindery.features import FEATURES_PACKAGE, FEATURE_MODULES

for _name in FEATURE_MODULES:
    importlib.import_module(f"{FEATURES_PACKAGE}.{_name}")
