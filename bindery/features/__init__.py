"""
Feature modules.

Each feature module binds one group of host capabilities and contributes
it to the exposed module object through a single `register(exports)`
function decorated with `register_api`. Feature modules never import each
other.

FEATURE_MODULES is the declared load order used by the startup routine
(bindery.application.bootstrap). Adding a feature means adding its module
here.
"""

FEATURES_PACKAGE = __name__

FEATURE_MODULES = (
    "info",
    "system",
    "clock",
    "hashing",
)

__all__ = ['FEATURES_PACKAGE', 'FEATURE_MODULES']
