"""Exceptions raised by the API registry and by feature bindings."""


class RegistryError(Exception):
    """Base exception for registry misuse."""
    pass


class RegistrySealedError(RegistryError):
    """Raised when a callback is registered after aggregation has run."""

    def __init__(self, registry_name: str, callback_name: str = ""):
        self.registry_name = registry_name
        self.callback_name = callback_name
        message = f"Registry '{registry_name}' is sealed; cannot register"
        if callback_name:
            message += f" '{callback_name}'"
        super().__init__(message)


class ExportConflictError(RegistryError):
    """Raised when two callbacks contribute the same entry name."""

    def __init__(self, name: str, first_owner: str, second_owner: str):
        self.name = name
        self.first_owner = first_owner
        self.second_owner = second_owner
        super().__init__(
            f"Entry '{name}' contributed by '{first_owner}' "
            f"was overwritten by '{second_owner}'"
        )


class BadArgumentsError(TypeError):
    """Raised by a binding called with the wrong number or types of arguments."""
    pass
