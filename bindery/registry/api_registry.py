"""
API Registry

Collects the registration callbacks of independent feature modules and
applies them, in registration order, to the module object handed to the
scripting environment.

Usage:
    # In a feature module (runs when the module is imported)
    @register_api
    def register(exports):
        set_entry(exports, "cpu_count", os.cpu_count)

    # Or construct a handle directly
    RegistrationHandle(register_clock, name="clock")

    # At startup, once every feature module is imported
    module = types.ModuleType("bindery_api")
    APIRegistry.get_instance().register_all_apis(module)

Lifecycle:
- ACCEPTING: callbacks may be added, aggregation has not run
- SEALED: aggregation has run at least once; registering raises
  RegistrySealedError, aggregating again re-applies every callback
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union
import threading

from bindery.registry.errors import ExportConflictError, RegistrySealedError
from bindery.registry.exports import exported_entries
from bindery.utils.message import Log


# =============================================================================
# Types
# =============================================================================

RegistryFactory = Callable[[Any], None]


class RegistryPhase(str, Enum):
    ACCEPTING = "accepting"
    SEALED = "sealed"


class ConflictPolicy(str, Enum):
    """What happens when a callback rebinds an entry another callback added."""
    LAST_WRITE_WINS = "last_write_wins"
    ERROR = "error"


@dataclass(frozen=True)
class RegistrationRecord:
    """
    Bookkeeping for one registered callback.

    Attributes:
        name: Display name (defaults to the callback's qualified name)
        callback: The registration callback
        source: Module the callback was defined in
        order: 0-based insertion index
    """
    name: str
    callback: RegistryFactory
    source: Optional[str]
    order: int


def _callback_name(callback: RegistryFactory) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


# =============================================================================
# API Registry
# =============================================================================

class APIRegistry:
    """
    Ordered, append-only collection of registration callbacks.

    One process-wide instance is reachable through get_instance(); owned
    instances can be constructed directly and injected where isolation is
    needed (tests, embedders with more than one module object).

    Registration and aggregation are serialized by a re-entrant lock, so
    no callback is ever invoked concurrently with another or with a
    registration.
    """

    _instance: Optional["APIRegistry"] = None
    _instance_lock = threading.Lock()

    def __init__(self, name: str = "bindery", conflict_policy: Union[ConflictPolicy, str] = ConflictPolicy.LAST_WRITE_WINS):
        self._name = name
        self._records: List[RegistrationRecord] = []
        self._phase = RegistryPhase.ACCEPTING
        self._aggregation_count = 0
        self._conflict_policy = ConflictPolicy(conflict_policy)
        self._lock = threading.RLock()
        Log.debug(f"APIRegistry: Created '{name}' registry")

    @classmethod
    def get_instance(cls) -> "APIRegistry":
        """
        Get the process-wide registry, creating it on first call.

        Safe to call at import time of any feature module.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def name(self) -> str:
        return self._name

    @property
    def phase(self) -> RegistryPhase:
        return self._phase

    @property
    def is_sealed(self) -> bool:
        return self._phase is RegistryPhase.SEALED

    @property
    def aggregation_count(self) -> int:
        """Number of register_all_apis passes that have started."""
        return self._aggregation_count

    @property
    def conflict_policy(self) -> ConflictPolicy:
        return self._conflict_policy

    @conflict_policy.setter
    def conflict_policy(self, policy: Union[ConflictPolicy, str]) -> None:
        self._conflict_policy = ConflictPolicy(policy)

    def add_registry_callback(
        self,
        callback: RegistryFactory,
        name: Optional[str] = None,
    ) -> RegistrationRecord:
        """
        Append a callback to the registry.

        Registering the same callback twice appends it twice; it will run
        twice on aggregation.

        Args:
            callback: Callable taking the target module object
            name: Optional display name used in logs and conflict reports

        Returns:
            The RegistrationRecord for this registration

        Raises:
            TypeError: If callback is not callable
            RegistrySealedError: If aggregation has already run
        """
        if not callable(callback):
            raise TypeError(f"Registration callback must be callable, got {type(callback).__name__}")
        name = name or _callback_name(callback)

        with self._lock:
            if self.is_sealed:
                raise RegistrySealedError(self._name, name)
            record = RegistrationRecord(
                name=name,
                callback=callback,
                source=getattr(callback, "__module__", None),
                order=len(self._records),
            )
            self._records.append(record)
            Log.debug(f"APIRegistry '{self._name}': Registered '{name}' (#{record.order})")
            return record

    def register_all_apis(self, target: Any, exclude: Iterable[str] = ()) -> Any:
        """
        Invoke every registered callback with target, in registration order.

        Seals the registry first. A callback that raises stops the pass:
        the exception propagates and later callbacks are not invoked.

        Args:
            target: Module object (or mutable mapping) to populate
            exclude: Record names to leave out of this pass (disabled features)

        Returns:
            The same target

        Raises:
            ExportConflictError: Under ConflictPolicy.ERROR, when a callback
                rebinds an entry contributed by a different callback
        """
        with self._lock:
            if self.is_sealed:
                Log.warning(
                    f"APIRegistry '{self._name}': Aggregating again "
                    f"(pass {self._aggregation_count + 1}); every callback is re-applied"
                )
            self._phase = RegistryPhase.SEALED
            self._aggregation_count += 1

            excluded = set(exclude)
            applied = 0
            owners: Dict[str, RegistrationRecord] = {}
            before = exported_entries(target)
            for record in self._records:
                if record.name in excluded:
                    Log.debug(f"APIRegistry '{self._name}': Skipping excluded '{record.name}'")
                    continue
                try:
                    record.callback(target)
                except Exception:
                    Log.error(
                        f"APIRegistry '{self._name}': Callback '{record.name}' failed; "
                        f"{len(self._records) - record.order - 1} later callback(s) skipped"
                    )
                    raise
                after = exported_entries(target)
                self._track_owners(before, after, owners, record)
                before = after
                applied += 1

            Log.info(
                f"APIRegistry '{self._name}': Applied {applied} callback(s), "
                f"{len(owners)} entr{'y' if len(owners) == 1 else 'ies'} contributed"
            )
            return target

    def _track_owners(
        self,
        before: Dict[str, Any],
        after: Dict[str, Any],
        owners: Dict[str, RegistrationRecord],
        record: RegistrationRecord,
    ) -> None:
        for key, value in after.items():
            if key in before and before[key] is value:
                continue
            owner = owners.get(key)
            if owner is not None and owner.callback is not record.callback:
                if self._conflict_policy is ConflictPolicy.ERROR:
                    raise ExportConflictError(key, owner.name, record.name)
                Log.warning(
                    f"APIRegistry '{self._name}': Entry '{key}' from '{owner.name}' "
                    f"overwritten by '{record.name}'"
                )
            owners[key] = record

    def count(self) -> int:
        """Number of registered callbacks (duplicates included)."""
        with self._lock:
            return len(self._records)

    def list_records(self) -> List[RegistrationRecord]:
        """Registered callbacks in registration order."""
        with self._lock:
            return list(self._records)

    def __repr__(self) -> str:
        return f"APIRegistry(name={self._name!r}, phase={self._phase.value}, callbacks={len(self._records)})"


# =============================================================================
# Registration Handle
# =============================================================================

class RegistrationHandle:
    """
    Registers one callback as a side effect of construction.

    RegistrationHandle(cb) is equivalent to
    APIRegistry.get_instance().add_registry_callback(cb). The handle holds
    no state and has no other operations.
    """
    __slots__ = ()

    def __init__(
        self,
        callback: RegistryFactory,
        name: Optional[str] = None,
        registry: Optional[APIRegistry] = None,
    ):
        if registry is None:
            registry = APIRegistry.get_instance()
        registry.add_registry_callback(callback, name=name)


Add = RegistrationHandle


def register_api(
    func: Optional[RegistryFactory] = None,
    *,
    name: Optional[str] = None,
    registry: Optional[APIRegistry] = None,
):
    """
    Decorator registering a feature module's registration function.

    The function is returned unchanged so it stays directly callable.

    Example:
        @register_api
        def register(exports):
            ...

        @register_api(name="clock")
        def register(exports):
            ...
    """
    def decorator(callback: RegistryFactory) -> RegistryFactory:
        RegistrationHandle(callback, name=name, registry=registry)
        return callback

    if func is not None:
        return decorator(func)
    return decorator
