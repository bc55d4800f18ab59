"""
Helpers for populating the target module object.

Feature callbacks receive either a module-like object (entries are
attributes) or a mutable mapping (entries are keys). These helpers hide
the difference so a callback works against both.
"""
from collections.abc import MutableMapping
from typing import Any, Dict, Sequence, Tuple, Type, Union

from bindery.registry.errors import BadArgumentsError

# Attributes every module object carries before any feature touches it
MODULE_ATTRIBUTES = frozenset({
    "__name__",
    "__doc__",
    "__package__",
    "__loader__",
    "__spec__",
})


def set_entry(target: Any, name: str, value: Any) -> None:
    """Add a named entry (function, constant, nested object) to the target."""
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def set_type(target: Any, name: str, type_: type) -> None:
    """Add a nested type (class) entry to the target."""
    if not isinstance(type_, type):
        raise TypeError(f"set_type expects a class for '{name}', got {type(type_).__name__}")
    set_entry(target, name, type_)


def exported_entries(target: Any) -> Dict[str, Any]:
    """Snapshot of the entries currently exposed by the target."""
    if isinstance(target, MutableMapping):
        return {k: v for k, v in target.items() if isinstance(k, str)}
    return {k: v for k, v in vars(target).items() if k not in MODULE_ATTRIBUTES}


def _type_name(expected: Union[type, Tuple[type, ...]]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


def require_args(
    name: str,
    args: Sequence[Any],
    *expected: Union[Type, Tuple[Type, ...]],
) -> None:
    """
    Check a binding's positional arguments.

    Raises:
        BadArgumentsError: wrong argument count or an argument of the wrong type
    """
    if len(args) != len(expected):
        raise BadArgumentsError(
            f"{name}: expected {len(expected)} argument(s), got {len(args)}"
        )
    for index, (value, expected_type) in enumerate(zip(args, expected)):
        if not isinstance(value, expected_type):
            raise BadArgumentsError(
                f"{name}: argument {index} must be {_type_name(expected_type)}, "
                f"got {type(value).__name__}"
            )
