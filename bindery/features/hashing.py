"""
Digest bindings over hashlib.

Exposes a one-shot `digest(data, algorithm)` function and an incremental
`Hasher` type. Text is hashed as UTF-8.
"""
import hashlib
from typing import Union

from bindery.registry import BadArgumentsError, register_api, require_args, set_entry, set_type

DEFAULT_ALGORITHM = "sha256"

# shake_* digests need an explicit length, which digest() does not take
SUPPORTED_ALGORITHMS = tuple(sorted(
    name for name in hashlib.algorithms_guaranteed if not name.startswith("shake_")
))


def _to_bytes(name: str, data) -> bytes:
    require_args(name, (data,), (bytes, bytearray, memoryview, str))
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _new(algorithm: str):
    if not isinstance(algorithm, str):
        raise BadArgumentsError(f"algorithm must be str, got {type(algorithm).__name__}")
    algorithm = algorithm.lower()
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    return hashlib.new(algorithm)


def digest(data: Union[bytes, str], algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Hex digest of data."""
    payload = _to_bytes("digest", data)
    h = _new(algorithm)
    h.update(payload)
    return h.hexdigest()


class Hasher:
    """Incremental hasher: Hasher("md5").update(b"a").update("b").hexdigest()"""

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM):
        self._hash = _new(algorithm)

    @property
    def algorithm(self) -> str:
        return self._hash.name

    def update(self, data: Union[bytes, str]) -> "Hasher":
        self._hash.update(_to_bytes("Hasher.update", data))
        return self

    def hexdigest(self) -> str:
        return self._hash.hexdigest()


@register_api(name="hashing")
def register(exports):
    set_entry(exports, "digest", digest)
    set_entry(exports, "algorithms", lambda: list(SUPPORTED_ALGORITHMS))
    set_type(exports, "Hasher", Hasher)
