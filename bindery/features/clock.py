"""Time bindings."""
import time

from bindery.registry import BadArgumentsError, register_api, set_entry


def now() -> float:
    """Current unix time in seconds."""
    return time.time()


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def sleep_ms(ms) -> None:
    """
    Block the calling thread for ms milliseconds.

    Raises:
        BadArgumentsError: ms is not a non-negative number
    """
    if isinstance(ms, bool) or not isinstance(ms, (int, float)):
        raise BadArgumentsError(f"sleep_ms: expected a number, got {type(ms).__name__}")
    if ms < 0:
        raise BadArgumentsError("sleep_ms: duration must be non-negative")
    time.sleep(ms / 1000.0)


@register_api(name="clock")
def register(exports):
    set_entry(exports, "now", now)
    set_entry(exports, "monotonic_ms", monotonic_ms)
    set_entry(exports, "sleep_ms", sleep_ms)
