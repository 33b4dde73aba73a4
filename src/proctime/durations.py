"""Exact formatting for integer nanosecond durations."""

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

_UNITS: tuple[tuple[int, str, int], ...] = (
    (NANOS_PER_SECOND, "s", 9),
    (NANOS_PER_MILLI, "ms", 6),
    (NANOS_PER_MICRO, "µs", 3),
)


def format_duration(ns: int) -> str:
    """Render ``ns`` in the largest unit it fills, e.g. ``1.5s`` or ``12.345µs``.

    Uses integer division only, so no digits are lost or invented.
    """
    if ns < 0:
        raise ValueError(f"duration must be non-negative, got {ns}")
    for scale, suffix, digits in _UNITS:
        if ns >= scale:
            whole, frac = divmod(ns, scale)
            frac_text = f"{frac:0{digits}d}".rstrip("0")
            return f"{whole}.{frac_text}{suffix}" if frac_text else f"{whole}{suffix}"
    return f"{ns}ns"


def mean_duration(total_ns: int, count: int) -> int:
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    return total_ns // count
