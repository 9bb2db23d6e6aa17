"""Size and relative-time string parsers.

Both parsers treat the literal ``-1`` as the "infinite" sentinel and
return it unchanged.  The sentinel is part of the admin API contract,
so it is never folded into a real quantity.
"""

from __future__ import annotations

import re

from pulsarctl.errors import InvalidFormatError

INFINITE = -1

SIZE_UNITS: dict[str, int] = {
    "": 1,
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
    "t": 1024**4,
}

TIME_UNITS: dict[str, int] = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
}

_QUANTITY_RE = re.compile(r"^(?P<value>[+-]?\d+)(?P<unit>[a-zA-Z]?)$")


def parse_size(text: str) -> int:
    """Parse a size string such as ``16M`` or ``1G`` into bytes.

    Accepts an integer with an optional K/M/G/T suffix (power-of-1024,
    case-insensitive) or ``-1`` for infinite.

    Examples:
        >>> parse_size("1G")
        1073741824
        >>> parse_size("512")
        512
        >>> parse_size("-1")
        -1
    """
    raw = text.strip()
    match = _QUANTITY_RE.match(raw)
    if match is None:
        raise InvalidFormatError(f"invalid size '{text}'")

    value = int(match.group("value"))
    unit = match.group("unit").lower()
    if unit not in SIZE_UNITS:
        raise InvalidFormatError(f"invalid size unit '{match.group('unit')}' in '{text}'")

    if value == INFINITE and not unit:
        return INFINITE
    if value < 0:
        raise InvalidFormatError(f"invalid size '{text}': only -1 may be negative")
    return value * SIZE_UNITS[unit]


def parse_relative_time(text: str) -> int:
    """Parse a relative time such as ``100m`` or ``2d`` into seconds.

    Units are s, m, h, d and w.  ``-1`` means infinite and a bare ``0``
    means disabled; any other value must carry a unit.

    Examples:
        >>> parse_relative_time("100m")
        6000
        >>> parse_relative_time("2d")
        172800
    """
    raw = text.strip()
    match = _QUANTITY_RE.match(raw)
    if match is None:
        raise InvalidFormatError(f"invalid time '{text}'")

    value = int(match.group("value"))
    unit = match.group("unit").lower()

    if not unit:
        if value in (INFINITE, 0):
            return value
        raise InvalidFormatError(f"missing time unit in '{text}' (expected one of s, m, h, d, w)")
    if unit not in TIME_UNITS:
        raise InvalidFormatError(f"invalid time unit '{match.group('unit')}'")
    if value < 0:
        raise InvalidFormatError(f"invalid time '{text}': only -1 may be negative")
    return value * TIME_UNITS[unit]
