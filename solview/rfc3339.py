"""Formatting of Unix timestamps as "YYYY-MM-DD hh:mm:ss" (UTC)."""

from __future__ import annotations

__all__ = ["EPOCH", "TimestampError", "rfc3339_format"]

# Seconds from 0000-12-31 00:00:00 (rata die 0) to 1970-01-01 00:00:00.
EPOCH = 62135683200

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_FORMATTED_LENGTH = len("YYYY-MM-DD hh:mm:ss")
_DAY_OFFSET = (0, 306, 337, 0, 31, 61, 92, 122, 153, 184, 214, 245, 275)


class TimestampError(ValueError):
    """Raised when a timestamp cannot be formatted."""


def _rdn_to_ymd(rdn: int) -> tuple[int, int, int]:
    """Convert a rata die day number to (year, month, day), 32-bit arithmetic."""
    z = (rdn + 306) & _U32
    h = (100 * z - 25) & _U32
    a = h // 3652425
    b = a - (a >> 2)
    year = ((100 * b + h) & _U32) // 36525
    day = (b + z - (((1461 * year) & _U32) >> 2)) & _U32
    month = ((535 * day + 48950) & _U32) >> 14
    if month > 12:
        year += 1
        month -= 12

    if year > 9999 or month > 12 or day > 31 + _DAY_OFFSET[month]:
        raise TimestampError("timestamp is outside the years 0000-9999")

    return year, month, day - _DAY_OFFSET[month]


def rfc3339_format(seconds: int, length: int) -> str:
    """Format ``seconds`` since the Unix epoch for an output of ``length`` bytes.

    ``length`` counts the terminating byte, so it must exceed 19.
    """
    if _FORMATTED_LENGTH >= length:
        raise TimestampError(
            f"output length {length} too small for a {_FORMATTED_LENGTH}-character timestamp"
        )

    sec = (seconds + EPOCH) & _U64
    rdn = (sec // 86400) & _U32
    year, month, day = _rdn_to_ymd(rdn)

    minutes, second = divmod(sec % 86400, 60)
    hour, minute = divmod(minutes, 60)
    return f"{year:04d}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}"