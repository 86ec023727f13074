"""Text rendering of amounts, strings, keys and times for a small display."""

from __future__ import annotations

from .parser import SizedString
from .rfc3339 import TimestampError, rfc3339_format

__all__ = [
    "BASE58_ALPHABET",
    "PrintError",
    "SAFE_DECIMALS",
    "encode_base58",
    "print_amount",
    "print_i64",
    "print_sized_string",
    "print_string",
    "print_summary",
    "print_timestamp",
    "print_token_amount",
    "print_u64",
]

SAFE_DECIMALS = 9
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_INT_MAX = 2**31 - 1
_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_BASE58_MAX_INPUT = 64


class PrintError(ValueError):
    """Raised when a value cannot be rendered into the given output size."""


def _check_out_length(out_length: int) -> None:
    if out_length > _INT_MAX:
        raise PrintError(f"output length {out_length} is too large")


def _check_u64(value: int) -> None:
    if not 0 <= value <= _U64_MAX:
        raise PrintError(f"{value} is not an unsigned 64-bit value")


def print_token_amount(amount: int, asset: str | None, decimals: int, out_length: int) -> str:
    """Render ``amount`` scaled down by ``decimals``, followed by ``asset``.

    ``out_length`` is the size of the output including its terminating byte.
    """
    _check_out_length(out_length)
    _check_u64(amount)
    if not 0 <= decimals <= 255:
        raise PrintError(f"invalid decimals {decimals}")

    # Digits are laid out with at least one before the point, plus the point.
    laid_out = max(len(str(amount)), decimals + 1) + 1
    if laid_out >= out_length:
        raise PrintError("output too small for amount")

    whole, fraction = divmod(amount, 10**decimals)
    text = str(whole)
    if decimals:
        fraction_text = f"{fraction:0{decimals}d}".rstrip("0")
        if fraction_text:
            text = f"{text}.{fraction_text}"

    if asset is not None:
        if len(text) + 1 + len(asset.encode()) + 1 > out_length:
            raise PrintError("output too small for asset name")
        text = f"{text} {asset}"
    return text


def print_amount(amount: int, out_length: int) -> str:
    """Render a native amount in SAFE."""
    return print_token_amount(amount, "SAFE", SAFE_DECIMALS, out_length)


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def print_sized_string(string: SizedString, out_length: int) -> tuple[str, bool]:
    """Fit ``string`` into ``out_length`` bytes; returns (text, truncated).

    Truncated text ends with "~".
    """
    if out_length < 1:
        raise PrintError("output length must be at least 1")
    raw = string.string
    if string.length < out_length:
        return _decode(raw), False
    keep = out_length - 1
    if keep == 0:
        return "", True
    prefix = raw[:keep - 1]
    if b"\0" in prefix:
        return _decode(prefix), True
    return _decode(prefix) + "~", True


def print_string(text: str, out_length: int) -> tuple[str, bool]:
    """Fit ``text`` into ``out_length`` bytes; returns (text, truncated).

    Truncated text ends with "~".
    """
    if out_length < 1:
        raise PrintError("output length must be at least 1")
    if len(text) < out_length:
        return text, False
    if out_length == 1:
        return "", True
    return text[:out_length - 2] + "~", True


def print_summary(text: str, out_length: int, left_length: int, right_length: int) -> str:
    """Shorten ``text`` to its head and tail joined by ".." when it does not fit."""
    if out_length <= left_length + right_length + 2:
        raise PrintError("output too small for summary")
    if len(text) + 1 > out_length:
        tail = text[len(text) - right_length:] if right_length else ""
        return f"{text[:left_length]}..{tail}"
    return print_string(text, out_length)[0]


def encode_base58(data, max_out_length: int | None = None) -> str:
    """Encode up to 64 bytes in base58; leading zero bytes become "1"."""
    raw = bytes(data)
    if len(raw) > _BASE58_MAX_INPUT:
        raise PrintError(f"cannot encode more than {_BASE58_MAX_INPUT} bytes")

    zero_count = len(raw) - len(raw.lstrip(b"\0"))
    number = int.from_bytes(raw, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(BASE58_ALPHABET[remainder])
    encoded = BASE58_ALPHABET[0] * zero_count + "".join(reversed(digits))

    if max_out_length is not None and max_out_length < len(encoded) + 1:
        raise PrintError("output too small for encoded value")
    return encoded


def print_u64(value: int, out_length: int) -> str:
    """Render an unsigned 64-bit value in decimal."""
    _check_out_length(out_length)
    _check_u64(value)
    if out_length < 2:
        if out_length < 1:
            raise PrintError("output length must be at least 1")
        return ""
    text = str(value)
    if len(text) >= out_length:
        raise PrintError("output too small for number")
    return text


def print_i64(value: int, out_length: int) -> str:
    """Render a signed 64-bit value in decimal."""
    if out_length < 1:
        raise PrintError("output length must be at least 1")
    if not _I64_MIN <= value <= _I64_MAX:
        raise PrintError(f"{value} is not a signed 64-bit value")
    if value < 0:
        return "-" + print_u64(-value, out_length - 1)
    return print_u64(value, out_length)


def print_timestamp(timestamp: int, out_length: int) -> str:
    """Render a Unix timestamp as "YYYY-MM-DD hh:mm:ss"."""
    try:
        return rfc3339_format(timestamp, out_length)
    except TimestampError as exc:
        raise PrintError(str(exc)) from exc