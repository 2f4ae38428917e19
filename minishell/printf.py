"""A minimal printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

from typing import Any, Iterator, TextIO

_CONVERSIONS = "cspdiuxX%"
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _render(conv: str, args: Iterator[Any]) -> str:
    if conv == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None
    if conv == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return value
        return chr(int(value) & 0xFF)
    if conv == "s":
        return "(null)" if value is None else str(value)
    if conv in "di":
        return str(_as_int32(int(value)))
    if conv == "u":
        return str(int(value) & _UINT_MASK)
    if conv == "x":
        return format(int(value) & _UINT_MASK, "x")
    if conv == "X":
        return format(int(value) & _UINT_MASK, "X")
    return "0x" + format(int(value) & _ULONG_MASK, "x")


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char != "%":
            yield char
            pos += 1
            continue
        if pos + 1 < length and fmt[pos + 1] in _CONVERSIONS:
            yield _render(fmt[pos + 1], args)
            pos += 2
        else:
            # An unknown conversion drops the '%' and keeps what follows.
            pos += 1


def format_simple(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    return "".join(_pieces(fmt, iter(args)))


def write_simple(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``; return the characters written."""
    text = format_simple(fmt, *args)
    stream.write(text)
    return len(text)