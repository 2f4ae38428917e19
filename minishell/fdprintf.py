"""A printf with flags, width and precision that writes to a file descriptor.

Supported conversions are ``%c %s %p %d %i %u %x %X`` and ``%%``; the
flags are ``-``, ``0``, ``#``, space, ``+``, a field width and a
``.precision``. Any other conversion character is printed as itself,
padded like ``%c``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional

from minishell.text import is_digit

FOPEN_MAX = 16

_FLAG_CHARS = "+-# ."
_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


@dataclass
class FormatSpec:
    """The flags of one conversion, as read from the format string."""

    minus: bool = False
    zero: bool = False
    alter: bool = False
    space: bool = False
    sign: str = ""
    width: int = 0
    precision: Optional[int] = None
    conversion: str = ""


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and is_digit(fmt[pos]):
        pos += 1
    digits = fmt[start:pos]
    return (int(digits) if digits else 0), pos


def parse_spec(fmt: str, pos: int) -> tuple[FormatSpec, int]:
    """Read the flags starting at ``pos`` (just after a ``%``).

    Returns the spec, with its conversion character, and the position just
    past that character. At the end of ``fmt`` the conversion is empty.
    """
    spec = FormatSpec()
    length = len(fmt)
    while pos < length and (fmt[pos] in _FLAG_CHARS or is_digit(fmt[pos])):
        char = fmt[pos]
        if char == "-":
            spec.minus = True
        elif char == "0":
            spec.zero = True
        elif char == ".":
            spec.precision, pos = _read_number(fmt, pos + 1)
            continue
        elif char == "#":
            spec.alter = True
        elif char == " ":
            spec.space = True
        elif char == "+":
            spec.sign = "+"
        else:
            spec.width, pos = _read_number(fmt, pos)
            continue
        pos += 1
    if pos < length:
        spec.conversion = fmt[pos]
        pos += 1
    return spec, pos


def _padding(width: int, used: int, char: str) -> str:
    return char * max(width - used, 0)


def _render_char(char: str, spec: FormatSpec) -> str:
    parts = []
    if not spec.minus and not spec.zero:
        parts.append(_padding(spec.width, 1, " "))
    if spec.zero:
        parts.append(_padding(spec.width, 1, "0"))
    parts.append(char)
    if spec.minus:
        parts.append(_padding(spec.width, 1, " "))
    return "".join(parts)


def _render_body(body: str, spec: FormatSpec) -> str:
    conv = spec.conversion
    numeric = conv != "s"
    if spec.precision is not None:
        if numeric:
            body = _padding(spec.precision, len(body), "0") + body
        else:
            body = body[: spec.precision]
    width = spec.width
    if numeric and (spec.sign or spec.space):
        width -= 1
    parts = []
    if not spec.minus and not spec.zero:
        parts.append(_padding(width, len(body), " "))
    if numeric and spec.sign:
        parts.append(spec.sign)
    if numeric and spec.space:
        parts.append(" ")
    if conv == "p" or (spec.alter and conv == "x"):
        parts.append("0x")
    if spec.alter and conv == "X":
        parts.append("0X")
    if spec.zero:
        parts.append(_padding(width, len(body), "0"))
    parts.append(body)
    if spec.minus:
        parts.append(_padding(width, len(body), " "))
    return "".join(parts)


def _as_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _render(spec: FormatSpec, args: Iterator[Any]) -> str:
    conv = spec.conversion
    if not conv:
        return ""
    if conv not in "cspdiuxX":
        return _render_char(conv, spec)
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conv}") from None
    work = replace(spec)
    if conv == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c needs a single character")
            return _render_char(value, work)
        return _render_char(chr(int(value) & 0xFF), work)
    if conv == "s":
        return _render_body("(null)" if value is None else str(value), work)
    if conv == "p":
        work.space = False
        work.sign = ""
        work.width -= 2
        return _render_body(format(int(value) & _ULONG_MASK, "x"), work)
    if work.precision is not None:
        work.zero = False
    if conv in "di":
        number = _as_int32(int(value))
        if number < 0:
            work.sign = "-"
            work.space = False
            number = -number
        return _render_body(str(number), work)
    work.sign = ""
    work.space = False
    number = int(value) & _UINT_MASK
    if conv == "u":
        return _render_body(str(number), work)
    if number == 0:
        work.alter = False
    if work.alter:
        work.width -= 2
    return _render_body(format(number, conv), work)


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char != "%":
            yield char
            pos += 1
            continue
        spec, pos = parse_spec(fmt, pos + 1)
        yield _render(spec, args)


def format_flags(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    if fmt is None:
        raise TypeError("a format string is required")
    return "".join(_pieces(fmt, iter(args)))


def fd_printf(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to file descriptor ``fd``.

    Returns the number of bytes written. Raises ValueError for a descriptor
    outside ``0..FOPEN_MAX`` and lets OSError from the write propagate.
    """
    if fd < 0 or fd > FOPEN_MAX:
        raise ValueError(f"file descriptor out of range: {fd}")
    data = format_flags(fmt, *args).encode("utf-8", "surrogateescape")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)