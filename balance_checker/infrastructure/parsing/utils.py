"""Shared parsing utilities for balance file ingestion."""
from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from io import BytesIO
from pathlib import Path

LINE_BREAK = re.compile(r"\r?\n")
INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)
DECIMAL_PREFIX = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

# Largest decimal exponent a double can carry; bigger literals are not amounts.
MAX_ADJUSTED_EXPONENT = 308
# Integers with more digits than this are clamped; no row count or group code gets near it.
MAX_INT_DIGITS = 18
INT_CLAMP = 10**MAX_INT_DIGITS
CENTS = Decimal("0.01")


def ensure_text(source: str | bytes | BytesIO | Path, encoding: str = "utf-8-sig") -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, BytesIO):
        source = source.getvalue()
    elif isinstance(source, Path):
        source = source.read_bytes()
    if isinstance(source, bytes):
        return source.decode(encoding, errors="replace")
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def split_lines(content: str) -> list[str]:
    """Split on LF or CRLF, keeping the empty tail a final terminator leaves."""
    return LINE_BREAK.split(content)


def parse_int(value: str) -> int | None:
    """Parse the leading integer of ``value``; anything after it is ignored.

    >>> parse_int(" 12abc")
    12
    >>> parse_int("abc") is None
    True
    """
    match = INT_PREFIX.match(value.lstrip())
    if match is None:
        return None
    text = match.group(0)
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    if len(digits) > MAX_INT_DIGITS:
        return sign * INT_CLAMP
    return sign * int(digits)


def parse_decimal(value: str) -> Decimal | None:
    match = DECIMAL_PREFIX.match(value.lstrip())
    if match is None:
        return None
    try:
        result = Decimal(match.group(0))
    except InvalidOperation:
        return None
    if result and result.adjusted() > MAX_ADJUSTED_EXPONENT:
        return None
    return result


def format_amount(value: Decimal) -> str:
    """Two decimals, half-up, and never ``-0.00``."""
    with localcontext() as ctx:
        ctx.prec = MAX_ADJUSTED_EXPONENT + 10
        rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
    return f"{rounded:f}"
