"""
validation.py

Responsibility: parse prompt input into strictly positive numbers.

These are pure functions; the interactive shell in `cli.py` loops on
`InvalidNumberError` and re-prompts.

Only plain ASCII numerals are accepted. Python literal forms such as "1_000"
or non-ASCII digits are rejected before conversion.
"""

from __future__ import annotations

import math
import re


class InvalidNumberError(ValueError):
    pass


_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_positive_int(text: str) -> int:
    """
    Parse `text` as an integer > 0.

    Surrounding whitespace is ignored. Decimals such as "2.5" are rejected.
    """
    raw = text.strip()
    if not _INT_RE.fullmatch(raw):
        raise InvalidNumberError(f"Not an integer: {text!r}")
    try:
        value = int(raw)
    except ValueError as e:
        # digit-count limit on very long inputs
        raise InvalidNumberError(f"Not an integer: {text!r}") from e
    if value <= 0:
        raise InvalidNumberError(f"Not a positive integer: {text!r}")
    return value


def parse_positive_float(text: str) -> float:
    """
    Parse `text` as a finite decimal > 0.

    Accepts either "." or "," as the decimal separator ("2.5" or "2,5").
    """
    raw = text.strip()
    if raw.count(",") == 1 and "." not in raw:
        raw = raw.replace(",", ".")
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidNumberError(f"Not a number: {text!r}")
    value = float(raw)
    if not math.isfinite(value) or value <= 0:
        raise InvalidNumberError(f"Not a positive number: {text!r}")
    return value
