"""
units.py

Responsibility: convert raw user-facing sizes into gigabytes.

All arithmetic is integer-only so results are exact for any input size.
"""

from __future__ import annotations

BITS_PER_BYTE = 8
MEGABYTES_PER_GIGABYTE = 1024


def ceil_div(numerator: int, denominator: int) -> int:
    """
    Integer ceiling division: the smallest int >= numerator / denominator.
    """
    if denominator <= 0:
        raise ValueError(f"Denominator must be positive, got {denominator}")
    return -(-numerator // denominator)


def gigabits_to_gb(gigabits: int) -> int:
    return ceil_div(gigabits, BITS_PER_BYTE)


def bits_to_gb(bits: int) -> int:
    """
    GPU memory is entered in "bits" where 8192 (1024 * 8) of them make one GB.
    """
    return ceil_div(bits, MEGABYTES_PER_GIGABYTE * BITS_PER_BYTE)
