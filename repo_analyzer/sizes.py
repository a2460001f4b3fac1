"""Byte-count conversions used in analysis reports."""

from __future__ import annotations

import math

_UNIT = 1024
_BYTES_PER_MB = _UNIT * _UNIT
_UNIT_PREFIXES = "KMGTPE"


def bytes_to_mb(byte_count: int) -> float:
    """Return ``byte_count`` expressed in megabytes, unrounded."""
    _require_non_negative(byte_count)
    return byte_count / _BYTES_PER_MB


def round_two_decimals(value: float) -> float:
    """Round to two decimal places, halves away from zero."""
    scaled = math.floor(abs(value) * 100 + 0.5)
    return math.copysign(scaled / 100, value)


def bytes_to_human(byte_count: int) -> str:
    """Format a byte count with a power-of-1024 unit, e.g. ``"1.50 KB"``.

    Counts below 1024 are rendered as whole bytes (``"512 B"``). Larger
    counts are scaled until the quotient drops below 1024 and printed with
    two decimals. Exabytes is the largest unit used.
    """
    _require_non_negative(byte_count)
    if byte_count < _UNIT:
        return f"{byte_count} B"

    divisor = _UNIT
    exponent = 0
    remaining = byte_count // _UNIT
    while remaining >= _UNIT and exponent < len(_UNIT_PREFIXES) - 1:
        divisor *= _UNIT
        exponent += 1
        remaining //= _UNIT
    return f"{byte_count / divisor:.2f} {_UNIT_PREFIXES[exponent]}B"


def _require_non_negative(byte_count: int) -> None:
    if byte_count < 0:
        raise ValueError(f"byte count must be non-negative, got {byte_count}")


__all__ = ["bytes_to_human", "bytes_to_mb", "round_two_decimals"]
