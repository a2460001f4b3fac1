"""Tests for repo_analyzer.sizes."""

from __future__ import annotations

import pytest

from repo_analyzer.sizes import bytes_to_human, bytes_to_mb, round_two_decimals


@pytest.mark.parametrize("byte_count", [0, 1, 500, 1023])
def test_bytes_to_human_keeps_small_counts_in_bytes(byte_count: int) -> None:
    assert bytes_to_human(byte_count) == f"{byte_count} B"


@pytest.mark.parametrize(
    ("byte_count", "expected"),
    [
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (1024**2, "1.00 MB"),
        (1024**3, "1.00 GB"),
        (1024**4, "1.00 TB"),
        (1024**5, "1.00 PB"),
        (1024**6, "1.00 EB"),
        (1024**2 - 1, "1024.00 KB"),
    ],
)
def test_bytes_to_human_scales_units(byte_count: int, expected: str) -> None:
    assert bytes_to_human(byte_count) == expected


def test_bytes_to_human_stops_at_exabytes() -> None:
    assert bytes_to_human(2048 * 1024**6) == "2048.00 EB"


def test_bytes_to_mb() -> None:
    assert bytes_to_mb(1024 * 1024) == 1.0
    assert bytes_to_mb(2 * 1024 * 1024) == 2.0
    assert bytes_to_mb(512 * 1024) == 0.5
    assert bytes_to_mb(0) == 0.0
    assert bytes_to_mb(1024) == 0.0009765625


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.0, 1.0),
        (1.5, 1.5),
        (1.25, 1.25),
        (1.249, 1.25),
        (1.251, 1.25),
        (0.0, 0.0),
        (-1.23456, -1.23),
        (0.0009765625, 0.0),
        (2.345678, 2.35),
    ],
)
def test_round_two_decimals(value: float, expected: float) -> None:
    assert round_two_decimals(value) == expected


def test_negative_byte_counts_are_rejected() -> None:
    with pytest.raises(ValueError):
        bytes_to_mb(-1)
    with pytest.raises(ValueError):
        bytes_to_human(-1)
