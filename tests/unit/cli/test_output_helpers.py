"""Tests for CLI output helpers."""

import pytest

from kdev.cli.output import format_duration


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0.0, "0.0s"),
        (4.2, "4.2s"),
        (59.94, "59.9s"),
        (83, "1m 23s"),
        (3600, "1h 0m 0s"),
        (3723, "1h 2m 3s"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    assert format_duration(seconds) == expected
