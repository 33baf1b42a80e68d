"""Tests for text helpers."""

from datetime import datetime

import pytest

from jest_html_report.text import format_seconds, format_timestamp, strip_ansi


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\x1b[31mred\x1b[39m", "red"),
        ("\x1b[1m\x1b[2mbold dim\x1b[22m", "bold dim"),
        ("expect(\x1b[32mreceived\x1b[39m).toBe()", "expect(received).toBe()"),
        ("\x1b]8;;https://example.com\x07link\x1b]8;;\x07", "link"),
        ("plain  text\n  indented", "plain  text\n  indented"),
    ],
)
def test_strip_ansi(raw: str, expected: str) -> None:
    """Removes escape sequences and keeps all other content."""
    assert strip_ansi(raw) == expected


@pytest.mark.parametrize(
    ("milliseconds", "expected"),
    [
        (6000, "6"),
        (1200, "1.2"),
        (0, "0"),
        (5, "0.005"),
        (1234.5, "1.2345"),
        (0.05, "0.00005"),
    ],
)
def test_format_seconds(milliseconds: float, expected: str) -> None:
    """Formats milliseconds as seconds without trailing zeros."""
    assert format_seconds(milliseconds) == expected


def test_format_timestamp_uses_local_time() -> None:
    """Formats the epoch timestamp in local time."""
    epoch_ms = 1_700_000_000_000
    expected = datetime.fromtimestamp(epoch_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")

    assert format_timestamp(epoch_ms, "%Y-%m-%d %H:%M:%S") == expected
