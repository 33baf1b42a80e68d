"""Text helpers for embedding test output in the report."""

import re
from datetime import datetime
from decimal import Decimal

ANSI_PATTERN = re.compile(
    r"[\u001B\u009B][\[\]()#;?]*"
    r"(?:(?:(?:(?:;[-a-zA-Z\d/#&.:=?%@~_]+)*"
    r"|[a-zA-Z\d]+(?:;[-a-zA-Z\d/#&.:=?%@~_]*)*)?\u0007)"
    r"|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PR-TZcf-ntqry=><~]))"
)


def strip_ansi(text: str) -> str:
    """Remove terminal color and cursor escape sequences from text."""
    return ANSI_PATTERN.sub("", text)


def format_seconds(milliseconds: float) -> str:
    """Format a millisecond duration as seconds in plain decimal notation.

    ``6000`` becomes ``"6"``, ``1200`` becomes ``"1.2"`` and ``0.05`` becomes
    ``"0.00005"``.
    """
    seconds = milliseconds / 1000
    if float(seconds).is_integer():
        return str(int(seconds))
    return format(Decimal(repr(seconds)), "f")


def format_timestamp(epoch_ms: float, date_format: str) -> str:
    """Format a millisecond epoch timestamp in local time using strftime."""
    return datetime.fromtimestamp(epoch_ms / 1000).strftime(date_format)
