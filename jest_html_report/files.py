"""Asynchronous reads and writes for the report pipeline."""

import asyncio
import logging
from pathlib import Path

from jest_html_report.errors import StylesheetNotFoundError, WriteFailureError

log = logging.getLogger(__name__)


async def load_stylesheet(path: Path) -> str:
    """Read the stylesheet to embed in the report.

    Raises:
        StylesheetNotFoundError: If the file cannot be read or is not UTF-8

    """
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")
    except (OSError, UnicodeError) as e:
        raise StylesheetNotFoundError(
            f"Could not locate the stylesheet: '{path}': {e}"
        ) from e


async def write_report(path: Path, content: str) -> None:
    """Write the report, creating missing parent directories.

    The content is encoded before the file is touched, so an unencodable
    report leaves nothing behind.

    Raises:
        WriteFailureError: If the content cannot be encoded or written

    """
    log.debug("Writing %d characters to %s", len(content), path)
    try:
        data = content.encode("utf-8")
        await asyncio.to_thread(_write_bytes, path, data)
    except (OSError, UnicodeError) as e:
        raise WriteFailureError(f"Could not write the report: '{path}': {e}") from e


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
