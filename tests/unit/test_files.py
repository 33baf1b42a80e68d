"""Tests for stylesheet loading and report writing."""

from pathlib import Path

import pytest

from jest_html_report.errors import StylesheetNotFoundError, WriteFailureError
from jest_html_report.files import load_stylesheet, write_report


async def test_load_stylesheet_reads_content(tmp_path: Path) -> None:
    """Returns the stylesheet content."""
    stylesheet = tmp_path / "style.css"
    stylesheet.write_text("body { margin: 0; }")

    assert await load_stylesheet(stylesheet) == "body { margin: 0; }"


async def test_load_stylesheet_raises_for_missing_file(tmp_path: Path) -> None:
    """Raises StylesheetNotFoundError naming the missing path."""
    missing = tmp_path / "missing.css"

    with pytest.raises(
        StylesheetNotFoundError, match="Could not locate the stylesheet"
    ) as exc_info:
        await load_stylesheet(missing)

    assert str(missing) in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


async def test_write_report_creates_parent_directories(tmp_path: Path) -> None:
    """Creates missing directories before writing."""
    output = tmp_path / "reports" / "nested" / "report.html"

    await write_report(output, "<html></html>")

    assert output.read_text() == "<html></html>"


async def test_write_report_raises_when_path_is_directory(tmp_path: Path) -> None:
    """Raises WriteFailureError when the file cannot be written."""
    with pytest.raises(WriteFailureError, match="Could not write the report"):
        await write_report(tmp_path, "<html></html>")


async def test_load_stylesheet_raises_for_non_utf8_content(tmp_path: Path) -> None:
    """Raises StylesheetNotFoundError for a stylesheet that is not UTF-8."""
    stylesheet = tmp_path / "latin1.css"
    stylesheet.write_bytes(b"/* caf\xe9 */")

    with pytest.raises(StylesheetNotFoundError) as exc_info:
        await load_stylesheet(stylesheet)

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


async def test_write_report_leaves_no_file_for_unencodable_content(
    tmp_path: Path,
) -> None:
    """Raises WriteFailureError and writes nothing for lone surrogates."""
    output = tmp_path / "reports" / "report.html"

    with pytest.raises(WriteFailureError) as exc_info:
        await write_report(output, "bad \ud800")

    assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
    assert not output.exists()
