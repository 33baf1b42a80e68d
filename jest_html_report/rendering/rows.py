"""Rendering of a single report table row."""

import xml.etree.ElementTree as ET
from collections.abc import Sequence

from jest_html_report.config import ReporterConfig
from jest_html_report.models.rows import RowItem, SuiteError, TestCase
from jest_html_report.text import format_seconds, strip_ansi


def render_table_row(item: RowItem, table: ET.Element, config: ReporterConfig) -> None:
    """Append one ``<tr>`` for a suite error or a test case to the table."""
    match item:
        case SuiteError():
            title = item.file_path
            suite_title = title
            status = "failed"
            messages: Sequence[str] = [item.failure_message]
            include_messages = config.include_suite_failure
            result = status
        case TestCase():
            title = item.title
            if item.ancestor_titles is not None:
                suite_title = " > ".join(item.ancestor_titles)
            else:
                suite_title = title
            status = item.status or "failed"
            messages = item.failure_messages
            include_messages = config.include_failure_msg
            if status == "passed":
                result = f"{status} in {format_seconds(item.duration or 0)}s"
            else:
                result = status

    row = ET.SubElement(table, "tr", {"class": status})
    ET.SubElement(row, "td", {"class": "suite"}).text = suite_title

    title_cell = ET.SubElement(row, "td", {"class": "test"})
    title_cell.text = title
    if messages and include_messages:
        failure_block = ET.SubElement(title_cell, "div", {"class": "failureMessages"})
        for message in messages:
            ET.SubElement(failure_block, "pre", {"class": "failureMsg"}).text = (
                strip_ansi(message)
            )

    ET.SubElement(row, "td", {"class": "result"}).text = result
