"""HTML rendering of test run results."""

from jest_html_report.rendering.document import render_html_report, render_suite
from jest_html_report.rendering.html import create_html_base, serialize
from jest_html_report.rendering.rows import render_table_row

__all__ = [
    "create_html_base",
    "render_html_report",
    "render_suite",
    "render_table_row",
    "serialize",
]
