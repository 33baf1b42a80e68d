"""Assembly of the full report document from a test run."""

import logging
import xml.etree.ElementTree as ET

from jest_html_report.config import ReporterConfig
from jest_html_report.errors import MissingTestDataError
from jest_html_report.models.results import SuiteResult, TestRun
from jest_html_report.models.rows import SuiteError, TestCase
from jest_html_report.rendering.html import create_html_base
from jest_html_report.rendering.rows import render_table_row
from jest_html_report.sorting import sort_suite_results
from jest_html_report.text import format_seconds, format_timestamp

log = logging.getLogger(__name__)

SLOW_SUITE_SECONDS = 5


def render_html_report(
    test_run: TestRun | None, stylesheet: str, config: ReporterConfig
) -> ET.Element:
    """Build the report element tree for a test run.

    Args:
        test_run: Aggregated test run result
        stylesheet: CSS embedded in the document head
        config: Reporter configuration

    Returns:
        The ``<html>`` root element

    Raises:
        MissingTestDataError: If no test run was provided

    """
    if test_run is None:
        raise MissingTestDataError("Test data missing or malformed")

    root, body = create_html_base(config.page_title, stylesheet)

    header = ET.SubElement(body, "header")
    ET.SubElement(header, "h1", {"id": "title"}).text = config.page_title
    if config.logo:
        ET.SubElement(header, "img", {"id": "logo", "src": config.logo})

    metadata = ET.SubElement(body, "div", {"id": "metadata-container"})
    start = format_timestamp(test_run.start_time, config.date_format)
    ET.SubElement(metadata, "div", {"id": "timestamp"}).text = f"Start: {start}"
    ET.SubElement(metadata, "div", {"class": "summary"}).text = (
        f"{test_run.num_total_test_suites} testsuites -- "
        f"{test_run.num_passed_test_suites} passed / "
        f"{test_run.num_failed_test_suites} failed / "
        f"{test_run.num_pending_test_suites} pending"
    )
    ET.SubElement(metadata, "div", {"class": "summary"}).text = (
        f"{test_run.num_total_tests} tests -- "
        f"{test_run.num_passed_tests} passed / "
        f"{test_run.num_failed_tests} failed / "
        f"{test_run.num_pending_tests} pending"
    )

    suites = sort_suite_results(test_run.test_results, config.sort)
    log.debug("Rendering %d suite(s) sorted by %s", len(suites), config.sort)
    for suite in suites:
        render_suite(suite, body, config)

    return root


def has_suite_error(suite: SuiteResult, config: ReporterConfig) -> bool:
    """Whether the suite is reported as a suite level failure."""
    return config.include_suite_failure and bool(suite.failure_message)


def render_suite(suite: SuiteResult, body: ET.Element, config: ReporterConfig) -> None:
    """Append the info block and result table of a suite.

    Suites without tests are skipped unless they carry a suite level
    failure that the configuration includes.
    """
    suite_error = has_suite_error(suite, config)
    if not suite_error and not suite.test_results:
        return

    info = ET.SubElement(body, "div", {"class": "suite-info"})
    ET.SubElement(info, "div", {"class": "suite-path"}).text = suite.test_file_path
    seconds = suite.execution_time / 1000
    time_class = "suite-time warn" if seconds > SLOW_SUITE_SECONDS else "suite-time"
    ET.SubElement(info, "div", {"class": time_class}).text = (
        f"{format_seconds(suite.execution_time)}s"
    )

    table = ET.SubElement(
        body,
        "table",
        {"class": "suite-table", "cellspacing": "0", "cellpadding": "0"},
    )

    # A suite that failed to load has no test results of its own
    if suite_error:
        render_table_row(SuiteError.from_suite(suite), table, config)

    for test in suite.test_results:
        render_table_row(TestCase.from_result(test), table, config)
