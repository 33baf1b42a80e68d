"""Report generator coordinating stylesheet loading, rendering and writing."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from jest_html_report.config import ReporterConfig
from jest_html_report.errors import ReportError
from jest_html_report.files import load_stylesheet, write_report
from jest_html_report.models.results import TestRun
from jest_html_report.rendering import render_html_report, serialize

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ReportOutcome:
    """Result of a report generation attempt."""

    status: Literal["success", "error"]
    output_path: Path
    message: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the report was written."""
        return self.status == "success"


@dataclass(frozen=True, kw_only=True)
class ReportGenerator:
    """Generates and writes the HTML report for a test run."""

    config: ReporterConfig

    async def generate(
        self, test_run: TestRun | None, *, ignore_console: bool = False
    ) -> ReportOutcome:
        """Render the test run and write it to the configured output path.

        Any pipeline failure is logged once and returned as an error outcome;
        nothing is written in that case.

        Args:
            test_run: Aggregated test run result
            ignore_console: Suppress the success or error log line

        Returns:
            Outcome naming the output path, with the failure message on error

        """
        output_path = self.config.output_path

        try:
            await self._generate(test_run, output_path)
        except ReportError as e:
            if not ignore_console:
                log.error("%s", e)
            return ReportOutcome(
                status="error", output_path=output_path, message=str(e)
            )

        if not ignore_console:
            log.info("Report generated (%s)", output_path)
        return ReportOutcome(status="success", output_path=output_path)

    async def _generate(self, test_run: TestRun | None, output_path: Path) -> None:
        stylesheet = await load_stylesheet(self.config.stylesheet_path)
        document = render_html_report(test_run, stylesheet, self.config)
        await write_report(output_path, serialize(document))
