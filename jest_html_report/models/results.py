"""Models for the aggregated result Jest produces after a test run."""

from collections.abc import Sequence

from pydantic import Field

from jest_html_report.models.base import Model


class PerfStats(Model):
    """Suite execution window, in milliseconds since the epoch."""

    start: float = 0
    end: float = 0


class TestResult(Model):
    """Outcome of a single test case."""

    __test__ = False

    title: str = Field(..., description="Test name")
    ancestor_titles: Sequence[str] | None = Field(
        default=None, description="Enclosing describe block names"
    )
    status: str | None = Field(
        default=None, description="Test outcome, e.g. passed, failed or pending"
    )
    duration: float | None = Field(
        default=None, description="Execution time in milliseconds"
    )
    failure_messages: Sequence[str] = Field(
        default_factory=list, description="Raw failure output, may contain ANSI codes"
    )


class SuiteResult(Model):
    """Outcome of one executed test file."""

    test_file_path: str = Field(..., description="Path of the test file")
    perf_stats: PerfStats = Field(default_factory=PerfStats)
    failure_message: str | None = Field(
        default=None, description="Suite level failure, e.g. a syntax error"
    )
    test_results: Sequence[TestResult] = Field(default_factory=list)

    @property
    def execution_time(self) -> float:
        """Suite execution time in milliseconds."""
        return self.perf_stats.end - self.perf_stats.start


class TestRun(Model):
    """Complete test run result, as written by ``jest --json``."""

    __test__ = False

    start_time: float = Field(default=0, description="Run start, ms since epoch")
    num_total_test_suites: int = 0
    num_passed_test_suites: int = 0
    num_failed_test_suites: int = 0
    num_pending_test_suites: int = 0
    num_total_tests: int = 0
    num_passed_tests: int = 0
    num_failed_tests: int = 0
    num_pending_tests: int = 0
    test_results: Sequence[SuiteResult] = Field(default_factory=list)
