"""Table row items: a suite reported as a failure, or a single test case."""

from collections.abc import Sequence
from dataclasses import dataclass

from jest_html_report.models.results import SuiteResult, TestResult


@dataclass(frozen=True, kw_only=True)
class SuiteError:
    """A suite that failed before any of its tests could run."""

    file_path: str
    failure_message: str

    @classmethod
    def from_suite(cls, suite: SuiteResult) -> "SuiteError":
        """Build the row item for a suite carrying a failure message."""
        return cls(
            file_path=suite.test_file_path,
            failure_message=suite.failure_message or "",
        )


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A single test outcome."""

    __test__ = False

    title: str
    ancestor_titles: Sequence[str] | None = None
    status: str | None = None
    duration: float | None = None
    failure_messages: Sequence[str] = ()

    @classmethod
    def from_result(cls, result: TestResult) -> "TestCase":
        """Build the row item for a test result."""
        return cls(
            title=result.title,
            ancestor_titles=(
                tuple(result.ancestor_titles)
                if result.ancestor_titles is not None
                else None
            ),
            status=result.status,
            duration=result.duration,
            failure_messages=tuple(result.failure_messages),
        )


type RowItem = SuiteError | TestCase
