"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories.pydantic_factory import ModelFactory

from jest_html_report.models.results import (
    PerfStats,
    SuiteResult,
    TestResult,
    TestRun,
)


class PerfStatsFactory(ModelFactory[PerfStats]):
    """Factory for PerfStats."""

    start = 1_700_000_000_000
    end = 1_700_000_001_500


class TestResultFactory(ModelFactory[TestResult]):
    """Factory for TestResult."""

    __test__ = False

    ancestor_titles = Use(lambda: ["describe"])
    status = "passed"
    duration = 25
    failure_messages = Use(list)


class SuiteResultFactory(ModelFactory[SuiteResult]):
    """Factory for SuiteResult."""

    perf_stats = Use(PerfStatsFactory.build)
    failure_message = None
    test_results = Use(lambda: [TestResultFactory.build()])


class TestRunFactory(ModelFactory[TestRun]):
    """Factory for TestRun."""

    __test__ = False

    start_time = 1_700_000_000_000
    test_results = Use(list)
