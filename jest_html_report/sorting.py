"""Ordering policies applied to suites before rendering."""

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import StrEnum

from jest_html_report.models.results import SuiteResult

log = logging.getLogger(__name__)

type Sorter = Callable[[Sequence[SuiteResult]], Sequence[SuiteResult]]

STATUS_GROUPS = ("pending", "failed", "passed")


class SortMethod(StrEnum):
    """Named suite ordering policies."""

    DEFAULT = "default"
    STATUS = "status"
    EXECUTION_DESC = "executiondesc"
    EXECUTION_ASC = "executionasc"
    TITLE_DESC = "titledesc"
    TITLE_ASC = "titleasc"

    @classmethod
    def parse(cls, key: str | None) -> "SortMethod":
        """Resolve a configuration key, falling back to the input order."""
        if not key:
            return cls.DEFAULT
        try:
            return cls(key.lower())
        except ValueError:
            log.warning("Unknown sort method '%s', keeping input order", key)
            return cls.DEFAULT


def _status_group(status: str | None) -> str:
    if status == "pending":
        return "pending"
    if status == "failed":
        return "failed"
    return "passed"


def sort_by_status(suites: Sequence[SuiteResult]) -> Sequence[SuiteResult]:
    """Split each suite by test status: pending first, then failed, then passed.

    A suite without tests is placed with the failed suites so that its
    suite level failure stays in the report.
    """
    groups: dict[str, list[SuiteResult]] = {group: [] for group in STATUS_GROUPS}
    for suite in suites:
        if not suite.test_results:
            groups["failed"].append(suite)
            continue
        for group in STATUS_GROUPS:
            tests = [
                test
                for test in suite.test_results
                if _status_group(test.status) == group
            ]
            if tests:
                groups[group].append(suite.model_copy(update={"test_results": tests}))
    return [suite for group in STATUS_GROUPS for suite in groups[group]]


def sort_by_execution_desc(suites: Sequence[SuiteResult]) -> Sequence[SuiteResult]:
    """Slowest suites first."""
    return sorted(suites, key=lambda suite: suite.execution_time, reverse=True)


def sort_by_execution_asc(suites: Sequence[SuiteResult]) -> Sequence[SuiteResult]:
    """Fastest suites first."""
    return sorted(suites, key=lambda suite: suite.execution_time)


def _sort_by_title(
    suites: Sequence[SuiteResult], *, reverse: bool
) -> Sequence[SuiteResult]:
    ordered = sorted(suites, key=lambda suite: suite.test_file_path, reverse=reverse)
    return [
        suite.model_copy(
            update={
                "test_results": sorted(
                    suite.test_results,
                    key=lambda test: " ".join(test.ancestor_titles or ()),
                    reverse=reverse,
                )
            }
        )
        for suite in ordered
    ]


def sort_by_title_desc(suites: Sequence[SuiteResult]) -> Sequence[SuiteResult]:
    """Suites by file path, Z to A; tests by describe path, Z to A."""
    return _sort_by_title(suites, reverse=True)


def sort_by_title_asc(suites: Sequence[SuiteResult]) -> Sequence[SuiteResult]:
    """Suites by file path, A to Z; tests by describe path, A to Z."""
    return _sort_by_title(suites, reverse=False)


SORTERS: Mapping[SortMethod, Sorter] = {
    SortMethod.DEFAULT: list,
    SortMethod.STATUS: sort_by_status,
    SortMethod.EXECUTION_DESC: sort_by_execution_desc,
    SortMethod.EXECUTION_ASC: sort_by_execution_asc,
    SortMethod.TITLE_DESC: sort_by_title_desc,
    SortMethod.TITLE_ASC: sort_by_title_asc,
}


def sort_suite_results(
    suites: Sequence[SuiteResult], method: SortMethod
) -> Sequence[SuiteResult]:
    """Return the suites in the order given by the sort method."""
    return SORTERS[method](suites)
