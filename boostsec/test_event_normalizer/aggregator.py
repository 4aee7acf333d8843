"""Status and count aggregation for suite- and run-level events."""

from collections.abc import Iterable

from boostsec.test_event_normalizer.models.normalized import (
    TestCounts,
    TestEnd,
    TestStatus,
)


def count_tests(tests: Iterable[TestEnd]) -> TestCounts:
    """Fold a flat test list into outcome counts.

    Each test adds one to ``total`` and one to the bucket of its status.
    Nested suites are not descended into.
    """
    counts = {"total": 0, "passed": 0, "skipped": 0, "todo": 0, "failed": 0}
    for test in tests:
        counts["total"] += 1
        counts[test.status] += 1
    return TestCounts(**counts)


def suite_status(tests: Iterable[TestEnd]) -> TestStatus:
    """Status reported for a finished suite.

    Always "passed": child outcomes are not rolled up yet. Failures are
    visible only through the test counts.
    """
    # TODO: report "failed" when any test in ``tests`` failed
    return "passed"


def run_status(tests: Iterable[TestEnd]) -> TestStatus:
    """Status reported for a finished run; same rule as ``suite_status``."""
    return suite_status(tests)
