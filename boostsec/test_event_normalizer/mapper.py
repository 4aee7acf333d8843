"""Map engine state records to normalized entities."""

import copy
from collections.abc import Mapping, Sequence

from boostsec.test_event_normalizer.aggregator import count_tests, suite_status
from boostsec.test_event_normalizer.models.normalized import (
    Assertion,
    StartCounts,
    SuiteEnd,
    SuiteStart,
    TestEnd,
    TestInfo,
    TestStart,
)
from boostsec.test_event_normalizer.models.payloads import AssertionRecord
from boostsec.test_event_normalizer.models.state_tree import (
    ModuleInfo,
    SuiteRecord,
    TestRecord,
)

AssertionsByTest = Mapping[str, Sequence[AssertionRecord] | None]


def runtime(start: float, end: float | None) -> float | None:
    """Elapsed milliseconds, or None while the end timestamp is unset."""
    if end is None:
        return None
    return end - start


def make_test_id(suite_name: str, test_name: str) -> str:
    """Identifier of a test within the suite key it was resolved under."""
    return f"{suite_name}/{test_name}"


def normalize_assertion(record: AssertionRecord) -> Assertion:
    """Copy an assertion log entry into a normalized assertion."""
    return Assertion(
        message=record.message,
        passed=record.result,
        expected=copy.deepcopy(record.expected),
        actual=copy.deepcopy(record.actual),
        # TODO: propagate the owning test's todo flag
        todo=False,
    )


def record_to_test_info(suite_name: str, record: TestRecord) -> TestInfo:
    """Build the identity of ``record`` under the given suite key."""
    return TestInfo(
        id=make_test_id(suite_name, record.name),
        name=record.name,
        full_name=list(record.full_name),
        suite_name=suite_name,
    )


def record_to_test_start(suite_name: str, record: TestRecord) -> TestStart:
    """Build testStart data for ``record``."""
    return TestStart(**record_to_test_info(suite_name, record).model_dump())


def record_to_test_end(
    suite_name: str, record: TestRecord, assertions: Sequence[AssertionRecord]
) -> TestEnd:
    """Build testEnd data for ``record`` from its assertion log.

    The status is "failed" when any assertion failed and "passed" otherwise;
    the record's skipped and todo flags are not consulted.
    """
    normalized = [normalize_assertion(a) for a in assertions]
    errors = [a for a in normalized if not a.passed]
    return TestEnd(
        **record_to_test_info(suite_name, record).model_dump(),
        status="failed" if errors else "passed",
        runtime=runtime(record.start_time, record.end_time),
        errors=errors,
        assertions=normalized,
    )


def suite_to_suite_start(record: SuiteRecord) -> SuiteStart:
    """Map a suite report and its child suites to suiteStart data.

    The test count covers only the tests this suite owns directly.
    """
    return SuiteStart(
        name=record.name,
        full_name=list(record.full_name),
        child_suites=[suite_to_suite_start(c) for c in record.child_suites],
        tests=[record_to_test_info(record.name, t) for t in record.tests],
        test_counts=StartCounts(total=len(record.tests)),
    )


def module_to_suite_start(module: ModuleInfo) -> SuiteStart:
    """Map a module to suiteStart data, keying its tests by module id."""
    report = module.suite_report
    tests = [record_to_test_info(module.module_id, t) for t in report.tests]
    return SuiteStart(
        name=module.name,
        full_name=list(report.full_name),
        child_suites=[suite_to_suite_start(c) for c in report.child_suites],
        tests=tests,
        test_counts=StartCounts(total=len(tests)),
    )


def module_to_suite_end(
    module: ModuleInfo, assertions: AssertionsByTest | None = None
) -> SuiteEnd:
    """Map a finished module to suiteEnd data.

    ``assertions`` maps test names to their assertion logs; a test with no
    entry is treated as having recorded none.
    """
    assertions = assertions or {}
    report = module.suite_report
    tests = [
        record_to_test_end(module.module_id, t, assertions.get(t.name) or [])
        for t in report.tests
    ]
    # TODO: decide whether reporters expect the "root" wrapper suite here
    # (name "root", child suite = this module's report) instead of the module
    return SuiteEnd(
        name=module.name,
        full_name=list(report.full_name),
        child_suites=[suite_to_suite_start(c) for c in report.child_suites],
        status=suite_status(tests),
        runtime=runtime(report.start_time, report.end_time),
        tests=tests,
        test_counts=count_tests(tests),
    )
