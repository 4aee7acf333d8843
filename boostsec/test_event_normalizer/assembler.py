"""Assemble normalized lifecycle events from engine state and callback payloads.

Every function here is a pure read of the supplied snapshot: resolve the named
entity, map it, aggregate counts, wrap it in an ``{event, data}`` envelope.
Resolution errors propagate to the caller untouched.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from pydantic import TypeAdapter

from boostsec.test_event_normalizer.aggregator import count_tests, run_status
from boostsec.test_event_normalizer.mapper import (
    AssertionsByTest,
    module_to_suite_end,
    module_to_suite_start,
    record_to_test_end,
    record_to_test_start,
)
from boostsec.test_event_normalizer.models.normalized import (
    NormalizedEvent,
    RunEnd,
    RunEndEvent,
    RunStart,
    RunStartEvent,
    StartCounts,
    SuiteEndEvent,
    SuiteStartEvent,
    TestEndEvent,
    TestStartEvent,
)
from boostsec.test_event_normalizer.models.payloads import (
    AssertionRecord,
    BeginDetails,
    DoneDetails,
    ModuleDoneDetails,
    ModuleStartDetails,
    TestDoneDetails,
    TestStartDetails,
)
from boostsec.test_event_normalizer.models.state_tree import (
    ModuleInfo,
    StateTree,
    TestRecord,
)
from boostsec.test_event_normalizer.resolver import resolve_module, resolve_test

logger = logging.getLogger(__name__)

T = TypeVar("T")

EVENT_KINDS = ("suiteStart", "suiteEnd", "testStart", "testEnd", "runStart", "runEnd")

TestLog = dict[str, list[AssertionRecord] | None]
ModuleLog = dict[str, TestLog | None]

_RECORDS = TypeAdapter(list[AssertionRecord])
_TEST_MAP = TypeAdapter(TestLog)
_MODULE_MAP = TypeAdapter(ModuleLog)


def _module_label(module: ModuleInfo) -> str:
    return f"module id {module.module_id!r}"


class AmbiguousNameError(LookupError):
    """A name resolved to several records while duplicates are disallowed."""


def pick_first(
    kind: str,
    name: str,
    matches: Sequence[T],
    strict: bool = False,
    describe: Callable[[T], str] | None = None,
) -> T:
    """Apply the take-first policy to a resolver match set.

    Names are not unique in the engine state, so the first match wins. With
    ``strict`` a duplicate raises instead. ``describe`` labels the chosen
    match in the warning.
    """
    if len(matches) > 1:
        if strict:
            raise AmbiguousNameError(
                f'{kind} "{name}" matches {len(matches)} records in state'
            )
        chosen = f" ({describe(matches[0])})" if describe else ""
        logger.warning(
            f'{kind} "{name}" matches {len(matches)} records, using the first'
            f"{chosen}"
        )
    return matches[0]


def _pick_module(tree: StateTree, name: str, strict: bool) -> ModuleInfo:
    return pick_first("Module", name, resolve_module(tree, name), strict, _module_label)


def _resolve_pair(
    tree: StateTree, module_name: str, test_name: str, strict: bool
) -> tuple[ModuleInfo, TestRecord]:
    modules = resolve_module(tree, module_name)
    module = pick_first("Module", module_name, modules, strict, _module_label)
    tests = resolve_test(modules, test_name)
    test = pick_first("Test", test_name, tests, strict)
    if len(modules) > 1 and not any(t is test for t in module.suite_report.tests):
        logger.warning(
            f'Test "{test_name}" belongs to a later module "{module_name}"; '
            f"identifying it under module id {module.module_id!r}"
        )
    return module, test


def normalize_suite_start_event(
    tree: StateTree, evt: ModuleStartDetails, strict: bool = False
) -> SuiteStartEvent:
    """Normalize a module-start callback."""
    logger.debug(f"Assembling suiteStart for module {evt.name!r}")
    module = _pick_module(tree, evt.name, strict)
    return SuiteStartEvent(data=module_to_suite_start(module))


def normalize_suite_end_event(
    tree: StateTree,
    evt: ModuleDoneDetails,
    assertions: AssertionsByTest | None = None,
    strict: bool = False,
) -> SuiteEndEvent:
    """Normalize a module-done callback using per-test assertion logs."""
    logger.debug(f"Assembling suiteEnd for module {evt.name!r}")
    module = _pick_module(tree, evt.name, strict)
    return SuiteEndEvent(data=module_to_suite_end(module, assertions))


def normalize_test_start_event(
    tree: StateTree, evt: TestStartDetails, strict: bool = False
) -> TestStartEvent:
    """Normalize a test-start callback."""
    logger.debug(f"Assembling testStart for {evt.module!r}/{evt.name!r}")
    module, test = _resolve_pair(tree, evt.module, evt.name, strict)
    return TestStartEvent(data=record_to_test_start(module.module_id, test))


def normalize_test_end_event(
    tree: StateTree,
    evt: TestDoneDetails,
    assertions: Sequence[AssertionRecord] | None = None,
    strict: bool = False,
) -> TestEndEvent:
    """Normalize a test-done callback using the test's own assertion log."""
    logger.debug(f"Assembling testEnd for {evt.module!r}/{evt.name!r}")
    module, test = _resolve_pair(tree, evt.module, evt.name, strict)
    return TestEndEvent(
        data=record_to_test_end(module.module_id, test, assertions or [])
    )


def normalize_run_start_event(
    tree: StateTree, evt: BeginDetails | None = None
) -> RunStartEvent:
    """Normalize the run-begin callback over every module in the snapshot."""
    logger.debug(f"Assembling runStart over {len(tree.modules)} modules")
    child_suites = [module_to_suite_start(m) for m in tree.modules]
    return RunStartEvent(
        data=RunStart(
            full_name=[],
            tests=[],
            child_suites=child_suites,
            test_counts=StartCounts(
                total=sum(s.test_counts.total for s in child_suites)
            ),
        )
    )


def normalize_run_end_event(
    tree: StateTree,
    evt: DoneDetails | None = None,
    assertions: Mapping[str, AssertionsByTest | None] | None = None,
) -> RunEndEvent:
    """Normalize the run-done callback.

    ``assertions`` maps module names to per-test assertion logs. Each module
    only sees its own entry; nested child modules are not threaded through.
    """
    logger.debug(f"Assembling runEnd over {len(tree.modules)} modules")
    assertions = assertions or {}
    child_suites = [
        module_to_suite_end(m, assertions.get(m.name)) for m in tree.modules
    ]
    all_tests = [t for s in child_suites for t in s.tests]
    total_runtime = sum(s.runtime for s in child_suites if s.runtime is not None)
    return RunEndEvent(
        data=RunEnd(
            full_name=[],
            tests=[],
            child_suites=child_suites,
            status=run_status(all_tests),
            runtime=total_runtime,
            test_counts=count_tests(all_tests),
        )
    )


def normalize_event(
    kind: str,
    tree: StateTree,
    payload: Mapping[str, Any] | None = None,
    assertions: Any = None,
    strict: bool = False,
) -> NormalizedEvent:
    """Dispatch a raw callback payload to the matching normalizer.

    Payload and assertion data are validated into their models here; the
    shape of ``assertions`` depends on ``kind`` (list for testEnd, test map
    for suiteEnd, module map for runEnd, ignored otherwise).

    Raises:
        ValueError: If ``kind`` is not a known lifecycle event
        pydantic.ValidationError: If the payload or assertion log does not
            have the shape ``kind`` expects

    """
    payload = payload or {}
    if kind == "suiteStart":
        return normalize_suite_start_event(
            tree, ModuleStartDetails.model_validate(payload), strict
        )
    if kind == "suiteEnd":
        return normalize_suite_end_event(
            tree,
            ModuleDoneDetails.model_validate(payload),
            _test_map(assertions),
            strict,
        )
    if kind == "testStart":
        return normalize_test_start_event(
            tree, TestStartDetails.model_validate(payload), strict
        )
    if kind == "testEnd":
        return normalize_test_end_event(
            tree,
            TestDoneDetails.model_validate(payload),
            _records(assertions),
            strict,
        )
    if kind == "runStart":
        return normalize_run_start_event(tree, BeginDetails.model_validate(payload))
    if kind == "runEnd":
        return normalize_run_end_event(
            tree, DoneDetails.model_validate(payload), _module_map(assertions)
        )
    raise ValueError(
        f"Unknown event kind: {kind}. Must be one of: {', '.join(EVENT_KINDS)}"
    )


def _records(raw: Any) -> list[AssertionRecord]:
    return _RECORDS.validate_python(raw or [])


def _test_map(raw: Any) -> TestLog:
    return _TEST_MAP.validate_python(raw or {})


def _module_map(raw: Any) -> ModuleLog:
    return _MODULE_MAP.validate_python(raw or {})
