"""Data models for engine state, callback payloads, and normalized events."""

from boostsec.test_event_normalizer.models.normalized import (
    Assertion,
    RunEnd,
    RunEndEvent,
    RunStart,
    RunStartEvent,
    StartCounts,
    SuiteEnd,
    SuiteEndEvent,
    SuiteStart,
    SuiteStartEvent,
    TestCounts,
    TestEnd,
    TestEndEvent,
    TestInfo,
    TestStart,
    TestStartEvent,
)
from boostsec.test_event_normalizer.models.normalizer_config import NormalizerConfig
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
    ModuleStats,
    ReportedAssertion,
    StateTree,
    SuiteRecord,
    TestRecord,
)

__all__ = [
    "Assertion",
    "AssertionRecord",
    "BeginDetails",
    "DoneDetails",
    "ModuleDoneDetails",
    "ModuleInfo",
    "ModuleStartDetails",
    "ModuleStats",
    "NormalizerConfig",
    "ReportedAssertion",
    "RunEnd",
    "RunEndEvent",
    "RunStart",
    "RunStartEvent",
    "StartCounts",
    "StateTree",
    "SuiteEnd",
    "SuiteEndEvent",
    "SuiteRecord",
    "SuiteStart",
    "SuiteStartEvent",
    "TestCounts",
    "TestDoneDetails",
    "TestEnd",
    "TestEndEvent",
    "TestInfo",
    "TestRecord",
    "TestStart",
    "TestStartDetails",
    "TestStartEvent",
]
