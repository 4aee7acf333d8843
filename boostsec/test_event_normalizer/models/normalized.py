"""Models for normalized test lifecycle events handed to reporters."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TestStatus = Literal["passed", "failed", "todo", "skipped"]


class _Normalized(BaseModel):
    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )


class Assertion(_Normalized):
    """A single normalized assertion."""

    message: str | None = Field(default=None, description="Assertion message")
    passed: bool = Field(..., description="Whether the assertion held")
    expected: Any = Field(default=None, description="Expected value")
    actual: Any = Field(default=None, description="Actual value")
    todo: bool = Field(default=False, description="Assertion belongs to a todo test")


class StartCounts(_Normalized):
    """Test count known before a suite runs."""

    total: int = Field(..., description="Tests owned by the suite")


class TestCounts(_Normalized):
    """Aggregated outcome counts."""

    __test__ = False

    total: int = 0
    passed: int = 0
    skipped: int = 0
    todo: int = 0
    failed: int = 0


class TestInfo(_Normalized):
    """Identity of a test inside its suite."""

    __test__ = False

    id: str = Field(..., description="Stable identifier, suite/test")
    name: str = Field(..., description="Test name")
    full_name: list[str] = Field(default_factory=list, description="Nesting path")
    suite_name: str = Field(..., description="Suite key used in the identifier")


class TestStart(TestInfo):
    """Data of a testStart event."""

    __test__ = False


class TestEnd(TestInfo):
    """Data of a testEnd event."""

    __test__ = False

    status: TestStatus = Field(..., description="Test outcome")
    runtime: float | None = Field(
        default=None, description="Milliseconds, None while the end is unknown"
    )
    errors: list[Assertion] = Field(
        default_factory=list, description="Failing assertions"
    )
    assertions: list[Assertion] = Field(
        default_factory=list, description="All assertions, in order"
    )


class SuiteStart(_Normalized):
    """Data of a suiteStart event."""

    name: str = Field(..., description="Suite name")
    full_name: list[str] = Field(default_factory=list, description="Nesting path")
    child_suites: list[SuiteStart] = Field(default_factory=list)
    tests: list[TestInfo] = Field(default_factory=list)
    test_counts: StartCounts


class SuiteEnd(_Normalized):
    """Data of a suiteEnd event."""

    name: str = Field(..., description="Suite name")
    full_name: list[str] = Field(default_factory=list, description="Nesting path")
    child_suites: list[SuiteStart] = Field(default_factory=list)
    status: TestStatus
    runtime: float | None = None
    tests: list[TestEnd] = Field(default_factory=list)
    test_counts: TestCounts


class RunStart(_Normalized):
    """Data of a runStart event; a pseudo-suite over every module."""

    full_name: list[str] = Field(default_factory=list)
    child_suites: list[SuiteStart] = Field(default_factory=list)
    tests: list[TestInfo] = Field(default_factory=list)
    test_counts: StartCounts


class RunEnd(_Normalized):
    """Data of a runEnd event."""

    full_name: list[str] = Field(default_factory=list)
    child_suites: list[SuiteEnd] = Field(default_factory=list)
    tests: list[TestEnd] = Field(default_factory=list)
    status: TestStatus
    runtime: float = 0.0
    test_counts: TestCounts


class SuiteStartEvent(_Normalized):
    """Envelope for suiteStart."""

    event: Literal["suiteStart"] = "suiteStart"
    data: SuiteStart


class SuiteEndEvent(_Normalized):
    """Envelope for suiteEnd."""

    event: Literal["suiteEnd"] = "suiteEnd"
    data: SuiteEnd


class TestStartEvent(_Normalized):
    """Envelope for testStart."""

    __test__ = False

    event: Literal["testStart"] = "testStart"
    data: TestStart


class TestEndEvent(_Normalized):
    """Envelope for testEnd."""

    __test__ = False

    event: Literal["testEnd"] = "testEnd"
    data: TestEnd


class RunStartEvent(_Normalized):
    """Envelope for runStart."""

    event: Literal["runStart"] = "runStart"
    data: RunStart


class RunEndEvent(_Normalized):
    """Envelope for runEnd."""

    event: Literal["runEnd"] = "runEnd"
    data: RunEnd


NormalizedEvent = (
    SuiteStartEvent
    | SuiteEndEvent
    | TestStartEvent
    | TestEndEvent
    | RunStartEvent
    | RunEndEvent
)
