"""Models for the execution engine's internal run state.

These mirror the engine's own records and validate straight from its key
spelling (``fullName``, ``_startTime``, ``suiteReport`` ...). They are frozen:
the normalization layer only ever reads a snapshot.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

_ENGINE_RECORD = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ReportedAssertion(BaseModel):
    """Assertion as the engine stores it on a test record."""

    model_config = _ENGINE_RECORD

    message: str | None = Field(default=None, description="Assertion message")
    passed: bool = Field(..., description="Whether the assertion held")
    stack: str | None = Field(default=None, description="Stack trace on failure")
    todo: bool = Field(default=False, description="Assertion belongs to a todo test")


class TestRecord(BaseModel):
    """A single test as tracked by the engine."""

    __test__ = False

    model_config = _ENGINE_RECORD

    name: str = Field(..., description="Bare test name (not unique)")
    full_name: list[str] = Field(
        default_factory=list, alias="fullName", description="Nesting path"
    )
    suite_name: str = Field(
        default="", alias="suiteName", description="Owning suite as recorded"
    )
    skipped: bool = Field(default=False, description="Test was skipped")
    todo: bool = Field(default=False, description="Test is marked todo")
    valid: bool = Field(default=True, description="Test passed engine filters")
    start_time: float = Field(
        default=0.0, alias="_startTime", description="Start timestamp (ms)"
    )
    end_time: float | None = Field(
        default=None,
        alias="_endTime",
        description="End timestamp (ms), unset while the test is running",
    )
    assertions: list[ReportedAssertion] = Field(
        default_factory=list, description="Assertions recorded so far"
    )


class SuiteRecord(BaseModel):
    """A suite report, possibly holding nested child suites."""

    model_config = _ENGINE_RECORD

    name: str = Field(..., description="Suite name")
    full_name: list[str] = Field(
        default_factory=list, alias="fullName", description="Nesting path"
    )
    child_suites: list[SuiteRecord] = Field(
        default_factory=list, alias="childSuites", description="Nested suites"
    )
    tests: list[TestRecord] = Field(
        default_factory=list, description="Tests owned directly by this suite"
    )
    start_time: float = Field(
        default=0.0, alias="_startTime", description="Start timestamp (ms)"
    )
    end_time: float | None = Field(
        default=None, alias="_endTime", description="End timestamp (ms)"
    )


class ModuleStats(BaseModel):
    """Run statistics the engine keeps per module."""

    model_config = _ENGINE_RECORD

    all: int = Field(default=0, description="Assertions run")
    bad: int = Field(default=0, description="Assertions failed")
    started: float = Field(default=0.0, description="Start timestamp (ms)")


class ModuleInfo(BaseModel):
    """Top-level grouping the engine tracks; the unit looked up by name."""

    model_config = _ENGINE_RECORD

    name: str = Field(..., description="Module name (not unique)")
    module_id: str = Field(..., alias="moduleId", description="Stable identifier")
    child_modules: list[ModuleInfo] = Field(
        default_factory=list, alias="childModules", description="Nested modules"
    )
    stats: ModuleStats = Field(default_factory=ModuleStats)
    suite_report: SuiteRecord = Field(..., alias="suiteReport")
    skip: bool | None = Field(default=None, description="Module is skipped")
    todo: bool | None = Field(default=None, description="Module is todo")
    tests_run: int = Field(default=0, alias="testsRun")
    unskipped_tests_run: int = Field(default=0, alias="unskippedTestsRun")


class StateTree(BaseModel):
    """Point-in-time snapshot of every module known to the engine."""

    model_config = _ENGINE_RECORD

    modules: list[ModuleInfo] = Field(
        default_factory=list, description="All modules, in registration order"
    )
