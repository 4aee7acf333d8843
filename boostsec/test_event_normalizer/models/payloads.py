"""Partial payloads delivered with the engine's lifecycle callbacks."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_PAYLOAD = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class AssertionRecord(BaseModel):
    """One entry of the assertion log accumulated while a test runs."""

    model_config = _PAYLOAD

    message: str | None = Field(default=None, description="Assertion message")
    result: bool = Field(..., description="Whether the assertion held")
    expected: Any = Field(default=None, description="Expected value")
    actual: Any = Field(default=None, description="Actual value")


class ModuleStartDetails(BaseModel):
    """Payload of the module-start callback."""

    model_config = _PAYLOAD

    name: str = Field(..., description="Module name")


class ModuleDoneDetails(BaseModel):
    """Payload of the module-done callback."""

    model_config = _PAYLOAD

    name: str = Field(..., description="Module name")
    failed: int = Field(default=0)
    passed: int = Field(default=0)
    total: int = Field(default=0)
    runtime: float = Field(default=0.0)


class TestStartDetails(BaseModel):
    """Payload of the test-start callback."""

    __test__ = False

    model_config = _PAYLOAD

    name: str = Field(..., description="Test name")
    module: str = Field(..., description="Owning module name")


class TestDoneDetails(BaseModel):
    """Payload of the test-done callback."""

    __test__ = False

    model_config = _PAYLOAD

    name: str = Field(..., description="Test name")
    module: str = Field(..., description="Owning module name")
    failed: int = Field(default=0)
    passed: int = Field(default=0)
    total: int = Field(default=0)
    runtime: float = Field(default=0.0)
    skipped: bool = Field(default=False)
    todo: bool = Field(default=False)


class BeginDetails(BaseModel):
    """Payload of the run-begin callback."""

    model_config = _PAYLOAD

    total_tests: int = Field(default=0, alias="totalTests")


class DoneDetails(BaseModel):
    """Payload of the run-done callback."""

    model_config = _PAYLOAD

    failed: int = Field(default=0)
    passed: int = Field(default=0)
    total: int = Field(default=0)
    runtime: float = Field(default=0.0)
