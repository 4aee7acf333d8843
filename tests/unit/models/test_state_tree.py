"""Tests for engine state models."""

import pytest
from pydantic import ValidationError

from boostsec.test_event_normalizer.models.state_tree import (
    ModuleInfo,
    StateTree,
    SuiteRecord,
    TestRecord,
)
from conftest import raw_module, raw_test


def test_test_record_from_engine_keys() -> None:
    """TestRecord reads the engine's camelCase and underscored keys."""
    record = TestRecord.model_validate(raw_test("t1", "A", 2.0, 7.5))
    assert record.name == "t1"
    assert record.full_name == ["A", "t1"]
    assert record.suite_name == "A"
    assert record.start_time == 2.0
    assert record.end_time == 7.5
    assert record.skipped is False
    assert record.valid is True


def test_test_record_end_time_unset() -> None:
    """TestRecord keeps an unset end timestamp as None."""
    record = TestRecord.model_validate(raw_test("t1", "A", end=None))
    assert record.end_time is None


def test_test_record_reported_assertions() -> None:
    """TestRecord parses the assertions the engine recorded on it."""
    record = TestRecord.model_validate(
        raw_test(
            "t1",
            "A",
            assertions=[{"message": "ok", "passed": True, "stack": None, "todo": False}],
        )
    )
    assert len(record.assertions) == 1
    assert record.assertions[0].passed is True


def test_suite_record_nested_child_suites() -> None:
    """SuiteRecord parses child suites recursively."""
    suite = SuiteRecord.model_validate(
        {
            "name": "outer",
            "fullName": ["outer"],
            "childSuites": [
                {
                    "name": "inner",
                    "fullName": ["outer", "inner"],
                    "childSuites": [],
                    "tests": [raw_test("deep", "inner")],
                }
            ],
            "tests": [],
        }
    )
    assert suite.child_suites[0].name == "inner"
    assert suite.child_suites[0].tests[0].name == "deep"


def test_module_info_ignores_unknown_engine_keys() -> None:
    """ModuleInfo drops engine-only keys such as hooks."""
    module = ModuleInfo.model_validate(raw_module("A", "a1", []))
    assert module.module_id == "a1"
    assert module.suite_report.name == "A"
    assert not hasattr(module, "hooks")


def test_module_info_requires_suite_report() -> None:
    """ModuleInfo rejects a module without a suite report."""
    with pytest.raises(ValidationError) as exc_info:
        ModuleInfo.model_validate({"name": "A", "moduleId": "a1"})
    assert "suiteReport" in str(exc_info.value)


def test_state_tree_is_frozen(two_module_tree: StateTree) -> None:
    """StateTree snapshots cannot be mutated."""
    with pytest.raises(ValidationError):
        two_module_tree.modules[0].name = "changed"  # type: ignore[misc]


def test_module_stats_fractional_start() -> None:
    """ModuleStats keeps a high-resolution start timestamp."""
    tree = StateTree.model_validate(
        {
            "modules": [
                {
                    **raw_module("A", "a1", [raw_test("t1", "A")]),
                    "stats": {"all": 1, "bad": 0, "started": 1234.567},
                }
            ]
        }
    )
    assert tree.modules[0].stats.started == 1234.567
    assert tree.modules[0].stats.all == 1
