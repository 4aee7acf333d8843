"""Shared fixtures: engine state snapshots in the engine's own key spelling."""

from typing import Any

import pytest

from boostsec.test_event_normalizer.models.state_tree import StateTree


def raw_test(
    name: str,
    suite_name: str,
    start: float = 0.0,
    end: float | None = 5.0,
    **extra: Any,
) -> dict[str, Any]:
    """Build a raw engine test record."""
    return {
        "name": name,
        "fullName": [suite_name, name],
        "suiteName": suite_name,
        "skipped": False,
        "todo": False,
        "valid": True,
        "_startTime": start,
        "_endTime": end,
        "assertions": [],
        **extra,
    }


def raw_module(
    name: str,
    module_id: str,
    tests: list[dict[str, Any]],
    child_suites: list[dict[str, Any]] | None = None,
    start: float = 0.0,
    end: float | None = 10.0,
) -> dict[str, Any]:
    """Build a raw engine module wrapping one suite report."""
    return {
        "name": name,
        "moduleId": module_id,
        "childModules": [],
        "hooks": {"before": [], "after": []},
        "stats": {"all": 0, "bad": 0, "started": 0},
        "suiteReport": {
            "name": name,
            "fullName": [name],
            "childSuites": child_suites or [],
            "tests": tests,
            "_startTime": start,
            "_endTime": end,
        },
        "skip": None,
        "testsRun": 0,
        "todo": None,
        "unskippedTestsRun": 0,
    }


@pytest.fixture
def two_module_tree() -> StateTree:
    """Module A owns t1 and t2, module B owns t3."""
    return StateTree.model_validate(
        {
            "modules": [
                raw_module(
                    "A",
                    "a1",
                    [raw_test("t1", "A", 0.0, 4.0), raw_test("t2", "A", 4.0, 10.0)],
                    end=12.0,
                ),
                raw_module("B", "b1", [raw_test("t3", "B", 1.0, 3.0)], end=8.0),
            ]
        }
    )
