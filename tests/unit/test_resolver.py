"""Tests for name resolution against the engine state."""

import pytest

from boostsec.test_event_normalizer.models.state_tree import StateTree
from boostsec.test_event_normalizer.resolver import (
    NotFoundError,
    resolve_module,
    resolve_test,
)
from conftest import raw_module, raw_test


@pytest.fixture
def duplicate_tree() -> StateTree:
    """Two modules named "dup", each owning a test named "same"."""
    return StateTree.model_validate(
        {
            "modules": [
                raw_module("dup", "d1", [raw_test("same", "dup")]),
                raw_module("dup", "d2", [raw_test("same", "dup"), raw_test("x", "dup")]),
                raw_module("other", "o1", [raw_test("same", "other")]),
            ]
        }
    )


def test_resolve_module_single_match(two_module_tree: StateTree) -> None:
    """resolve_module returns the one module with the name."""
    matches = resolve_module(two_module_tree, "B")
    assert [m.module_id for m in matches] == ["b1"]


def test_resolve_module_returns_every_match(duplicate_tree: StateTree) -> None:
    """resolve_module returns all duplicates in state order."""
    matches = resolve_module(duplicate_tree, "dup")
    assert [m.module_id for m in matches] == ["d1", "d2"]


def test_resolve_module_missing_lists_known_names(two_module_tree: StateTree) -> None:
    """resolve_module raises NotFoundError naming every known module."""
    with pytest.raises(NotFoundError) as exc_info:
        resolve_module(two_module_tree, "Nonexistent")
    message = str(exc_info.value)
    assert '"Nonexistent"' in message
    assert "A, B" in message
    assert exc_info.value.kind == "Module"
    assert exc_info.value.known_names == ["A", "B"]


def test_resolve_module_empty_tree() -> None:
    """resolve_module fails on a snapshot with no modules."""
    with pytest.raises(NotFoundError, match=r"Only found \(\)"):
        resolve_module(StateTree(), "A")


def test_not_found_error_is_lookup_error() -> None:
    """NotFoundError can be caught as a LookupError."""
    assert issubclass(NotFoundError, LookupError)


def test_resolve_test_within_modules(two_module_tree: StateTree) -> None:
    """resolve_test finds a test owned by the given modules."""
    modules = resolve_module(two_module_tree, "A")
    matches = resolve_test(modules, "t2")
    assert [t.name for t in matches] == ["t2"]


def test_resolve_test_searches_all_given_modules(duplicate_tree: StateTree) -> None:
    """resolve_test flattens the tests of every matched module."""
    modules = resolve_module(duplicate_tree, "dup")
    assert len(resolve_test(modules, "same")) == 2
    assert len(resolve_test(modules, "x")) == 1


def test_resolve_test_ignores_other_modules(two_module_tree: StateTree) -> None:
    """resolve_test does not look outside the given modules."""
    modules = resolve_module(two_module_tree, "A")
    with pytest.raises(NotFoundError) as exc_info:
        resolve_test(modules, "t3")
    assert exc_info.value.kind == "Test"
    assert exc_info.value.known_names == ["t1", "t2"]
    assert "t1, t2" in str(exc_info.value)
