"""Resolve names from callback payloads to records in the engine state.

Names are not unique: several modules (or tests across modules) may share one.
Resolvers return every match and leave the tie-break to the caller.
"""

from collections.abc import Sequence

from boostsec.test_event_normalizer.models.state_tree import (
    ModuleInfo,
    StateTree,
    TestRecord,
)


class NotFoundError(LookupError):
    """A name mentioned in an event has no record in the state snapshot."""

    def __init__(self, kind: str, name: str, known_names: Sequence[str]) -> None:
        """Build the diagnostic message listing every known name."""
        self.kind = kind
        self.name = name
        self.known_names = list(known_names)
        super().__init__(
            f'{kind} "{name}" mentioned in event, but not found in state.\n'
            f"Only found ({', '.join(self.known_names)})"
        )


def resolve_module(tree: StateTree, name: str) -> list[ModuleInfo]:
    """Return all modules named ``name``.

    Raises:
        NotFoundError: If no module has that name

    """
    matches = [m for m in tree.modules if m.name == name]
    if not matches:
        raise NotFoundError("Module", name, [m.name for m in tree.modules])
    return matches


def resolve_test(modules: Sequence[ModuleInfo], name: str) -> list[TestRecord]:
    """Return all tests named ``name`` directly owned by any of ``modules``.

    Raises:
        NotFoundError: If none of the modules owns a test with that name

    """
    all_tests = [t for m in modules for t in m.suite_report.tests]
    matches = [t for t in all_tests if t.name == name]
    if not matches:
        raise NotFoundError("Test", name, [t.name for t in all_tests])
    return matches
