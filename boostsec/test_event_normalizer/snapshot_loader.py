"""Load engine state snapshots and assertion logs from YAML or JSON files."""

from pathlib import Path
from typing import Any

import yaml

from boostsec.test_event_normalizer.models.state_tree import StateTree


def read_document(path: Path) -> Any:
    """Parse a YAML (or JSON) document.

    Args:
        path: File to read

    Returns:
        The parsed document

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content is not valid YAML or the file is empty

    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty file: {path}")
    return data


def load_state_tree(path: Path) -> StateTree:
    """Load a state snapshot.

    The document is either a mapping with a ``modules`` key or a bare list of
    modules, as the engine keeps them in its config.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If YAML is invalid or doesn't match the state schema

    """
    data = read_document(path)
    if isinstance(data, list):
        data = {"modules": data}

    try:
        return StateTree.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid state snapshot schema in {path}: {e}") from e


def load_assertion_log(path: Path | None) -> Any:
    """Load an assertion log, or None when no path is given.

    Its shape is validated later, against the event it is used for.
    """
    if path is None:
        return None
    return read_document(path)
