"""CLI entry point for normalizing a single lifecycle event."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from boostsec.test_event_normalizer.assembler import normalize_event
from boostsec.test_event_normalizer.models.normalizer_config import NormalizerConfig
from boostsec.test_event_normalizer.snapshot_loader import (
    load_assertion_log,
    load_state_tree,
)

logger = logging.getLogger(__name__)

app = typer.Typer()


def configure_logging(config: NormalizerConfig) -> None:
    """Send diagnostics to stderr so stdout carries only the event."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def parse_payload(payload_json: str) -> dict[str, Any]:
    """Parse the callback payload given on the command line."""
    try:
        payload = json.loads(payload_json)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in payload: {e}") from e
    if not isinstance(payload, dict):
        raise ValueError("Payload must be a JSON object")
    return payload


@app.command()
def main(
    state: Path = typer.Option(..., help="Engine state snapshot (YAML or JSON)"),  # noqa: B008
    event: str = typer.Option(
        ..., help="Event kind (suiteStart, suiteEnd, testStart, testEnd, ...)"
    ),
    payload: str = typer.Option("{}", help="JSON payload of the callback"),
    assertions: Optional[Path] = typer.Option(  # noqa: B008, UP007
        None, help="Assertion log (YAML or JSON) for end events"
    ),
    indent: int = typer.Option(2, help="JSON output indent"),
    log_level: str = typer.Option("INFO", help="Logging level"),
    strict_duplicates: bool = typer.Option(
        False, help="Fail when a name matches several records"
    ),
) -> None:
    """Normalize one engine lifecycle callback and print it as JSON."""
    try:
        config = NormalizerConfig.from_options(log_level, indent, strict_duplicates)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    configure_logging(config)
    logger.info(f"Normalizing {event} event from {state}")

    try:
        tree = load_state_tree(state)
        logger.info(f"Loaded state snapshot with {len(tree.modules)} modules")
        raw_assertions = load_assertion_log(assertions)
        normalized = normalize_event(
            event,
            tree,
            parse_payload(payload),
            raw_assertions,
            strict=config.strict_duplicates,
        )
    except (LookupError, ValueError, FileNotFoundError) as e:
        logger.error(f"Failed to normalize {event} event: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    output = normalized.model_dump(mode="json", by_alias=True)
    typer.echo(json.dumps(output, indent=config.indent))


if __name__ == "__main__":  # pragma: no cover
    app()
