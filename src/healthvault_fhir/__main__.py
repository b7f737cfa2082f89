"""Main CLI entry point for healthvault-fhir.

This module provides a command-line interface using Typer to convert HealthVault
items exported as JSON into FHIR resources:
1.  Loading configuration (environment and `.env`).
2.  Reading a JSON document holding one item object or a list of items.
3.  Validating each item into the source model for the selected item type.
4.  Converting each item through the transformer registry
    (healthvault_fhir.transformers.registry).
5.  Writing the FHIR JSON to stdout or an output file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from .config import get_settings
from .converter import thing_to_fhir, to_fhir_json
from .transformers.registry import registered_type_names, thing_type_by_name

# Load .env file if present (before any config access)
_env_file = find_dotenv(usecwd=True)
if _env_file:
    load_dotenv(_env_file)

logger = logging.getLogger(__name__)

app = typer.Typer(help="HealthVault to FHIR converter CLI")


@app.callback()
def main() -> None:  # pragma: no cover - simple callback
    """healthvault-fhir CLI.

    Use a subcommand like 'convert' to run a conversion.
    """
    pass


@app.command(help="List the HealthVault item types that can be converted.")
def types() -> None:
    for name in registered_type_names():
        typer.echo(name)


@app.command(help="Convert HealthVault item JSON into FHIR resource JSON.")
def convert(
    input_path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON file with one item or a list of items"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write FHIR JSON to this file instead of stdout"
    ),
    thing_type: str = typer.Option(
        "exercise", "--type", "-t", help="HealthVault item type name or type id of the input items"
    ),
    indent: Optional[int] = typer.Option(
        None, min=0, help="JSON indentation (0 = compact). Overrides OUTPUT_INDENT."
    ),
    fail_fast: Optional[bool] = typer.Option(
        None,
        "--fail-fast/--no-fail-fast",
        help="Abort on the first failing item. If not specified, uses FAIL_FAST from config/env.",
    ),
) -> None:
    """Convert every item in INPUT_PATH and emit the resulting FHIR JSON.

    A single item object produces a single resource object; a list produces a
    list in the same order. With --no-fail-fast, failing items are logged and
    left out of the output.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    effective_fail_fast = settings.FAIL_FAST if fail_fast is None else fail_fast
    effective_indent = settings.OUTPUT_INDENT if indent is None else indent

    try:
        model = thing_type_by_name(thing_type)
    except KeyError:
        raise typer.BadParameter(
            f"unknown item type {thing_type!r}; known: {', '.join(registered_type_names())}",
            param_hint="--type",
        ) from None
    if settings.THING_TYPES and not {model.type_name, model.type_id} & set(settings.THING_TYPES):
        raise typer.BadParameter(
            f"item type {model.type_name!r} disabled by THING_TYPES", param_hint="--type"
        )

    try:
        raw: Any = json.loads(input_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        typer.echo(f"Invalid JSON in {input_path}: {e}", err=True)
        raise typer.Exit(code=2)

    single = isinstance(raw, dict)
    if single:
        items: List[Any] = [raw]
    elif isinstance(raw, list):
        items = raw
    else:
        typer.echo(f"Expected a JSON object or array in {input_path}", err=True)
        raise typer.Exit(code=2)

    converted: List[dict] = []
    failed = 0
    for index, item in enumerate(items):
        try:
            thing = model.model_validate(item)
            resource = thing_to_fhir(thing)
        except (ValidationError, ValueError, IndexError, TypeError) as e:
            failed += 1
            if effective_fail_fast:
                logger.error("item %d failed: %s", index, e)
                typer.echo(f"Conversion aborted at item {index}", err=True)
                raise typer.Exit(code=1)
            logger.warning("skipping item %d: %s", index, e)
            continue
        converted.append(to_fhir_json(resource, exclude_none=settings.OUTPUT_EXCLUDE_NONE))

    payload: Any = converted[0] if single and converted else converted
    if single and not converted:
        payload = None
    text = json.dumps(payload, indent=effective_indent or None, ensure_ascii=False)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("Wrote %d resource(s) to %s", len(converted), output)
    else:
        typer.echo(text)
    typer.echo(
        f"Converted {len(converted)} item(s), skipped {failed}. type={model.type_name}",
        err=True,
    )


if __name__ == "__main__":  # pragma: no cover
    app()
