"""Classification catalog and redaction preview CLI commands."""

import json
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from safelog.schemas.classification import RecordClassification, RedactionOutput


def _print_classification(report: RecordClassification) -> None:
    typer.echo(f"{report.record_type} ({report.model}): {len(report.fields)} of {report.field_count} fields classified")
    for field in report.fields:
        notes = f" -- {field.notes}" if field.notes else ""
        typer.echo(f"  {field.name:<24} {field.level.value:<11} {field.policy.value}{notes}")


def classifications(
    record_type: str | None = typer.Argument(None, help="Registered record type (omit to list all)"),
) -> None:
    """Show which fields of each record type are masked in logs."""
    from safelog.services.classification_service import describe_record_type, list_classifications

    if record_type is None:
        for report in list_classifications():
            _print_classification(report)
        return

    try:
        report = describe_record_type(record_type)
    except LookupError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    _print_classification(report)


def redact(
    record_type: str = typer.Argument(..., help="Registered record type, e.g. customer-basket"),
    file: Path | None = typer.Argument(None, help="JSON file holding the record (reads stdin when omitted)"),
    output: RedactionOutput = typer.Option(RedactionOutput.TEXT, "--output", "-o", help="Output shape"),
) -> None:
    """Print a JSON record exactly as it would appear in the logs."""
    from safelog.core.config import get_settings
    from safelog.services.classification_service import redact_payload, safe_validation_errors

    raw = file.read_text(encoding="utf-8") if file is not None else sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: input is not valid JSON (line {e.lineno}, column {e.colno})", err=True)
        raise typer.Exit(code=1) from e

    settings = get_settings()
    try:
        result = redact_payload(record_type, payload, output, max_fields=settings.max_payload_fields)
    except LookupError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    except ValidationError as e:
        typer.echo(f"Error: payload is not a valid {record_type} record", err=True)
        for error in safe_validation_errors(e):
            location = ".".join(str(part) for part in error["loc"])
            typer.echo(f"  {location}: {error['msg']}", err=True)
        raise typer.Exit(code=1) from e
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if output == RedactionOutput.MAP:
        typer.echo(json.dumps(result.model_dump(mode="json")["fields"], indent=2))
    else:
        typer.echo(result.text)
