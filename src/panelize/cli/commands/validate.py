"""``panelize validate``: check a layout config without laying anything out.

Besides the schema, the config's catalog is loaded and its wall shapes are
run through the noise filter, so a config that would yield no walls is
caught before a layout run.
"""

from pathlib import Path
from typing import Annotated, Sequence

import typer

from panelize.application.config import (
    ConfigError,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    load_config,
    validate_config,
)

_LOAD_FAILURES = {
    "file_not_found": "File not found",
    "permission_denied": "Permission denied",
    "file_read_error": "Unreadable file",
    "json_parse": "Invalid JSON syntax",
}


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Layout config (JSON) to check"),
    ],
) -> None:
    """Check a layout config for errors and advisories.

    Exits 0 when clean, 1 on errors, 2 when only warnings were found.
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config, base_dir=config_file.parent)
    _echo_findings("Errors:", result.errors, err=True)
    _echo_findings("Warnings:", result.warnings)
    typer.echo(_summary(result), err=not result.is_valid)
    raise typer.Exit(code=result.exit_code)


def display_config_error(error: ConfigError) -> None:
    """Print why a config could not be loaded, one line per problem."""
    typer.echo("Errors:", err=True)
    if error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
        return

    failure = _LOAD_FAILURES.get(error.error_type)
    if failure is None:
        typer.echo(f"  {error.message}", err=True)
        return
    typer.echo(f"  {failure}: {error.path}", err=True)
    for detail in error.details:
        typer.echo(
            f"    Line {detail['line']}, Column {detail['column']}: "
            f"{detail['message']}",
            err=True,
        )


def _echo_findings(
    title: str,
    findings: Sequence[ValidationError | ValidationWarning],
    err: bool = False,
) -> None:
    if not findings:
        return
    typer.echo(title, err=err)
    for finding in findings:
        typer.echo(f"  {finding.path}: {finding.message}", err=err)
        if isinstance(finding, ValidationError) and finding.value is not None:
            typer.echo(f"    Value: {finding.value!r}", err=err)
        if isinstance(finding, ValidationWarning) and finding.suggestion:
            typer.echo(f"    Suggestion: {finding.suggestion}", err=err)
    typer.echo()


def _summary(result: ValidationResult) -> str:
    errors, warnings = len(result.errors), len(result.warnings)
    if errors:
        return f"Validation failed: {errors} error(s), {warnings} warning(s)"
    if warnings:
        return f"Validation passed with {warnings} warning(s)"
    return "Validation passed. Configuration is valid."
