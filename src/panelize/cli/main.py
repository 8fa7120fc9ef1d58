"""Typer CLI for wall panelization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from panelize.application import get_factory
from panelize.application.config import (
    ConfigError,
    config_to_request,
    load_config,
    merge_config_with_cli,
)
from panelize.cli.commands import catalog_command, display_config_error, validate_command
from panelize.domain import EmptyCatalogError
from panelize.infrastructure import (
    CatalogSourceError,
    ExporterRegistry,
    default_report_path,
)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = typer.Typer(
    name="panelize",
    help="Cover detected walls with stock panels using a best-fit layout.",
)

app.command(name="validate")(validate_command)
app.command(name="catalog")(catalog_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log layout decisions to stderr"),
    ] = False,
) -> None:
    """Cover detected walls with stock panels using a best-fit layout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@app.command()
def layout(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    catalog: Annotated[
        Path | None,
        typer.Option("--catalog", help="Panel catalog CSV (overrides the config)"),
    ] = None,
    scale: Annotated[
        float | None,
        typer.Option("--scale", "-s", help="Pixel to length factor"),
    ] = None,
    noise_threshold: Annotated[
        float | None,
        typer.Option("--noise-threshold", "-t", help="Minimum wall aspect ratio"),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", help="Walls laid out concurrently"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Report path; '-' writes to stdout. Defaults to the config name.",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Report format: csv, json, text"),
    ] = None,
) -> None:
    """Lay out panels for every wall in a configuration file.

    Example:
        panelize layout floor1.json --catalog panels.csv -o floor1.csv
    """
    if output_format is not None and not ExporterRegistry.is_registered(output_format):
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(
            f"Available formats: {', '.join(ExporterRegistry.available_formats())}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(config_file)
        config = merge_config_with_cli(
            config,
            scale=scale,
            noise_threshold=noise_threshold,
            catalog_source=catalog.resolve() if catalog is not None else None,
            workers=workers,
            output_format=output_format,
        )
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    base_dir = config_file.parent
    factory = get_factory()
    try:
        request = config_to_request(config, base_dir=base_dir)
        result = factory.get_panelize_command().execute(
            request, source_name=config_file.name
        )
    except CatalogSourceError as e:
        typer.echo(f"Catalog error: {e.message}", err=True)
        raise typer.Exit(code=1)
    except EmptyCatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    fmt = config.output.format
    exporter = ExporterRegistry.get(fmt)
    if output_file is not None and str(output_file) == "-":
        typer.echo(exporter().export_string(result))
        return

    if output_file is not None:
        path = output_file
    elif config.output.path is not None:
        path = base_dir / config.output.path
    else:
        path = default_report_path(config_file, exporter.file_extension)

    try:
        written = factory.create_export_manager().export(fmt, result, path)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(factory.get_summary_formatter().format(result))
    typer.echo(f"\nReport written to {written}")


if __name__ == "__main__":
    app()
