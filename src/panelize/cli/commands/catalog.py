"""Catalog command: show a panel catalog and its scan order."""

from pathlib import Path
from typing import Annotated

import typer

from panelize.application import get_factory
from panelize.domain import PanelCatalog
from panelize.infrastructure import CatalogSourceError, read_catalog_csv


def catalog_command(
    catalog_file: Annotated[
        Path | None,
        typer.Argument(help="Panel catalog CSV; the reference catalog if omitted"),
    ] = None,
) -> None:
    """Show the panels in a catalog and the order they are tried.

    Example:
        panelize catalog panels.csv
    """
    if catalog_file is None:
        catalog = PanelCatalog.default()
    else:
        try:
            catalog = read_catalog_csv(catalog_file)
        except CatalogSourceError as e:
            typer.echo(f"Catalog error: {e.message}", err=True)
            raise typer.Exit(code=1)

    typer.echo(get_factory().get_catalog_formatter().format(catalog))
