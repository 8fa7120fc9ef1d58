"""Panel catalog reader for delimited text tables.

The catalog file is a CSV whose header row names a panel width column.
Rows above the header are ignored, so spreadsheets with a title block
export cleanly.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from panelize.domain import PanelCatalog, PanelizeError, PanelType

logger = logging.getLogger(__name__)

# Header spellings accepted for the width column.
WIDTH_HEADERS: tuple[str, ...] = (
    "Panel Width",
    "PanelWidth",
    "Panel width",
    "panel width",
    "PANEL WIDTH",
    "PANEL_WIDTH",
    "panel_width",
    "panelWidth",
)

HEIGHT_HEADERS: tuple[str, ...] = (
    "Panel Height",
    "PanelHeight",
    "Panel height",
    "panel height",
    "PANEL HEIGHT",
    "PANEL_HEIGHT",
    "panel_height",
    "panelHeight",
)


class CatalogSourceError(PanelizeError):
    """Raised when a catalog source is missing, unreadable or malformed.

    Attributes:
        message: The primary error message.
        error_type: Category of error (file_not_found, bad_extension,
            file_read_error, missing_column, invalid_value, empty).
        path: Path to the catalog source (if applicable).
        details: Additional error details (row numbers, offending values).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _find_column(row: Sequence[str], headers: Iterable[str]) -> int | None:
    """Index of the first cell containing one of ``headers``."""
    for index, cell in enumerate(row):
        if any(header in cell for header in headers):
            return index
    return None


def _parse_number(
    row: Sequence[str], column: int | None, line: int, name: str, path: Path | None
) -> float | None:
    if column is None or column >= len(row) or not row[column].strip():
        return None
    text = row[column].strip()
    try:
        return float(text)
    except ValueError:
        raise CatalogSourceError(
            message=f"Invalid {name} {text!r} on line {line} of {path}",
            error_type="invalid_value",
            path=path,
            details=[{"line": line, "column": column, "value": text}],
        )


def parse_catalog_rows(
    rows: Iterable[Sequence[str]], path: Path | None = None
) -> PanelCatalog:
    """Build a catalog from already-split CSV rows.

    Args:
        rows: Rows of cells, header row included.
        path: Source path, used in error messages only.

    Returns:
        PanelCatalog in file order.

    Raises:
        CatalogSourceError: If no width column is found, a value is not a
            positive number, widths repeat, or no panels are listed.
    """
    width_col: int | None = None
    height_col: int | None = None
    panels: list[PanelType] = []

    for line, row in enumerate(rows, start=1):
        if width_col is None:
            width_col = _find_column(row, WIDTH_HEADERS)
            if width_col is not None:
                height_col = _find_column(row, HEIGHT_HEADERS)
                logger.debug(
                    "Catalog header on line %d: width column %d, height column %s",
                    line,
                    width_col,
                    height_col,
                )
            continue

        width = _parse_number(row, width_col, line, "panel width", path)
        if width is None:
            continue
        height = _parse_number(row, height_col, line, "panel height", path) or 0.0
        try:
            panels.append(PanelType(width=width, height=height))
        except ValueError as e:
            raise CatalogSourceError(
                message=f"Invalid panel on line {line} of {path}: {e}",
                error_type="invalid_value",
                path=path,
                details=[{"line": line, "value": width}],
            )

    if width_col is None:
        raise CatalogSourceError(
            message=(
                f"No panel width column in {path}; expected a header such as "
                f"'Panel Width' or 'panel_width'"
            ),
            error_type="missing_column",
            path=path,
        )
    if not panels:
        raise CatalogSourceError(
            message=f"No panels listed in {path}",
            error_type="empty",
            path=path,
        )

    try:
        catalog = PanelCatalog(panels)
    except ValueError as e:
        raise CatalogSourceError(
            message=f"Invalid catalog {path}: {e}",
            error_type="invalid_value",
            path=path,
        )
    logger.info("Loaded %d panel types from %s", len(catalog), path)
    return catalog


def read_catalog_csv(path: Path) -> PanelCatalog:
    """Load a panel catalog from a CSV file.

    Args:
        path: Path to a ``.csv`` file.

    Returns:
        PanelCatalog in file order.

    Raises:
        CatalogSourceError: If the file is missing, is not a CSV file,
            cannot be read, or its contents are invalid.
    """
    path = Path(path)
    if path.suffix.lower() != ".csv":
        raise CatalogSourceError(
            message=f"Panel catalog must be a .csv file: {path}",
            error_type="bad_extension",
            path=path,
        )
    if not path.exists():
        raise CatalogSourceError(
            message=f"Panel catalog not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        with path.open(newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogSourceError(
            message=f"Error reading panel catalog: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    return parse_catalog_rows(rows, path)
