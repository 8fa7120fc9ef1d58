"""Infrastructure layer - catalog sources, formatters and report exporters."""

from .catalog_reader import (
    HEIGHT_HEADERS,
    WIDTH_HEADERS,
    CatalogSourceError,
    parse_catalog_rows,
    read_catalog_csv,
)
from .formatters import CatalogFormatter, TextSummaryFormatter
from .exporters import (
    REPORT_HEADER,
    CsvReportExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonReportExporter,
    TextReportExporter,
    default_report_path,
)

__all__ = [
    # Catalog source
    "CatalogSourceError",
    "HEIGHT_HEADERS",
    "WIDTH_HEADERS",
    "parse_catalog_rows",
    "read_catalog_csv",
    # Formatters
    "CatalogFormatter",
    "TextSummaryFormatter",
    # Exporters
    "CsvReportExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonReportExporter",
    "REPORT_HEADER",
    "TextReportExporter",
    "default_report_path",
]
