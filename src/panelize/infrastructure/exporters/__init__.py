"""Report exporters for panelization output.

Importing this package registers the csv, json and text exporters.
"""

from panelize.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    default_report_path,
)
from panelize.infrastructure.exporters.csv_report import (
    REPORT_HEADER,
    CsvReportExporter,
    format_number,
)
from panelize.infrastructure.exporters.json_report import JsonReportExporter
from panelize.infrastructure.exporters.text_report import TextReportExporter

__all__ = [
    "CsvReportExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonReportExporter",
    "REPORT_HEADER",
    "TextReportExporter",
    "default_report_path",
    "format_number",
]
