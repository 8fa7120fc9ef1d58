"""Panel report as a delimited text table.

One row per wall carries the wall dimensions and its first panel group;
each further panel group gets a continuation row with the wall cells left
empty::

    Wall Length,Wall Width,Wall Height,Panel Width,Number of Panels
    12,0,0,2,6
    13.4,0,0,2,6
    ,,,0.5,2
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from panelize.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from panelize.application.dtos import PanelizeOutput

REPORT_HEADER: tuple[str, ...] = (
    "Wall Length",
    "Wall Width",
    "Wall Height",
    "Panel Width",
    "Number of Panels",
)


def format_number(value: float) -> str:
    """Shortest general rendering, e.g. 12.0 -> '12', 0.75 -> '0.75'."""
    return f"{value:g}"


@ExporterRegistry.register("csv")
class CsvReportExporter:
    """Writes the per-wall panel table."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: PanelizeOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8", newline="")

    def export_string(self, output: PanelizeOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(REPORT_HEADER)
        for wall in output.walls:
            dims = [
                format_number(wall.length),
                format_number(wall.width),
                format_number(wall.height),
            ]
            if not wall.assignments:
                writer.writerow(dims + ["", ""])
                continue
            for i, assignment in enumerate(wall.assignments):
                lead = dims if i == 0 else ["", "", ""]
                writer.writerow(
                    lead + [format_number(assignment.width), str(assignment.count)]
                )
        return buffer.getvalue()
