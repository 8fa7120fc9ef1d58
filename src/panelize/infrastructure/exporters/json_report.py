"""Panel report as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from panelize.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from panelize.application.dtos import PanelizeOutput


@ExporterRegistry.register("json")
class JsonReportExporter:
    """Walls, their panel groups and batch totals as a JSON document."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: PanelizeOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")

    def export_string(self, output: PanelizeOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: PanelizeOutput) -> dict[str, Any]:
        return {
            "source": output.source_name,
            "catalog": [
                {"width": panel.width, "height": panel.height}
                for panel in output.catalog
            ],
            "walls": [
                {
                    "length": result.wall.length,
                    "width": result.wall.width,
                    "height": result.wall.height,
                    "category": result.wall.category,
                    "sides": [result.wall.side1, result.wall.side2],
                    "panels": [
                        {
                            "width": a.width,
                            "height": a.height,
                            "count": a.count,
                        }
                        for a in result.assignments
                    ],
                    "waste": result.waste,
                }
                for result in output.results
            ],
            "discarded": [
                {"index": d.index, "reason": d.reason} for d in output.discarded
            ],
            "totals": {
                "walls": len(output.results),
                "panels": output.total_panels,
                "by_width": [
                    {"width": width, "count": count}
                    for width, count in output.panel_totals.items()
                ],
                "waste": output.total_waste,
            },
        }
