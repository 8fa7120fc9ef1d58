"""Panel report as the terminal summary table."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from panelize.infrastructure.exporters.base import ExporterRegistry
from panelize.infrastructure.formatters import TextSummaryFormatter

if TYPE_CHECKING:
    from panelize.application.dtos import PanelizeOutput


@ExporterRegistry.register("text")
class TextReportExporter:
    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"

    def export(self, output: PanelizeOutput, path: Path) -> None:
        path.write_text(self.export_string(output) + "\n", encoding="utf-8")

    def export_string(self, output: PanelizeOutput) -> str:
        return TextSummaryFormatter().format(output)
