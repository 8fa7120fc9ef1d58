"""Tests for the report exporter framework and report formats."""

from __future__ import annotations

import json
from pathlib import Path
from typing import ClassVar

import pytest

from panelize.application import PanelizeCommand, PanelizeRequest, ShapeInput
from panelize.application.dtos import PanelizeOutput
from panelize.domain import PanelCatalog
from panelize.infrastructure import (
    REPORT_HEADER,
    CatalogFormatter,
    CsvReportExporter,
    ExporterRegistry,
    ExportManager,
    JsonReportExporter,
    TextReportExporter,
    TextSummaryFormatter,
    default_report_path,
)


@pytest.fixture
def output() -> PanelizeOutput:
    """Three detections: a 12 wall, a noise blob, a 13 wall."""
    request = PanelizeRequest(
        shapes=[
            ShapeInput(side1=120, side2=10, category="red"),
            ShapeInput(side1=30, side2=25),
            ShapeInput(side1=10, side2=130, category="blue"),
        ],
        catalog=PanelCatalog.from_widths([2, 1.5, 0.5]),
    )
    return PanelizeCommand().execute(request, source_name="floor1.json")


@pytest.fixture
def mixed_output() -> PanelizeOutput:
    """A wall with two panel groups and one with none."""
    request = PanelizeRequest(
        shapes=[ShapeInput(side1=11, side2=1), ShapeInput(side1=1.5, side2=0.1)],
        catalog=PanelCatalog.from_widths([3, 2]),
        scale=1.0,
    )
    return PanelizeCommand().execute(request)


class TestExporterRegistry:
    def setup_method(self) -> None:
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_formats_registered(self) -> None:
        assert ExporterRegistry.get("csv") is CsvReportExporter
        assert ExporterRegistry.get("json") is JsonReportExporter
        assert ExporterRegistry.get("text") is TextReportExporter
        assert ExporterRegistry.available_formats() == ["csv", "json", "text"]

    def test_get_unknown_format_raises_key_error(self) -> None:
        with pytest.raises(KeyError, match="No exporter registered for format 'xlsx'"):
            ExporterRegistry.get("xlsx")

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("test_format")
        class TestExporter:
            format_name: ClassVar[str] = "test_format"
            file_extension: ClassVar[str] = "test"

            def export(self, output, path: Path) -> None:
                pass

        assert ExporterRegistry.is_registered("test_format")
        assert ExporterRegistry.get("test_format") is TestExporter


class TestCsvReport:
    def test_wire_shape(self, output: PanelizeOutput) -> None:
        text = CsvReportExporter().export_string(output)

        assert text.splitlines() == [
            ",".join(REPORT_HEADER),
            "12,0,0,2,6",
            "13,0,0,0.5,26",
        ]

    def test_continuation_rows_and_empty_walls(
        self, mixed_output: PanelizeOutput
    ) -> None:
        lines = CsvReportExporter().export_string(mixed_output).splitlines()

        assert lines[0] == (
            "Wall Length,Wall Width,Wall Height,Panel Width,Number of Panels"
        )
        assert lines[1:] == ["11,0,0,2,4", ",,,3,1", "1.5,0,0,,"]

    def test_export_writes_file(self, output: PanelizeOutput, tmp_path: Path) -> None:
        path = tmp_path / "report.csv"
        CsvReportExporter().export(output, path)

        assert path.read_text().startswith("Wall Length,")


class TestJsonReport:
    def test_structure(self, output: PanelizeOutput) -> None:
        data = json.loads(JsonReportExporter().export_string(output))

        assert data["source"] == "floor1.json"
        assert [w["length"] for w in data["walls"]] == [12.0, 13.0]
        assert data["walls"][0]["category"] == "red"
        assert data["walls"][1]["panels"] == [
            {"width": 0.5, "height": 0.0, "count": 26}
        ]
        assert data["discarded"][0]["index"] == 1
        assert data["totals"]["panels"] == 32
        assert data["totals"]["by_width"] == [
            {"width": 2.0, "count": 6},
            {"width": 0.5, "count": 26},
        ]


class TestTextReport:
    def test_summary_lists_walls_and_totals(self, output: PanelizeOutput) -> None:
        text = TextSummaryFormatter().format(output)

        assert "WALL PANELS" in text
        assert "2 wall(s), 32 panel(s)" in text
        assert "Discarded 1 shape(s):" in text
        assert "#1: aspect ratio" in text

    def test_no_walls(self) -> None:
        empty = PanelizeOutput(results=[], discarded=[], catalog=PanelCatalog.default())

        assert TextSummaryFormatter().format(empty) == "No walls found."

    def test_text_exporter_uses_summary(self, output: PanelizeOutput) -> None:
        assert TextReportExporter().export_string(output) == (
            TextSummaryFormatter().format(output)
        )

    def test_catalog_formatter_shows_scan_order(self) -> None:
        text = CatalogFormatter().format(PanelCatalog.default())

        assert "Scan order: 2, 1*, 1.5, 0.75*, 0.5, 0.25*" in text
        assert CatalogFormatter().format(PanelCatalog()) == "Catalog is empty."


class TestExportManager:
    def test_export_creates_parent_dirs(
        self, output: PanelizeOutput, tmp_path: Path
    ) -> None:
        path = ExportManager().export("csv", output, tmp_path / "nested" / "r.csv")

        assert path.exists()

    def test_export_all(self, output: PanelizeOutput, tmp_path: Path) -> None:
        files = ExportManager(tmp_path).export_all(["csv", "json", "text"], output, "floor1")

        assert files == {
            "csv": tmp_path / "floor1.csv",
            "json": tmp_path / "floor1.json",
            "text": tmp_path / "floor1.txt",
        }
        assert all(p.exists() for p in files.values())

    def test_default_report_path_replaces_extension(self) -> None:
        assert default_report_path(Path("plans/floor1.json"), "csv") == Path(
            "plans/floor1.csv"
        )
