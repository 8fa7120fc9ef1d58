"""Unit tests for configuration merger and adapter.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- The adapter builds the request and catalog the command runs with
"""

from __future__ import annotations

from pathlib import Path

import pytest

from panelize.application.config import (
    ConfigError,
    PanelizeConfiguration,
    config_to_catalog,
    config_to_request,
    merge_config_with_cli,
    resolve_catalog_path,
)
from panelize.domain import BridgeScope, PanelCatalog, PanelType
from panelize.infrastructure import CatalogSourceError

CATALOGS_PATH = Path(__file__).parent.parent / "fixtures" / "catalogs"


@pytest.fixture
def base_config() -> PanelizeConfiguration:
    return PanelizeConfiguration.model_validate(
        {
            "schema_version": "1.0",
            "catalog": {"panels": [{"width": 3}, {"width": 2}]},
            "detection": {"scale": 0.2, "noise_threshold": 4, "min_thickness": 2},
            "walls": [
                {"side1": 100, "side2": 5, "category": "red"},
                {"vertices": [[0, 0], [10, 0], [10, 1], [0, 1]]},
            ],
            "layout": {"leftover_bridge_scope": "wall", "workers": 3},
            "output": {"path": "out.json", "format": "json"},
        }
    )


class TestMergeConfigWithCli:
    def test_no_overrides_returns_equivalent_config(
        self, base_config: PanelizeConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config)

        assert merged == base_config
        assert merged is not base_config

    def test_detection_overrides(self, base_config: PanelizeConfiguration) -> None:
        merged = merge_config_with_cli(base_config, scale=0.05, noise_threshold=8)

        assert merged.detection.scale == 0.05
        assert merged.detection.noise_threshold == 8
        assert merged.detection.min_thickness == 2
        assert base_config.detection.scale == 0.2

    def test_catalog_source_replaces_inline_panels(
        self, base_config: PanelizeConfiguration
    ) -> None:
        merged = merge_config_with_cli(base_config, catalog_source=Path("p.csv"))

        assert merged.catalog.source == "p.csv"
        assert merged.catalog.panels is None

    def test_output_overrides(self, base_config: PanelizeConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, workers=1, output_path=Path("r.csv"), output_format="csv"
        )

        assert merged.layout.workers == 1
        assert merged.output.path == "r.csv"
        assert merged.output.format == "csv"

    def test_out_of_range_override(self, base_config: PanelizeConfiguration) -> None:
        with pytest.raises(ConfigError) as exc:
            merge_config_with_cli(base_config, workers=0)

        assert exc.value.error_type == "validation"
        assert exc.value.details[0]["path"] == "layout.workers"


class TestConfigAdapter:
    def test_request_fields(self, base_config: PanelizeConfiguration) -> None:
        request = config_to_request(base_config)

        assert request.catalog == PanelCatalog.from_widths([3, 2])
        assert request.scale == 0.2
        assert request.noise_threshold == 4
        assert request.min_thickness == 2
        assert request.max_thickness is None
        assert request.primary_bridge_scope is BridgeScope.WALL
        assert request.leftover_bridge_scope is BridgeScope.WALL
        assert request.workers == 3

    def test_shapes_keep_order_and_form(
        self, base_config: PanelizeConfiguration
    ) -> None:
        shapes = config_to_request(base_config).shapes

        assert (shapes[0].side1, shapes[0].side2, shapes[0].category) == (100, 5, "red")
        raw = shapes[1].to_raw_shape()
        assert (raw.side1, raw.side2) == (10, 1)

    def test_default_catalog_keeps_unit_height(self) -> None:
        catalog = config_to_catalog(PanelizeConfiguration(schema_version="1.0"))

        assert catalog == PanelCatalog.default()

    def test_relative_source_resolved_against_base_dir(self) -> None:
        config = PanelizeConfiguration.model_validate(
            {"schema_version": "1.0", "catalog": {"source": "panels.csv"}}
        )

        assert resolve_catalog_path(config.catalog, CATALOGS_PATH) == (
            CATALOGS_PATH / "panels.csv"
        )
        catalog = config_to_catalog(config, base_dir=CATALOGS_PATH)
        assert catalog.panels[0] == PanelType(2.0, 1.0)

    def test_missing_source(self, tmp_path: Path) -> None:
        config = PanelizeConfiguration.model_validate(
            {"schema_version": "1.0", "catalog": {"source": "nope.csv"}}
        )

        with pytest.raises(CatalogSourceError):
            config_to_request(config, base_dir=tmp_path)
