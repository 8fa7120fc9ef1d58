"""Adapter from PanelizeConfiguration to DTOs and domain objects."""

from __future__ import annotations

import logging
from pathlib import Path

from panelize.application.config.schema import CatalogConfig, PanelizeConfiguration
from panelize.application.dtos import PanelizeRequest, ShapeInput
from panelize.domain import PanelCatalog, PanelType
from panelize.infrastructure.catalog_reader import read_catalog_csv

logger = logging.getLogger(__name__)


def resolve_catalog_path(catalog: CatalogConfig, base_dir: Path | None) -> Path | None:
    """Path of the catalog CSV, relative paths taken from ``base_dir``."""
    if catalog.source is None:
        return None
    source = Path(catalog.source)
    if not source.is_absolute() and base_dir is not None:
        source = base_dir / source
    return source


def config_to_catalog(
    config: PanelizeConfiguration, base_dir: Path | None = None
) -> PanelCatalog:
    """Build the panel catalog named by the configuration.

    Args:
        config: A validated PanelizeConfiguration.
        base_dir: Directory relative catalog paths are resolved against,
            normally the config file's directory.

    Raises:
        CatalogSourceError: If the catalog CSV cannot be read.
    """
    source = resolve_catalog_path(config.catalog, base_dir)
    if source is not None:
        return read_catalog_csv(source)
    panels = config.catalog.panels or []
    return PanelCatalog(PanelType(width=p.width, height=p.height) for p in panels)


def config_to_shapes(config: PanelizeConfiguration) -> list[ShapeInput]:
    return [
        ShapeInput(
            side1=shape.side1,
            side2=shape.side2,
            vertices=shape.vertices,
            category=shape.category,
        )
        for shape in config.walls
    ]


def config_to_request(
    config: PanelizeConfiguration, base_dir: Path | None = None
) -> PanelizeRequest:
    """Convert a configuration to the PanelizeRequest run by PanelizeCommand.

    Example:
        >>> config = load_config(Path("floor1.json"))
        >>> request = config_to_request(config, base_dir=Path("."))
        >>> PanelizeCommand().execute(request)

    Raises:
        CatalogSourceError: If the catalog CSV cannot be read.
    """
    detection = config.detection
    layout = config.layout
    return PanelizeRequest(
        shapes=config_to_shapes(config),
        catalog=config_to_catalog(config, base_dir),
        scale=detection.scale,
        noise_threshold=detection.noise_threshold,
        min_thickness=detection.min_thickness,
        max_thickness=detection.max_thickness,
        primary_bridge_scope=layout.primary_bridge_scope,
        leftover_bridge_scope=layout.leftover_bridge_scope,
        workers=layout.workers,
    )
