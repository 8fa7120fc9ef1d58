"""Validation structures and panelization advisory checks.

Schema validation happens in the loader. The checks here look at a
configuration that loaded cleanly and report problems only visible once
the catalog is resolved and the shapes are run through the noise filter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from panelize.application.config.adapter import config_to_catalog, config_to_shapes
from panelize.application.config.schema import PanelizeConfiguration
from panelize.domain import InvalidWallInput, NoiseFilter, PanelCatalog
from panelize.infrastructure.catalog_reader import CatalogSourceError


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "catalog.source")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_catalog_advisories(catalog: PanelCatalog) -> ValidationResult:
    """Warn about catalogs the layout engine treats in surprising ways.

    A half width equal to another catalog width is used as that full panel,
    so the wider panel never bridges at the midline.
    """
    result = ValidationResult()
    if not catalog:
        result.add_error("catalog", "Catalog has no panel types")
        return result

    for i, panel in enumerate(catalog):
        half = panel.width / 2
        if catalog.contains_width(half):
            result.add_warning(
                f"catalog.panels[{i}]",
                f"Half of {panel.width:g} equals catalog width {half:g}; "
                f"exact half-width fits use the {half:g} panel",
            )
    return result


def check_wall_advisories(config: PanelizeConfiguration) -> ValidationResult:
    """Warn when the noise filter would leave nothing to lay out."""
    result = ValidationResult()
    if not config.walls:
        result.add_warning("walls", "No wall shapes given")
        return result

    detection = config.detection
    noise_filter = NoiseFilter(
        scale=detection.scale,
        noise_threshold=detection.noise_threshold,
        min_thickness=detection.min_thickness,
        max_thickness=detection.max_thickness,
    )
    kept = 0
    for i, shape in enumerate(config_to_shapes(config)):
        try:
            noise_filter.to_wall(shape.to_raw_shape())
        except InvalidWallInput as e:
            if shape.vertices is not None:
                result.add_error(f"walls[{i}].vertices", str(e))
            continue
        kept += 1

    if kept == 0:
        result.add_warning(
            "detection.noise_threshold",
            f"None of the {len(config.walls)} shape(s) pass the noise filter",
            suggestion="Lower noise_threshold or widen the thickness window",
        )
    return result


def validate_config(
    config: PanelizeConfiguration, base_dir: Path | None = None
) -> ValidationResult:
    """Run every advisory check against a loaded configuration.

    Args:
        config: A configuration that passed schema validation.
        base_dir: Directory relative catalog paths are resolved against.

    Returns:
        ValidationResult with errors and warnings from all checks.
    """
    result = ValidationResult()
    try:
        catalog = config_to_catalog(config, base_dir)
    except CatalogSourceError as e:
        result.add_error("catalog.source", e.message, config.catalog.source)
    else:
        result.merge(check_catalog_advisories(catalog))
    result.merge(check_wall_advisories(config))
    return result
