"""Pydantic configuration schema models for panelization runs.

This module defines the schema for JSON configuration files describing a
batch of detected wall shapes, the panel catalog to cover them with, and
how the report is written. It uses Pydantic v2 for validation.

The BridgeScope enum is reused from the domain layer so configuration
values and engine options cannot drift apart.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from panelize.domain.value_objects import BridgeScope

# Supported schema versions for configuration files
# Version 1.0: Initial schema
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

REFERENCE_PANELS: tuple[tuple[float, float], ...] = ((2.0, 1.0), (1.5, 1.0), (0.5, 1.0))


class PanelConfig(BaseModel):
    """One stock panel type.

    Attributes:
        width: Panel width along the wall, in wall length units.
        height: Secondary dimension carried through to the report.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, allow_inf_nan=False)
    height: float = Field(default=0.0, ge=0, allow_inf_nan=False)


def _reference_panels() -> list[PanelConfig]:
    return [PanelConfig(width=w, height=h) for w, h in REFERENCE_PANELS]


class CatalogConfig(BaseModel):
    """Panel catalog: either an inline list or a CSV file, not both.

    When neither is given the reference catalog {2, 1.5, 0.5} is used.

    Attributes:
        panels: Inline panel types in scan order.
        source: Path to a catalog CSV, relative to the config file.
    """

    model_config = ConfigDict(extra="forbid")

    panels: list[PanelConfig] | None = None
    source: str | None = None

    @model_validator(mode="after")
    def validate_single_source(self) -> "CatalogConfig":
        """Validate that panels and source are mutually exclusive."""
        if self.panels is not None and self.source is not None:
            raise ValueError("Specify either 'panels' or 'source', not both")
        if self.panels is None and self.source is None:
            self.panels = _reference_panels()
        return self

    @field_validator("panels")
    @classmethod
    def validate_unique_widths(
        cls, v: list[PanelConfig] | None
    ) -> list[PanelConfig] | None:
        """Validate that no width appears twice."""
        if v is None:
            return v
        seen: set[float] = set()
        for panel in v:
            if panel.width in seen:
                raise ValueError(f"Duplicate panel width {panel.width:g}")
            seen.add(panel.width)
        return v


class DetectionConfig(BaseModel):
    """Noise filter settings.

    Attributes:
        scale: Pixel to wall length factor.
        noise_threshold: Minimum long/short side ratio for a wall.
        min_thickness: Optional minimum short side, in pixels.
        max_thickness: Optional maximum short side, in pixels.
    """

    model_config = ConfigDict(extra="forbid")

    scale: float = Field(default=0.1, gt=0)
    noise_threshold: float = Field(default=5.0, gt=0)
    min_thickness: float | None = Field(default=None, ge=0)
    max_thickness: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_thickness_window(self) -> "DetectionConfig":
        """Validate that max_thickness >= min_thickness when both are set."""
        if (
            self.min_thickness is not None
            and self.max_thickness is not None
            and self.max_thickness < self.min_thickness
        ):
            raise ValueError(
                f"max_thickness ({self.max_thickness}) must be >= "
                f"min_thickness ({self.min_thickness})"
            )
        return self


class WallShapeConfig(BaseModel):
    """One detected rectangle, as two side lengths or four vertices.

    Attributes:
        side1: First side length, in pixels.
        side2: Second side length, in pixels.
        vertices: Four [x, y] corners in order around the rectangle.
        category: Optional detector tag (e.g. mask color).
    """

    model_config = ConfigDict(extra="forbid")

    side1: float | None = Field(default=None, ge=0)
    side2: float | None = Field(default=None, ge=0)
    vertices: list[tuple[float, float]] | None = Field(
        default=None, min_length=4, max_length=4
    )
    category: str | None = None

    @model_validator(mode="after")
    def validate_shape_source(self) -> "WallShapeConfig":
        """Validate that exactly one of sides or vertices is given."""
        has_sides = self.side1 is not None or self.side2 is not None
        if has_sides and self.vertices is not None:
            raise ValueError("Specify either side1/side2 or vertices, not both")
        if self.vertices is None and (self.side1 is None or self.side2 is None):
            raise ValueError("Both side1 and side2 are required without vertices")
        return self


class LayoutConfig(BaseModel):
    """Layout engine settings.

    Attributes:
        primary_bridge_scope: Where the primary pass looks for an already
            recorded bridging width ("wall" or "pass").
        leftover_bridge_scope: Same, for the leftover pass.
        workers: Number of walls laid out concurrently.
    """

    model_config = ConfigDict(extra="forbid")

    primary_bridge_scope: BridgeScope = BridgeScope.WALL
    leftover_bridge_scope: BridgeScope = BridgeScope.PASS
    workers: int = Field(default=1, ge=1, le=32)


class OutputConfig(BaseModel):
    """Report output settings.

    Attributes:
        path: Report file path; derived from the config file name if unset.
        format: Report format.
    """

    model_config = ConfigDict(extra="forbid")

    path: str | None = None
    format: Literal["csv", "json", "text"] = "csv"


class PanelizeConfiguration(BaseModel):
    """Root configuration model for a panelization run.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        catalog: Panel catalog source
        detection: Noise filter settings
        walls: Detected shapes in detector order
        layout: Layout engine settings
        output: Report settings

    Example:
        >>> config = PanelizeConfiguration(
        ...     schema_version="1.0",
        ...     walls=[WallShapeConfig(side1=120, side2=10)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    walls: list[WallShapeConfig] = Field(default_factory=list)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
