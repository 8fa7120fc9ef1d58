"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from panelize.domain import (
    BridgeScope,
    InvalidWallInput,
    PanelCatalog,
    RawShape,
    Wall,
)
from panelize.domain.services import DiscardedShape, LayoutResult


@dataclass
class ShapeInput:
    """Input DTO for one detection: two sides or four vertices."""

    side1: float | None = None
    side2: float | None = None
    vertices: Sequence[Sequence[float]] | None = None
    category: str | None = None

    def to_raw_shape(self) -> RawShape:
        """Convert to a RawShape.

        Raises:
            InvalidWallInput: If neither sides nor vertices are usable.
        """
        if self.vertices is not None:
            return RawShape.from_vertices(self.vertices, category=self.category)
        if self.side1 is None or self.side2 is None:
            raise InvalidWallInput("shape needs side1 and side2, or four vertices")
        return RawShape(side1=self.side1, side2=self.side2, category=self.category)


@dataclass
class PanelizeRequest:
    """Input DTO for a panelization run."""

    shapes: list[ShapeInput]
    catalog: PanelCatalog
    scale: float = 0.1
    noise_threshold: float = 5.0
    min_thickness: float | None = None
    max_thickness: float | None = None
    primary_bridge_scope: BridgeScope = BridgeScope.WALL
    leftover_bridge_scope: BridgeScope = BridgeScope.PASS
    workers: int = 1

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.scale <= 0:
            errors.append("Scale must be positive")
        if self.noise_threshold <= 0:
            errors.append("Noise threshold must be positive")
        if self.min_thickness is not None and self.min_thickness < 0:
            errors.append("Minimum thickness cannot be negative")
        if (
            self.min_thickness is not None
            and self.max_thickness is not None
            and self.min_thickness > self.max_thickness
        ):
            errors.append("Minimum thickness cannot exceed maximum thickness")
        if self.workers < 1:
            errors.append("Must use at least 1 worker")
        return errors


@dataclass
class PanelizeOutput:
    """Output DTO: walls in detection order with their panel layouts.

    Attributes:
        results: Layout result for each kept wall, in detection order.
        discarded: Detections dropped as noise or invalid input.
        catalog: Catalog the layouts were computed from.
        source_name: Name of the input the walls came from, if any.
        errors: Request-level error messages; empty on success.
    """

    results: list[LayoutResult]
    discarded: list[DiscardedShape]
    catalog: PanelCatalog
    source_name: str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def walls(self) -> list[Wall]:
        return [result.wall for result in self.results]

    @property
    def total_panels(self) -> int:
        return sum(result.total_panels for result in self.results)

    @property
    def total_waste(self) -> float:
        return sum(result.waste for result in self.results)

    @property
    def panel_totals(self) -> dict[float, int]:
        """Panels needed per width across all walls, in catalog order."""
        totals = {width: 0 for width in self.catalog.widths}
        for result in self.results:
            for assignment in result.assignments:
                totals[assignment.width] = (
                    totals.get(assignment.width, 0) + assignment.count
                )
        return {width: count for width, count in totals.items() if count}
