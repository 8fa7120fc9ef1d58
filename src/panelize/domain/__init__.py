"""Domain layer - walls, panel catalog and the best-fit layout engine."""

from .entities import PanelCatalog, Wall
from .exceptions import EmptyCatalogError, InvalidWallInput, PanelizeError
from .services import (
    AssignmentRegistry,
    BestFitLayoutEngine,
    FilterResult,
    LayoutResult,
    NoiseFilter,
    compute_layout,
    filter_walls,
    merge_assignments,
)
from .value_objects import (
    BridgeScope,
    Candidate,
    PanelAssignment,
    PanelType,
    Point2D,
    RawShape,
)

__all__ = [
    "AssignmentRegistry",
    "BestFitLayoutEngine",
    "BridgeScope",
    "Candidate",
    "EmptyCatalogError",
    "FilterResult",
    "InvalidWallInput",
    "LayoutResult",
    "NoiseFilter",
    "PanelAssignment",
    "PanelCatalog",
    "PanelType",
    "PanelizeError",
    "Point2D",
    "RawShape",
    "Wall",
    "compute_layout",
    "filter_walls",
    "merge_assignments",
]
