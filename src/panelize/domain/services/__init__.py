"""Domain services for wall filtering and panel layout."""

from .assignment_registry import AssignmentRegistry, merge_assignments
from .layout_engine import (
    BestFitLayoutEngine,
    FitOutcome,
    LayoutContext,
    LayoutResult,
    compute_layout,
    fit_space,
)
from .noise_filter import DiscardedShape, FilterResult, NoiseFilter, filter_walls

__all__ = [
    "AssignmentRegistry",
    "BestFitLayoutEngine",
    "DiscardedShape",
    "FilterResult",
    "FitOutcome",
    "LayoutContext",
    "LayoutResult",
    "NoiseFilter",
    "compute_layout",
    "filter_walls",
    "fit_space",
    "merge_assignments",
]
