"""Best-fit panel layout engine.

Walls are assumed to be covered symmetrically about their midpoint, so the
engine only fits half of the wall and doubles the resulting counts. When the
half-wall is an exact multiple of a half panel, the full panel is used with
an odd count; the odd panel bridges the midline.

Each wall is fitted in at most two passes over the candidate list (every
catalog width followed by its half width, in declaration order):

1. Primary pass over the half-wall. The first candidate that divides the
   space exactly wins and ends the pass. Otherwise the declared width with
   the smallest remainder is used as many times as it fits.
2. Leftover pass. The same procedure runs once over whatever the primary
   pass left. Anything still uncovered is accepted as waste.

This is a greedy heuristic, not an optimal cover. Scan order and tie-breaks
are part of the contract: identical inputs give identical assignments.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..entities import PanelCatalog, Wall
from ..exceptions import EmptyCatalogError
from ..value_objects import BridgeScope, Candidate, PanelAssignment, PanelType
from .assignment_registry import AssignmentRegistry

logger = logging.getLogger(__name__)

__all__ = [
    "BestFitLayoutEngine",
    "FitOutcome",
    "LayoutContext",
    "LayoutResult",
    "compute_layout",
    "fit_space",
]


@dataclass
class LayoutContext:
    """Working state for laying out one wall.

    Owned by the caller and passed into :func:`fit_space` for each pass.

    Attributes:
        wall: Wall being laid out; receives the assignments.
        candidates: Candidate list derived from the catalog.
        registry: Registry that records assignments on the wall.
        pass_widths: Full widths recorded during the current pass.
    """

    wall: Wall
    candidates: Sequence[Candidate]
    registry: AssignmentRegistry = field(default_factory=AssignmentRegistry)
    pass_widths: set[float] = field(default_factory=set)

    def begin_pass(self) -> None:
        self.pass_widths.clear()

    def record(self, panel: PanelType, count: int) -> PanelAssignment:
        """Record ``count`` panels of ``panel`` on the wall."""
        self.pass_widths.add(panel.width)
        return self.registry.add_assignment(
            self.wall, panel.width, panel.height, count
        )

    def already_recorded(self, width: float, scope: BridgeScope) -> bool:
        """Whether ``width`` counts as recorded under the given scope."""
        if scope is BridgeScope.PASS:
            return width in self.pass_widths
        return self.registry.has_width(self.wall, width)


@dataclass(frozen=True)
class FitOutcome:
    """Result of fitting one span of space.

    Attributes:
        space: Half-wall space that was fitted.
        leftover: Space left uncovered by this pass.
        exact: True when a candidate divided the space exactly.
        panel: Panel recorded by this pass, if any.
        count: Number of panels recorded (already doubled for symmetry).
        bridging: True when the count includes a midline bridging panel.
        suppressed: True when an exact bridging fit was skipped because its
            full width was already recorded.
    """

    space: float
    leftover: float
    exact: bool = False
    panel: PanelType | None = None
    count: int = 0
    bridging: bool = False
    suppressed: bool = False


def _divide(space: float, width: float) -> tuple[int, float]:
    """Whole panels of ``width`` fitting in ``space`` and the remainder.

    The remainder is ``space - count * width`` in plain float arithmetic,
    not ``math.fmod``: a quotient that rounds to a whole number counts as
    an exact fit.
    """
    count = math.floor(space / width)
    return count, space - count * width


def _exact_fit(
    context: LayoutContext, space: float, scope: BridgeScope
) -> FitOutcome | None:
    """First candidate, in scan order, that divides ``space`` exactly."""
    for candidate in context.candidates:
        if candidate.width > space:
            continue
        count, remainder = _divide(space, candidate.width)
        logger.debug(
            "  try %.6g%s: %d fit, %.6g left",
            candidate.width,
            " (half)" if candidate.is_half else "",
            count,
            remainder,
        )
        if remainder != 0:
            continue

        if candidate.declared is not None:
            context.record(candidate.declared, 2 * count)
            return FitOutcome(
                space=space,
                leftover=0.0,
                exact=True,
                panel=candidate.declared,
                count=2 * count,
            )
        return _bridge(context, space, candidate.panel, scope)
    return None


def _bridge(
    context: LayoutContext, space: float, panel: PanelType, scope: BridgeScope
) -> FitOutcome:
    """Cover ``space`` with full panels plus one panel over the midline."""
    recorded = context.already_recorded(panel.width, scope)
    if context.already_recorded(
        panel.width, BridgeScope.PASS
    ) != context.already_recorded(panel.width, BridgeScope.WALL):
        # The two scopes give different answers for this panel.
        logger.warning(
            "Wall %.6g: bridging scopes disagree for %.6g panel; %s scope %s it",
            context.wall.length,
            panel.width,
            scope.value,
            "skips" if recorded else "adds",
        )

    if recorded:
        logger.warning(
            "Wall %.6g: bridging %.6g panel already recorded; %.6g left unfilled",
            context.wall.length,
            panel.width,
            space,
        )
        return FitOutcome(
            space=space, leftover=space, exact=True, panel=panel, suppressed=True
        )

    count = 2 * _divide(space, panel.width)[0] + 1
    context.record(panel, count)
    return FitOutcome(
        space=space,
        leftover=0.0,
        exact=True,
        panel=panel,
        count=count,
        bridging=True,
    )


def _best_remainder_fit(context: LayoutContext, space: float) -> FitOutcome | None:
    """Declared width leaving the smallest remainder; first one wins ties."""
    best: PanelType | None = None
    best_remainder = space
    for candidate in context.candidates:
        if candidate.declared is None or candidate.width > space:
            continue
        remainder = _divide(space, candidate.width)[1]
        if remainder < best_remainder:
            best, best_remainder = candidate.declared, remainder

    if best is None:
        return None

    fitted, leftover = _divide(space, best.width)
    context.record(best, 2 * fitted)
    return FitOutcome(space=space, leftover=leftover, panel=best, count=2 * fitted)


def fit_space(
    context: LayoutContext, space: float, scope: BridgeScope = BridgeScope.WALL
) -> FitOutcome:
    """Fit one span of half-wall space with panels from the candidate list.

    Tries an exact fit first, then the smallest-remainder declared width,
    and otherwise leaves the space uncovered.

    Args:
        context: Layout state for the wall; receives any assignment.
        space: Half-wall space to fit.
        scope: Where to look when deciding whether a bridging panel was
            already recorded.

    Returns:
        FitOutcome describing what was recorded and what is left.
    """
    context.begin_pass()
    if space <= 0:
        return FitOutcome(space=space, leftover=0.0)
    return (
        _exact_fit(context, space, scope)
        or _best_remainder_fit(context, space)
        or FitOutcome(space=space, leftover=space)
    )


@dataclass(frozen=True)
class LayoutResult:
    """Panels chosen for one wall.

    Attributes:
        wall: The wall, with its assignments attached.
        assignments: Merged assignments, in the order they were recorded.
        half_leftover: Space left uncovered on each half of the wall.
        passes: Outcome of each fitting pass that ran.
    """

    wall: Wall
    assignments: tuple[PanelAssignment, ...]
    half_leftover: float
    passes: tuple[FitOutcome, ...] = ()

    @property
    def waste(self) -> float:
        """Total uncovered length across both halves."""
        return 2 * self.half_leftover

    @property
    def total_panels(self) -> int:
        return sum(a.count for a in self.assignments)


class BestFitLayoutEngine:
    """Computes panel assignments for walls from a fixed catalog.

    The candidate list is derived once from the catalog and shared
    read-only by every wall, so one engine can serve many walls, including
    from several threads.

    Attributes:
        catalog: Panel catalog scanned in declaration order.
        primary_scope: Bridging check used by the primary pass.
        leftover_scope: Bridging check used by the leftover pass.
    """

    def __init__(
        self,
        catalog: PanelCatalog,
        primary_scope: BridgeScope = BridgeScope.WALL,
        leftover_scope: BridgeScope = BridgeScope.PASS,
    ) -> None:
        self.catalog = catalog
        self.primary_scope = primary_scope
        self.leftover_scope = leftover_scope

    def layout(self, wall: Wall) -> LayoutResult:
        """Replace the wall's assignments with a best-fit layout.

        Args:
            wall: Wall to lay out. Existing assignments are discarded.

        Returns:
            LayoutResult with the merged assignments and leftover space.

        Raises:
            EmptyCatalogError: If the catalog has no panel types.
        """
        if not self.catalog:
            raise EmptyCatalogError()

        wall.assignments.clear()
        context = LayoutContext(wall=wall, candidates=self.catalog.candidates())
        half = wall.length / 2
        logger.debug("Wall %.6g: fitting half-length %.6g", wall.length, half)

        primary = fit_space(context, half, self.primary_scope)
        passes = [primary]
        leftover = primary.leftover
        if leftover > 0:
            secondary = fit_space(context, leftover, self.leftover_scope)
            passes.append(secondary)
            leftover = secondary.leftover

        context.registry.merge_duplicates(wall)
        context.registry.forget(wall)
        if leftover > 0:
            logger.debug(
                "Wall %.6g: %.6g uncovered on each half", wall.length, leftover
            )
        return LayoutResult(
            wall=wall,
            assignments=tuple(wall.assignments),
            # A few ulps of overshoot from a rounded quotient is not waste.
            half_leftover=max(leftover, 0.0),
            passes=tuple(passes),
        )

    def layout_all(self, walls: Iterable[Wall]) -> list[LayoutResult]:
        """Lay out each wall in order."""
        return [self.layout(wall) for wall in walls]


def compute_layout(wall: Wall, catalog: PanelCatalog) -> list[PanelAssignment]:
    """Best-fit panel assignments for one wall using default bridge scopes."""
    return list(BestFitLayoutEngine(catalog).layout(wall).assignments)
