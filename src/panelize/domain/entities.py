"""Domain entities for wall panelization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .exceptions import InvalidWallInput
from .value_objects import Candidate, PanelAssignment, PanelType

# Reference catalog shipped with the detector: widths in feet, unit height.
DEFAULT_PANEL_WIDTHS: tuple[float, ...] = (2.0, 1.5, 0.5)
DEFAULT_PANEL_HEIGHT = 1.0


@dataclass
class Wall:
    """A validated wall segment and the panels assigned to cover it.

    Walls are created by the noise filter. The layout engine only attaches
    assignments; the dimensions never change after creation.

    Attributes:
        length: Real-world length (long side times scale).
        width: Wall thickness; unused by the 1-D layout and normally 0.
        height: Wall height; unused by the 1-D layout and normally 0.
        category: Optional tag from the detector (e.g. mask color).
        side1: First raw side length the wall was derived from, in pixels.
        side2: Second raw side length, in pixels.
        assignments: Panel assignments, at most one per (width, height)
            once merged.
    """

    length: float
    width: float = 0.0
    height: float = 0.0
    category: str | None = None
    side1: float = 0.0
    side2: float = 0.0
    assignments: list[PanelAssignment] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise InvalidWallInput(f"Wall length must be positive, got {self.length}")

    @property
    def total_panels(self) -> int:
        return sum(a.count for a in self.assignments)

    @property
    def covered_length(self) -> float:
        """Length covered by all assigned panels."""
        return sum(a.covered_length for a in self.assignments)

    @property
    def uncovered_length(self) -> float:
        """Length left uncovered, accepted as waste."""
        return self.length - self.covered_length


class PanelCatalog:
    """Ordered, immutable catalog of stock panel types.

    Declaration order matters: the layout engine scans candidates in this
    order and the first candidate reaching a given remainder wins ties.

    Example:
        >>> catalog = PanelCatalog.from_widths([2, 1.5, 0.5])
        >>> [c.width for c in catalog.candidates()]
        [2.0, 1.0, 1.5, 0.75, 0.5, 0.25]
    """

    __slots__ = ("_panels", "_candidates")

    def __init__(self, panels: Iterable[PanelType] = ()) -> None:
        panels = tuple(panels)
        seen: set[float] = set()
        for panel in panels:
            if panel.width in seen:
                raise ValueError(f"Duplicate panel width in catalog: {panel.width:g}")
            seen.add(panel.width)
        self._panels: tuple[PanelType, ...] = panels
        by_width = {p.width: p for p in panels}
        self._candidates: tuple[Candidate, ...] = tuple(
            candidate
            for panel in panels
            for candidate in (
                Candidate(width=panel.width, panel=panel, declared=panel),
                Candidate(
                    width=panel.width / 2,
                    panel=panel,
                    is_half=True,
                    declared=by_width.get(panel.width / 2),
                ),
            )
        )

    @classmethod
    def from_widths(
        cls, widths: Iterable[float], height: float = 0.0
    ) -> PanelCatalog:
        """Build a catalog of panels sharing one height."""
        return cls(PanelType(width=float(w), height=height) for w in widths)

    @classmethod
    def default(cls) -> PanelCatalog:
        """Reference catalog {2, 1.5, 0.5} with unit height."""
        return cls.from_widths(DEFAULT_PANEL_WIDTHS, height=DEFAULT_PANEL_HEIGHT)

    @property
    def panels(self) -> tuple[PanelType, ...]:
        return self._panels

    @property
    def widths(self) -> tuple[float, ...]:
        return tuple(p.width for p in self._panels)

    @property
    def smallest_width(self) -> float:
        """Smallest full catalog width.

        Raises:
            ValueError: If the catalog is empty.
        """
        if not self._panels:
            raise ValueError("Empty catalog has no smallest width")
        return min(self.widths)

    def candidates(self) -> tuple[Candidate, ...]:
        """Candidate list: each full width immediately followed by its half."""
        return self._candidates

    def contains_width(self, width: float) -> bool:
        """Whether ``width`` is a declared (full) catalog width."""
        return any(p.width == width for p in self._panels)

    def panel_for_width(self, width: float) -> PanelType | None:
        for panel in self._panels:
            if panel.width == width:
                return panel
        return None

    def __len__(self) -> int:
        return len(self._panels)

    def __iter__(self) -> Iterator[PanelType]:
        return iter(self._panels)

    def __bool__(self) -> bool:
        return bool(self._panels)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PanelCatalog):
            return NotImplemented
        return self._panels == other._panels

    def __hash__(self) -> int:
        return hash(self._panels)

    def __repr__(self) -> str:
        widths = ", ".join(f"{w:g}" for w in self.widths)
        return f"PanelCatalog([{widths}])"
