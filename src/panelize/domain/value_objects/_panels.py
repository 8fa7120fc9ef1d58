"""Panel types, layout candidates and per-wall panel assignments."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class BridgeScope(str, Enum):
    """Where to look when deciding if a bridging panel was already counted.

    A half-width candidate that fits the remaining space exactly is
    recorded as its full-width panel with an odd count, the odd panel
    spanning the midline. That bridging panel is suppressed if its full
    width has already been recorded.

    Attributes:
        PASS: Only widths recorded earlier in the same fitting pass count.
        WALL: Any width recorded on the wall counts.
    """

    PASS = "pass"
    WALL = "wall"


@dataclass(frozen=True)
class PanelType:
    """A stock panel from the catalog.

    Identity is the width. A height of zero marks a linear panel whose
    second dimension is not meaningful to the layout.

    Attributes:
        width: Panel width in engineering units.
        height: Optional secondary dimension (0 for linear panels).
    """

    width: float
    height: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.width) or not math.isfinite(self.height):
            raise ValueError("Panel dimensions must be finite numbers")
        if self.width <= 0:
            raise ValueError("Panel width must be positive")
        if self.height < 0:
            raise ValueError("Panel height must be non-negative")

    @property
    def is_linear(self) -> bool:
        return self.height == 0


@dataclass(frozen=True)
class Candidate:
    """One entry of the candidate list scanned by the layout engine.

    Attributes:
        width: Width tried against the remaining space.
        panel: Catalog entry this candidate derives from.
        is_half: True for the synthetic half-width of ``panel``.
        declared: Catalog entry whose width equals ``width``, if any. A
            half-width can coincide with another declared width, in which
            case it is treated as that full panel.
    """

    width: float
    panel: PanelType
    is_half: bool = False
    declared: PanelType | None = None

    @property
    def full_width(self) -> float:
        """Width of the catalog panel this candidate derives from."""
        return self.panel.width

    @property
    def is_declared_width(self) -> bool:
        return self.declared is not None


@dataclass(frozen=True)
class PanelAssignment:
    """A number of panels of one size assigned to a wall.

    Attributes:
        width: Panel width.
        height: Panel secondary dimension (0 for linear panels).
        count: Number of panels, non-negative.
    """

    width: float
    height: float = 0.0
    count: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Assignment width must be positive")
        if self.count < 0:
            raise ValueError("Panel count must be non-negative")

    @property
    def key(self) -> tuple[float, float]:
        """Registry key; one entry per (width, height) per wall."""
        return (self.width, self.height)

    @property
    def covered_length(self) -> float:
        """Wall length covered by these panels laid side by side."""
        return self.width * self.count

    def merged_with(self, other: PanelAssignment) -> PanelAssignment:
        """Combine with another assignment of the same size.

        Raises:
            ValueError: If the two assignments have different keys.
        """
        if other.key != self.key:
            raise ValueError(
                f"Cannot merge {other.width}x{other.height} panels "
                f"into {self.width}x{self.height} panels"
            )
        return PanelAssignment(self.width, self.height, self.count + other.count)
