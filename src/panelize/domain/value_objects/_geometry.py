"""Geometry value objects for raw detections."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from ..exceptions import InvalidWallInput


@dataclass(frozen=True)
class Point2D:
    """A point in image (pixel) space."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class RawShape:
    """A rectangle reported by the detector, before noise filtering.

    The detector either reports the two side lengths directly or the four
    corners of a fitted rectangle. Side lengths are in pixels.

    Attributes:
        side1: Length of the first edge.
        side2: Length of the edge adjacent to side1.
        category: Optional classification tag (e.g. the mask color).
        vertices: Corner points when the shape came from a fitted rectangle.
    """

    side1: float
    side2: float
    category: str | None = None
    vertices: tuple[Point2D, ...] = ()

    def __post_init__(self) -> None:
        if self.side1 < 0 or self.side2 < 0:
            raise InvalidWallInput("Side lengths must be non-negative")

    @classmethod
    def from_vertices(
        cls,
        points: Sequence[Point2D | Sequence[float]],
        category: str | None = None,
    ) -> RawShape:
        """Build a shape from the four corners of a rotated rectangle.

        Args:
            points: Exactly four corners in drawing order, as Point2D or
                (x, y) pairs.
            category: Optional classification tag.

        Returns:
            RawShape with side1 = |v0 - v1| and side2 = |v1 - v2|.

        Raises:
            InvalidWallInput: If the number of vertices is not four.
        """
        if len(points) != 4:
            raise InvalidWallInput(
                f"A wall rectangle needs exactly 4 vertices, got {len(points)}"
            )
        corners = tuple(
            p if isinstance(p, Point2D) else Point2D(float(p[0]), float(p[1]))
            for p in points
        )
        return cls(
            side1=corners[0].distance_to(corners[1]),
            side2=corners[1].distance_to(corners[2]),
            category=category,
            vertices=corners,
        )

    @property
    def long_side(self) -> float:
        return max(self.side1, self.side2)

    @property
    def short_side(self) -> float:
        return min(self.side1, self.side2)

    @property
    def aspect_ratio(self) -> float:
        """Long side over short side; infinite when the short side is zero."""
        if self.short_side == 0:
            return math.inf
        return self.long_side / self.short_side
