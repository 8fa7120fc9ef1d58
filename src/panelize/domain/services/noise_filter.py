"""Noise filter turning raw rectangle detections into walls.

Walls are long thin rectangles. Anything close to square is detection
noise (text, fixtures, blobs of color) and is dropped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..entities import Wall
from ..exceptions import InvalidWallInput
from ..value_objects import RawShape

logger = logging.getLogger(__name__)

__all__ = ["DiscardedShape", "FilterResult", "NoiseFilter", "filter_walls"]


@dataclass(frozen=True)
class DiscardedShape:
    """A detection that did not become a wall.

    Attributes:
        index: Position of the shape in the detector's output.
        reason: Why it was dropped.
    """

    index: int
    reason: str


@dataclass
class FilterResult:
    """Walls kept by the noise filter, in detection order."""

    walls: list[Wall] = field(default_factory=list)
    discarded: list[DiscardedShape] = field(default_factory=list)

    @property
    def kept_count(self) -> int:
        return len(self.walls)

    @property
    def discarded_count(self) -> int:
        return len(self.discarded)


class NoiseFilter:
    """Aspect-ratio filter for detected rectangles.

    A shape is kept when long side / short side >= noise_threshold. The
    kept wall's length is the long side times ``scale`` (pixels to
    engineering units).

    Attributes:
        scale: Pixel to length-unit factor.
        noise_threshold: Minimum aspect ratio for a wall.
        min_thickness: Optional lower bound on the short side, in pixels.
        max_thickness: Optional upper bound on the short side, in pixels.
    """

    def __init__(
        self,
        scale: float,
        noise_threshold: float,
        min_thickness: float | None = None,
        max_thickness: float | None = None,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        if noise_threshold <= 0:
            raise ValueError("Noise threshold must be positive")
        if (
            min_thickness is not None
            and max_thickness is not None
            and min_thickness > max_thickness
        ):
            raise ValueError("Minimum thickness cannot exceed maximum thickness")
        self.scale = scale
        self.noise_threshold = noise_threshold
        self.min_thickness = min_thickness
        self.max_thickness = max_thickness

    def filter(self, shapes: Iterable[RawShape]) -> FilterResult:
        """Split detections into walls and discarded noise.

        Args:
            shapes: Raw detections in detector order.

        Returns:
            FilterResult with kept walls and the reason each other shape
            was dropped.
        """
        result = FilterResult()
        for index, shape in enumerate(shapes):
            try:
                wall = self.to_wall(shape)
            except InvalidWallInput as e:
                result.discarded.append(DiscardedShape(index, str(e)))
                logger.debug("Shape %d discarded: %s", index, e)
                continue
            result.walls.append(wall)

        logger.info(
            "Noise filter kept %d of %d shapes (threshold %g)",
            result.kept_count,
            result.kept_count + result.discarded_count,
            self.noise_threshold,
        )
        return result

    def to_wall(self, shape: RawShape) -> Wall:
        """Convert one detection into a wall.

        Raises:
            InvalidWallInput: If the shape is degenerate, too square, or
                outside the thickness window.
        """
        if shape.side1 == 0 or shape.side2 == 0:
            raise InvalidWallInput("zero-length side")

        ratio = shape.aspect_ratio
        if ratio < self.noise_threshold:
            raise InvalidWallInput(
                f"aspect ratio {ratio:.3g} below threshold {self.noise_threshold:g}"
            )

        thickness = shape.short_side
        if self.min_thickness is not None and thickness < self.min_thickness:
            raise InvalidWallInput(
                f"thickness {thickness:g} below minimum {self.min_thickness:g}"
            )
        if self.max_thickness is not None and thickness > self.max_thickness:
            raise InvalidWallInput(
                f"thickness {thickness:g} above maximum {self.max_thickness:g}"
            )

        return Wall(
            length=shape.long_side * self.scale,
            category=shape.category,
            side1=shape.side1,
            side2=shape.side2,
        )


def filter_walls(
    shapes: Sequence[RawShape], scale: float, noise_threshold: float
) -> list[Wall]:
    """Keep the wall-like shapes and convert them to scaled walls."""
    return NoiseFilter(scale, noise_threshold).filter(shapes).walls
