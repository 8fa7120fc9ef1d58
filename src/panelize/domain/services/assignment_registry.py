"""Assignment registry: one panel entry per (width, height) per wall."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..entities import Wall
from ..value_objects import PanelAssignment

logger = logging.getLogger(__name__)

__all__ = ["AssignmentRegistry", "merge_assignments"]


def merge_assignments(
    assignments: Iterable[PanelAssignment],
) -> list[PanelAssignment]:
    """Combine assignments that share a (width, height) key.

    Counts of duplicates are summed into the first occurrence, so the
    output keeps first-seen order. Applying it to its own output returns
    an equal list.

    Args:
        assignments: Assignments for a single wall, possibly with duplicates.

    Returns:
        New list with at most one entry per key.
    """
    merged: dict[tuple[float, float], PanelAssignment] = {}
    for assignment in assignments:
        existing = merged.get(assignment.key)
        merged[assignment.key] = (
            assignment if existing is None else existing.merged_with(assignment)
        )
    return list(merged.values())


@dataclass
class _WallIndex:
    """Key index for one wall's assignment list."""

    wall: Wall
    size: int
    positions: dict[tuple[float, float], int] = field(default_factory=dict)

    def is_current(self, wall: Wall) -> bool:
        return self.wall is wall and self.size == len(wall.assignments)


class AssignmentRegistry:
    """Accumulates panel assignments on walls.

    Keeps a key index per wall so "has this width already been assigned"
    is a dictionary lookup instead of a rescan of the wall's list. The index
    is rebuilt whenever the wall's list was changed behind the registry's
    back, so walls that already carry assignments are handled correctly.
    """

    def __init__(self) -> None:
        self._indexes: dict[int, _WallIndex] = {}

    def add_assignment(
        self, wall: Wall, width: float, height: float, count: int
    ) -> PanelAssignment:
        """Add panels to a wall, growing an existing entry of the same size.

        Args:
            wall: Wall receiving the panels.
            width: Panel width.
            height: Panel secondary dimension.
            count: Number of panels to add (non-negative).

        Returns:
            The wall's entry for (width, height) after the addition.

        Raises:
            ValueError: If count is negative or width is not positive.
        """
        added = PanelAssignment(width=width, height=height, count=count)
        index = self._index_for(wall)
        position = index.positions.get(added.key)
        if position is None:
            index.positions[added.key] = len(wall.assignments)
            wall.assignments.append(added)
            index.size = len(wall.assignments)
            logger.debug("Wall %.4g: assigned %d x %.4g", wall.length, count, width)
            return added

        updated = wall.assignments[position].merged_with(added)
        wall.assignments[position] = updated
        logger.debug(
            "Wall %.4g: %d more x %.4g (now %d)",
            wall.length,
            count,
            width,
            updated.count,
        )
        return updated

    def get(self, wall: Wall, width: float, height: float) -> PanelAssignment | None:
        """Look up the wall's entry for (width, height), if any."""
        position = self._index_for(wall).positions.get((width, height))
        return None if position is None else wall.assignments[position]

    def has_width(self, wall: Wall, width: float) -> bool:
        """Whether panels of ``width`` (any height) are assigned to the wall."""
        return any(key[0] == width for key in self._index_for(wall).positions)

    def merge_duplicates(self, wall: Wall) -> list[PanelAssignment]:
        """Collapse duplicate entries on a wall in place.

        Duplicates can appear when assignments are appended to
        ``wall.assignments`` directly rather than through the registry.

        Returns:
            The wall's merged assignment list.
        """
        before = len(wall.assignments)
        wall.assignments[:] = merge_assignments(wall.assignments)
        if len(wall.assignments) != before:
            logger.debug(
                "Wall %.4g: merged %d duplicate assignment(s)",
                wall.length,
                before - len(wall.assignments),
            )
        self._indexes[id(wall)] = self._build_index(wall)
        return wall.assignments

    def forget(self, wall: Wall) -> None:
        """Drop the index kept for a wall once its layout is final."""
        self._indexes.pop(id(wall), None)

    def _index_for(self, wall: Wall) -> _WallIndex:
        index = self._indexes.get(id(wall))
        if index is None or not index.is_current(wall):
            index = self._build_index(wall)
            self._indexes[id(wall)] = index
        return index

    @staticmethod
    def _build_index(wall: Wall) -> _WallIndex:
        index = _WallIndex(wall=wall, size=len(wall.assignments))
        for position, assignment in enumerate(wall.assignments):
            index.positions.setdefault(assignment.key, position)
        return index
