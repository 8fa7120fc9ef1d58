"""Value objects for the panelize domain.

All classes are immutable and re-exported from sub-modules for convenience.
"""

from __future__ import annotations

from ._geometry import Point2D, RawShape
from ._panels import BridgeScope, Candidate, PanelAssignment, PanelType

__all__ = [
    "BridgeScope",
    "Candidate",
    "PanelAssignment",
    "PanelType",
    "Point2D",
    "RawShape",
]
