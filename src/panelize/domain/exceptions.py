"""Domain exceptions for wall validation and panel layout."""

from __future__ import annotations


class PanelizeError(Exception):
    """Base class for all panelize domain errors."""


class InvalidWallInput(PanelizeError, ValueError):
    """Raised when a detected shape cannot describe a valid wall.

    Covers zero-length sides, a vertex count other than four, and
    non-positive derived wall lengths. The noise filter treats this as a
    local skip rather than a fatal error for the batch.
    """


class EmptyCatalogError(PanelizeError):
    """Raised when a layout is requested with no panel types available."""

    def __init__(self, message: str = "Panel catalog is empty; at least one panel width is required") -> None:
        super().__init__(message)
