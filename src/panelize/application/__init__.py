"""Application layer - use cases and orchestration."""

from .commands import PanelizeCommand
from .dtos import PanelizeOutput, PanelizeRequest, ShapeInput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "PanelizeCommand",
    "PanelizeOutput",
    "PanelizeRequest",
    "ServiceFactory",
    "ShapeInput",
    "get_factory",
    "reset_factory",
    "set_factory",
]
