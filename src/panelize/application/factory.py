"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from panelize.application.commands import PanelizeCommand
    from panelize.infrastructure.exporters import ExportManager
    from panelize.infrastructure.formatters import (
        CatalogFormatter,
        TextSummaryFormatter,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Stateless services are cached and shared between CLI commands.
    """

    _command: "PanelizeCommand | None" = field(default=None, init=False, repr=False)
    _summary_formatter: "TextSummaryFormatter | None" = field(
        default=None, init=False, repr=False
    )
    _catalog_formatter: "CatalogFormatter | None" = field(
        default=None, init=False, repr=False
    )

    def get_panelize_command(self) -> "PanelizeCommand":
        """Get or create the panelization command."""
        if self._command is None:
            from panelize.application.commands import PanelizeCommand

            self._command = PanelizeCommand()
        return self._command

    def get_summary_formatter(self) -> "TextSummaryFormatter":
        if self._summary_formatter is None:
            from panelize.infrastructure.formatters import TextSummaryFormatter

            self._summary_formatter = TextSummaryFormatter()
        return self._summary_formatter

    def get_catalog_formatter(self) -> "CatalogFormatter":
        if self._catalog_formatter is None:
            from panelize.infrastructure.formatters import CatalogFormatter

            self._catalog_formatter = CatalogFormatter()
        return self._catalog_formatter

    def create_export_manager(self, output_dir: Path = Path(".")) -> "ExportManager":
        from panelize.infrastructure.exporters import ExportManager

        return ExportManager(output_dir)


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
