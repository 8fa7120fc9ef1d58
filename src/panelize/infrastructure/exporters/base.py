"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from panelize.application.dtos import PanelizeOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all report exporters.

    Exporters convert a PanelizeOutput to a specific format. Each exporter
    defines its format name and file extension.

    Attributes:
        format_name: Name used to select the exporter (e.g., "csv").
        file_extension: File extension without leading dot (e.g., "csv").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: PanelizeOutput, path: Path) -> None:
        """Export panelization output to a file.

        Args:
            output: The panelization output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: PanelizeOutput) -> str:
        """Export panelization output as a string."""
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class CsvReportExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    "Overwriting existing exporter for format '%s'", format_name
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(
                "Registered exporter '%s': %s", format_name, exporter_class.__name__
            )
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


def default_report_path(source: Path, extension: str) -> Path:
    """Report path next to the input, with the input's extension replaced.

    Example:
        >>> default_report_path(Path("plans/floor1.png"), "csv")
        PosixPath('plans/floor1.csv')
    """
    return source.with_suffix(f".{extension}")


class ExportManager:
    """Writes panelization reports to files.

    Attributes:
        output_dir: Directory used when a report is named by project.
    """

    def __init__(self, output_dir: Path = Path(".")) -> None:
        self.output_dir = Path(output_dir)

    def export(self, format_name: str, output: PanelizeOutput, path: Path) -> Path:
        """Export to an explicit file path.

        Raises:
            KeyError: If the format is not registered.
            OSError: If the file cannot be written.
        """
        exporter = ExporterRegistry.get(format_name)()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Exporting %s report: %s", format_name, path)
        exporter.export(output, path)
        return path

    def export_all(
        self,
        formats: list[str],
        output: PanelizeOutput,
        project_name: str = "walls",
    ) -> dict[str, Path]:
        """Export to several formats as ``{project_name}.{ext}`` files.

        Returns:
            Dictionary mapping format names to output file paths.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        results: dict[str, Path] = {}
        for format_name in formats:
            extension = ExporterRegistry.get(format_name).file_extension
            filepath = self.output_dir / f"{project_name}.{extension}"
            results[format_name] = self.export(format_name, output, filepath)
        return results
