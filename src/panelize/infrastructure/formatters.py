"""Plain-text formatters for panelization results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from panelize.domain import PanelCatalog

if TYPE_CHECKING:
    from panelize.application.dtos import PanelizeOutput


class TextSummaryFormatter:
    """Formats a per-wall panel table for the terminal."""

    def __init__(self, show_discarded: bool = True) -> None:
        self._show_discarded = show_discarded

    def format(self, output: PanelizeOutput) -> str:
        """Format walls, their panels and batch totals as a table."""
        if not output.results:
            lines = ["No walls found."]
            if self._show_discarded and output.discarded:
                lines.extend(self._format_discarded(output))
            return "\n".join(lines)

        lines = [
            "WALL PANELS",
            "=" * 60,
            f"{'#':<4} {'Length':<10} {'Panel':<8} {'Qty':<6} {'Waste'}",
            "-" * 60,
        ]
        for number, result in enumerate(output.results, start=1):
            assignments = result.assignments or ()
            if not assignments:
                lines.append(
                    f"{number:<4} {result.wall.length:<10.3f} {'-':<8} {'-':<6} "
                    f"{result.waste:.3f}"
                )
                continue
            for i, assignment in enumerate(assignments):
                if i == 0:
                    lines.append(
                        f"{number:<4} {result.wall.length:<10.3f} "
                        f"{assignment.width:<8g} {assignment.count:<6} "
                        f"{result.waste:.3f}"
                    )
                else:
                    lines.append(
                        f"{'':<4} {'':<10} {assignment.width:<8g} {assignment.count:<6}"
                    )

        lines.append("-" * 60)
        lines.append(
            f"{len(output.results)} wall(s), {output.total_panels} panel(s), "
            f"{output.total_waste:.3f} waste"
        )
        for width, count in output.panel_totals.items():
            lines.append(f"  {width:g} wide: {count}")

        if self._show_discarded and output.discarded:
            lines.extend(self._format_discarded(output))
        return "\n".join(lines)

    @staticmethod
    def _format_discarded(output: PanelizeOutput) -> list[str]:
        lines = ["", f"Discarded {len(output.discarded)} shape(s):"]
        for shape in output.discarded:
            lines.append(f"  #{shape.index}: {shape.reason}")
        return lines


class CatalogFormatter:
    """Formats a panel catalog and its candidate list."""

    def format(self, catalog: PanelCatalog) -> str:
        if not catalog:
            return "Catalog is empty."

        lines = [
            "PANEL CATALOG",
            "=" * 30,
            f"{'Width':<10} {'Height':<10}",
            "-" * 30,
        ]
        for panel in catalog:
            lines.append(f"{panel.width:<10g} {panel.height:<10g}")
        lines.append("-" * 30)
        scan = ", ".join(
            f"{c.width:g}{'*' if c.is_half else ''}" for c in catalog.candidates()
        )
        lines.append(f"Scan order: {scan}")
        lines.append("(* half width)")
        return "\n".join(lines)
