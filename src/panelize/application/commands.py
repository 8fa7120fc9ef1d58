"""Application commands (use cases) for wall panelization."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from panelize.domain import (
    BestFitLayoutEngine,
    EmptyCatalogError,
    InvalidWallInput,
    NoiseFilter,
    Wall,
)
from panelize.domain.services import DiscardedShape, LayoutResult

from .dtos import PanelizeOutput, PanelizeRequest, ShapeInput

logger = logging.getLogger(__name__)


class PanelizeCommand:
    """Command to turn a batch of detected shapes into panel layouts.

    Shapes go through the noise filter one at a time so each discarded
    shape keeps its detector index. Surviving walls are laid out
    independently; with more than one worker they are laid out on a thread
    pool, and results still come back in detection order.
    """

    def execute(
        self, request: PanelizeRequest, source_name: str | None = None
    ) -> PanelizeOutput:
        """Execute the panelization command.

        Args:
            request: Shapes, catalog and engine settings.
            source_name: Name of the input the shapes came from, carried
                through to reports.

        Returns:
            PanelizeOutput with one LayoutResult per kept wall. Request
            validation problems are returned in ``errors``.

        Raises:
            EmptyCatalogError: If the catalog has no panel types.
        """
        errors = request.validate()
        if errors:
            return PanelizeOutput(
                results=[],
                discarded=[],
                catalog=request.catalog,
                source_name=source_name,
                errors=errors,
            )
        if not request.catalog:
            raise EmptyCatalogError()

        noise_filter = NoiseFilter(
            scale=request.scale,
            noise_threshold=request.noise_threshold,
            min_thickness=request.min_thickness,
            max_thickness=request.max_thickness,
        )
        walls, discarded = self._filter(noise_filter, request.shapes)

        engine = BestFitLayoutEngine(
            request.catalog,
            primary_scope=request.primary_bridge_scope,
            leftover_scope=request.leftover_bridge_scope,
        )
        results = self._layout(engine, walls, request.workers)

        output = PanelizeOutput(
            results=results,
            discarded=discarded,
            catalog=request.catalog,
            source_name=source_name,
        )
        logger.info(
            "Panelized %d wall(s) with %d panel(s); %d shape(s) discarded",
            len(results),
            output.total_panels,
            len(discarded),
        )
        return output

    @staticmethod
    def _filter(
        noise_filter: NoiseFilter, shapes: list[ShapeInput]
    ) -> tuple[list[Wall], list[DiscardedShape]]:
        walls: list[Wall] = []
        discarded: list[DiscardedShape] = []
        for index, shape in enumerate(shapes):
            try:
                walls.append(noise_filter.to_wall(shape.to_raw_shape()))
            except InvalidWallInput as e:
                logger.debug("Shape %d discarded: %s", index, e)
                discarded.append(DiscardedShape(index=index, reason=str(e)))
        return walls, discarded

    @staticmethod
    def _layout(
        engine: BestFitLayoutEngine, walls: list[Wall], workers: int
    ) -> list[LayoutResult]:
        if workers <= 1 or len(walls) <= 1:
            return engine.layout_all(walls)
        logger.debug("Laying out %d walls on %d workers", len(walls), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(engine.layout, walls))
