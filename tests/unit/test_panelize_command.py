"""Unit tests for the PanelizeCommand use case and service factory."""

from __future__ import annotations

import pytest

from panelize.application import (
    PanelizeCommand,
    PanelizeRequest,
    ServiceFactory,
    ShapeInput,
    get_factory,
    set_factory,
)
from panelize.domain import BridgeScope, EmptyCatalogError, InvalidWallInput, PanelCatalog


def request_for(lengths: list[float], **kwargs) -> PanelizeRequest:
    """One long thin shape per wall length, at scale 1."""
    kwargs.setdefault("catalog", PanelCatalog.default())
    return PanelizeRequest(
        shapes=[ShapeInput(side1=length, side2=0.01) for length in lengths],
        scale=1.0,
        **kwargs,
    )


class TestShapeInput:
    def test_sides(self) -> None:
        raw = ShapeInput(side1=3, side2=4, category="red").to_raw_shape()

        assert (raw.side1, raw.side2, raw.category) == (3, 4, "red")

    def test_vertices_take_precedence(self) -> None:
        raw = ShapeInput(vertices=[(0, 0), (0, 5), (1, 5), (1, 0)]).to_raw_shape()

        assert (raw.side1, raw.side2) == (5, 1)

    def test_missing_side(self) -> None:
        with pytest.raises(InvalidWallInput, match="side1 and side2"):
            ShapeInput(side1=3).to_raw_shape()


class TestPanelizeRequest:
    def test_valid_defaults(self) -> None:
        assert request_for([12]).validate() == []

    def test_collects_all_errors(self) -> None:
        request = PanelizeRequest(
            shapes=[],
            catalog=PanelCatalog.default(),
            scale=0,
            noise_threshold=-1,
            min_thickness=5,
            max_thickness=1,
            workers=0,
        )

        assert len(request.validate()) == 4


class TestPanelizeCommand:
    def test_walls_in_detection_order(self, panelize_command: PanelizeCommand) -> None:
        output = panelize_command.execute(request_for([13, 12, 6]))

        assert output.is_valid
        assert [w.length for w in output.walls] == [13, 12, 6]
        assert [
            [(a.width, a.count) for a in r.assignments] for r in output.results
        ] == [[(0.5, 26)], [(2.0, 6)], [(2.0, 3)]]

    def test_panel_totals_follow_catalog_order(
        self, panelize_command: PanelizeCommand
    ) -> None:
        output = panelize_command.execute(request_for([13, 12, 6]))

        assert output.panel_totals == {2.0: 9, 0.5: 26}
        assert output.total_panels == 35
        assert output.total_waste == 0

    def test_discarded_shapes_keep_detector_index(
        self, panelize_command: PanelizeCommand
    ) -> None:
        request = PanelizeRequest(
            shapes=[
                ShapeInput(side1=100, side2=2),
                ShapeInput(side1=0, side2=2),
                ShapeInput(vertices=[(0, 0), (1, 0), (1, 1)]),
                ShapeInput(side1=100, side2=50),
                ShapeInput(side1=200, side2=2),
            ],
            catalog=PanelCatalog.default(),
        )

        output = panelize_command.execute(request)

        assert [w.length for w in output.walls] == [10.0, 20.0]
        assert [d.index for d in output.discarded] == [1, 2, 3]
        assert "4 vertices" in output.discarded[1].reason

    def test_thread_pool_keeps_order(self, panelize_command: PanelizeCommand) -> None:
        lengths = [n * 0.5 for n in range(1, 60)]

        serial = panelize_command.execute(request_for(lengths))
        pooled = panelize_command.execute(request_for(lengths, workers=8))

        assert [w.length for w in pooled.walls] == lengths
        assert [r.assignments for r in pooled.results] == [
            r.assignments for r in serial.results
        ]

    def test_bridge_scopes_passed_to_engine(
        self, panelize_command: PanelizeCommand
    ) -> None:
        output = panelize_command.execute(
            request_for(
                [11],
                catalog=PanelCatalog.from_widths([3, 2]),
                primary_bridge_scope=BridgeScope.PASS,
                leftover_bridge_scope=BridgeScope.WALL,
            )
        )

        assert [(a.width, a.count) for a in output.results[0].assignments] == [
            (2.0, 4),
            (3.0, 1),
        ]

    def test_invalid_request_returns_errors(
        self, panelize_command: PanelizeCommand
    ) -> None:
        output = panelize_command.execute(request_for([12], workers=0))

        assert not output.is_valid
        assert output.results == []
        assert "worker" in output.errors[0]

    def test_empty_catalog_is_fatal(self, panelize_command: PanelizeCommand) -> None:
        with pytest.raises(EmptyCatalogError):
            panelize_command.execute(request_for([12], catalog=PanelCatalog()))

    def test_empty_catalog_fatal_even_without_walls(
        self, panelize_command: PanelizeCommand
    ) -> None:
        with pytest.raises(EmptyCatalogError):
            panelize_command.execute(request_for([], catalog=PanelCatalog()))

    def test_source_name_carried_through(
        self, panelize_command: PanelizeCommand
    ) -> None:
        output = panelize_command.execute(request_for([12]), source_name="plan.json")

        assert output.source_name == "plan.json"


class TestServiceFactory:
    def test_command_cached(self) -> None:
        factory = ServiceFactory()

        assert factory.get_panelize_command() is factory.get_panelize_command()
        assert factory.get_summary_formatter() is factory.get_summary_formatter()

    def test_set_factory(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)

        assert get_factory() is custom
