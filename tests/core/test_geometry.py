"""Tests for screen → board → tile mapping."""

import pytest

from unionchess.core.geometry import (
    BOARD_SIZE,
    BoardPoint,
    ScreenPoint,
    ViewportRect,
    tile_origin,
    to_board_point,
    to_tile,
)
from unionchess.core.types import ALL_TILES, Tile


class TestToBoardPoint:
    def test_identity_rect(self) -> None:
        rect = ViewportRect.identity()
        assert to_board_point(rect, ScreenPoint(123.7, 456.2)) == BoardPoint(123, 456)

    def test_translate_and_scale(self) -> None:
        rect = ViewportRect(50.0, 20.0, 400.0, 400.0)
        assert to_board_point(rect, ScreenPoint(50.0, 20.0)) == BoardPoint(0, 0)
        assert to_board_point(rect, ScreenPoint(250.0, 220.0)) == BoardPoint(400, 400)
        assert to_board_point(rect, ScreenPoint(450.0, 420.0)) == BoardPoint(
            BOARD_SIZE, BOARD_SIZE
        )

    def test_non_square_rect(self) -> None:
        rect = ViewportRect(0.0, 0.0, 1600.0, 400.0)
        assert to_board_point(rect, ScreenPoint(800.0, 100.0)) == BoardPoint(400, 200)

    def test_outside_rect_still_maps(self) -> None:
        rect = ViewportRect(100.0, 100.0, 800.0, 800.0)
        assert to_board_point(rect, ScreenPoint(0.0, 0.0)) == BoardPoint(-100, -100)

    def test_degenerate_rect_does_not_raise(self) -> None:
        rect = ViewportRect(10.0, 10.0, 0.0, 0.0)
        assert to_board_point(rect, ScreenPoint(15.0, 30.0)) == BoardPoint(5, 20)


class TestToTile:
    def test_corners(self) -> None:
        assert to_tile(BoardPoint(0, 0)) == Tile(0, 7)
        assert to_tile(BoardPoint(799, 799)) == Tile(7, 0)
        assert to_tile(BoardPoint(0, 799)) == Tile(0, 0)

    def test_tile_bounds(self) -> None:
        # Tile (x, y) spans [100x, 100x+100) × [700-100y, 800-100y).
        assert to_tile(BoardPoint(300, 400)) == Tile(3, 3)
        assert to_tile(BoardPoint(399, 499)) == Tile(3, 3)
        assert to_tile(BoardPoint(400, 499)) == Tile(4, 3)
        assert to_tile(BoardPoint(399, 500)) == Tile(3, 2)

    @pytest.mark.parametrize(
        "point",
        [
            BoardPoint(-1, 400),
            BoardPoint(400, -1),
            BoardPoint(800, 400),
            BoardPoint(400, 800),
            BoardPoint(-250, -250),
        ],
    )
    def test_off_board(self, point: BoardPoint) -> None:
        assert to_tile(point) is None

    def test_tile_origin_inverts_to_tile(self) -> None:
        for tile in ALL_TILES:
            assert to_tile(tile_origin(tile)) == tile

    def test_board_point_difference(self) -> None:
        assert BoardPoint(30, 40) - BoardPoint(10, 50) == BoardPoint(20, -10)
