"""Tests for BoardView input forwarding and board rectangle reporting."""

from __future__ import annotations

from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtTest import QTest

from helpers import piece, position
from unionchess.core.enums import PieceKind, Side
from unionchess.core.geometry import BOARD_SIZE, TILE_SIZE
from unionchess.core.types import Tile, parse_tile
from unionchess.editor.session import EditorSession
from unionchess.ui.board.board_view import BoardView

W = Side.WHITE


def _widget_point(view: BoardView, tile: Tile) -> QPoint:
    rect = view.board_rect()
    scale = rect.width / BOARD_SIZE
    x = rect.x + (tile.x * TILE_SIZE + TILE_SIZE / 2) * scale
    y = rect.y + ((7 - tile.y) * TILE_SIZE + TILE_SIZE / 2) * scale
    return QPoint(int(x), int(y))


def _shown_view(session: EditorSession) -> BoardView:
    view = BoardView(session)
    view.resize(500, 500)
    view.show()
    QTest.qWaitForWindowExposed(view)
    return view


def test_resize_reports_board_rect_to_session() -> None:
    session = EditorSession()
    view = _shown_view(session)
    rect = session.board_rect
    assert rect == view.board_rect()
    assert 0 < rect.width <= 500
    assert abs(rect.width - rect.height) <= 1


def test_drag_with_mouse_moves_piece() -> None:
    session = EditorSession(position(piece("r", W, "a1")))
    view = _shown_view(session)
    viewport = view.viewport()
    assert viewport is not None

    src = _widget_point(view, parse_tile("a1"))
    dst = _widget_point(view, parse_tile("c3"))
    QTest.mousePress(viewport, Qt.MouseButton.LeftButton, pos=src)
    QTest.mouseRelease(viewport, Qt.MouseButton.LeftButton, pos=dst)

    assert session.position == position(piece("r", W, "c3"))
    assert len(view.board_scene._piece_items) == 1


def test_delete_key_removes_selected_tile() -> None:
    session = EditorSession(position(piece("r", W, "a1")))
    view = _shown_view(session)
    viewport = view.viewport()
    assert viewport is not None

    # Empty tile click selects it; adding and deleting clears it again.
    pos = _widget_point(view, parse_tile("e4"))
    QTest.mouseClick(viewport, Qt.MouseButton.LeftButton, pos=pos)
    assert session.tool_state.highlighted_tile == parse_tile("e4")
    session.add_piece(W, PieceKind.QUEEN)

    QTest.keyClick(view, Qt.Key.Key_Delete)
    assert session.position == position(piece("r", W, "a1"))
