"""Tests for MainWindow wiring: palette, notation box, history actions."""

from __future__ import annotations

from helpers import center
from unionchess.core.enums import Highlight, PieceKind, Side
from unionchess.core.geometry import ViewportRect
from unionchess.core.notation import EMPTY_TEXT, STARTING_TEXT, position_from_text
from unionchess.core.position import Position
from unionchess.core.types import parse_tile
from unionchess.editor.events import BoardRectChanged, PointerDown, PointerUp, Undo
from unionchess.ui.main_window import MainWindow
from unionchess.ui.settings import AppSettings


def _window(start: str = EMPTY_TEXT) -> MainWindow:
    return MainWindow(AppSettings(start_position=start))


def _select(window: MainWindow, name: str) -> None:
    session = window.session
    session.handle(BoardRectChanged(ViewportRect.identity()))
    session.handle(PointerDown(center(parse_tile(name))))
    session.handle(PointerUp(center(parse_tile(name))))


def test_starts_from_settings_position() -> None:
    window = _window(STARTING_TEXT)
    assert window.session.position == position_from_text(STARTING_TEXT)
    assert window.notation_edit.toPlainText() == STARTING_TEXT


def test_invalid_start_position_falls_back_to_empty() -> None:
    window = _window("garbage")
    assert window.session.position == Position()


def test_palette_adds_piece_and_notation_follows() -> None:
    window = _window()
    session = window.session
    _select(window, "a1")
    assert session.tool_state.highlight == (parse_tile("a1"), Highlight.BOTH)

    window._palette.piece_requested.emit(Side.WHITE, PieceKind.ROOK)

    assert session.position.piece_at(parse_tile("a1"), Side.WHITE) is not None
    assert window.notation_edit.toPlainText().splitlines()[7].startswith("R.")
    assert window._act_undo.isEnabled()


def test_undo_restores_notation() -> None:
    window = _window()
    _select(window, "h8")
    window._palette.piece_requested.emit(Side.BLACK, PieceKind.KING)
    assert window.notation_edit.toPlainText() != EMPTY_TEXT

    window.session.handle(Undo())
    assert window.notation_edit.toPlainText() == EMPTY_TEXT
    assert window._act_redo.isEnabled()


def test_bad_notation_is_kept_for_correction() -> None:
    window = _window()
    window.notation_edit.setPlainText("not a board")
    window._on_load_clicked()
    assert window.notation_edit.toPlainText() == "not a board"
    assert window.session.position == Position()
    assert "Invalid board notation" in window.statusBar().currentMessage()


def test_good_notation_loads() -> None:
    window = _window()
    window.notation_edit.setPlainText(STARTING_TEXT)
    window._on_load_clicked()
    assert window.session.position == position_from_text(STARTING_TEXT)
    assert window._act_undo.isEnabled()

    window._act_undo.trigger()
    assert window.session.position == Position()
    assert window.notation_edit.toPlainText() == EMPTY_TEXT
