"""MainWindow — board editor window assembling view, palette and notation."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QFont, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from unionchess.core.enums import PieceKind, Side
from unionchess.core.notation import STARTING_TEXT, position_from_text
from unionchess.core.position import Position
from unionchess.editor.events import AddPiece, KeyDelete, Redo, Reset, Undo
from unionchess.editor.session import EditorSession
from unionchess.editor.tool import ToolState
from unionchess.ui.board.board_view import BoardView
from unionchess.ui.panels.piece_palette import PiecePalette
from unionchess.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for the position editor."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Union Chess Editor")
        self.setMinimumSize(900, 640)
        self.resize(1100, 750)

        self._settings = settings or AppSettings()
        self._session = EditorSession(self._initial_position())
        self._last_notation: str | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        apply_settings(self, self._settings)
        self._on_session_changed(
            self._session.displayed_position, self._session.tool_state
        )

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> EditorSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def notation_edit(self) -> QPlainTextEdit:
        return self._notation_edit

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView(self._session)
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._palette = PiecePalette()
        right.addWidget(self._palette)

        right.addWidget(QLabel("Board notation"))
        self._notation_edit = QPlainTextEdit()
        self._notation_edit.setFont(QFont("Monospace", 11))
        right.addWidget(self._notation_edit, stretch=1)

        self._btn_load = QPushButton("Load from text")
        right.addWidget(self._btn_load)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(320)
        root.addWidget(right_widget)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        edit_menu = menu_bar.addMenu("&Edit")
        assert edit_menu is not None
        board_menu = menu_bar.addMenu("&Board")
        assert board_menu is not None

        self._act_undo = QAction("&Undo", self)
        self._act_undo.setShortcut(QKeySequence.StandardKey.Undo)
        self._act_undo.triggered.connect(lambda: self._session.handle(Undo()))
        edit_menu.addAction(self._act_undo)

        self._act_redo = QAction("&Redo", self)
        self._act_redo.setShortcut(QKeySequence.StandardKey.Redo)
        self._act_redo.triggered.connect(lambda: self._session.handle(Redo()))
        edit_menu.addAction(self._act_redo)

        act_delete = QAction("&Delete selection", self)
        act_delete.triggered.connect(lambda: self._session.handle(KeyDelete()))
        edit_menu.addAction(act_delete)

        act_start = QAction("&Starting position", self)
        act_start.triggered.connect(
            lambda: self._session.handle(Reset(position_from_text(STARTING_TEXT)))
        )
        board_menu.addAction(act_start)

        act_clear = QAction("&Clear board", self)
        act_clear.triggered.connect(lambda: self._session.handle(Reset(Position())))
        board_menu.addAction(act_clear)

    def _connect_signals(self) -> None:
        self._palette.piece_requested.connect(self._on_piece_requested)
        self._palette.undo_clicked.connect(lambda: self._session.handle(Undo()))
        self._palette.redo_clicked.connect(lambda: self._session.handle(Redo()))
        self._palette.delete_clicked.connect(lambda: self._session.handle(KeyDelete()))
        self._btn_load.clicked.connect(self._on_load_clicked)
        self._session.events.on_changed.append(self._on_session_changed)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_piece_requested(self, side: Side, kind: PieceKind) -> None:
        self._session.handle(AddPiece(side, kind))

    def _on_load_clicked(self) -> None:
        text = self._notation_edit.toPlainText()
        try:
            self._session.load_notation(text)
        except ValueError as exc:
            # Leave the text as typed so it can be corrected.
            _LOGGER.warning("Rejected board notation: %s", exc)
            self._status_bar.showMessage(str(exc), 5000)
            return
        self._status_bar.showMessage("Position loaded", 2000)

    def _on_session_changed(self, _position: Position, state: ToolState) -> None:
        history = self._session.history
        self._palette.set_history_enabled(history.can_undo, history.can_redo)
        self._act_undo.setEnabled(history.can_undo)
        self._act_redo.setEnabled(history.can_redo)
        if not state.is_dragging:
            self._refresh_notation()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _initial_position(self) -> Position:
        try:
            return position_from_text(self._settings.start_position)
        except ValueError as exc:
            _LOGGER.warning("Invalid start position in settings: %s", exc)
            return Position()

    def _refresh_notation(self) -> None:
        """Show the committed position's notation, unless it already does."""
        text = self._session.notation()
        if self._last_notation == text:
            return
        self._last_notation = text
        self._notation_edit.setPlainText(text)
