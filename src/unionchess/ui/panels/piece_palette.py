"""PiecePalette — add-piece buttons plus edit actions."""

from __future__ import annotations

from functools import partial

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QGridLayout, QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from unionchess.core.enums import PieceKind, Side
from unionchess.core.piece import Piece
from unionchess.core.types import Tile

_ANY_TILE = Tile(0, 0)  # only used to look up a symbol


class PiecePalette(QWidget):
    """One button per (side, kind), and undo / redo / delete buttons.

    Signals:
        piece_requested(Side, PieceKind): Add a piece on the selected tile.
    """

    piece_requested = pyqtSignal(Side, PieceKind)
    undo_clicked = pyqtSignal()
    redo_clicked = pyqtSignal()
    delete_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._piece_buttons: dict[tuple[Side, PieceKind], QPushButton] = {}
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        grid = QGridLayout()
        piece_font = QFont("Sans Serif", 20)
        for row, side in enumerate(Side):
            for col, kind in enumerate(PieceKind):
                btn = QPushButton(Piece(kind, side, _ANY_TILE).symbol)
                btn.setFont(piece_font)
                btn.setToolTip(f"Add {side} {kind.name.lower()}")
                btn.setMinimumHeight(40)
                btn.clicked.connect(partial(self._request_piece, side, kind))
                grid.addWidget(btn, row, col)
                self._piece_buttons[(side, kind)] = btn
        layout.addLayout(grid)

        actions = QHBoxLayout()
        self._btn_undo = QPushButton("Undo")
        self._btn_undo.clicked.connect(self.undo_clicked)
        actions.addWidget(self._btn_undo)

        self._btn_redo = QPushButton("Redo")
        self._btn_redo.clicked.connect(self.redo_clicked)
        actions.addWidget(self._btn_redo)

        self._btn_delete = QPushButton("Delete")
        self._btn_delete.clicked.connect(self.delete_clicked)
        actions.addWidget(self._btn_delete)
        layout.addLayout(actions)

    def _request_piece(
        self, side: Side, kind: PieceKind, _checked: bool = False
    ) -> None:
        self.piece_requested.emit(side, kind)

    def set_history_enabled(self, can_undo: bool, can_redo: bool) -> None:
        self._btn_undo.setEnabled(can_undo)
        self._btn_redo.setEnabled(can_redo)
