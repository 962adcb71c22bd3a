"""BoardScene — QGraphicsScene that draws the board, highlight and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSimpleTextItem,
)

from unionchess.core.enums import Side
from unionchess.core.geometry import BOARD_SIZE, TILE_SIZE, BoardPoint, tile_origin
from unionchess.core.piece import Piece
from unionchess.core.position import Position
from unionchess.core.types import ALL_TILES, Tile
from unionchess.editor.tool import ToolState
from unionchess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders a position and the smart tool state in board space.

    Scene coordinates are board coordinates: 800×800 with rank 8 on top.
    The scene holds no editor state of its own; call :meth:`show_state` with
    whatever the session reports.
    """

    _SINGLE_FONT_PX = 72
    _UNION_FONT_PX = 48

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._show_coordinates = True
        self._position = Position()
        self._state = ToolState()

        # Visual layers
        self._square_items: dict[Tile, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: list[QGraphicsSimpleTextItem] = []
        self._drag_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def show_state(self, position: Position, state: ToolState) -> None:
        """Redraw highlights and pieces for *position* and *state*."""
        self._position = position
        self._state = state
        self._sync_highlights()
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.show_state(self._position, self._state)

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = TILE_SIZE
        font = QFont("Sans Serif")
        font.setPixelSize(t // 7)

        for tile in ALL_TILES:
            origin = tile_origin(tile)
            is_light = (tile.x + tile.y) % 2 == 1
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(origin.x, origin.y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[tile] = rect

            text_color = (
                self._theme.coord_dark if is_light else self._theme.coord_light
            )
            labels: list[tuple[str, float, float]] = []
            # Rank numbers (left edge)
            if tile.x == 0:
                labels.append((str(tile.y + 1), origin.x + 3, origin.y + 2))
            # File letters (bottom edge)
            if tile.y == 0:
                labels.append(
                    (chr(ord("a") + tile.x), origin.x + t - 14, origin.y + t - 20)
                )
            for label, lx, ly in labels:
                txt = QGraphicsSimpleTextItem(label)
                txt.setFont(font)
                txt.setBrush(QBrush(text_color))
                txt.setPos(lx, ly)
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, BOARD_SIZE, BOARD_SIZE)

    # ── Highlights ───────────────────────────────────────────────────────

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        state = self._state
        if state.highlight is not None:
            tile, highlight = state.highlight
            self._highlight_items.append(
                self._make_highlight(tile, self._theme.highlight_color(highlight))
            )
        if state.hover_tile is not None:
            marker = self._make_highlight(state.hover_tile, self._theme.drop_target)
            marker.setZValue(0.7)
            self._highlight_items.append(marker)

    def _make_highlight(self, tile: Tile, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a tile."""
        origin = tile_origin(tile)
        rect = QGraphicsRectItem(origin.x, origin.y, TILE_SIZE, TILE_SIZE)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Pieces ───────────────────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position and drag."""
        self._clear_items(self._piece_items)
        self._clear_items(self._drag_items)

        for tile in self._position.occupied_tiles():
            self._place_pieces(
                self._position.pieces_at(tile), tile_origin(tile), self._piece_items
            )

        state = self._state
        if state.drag_origin is not None and state.dragging_pieces:
            origin = tile_origin(state.drag_origin)
            offset = state.drag_offset or BoardPoint(0, 0)
            at = BoardPoint(origin.x + offset.x, origin.y + offset.y)
            self._place_pieces(list(state.dragging_pieces), at, self._drag_items)
            for item in self._drag_items:
                item.setZValue(10)
                item.setOpacity(0.85)

    def _place_pieces(
        self,
        pieces: list[Piece],
        at: BoardPoint,
        into: list[QGraphicsSimpleTextItem],
    ) -> None:
        """Draw pieces sharing a tile whose top-left corner is *at*.

        A union shows the white piece bottom-left and the black one top-right.
        """
        union = len(pieces) > 1
        px = self._UNION_FONT_PX if union else self._SINGLE_FONT_PX
        font = QFont("Sans Serif")
        font.setPixelSize(px)
        for piece in pieces:
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(QColor(20, 20, 20)))
            item.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
            bounds = item.boundingRect()
            if union:
                if piece.side == Side.WHITE:
                    dx, dy = 4.0, TILE_SIZE - bounds.height()
                else:
                    dx, dy = TILE_SIZE - bounds.width() - 4.0, 0.0
            else:
                dx = (TILE_SIZE - bounds.width()) / 2
                dy = (TILE_SIZE - bounds.height()) / 2
            item.setPos(at.x + dx, at.y + dy)
            item.setZValue(1)
            self.addItem(item)
            into.append(item)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
