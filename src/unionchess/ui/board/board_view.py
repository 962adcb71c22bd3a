"""BoardView — QGraphicsView that feeds pointer and key input to the editor."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from unionchess.core.geometry import ScreenPoint, ViewportRect
from unionchess.core.position import Position
from unionchess.editor.events import (
    BoardRectChanged,
    KeyDelete,
    PointerDown,
    PointerMove,
    PointerUp,
)
from unionchess.editor.session import EditorSession
from unionchess.editor.tool import ToolState
from unionchess.ui.board.board_scene import BoardScene


def _screen_point(pos: QPointF) -> ScreenPoint:
    return ScreenPoint(pos.x(), pos.y())


class BoardView(QGraphicsView):
    """Displays the board scene scaled to fit, and drives *session*.

    Widget coordinates are handed to the session untouched; the session
    maps them through the board rectangle reported on every resize.
    """

    def __init__(self, session: EditorSession, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)
        self._session = session

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        session.events.on_changed.append(self._on_session_changed)
        self._scene.show_state(session.displayed_position, session.tool_state)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def board_rect(self) -> ViewportRect:
        """Where the 800×800 board currently sits in widget coordinates."""
        r = self.mapFromScene(self._scene.sceneRect()).boundingRect()
        return ViewportRect(
            float(r.x()), float(r.y()), float(r.width()), float(r.height())
        )

    # ── Qt events ────────────────────────────────────────────────────────

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
        self._session.handle(BoardRectChanged(self.board_rect()))

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self._session.handle(PointerDown(_screen_point(event.position())))

    def mouseMoveEvent(self, event: QMouseEvent | None) -> None:
        if event is None:
            return super().mouseMoveEvent(event)
        pressed = event.buttons() != Qt.MouseButton.NoButton
        self._session.handle(PointerMove(_screen_point(event.position()), pressed))

    def mouseReleaseEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mouseReleaseEvent(event)
        self._session.handle(PointerUp(_screen_point(event.position())))

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        if event is not None and event.key() in (
            Qt.Key.Key_Delete,
            Qt.Key.Key_Backspace,
        ):
            self._session.handle(KeyDelete())
            return
        super().keyPressEvent(event)

    # ── Session ──────────────────────────────────────────────────────────

    def _on_session_changed(self, position: Position, state: ToolState) -> None:
        self._scene.show_state(position, state)
