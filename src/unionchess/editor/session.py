"""EditorSession — owns the position history and the smart tool state.

Applies one input event at a time, routes tool outcomes to the history
or the transient drag preview, and notifies subscribers via simple
callbacks so the UI / tests can follow along.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from unionchess.core.enums import PieceKind, Side
from unionchess.core.geometry import (
    BoardPoint,
    ScreenPoint,
    ViewportRect,
    to_board_point,
)
from unionchess.core.notation import position_from_text, position_to_text
from unionchess.core.position import Position
from unionchess.editor import tool
from unionchess.editor.events import (
    AddPiece,
    BoardRectChanged,
    EditorEvent,
    KeyDelete,
    PointerDown,
    PointerMove,
    PointerUp,
    Redo,
    Reset,
    Undo,
)
from unionchess.editor.history import History
from unionchess.editor.tool import Commit, Preview, Rollback, ToolOutcome, ToolState

_LOGGER = logging.getLogger(__name__)

ChangeCallback = Callable[[Position, ToolState], None]  # displayed, tool state
CommitCallback = Callable[[Position], None]


@dataclass
class EditorEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_changed: list[ChangeCallback] = field(default_factory=list)
    on_commit: list[CommitCallback] = field(default_factory=list)


class EditorSession:
    """The single ``(Position, ToolState, History)`` triple of an editor.

    Methods are meant to be called from one thread (the UI thread); each
    call applies one event completely before returning.
    """

    __slots__ = ("_history", "_tool", "_preview", "_rect", "events")

    def __init__(self, position: Position | None = None) -> None:
        self._history = History(position if position is not None else Position())
        self._tool = ToolState()
        self._preview: Position | None = None
        self._rect = ViewportRect.identity()
        self.events = EditorEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def history(self) -> History:
        return self._history

    @property
    def tool_state(self) -> ToolState:
        return self._tool

    @property
    def board_rect(self) -> ViewportRect:
        return self._rect

    @property
    def position(self) -> Position:
        """Last committed position."""
        return self._history.current()

    @property
    def displayed_position(self) -> Position:
        """Drag preview if a drag is in progress, else the committed position."""
        return self._preview if self._preview is not None else self.position

    # ── Dispatch ─────────────────────────────────────────────────────────

    def handle(self, event: EditorEvent) -> None:
        """Apply a single input event."""
        if isinstance(event, PointerDown):
            self.pointer_down(event.point)
        elif isinstance(event, PointerMove):
            self.pointer_move(event.point, pressed=event.pressed)
        elif isinstance(event, PointerUp):
            self.pointer_up(event.point)
        elif isinstance(event, KeyDelete):
            self.delete_selection()
        elif isinstance(event, AddPiece):
            self.add_piece(event.side, event.kind)
        elif isinstance(event, Undo):
            self.undo()
        elif isinstance(event, Redo):
            self.redo()
        elif isinstance(event, Reset):
            self.reset(event.position)
        elif isinstance(event, BoardRectChanged):
            self.set_board_rect(event.rect)
        else:
            raise TypeError(f"Unsupported editor event: {event!r}")

    # ── Pointer ──────────────────────────────────────────────────────────

    def pointer_down(self, point: ScreenPoint) -> None:
        self._apply(*tool.start_drag(self.position, self._tool, self._map(point)))

    def pointer_move(self, point: ScreenPoint, *, pressed: bool = False) -> None:
        board_point = self._map(point)
        if self._tool.is_dragging:
            self._apply(*tool.continue_drag(self._tool, board_point))
        elif not pressed:
            self._apply(*tool.hover(self.position, self._tool, board_point))

    def pointer_up(self, point: ScreenPoint) -> None:
        self._apply(*tool.stop_or_click(self.position, self._tool, self._map(point)))

    # ── Keyboard / palette ───────────────────────────────────────────────

    def delete_selection(self) -> None:
        self._apply(*tool.delete_selection(self.position, self._tool))

    def add_piece(self, side: Side, kind: PieceKind) -> None:
        self._apply(*tool.add_piece(self.position, self._tool, side, kind))

    # ── History ──────────────────────────────────────────────────────────

    def undo(self) -> None:
        if self._history.undo():
            _LOGGER.debug("Undo → %s", self.position)
        self._drop_gesture()

    def redo(self) -> None:
        if self._history.redo():
            _LOGGER.debug("Redo → %s", self.position)
        self._drop_gesture()

    def reset(self, position: Position) -> None:
        """Switch to *position* as a single undoable step."""
        self._commit(position)
        self._drop_gesture()

    # ── Board geometry ───────────────────────────────────────────────────

    def set_board_rect(self, rect: ViewportRect) -> None:
        """Use *rect* for mapping subsequent pointer events."""
        self._rect = rect

    # ── Notation ─────────────────────────────────────────────────────────

    def notation(self) -> str:
        """Board notation for the committed position."""
        return position_to_text(self.position)

    def load_notation(self, text: str) -> None:
        """Parse *text* and switch to it; undo brings the old board back.

        Raises :class:`ValueError` on malformed input; the session is
        left untouched in that case.
        """
        position = position_from_text(text, self.position.move_number)
        self.reset(position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _map(self, point: ScreenPoint) -> BoardPoint:
        return to_board_point(self._rect, point)

    def _apply(self, state: ToolState, outcome: ToolOutcome) -> None:
        changed = state != self._tool
        self._tool = state

        if isinstance(outcome, Commit):
            self._preview = None
            changed = True
            self._commit(outcome.position)
        elif isinstance(outcome, Preview):
            self._preview = outcome.position
            changed = True
        elif isinstance(outcome, Rollback):
            changed = changed or self._preview is not None
            self._preview = None

        if changed:
            self._notify()

    def _commit(self, position: Position) -> None:
        if self._history.commit(position):
            _LOGGER.debug("Commit → %s", position)
            for cb in self.events.on_commit:
                cb(position)

    def _drop_gesture(self) -> None:
        self._preview = None
        self._tool = ToolState()
        self._notify()

    def _notify(self) -> None:
        displayed = self.displayed_position
        for cb in self.events.on_changed:
            cb(displayed, self._tool)
