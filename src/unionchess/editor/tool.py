"""Smart tool — gesture state machine for click, drag, delete and add.

Every transition is a pure function
``(Position, ToolState, input) -> (ToolState, ToolOutcome)``. The
position passed in is always the last *committed* one; a drag preview is
never fed back in. The caller decides what to do with the outcome:
``Commit`` advances the history, ``Preview`` is shown but not recorded,
``Rollback`` discards any preview.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

from unionchess.core.enums import Highlight, PieceKind, Side
from unionchess.core.geometry import BoardPoint, to_tile
from unionchess.core.piece import Piece
from unionchess.core.position import Position
from unionchess.core.types import Tile
from unionchess.editor.selection import Selection, cycle, pieces_in_scope

# ── Outcomes ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class NoOp:
    """Nothing to do for the position."""


@dataclass(frozen=True, slots=True)
class Commit:
    """Record *position* in the history."""

    position: Position


@dataclass(frozen=True, slots=True)
class Preview:
    """Show *position* while a gesture is in progress."""

    position: Position


@dataclass(frozen=True, slots=True)
class Rollback:
    """Discard any preview and show the committed position again."""


ToolOutcome: TypeAlias = NoOp | Commit | Preview | Rollback


# ── State ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ToolState:
    """Selection plus drag-in-progress data."""

    highlight: Selection | None = None
    drag_origin: Tile | None = None
    drag_start: BoardPoint | None = None
    drag_offset: BoardPoint | None = None
    dragging_pieces: tuple[Piece, ...] = ()
    hover_tile: Tile | None = None

    @property
    def is_dragging(self) -> bool:
        return self.drag_origin is not None

    @property
    def highlighted_tile(self) -> Tile | None:
        return self.highlight[0] if self.highlight is not None else None


_IDLE = ToolState()


def _drag_scope(state: ToolState, tile: Tile) -> Highlight:
    """Highlight governing which pieces a gesture starting on *tile* grabs."""
    if state.highlight is not None:
        hl_tile, highlight = state.highlight
        if hl_tile == tile and highlight is not Highlight.LINGERING:
            return highlight
    return Highlight.BOTH


def _selection_elsewhere(
    position: Position, state: ToolState, tile: Tile
) -> Selection | None:
    """The highlight, if it sits on another tile and grabs some pieces there."""
    if state.highlight is None:
        return None
    hl_tile, highlight = state.highlight
    if hl_tile == tile or not pieces_in_scope(position, hl_tile, highlight):
        return None
    return state.highlight


# ── Legality ─────────────────────────────────────────────────────────────────


def move_pieces_if_permitted(
    position: Position,
    source: Tile,
    target: Tile,
    scope: Highlight = Highlight.BOTH,
) -> Position | None:
    """Move the in-scope pieces from *source* to *target*.

    Returns ``None`` when nothing is in scope or when the move would put
    two pieces of the same side on *target*.
    """
    moving = pieces_in_scope(position, source, scope)
    if not moving:
        return None

    involved = moving + [p for p in position.pieces_at(target) if p not in moving]
    sides = [p.side for p in involved]
    if len(sides) != len(set(sides)):
        return None

    return position.with_pieces_moved(moving, target)


# ── Pointer transitions ──────────────────────────────────────────────────────


def start_drag(
    position: Position, state: ToolState, point: BoardPoint
) -> tuple[ToolState, ToolOutcome]:
    """Pointer pressed at *point*."""
    tile = to_tile(point)
    if tile is None or state.is_dragging:
        return state, NoOp()

    lifted = pieces_in_scope(position, tile, _drag_scope(state, tile))
    new_state = replace(
        state,
        drag_origin=tile,
        drag_start=point,
        drag_offset=BoardPoint(0, 0),
        dragging_pieces=tuple(lifted),
        hover_tile=None,
    )
    if not lifted:
        return new_state, NoOp()
    return new_state, Preview(position.without(lifted))


def continue_drag(
    state: ToolState, point: BoardPoint
) -> tuple[ToolState, ToolOutcome]:
    """Pointer moved with the button held."""
    if state.drag_start is None:
        return state, NoOp()
    return replace(state, drag_offset=point - state.drag_start), NoOp()


def hover(
    position: Position, state: ToolState, point: BoardPoint
) -> tuple[ToolState, ToolOutcome]:
    """Pointer moved with no button held: update the drop-target marker."""
    tile = to_tile(point)
    hover_tile: Tile | None = None
    hl_tile = state.highlighted_tile
    if (
        tile is not None
        and hl_tile is not None
        and tile != hl_tile
        and not position.is_empty(hl_tile)
    ):
        hover_tile = tile
    if hover_tile == state.hover_tile:
        return state, NoOp()
    return replace(state, hover_tile=hover_tile), NoOp()


def stop_or_click(
    position: Position, state: ToolState, point: BoardPoint
) -> tuple[ToolState, ToolOutcome]:
    """Pointer released: finish a drag or interpret a click."""
    origin = state.drag_origin
    if origin is None:
        return state, NoOp()

    tile = to_tile(point)
    if tile is None:
        return _IDLE, Rollback()

    if tile == origin:
        selected = _selection_elsewhere(position, state, tile)
        if selected is not None:
            # Select then click: the selection moves onto the clicked tile.
            source, scope = selected
            moved = move_pieces_if_permitted(position, source, tile, scope)
            if moved is None:
                return _IDLE, Rollback()
            return _IDLE, Commit(moved)

        count = len(position.pieces_at(tile))
        highlight: Selection | None
        if count == 2:
            highlight = cycle(tile, state.highlight)
        elif count == 0 and state.highlighted_tile != tile:
            highlight = (tile, Highlight.BOTH)
        else:
            highlight = None
        return ToolState(highlight=highlight), Rollback()

    moved = move_pieces_if_permitted(
        position, origin, tile, _drag_scope(state, origin)
    )
    if moved is None:
        return _IDLE, Rollback()
    return _IDLE, Commit(moved)


# ── Keyboard / palette transitions ───────────────────────────────────────────


def delete_selection(
    position: Position, state: ToolState
) -> tuple[ToolState, ToolOutcome]:
    """Remove the selected piece(s)."""
    if state.highlight is None or state.is_dragging:
        return state, NoOp()

    tile, highlight = state.highlight
    remaining = position.without(pieces_in_scope(position, tile, highlight))
    new_highlight: Selection | None = None
    if not remaining.is_empty(tile):
        new_highlight = (tile, Highlight.BOTH)
    return ToolState(highlight=new_highlight), Commit(remaining)


def add_piece(
    position: Position, state: ToolState, side: Side, kind: PieceKind
) -> tuple[ToolState, ToolOutcome]:
    """Place a piece on the highlighted tile, replacing one of the same side."""
    if state.highlight is None or state.is_dragging:
        return state, NoOp()

    tile = state.highlight[0]
    new_state = ToolState(highlight=(tile, Highlight.LINGERING))
    piece = Piece(kind, side, tile)
    existing = position.piece_at(tile, side)
    if existing == piece:
        return new_state, NoOp()
    if existing is not None:
        position = position.with_piece_removed(existing)
    return new_state, Commit(position.with_piece_added(piece))
