"""Input events accepted by :class:`~unionchess.editor.session.EditorSession`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from unionchess.core.enums import PieceKind, Side
from unionchess.core.geometry import ScreenPoint, ViewportRect
from unionchess.core.position import Position


@dataclass(frozen=True, slots=True)
class PointerDown:
    point: ScreenPoint


@dataclass(frozen=True, slots=True)
class PointerMove:
    point: ScreenPoint
    pressed: bool = False  # a button is held


@dataclass(frozen=True, slots=True)
class PointerUp:
    point: ScreenPoint


@dataclass(frozen=True, slots=True)
class KeyDelete:
    pass


@dataclass(frozen=True, slots=True)
class AddPiece:
    side: Side
    kind: PieceKind


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Redo:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    position: Position


@dataclass(frozen=True, slots=True)
class BoardRectChanged:
    rect: ViewportRect


EditorEvent: TypeAlias = (
    PointerDown
    | PointerMove
    | PointerUp
    | KeyDelete
    | AddPiece
    | Undo
    | Redo
    | Reset
    | BoardRectChanged
)
