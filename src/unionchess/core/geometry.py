"""Screen → board → tile coordinate mapping.

Board space is a fixed 800×800 square. Tile ``(x, y)`` covers pixels
``[100x, 100x + 100) × [700 - 100y, 800 - 100y)``: rank 1 is at the bottom,
so the y axis runs opposite to rank numbering.
"""

from __future__ import annotations

from dataclasses import dataclass

from unionchess.core.types import BOARD_TILES, Tile, is_on_board

TILE_SIZE = 100
BOARD_SIZE = TILE_SIZE * BOARD_TILES


@dataclass(frozen=True, slots=True)
class ScreenPoint:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class BoardPoint:
    """Integer point in board space."""

    x: int
    y: int

    def __sub__(self, other: BoardPoint) -> BoardPoint:
        return BoardPoint(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True)
class ViewportRect:
    """Where the board is drawn on screen."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def identity(cls) -> ViewportRect:
        """A rect under which screen and board coordinates coincide."""
        return cls(0.0, 0.0, float(BOARD_SIZE), float(BOARD_SIZE))


def to_board_point(rect: ViewportRect, point: ScreenPoint) -> BoardPoint:
    """Map a screen point into board space.

    Always produces a value, possibly outside ``[0, 800)``. A degenerate
    rect translates the point without scaling it.
    """
    dx = point.x - rect.x
    dy = point.y - rect.y
    if rect.width > 0:
        dx = dx / rect.width * BOARD_SIZE
    if rect.height > 0:
        dy = dy / rect.height * BOARD_SIZE
    return BoardPoint(int(dx // 1), int(dy // 1))


def to_tile(point: BoardPoint) -> Tile | None:
    """Tile under a board point, or ``None`` when it falls off the board."""
    x = point.x // TILE_SIZE
    y = BOARD_TILES - 1 - point.y // TILE_SIZE
    if not is_on_board(x, y):
        return None
    return Tile(x, y)


def tile_origin(tile: Tile) -> BoardPoint:
    """Top-left board point of *tile*."""
    return BoardPoint(tile.x * TILE_SIZE, (BOARD_TILES - 1 - tile.y) * TILE_SIZE)
