"""Small builders shared by tests."""

from __future__ import annotations

from unionchess.core.enums import PieceKind, Side
from unionchess.core.geometry import TILE_SIZE, ScreenPoint
from unionchess.core.piece import Piece
from unionchess.core.position import Position
from unionchess.core.types import Tile, parse_tile


def piece(letter: str, side: Side, tile: str) -> Piece:
    kinds = {
        "p": PieceKind.PAWN,
        "n": PieceKind.KNIGHT,
        "b": PieceKind.BISHOP,
        "r": PieceKind.ROOK,
        "q": PieceKind.QUEEN,
        "k": PieceKind.KING,
    }
    return Piece(kinds[letter], side, parse_tile(tile))


def position(*pieces: Piece, move_number: int = 1) -> Position:
    return Position(move_number, tuple(pieces))


def center(tile: Tile) -> ScreenPoint:
    """Screen point at the middle of *tile* under the identity viewport."""
    return ScreenPoint(
        tile.x * TILE_SIZE + TILE_SIZE / 2, (7 - tile.y) * TILE_SIZE + TILE_SIZE / 2
    )
