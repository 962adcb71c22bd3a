"""Core domain layer — pure board data with zero external dependencies.

Quick start::

    from unionchess.core import STARTING_TEXT, parse_tile, position_from_text

    pos = position_from_text(STARTING_TEXT)
    for piece in pos.pieces_at(parse_tile("e1")):
        print(piece)
"""

from unionchess.core.enums import Highlight, PieceKind, Side
from unionchess.core.geometry import (
    BOARD_SIZE,
    TILE_SIZE,
    BoardPoint,
    ScreenPoint,
    ViewportRect,
    tile_origin,
    to_board_point,
    to_tile,
)
from unionchess.core.notation import (
    EMPTY_TEXT,
    STARTING_TEXT,
    position_from_text,
    position_to_text,
)
from unionchess.core.piece import Piece
from unionchess.core.position import Position
from unionchess.core.types import ALL_TILES, Tile, parse_tile, tile_name

__all__ = [
    # Enums
    "Highlight",
    "PieceKind",
    "Side",
    # Types / helpers
    "ALL_TILES",
    "Tile",
    "parse_tile",
    "tile_name",
    # Geometry
    "BOARD_SIZE",
    "TILE_SIZE",
    "BoardPoint",
    "ScreenPoint",
    "ViewportRect",
    "tile_origin",
    "to_board_point",
    "to_tile",
    # Domain objects
    "Piece",
    "Position",
    # Notation
    "EMPTY_TEXT",
    "STARTING_TEXT",
    "position_from_text",
    "position_to_text",
]
