"""Core enumerations for the union chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Side(IntEnum):
    """Owner of a piece. A tile holds at most one piece per side."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Highlight(Enum):
    """Which piece(s) on the highlighted tile the selection grabs.

    ``LINGERING`` is shown after a piece is added; it acts like ``BOTH``
    for the next gesture but restarts the cycle.
    """

    BOTH = "both"
    WHITE_ONLY = "white"
    BLACK_ONLY = "black"
    LINGERING = "lingering"

    @property
    def side(self) -> Side | None:
        """The single side this highlight selects, if any."""
        if self is Highlight.WHITE_ONLY:
            return Side.WHITE
        if self is Highlight.BLACK_ONLY:
            return Side.BLACK
        return None
