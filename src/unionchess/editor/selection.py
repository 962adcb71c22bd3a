"""Tile highlight and the selection cycle for unions."""

from __future__ import annotations

from typing import TypeAlias

from unionchess.core.enums import Highlight
from unionchess.core.piece import Piece
from unionchess.core.position import Position
from unionchess.core.types import Tile

Selection: TypeAlias = tuple[Tile, Highlight]

# Same-tile click on a union: highlight → next highlight (None = deselect).
_NEXT_ON_SAME_TILE: dict[Highlight, Highlight | None] = {
    Highlight.BOTH: Highlight.WHITE_ONLY,
    Highlight.WHITE_ONLY: Highlight.BLACK_ONLY,
    Highlight.BLACK_ONLY: None,
    Highlight.LINGERING: Highlight.BOTH,
}


def cycle(clicked: Tile, current: Selection | None) -> Selection | None:
    """Advance the selection after a click on a two-piece tile.

    Clicking a different tile always starts over at ``BOTH``.
    """
    if current is None:
        return clicked, Highlight.BOTH
    tile, highlight = current
    if tile != clicked:
        return clicked, Highlight.BOTH
    nxt = _NEXT_ON_SAME_TILE[highlight]
    if nxt is None:
        return None
    return tile, nxt


def selection_scope(highlight: Highlight) -> Highlight:
    """Highlight used for acting on pieces; ``LINGERING`` acts as ``BOTH``."""
    if highlight is Highlight.LINGERING:
        return Highlight.BOTH
    return highlight


def piece_matches_selection(tile: Tile, highlight: Highlight, piece: Piece) -> bool:
    """Whether *piece* is grabbed by *highlight* on *tile*.

    ``LINGERING`` is display-only and never matches.
    """
    if piece.tile != tile or highlight is Highlight.LINGERING:
        return False
    return highlight is Highlight.BOTH or highlight.side == piece.side


def pieces_in_scope(position: Position, tile: Tile, highlight: Highlight) -> list[Piece]:
    scope = selection_scope(highlight)
    return [p for p in position.pieces if piece_matches_selection(tile, scope, p)]
