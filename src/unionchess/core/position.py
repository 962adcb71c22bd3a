"""Position — immutable piece placement plus advisory move number."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from unionchess.core.enums import Side
from unionchess.core.piece import Piece
from unionchess.core.types import Tile


@dataclass(frozen=True, slots=True)
class Position:
    """A set of pieces and their tiles.

    ``pieces`` keeps insertion order and that order takes part in
    equality; use :meth:`normalized` when comparing positions as sets.
    Nothing is validated here: the editor checks legality before it
    builds a new position.
    """

    move_number: int = 1
    pieces: tuple[Piece, ...] = ()

    @classmethod
    def empty(cls, move_number: int = 1) -> Position:
        return cls(move_number, ())

    # ── Queries ──────────────────────────────────────────────────────────

    def pieces_at(self, tile: Tile) -> list[Piece]:
        """Pieces standing on *tile* (at most two in a consistent position)."""
        return [p for p in self.pieces if p.tile == tile]

    def piece_at(self, tile: Tile, side: Side) -> Piece | None:
        for piece in self.pieces:
            if piece.tile == tile and piece.side == side:
                return piece
        return None

    def is_empty(self, tile: Tile) -> bool:
        return not any(p.tile == tile for p in self.pieces)

    def occupied_tiles(self) -> set[Tile]:
        return {p.tile for p in self.pieces}

    def is_consistent(self) -> bool:
        """True when no tile holds two pieces of the same side."""
        seen: set[tuple[Tile, Side]] = set()
        for piece in self.pieces:
            key = (piece.tile, piece.side)
            if key in seen:
                return False
            seen.add(key)
        return True

    # ── Derivation ───────────────────────────────────────────────────────

    def with_piece_added(self, piece: Piece) -> Position:
        return Position(self.move_number, (*self.pieces, piece))

    def with_piece_removed(self, piece: Piece) -> Position:
        """Drop the first occurrence of *piece*; unchanged if absent."""
        pieces = list(self.pieces)
        try:
            pieces.remove(piece)
        except ValueError:
            return self
        return Position(self.move_number, tuple(pieces))

    def without(self, pieces: Iterable[Piece]) -> Position:
        """Drop every piece in *pieces*."""
        result = self
        for piece in pieces:
            result = result.with_piece_removed(piece)
        return result

    def with_pieces_moved(self, pieces: Iterable[Piece], target: Tile) -> Position:
        """Relocate *pieces* to *target*, keeping their place in the order."""
        moving = set(pieces)
        return Position(
            self.move_number,
            tuple(p.moved_to(target) if p in moving else p for p in self.pieces),
        )

    def with_move_number(self, move_number: int) -> Position:
        return Position(move_number, self.pieces)

    def normalized(self) -> Position:
        """Same position with pieces in canonical (rank, file, side) order."""
        return Position(
            self.move_number,
            tuple(
                sorted(self.pieces, key=lambda p: (p.tile.y, p.tile.x, int(p.side)))
            ),
        )

    def __str__(self) -> str:
        placed = ", ".join(str(p) for p in self.pieces) or "empty"
        return f"#{self.move_number}: {placed}"
