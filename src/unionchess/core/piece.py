"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from unionchess.core.enums import PieceKind, Side
from unionchess.core.types import Tile

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}

_KINDS: dict[str, PieceKind] = {v: k for k, v in _LETTERS.items()}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}


def kind_from_letter(char: str) -> PieceKind:
    """Piece kind for a notation letter, case-insensitive ('N' → knight)."""
    try:
        return _KINDS[char.lower()]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece of one side standing on a tile."""

    kind: PieceKind
    side: Side
    tile: Tile

    def moved_to(self, tile: Tile) -> Piece:
        return Piece(self.kind, self.side, tile)

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def letter(self) -> str:
        """Notation letter (uppercase = white, lowercase = black)."""
        char = _LETTERS[self.kind]
        return char.upper() if self.side == Side.WHITE else char

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]

    def __str__(self) -> str:
        return f"{self.letter}@{self.tile}"
