"""Plain-text board notation.

Eight rows, top row first (rank 8), separated by newlines. Each row holds
eight space-separated cells of two characters: the white piece letter or
``.``, then the black piece letter or ``.``::

    R. N. B. Q. K. B. N. R.
    ...
    .r .n .b .q .k .b .n .r

Only placement is stored; the move number is supplied by the caller.
"""

from __future__ import annotations

from unionchess.core.enums import Side
from unionchess.core.piece import Piece, kind_from_letter
from unionchess.core.position import Position
from unionchess.core.types import BOARD_TILES, Tile

EMPTY_CELL = "."

EMPTY_TEXT = "\n".join([" ".join([".."] * BOARD_TILES)] * BOARD_TILES)

_BACK_RANK = "rnbqkbnr"


def _starting_text() -> str:
    rows: list[str] = []
    for y in range(BOARD_TILES - 1, -1, -1):
        if y == 7:
            cells = [f".{c}" for c in _BACK_RANK]
        elif y == 6:
            cells = [".p"] * BOARD_TILES
        elif y == 1:
            cells = ["P."] * BOARD_TILES
        elif y == 0:
            cells = [f"{c.upper()}." for c in _BACK_RANK]
        else:
            cells = [".."] * BOARD_TILES
        rows.append(" ".join(cells))
    return "\n".join(rows)


STARTING_TEXT = _starting_text()


def position_from_text(text: str, move_number: int = 1) -> Position:
    """Parse board notation into a :class:`Position`.

    Raises :class:`ValueError` on malformed input.
    """
    rows = [line for line in text.strip().splitlines() if line.strip()]
    if len(rows) != BOARD_TILES:
        raise ValueError(
            f"Invalid board notation (need {BOARD_TILES} rows, got {len(rows)})"
        )

    pieces: list[Piece] = []
    for row_idx, row in enumerate(rows):
        y = BOARD_TILES - 1 - row_idx
        cells = row.split()
        if len(cells) != BOARD_TILES:
            raise ValueError(
                f"Invalid board notation row {row_idx + 1} "
                f"(need {BOARD_TILES} cells): {row!r}"
            )
        for x, cell in enumerate(cells):
            if len(cell) != 2:
                raise ValueError(
                    f"Invalid board notation cell {cell!r} in row {row_idx + 1}"
                )
            for side, char in zip((Side.WHITE, Side.BLACK), cell):
                if char == EMPTY_CELL:
                    continue
                try:
                    kind = kind_from_letter(char)
                except ValueError:
                    raise ValueError(
                        f"Invalid board notation cell {cell!r} in row {row_idx + 1}"
                    ) from None
                pieces.append(Piece(kind, side, Tile(x, y)))

    return Position(move_number, tuple(pieces))


def position_to_text(position: Position) -> str:
    """Serialise the placement of *position*.

    Pieces beyond the first of each side on a tile cannot be expressed
    and are dropped.
    """
    grid: dict[tuple[Tile, Side], str] = {}
    for piece in position.pieces:
        grid.setdefault((piece.tile, piece.side), piece.letter)

    rows: list[str] = []
    for y in range(BOARD_TILES - 1, -1, -1):
        cells = []
        for x in range(BOARD_TILES):
            tile = Tile(x, y)
            white = grid.get((tile, Side.WHITE), EMPTY_CELL).upper()
            black = grid.get((tile, Side.BLACK), EMPTY_CELL).lower()
            cells.append(white + black)
        rows.append(" ".join(cells))
    return "\n".join(rows)
