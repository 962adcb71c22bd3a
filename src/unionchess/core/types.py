"""Tile value object and coordinate helpers.

Tiles are addressed by ``(x, y)`` pairs:
    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_TILES = 8


@dataclass(frozen=True, slots=True)
class Tile:
    """A board tile; ``x`` is the file and ``y`` the rank, both 0-7."""

    x: int
    y: int

    def __str__(self) -> str:
        return tile_name(self)


def is_on_board(x: int, y: int) -> bool:
    """Check whether a coordinate pair lies on the 8x8 board."""
    return 0 <= x < BOARD_TILES and 0 <= y < BOARD_TILES


def tile_name(tile: Tile) -> str:
    """Human-readable name, e.g. Tile(4, 3) → 'e4'."""
    return chr(ord("a") + tile.x) + str(tile.y + 1)


def parse_tile(name: str) -> Tile:
    """Parse tile name, e.g. 'e4' → Tile(4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid tile name: {name!r}")
    return Tile(ord(name[0]) - ord("a"), int(name[1]) - 1)


# Rank-major, a1 first.
ALL_TILES: tuple[Tile, ...] = tuple(
    Tile(x, y) for y in range(BOARD_TILES) for x in range(BOARD_TILES)
)
