"""Tests for the highlight cycle and selection matching."""

import pytest

from helpers import piece, position
from unionchess.core.enums import Highlight, Side
from unionchess.core.types import Tile, parse_tile
from unionchess.editor.selection import (
    cycle,
    piece_matches_selection,
    pieces_in_scope,
    selection_scope,
)

W, B = Side.WHITE, Side.BLACK
D4 = parse_tile("d4")
E5 = parse_tile("e5")


class TestCycle:
    def test_nothing_selected_starts_at_both(self) -> None:
        assert cycle(D4, None) == (D4, Highlight.BOTH)

    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (Highlight.BOTH, Highlight.WHITE_ONLY),
            (Highlight.WHITE_ONLY, Highlight.BLACK_ONLY),
            (Highlight.BLACK_ONLY, None),
            (Highlight.LINGERING, Highlight.BOTH),
        ],
    )
    def test_same_tile(self, current: Highlight, expected: Highlight | None) -> None:
        result = cycle(D4, (D4, current))
        if expected is None:
            assert result is None
        else:
            assert result == (D4, expected)

    @pytest.mark.parametrize("current", list(Highlight))
    def test_other_tile_restarts(self, current: Highlight) -> None:
        assert cycle(E5, (D4, current)) == (E5, Highlight.BOTH)

    def test_four_clicks_close_the_cycle(self) -> None:
        selection = None
        seen = []
        for _ in range(4):
            selection = cycle(D4, selection)
            seen.append(selection)
        assert seen == [
            (D4, Highlight.BOTH),
            (D4, Highlight.WHITE_ONLY),
            (D4, Highlight.BLACK_ONLY),
            None,
        ]


class TestMatching:
    def test_both_matches_either_side(self) -> None:
        assert piece_matches_selection(D4, Highlight.BOTH, piece("n", W, "d4"))
        assert piece_matches_selection(D4, Highlight.BOTH, piece("b", B, "d4"))

    def test_single_side(self) -> None:
        white, black = piece("n", W, "d4"), piece("b", B, "d4")
        assert piece_matches_selection(D4, Highlight.WHITE_ONLY, white)
        assert not piece_matches_selection(D4, Highlight.WHITE_ONLY, black)
        assert piece_matches_selection(D4, Highlight.BLACK_ONLY, black)
        assert not piece_matches_selection(D4, Highlight.BLACK_ONLY, white)

    def test_other_tile_never_matches(self) -> None:
        assert not piece_matches_selection(E5, Highlight.BOTH, piece("n", W, "d4"))

    def test_lingering_never_matches(self) -> None:
        assert not piece_matches_selection(D4, Highlight.LINGERING, piece("n", W, "d4"))

    def test_scope_treats_lingering_as_both(self) -> None:
        assert selection_scope(Highlight.LINGERING) is Highlight.BOTH
        assert selection_scope(Highlight.BLACK_ONLY) is Highlight.BLACK_ONLY

    def test_pieces_in_scope(self) -> None:
        white, black = piece("n", W, "d4"), piece("b", B, "d4")
        pos = position(white, piece("p", W, "a2"), black)
        assert pieces_in_scope(pos, D4, Highlight.LINGERING) == [white, black]
        assert pieces_in_scope(pos, D4, Highlight.BLACK_ONLY) == [black]
        assert pieces_in_scope(pos, Tile(7, 7), Highlight.BOTH) == []
