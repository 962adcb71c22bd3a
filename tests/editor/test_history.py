"""Tests for the undo/redo history."""

from helpers import piece, position
from unionchess.core.enums import Side
from unionchess.core.position import Position
from unionchess.editor.history import History

P0 = Position()
P1 = position(piece("r", Side.WHITE, "a1"))
P2 = position(piece("r", Side.WHITE, "a2"))
P3 = position(piece("r", Side.WHITE, "a3"))


class TestCommit:
    def test_initial_state(self) -> None:
        h = History(P0)
        assert h.current() == P0
        assert h.past == [] and h.future == []
        assert not h.can_undo and not h.can_redo

    def test_commit_pushes_present(self) -> None:
        h = History(P0)
        assert h.commit(P1)
        assert h.current() == P1
        assert h.past == [P0]

    def test_commit_of_present_is_ignored(self) -> None:
        h = History(P0)
        h.commit(P1)
        h.commit(P2)
        h.undo()
        past, future = list(h.past), list(h.future)
        assert not h.commit(P1)
        assert h.past == past
        assert h.future == future

    def test_equal_but_distinct_object_is_ignored(self) -> None:
        h = History(P1)
        assert not h.commit(position(piece("r", Side.WHITE, "a1")))
        assert h.past == []


class TestUndoRedo:
    def test_undo_on_fresh_history_is_noop(self) -> None:
        h = History(P0)
        assert not h.undo()
        assert h.current() == P0
        assert h.future == []

    def test_redo_on_fresh_history_is_noop(self) -> None:
        h = History(P0)
        assert not h.redo()
        assert h.current() == P0

    def test_undo_then_redo(self) -> None:
        h = History(P0)
        h.commit(P1)
        h.commit(P2)
        assert h.undo()
        assert h.current() == P1
        assert h.undo()
        assert h.current() == P0
        assert h.redo()
        assert h.current() == P1
        assert h.redo()
        assert h.current() == P2
        assert not h.redo()

    def test_commit_after_undo_discards_redo(self) -> None:
        h = History(P0)
        h.commit(P1)
        h.commit(P2)
        h.undo()
        assert h.commit(P3)
        assert not h.can_redo
        assert not h.redo()
        assert h.current() == P3
        assert h.past == [P0, P1]
