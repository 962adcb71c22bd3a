"""Undo/redo history of committed positions."""

from __future__ import annotations

from dataclasses import dataclass, field

from unionchess.core.position import Position


@dataclass
class History:
    """Two stacks around the present position.

    A commit that differs from the present discards the redo branch;
    a commit equal to the present is ignored.
    """

    present: Position
    past: list[Position] = field(default_factory=list)
    future: list[Position] = field(default_factory=list)

    def current(self) -> Position:
        return self.present

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def commit(self, position: Position) -> bool:
        """Make *position* the present. Returns whether history changed."""
        if position == self.present:
            return False
        self.past.append(self.present)
        self.present = position
        self.future.clear()
        return True

    def undo(self) -> bool:
        if not self.past:
            return False
        self.future.append(self.present)
        self.present = self.past.pop()
        return True

    def redo(self) -> bool:
        if not self.future:
            return False
        self.past.append(self.present)
        self.present = self.future.pop()
        return True
