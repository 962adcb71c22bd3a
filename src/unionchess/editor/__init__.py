"""Editor layer — selection, smart tool, history and the session that ties them.

Quick start::

    from unionchess.editor import EditorSession, PointerDown, PointerUp

    session = EditorSession(position_from_text(STARTING_TEXT))
    session.handle(PointerDown(ScreenPoint(450, 750)))  # e1
    session.handle(PointerUp(ScreenPoint(450, 450)))  # e4
"""

from unionchess.editor.events import (
    AddPiece,
    BoardRectChanged,
    EditorEvent,
    KeyDelete,
    PointerDown,
    PointerMove,
    PointerUp,
    Redo,
    Reset,
    Undo,
)
from unionchess.editor.history import History
from unionchess.editor.selection import (
    Selection,
    cycle,
    piece_matches_selection,
    pieces_in_scope,
    selection_scope,
)
from unionchess.editor.session import EditorEvents, EditorSession
from unionchess.editor.tool import (
    Commit,
    NoOp,
    Preview,
    Rollback,
    ToolOutcome,
    ToolState,
    move_pieces_if_permitted,
)

__all__ = [
    # Events
    "AddPiece",
    "BoardRectChanged",
    "EditorEvent",
    "KeyDelete",
    "PointerDown",
    "PointerMove",
    "PointerUp",
    "Redo",
    "Reset",
    "Undo",
    # Selection
    "Selection",
    "cycle",
    "piece_matches_selection",
    "pieces_in_scope",
    "selection_scope",
    # Tool
    "Commit",
    "NoOp",
    "Preview",
    "Rollback",
    "ToolOutcome",
    "ToolState",
    "move_pieces_if_permitted",
    # Session / history
    "EditorEvents",
    "EditorSession",
    "History",
]
