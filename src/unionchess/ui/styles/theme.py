"""Visual theme constants and QSS styles for the editor."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from unionchess.core.enums import Highlight


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    light_square: QColor
    dark_square: QColor
    highlight_both: QColor  # whole tile selected
    highlight_white: QColor  # only the white piece selected
    highlight_black: QColor  # only the black piece selected
    highlight_lingering: QColor  # just-placed piece
    drop_target: QColor  # hover marker for select-then-click
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def highlight_color(self, highlight: Highlight) -> QColor:
        return {
            Highlight.BOTH: self.highlight_both,
            Highlight.WHITE_ONLY: self.highlight_white,
            Highlight.BLACK_ONLY: self.highlight_black,
            Highlight.LINGERING: self.highlight_lingering,
        }[highlight]

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_both=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_white=QColor(255, 255, 255, 130),
            highlight_black=QColor(30, 30, 30, 110),
            highlight_lingering=QColor(155, 199, 0, 105),  # green
            drop_target=QColor(0, 0, 0, 40),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_both=QColor(255, 255, 0, 100),
            highlight_white=QColor(255, 255, 255, 130),
            highlight_black=QColor(30, 30, 30, 110),
            highlight_lingering=QColor(155, 199, 0, 105),
            drop_target=QColor(0, 0, 0, 40),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
}

QPlainTextEdit {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 8px;
    font-size: 16px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
