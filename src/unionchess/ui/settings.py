"""Editor settings and how they are applied to a running window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from unionchess.core.notation import STARTING_TEXT
from unionchess.ui.styles.theme import THEMES, BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Position loaded at start-up, in board notation
    start_position: str = STARTING_TEXT


def apply_settings(host: Any, settings: AppSettings) -> None:
    scene = host.board_view.board_scene
    scene.set_theme(THEMES.get(settings.board_theme, BoardTheme.default()))
    scene.set_show_coordinates(settings.show_coordinates)
