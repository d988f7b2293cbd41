"""A minimal race HUD showing the player's position and lap."""

from __future__ import annotations

from typing import Any, Optional

from .events import Event

MAX_PLAYERS = 8
TOTAL_LAPS = 3


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix: "st", "nd", "rd" or "th"."""
    if 11 <= number <= 13 or number < 0:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def format_position(position: int) -> str:
    return f"{position}{ordinal_suffix(position)}"


def format_lap(lap: int) -> str:
    return f"LAP {lap}/{TOTAL_LAPS}"


class MinimalHud:
    """HUD state for one player's kart.

    ``on_position_updated`` is emitted with ``(position, total_players)`` and
    ``on_lap_updated`` with ``(lap, total_laps)`` on every :meth:`update`.
    """

    def __init__(self, player_kart: Any = None) -> None:
        self.player_kart = player_kart
        self.visible = True
        self.countdown_visible = False
        self.race_finished_visible = False
        self.position_text = ""
        self.lap_text = ""
        self.on_position_updated = Event()
        self.on_lap_updated = Event()

    def update(self) -> None:
        """Refresh position and lap from the player's kart."""
        kart: Optional[Any] = self.player_kart
        if kart is None:
            return
        position = kart.position
        lap = kart.current_lap
        self.on_position_updated.emit(position, MAX_PLAYERS)
        self.on_lap_updated.emit(lap, TOTAL_LAPS)
        self.position_text = format_position(position)
        self.lap_text = format_lap(lap)

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)