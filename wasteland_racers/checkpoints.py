"""Track checkpoints and finish lines that report karts passing them."""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Set

from .events import Event
from .kart import Kart

log = logging.getLogger(__name__)


class RaceListener(Protocol):
    """What a checkpoint reports to: usually the race manager."""

    def on_kart_passed_checkpoint(self, kart: Any, checkpoint_index: int) -> None:
        ...

    def on_kart_completed_lap(self, kart: Any) -> None:
        ...


class TrackCheckpoint:
    """A checkpoint that each kart passes at most once per lap.

    ``on_checkpoint_passed`` is emitted with ``(kart, checkpoint_index)``.
    A finish line also tells the race listener that the kart completed a lap
    and lets the kart pass it again on the next lap.
    """

    def __init__(
        self,
        checkpoint_index: int = 0,
        is_finish_line: bool = False,
        race_listener: Optional[RaceListener] = None,
    ) -> None:
        self.checkpoint_index = checkpoint_index
        self.is_finish_line = is_finish_line
        self.race_listener = race_listener
        self.on_checkpoint_passed = Event()
        self._passed_this_lap: Set[Any] = set()

    def has_passed(self, kart: Any) -> bool:
        return kart in self._passed_this_lap

    def on_begin_overlap(self, actor: Any) -> bool:
        """A kart crossed the checkpoint; returns whether the pass counted."""
        if not isinstance(actor, Kart):
            return False
        if actor in self._passed_this_lap:
            return False
        self._passed_this_lap.add(actor)

        self._play_effects(actor)
        self.on_checkpoint_passed.emit(actor, self.checkpoint_index)

        if self.race_listener is not None:
            self.race_listener.on_kart_passed_checkpoint(actor, self.checkpoint_index)
            if self.is_finish_line:
                self.race_listener.on_kart_completed_lap(actor)
                self._passed_this_lap.discard(actor)

        log.warning("Kart %s passed checkpoint %d", actor.name, self.checkpoint_index)
        return True

    def _play_effects(self, kart: Kart) -> None:
        if self.is_finish_line:
            log.warning("Kart %s crossed finish line!", kart.name)