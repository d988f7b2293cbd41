"""Track hazards that affect karts while they are inside the hazard's area."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Tuple

from .events import Event
from .kart import Kart

log = logging.getLogger(__name__)


class HazardType(IntEnum):
    ACID_POOL = 0
    EXPLOSIVE_BARREL = 1
    ELECTRIC_FENCE = 2
    OIL_SLICK = 3
    STEAM_VENT = 4
    LASER_GRID = 5
    SPIKE_TRAP = 6
    TOXIC_GAS = 7


@dataclass(frozen=True)
class _HazardSetup:
    damage: float
    continuous: bool
    radius: float
    slowdown: Optional[float] = None
    cooldown: Optional[float] = None
    effect_duration: Optional[float] = None


_SETUPS = {
    HazardType.ACID_POOL: _HazardSetup(15.0, True, 200.0, slowdown=0.7),
    HazardType.EXPLOSIVE_BARREL: _HazardSetup(50.0, False, 100.0),
    HazardType.ELECTRIC_FENCE: _HazardSetup(30.0, True, 80.0),
    HazardType.OIL_SLICK: _HazardSetup(0.0, True, 250.0, slowdown=0.4),
    HazardType.STEAM_VENT: _HazardSetup(10.0, True, 150.0, cooldown=8.0),
    HazardType.LASER_GRID: _HazardSetup(40.0, False, 120.0, cooldown=3.0),
    HazardType.SPIKE_TRAP: _HazardSetup(25.0, True, 100.0, slowdown=0.6),
    HazardType.TOXIC_GAS: _HazardSetup(8.0, True, 300.0, effect_duration=5.0),
}

# Hazards whose effect lasts while a kart stays inside and must be lifted on exit.
_PERSISTENT = {HazardType.ACID_POOL, HazardType.OIL_SLICK, HazardType.SPIKE_TRAP}


class TrackHazard:
    """A hazard area on the track.

    Time comes from ``clock`` when given, otherwise from the sum of the
    ``delta_time`` values passed to :meth:`tick`. ``on_effect_applied`` is
    emitted with ``(kart, hazard_type)`` each time the hazard hits a kart and
    ``on_effect_removed`` when a persistent effect is lifted from a kart.
    """

    def __init__(
        self,
        hazard_type: HazardType = HazardType.ACID_POOL,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._clock = clock
        self._elapsed = 0.0

        self.hazard_type = HazardType(hazard_type)
        self.trigger_radius = 150.0
        self.damage = 25.0
        self.slowdown_factor = 0.5
        self.effect_duration = 3.0
        self.is_active = True
        self.is_continuous = True
        self.activation_cooldown = 5.0

        self.effect_active = False
        self.audio_playing = False
        self.on_effect_applied = Event()
        self.on_effect_removed = Event()

        self._last_activation_time = 0.0
        self._affected: Dict[Any, None] = {}
        self._setup_appearance()

    @property
    def now(self) -> float:
        return self._clock() if self._clock is not None else self._elapsed

    @property
    def affected_karts(self) -> Tuple[Any, ...]:
        return tuple(self._affected)

    def set_hazard_type(self, hazard_type: HazardType) -> None:
        """Change the hazard type and take on that type's properties."""
        self.hazard_type = HazardType(hazard_type)
        self._setup_appearance()

    def activate(self) -> bool:
        """Switch the hazard on unless it is cooling down; returns whether it did."""
        current = self.now
        if current - self._last_activation_time < self.activation_cooldown:
            return False
        self.is_active = True
        self._last_activation_time = current
        self.effect_active = True
        self.audio_playing = True
        log.warning("Hazard activated: %d", int(self.hazard_type))
        return True

    def deactivate(self) -> None:
        """Switch the hazard off and lift its effects from every kart inside."""
        self.is_active = False
        self.effect_active = False
        self.audio_playing = False
        affected = list(self._affected)
        self._affected.clear()
        for kart in affected:
            if kart is not None:
                self._remove_effect(kart)

    def on_begin_overlap(self, actor: Any) -> bool:
        """A kart entered the area; returns whether it was affected."""
        if not self.is_active or not isinstance(actor, Kart):
            return False
        self._affected[actor] = None
        self._apply_effect(actor)
        log.warning("Kart %s entered hazard: %d", actor.name, int(self.hazard_type))
        return True

    def on_end_overlap(self, actor: Any) -> bool:
        """A kart left the area; returns whether it was a kart."""
        if not isinstance(actor, Kart):
            return False
        self._affected.pop(actor, None)
        self._remove_effect(actor)
        log.warning("Kart %s exited hazard: %d", actor.name, int(self.hazard_type))
        return True

    def tick(self, delta_time: float) -> None:
        """Advance time and keep hitting karts inside a continuous hazard."""
        self._elapsed += delta_time
        if self.is_continuous and self.is_active:
            for kart in list(self._affected):
                if kart is not None:
                    self._apply_effect(kart)

    def _apply_effect(self, kart: Any) -> None:
        if kart is None or not self.is_active:
            return
        hazard_type = self.hazard_type
        if hazard_type is HazardType.EXPLOSIVE_BARREL:
            # A barrel goes off once.
            self.deactivate()
        self.on_effect_applied.emit(kart, hazard_type)

    def _remove_effect(self, kart: Any) -> None:
        if kart is None:
            return
        if self.hazard_type in _PERSISTENT:
            self.on_effect_removed.emit(kart, self.hazard_type)

    def _setup_appearance(self) -> None:
        setup = _SETUPS[self.hazard_type]
        self.damage = setup.damage
        self.is_continuous = setup.continuous
        self.trigger_radius = setup.radius
        if setup.slowdown is not None:
            self.slowdown_factor = setup.slowdown
        if setup.cooldown is not None:
            self.activation_cooldown = setup.cooldown
        if setup.effect_duration is not None:
            self.effect_duration = setup.effect_duration