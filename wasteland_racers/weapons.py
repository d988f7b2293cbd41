"""Kart-mounted weapons: ammo, fire rate, reloading and projectile spawning."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .geometry import Vector

log = logging.getLogger(__name__)

ProjectileSpawner = Callable[[Vector, Vector, float, "WeaponType"], Any]


class WeaponType(Enum):
    MACHINE_GUN = "Machine Gun"
    ROCKET_LAUNCHER = "Rocket Launcher"
    SHOTGUN = "Shotgun"
    FLAMETHROWER = "Flamethrower"


@dataclass(frozen=True)
class _WeaponStats:
    max_ammo: int
    fire_rate: float
    damage: float
    reload_time: float


_STATS = {
    WeaponType.MACHINE_GUN: _WeaponStats(30, 0.1, 25.0, 2.0),
    WeaponType.ROCKET_LAUNCHER: _WeaponStats(5, 1.0, 100.0, 3.0),
    WeaponType.SHOTGUN: _WeaponStats(8, 0.8, 75.0, 2.5),
    WeaponType.FLAMETHROWER: _WeaponStats(50, 0.05, 15.0, 4.0),
}

_SHOTGUN_PELLETS = 5


class WeaponComponent:
    """A weapon attached to an owner that has ``location`` and ``forward`` vectors.

    Time comes from ``clock`` when given, otherwise from the sum of the
    ``delta_time`` values passed to :meth:`tick`. Projectiles are created by
    ``spawn_projectile(location, direction, damage, weapon_type)``.
    """

    def __init__(
        self,
        owner: Any = None,
        spawn_projectile: Optional[ProjectileSpawner] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.owner = owner
        self.spawn_projectile = spawn_projectile
        self._clock = clock
        self._elapsed = 0.0
        self._rng = rng or random.Random()

        self._weapon_type = WeaponType.MACHINE_GUN
        self._max_ammo = 30
        self.fire_rate = 0.1
        self.reload_time = 2.0
        self.damage = 25.0
        self.weapon_range = 1000.0
        self._current_ammo = self._max_ammo

        self._last_fire_time = 0.0
        self._reloading = False
        self._reload_start_time = 0.0

    @property
    def now(self) -> float:
        return self._clock() if self._clock is not None else self._elapsed

    @property
    def current_ammo(self) -> int:
        return self._current_ammo

    @property
    def max_ammo(self) -> int:
        return self._max_ammo

    @property
    def weapon_type(self) -> WeaponType:
        return self._weapon_type

    @property
    def is_reloading(self) -> bool:
        return self._reloading

    def tick(self, delta_time: float) -> None:
        """Advance time and finish a reload once its time has passed."""
        self._elapsed += delta_time
        if self._reloading and self.now - self._reload_start_time >= self.reload_time:
            self._current_ammo = self._max_ammo
            self._reloading = False
            log.info("Weapon reloaded")

    def fire(self) -> bool:
        """Fire once if possible; returns whether a shot was taken."""
        if not self.can_fire():
            return False

        self._last_fire_time = self.now
        start = self.muzzle_location()
        direction = self.fire_direction()

        if self._weapon_type is WeaponType.SHOTGUN:
            for _ in range(_SHOTGUN_PELLETS):
                spread = direction + Vector(
                    self._rng.uniform(-0.2, 0.2),
                    self._rng.uniform(-0.2, 0.2),
                    self._rng.uniform(-0.1, 0.1),
                )
                self._spawn(start, spread.normalized() if not spread.normalized().is_zero() else spread)
        else:
            self._spawn(start, direction)
        log.info("Fired %s", self._weapon_type.value)

        self._current_ammo -= 1
        if self._current_ammo <= 0:
            self.reload()
        return True

    def set_weapon_type(self, weapon_type: WeaponType) -> None:
        """Switch weapon, taking on its stats and a full magazine."""
        stats = _STATS[weapon_type]
        self._weapon_type = weapon_type
        self._max_ammo = stats.max_ammo
        self.fire_rate = stats.fire_rate
        self.damage = stats.damage
        self.reload_time = stats.reload_time
        self._current_ammo = self._max_ammo
        log.info("Weapon type changed to: %s", weapon_type.value)

    def reload(self) -> None:
        if not self._reloading and self._current_ammo < self._max_ammo:
            self._reloading = True
            self._reload_start_time = self.now
            log.info("Reloading weapon...")

    def can_fire(self) -> bool:
        if self._reloading or self._current_ammo <= 0:
            return False
        return self.now - self._last_fire_time >= self.fire_rate

    def fire_direction(self) -> Vector:
        if self.owner is None:
            return Vector(1.0, 0.0, 0.0)
        return self.owner.forward

    def muzzle_location(self) -> Vector:
        """A point 100 units ahead of and 50 above the owner."""
        if self.owner is None:
            return Vector()
        return self.owner.location + self.owner.forward * 100.0 + Vector(0.0, 0.0, 50.0)

    def _spawn(self, start: Vector, direction: Vector) -> None:
        if self.spawn_projectile is None:
            log.warning("No projectile class set for weapon")
            return
        self.spawn_projectile(start, direction, self.damage, self._weapon_type)