"""Pickup weapons and their projectiles: plain shots, grenades and homing rockets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

from .geometry import Vector
from .kart import Kart

log = logging.getLogger(__name__)

_KINDA_SMALL_NUMBER = 1e-4
_KNOCKBACK_FORCE = 2000.0


class PickupWeaponType(Enum):
    NONE = 0
    HOMING_ROCKET = 1
    SHOTGUN_BLAST = 2
    OIL_SLICK = 3
    GRENADE = 4
    SLAG_DEBUFF = 5
    SHIELD = 6
    SPEED_BOOST = 7
    TELEPORT_PAD = 8
    DECOY = 9


@dataclass
class WeaponData:
    weapon_type: PickupWeaponType = PickupWeaponType.NONE
    weapon_name: str = ""
    weapon_icon: Any = None
    damage: float = 0.0
    range: float = 1000.0
    cooldown: float = 1.0
    is_defensive: bool = False


@dataclass(frozen=True)
class ExplosionHit:
    kart: Any
    damage: float
    knockback: Vector


def _interp_to(current: Vector, target: Vector, delta_time: float, speed: float) -> Vector:
    if speed <= 0.0:
        return target
    gap = target - current
    if gap.x * gap.x + gap.y * gap.y + gap.z * gap.z < _KINDA_SMALL_NUMBER:
        return target
    return current + gap * min(max(delta_time * speed, 0.0), 1.0)


class Projectile:
    """A straight-flying projectile that bursts on its first impact."""

    def __init__(
        self,
        owner: Any = None,
        location: Vector = Vector(),
        direction: Vector = Vector(1.0, 0.0, 0.0),
    ) -> None:
        self.owner = owner
        self.location = location
        self.direction = direction
        self.damage = 25.0
        self.life_time = 5.0
        self.speed = 1200.0
        self.initial_speed = self.speed
        self.max_speed = self.speed
        self.gravity_scale = 0.0
        self.should_bounce = False
        self.bounciness = 0.0
        self.life_span = self.life_time
        self.velocity = Vector()
        self.destroyed = False
        self._exploded = False

    def begin_play(self) -> None:
        self.initial_speed = self.speed
        self.max_speed = self.speed
        self.velocity = self.direction.normalized() * self.initial_speed

    def on_hit(self, other: Any) -> None:
        if self._exploded or other is self.owner:
            return
        self.on_impact(other)

    def on_impact(self, hit_actor: Any) -> None:
        if self._exploded:
            return
        self._exploded = True
        if isinstance(hit_actor, Kart):
            log.info("Projectile hit kart: %s", hit_actor.name)
        self.explode()

    def explode(self) -> None:
        self.destroyed = True

    def has_exploded(self) -> bool:
        return self._exploded


class Grenade(Projectile):
    """A bouncing grenade that bursts when its fuse runs out.

    ``find_karts`` supplies the karts that the blast may reach.
    """

    def __init__(
        self,
        owner: Any = None,
        location: Vector = Vector(),
        direction: Vector = Vector(1.0, 0.0, 0.0),
        find_karts: Optional[Callable[[], Iterable[Any]]] = None,
    ) -> None:
        super().__init__(owner, location, direction)
        self.speed = 600.0
        self.damage = 0.0
        self.life_time = 10.0
        self.gravity_scale = 1.0
        self.should_bounce = True
        self.bounciness = 0.3
        self.explosion_radius = 300.0
        self.explosion_damage = 75.0
        self.fuse_time = 3.0
        self.find_karts = find_karts
        self.last_explosion: List[ExplosionHit] = []
        self._fuse_remaining: Optional[float] = None

    def begin_play(self) -> None:
        super().begin_play()
        self._fuse_remaining = self.fuse_time

    def tick(self, delta_time: float) -> None:
        """Burn the fuse and explode once it runs out."""
        if self._fuse_remaining is None:
            return
        self._fuse_remaining -= delta_time
        if self._fuse_remaining <= 0.0:
            self._fuse_remaining = None
            self.explode()

    def on_impact(self, hit_actor: Any) -> None:
        if self.should_bounce:
            return
        self.explode()

    def explode(self) -> None:
        if self._exploded:
            return
        self._exploded = True
        karts = self.find_karts() if self.find_karts is not None else ()
        self.last_explosion = self.explosion_hits(karts)
        for hit in self.last_explosion:
            log.warning("Grenade explosion hit %s for %f damage", hit.kart, hit.damage)
        self.destroyed = True

    def explosion_hits(self, karts: Iterable[Any]) -> List[ExplosionHit]:
        """Damage and knockback for each kart within the blast radius."""
        hits = []
        for kart in karts:
            distance = self.location.distance(kart.location)
            if distance > self.explosion_radius:
                continue
            multiplier = 1.0 - distance / self.explosion_radius
            direction = (kart.location - self.location).normalized()
            hits.append(
                ExplosionHit(
                    kart,
                    self.explosion_damage * multiplier,
                    direction * (_KNOCKBACK_FORCE * multiplier),
                )
            )
        return hits


class HomingRocket(Projectile):
    """A rocket that, after a short delay, steers toward its target's predicted position."""

    def __init__(
        self,
        owner: Any = None,
        location: Vector = Vector(),
        direction: Vector = Vector(1.0, 0.0, 0.0),
    ) -> None:
        super().__init__(owner, location, direction)
        self.speed = 800.0
        self.damage = 50.0
        self.life_time = 8.0
        self.homing_strength = 2.0
        self.max_homing_distance = 2000.0
        self.homing_delay = 0.5
        self.target: Any = None
        self._homing_timer = 0.0
        self._can_home = False

    def begin_play(self) -> None:
        super().begin_play()
        self._homing_timer = 0.0

    def set_target(self, target: Any) -> None:
        self.target = target

    def tick(self, delta_time: float) -> None:
        self._homing_timer += delta_time
        if self._homing_timer >= self.homing_delay:
            self._can_home = True
        if self._can_home and self.target is not None:
            self._update_homing(delta_time)

    def homing_direction(self) -> Vector:
        """Unit vector toward where the target will be when the rocket arrives."""
        if self.target is None:
            return Vector()
        target_location = self.target.location
        time_to_target = self.location.distance(target_location) / self.speed
        predicted = target_location + self.target.velocity * time_to_target
        return (predicted - self.location).normalized()

    def _update_homing(self, delta_time: float) -> None:
        if self.location.distance(self.target.location) > self.max_homing_distance:
            return
        direction = self.homing_direction()
        if not direction.is_zero():
            self.velocity = _interp_to(
                self.velocity, direction * self.speed, delta_time, self.homing_strength
            )