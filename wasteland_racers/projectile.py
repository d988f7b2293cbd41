"""Projectiles fired by kart weapons, tuned by the weapon that fired them."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .geometry import Vector
from .kart import Kart
from .weapons import WeaponType

log = logging.getLogger(__name__)

PointDamage = Callable[[Any, float, Vector], None]
RadialDamage = Callable[[Vector, float, float], None]

EXPLOSION_RADIUS = 300.0
_RADIAL_DAMAGE_FACTOR = 0.7
_EXPLODED_LIFE_SPAN = 0.5

_BALLISTICS = {
    WeaponType.MACHINE_GUN: (2500.0, 0.1),
    WeaponType.ROCKET_LAUNCHER: (1500.0, 0.3),
    WeaponType.SHOTGUN: (1800.0, 0.5),
    WeaponType.FLAMETHROWER: (800.0, 1.0),
}


class WeaponProjectile:
    """A projectile that damages what it hits and then bursts.

    Karts take damage directly. Other targets are handed to
    ``apply_point_damage(target, damage, location)``; rocket explosions call
    ``apply_radial_damage(center, damage, radius)``.
    """

    def __init__(
        self,
        owner: Any = None,
        location: Vector = Vector(),
        direction: Vector = Vector(1.0, 0.0, 0.0),
        damage: float = 25.0,
        weapon_type: WeaponType = WeaponType.MACHINE_GUN,
        apply_point_damage: Optional[PointDamage] = None,
        apply_radial_damage: Optional[RadialDamage] = None,
    ) -> None:
        self.owner = owner
        self.location = location
        self.direction = direction
        self.damage = damage
        self.weapon_type = weapon_type
        self.apply_point_damage = apply_point_damage
        self.apply_radial_damage = apply_radial_damage

        self.speed = 1200.0
        self.initial_speed = self.speed
        self.max_speed = self.speed
        self.gravity_scale = 0.1
        self.should_bounce = False
        self.bounciness = 0.0
        self.life_span = 5.0
        self.velocity = Vector()

        self.collision_enabled = True
        self.visible = True
        self.trail_active = True
        self._exploded = False

    def begin_play(self) -> None:
        """Take on the speed, gravity and range of the firing weapon."""
        speed, gravity = _BALLISTICS[self.weapon_type]
        self.initial_speed = speed
        self.max_speed = speed
        self.gravity_scale = gravity
        if self.weapon_type is WeaponType.FLAMETHROWER:
            self.life_span = 1.0
        self.velocity = self.direction.normalized() * self.initial_speed
        log.info("Projectile spawned with weapon type: %s", self.weapon_type.value)

    def on_hit(self, other: Any) -> bool:
        """Handle a collision; returns whether the hit counted."""
        if other is None or other is self.owner or other is self or self._exploded:
            return False
        log.info("Projectile hit: %s", other)
        log.info("Projectile impact at: %s", self.location)
        self._apply_damage(other)
        if self.weapon_type is WeaponType.ROCKET_LAUNCHER:
            self._create_explosion()
        self.explode()
        return True

    def explode(self) -> None:
        """Stop, hide and disarm the projectile, leaving it a short time to live."""
        if self._exploded:
            return
        self._exploded = True
        self.collision_enabled = False
        self.velocity = Vector()
        self.visible = False
        self.trail_active = False
        self.life_span = _EXPLODED_LIFE_SPAN

    def has_exploded(self) -> bool:
        return self._exploded

    def _apply_damage(self, target: Any) -> None:
        if isinstance(target, Kart):
            target.take_damage(self.damage)
            log.info("Applied %.1f damage to kart: %s", self.damage, target.name)
        elif self.apply_point_damage is not None:
            self.apply_point_damage(target, self.damage, self.location)
            log.info("Applied %.1f generic damage to: %s", self.damage, target)

    def _create_explosion(self) -> None:
        if self.apply_radial_damage is not None:
            self.apply_radial_damage(
                self.location, self.damage * _RADIAL_DAMAGE_FACTOR, EXPLOSION_RADIUS
            )
        log.info("Created explosion at location: %s with radius damage", self.location)