"""The player kart: boost energy, health, driving input and its weapon."""

from __future__ import annotations

import logging
from typing import Optional

from .geometry import Vector
from .weapons import WeaponComponent

log = logging.getLogger(__name__)


class Kart:
    """A kart with boost, health and a mounted weapon.

    ``throttle_output``, ``steering_output`` and ``handbrake_engaged`` are the
    values handed to the vehicle's movement.
    """

    def __init__(self, name: str = "Kart", weapon: Optional[WeaponComponent] = None) -> None:
        self.name = name
        self.location = Vector()
        self.forward = Vector(1.0, 0.0, 0.0)
        self.velocity = Vector()
        self.current_speed = 0.0
        self.current_lap = 0
        self.position = 1

        self.max_boost_energy = 100.0
        self.boost_consumption_rate = 25.0
        self.boost_recharge_rate = 10.0
        self.boost_multiplier = 1.5
        self.max_health = 100.0

        self.current_boost_energy = self.max_boost_energy
        self.current_health = self.max_health

        self.weapon = weapon if weapon is not None else WeaponComponent(owner=self)
        if self.weapon.owner is None:
            self.weapon.owner = self

        self._boosting = False
        self.handbrake_engaged = False
        self.throttle_input = 0.0
        self.steering_input = 0.0
        self.throttle_output = 0.0
        self.steering_output = 0.0

    def __repr__(self) -> str:
        return f"Kart({self.name!r})"

    @property
    def is_boosting(self) -> bool:
        return self._boosting

    @property
    def engine_pitch(self) -> float:
        """Engine sound pitch multiplier, rising with throttle."""
        return 1.0 + abs(self.throttle_input) * 0.5

    def tick(self, delta_time: float) -> None:
        """Spend or recharge boost, then advance the weapon."""
        if self._boosting and self.current_boost_energy > 0.0:
            self.use_boost(delta_time)
        else:
            self.recharge_boost(delta_time)
        if self.weapon is not None:
            self.weapon.tick(delta_time)

    def move_forward(self, value: float) -> None:
        self.throttle_input = value
        if self.is_destroyed():
            return
        final = value
        if self._boosting and self.current_boost_energy > 0.0:
            final *= self.boost_multiplier
        self.throttle_output = final

    def move_right(self, value: float) -> None:
        self.steering_input = value
        if self.is_destroyed():
            return
        self.steering_output = value

    def press_handbrake(self) -> None:
        self.handbrake_engaged = True

    def release_handbrake(self) -> None:
        self.handbrake_engaged = False

    def toggle_boost(self) -> None:
        if self.current_boost_energy > 0.0 and not self.is_destroyed():
            self._boosting = not self._boosting
            log.info("Boost toggled: %s", "ON" if self._boosting else "OFF")

    def fire_weapon(self) -> bool:
        """Fire the mounted weapon; returns whether a shot was taken."""
        if self.weapon is None or self.is_destroyed():
            return False
        return self.weapon.fire()

    def use_boost(self, delta_time: float) -> None:
        if self.current_boost_energy > 0.0:
            self.current_boost_energy = max(
                0.0, self.current_boost_energy - self.boost_consumption_rate * delta_time
            )
            if self.current_boost_energy <= 0.0:
                self._boosting = False
                log.info("Boost depleted")

    def recharge_boost(self, delta_time: float) -> None:
        if self.current_boost_energy < self.max_boost_energy and not self._boosting:
            self.current_boost_energy = min(
                self.max_boost_energy,
                self.current_boost_energy + self.boost_recharge_rate * delta_time,
            )

    def take_damage(self, amount: float) -> None:
        self.current_health = max(0.0, self.current_health - amount)
        log.info("Kart took %.1f damage, health now: %.1f", amount, self.current_health)
        if self.is_destroyed():
            log.warning("Kart destroyed!")
            self.throttle_output = 0.0
            self.steering_output = 0.0

    def repair(self, amount: float) -> None:
        self.current_health = min(self.max_health, self.current_health + amount)
        log.info("Kart repaired by %.1f, health now: %.1f", amount, self.current_health)

    def is_destroyed(self) -> bool:
        return self.current_health <= 0.0

    def health_percentage(self) -> float:
        return self.current_health / self.max_health

    def boost_percentage(self) -> float:
        return self.current_boost_energy / self.max_boost_energy