import pytest

from wasteland_racers.kart import Kart
from wasteland_racers.weapons import WeaponComponent


def test_new_kart_is_full():
    kart = Kart()
    assert kart.current_health == kart.max_health == 100.0
    assert kart.current_boost_energy == kart.max_boost_energy == 100.0
    assert kart.health_percentage() == 1.0
    assert kart.boost_percentage() == 1.0
    assert not kart.is_destroyed()


def test_take_damage_reduces_health():
    kart = Kart()
    kart.take_damage(30.0)
    assert kart.current_health == pytest.approx(kart.max_health - 30.0)
    assert kart.health_percentage() == pytest.approx(kart.current_health / kart.max_health)


def test_lethal_damage_destroys_and_cuts_controls():
    kart = Kart()
    kart.move_forward(1.0)
    kart.move_right(0.5)
    kart.take_damage(500.0)
    assert kart.current_health == 0.0
    assert kart.is_destroyed()
    assert kart.throttle_output == 0.0
    assert kart.steering_output == 0.0
    kart.move_forward(1.0)
    assert kart.throttle_output == 0.0
    assert kart.throttle_input == 1.0


def test_repair_is_capped_at_max():
    kart = Kart()
    kart.take_damage(10.0)
    kart.repair(1000.0)
    assert kart.current_health == kart.max_health


def test_boost_multiplies_throttle():
    kart = Kart()
    kart.toggle_boost()
    assert kart.is_boosting
    kart.move_forward(1.0)
    assert kart.throttle_output == pytest.approx(kart.boost_multiplier)


def test_boost_drains_while_active():
    kart = Kart()
    kart.toggle_boost()
    kart.tick(1.0)
    assert kart.current_boost_energy == pytest.approx(
        kart.max_boost_energy - kart.boost_consumption_rate
    )


def test_boost_runs_out_and_turns_off():
    kart = Kart()
    kart.toggle_boost()
    kart.tick(10.0)
    assert kart.current_boost_energy == 0.0
    assert not kart.is_boosting


def test_boost_recharges_when_idle():
    kart = Kart()
    kart.current_boost_energy = 0.0
    kart.tick(1.0)
    assert kart.current_boost_energy == pytest.approx(kart.boost_recharge_rate)
    kart.tick(1000.0)
    assert kart.current_boost_energy == kart.max_boost_energy


def test_toggle_boost_refused_when_empty_or_destroyed():
    kart = Kart()
    kart.current_boost_energy = 0.0
    kart.toggle_boost()
    assert not kart.is_boosting
    other = Kart()
    other.take_damage(other.max_health)
    other.toggle_boost()
    assert not other.is_boosting


def test_handbrake_press_and_release():
    kart = Kart()
    kart.press_handbrake()
    assert kart.handbrake_engaged
    kart.release_handbrake()
    assert not kart.handbrake_engaged


def test_engine_pitch_follows_throttle():
    kart = Kart()
    assert kart.engine_pitch == 1.0
    kart.move_forward(-1.0)
    assert kart.engine_pitch == pytest.approx(1.5)


def test_fire_weapon_uses_mounted_weapon():
    shots = []
    weapon = WeaponComponent(spawn_projectile=lambda *args: shots.append(args))
    kart = Kart(weapon=weapon)
    assert weapon.owner is kart
    kart.tick(1.0)
    assert kart.fire_weapon() is True
    assert len(shots) == 1
    assert shots[0][0] == weapon.muzzle_location()


def test_destroyed_kart_cannot_fire():
    kart = Kart()
    kart.tick(1.0)
    kart.take_damage(kart.max_health)
    assert kart.fire_weapon() is False
    assert kart.weapon.current_ammo == kart.weapon.max_ammo