import random
from types import SimpleNamespace

import pytest

from wasteland_racers.geometry import Vector
from wasteland_racers.weapons import WeaponComponent, WeaponType


def _recording_weapon(**kwargs):
    shots = []
    weapon = WeaponComponent(
        spawn_projectile=lambda loc, direction, dmg, kind: shots.append((loc, direction, dmg, kind)),
        **kwargs,
    )
    return weapon, shots


def test_defaults_are_machine_gun():
    weapon = WeaponComponent()
    assert weapon.weapon_type is WeaponType.MACHINE_GUN
    assert weapon.current_ammo == 30
    assert weapon.max_ammo == 30


def test_cannot_fire_before_fire_rate_elapsed():
    weapon, shots = _recording_weapon()
    assert not weapon.can_fire()
    assert weapon.fire() is False
    assert shots == []


def test_fire_spends_ammo_and_spawns_projectile():
    weapon, shots = _recording_weapon()
    weapon.tick(1.0)
    assert weapon.fire() is True
    assert weapon.current_ammo == weapon.max_ammo - 1
    assert len(shots) == 1
    _, direction, damage, kind = shots[0]
    assert direction == Vector(1.0, 0.0, 0.0)
    assert damage == weapon.damage
    assert kind is WeaponType.MACHINE_GUN


def test_fire_rate_limits_consecutive_shots():
    weapon, shots = _recording_weapon()
    weapon.set_weapon_type(WeaponType.ROCKET_LAUNCHER)
    weapon.tick(1.0)
    assert weapon.fire()
    weapon.tick(0.5)
    assert not weapon.can_fire()
    weapon.tick(0.5)
    assert weapon.can_fire()


def test_set_weapon_type_applies_stats():
    weapon = WeaponComponent()
    weapon.set_weapon_type(WeaponType.ROCKET_LAUNCHER)
    assert weapon.max_ammo == 5
    assert weapon.current_ammo == 5
    assert weapon.damage == 100.0
    weapon.set_weapon_type(WeaponType.FLAMETHROWER)
    assert weapon.max_ammo == 50
    assert weapon.fire_rate == 0.05


def test_empty_magazine_reloads_after_reload_time():
    weapon, _ = _recording_weapon()
    weapon.set_weapon_type(WeaponType.ROCKET_LAUNCHER)
    for _ in range(weapon.max_ammo):
        weapon.tick(1.0)
        assert weapon.fire()
    assert weapon.current_ammo == 0
    assert weapon.is_reloading
    assert not weapon.can_fire()
    weapon.tick(weapon.reload_time / 2)
    assert weapon.is_reloading
    weapon.tick(weapon.reload_time)
    assert not weapon.is_reloading
    assert weapon.current_ammo == weapon.max_ammo


def test_reload_with_full_magazine_does_nothing():
    weapon = WeaponComponent()
    weapon.reload()
    assert not weapon.is_reloading


def test_shotgun_fires_unit_length_pellets():
    weapon, shots = _recording_weapon(rng=random.Random(7))
    weapon.set_weapon_type(WeaponType.SHOTGUN)
    weapon.tick(1.0)
    weapon.fire()
    assert len(shots) == 5
    for _, direction, _, kind in shots:
        assert direction.length() == pytest.approx(1.0)
        assert kind is WeaponType.SHOTGUN
    assert weapon.current_ammo == weapon.max_ammo - 1


def test_injected_clock_drives_cooldown():
    now = [0.0]
    weapon, _ = _recording_weapon(clock=lambda: now[0])
    assert not weapon.can_fire()
    now[0] = 5.0
    assert weapon.can_fire()


def test_fire_without_spawner_still_consumes_ammo():
    weapon = WeaponComponent()
    weapon.tick(1.0)
    assert weapon.fire()
    assert weapon.current_ammo == weapon.max_ammo - 1


def test_muzzle_and_direction_follow_owner():
    owner = SimpleNamespace(location=Vector(10, 20, 0), forward=Vector(0, 1, 0))
    weapon = WeaponComponent(owner=owner)
    assert weapon.fire_direction() == owner.forward
    muzzle = weapon.muzzle_location()
    assert muzzle == owner.location + owner.forward * 100.0 + Vector(0, 0, 50.0)


def test_muzzle_without_owner_is_origin():
    assert WeaponComponent().muzzle_location() == Vector()