# wasteland_racers

Gameplay rules for a combat kart racer, kept as plain Python objects. A game loop moves them
forward by calling `tick(delta_time)`. The package draws nothing, runs no physics and plays no
sound. Where the game would act on the world, the package records the change in an attribute
or calls a function you pass in.

## Modules

- `wasteland_racers.events`: `Event`, a small multicast event. It has `subscribe`,
  `unsubscribe` and `emit`. Handlers run in the order they subscribed, and a handler is only
  added once.
- `wasteland_racers.geometry`: `Vector`, an immutable 3D vector, and `lerp(start, end, alpha)`.
  - `Vector` supports `+`, `-`, scalar `*` and `/`, `length()`, `normalized()`,
    `distance(other)` and `is_zero()`.
  - `normalized()` of a vector that is too short returns the zero vector.
- `wasteland_racers.weapons`: `WeaponType` and `WeaponComponent`.
  - Each weapon type (machine gun, rocket launcher, shotgun, flamethrower) has its own
    magazine size, fire rate, damage and reload time.
  - `fire()` spends one round and returns whether a shot was taken. A shotgun fires five spread
    pellets.
  - An empty magazine starts a reload. `tick` finishes the reload once the reload time has
    passed.
  - Projectiles are created through the `spawn_projectile(location, direction, damage,
    weapon_type)` callback.
- `wasteland_racers.kart`: `Kart`, which has:
  - throttle and steering input, and a handbrake;
  - a boost toggle that multiplies throttle while energy lasts, with energy that drains while
    boosting and recharges otherwise;
  - health, with `take_damage` and `repair`, and `health_percentage()` and
    `boost_percentage()`;
  - a mounted `WeaponComponent`.

  A kart whose health reaches zero is destroyed and ignores further driving input.
- `wasteland_racers.projectile`: `WeaponProjectile`, the projectile a `WeaponComponent` fires.
  - `begin_play()` sets speed and gravity from the weapon type. The flamethrower also gets a
    short life span.
  - `on_hit(other)` damages a `Kart` directly and hands any other target to
    `apply_point_damage`. It never hits its owner.
  - Rockets also call `apply_radial_damage` with 70% damage over a 300-unit radius.
- `wasteland_racers.ordnance`: `PickupWeaponType`, `WeaponData` and the pickup projectiles.
  - `Projectile` bursts on first impact.
  - `Grenade` bounces, explodes when its fuse runs out, and computes falloff damage and
    knockback for karts within its radius with `explosion_hits(karts)`.
  - `HomingRocket` steers, after a short delay, toward its target's predicted position.
- `wasteland_racers.hazards`: `HazardType` and `TrackHazard`.
  - Each hazard type sets its own damage, trigger radius, and continuous or one-shot
    behaviour, and some set a cooldown.
  - Karts entering and leaving the area are tracked. `on_effect_applied` and
    `on_effect_removed` events report each hit and each lifted effect.
  - An explosive barrel switches itself off after one hit.
- `wasteland_racers.checkpoints`: `TrackCheckpoint` and the `RaceListener` protocol.
  - Each kart counts at most once per lap at a checkpoint. A counted pass emits
    `on_checkpoint_passed` and tells the race listener.
  - A finish line also reports a completed lap and lets the kart pass again.
- `wasteland_racers.hud`: `ordinal_suffix`, `format_position`, `format_lap` and `MinimalHud`.
  - `MinimalHud` reads position and lap from the player's kart. It builds texts such as `"2nd"`
    and `"LAP 1/3"`, for 8 players and 3 laps.

## Installation

```
pip install .
```

## Example

```python
from wasteland_racers.kart import Kart
from wasteland_racers.hud import format_position

kart = Kart()
kart.toggle_boost()
kart.tick(1.0)
print(kart.boost_percentage())   # 0.75

kart.take_damage(40.0)
print(kart.health_percentage())  # 0.6

print(format_position(2))        # "2nd"
```

## What the package does not do

- There is no game to run: the package has no command, no game loop, no window and no input
  handling.
- It does not load tracks or generate track layouts.
- It has no shortcut system, no race manager deciding positions or winners, and no catalogue of
  kart classes or their stats.
- It saves nothing.

The caller supplies a kart's `position` and `current_lap`, and whatever object receives
checkpoint reports.

## Running the tests

```
pip install .[test]
pytest
```