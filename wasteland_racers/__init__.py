"""Gameplay rules for a combat kart racer: karts, weapons, projectiles, hazards, checkpoints and HUD text."""

__version__ = "0.1.0"