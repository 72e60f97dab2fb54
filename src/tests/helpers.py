# src/tests/helpers.py
from __future__ import annotations
import random
from src.game.config import CAMERA_LEAD, GROUND_Y, GROUND_H
from src.game.player import Player
from src.game.world import World, Platform, Enemy


def ground(x: float = 0.0, w: float = 600.0) -> Platform:
    return Platform(x, float(GROUND_Y), w, float(GROUND_H))


def standing_player(x: float = 100.0, **kw) -> Player:
    """Player resting on the ground slab (feet exactly on GROUND_Y)."""
    p = Player(x=x, y=GROUND_Y - 40.0, **kw)
    p.on_ground = True
    return p


def make_test_world(player=None, platforms=None, enemies=None, seed: int = 0, camera_x=None) -> World:
    player = player if player is not None else standing_player()
    return World(
        player=player,
        platforms=list(platforms) if platforms is not None else [ground()],
        enemies=list(enemies) if enemies is not None else [],
        seed=seed,
        rng=random.Random(seed),
        camera_x=camera_x if camera_x is not None else player.x - CAMERA_LEAD,
    )


def enemy_at(x: float, y: float, speed: float = 2.0) -> Enemy:
    return Enemy(x, y, 30.0, 30.0, speed=speed)
