# src/game/enemies.py
from __future__ import annotations
from dataclasses import dataclass
from .config import STOMP_BOUNCE, STOMP_REWARD
from .geometry import intersects


@dataclass
class EnemyFrame:
    stomps: int = 0
    hits: int = 0


def update_enemies(world) -> EnemyFrame:
    """
    Walk every enemy left, then settle contact with the player.
    Falling onto an enemy (vy > 0) kills it and bounces; any other contact
    costs a life and respawns. Either way the enemy is gone.
    """
    player = world.player
    out = EnemyFrame()
    for i in range(len(world.enemies) - 1, -1, -1):
        e = world.enemies[i]
        e.x -= e.speed

        if not intersects(player.rect, e):
            continue
        del world.enemies[i]
        if player.vy > 0:
            player.vy = STOMP_BOUNCE
            player.score += STOMP_REWARD
            out.stomps += 1
        else:
            player.lose_life(world.camera_x)
            out.hits += 1
    return out
