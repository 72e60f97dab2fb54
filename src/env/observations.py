# src/env/observations.py
from __future__ import annotations
from typing import Optional, Tuple
import numpy as np

from src.game.config import HEIGHT, WIDTH, PLAYER_H, MAX_JUMPS, DASH_TIME

PROBE_OFFSETS: Tuple[int, int, int] = (120, 240, 360)  # ahead of the player's centre (world px)
MAX_VY_OBS = 20.0        # |vy| above this is clipped
OBS_SIZE = 6 + 2 * len(PROBE_OFFSETS) + 3

OBS_LOW = np.array(
    [0.0, -1.0, 0.0, 0.0, 0.0, 0.0] + [0.0, 0.0] * len(PROBE_OFFSETS) + [0.0, -1.0, 0.0],
    dtype=np.float32,
)
OBS_HIGH = np.ones(OBS_SIZE, dtype=np.float32)


def _clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _floor_at_x(platforms, x: float) -> Optional[float]:
    """Highest platform top covering x, None over a gap."""
    top = None
    for p in platforms:
        if p.x <= x < p.x + p.w:
            if top is None or p.y < top:
                top = p.y
    return top


def _nearest_enemy_ahead(enemies, player):
    best = None
    for e in enemies:
        if e.x + e.w <= player.x:
            continue
        if best is None or e.x < best.x:
            best = e
    return best


def build_observation(world) -> np.ndarray:
    """
    Fixed-size float32 vector:
    [y, vy, on_ground, jumps/2, is_small, dash_left,
     floor@120, top@120, floor@240, top@240, floor@360, top@360,
     enemy_dx, enemy_dy, enemy_seen]
    """
    player = world.player
    obs = [
        _clamp(player.y / max(1.0, HEIGHT - PLAYER_H)),
        _clamp(player.vy / MAX_VY_OBS, -1.0, 1.0),
        1.0 if player.on_ground else 0.0,
        player.jumps_left / MAX_JUMPS,
        1.0 if player.is_small else 0.0,
        player.dash_timer / DASH_TIME,
    ]

    cx = player.x + player.w / 2
    for dx in PROBE_OFFSETS:
        top = _floor_at_x(world.platforms, cx + dx)
        if top is None:
            obs += [0.0, 1.0]
        else:
            obs += [1.0, _clamp(top / HEIGHT)]

    e = _nearest_enemy_ahead(world.enemies, player)
    if e is None:
        obs += [1.0, 0.0, 0.0]
    else:
        obs += [
            _clamp((e.x - (player.x + player.w)) / WIDTH),
            _clamp((e.y - player.y) / HEIGHT, -1.0, 1.0),
            1.0,
        ]
    return np.asarray(obs, dtype=np.float32)
