# src/game/world.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Optional
from .config import (
    GROUND_Y, GROUND_W, GROUND_H, PLAYER_START_X, PLAYER_START_Y,
    CAMERA_LEAD, SEED_DEFAULT
)
from .geometry import Box
from .player import Player


@dataclass
class Platform(Box):
    """Static slab. Only its top face is solid (one-way landing)."""


@dataclass
class Enemy(Box):
    speed: float = 0.0   # leftward, px per tick


@dataclass
class World:
    """
    Everything one session owns. Controllers mutate it in place:
    - platforms stay sorted by ascending x (generation only appends)
    - camera_x is derived from the player every frame, never set elsewhere
    """
    player: Player
    platforms: List[Platform]
    enemies: List[Enemy]
    seed: int
    rng: random.Random
    camera_x: float = 0.0
    frame: int = 0

    @property
    def rightmost(self) -> Optional[Platform]:
        return self.platforms[-1] if self.platforms else None


def make_world(seed: int | None = SEED_DEFAULT) -> World:
    """Fresh session: one wide ground slab and the player dropping onto it."""
    if seed is None:
        seed = random.randrange(0, 2**32 - 1)
    player = Player(x=PLAYER_START_X, y=PLAYER_START_Y)
    ground = Platform(0.0, float(GROUND_Y), float(GROUND_W), float(GROUND_H))
    return World(
        player=player,
        platforms=[ground],
        enemies=[],
        seed=seed,
        rng=random.Random(seed),
        camera_x=player.x - CAMERA_LEAD,
    )
