# src/game/level.py
from __future__ import annotations
from typing import List
from .config import (
    WIDTH, CLUSTERS_PER_SEGMENT, PLATFORM_MIN_W, PLATFORM_MAX_W, PLATFORM_H,
    PLATFORM_MIN_Y, PLATFORM_MAX_Y, GAP_MIN_W, GAP_MAX_W,
    ENEMY_CHANCE, ENEMY_W, ENEMY_H, ENEMY_MIN_SPEED, ENEMY_MAX_SPEED,
    CLEANUP_MARGIN
)
from .world import World, Platform, Enemy


def _uniform(rng, lo: float, hi: float) -> float:
    # half-open [lo, hi); random.uniform may return hi
    return lo + rng.random() * (hi - lo)


def generate_segment(world: World, start_x: float) -> List[Platform]:
    """
    Append one segment: CLUSTERS_PER_SEGMENT platforms left to right,
    each maybe carrying an enemy centred on it and standing on its top.
    """
    rng = world.rng
    x = float(start_x)
    created: List[Platform] = []
    for _ in range(CLUSTERS_PER_SEGMENT):
        w = _uniform(rng, PLATFORM_MIN_W, PLATFORM_MAX_W)
        y = _uniform(rng, PLATFORM_MIN_Y, PLATFORM_MAX_Y)
        plat = Platform(x, y, w, float(PLATFORM_H))
        world.platforms.append(plat)
        created.append(plat)

        if rng.random() < ENEMY_CHANCE:
            world.enemies.append(Enemy(
                x=x + w / 2 - ENEMY_W / 2,
                y=y - ENEMY_H,
                w=float(ENEMY_W),
                h=float(ENEMY_H),
                speed=_uniform(rng, ENEMY_MIN_SPEED, ENEMY_MAX_SPEED),
            ))

        x += w + _uniform(rng, GAP_MIN_W, GAP_MAX_W)
    return created


def needs_generation(world: World) -> bool:
    """True once the last platform is no more than one screen past the camera's right edge."""
    last = world.rightmost
    if last is None:
        return True
    return last.right <= world.camera_x + WIDTH + WIDTH


def update_and_generate(world: World) -> int:
    """Called every frame; returns how many platforms were appended (0 or one segment)."""
    if not needs_generation(world):
        return 0
    last = world.rightmost
    if last is None:
        start_x = world.camera_x + WIDTH
    else:
        start_x = last.right + _uniform(world.rng, GAP_MIN_W, GAP_MAX_W)
    return len(generate_segment(world, start_x))


def cleanup_world(world: World) -> int:
    """Drop everything whose right edge is at or behind camera_x - CLEANUP_MARGIN. Order is kept."""
    limit = world.camera_x - CLEANUP_MARGIN
    before = len(world.platforms) + len(world.enemies)
    world.platforms = [p for p in world.platforms if p.right > limit]
    world.enemies = [e for e in world.enemies if e.right > limit]
    return before - len(world.platforms) - len(world.enemies)
