# src/game/player.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
from .config import (
    PLAYER_W, PLAYER_H, PLAYER_SMALL_H, PLAYER_LIVES, MAX_JUMPS,
    GRAVITY, JUMP_FORCE, DOUBLE_JUMP_FORCE, MOVE_SPEED, CRAWL_SPEED,
    DASH_SPEED, DASH_TIME, LAND_TOLERANCE, LANDING_TIE_BREAK,
    HEIGHT, CAMERA_LEAD, RESPAWN_OFFSET_X, RESPAWN_Y
)
from .geometry import Box, intersects

TIE_BREAK_RULES = ("last", "closest")


@dataclass
class PlayerFrame:
    """What the player controller did during one tick."""
    jumped: bool = False
    dash_started: bool = False
    landed: bool = False
    fell: bool = False


@dataclass
class Player:
    """
    Runner with double jump and a crouching dash:
    - y is the TOP edge; resizing keeps the feet where they are
    - jumps_left in [0, MAX_JUMPS], refilled only by landing or respawn
    - dash_timer counts down to 0 and never goes below it
    """
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    on_ground: bool = False
    jumps_left: int = MAX_JUMPS
    is_small: bool = False
    dash_timer: int = 0
    lives: int = PLAYER_LIVES
    score: int = 0

    @property
    def w(self) -> float:
        return PLAYER_W

    @property
    def h(self) -> float:
        return PLAYER_SMALL_H if self.is_small else PLAYER_H

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def rect(self) -> Box:
        return Box(self.x, self.y, self.w, self.h)

    def set_small(self, small: bool):
        if small == self.is_small:
            return
        feet = self.bottom
        self.is_small = small
        self.y = feet - self.h

    # --- intent ---

    def apply_intent(self, direction: int):
        speed = CRAWL_SPEED if self.is_small else MOVE_SPEED
        self.vx = direction * speed

    def try_jump(self) -> bool:
        """First jump uses the full force, the air jump the weaker one."""
        if self.jumps_left <= 0:
            return False
        self.vy = -JUMP_FORCE if self.jumps_left == MAX_JUMPS else -DOUBLE_JUMP_FORCE
        self.jumps_left -= 1
        return True

    def try_dash(self) -> bool:
        if self.dash_timer != 0:
            return False
        self.start_dash()
        return True

    def start_dash(self):
        self.dash_timer = DASH_TIME
        self.set_small(True)

    def apply_dash(self):
        """While a dash runs it overrides walking speed, one tick at a time."""
        if self.dash_timer > 0:
            self.vx = DASH_SPEED
            self.dash_timer -= 1

    # --- physics ---

    def update_physics(self):
        """Gravity first, then both axes move by the new velocity."""
        self.vy += GRAVITY
        self.x += self.vx
        self.y += self.vy

    def _landing_candidates(self, platforms: List[Box]) -> List[Box]:
        feet = self.bottom
        found = []
        for p in platforms:
            if (self.x < p.x + p.w and
                    self.x + self.w > p.x and
                    feet <= p.y + LAND_TOLERANCE and
                    feet + self.vy >= p.y):
                found.append(p)
        return found

    def resolve_landing(self, platforms: List[Box], rule: str = LANDING_TIE_BREAK) -> Optional[Box]:
        """
        One-way, downward-only sweep against platform tops.
        With several candidates, "last" keeps the final match in list order
        (overlapping platforms can then snap to the lower one), "closest"
        picks the top nearest to the feet.
        """
        if rule not in TIE_BREAK_RULES:
            raise ValueError(f"unknown landing tie-break rule: {rule!r}")
        self.on_ground = False
        found = self._landing_candidates(platforms)
        if not found:
            return None
        if rule == "last":
            support = found[-1]
        else:
            feet = self.bottom
            support = min(found, key=lambda p: abs(p.y - feet))
        self.y = support.y - self.h
        self.vy = 0.0
        self.on_ground = True
        self.jumps_left = MAX_JUMPS
        return support

    def in_low_space(self, platforms: List[Box]) -> bool:
        """Probe the strip above the head that standing up would need."""
        probe_h = PLAYER_H - PLAYER_SMALL_H
        probe = Box(self.x, self.y - probe_h, self.w, probe_h)
        return any(intersects(probe, p) for p in platforms)

    def respawn(self, camera_x: float):
        self.x = camera_x + RESPAWN_OFFSET_X
        self.y = RESPAWN_Y
        self.vx = 0.0
        self.vy = 0.0
        self.jumps_left = MAX_JUMPS

    def lose_life(self, camera_x: float):
        self.lives -= 1
        self.respawn(camera_x)


def update_player(world, inputs, rule: str = LANDING_TIE_BREAK) -> PlayerFrame:
    """Player controller: intent, jump, dash, integrate, land, regrow, fall check, camera."""
    p = world.player
    out = PlayerFrame()

    p.apply_intent(inputs.direction)

    if inputs.jump and p.try_jump():
        out.jumped = True

    if inputs.dash and p.try_dash():
        out.dash_started = True
    p.apply_dash()

    p.update_physics()

    was_grounded = p.on_ground
    if p.resolve_landing(world.platforms, rule) is not None and not was_grounded:
        out.landed = True

    if p.on_ground and p.is_small and not p.in_low_space(world.platforms):
        p.set_small(False)

    if p.y > HEIGHT:
        # camera_x still holds last frame's value here
        p.lose_life(world.camera_x)
        out.fell = True

    world.camera_x = p.x - CAMERA_LEAD
    return out
