# src/game/sim.py
from __future__ import annotations
from dataclasses import dataclass
from .config import FPS, LANDING_TIE_BREAK
from .controls import InputSnapshot
from .enemies import update_enemies
from .level import update_and_generate, cleanup_world
from .player import update_player
from .world import World

NO_INPUT = InputSnapshot()


@dataclass
class FrameEvents:
    jumped: bool = False
    dash_started: bool = False
    landed: bool = False
    fell: bool = False
    stomps: int = 0
    hits: int = 0
    generated: int = 0
    culled: int = 0

    @property
    def lives_lost(self) -> int:
        return self.hits + (1 if self.fell else 0)


def step_frame(world: World, inputs: InputSnapshot = NO_INPUT,
               rule: str = LANDING_TIE_BREAK) -> FrameEvents:
    """One tick, fixed order: player, enemies, generation, cleanup. Rendering is the caller's job."""
    pf = update_player(world, inputs, rule)
    ef = update_enemies(world)
    generated = update_and_generate(world)
    culled = cleanup_world(world)
    world.frame += 1
    return FrameEvents(
        jumped=pf.jumped,
        dash_started=pf.dash_started,
        landed=pf.landed,
        fell=pf.fell,
        stomps=ef.stomps,
        hits=ef.hits,
        generated=generated,
        culled=culled,
    )


class FixedStep:
    """
    Turns wall-clock seconds into whole simulation ticks so the per-tick
    balance constants hold at any display rate. Long stalls are clamped.
    """
    def __init__(self, tick_hz: int = FPS, max_dt: float = 1.0 / 30.0):
        assert tick_hz > 0, "tick_hz must be > 0"
        self.tick = 1.0 / tick_hz
        self.max_dt = max_dt
        self._acc = 0.0

    def advance(self, dt: float) -> int:
        if dt > self.max_dt:
            dt = self.max_dt
        self._acc += max(0.0, dt)
        n = int((self._acc + 1e-9) // self.tick)
        self._acc -= n * self.tick
        if self._acc < 0.0:
            self._acc = 0.0
        return n
