# src/env/runner_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.game.config import WIDTH, HEIGHT, FPS, MOVE_SPEED, STOMP_REWARD
from src.game.controls import InputSnapshot
from src.game.sim import step_frame
from src.game.world import World, make_world
from src.env.observations import build_observation, OBS_LOW, OBS_HIGH

# Discrete action -> held keys. Jump is a fresh press on the first sub-frame only.
ACTIONS = (
    InputSnapshot(),                       # 0 NOOP
    InputSnapshot(right=True),             # 1 RIGHT
    InputSnapshot(left=True),              # 2 LEFT
    InputSnapshot(jump=True),              # 3 JUMP
    InputSnapshot(right=True, jump=True),  # 4 RIGHT + JUMP
    InputSnapshot(right=True, dash=True),  # 5 RIGHT + DASH
)
ACTION_NAMES = ("noop", "right", "left", "jump", "right_jump", "right_dash")

LIFE_PENALTY = 5.0


class RunnerEnv(gym.Env):
    """
    Jump & run Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal), one tick per sub-frame.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Reward: forward progress in walking-speed units + score/100 - penalty per life lost.
    - Terminated when lives run out; the core itself never ends.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 60.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Invalid render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.sim_fps = FPS

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.Discrete(len(ACTIONS))
        self.observation_space = gym.spaces.Box(low=OBS_LOW, high=OBS_HIGH, dtype=np.float32)

        # --- Runtime state ---
        self.world: Optional[World] = None
        self.timestep: int = 0
        self.best_x: float = 0.0

        # Rendering
        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # A given seed fixes the level; otherwise draw one from the env's RNG
        if seed is not None:
            level_seed = int(seed)
        else:
            level_seed = int(self.np_random.integers(0, 2**31 - 1))

        self.world = make_world(level_seed)
        self.timestep = 0
        self.best_x = self.world.player.x

        obs = self._get_obs()
        info = {"seed": self.world.seed, "lives": self.world.player.lives, "score": 0}
        if self.render_mode == "human":
            self.render()
        return obs, info

    def step(self, action):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.world is not None, "Call reset() before step()"

        world = self.world
        player = world.player
        held = ACTIONS[int(action)]
        start_x = player.x
        start_score = player.score
        lives_lost = 0
        stomps = 0

        for i in range(self.frame_skip):
            inputs = held if i == 0 else InputSnapshot(left=held.left, right=held.right, dash=held.dash)
            ev = step_frame(world, inputs)
            lives_lost += ev.lives_lost
            stomps += ev.stomps
            if player.lives <= 0:
                break

        # progress only counts past the best x so far (respawns move the player back)
        progress = max(0.0, player.x - self.best_x)
        self.best_x = max(self.best_x, player.x)
        reward = (progress / MOVE_SPEED
                  + (player.score - start_score) / STOMP_REWARD
                  - LIFE_PENALTY * lives_lost)

        self.timestep += 1
        terminated = player.lives <= 0
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        obs = self._get_obs()
        info = {
            "timestep": self.timestep,
            "seed": world.seed,
            "x": player.x,
            "dx": player.x - start_x,
            "lives": player.lives,
            "score": player.score,
            "stomps": stomps,
            "lives_lost": lives_lost,
            "on_ground": player.on_ground,
        }

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world)

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        # imported here so headless training never touches the front end module
        from src.game.game import draw_world

        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Infinite Jump & Run - Gym Env")
                self.clock = pygame.time.Clock()
                self.font = pygame.font.SysFont("jetbrainsmono", 18)
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))

        if self.render_mode == "human":
            # Pump minimal event queue so the OS doesn't think we're hung
            pygame.event.pump()

        draw_world(self.screen, self.world, self.font)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", FPS))
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
