# src/game/controls.py
from __future__ import annotations
from dataclasses import dataclass
import pygame

LEFT, RIGHT, JUMP, DASH = "left", "right", "jump", "dash"

KEYMAP = {
    pygame.K_a: LEFT, pygame.K_LEFT: LEFT,
    pygame.K_d: RIGHT, pygame.K_RIGHT: RIGHT,
    pygame.K_w: JUMP, pygame.K_UP: JUMP, pygame.K_SPACE: JUMP,
    pygame.K_LSHIFT: DASH, pygame.K_RSHIFT: DASH,
}


@dataclass(frozen=True)
class InputSnapshot:
    """What the player wants this frame. Right wins when both directions are held."""
    left: bool = False
    right: bool = False
    jump: bool = False
    dash: bool = False

    @property
    def direction(self) -> int:
        if self.right:
            return 1
        if self.left:
            return -1
        return 0


class KeyState:
    """
    Held-key record fed by pygame events and read once per frame.
    Jump is edge-triggered: a press stays pending until the simulation
    reports it used it (consume_jump), so holding the key never re-jumps.
    """
    def __init__(self):
        self._held = {LEFT: False, RIGHT: False, DASH: False}
        self._jump_pending = False

    def press(self, action: str):
        if action == JUMP:
            self._jump_pending = True
        else:
            self._held[action] = True

    def release(self, action: str):
        if action == JUMP:
            self._jump_pending = False
        else:
            self._held[action] = False

    def handle_event(self, event) -> bool:
        """Apply a KEYDOWN/KEYUP event. Returns True if it was a game key."""
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return False
        action = KEYMAP.get(event.key)
        if action is None:
            return False
        if event.type == pygame.KEYDOWN:
            self.press(action)
        else:
            self.release(action)
        return True

    def consume_jump(self):
        self._jump_pending = False

    def clear(self):
        for k in self._held:
            self._held[k] = False
        self._jump_pending = False

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            left=self._held[LEFT],
            right=self._held[RIGHT],
            jump=self._jump_pending,
            dash=self._held[DASH],
        )
