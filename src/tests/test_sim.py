# src/tests/test_sim.py
"""
Frame orchestration, input capture and fixed-step timing.

Usage (from repo root):
  python -m pytest src/tests/test_sim.py
"""
import pygame
import pytest

from src.game.config import MOVE_SPEED, FPS, STOMP_REWARD
from src.game.controls import KeyState, InputSnapshot, JUMP, RIGHT, LEFT, DASH
from src.game.sim import step_frame, FixedStep
from src.game.player import Player
from src.tests.helpers import ground, standing_player, make_test_world, enemy_at


def test_end_to_end_walk_on_ground():
    w = make_test_world(player=standing_player(x=100.0), platforms=[ground(0.0, 600.0)], seed=1)
    held = InputSnapshot(right=True)
    for _ in range(50):
        ev = step_frame(w, held)
        assert w.player.on_ground
        assert ev.hits == 0 and not ev.fell
    assert w.player.x == pytest.approx(100.0 + 50 * MOVE_SPEED)
    assert w.player.lives == 3
    assert w.frame == 50


def test_step_order_enemy_sees_landed_player():
    # a grounded player (vy reset to 0 by landing) walking into an enemy takes a hit
    w = make_test_world(player=standing_player(x=100.0), enemies=[enemy_at(140, 390, speed=1.0)])
    ev = step_frame(w, InputSnapshot(right=True))
    assert ev.hits == 1
    assert ev.lives_lost == 1
    assert w.player.lives == 2


def test_stomp_through_full_frame():
    p = Player(x=100, y=300, vy=2.0)
    w = make_test_world(player=p, enemies=[enemy_at(105, 335, speed=0.0)])
    ev = step_frame(w)
    assert ev.stomps == 1
    assert p.score == STOMP_REWARD


def test_keystate_jump_is_edge_triggered():
    keys = KeyState()
    keys.press(JUMP)
    assert keys.snapshot().jump
    w = make_test_world()
    ev = step_frame(w, keys.snapshot())
    assert ev.jumped
    keys.consume_jump()
    # key still physically held, but the press was used up
    assert not keys.snapshot().jump
    keys.release(JUMP)
    keys.press(JUMP)
    assert keys.snapshot().jump


def test_keystate_pending_jump_waits_for_budget():
    keys = KeyState()
    p = Player(x=100, y=100, jumps_left=0)
    w = make_test_world(player=p, platforms=[])
    keys.press(JUMP)
    ev = step_frame(w, keys.snapshot())
    assert not ev.jumped
    assert keys.snapshot().jump


def test_keystate_handles_pygame_events():
    keys = KeyState()
    assert keys.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_d))
    assert keys.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    snap = keys.snapshot()
    assert snap.left and snap.right and snap.direction == 1
    keys.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_d))
    assert keys.snapshot().direction == -1
    assert not keys.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    keys.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LSHIFT))
    assert keys.snapshot().dash
    keys.clear()
    assert keys.snapshot() == InputSnapshot()


def test_keystate_press_release():
    keys = KeyState()
    keys.press(RIGHT); keys.press(DASH)
    keys.release(RIGHT)
    snap = keys.snapshot()
    assert not snap.right and snap.dash and not snap.left
    keys.press(LEFT)
    assert keys.snapshot().direction == -1


def test_fixed_step_counts_whole_ticks():
    fs = FixedStep(FPS)
    assert fs.advance(1.0 / FPS) == 1
    assert fs.advance(0.008) == 0
    assert fs.advance(0.009) == 1
    # stalls are clamped to 1/30 s -> two ticks
    assert fs.advance(0.5) == 2
    assert fs.advance(0.0) == 0
