# src/tests/test_enemies.py
"""
Enemy controller: walking left, stomps and hits.

Usage (from repo root):
  python -m pytest src/tests/test_enemies.py
"""
import pytest

from src.game.config import STOMP_BOUNCE, STOMP_REWARD, PLAYER_LIVES
from src.game.enemies import update_enemies
from src.game.player import Player
from src.tests.helpers import make_test_world, enemy_at


def test_enemies_walk_left():
    w = make_test_world(enemies=[enemy_at(500, 390, speed=1.5), enemy_at(800, 390, speed=2.25)])
    update_enemies(w)
    assert [e.x for e in w.enemies] == [498.5, 797.75]


def test_stomp_kills_and_bounces():
    p = Player(x=100, y=300, vy=3.0)
    w = make_test_world(player=p, enemies=[enemy_at(110, 330)])
    out = update_enemies(w)
    assert out.stomps == 1 and out.hits == 0
    assert w.enemies == []
    assert p.score == STOMP_REWARD
    assert p.vy == STOMP_BOUNCE
    assert p.lives == PLAYER_LIVES


@pytest.mark.parametrize("vy", [0.0, -4.0])
def test_side_or_head_hit_costs_a_life(vy):
    p = Player(x=100, y=300, vx=4.0, vy=vy, jumps_left=0)
    w = make_test_world(player=p, enemies=[enemy_at(130, 310)], camera_x=50.0)
    out = update_enemies(w)
    assert out.hits == 1 and out.stomps == 0
    assert w.enemies == []
    assert p.lives == PLAYER_LIVES - 1
    assert p.score == 0
    assert (p.x, p.y, p.vx, p.vy) == (150.0, 300.0, 0.0, 0.0)
    assert p.jumps_left == 2


def test_touching_enemy_is_harmless():
    # enemy top flush with the player's feet
    p = Player(x=100, y=300, vy=0.0)
    w = make_test_world(player=p, enemies=[enemy_at(110, 340)])
    out = update_enemies(w)
    assert out.hits == 0 and out.stomps == 0
    assert len(w.enemies) == 1
    assert p.lives == PLAYER_LIVES


def test_only_colliding_enemy_is_removed():
    p = Player(x=100, y=300, vy=2.0)
    far = enemy_at(900, 390)
    w = make_test_world(player=p, enemies=[far, enemy_at(105, 320)])
    update_enemies(w)
    assert w.enemies == [far]
    assert p.score == STOMP_REWARD
