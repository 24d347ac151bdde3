import random

import pytest

from arthur.boss import Boss
from arthur.character import Character
from arthur.level import GRAVITY, TILE_SIZE, Level


def boss_at(x, y, level=None, seed=None):
    rng = random.Random(seed)
    return Boss(Level(()) if level is None else level, start=(x, y), rng=rng)


def player_at(x, blocking=False):
    player = Character(Level(()), start=(x, 300.0))
    player.is_blocking = blocking
    return player


def test_initial_state_on_default_level():
    boss = Boss()
    assert boss.position() == (100.0, 800.0)
    assert (boss.health, boss.dx) == (Boss.MAX_HEALTH, Boss.SPEED)


def test_update_moves_and_falls():
    boss = boss_at(200.0, 100.0)
    boss.update(0.1)
    assert boss.rect.left == pytest.approx(200.0 + Boss.SPEED * 0.1)
    assert boss.dy == pytest.approx(GRAVITY * 0.1)
    assert boss.frame in Boss.WALKING_FRAMES
    assert boss.last_direction == 1


def test_lands_on_ground():
    boss = boss_at(0.0, 20.0, Level(("    ", "    ", "BBBB")))
    boss.dx = 0.0
    boss.update(0.2)
    assert boss.on_ground is True
    assert boss.rect.bottom == pytest.approx(2 * TILE_SIZE)


def test_turns_around_at_wall():
    boss = boss_at(70.0, 0.0, Level(("   1", "   1")))
    boss.update(0.1)
    assert (boss.dx, boss.last_direction) == (-Boss.SPEED, -1)
    assert boss.rect.right == pytest.approx(3 * TILE_SIZE)


def test_finish_only_when_health_gone():
    boss = Boss(Level(()))
    assert boss.finish() is False
    assert boss.rect.height == 75.0
    boss.health = 0
    assert boss.finish() is True
    assert boss.dx == 0.0
    assert boss.rect.height == Boss.DEAD_HEIGHT
    assert boss.frame == Boss.DEATH_FRAMES[1]


@pytest.mark.parametrize(
    "seed, blocking, damage",
    [(0, False, 1), (1, False, 1), (2, False, 1), (3, False, 1), (0, True, 0)],
)
def test_finished_attack(seed, blocking, damage):
    player = player_at(300.0, blocking)
    boss = boss_at(300.0, 300.0, seed=seed)
    boss.fight(player, 8.0)
    assert player.health == Character.MAX_HEALTH - damage
    assert boss.is_attacking is False
    assert boss.dx == -Boss.SPEED


def test_attack_uses_one_of_two_moves():
    boss = boss_at(310.0, 300.0, seed=5)
    boss.fight(player_at(300.0), 0.1)
    frames = Boss.FIGHTING_1_FRAMES if boss.use_first_attack_frames else Boss.FIGHTING_2_FRAMES
    assert boss.frame == frames[0]
    assert (boss.dx, boss.last_direction) == (0.0, -1)


def test_far_player_only_sets_facing():
    player = player_at(0.0)
    boss = boss_at(600.0, 300.0)
    boss.fight(player, 8.0)
    assert (boss.last_direction, boss.is_attacking) == (-1, False)
    assert player.health == Character.MAX_HEALTH


@pytest.mark.parametrize("health, ratio", [(Boss.MAX_HEALTH, 1.0), (Boss.MAX_HEALTH // 2, 0.5)])
def test_health_bar_tracks_health(health, ratio):
    boss = boss_at(50.0, 400.0)
    boss.health = health
    background, fill = boss.health_bar()
    assert background.top == boss.rect.top - 20
    assert fill.width == pytest.approx(background.width * ratio)