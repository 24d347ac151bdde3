import pytest

from arthur.character import Character
from arthur.level import GRAVITY, TILE_SIZE, Level
from arthur.skeleton import Skeleton


def skeleton_at(x, y, level=None):
    return Skeleton((x, y), Level(()) if level is None else level)


def player_at(x, y=200.0):
    return Character(Level(()), start=(x, y))


def test_initial_state():
    skeleton = skeleton_at(120.0, 40.0)
    assert skeleton.position() == (120.0, 40.0)
    assert skeleton.health == Skeleton.MAX_HEALTH
    assert skeleton.dx == Skeleton.SPEED
    assert skeleton.is_dead is False


def test_update_moves_and_falls_in_open_space():
    skeleton = skeleton_at(100.0, 100.0)
    skeleton.update(0.1)
    assert skeleton.rect.left == pytest.approx(100.0 + Skeleton.SPEED * 0.1)
    assert skeleton.dy == pytest.approx(GRAVITY * 0.1)
    assert skeleton.rect.top == pytest.approx(100.0 + GRAVITY * 0.01)
    assert skeleton.frame in Skeleton.WALKING_FRAMES
    assert skeleton.last_direction == 1


def test_lands_on_ground():
    skeleton = skeleton_at(0.0, 20.0, Level(("   ", "   ", "BBB")))
    skeleton.update(0.2)
    assert (skeleton.on_ground, skeleton.dy) == (True, 0.0)
    assert skeleton.rect.bottom == pytest.approx(2 * TILE_SIZE)


def test_turns_around_at_wall():
    skeleton = skeleton_at(60.0, 0.0, Level(("  1", "  1")))
    skeleton.update(0.1)
    assert (skeleton.dx, skeleton.last_direction) == (-Skeleton.SPEED, -1)
    assert skeleton.rect.right == pytest.approx(2 * TILE_SIZE)


def test_dies_when_health_gone():
    skeleton = skeleton_at(0.0, 0.0)
    skeleton.health = 0
    skeleton.update(0.01)
    assert (skeleton.is_dead, skeleton.dx) == (True, 0.0)
    assert skeleton.rect.height == Skeleton.DEAD_HEIGHT
    assert skeleton.frame == Skeleton.DEATH_FRAMES[2]
    assert skeleton.health_bar() is None


@pytest.mark.parametrize(
    "player_x, skeleton_x, blocking, dt, damage, attacking, dx",
    [
        (200.0, 200.0, False, 8.0, 1, False, -Skeleton.SPEED),
        (200.0, 200.0, True, 8.0, 0, False, -Skeleton.SPEED),
        (200.0, 210.0, False, 0.1, 0, True, 0.0),
        (900.0, 200.0, False, 8.0, 0, False, Skeleton.SPEED),
    ],
)
def test_fight(player_x, skeleton_x, blocking, dt, damage, attacking, dx):
    player = player_at(player_x)
    player.is_blocking = blocking
    skeleton = skeleton_at(skeleton_x, 200.0)
    skeleton.fight(player, dt)
    assert player.health == Character.MAX_HEALTH - damage
    assert skeleton.is_attacking is attacking
    assert skeleton.dx == dx


def test_attack_in_progress_faces_player():
    skeleton = skeleton_at(210.0, 200.0)
    skeleton.fight(player_at(200.0), 0.1)
    assert skeleton.last_direction == -1
    assert skeleton.frame in Skeleton.FIGHTING_FRAMES


def test_dead_skeleton_does_not_fight():
    player = player_at(200.0)
    skeleton = skeleton_at(200.0, 200.0)
    skeleton.is_dead = True
    skeleton.fight(player, 8.0)
    assert player.health == Character.MAX_HEALTH


@pytest.mark.parametrize("health, ratio", [(2, 1.0), (1, 0.5)])
def test_health_bar(health, ratio):
    skeleton = skeleton_at(10.0, 50.0)
    skeleton.health = health
    background, fill = skeleton.health_bar()
    assert background.top == skeleton.rect.top - 20
    assert fill.width == pytest.approx(background.width * ratio)