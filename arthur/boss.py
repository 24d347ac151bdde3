"""The werewolf boss guarding the end of the level."""

from __future__ import annotations

import random

from arthur.level import (
    GRAVITY,
    GROUND_TILES,
    TILE_SIZE,
    WALL_TILE,
    Level,
    Rect,
    default_level,
    distance,
)

Frame = tuple[int, int, int, int]


def _pick(frames: tuple[Frame, ...], position: float) -> Frame:
    return frames[min(max(int(position), 0), len(frames) - 1)]


class Boss:
    """A werewolf that patrols, attacks with one of two moves, and ends the game."""

    DEFAULT_FRAME: Frame = (26, 181, 86, 75)
    WALKING_FRAMES: tuple[Frame, ...] = (
        (26, 181, 86, 75),
        (155, 180, 84, 76),
        (284, 179, 83, 77),
        (413, 178, 81, 78),
        (542, 179, 80, 77),
        (799, 181, 81, 75),
        (926, 180, 81, 76),
    )
    FIGHTING_1_FRAMES: tuple[Frame, ...] = (
        (10, 812, 85, 84),
        (140, 812, 84, 84),
        (279, 813, 97, 83),
        (401, 813, 80, 83),
    )
    FIGHTING_2_FRAMES: tuple[Frame, ...] = (
        (15, 935, 70, 89),
        (146, 935, 68, 89),
        (278, 940, 74, 84),
        (407, 931, 92, 93),
        (536, 930, 73, 94),
    )
    DEATH_FRAMES: tuple[Frame, ...] = (
        (28, 1230, 83, 50),
        (156, 1258, 89, 22),
    )

    MAX_HEALTH = 10
    SPEED = 100.0
    WALK_ANIMATION_RATE = 7.0
    ATTACK_ANIMATION_RATE = 0.5
    ATTACK_FRAMES = 4
    REACH = 50.0
    DEAD_HEIGHT = 22.0

    def __init__(
        self,
        level: Level | None = None,
        start: tuple[float, float] = (100.0, 800.0),
        rng: random.Random | None = None,
    ):
        self.level = level if level is not None else default_level()
        self.rng = rng if rng is not None else random.Random()
        self.rect = Rect(start[0], start[1], 86.0, 75.0)
        self.dx = self.SPEED
        self.dy = 0.0
        self.on_ground = False
        self.health = self.MAX_HEALTH
        self.is_dead = False
        self.is_attacking = False
        self.is_attacking_frames = False
        self.use_first_attack_frames = False
        self.current_frame = 0.0
        self.last_direction = 1
        self.frame: Frame = self.DEFAULT_FRAME
        self.flip = 1
        self.origin_x = 0

    def update(self, dt: float) -> None:
        """Advance movement, gravity, collisions and the walk cycle."""
        self.rect.left += self.dx * dt
        self.collide_x()
        if not self.on_ground:
            self.dy += GRAVITY * dt
        self.rect.top += self.dy * dt
        self.on_ground = False
        self.collide_y()

        self.current_frame += dt * self.WALK_ANIMATION_RATE
        if self.current_frame >= len(self.WALKING_FRAMES):
            self.current_frame -= len(self.WALKING_FRAMES)

        self.frame = _pick(self.WALKING_FRAMES, self.current_frame)

        if self.dx < 0:
            self.flip, self.origin_x, self.last_direction = -1, 60, -1
        else:
            self.flip, self.origin_x, self.last_direction = 1, 0, 1

    def position(self) -> tuple[float, float]:
        return self.rect.position()

    def finish(self) -> bool:
        """Enter the death pose if health is gone; return whether the game is won."""
        if self.health > 0:
            return False
        self.dx = 0.0
        self.rect.height = self.DEAD_HEIGHT
        self.frame = self.DEATH_FRAMES[1]
        return True

    def fight(self, player, dt: float) -> None:
        """Attack the hero when close, hurting them unless they block."""
        player_pos = player.position()
        gap = distance(self.position(), player_pos)
        self.last_direction = -1 if player_pos[0] < self.rect.left else 1

        if self.is_dead:
            return

        if gap < self.REACH and not self.is_attacking and not self.is_attacking_frames:
            self.dx = 0.0
            self.is_attacking = self.is_attacking_frames = True
            self.current_frame = 0.0
            self.use_first_attack_frames = self.rng.randrange(2) == 0

        if self.is_attacking:
            self.current_frame += self.ATTACK_ANIMATION_RATE * dt
            frames = self.FIGHTING_1_FRAMES if self.use_first_attack_frames else self.FIGHTING_2_FRAMES
            self.frame = _pick(frames, self.current_frame)
            self.flip = self.last_direction
            self.origin_x = 60 if self.last_direction == -1 else 0

        if self.current_frame >= self.ATTACK_FRAMES and self.is_attacking_frames:
            self.is_attacking_frames = False
            self.is_attacking = False
            self.current_frame = 0.0
            if not player.is_blocking:
                player.health -= 1
                self.dx = -self.SPEED if player_pos[0] >= self.rect.left else self.SPEED

        if not self.is_attacking and gap < self.REACH:
            self.dx = -self.SPEED if player_pos[0] >= self.rect.left else self.SPEED

    def health_bar(self) -> tuple[Rect, Rect]:
        """The background and fill of the health bar."""
        top = self.rect.top - 20
        background = Rect(self.rect.left, top, 100.0, 10.0)
        fill = Rect(self.rect.left, top, self.health * 10.0, 10.0)
        return background, fill

    def collide_x(self) -> None:
        """Turn around on reaching a wall tile."""
        for _row, col, tile in self.level.tiles_in(self.rect):
            if tile == WALL_TILE:
                if self.dx > 0:
                    self.rect.left = col * TILE_SIZE - self.rect.width
                    self.dx = -self.dx
                elif self.dx < 0:
                    self.rect.left = col * TILE_SIZE + TILE_SIZE
                    self.dx = -self.dx

    def collide_y(self) -> None:
        """Land on ground tiles and stop against ceilings."""
        for row, _col, tile in self.level.tiles_in(self.rect):
            if tile in GROUND_TILES:
                if self.dy > 0:
                    self.rect.top = row * TILE_SIZE - self.rect.height
                    self.dy = 0.0
                    self.on_ground = True
                if self.dy < 0:
                    self.rect.top = row * TILE_SIZE + TILE_SIZE
                    self.dy = 0.0