"""The player-controlled swordsman, and the body physics shared by every actor."""

from __future__ import annotations

from dataclasses import dataclass

from arthur.level import (
    GRAVITY,
    GROUND_TILES,
    HAZARD_TILES,
    HEAL_TILE,
    PLAYER_SOLID_TILES,
    TILE_SIZE,
    WALL_TILE,
    Level,
    Rect,
    default_level,
    distance,
)

Frame = tuple[int, int, int, int]


@dataclass(frozen=True)
class Controls:
    """The state of the player's inputs for one frame."""

    left: bool = False
    right: bool = False
    jump: bool = False
    attack: bool = False
    block: bool = False


class _Body:
    """A sprite-backed rectangle that moves, falls and animates on a level."""

    DEFAULT_FRAME: Frame = (0, 0, 0, 0)

    def __init__(
        self,
        level: Level | None,
        start: tuple[float, float],
        size: tuple[float, float],
        dx: float,
        health: int,
    ):
        self.level = level if level is not None else default_level()
        self.rect = Rect(start[0], start[1], size[0], size[1])
        self.dx = dx
        self.dy = 0.0
        self.on_ground = False
        self.health = health
        self.current_frame = 0.0
        self.last_direction = 1
        self.frame: Frame = self.DEFAULT_FRAME
        self.flip = 1
        self.origin_x = 0

    @staticmethod
    def _frame_at(frames: tuple[Frame, ...], position: float) -> Frame:
        return frames[min(max(int(position), 0), len(frames) - 1)]

    def _face_direction(self, direction: int, flipped_origin: int = 60) -> None:
        self.last_direction = direction
        self.flip = direction
        self.origin_x = flipped_origin if direction == -1 else 0

    def _face(self, frame: Frame, flipped_origin: int = 60) -> None:
        self.frame = frame
        self._face_direction(self.last_direction, flipped_origin)

    def _move(self, dt: float) -> None:
        self.rect.left += self.dx * dt
        self.collide_x()
        if not self.on_ground:
            self.dy += GRAVITY * dt
        self.rect.top += self.dy * dt
        self.on_ground = False
        self.collide_y()

    def _cycle(self, frames: tuple[Frame, ...], rate: float, dt: float) -> Frame:
        self.current_frame += rate * dt
        if self.current_frame >= len(frames):
            self.current_frame -= len(frames)
        return self._frame_at(frames, self.current_frame)

    def _stop_vertically(self, row: int) -> None:
        if self.dy > 0:
            self.rect.top = row * TILE_SIZE - self.rect.height
            self.dy = 0.0
            self.on_ground = True
        if self.dy < 0:
            self.rect.top = row * TILE_SIZE + TILE_SIZE
            self.dy = 0.0

    def _bar(self, width: float, per_point: float) -> tuple[Rect, Rect] | None:
        if self.health <= 0:
            return None
        top = self.rect.top - 20
        background = Rect(self.rect.left, top, width, 10.0)
        fill = Rect(self.rect.left, top, self.health * per_point, 10.0)
        return background, fill

    def position(self) -> tuple[float, float]:
        return self.rect.position()


class _Patroller(_Body):
    """A body that walks until a wall turns it and lands on ground tiles."""

    def collide_x(self) -> None:
        """Turn around on reaching a wall tile."""
        for _row, col, tile in self.level.tiles_in(self.rect):
            if tile != WALL_TILE:
                continue
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
                self._stop_vertically(row)


class Character(_Body):
    """The hero: runs, jumps, attacks, blocks and collides with the map."""

    DEFAULT_FRAME: Frame = (35, 55, 50, 75)
    RUNNING_FRAMES: tuple[Frame, ...] = (
        (35, 314, 60, 75),
        (164, 314, 60, 75),
        (292, 314, 60, 75),
        (420, 314, 60, 75),
        (548, 314, 60, 75),
        (676, 314, 60, 75),
        (804, 314, 60, 75),
        (932, 314, 60, 75),
    )
    FIGHTING_FRAMES: tuple[Frame, ...] = (
        (13, 821, 60, 75),
        (150, 822, 60, 75),
        (288, 824, 80, 75),
        (416, 824, 60, 75),
    )
    DEFENDING_FRAMES: tuple[Frame, ...] = (
        (30, 1077, 60, 75),
        (160, 1080, 60, 75),
        (287, 1081, 60, 75),
    )
    DEATH_FRAMES: tuple[Frame, ...] = (
        (19, 1210, 47, 70),
        (149, 1211, 43, 69),
        (296, 1247, 73, 33),
    )

    MAX_HEALTH = 3
    SPEED = 150.0
    JUMP_SPEED = 280.0
    RUN_ANIMATION_RATE = 10.0
    ATTACK_ANIMATION_RATE = 0.5
    ATTACK_FRAMES = 4
    SKELETON_REACH = 73.0
    BOSS_REACH = 80.0
    HAZARD_DAMAGE = 3

    def __init__(self, level: Level | None = None, start: tuple[float, float] = (300.0, 550.0)):
        super().__init__(level, start, (55.0, 70.0), 0.0, self.MAX_HEALTH)
        self.is_blocking = False
        self.is_dead = False
        self.attack_cooldown = 5.0
        self.last_attack_time = 0.0
        self.can_attack = True
        self.is_attacking = False
        self.is_attacking_frames = False

    def update(self, dt: float) -> None:
        """Advance movement, gravity, collisions and the run animation."""
        self._move(dt)
        frame = self._cycle(self.RUNNING_FRAMES, self.RUN_ANIMATION_RATE, dt)
        if self.dx > 0 or self.dx < 0:
            self.frame = frame
            self._face_direction(1 if self.dx > 0 else -1)
        self.dx = 0.0

        if self.attack_cooldown > 0:
            self.attack_cooldown -= dt
            self.can_attack = False
        else:
            self.can_attack = True

    def handle_input(self, dt: float, controls: Controls, boss, skeleton) -> bool:
        """Apply one frame of input; return whether the hero is doing anything."""
        is_moving = False
        if controls.left:
            self.dx = -self.SPEED
            is_moving = True
        if controls.right:
            self.dx = self.SPEED
            is_moving = True
        if controls.jump and self.on_ground:
            self.dy = -self.JUMP_SPEED
            self.on_ground = False
        if controls.attack and not self.is_attacking and not self.is_attacking_frames:
            self.is_attacking = self.is_attacking_frames = True
            self.current_frame = 0.0

        if self.is_attacking:
            self._swing(dt, boss, skeleton)
            is_moving = True

        self.is_blocking = controls.block
        if controls.block:
            self._face(self.DEFENDING_FRAMES[2])
            is_moving = True

        return is_moving

    def _swing(self, dt: float, boss, skeleton) -> None:
        self.current_frame += self.ATTACK_ANIMATION_RATE * dt
        self._face(self._frame_at(self.FIGHTING_FRAMES, self.current_frame))

        skeleton_distance = distance(self.position(), skeleton.position())
        boss_distance = distance(self.position(), boss.position())

        if self.current_frame >= self.ATTACK_FRAMES and self.is_attacking_frames:
            self.is_attacking_frames = False
            self.is_attacking = False
            self.current_frame = 0.0
            if skeleton_distance < self.SKELETON_REACH:
                skeleton.health -= 1
                skeleton.dx = -skeleton.dx
            if boss_distance < self.BOSS_REACH:
                boss.health -= 1
                boss.last_direction = -boss.last_direction

        self.last_attack_time = self.attack_cooldown

    def handle_movement(self, is_moving: bool) -> None:
        """Show the idle pose when the hero is doing nothing."""
        if not is_moving:
            self.current_frame = 0.0
            self._face(self.DEFAULT_FRAME, flipped_origin=50)

    def position(self) -> tuple[float, float]:
        return self.rect.position()

    def finish(self) -> bool:
        """Enter the death pose if health is gone; return whether the game is lost."""
        if self.health > 0:
            return False
        self.is_dead = True
        self.rect.height = 33.0
        self._face(self.DEATH_FRAMES[2])
        return True

    def health_bar(self) -> tuple[Rect, Rect] | None:
        """The background and fill of the health bar, or None once dead."""
        return self._bar(60.0, 20.0)

    def collide_x(self) -> None:
        """Resolve horizontal contact with solid, hazard and healing tiles."""
        healed = False
        for _row, col, tile in self.level.tiles_in(self.rect):
            if tile in PLAYER_SOLID_TILES:
                if self.dx > 0:
                    self.rect.left = col * TILE_SIZE - self.rect.width
                if self.dx < 0:
                    self.rect.left = col * TILE_SIZE + TILE_SIZE
            if tile in HAZARD_TILES:
                self.health -= self.HAZARD_DAMAGE
            if tile != HEAL_TILE:
                healed = False
            elif self.health < self.MAX_HEALTH and not healed and not self.is_dead:
                self.health += 1
                healed = True

    def collide_y(self) -> None:
        """Resolve vertical contact with solid and hazard tiles."""
        for row, _col, tile in self.level.tiles_in(self.rect):
            if tile in PLAYER_SOLID_TILES:
                self._stop_vertically(row)
            if tile in HAZARD_TILES:
                self.health -= self.HAZARD_DAMAGE