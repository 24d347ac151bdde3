"""The walking skeleton enemy."""

from __future__ import annotations

from arthur.character import Frame, _Patroller
from arthur.level import Level, Rect, distance


class Skeleton(_Patroller):
    """A skeleton that patrols between walls and strikes a nearby hero."""

    DEFAULT_FRAME: Frame = (35, 60, 45, 67)
    WALKING_FRAMES: tuple[Frame, ...] = (
        (52, 186, 40, 70),
        (180, 187, 40, 70),
        (308, 188, 40, 70),
        (436, 187, 40, 70),
        (564, 186, 40, 70),
        (692, 187, 40, 70),
        (820, 188, 40, 70),
        (948, 187, 40, 70),
    )
    FIGHTING_FRAMES: tuple[Frame, ...] = (
        (51, 699, 60, 75),
        (179, 699, 60, 75),
        (277, 700, 99, 75),
        (402, 700, 60, 75),
    )
    DEATH_FRAMES: tuple[Frame, ...] = (
        (33, 1224, 39, 56),
        (150, 1226, 50, 54),
        (268, 1256, 60, 24),
    )

    MAX_HEALTH = 2
    SPEED = 50.0
    WALK_ANIMATION_RATE = 8.0
    ATTACK_ANIMATION_RATE = 0.5
    ATTACK_FRAMES = 4
    REACH = 50.0
    DEAD_HEIGHT = 24.0

    def __init__(self, start: tuple[float, float], level: Level | None = None):
        super().__init__(level, start, (55.0, 70.0), self.SPEED, self.MAX_HEALTH)
        self.is_attacking = False
        self.is_attacking_frames = False
        self.is_dead = False

    def update(self, dt: float) -> None:
        """Advance movement, gravity, collisions, the walk cycle and death."""
        self._move(dt)
        self.frame = self._cycle(self.WALKING_FRAMES, self.WALK_ANIMATION_RATE, dt)
        if not self.is_attacking:
            self._face_direction(-1 if self.dx < 0 else 1)

        if self.health <= 0:
            self.is_dead = True
            self.dx = 0.0
            self.current_frame = 0.0
            self.rect.height = self.DEAD_HEIGHT
            self.frame = self.DEATH_FRAMES[2]

    def position(self) -> tuple[float, float]:
        return self.rect.position()

    def fight(self, player, dt: float) -> None:
        """Attack the hero when close, hurting them unless they block."""
        player_x, player_y = player.position()
        gap = distance(self.position(), (player_x, player_y))
        self.last_direction = -1 if player_x < self.rect.left else 1

        if self.is_dead:
            return

        away = -self.SPEED if player_x >= self.rect.left else self.SPEED

        if gap < self.REACH and not self.is_attacking and not self.is_attacking_frames:
            self.dx = 0.0
            self.is_attacking = self.is_attacking_frames = True
            self.current_frame = 0.0

        if self.is_attacking:
            self.current_frame += self.ATTACK_ANIMATION_RATE * dt
            self._face(self._frame_at(self.FIGHTING_FRAMES, self.current_frame))

        if self.current_frame >= self.ATTACK_FRAMES and self.is_attacking_frames:
            self.is_attacking_frames = False
            self.is_attacking = False
            self.current_frame = 0.0
            if not player.is_blocking:
                player.health -= 1
                self.dx = away

        if not self.is_attacking and gap < self.REACH:
            self.dx = away

    def health_bar(self) -> tuple[Rect, Rect] | None:
        """The background and fill of the health bar, or None once dead."""
        return self._bar(60.0, 30.0)

    def collide_x(self) -> None:
        """Turn around on reaching a wall tile."""
        super().collide_x()

    def collide_y(self) -> None:
        """Land on ground tiles and stop against ceilings."""
        super().collide_y()