"""The fire spirit that dashes along platforms."""

from __future__ import annotations

from arthur.character import Frame, _Patroller
from arthur.level import Level


class Spirit(_Patroller):
    """A fast spirit: the hero kills it by landing on it and dies touching it."""

    DEFAULT_FRAME: Frame = (48, 62, 52, 30)
    WALKING_FRAMES: tuple[Frame, ...] = (
        (23, 187, 50, 30),
        (150, 187, 52, 30),
        (279, 186, 51, 30),
        (406, 186, 52, 30),
        (533, 187, 53, 30),
        (662, 187, 52, 30),
        (790, 188, 51, 30),
    )
    DEATH_FRAMES: tuple[Frame, ...] = (
        (50, 1250, 23, 30),
        (180, 1250, 20, 26),
        (310, 1255, 17, 22),
        (441, 1262, 11, 15),
        (570, 1266, 8, 11),
    )

    SPEED = 300.0
    WALK_ANIMATION_RATE = 7.0
    DEATH_ANIMATION_RATE = 100.0
    BOUNCE_SPEED = 200.0
    CONTACT_DAMAGE = 3
    ALIVE = 0
    DYING = -1
    GONE = -2

    def __init__(self, start: tuple[float, float], level: Level | None = None):
        super().__init__(level, start, (52.0, 30.0), self.SPEED, self.ALIVE)
        self.is_dead = False

    def update(self, dt: float) -> None:
        """Advance movement, gravity, collisions and the animation."""
        self._move(dt)
        self.frame = self._cycle(self.WALKING_FRAMES, self.WALK_ANIMATION_RATE, dt)
        self._face_direction(-1 if self.dx < 0 else 1)

        if self.health == self.DYING:
            self.current_frame = dt * self.DEATH_ANIMATION_RATE
            if self.current_frame >= len(self.DEATH_FRAMES):
                self.current_frame -= len(self.DEATH_FRAMES) - 1
                self.health = self.GONE
            self.frame = self._frame_at(self.DEATH_FRAMES, self.current_frame)
        elif self.health == self.GONE:
            self.frame = self.DEATH_FRAMES[4]

    def fight(self, player) -> None:
        """Be stomped by a falling hero, or burn a hero standing in contact."""
        if not player.rect.intersects(self.rect) or player.is_dead:
            return
        if player.dy > 0 and self.health == self.ALIVE:
            self.dx = 0.0
            player.dy = -self.BOUNCE_SPEED
            self.health -= 1
        if player.dy == 0 and self.health == self.ALIVE:
            player.health -= self.CONTACT_DAMAGE

    def collide_x(self) -> None:
        """Turn around on reaching a wall tile."""
        super().collide_x()

    def collide_y(self) -> None:
        """Land on ground tiles and stop against ceilings."""
        super().collide_y()