"""The game world, its main loop and the command that starts it."""

from __future__ import annotations

import argparse
import random
import sys
import time
from enum import Enum
from pathlib import Path

import pygame

from arthur.background import VIEW_SIZE, Background
from arthur.boss import Boss
from arthur.character import Character, Controls
from arthur.level import TEXTURE_FILES, TILE_SIZE, Level, default_level, load_textures
from arthur.skeleton import Skeleton
from arthur.spirit import Spirit

TITLE = "The Arthur"
CAMERA_OFFSET = (50.0, -130.0)
SKELETON_STARTS = ((1500.0, 400.0), (3400.0, 10.0), (4000.0, 300.0))
SPIRIT_STARTS = ((600.0, 10.0), (1500.0, 600.0), (3600.0, 600.0))

BACKGROUND_FILE = "Summer8.png"
FONT_FILE = "Arial.ttf"
SPRITE_SHEETS = {
    "character": "Swordsman_spritelist.png",
    "skeleton": "Skeleton_spritelist.png",
    "spirit": "Fire_Spirit_spritelist.png",
    "boss": "Werewolf_Spritelist.png",
}

BAR_BACKGROUND = (255, 0, 0)
BAR_FILL = (0, 255, 0)


class Outcome(Enum):
    """How a game ended, with the message shown for it."""

    WON = "You win!"
    LOST = "You LOST!"

    @property
    def colour(self) -> tuple[int, int, int]:
        return (0, 255, 0) if self is Outcome.WON else (255, 0, 0)

    @property
    def pause(self) -> float:
        return 5.0 if self is Outcome.WON else 10.0


class World:
    """Every actor of one game and the order in which they act."""

    def __init__(self, level: Level | None = None, rng: random.Random | None = None):
        self.level = level if level is not None else default_level()
        self.boss = Boss(self.level, rng=rng)
        self.spirits = [Spirit(start, self.level) for start in SPIRIT_STARTS]
        self.skeletons = [Skeleton(start, self.level) for start in SKELETON_STARTS]
        self.character = Character(self.level)
        self._outcome: Outcome | None = None

    def step(self, dt: float, controls: Controls) -> Outcome | None:
        """Advance the game by dt seconds; return the outcome once decided."""
        if self._outcome is not None:
            return self._outcome

        hero = self.character
        first, *others = self.skeletons
        is_moving = hero.handle_input(dt, controls, self.boss, first)
        for skeleton in others:
            hero.handle_input(dt, controls, self.boss, skeleton)
        hero.update(dt)
        hero.handle_movement(is_moving)
        if hero.finish():
            self._outcome = Outcome.LOST

        for skeleton in self.skeletons:
            skeleton.update(dt)
            skeleton.fight(hero, dt)
        for spirit in self.spirits:
            spirit.update(dt)
            spirit.fight(hero)

        self.boss.update(dt)
        self.boss.fight(hero, dt)
        if self.boss.finish() and self._outcome is None:
            self._outcome = Outcome.WON
        return self._outcome

    def camera_center(self) -> tuple[float, float]:
        """The world point the view is centred on."""
        x, y = self.character.position()
        return (x + CAMERA_OFFSET[0], y + CAMERA_OFFSET[1])

    def outcome(self) -> Outcome | None:
        return self._outcome


def _read_controls() -> Controls:
    keys = pygame.key.get_pressed()
    buttons = pygame.mouse.get_pressed()
    return Controls(
        left=bool(keys[pygame.K_a]),
        right=bool(keys[pygame.K_d]),
        jump=bool(keys[pygame.K_SPACE]),
        attack=bool(buttons[0]),
        block=bool(buttons[2]),
    )


def _blit_actor(screen, sheet, actor, offset) -> None:
    area = pygame.Rect(actor.frame).clip(sheet.get_rect())
    if area.width == 0 or area.height == 0:
        return
    image = sheet.subsurface(area)
    left, top = actor.rect.left, actor.rect.top
    if actor.flip == -1:
        image = pygame.transform.flip(image, True, False)
        x = left + actor.origin_x - image.get_width()
    else:
        x = left - actor.origin_x
    screen.blit(image, (x - offset[0], top - offset[1]))


def _blit_bar(screen, bar, offset) -> None:
    if bar is None:
        return
    for rect, colour in zip(bar, (BAR_BACKGROUND, BAR_FILL)):
        if rect.width > 0:
            screen.fill(
                colour,
                pygame.Rect(rect.left - offset[0], rect.top - offset[1], rect.width, rect.height),
            )


def _draw(screen, world: World, background, tiles, sheets) -> None:
    screen.fill((0, 0, 0))
    background.draw(screen)

    cx, cy = world.camera_center()
    offset = (cx - VIEW_SIZE[0] / 2, cy - VIEW_SIZE[1] / 2)

    for row, col, tile in world.level:
        image = tiles.get(tile)
        if image is not None:
            screen.blit(image, (col * TILE_SIZE - offset[0], row * TILE_SIZE - offset[1]))

    _blit_actor(screen, sheets["boss"], world.boss, offset)
    _blit_bar(screen, world.boss.health_bar(), offset)
    for spirit in world.spirits:
        _blit_actor(screen, sheets["spirit"], spirit, offset)
    for skeleton in world.skeletons:
        _blit_actor(screen, sheets["skeleton"], skeleton, offset)
        _blit_bar(screen, skeleton.health_bar(), offset)
    _blit_actor(screen, sheets["character"], world.character, offset)
    _blit_bar(screen, world.character.health_bar(), offset)
    pygame.display.flip()


def _show_outcome(screen, outcome: Outcome, font_path: Path) -> None:
    font = pygame.font.Font(str(font_path) if font_path.is_file() else None, 50)
    text = font.render(outcome.value, True, outcome.colour)
    width, height = screen.get_size()
    screen.fill((0, 0, 0))
    screen.blit(text, (width / 2 - text.get_width() / 2, height / 2 - text.get_height()))
    pygame.display.flip()
    time.sleep(outcome.pause)


def run(texture_dir) -> Outcome | None:
    """Play one game with images from texture_dir; return how it ended."""
    base = Path(texture_dir)
    required = [base / BACKGROUND_FILE]
    required += [base / name for name in TEXTURE_FILES.values()]
    required += [base / name for name in SPRITE_SHEETS.values()]
    missing = [str(path) for path in required if not path.is_file()]
    if missing:
        raise FileNotFoundError("missing textures: " + ", ".join(missing))

    pygame.init()
    try:
        screen = pygame.display.set_mode(VIEW_SIZE)
        pygame.display.set_caption(TITLE)
        background = Background.from_file(base / BACKGROUND_FILE, VIEW_SIZE)
        tiles = {
            key: pygame.transform.scale(image, (TILE_SIZE, TILE_SIZE))
            for key, image in load_textures(base).items()
        }
        sheets = {key: pygame.image.load(str(base / name)) for key, name in SPRITE_SHEETS.items()}

        world = World()
        clock = pygame.time.Clock()
        while True:
            dt = clock.tick() / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
            outcome = world.step(dt, _read_controls())
            if outcome is not None:
                _show_outcome(screen, outcome, base / FONT_FILE)
                return outcome
            _draw(screen, world, background, tiles, sheets)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="arthur", description="A side-scrolling sword game.")
    parser.add_argument(
        "--textures",
        default="Textures",
        help="directory holding the game's images (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        run(args.textures)
    except FileNotFoundError as exc:
        print(f"arthur: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())