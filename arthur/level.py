"""Tile map of the level and the geometry shared by every actor."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

TILE_SIZE = 50
GRAVITY = 300.0
EMPTY = " "
WALL_TILE = "1"
HEAL_TILE = "H"
GROUND_TILES = frozenset("B0IiLl")
PLAYER_SOLID_TILES = GROUND_TILES | {"G"}
HAZARD_TILES = frozenset("tp")

TEXTURE_FILES = {
    "B": "ground.png",
    "G": "blackblock.png",
    "I": "island-L.png",
    "i": "island-R.png",
    "L": "lower-L.png",
    "l": "lower-R.png",
    "t": "trapS.png",
    "p": "pila.png",
    "H": "Fishbarrel2.png",
}

LOADING_MAP = (
    "0                                                                                                  0",
    "0                                                                                                  0",
    "0   H                                                                             H                0",
    "0IBBBBBBi               IBBBBBi     IBBBBBBBBi                                   IBi               0",
    "0LGGGGGGl1             1                                           1           1         IBi       0",
    "0         IBBBBBBBBBBBBi        ppp          IBBi                   IBBBBBBBBBi                    0",
    "0                              IBBBi         LGGl                                              IBi 0",
    "0                                            LGGl  IBBBi        Ii                                 0",
    "0                                            LGGl                                        IBBBi     0",
    "0                                            LGGl        Ii                 1          1           0",
    "0                      Ii 1           1 IBBBBGGGl                           IBBBBBBBBBi           0",
    "0                      Ll  IBBBBBBBBBi  LGGGGGGGl              Ii                                  0",
    "0          Ii    Ii                                      Ii    Ll    Ii                      Ii    0",
    "0          LlttttLl1                                    1LlttttLlttttLl1                   1 Ll    0",
    "BBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBl   IB",
    "GGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGGG   GG",
    "0                                                                                                  0",
    "0             H                                                         H                          0",
    "0            IBi              IBi               IBi                    IBi                         0",
    "0                                                                                                  0",
    "01      Ii                          Ii                  Ii         Ii                             10",
    "BBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBB",
)


@dataclass
class Rect:
    """An axis-aligned rectangle in world coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles overlap by a non-zero area."""
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )

    def position(self) -> tuple[float, float]:
        return (self.left, self.top)


@dataclass(frozen=True)
class Level:
    """A grid of one-character tiles, each TILE_SIZE pixels square."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def tile_at(self, row: int, col: int) -> str:
        """The tile at a grid cell; cells outside the map are empty."""
        if 0 <= row < len(self.rows) and 0 <= col < len(self.rows[row]):
            return self.rows[row][col]
        return EMPTY

    def tiles_in(self, rect: Rect) -> Iterator[tuple[int, int, str]]:
        """Yield (row, col, tile) for every cell the rectangle covers.

        The rectangle's bounds are read again at each step, so a caller that
        moves the rectangle while iterating changes the cells still visited.
        """
        row = math.trunc(rect.top / TILE_SIZE)
        while row < (rect.top + rect.height) / TILE_SIZE:
            col = math.trunc(rect.left / TILE_SIZE)
            while col < (rect.left + rect.width) / TILE_SIZE:
                yield row, col, self.tile_at(row, col)
                col += 1
            row += 1

    def __iter__(self) -> Iterator[tuple[int, int, str]]:
        for row, line in enumerate(self.rows):
            for col, tile in enumerate(line):
                yield row, col, tile


def default_level() -> Level:
    """The level the game is played on."""
    return Level(LOADING_MAP)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def load_textures(directory) -> dict:
    """Load the image for every drawable tile from a directory."""
    import pygame

    base = Path(directory)
    textures = {}
    for key, name in TEXTURE_FILES.items():
        path = base / name
        if not path.is_file():
            raise FileNotFoundError(f"missing tile texture: {path}")
        textures[key] = pygame.image.load(str(path))
    return textures