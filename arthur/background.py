"""The static backdrop drawn behind the level."""

from __future__ import annotations

from pathlib import Path

import pygame

VIEW_SIZE = (1000, 700)


class Background:
    """An image stretched to cover the whole window."""

    def __init__(self, image: pygame.Surface, size: tuple[int, int] = VIEW_SIZE):
        width, height = image.get_size()
        if width == 0 or height == 0:
            raise ValueError("background image has no pixels")
        self.size = (int(size[0]), int(size[1]))
        self._image = pygame.transform.scale(image, self.size)

    @classmethod
    def from_file(cls, path, size: tuple[int, int] = VIEW_SIZE) -> Background:
        """Load the backdrop from an image file."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"missing background image: {path}")
        return cls(pygame.image.load(str(path)), size)

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the backdrop at the top-left corner of the surface."""
        surface.blit(self._image, (0, 0))