"""
Path highlighting: draws a computed path onto a pygame surface.
"""

from __future__ import annotations
import pygame
from typing import Iterable, Tuple

from .config import TILE_SIZE, PATH_FILL_COLOR


def _channel(value: float) -> int:
    return int(round(max(0.0, min(1.0, float(value))) * 255))


class PathOverlay:
    """
    Fills every tile of a path with a translucent color.
    Attributes:
        tile_size (int): Tile edge length in pixels.
        fill_color (pygame.Color): Color used for highlighted tiles.
    """

    def __init__(
        self,
        tile_size: int = TILE_SIZE,
        fill_color: Tuple[float, float, float, float] = PATH_FILL_COLOR,
    ) -> None:
        self.tile_size = int(tile_size)
        self.fill_color = pygame.Color(0, 0, 0, 0)
        self.set_fill_color(*fill_color)

    def set_fill_color(self, r: float, g: float, b: float, a: float) -> None:
        """Set the highlight color from RGBA floats in [0, 1]."""
        self.fill_color = pygame.Color(
            _channel(r), _channel(g), _channel(b), _channel(a)
        )

    def draw(self, surface: pygame.Surface, path: Iterable[Tuple[int, int]]) -> None:
        """Blend the fill color over each tile of path on surface."""
        tile = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        tile.fill(self.fill_color)
        for x, y in path:
            surface.blit(tile, (x * self.tile_size, y * self.tile_size))
