"""
Stepwise sprite movement along a computed path.
"""

from __future__ import annotations
import math
from typing import List, Sequence, Tuple

from .config import TILE_SIZE, SPRITE_SPEED


class Sprite:
    """
    Represents a sprite on the tile map.
    Attributes:
        x (float): X position in pixels.
        y (float): Y position in pixels.
        name (str): Identifier for the sprite.
    """
    def __init__(self, x, y, name="sprite"):
        self.x = float(x)
        self.y = float(y)
        self.name = name

    def __repr__(self):
        return f"<Sprite {self.name} x={self.x:.1f} y={self.y:.1f}>"


class PathWalker:
    """
    Moves a sprite through the tile centers of a path.
    Attributes:
        sprite: Object with mutable x, y pixel coordinates.
        waypoints: Pixel centers of the remaining path tiles.
        speed: Movement speed in tiles per second.
        finished: True once the last waypoint is reached.
    """

    def __init__(
        self,
        sprite: Sprite,
        path: Sequence[Tuple[int, int]],
        tile_size: int = TILE_SIZE,
        speed: float = SPRITE_SPEED,
    ) -> None:
        if speed < 0:
            raise ValueError("speed must be non-negative")
        self.sprite = sprite
        self.tile_size = tile_size
        self.speed = float(speed)
        half = tile_size / 2.0
        self.waypoints: List[Tuple[float, float]] = [
            (x * tile_size + half, y * tile_size + half) for x, y in path
        ]
        self.finished = not self.waypoints

    def update(self, dt: float) -> None:
        """
        Advance the sprite by speed * dt tiles, passing through as many
        waypoints as the step covers and snapping onto each one reached.
        """
        if dt < 0:
            raise ValueError("dt must be non-negative")
        budget = self.speed * self.tile_size * dt
        while self.waypoints:
            tx, ty = self.waypoints[0]
            dx = tx - self.sprite.x
            dy = ty - self.sprite.y
            dist = math.hypot(dx, dy)
            if dist <= budget:
                self.sprite.x, self.sprite.y = tx, ty
                budget -= dist
                self.waypoints.pop(0)
                continue
            self.sprite.x += dx / dist * budget
            self.sprite.y += dy / dist * budget
            return
        self.finished = True
