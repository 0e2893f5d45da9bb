from __future__ import annotations
import os
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from .config import (
    MAP_FILE,
    COLLIDE_LAYER,
    COLLIDE_KEY,
    COLLIDE_VALUE,
    TILE_SIZE,
    ALLOW_DIAGONAL,
)
from .pathfinding import PathFinder

logger = logging.getLogger(__name__)


class TileMap:
    """
    Tile map loaded from an external JSON file (default) or provided data.

    Layers are rows of tile gids; gid 0 is an empty tile. A cell collides
    when its tile in the collide layer carries collide_key == collide_value
    among its properties.
    """

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        collide_layer: str = COLLIDE_LAYER,
        collide_key: str = COLLIDE_KEY,
        collide_value: str = COLLIDE_VALUE,
    ) -> None:
        self.collide_layer = collide_layer
        self.collide_key = collide_key
        self.collide_value = str(collide_value)
        if data is None:
            data = self._read(os.path.join(os.path.dirname(__file__), MAP_FILE))
        self.tile_size = int(data.get("tile_size", TILE_SIZE))
        # Property keys are stored as strings; gids index them as ints
        self.tiles: Dict[int, Dict[str, str]] = {}
        for gid, props in (data.get("tiles") or {}).items():
            self.tiles[int(gid)] = {str(k): str(v) for k, v in props.items()}
        self.layers: Dict[str, List[List[int]]] = {
            name: [[int(gid) for gid in row] for row in rows]
            for name, rows in (data.get("layers") or {}).items()
        }
        if collide_layer not in self.layers:
            raise ValueError(f"Map has no collide layer named {collide_layer!r}")
        grid = self.layers[collide_layer]
        self.height = len(grid)
        self.width = len(grid[0]) if self.height > 0 else 0
        for name, rows in self.layers.items():
            if len(rows) != self.height or any(len(r) != self.width for r in rows):
                raise ValueError(
                    f"Layer {name!r} does not match map size "
                    f"{self.width}x{self.height}"
                )

    @classmethod
    def load(cls, path: str, **kwargs: Any) -> TileMap:
        """Load a map from a JSON file at path."""
        return cls(cls._read(path), **kwargs)

    @staticmethod
    def _read(path: str) -> Dict[str, Any]:
        try:
            with open(path, "r") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to load tile map %s: %s", path, e)
            raise RuntimeError(f"Failed to load tile map from {path}: {e}")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_gid(self, layer: str, x: int, y: int) -> int:
        """Return the gid at (x, y) in layer (0 when empty)."""
        return self.layers[layer][y][x]

    def tile_properties(self, gid: int) -> Dict[str, str]:
        return self.tiles.get(gid, {})

    def is_collidable(self, x: int, y: int) -> bool:
        gid = self.tile_gid(self.collide_layer, x, y)
        if gid == 0:
            return False
        props = self.tile_properties(gid)
        return props.get(self.collide_key) == self.collide_value

    def passable(self, x: int, y: int) -> bool:
        """Collision oracle handed to the pathfinder."""
        return self.in_bounds(x, y) and not self.is_collidable(x, y)

    def is_wall(self, x: float, y: float) -> bool:
        """Return True if (x, y) is a collide tile or out of bounds."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return True
        return self.is_collidable(int(x), int(y))

    def pathfinder(
        self, allow_diagonal: bool = ALLOW_DIAGONAL, **kwargs: Any
    ) -> PathFinder:
        """Return a PathFinder bound to this map's collision data."""
        return PathFinder(
            self.width,
            self.height,
            self.passable,
            allow_diagonal=allow_diagonal,
            **kwargs,
        )

    def tile_center(self, cell: Tuple[int, int]) -> Tuple[float, float]:
        """Return the pixel center of tile cell."""
        half = self.tile_size / 2.0
        return (cell[0] * self.tile_size + half, cell[1] * self.tile_size + half)
