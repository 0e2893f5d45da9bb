"""
Pathfinding utilities: implements grid-based A* search.
"""

from __future__ import annotations
import enum
import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .config import (
    ALLOW_DIAGONAL,
    CUT_CORNERS,
    ORTHOGONAL_COST,
    DIAGONAL_COST,
    MAX_EXPANSIONS,
)
from .node import Coord, Node

logger = logging.getLogger(__name__)

# Expansion order matters for deterministic tie-breaking
ORTHOGONAL_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_STEPS = ((1, 1), (-1, 1), (1, -1), (-1, -1))


class PathfindingError(Exception):
    """Base class for pathfinding faults."""


class ConfigurationError(PathfindingError, ValueError):
    """Raised when a PathFinder is constructed with invalid settings."""


class SearchStatus(enum.Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_REQUEST = "invalid_request"


@dataclass
class PathResult:
    """Outcome of one search: the path plus how it ended."""

    path: List[Coord] = field(default_factory=list)
    status: SearchStatus = SearchStatus.NO_PATH
    cost: Optional[int] = None
    expanded: int = 0
    reason: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


def manhattan(a: Coord, b: Coord, step_cost: int = ORTHOGONAL_COST) -> int:
    """Manhattan distance heuristic for 4-neighbour grids."""
    return step_cost * (abs(a[0] - b[0]) + abs(a[1] - b[1]))


def octile(
    a: Coord,
    b: Coord,
    orthogonal_cost: int = ORTHOGONAL_COST,
    diagonal_cost: int = DIAGONAL_COST,
) -> int:
    """Octile distance heuristic for 8-neighbour grids."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    straight = orthogonal_cost * max(dx, dy)
    return straight + (diagonal_cost - orthogonal_cost) * min(dx, dy)


class OpenSet:
    """
    Frontier of discovered, unexpanded nodes.

    Heap entries are ordered by (f, h, insertion order). Each position has
    at most one live node: pushing a node for a position already present
    replaces it, and the superseded heap entry is dropped when it surfaces.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, int, Node]] = []
        self._nodes: Dict[Coord, Node] = {}
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        self._nodes[node.position] = node
        entry = (node.cost(), node.h, next(self._counter), node)
        heapq.heappush(self._heap, entry)

    def pop(self) -> Node:
        """Remove and return the live node with the lowest F (then H)."""
        while self._heap:
            _, _, _, node = heapq.heappop(self._heap)
            if self._nodes.get(node.position) is node:
                del self._nodes[node.position]
                return node
        raise IndexError("pop from an empty open set")

    def get(self, position: Coord) -> Optional[Node]:
        return self._nodes.get(position)

    def __contains__(self, position: object) -> bool:
        return position in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class PathFinder:
    """
    A* search over a width x height grid.

    passable(x, y) -> bool is the caller's collision oracle; it is only
    queried for in-bounds cells and must not change during a search.
    """

    def __init__(
        self,
        width: int,
        height: int,
        passable: Callable[[int, int], bool],
        allow_diagonal: bool = ALLOW_DIAGONAL,
        cut_corners: bool = CUT_CORNERS,
        orthogonal_cost: int = ORTHOGONAL_COST,
        diagonal_cost: int = DIAGONAL_COST,
        max_expansions: Optional[int] = MAX_EXPANSIONS,
    ) -> None:
        if not (_is_positive_int(width) and _is_positive_int(height)):
            raise ConfigurationError(
                "Grid dimensions must be positive integers, "
                f"got {width!r}x{height!r}"
            )
        if passable is None or not callable(passable):
            raise ConfigurationError(
                "A callable passable(x, y) predicate is required"
            )
        if not (
            _is_positive_int(orthogonal_cost)
            and _is_positive_int(diagonal_cost)
        ):
            raise ConfigurationError("Step costs must be positive integers")
        # Outside this range the octile estimate is no longer admissible
        if not orthogonal_cost <= diagonal_cost <= 2 * orthogonal_cost:
            raise ConfigurationError(
                f"diagonal_cost {diagonal_cost} must lie in "
                f"[{orthogonal_cost}, {2 * orthogonal_cost}]"
            )
        if max_expansions is not None and not _is_positive_int(max_expansions):
            raise ConfigurationError(
                "max_expansions must be None or a positive integer, "
                f"got {max_expansions!r}"
            )
        self.width = width
        self.height = height
        self.passable = passable
        self.allow_diagonal = bool(allow_diagonal)
        self.cut_corners = bool(cut_corners)
        self.orthogonal_cost = orthogonal_cost
        self.diagonal_cost = diagonal_cost
        self.max_expansions = max_expansions

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, x: int, y: int) -> bool:
        """Return True if (x, y) is inside the grid and not blocked."""
        return self.in_bounds(x, y) and bool(self.passable(x, y))

    def heuristic(self, a: Coord, b: Coord) -> int:
        if self.allow_diagonal:
            return octile(a, b, self.orthogonal_cost, self.diagonal_cost)
        return manhattan(a, b, self.orthogonal_cost)

    def neighbors(self, position: Coord) -> Iterator[Tuple[Coord, int]]:
        """Yield (cell, step cost) for every cell reachable in one move."""
        x, y = position
        for dx, dy in ORTHOGONAL_STEPS:
            if self.is_passable(x + dx, y + dy):
                yield (x + dx, y + dy), self.orthogonal_cost
        if not self.allow_diagonal:
            return
        for dx, dy in DIAGONAL_STEPS:
            if not self.is_passable(x + dx, y + dy):
                continue
            # A diagonal may not clip the corner of a blocked orthogonal cell
            if not self.cut_corners and not (
                self.is_passable(x + dx, y) and self.is_passable(x, y + dy)
            ):
                continue
            yield (x + dx, y + dy), self.diagonal_cost

    def find_path(self, src: Coord, dst: Coord) -> PathResult:
        """
        Search for the cheapest path from src to dst.
        Returns a PathResult whose path runs src..dst inclusive when found.
        An impassable src is accepted: the search simply starts there.
        """
        src = (int(src[0]), int(src[1]))
        dst = (int(dst[0]), int(dst[1]))

        if not (self.in_bounds(*src) and self.in_bounds(*dst)):
            logger.warning("Path request out of bounds: %s -> %s", src, dst)
            return PathResult(
                status=SearchStatus.INVALID_REQUEST, reason="out_of_bounds"
            )
        if not self.passable(*dst):
            logger.warning("Path request to blocked destination %s", dst)
            return PathResult(
                status=SearchStatus.INVALID_REQUEST, reason="destination_blocked"
            )
        if src == dst:
            return PathResult(path=[src], status=SearchStatus.FOUND, cost=0)

        open_set = OpenSet()
        closed = np.zeros((self.height, self.width), dtype=bool)
        open_set.push(Node(src, None, 0, self.heuristic(src, dst)))
        expanded = 0

        while open_set:
            if self.max_expansions is not None and expanded >= self.max_expansions:
                logger.debug(
                    "Search %s -> %s stopped after %d expansions", src, dst, expanded
                )
                return PathResult(
                    status=SearchStatus.NO_PATH,
                    expanded=expanded,
                    reason="max_expansions_exhausted",
                )
            current = open_set.pop()
            cx, cy = current.position
            closed[cy, cx] = True
            expanded += 1

            if current.position == dst:
                path = current.path()
                logger.debug(
                    "Found path %s -> %s: %d cells, cost %d, %d expansions",
                    src, dst, len(path), current.g, expanded,
                )
                return PathResult(
                    path=path,
                    status=SearchStatus.FOUND,
                    cost=current.g,
                    expanded=expanded,
                )

            for cell, step_cost in self.neighbors(current.position):
                nx, ny = cell
                # Both heuristics are consistent, so closed cells are final
                if closed[ny, nx]:
                    continue
                tentative_g = current.g + step_cost
                known = open_set.get(cell)
                if known is None or tentative_g < known.g:
                    open_set.push(
                        Node(cell, current, tentative_g, self.heuristic(cell, dst))
                    )

        logger.debug("No path %s -> %s after %d expansions", src, dst, expanded)
        return PathResult(
            status=SearchStatus.NO_PATH, expanded=expanded, reason="no_path_found"
        )

    def get_path(self, src: Coord, dst: Coord) -> List[Coord]:
        """Return the path from src to dst, or an empty list on failure."""
        return self.find_path(src, dst).path


def find_path(start, goal, world, allow_diagonal=ALLOW_DIAGONAL):
    """
    Find a path on a grid-based world from start to goal using A*.
    start, goal: (x, y) grid coordinates.
    world: object with width, height and is_wall(x, y) -> bool.
    Returns list of (x, y) coordinates from start to goal inclusive, or empty list if no path.
    """
    finder = PathFinder(
        world.width,
        world.height,
        lambda x, y: not world.is_wall(x, y),
        allow_diagonal=allow_diagonal,
    )
    return finder.get_path(start, goal)
