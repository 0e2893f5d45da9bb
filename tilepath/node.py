"""
Search node: one grid cell visited during a single A* run.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

Coord = Tuple[int, int]


class Node:
    """
    A cell reached during search, with its predecessor and costs.
    Attributes:
        position: (x, y) grid coordinate.
        parent: Node this one was reached from; None for the source.
        g: Accumulated cost from the source.
        h: Heuristic estimate of the remaining cost to the destination.
    Nodes never change after construction; a cheaper route to the same
    cell produces a new Node that replaces the old open-set entry.
    """

    __slots__ = ("_position", "_parent", "_g", "_h")

    def __init__(
        self,
        position: Coord,
        parent: Optional[Node] = None,
        g: Optional[int] = None,
        h: Optional[int] = None,
    ) -> None:
        self._position = (int(position[0]), int(position[1]))
        self._parent = parent
        self._g = g
        self._h = h

    @classmethod
    def create(cls, position: Coord) -> Node:
        """Return a root node at position with zero costs."""
        return cls(position, None, 0, 0)

    @property
    def position(self) -> Coord:
        return self._position

    @property
    def parent(self) -> Optional[Node]:
        return self._parent

    @property
    def g(self) -> Optional[int]:
        return self._g

    @property
    def h(self) -> Optional[int]:
        return self._h

    def cost(self) -> int:
        """Return F = G + H."""
        assert self._g is not None and self._h is not None, (
            f"costs not set for node at {self._position}"
        )
        return self._g + self._h

    @property
    def f(self) -> int:
        return self.cost()

    def path(self) -> List[Coord]:
        """Return positions from the root of the parent chain to this node."""
        cells = []
        node: Optional[Node] = self
        while node is not None:
            cells.append(node.position)
            node = node.parent
        cells.reverse()
        return cells

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._position == other._position

    def __hash__(self) -> int:
        return hash(self._position)

    def __repr__(self) -> str:
        return f"<Node pos={self._position} g={self._g} h={self._h}>"
