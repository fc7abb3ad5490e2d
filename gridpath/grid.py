"""
Grid of search nodes with per-node walkability and search state.
"""

import logging
import math
import numpy as np
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

from .exceptions import InvalidCoordinateError
from .geometry import as_position

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]
PositionFn = Callable[[int, int], object]
WalkabilityFn = Callable[["Node"], bool]


@dataclass(eq=False)
class Node:
    """One grid cell and the search state attached to it."""
    coord: Coord
    position: np.ndarray
    walkable: bool = True
    distance: float = math.inf  # Best known cost from the start
    score: float = math.inf  # distance + heuristic, used as queue priority
    parent: Optional["Node"] = field(default=None, repr=False)

    def reset(self) -> None:
        """Clear search state, keeping position and walkability."""
        self.distance = math.inf
        self.score = math.inf
        self.parent = None

    @property
    def reached(self) -> bool:
        return self.distance != math.inf


class Grid:
    """
    Fixed-size 2D array of nodes indexed by (x, y).

    Node objects are created once and reused by every search; a search only
    rewrites their distance, score, parent and walkable fields.
    """

    def __init__(
        self,
        width: int,
        height: int,
        position_of: PositionFn,
        is_walkable: Optional[WalkabilityFn] = None
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = int(width)
        self._height = int(height)
        self.is_walkable = is_walkable
        self._nodes: List[List[Node]] = [
            [Node((x, y), as_position(position_of(x, y))) for y in range(self._height)]
            for x in range(self._width)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._width, self._height

    def in_bounds(self, coord) -> bool:
        """Check that coord is an integer pair inside the grid."""
        try:
            x, y = coord
        except (TypeError, ValueError):
            return False
        if not isinstance(x, (int, np.integer)) or not isinstance(y, (int, np.integer)):
            return False
        if isinstance(x, bool) or isinstance(y, bool):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def validate(self, coord) -> Coord:
        """
        Normalize a coordinate to a tuple of ints.

        Raises:
            InvalidCoordinateError: If coord is malformed or out of bounds
        """
        if not self.in_bounds(coord):
            raise InvalidCoordinateError(coord, self._width, self._height)
        x, y = coord
        return int(x), int(y)

    def node(self, coord) -> Node:
        x, y = self.validate(coord)
        return self._nodes[x][y]

    def __getitem__(self, coord) -> Node:
        return self.node(coord)

    def __iter__(self) -> Iterator[Node]:
        for column in self._nodes:
            yield from column

    def __len__(self) -> int:
        return self._width * self._height

    def neighbors(self, coord) -> List[Coord]:
        """
        Get the 8-connected in-bounds neighbors of a cell.

        Args:
            coord: (x, y) grid coordinate

        Returns:
            List of up to 8 coordinates, x-major order
        """
        cx, cy = self.validate(coord)
        result = []
        for x in range(max(cx - 1, 0), min(cx + 2, self._width)):
            for y in range(max(cy - 1, 0), min(cy + 2, self._height)):
                if x != cx or y != cy:
                    result.append((x, y))
        return result

    def reset(self) -> None:
        """Reset distance, score and parent of every node."""
        for node in self:
            node.reset()

    def positions(self) -> np.ndarray:
        """
        Stack node positions into an array.

        Returns:
            Array of shape (width, height, D)
        """
        return np.array([[node.position for node in column] for column in self._nodes])

    def walkable_mask(self) -> np.ndarray:
        """Boolean (width, height) array of the current walkable flags."""
        return np.array([[node.walkable for node in column] for column in self._nodes], dtype=bool)

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"


def build_grid(
    width: int,
    height: int,
    position_of: PositionFn,
    is_walkable: Optional[WalkabilityFn] = None
) -> Grid:
    """
    Build a grid of nodes.

    Args:
        width: Number of cells along x
        height: Number of cells along y
        position_of: Maps (x, y) to a world position such as (x, y, z)
        is_walkable: Optional default walkability oracle for searches

    Returns:
        Grid with every node walkable and unreached
    """
    grid = Grid(width, height, position_of, is_walkable)
    logger.debug("Built %dx%d grid", grid.width, grid.height)
    return grid


def refresh_walkability(grid: Grid, is_walkable: WalkabilityFn) -> int:
    """
    Re-derive every node's walkable flag from an oracle.

    Args:
        grid: Grid to update in place
        is_walkable: Predicate called once per node

    Returns:
        Number of nodes marked unwalkable
    """
    blocked = 0
    for node in grid:
        node.walkable = bool(is_walkable(node))
        if not node.walkable:
            blocked += 1
    logger.debug("Walkability refreshed: %d of %d nodes blocked", blocked, len(grid))
    return blocked


def reconstruct_path(grid: Grid, goal) -> List[Coord]:
    """
    Follow parent links from the goal back to the node without a parent.

    Args:
        grid: Grid after a search
        goal: Goal coordinate

    Returns:
        Coordinates in goal-to-start order
    """
    path = []
    node = grid.node(goal)
    while node is not None:
        path.append(node.coord)
        node = node.parent
    return path


def always_walkable(node: Node) -> bool:
    return True
