"""
A* shortest path search over a Grid.
"""

import logging
import threading
import time
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .config import SearchConfig, DEFAULT_SEARCH_CONFIG
from .exceptions import SearchCancelledError
from .geometry import edge_cost, resolve_heuristic
from .grid import Grid, WalkabilityFn, always_walkable, reconstruct_path, refresh_walkability
from .priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class CancellationToken:
    """
    Cooperative cancellation flag checked once per search iteration.

    Safe to cancel from another thread.
    """

    def __init__(self, deadline: Optional[float] = None):
        self._event = threading.Event()
        self._deadline = deadline

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Token that cancels itself once `seconds` have elapsed."""
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self._event.set()
            return True
        return False


@dataclass(frozen=True)
class PathFound:
    """A path was found. `path` runs from start to goal."""
    path: List[Coord]
    cost: float
    expanded: int = 0
    _positions: Optional[np.ndarray] = field(default=None, repr=False, compare=False)

    found = True

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self.path)

    def positions(self) -> np.ndarray:
        """World positions along the path (N, D)."""
        return self._positions


@dataclass(frozen=True)
class PathNotFound:
    """The goal is unreachable from the start."""
    start: Coord
    goal: Coord
    expanded: int = 0

    found = False

    def __bool__(self) -> bool:
        return False


PathResult = Union[PathFound, PathNotFound]


def find_path(
    grid: Grid,
    start,
    goal,
    is_walkable: Optional[WalkabilityFn] = None,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
    cancel_token: Optional[CancellationToken] = None
) -> PathResult:
    """
    Find a path between two grid cells with A*.

    Node state is reset and walkability re-read before searching, so the
    same grid can be searched repeatedly. The grid must not be searched
    concurrently.

    Args:
        grid: Grid to search, mutated in place
        start: (x, y) start coordinate
        goal: (x, y) goal coordinate
        is_walkable: Walkability oracle; defaults to grid.is_walkable, then
            to treating every node as walkable
        config: Search configuration
        cancel_token: Optional token checked once per iteration

    Returns:
        PathFound with the start-to-goal path and its cost, or PathNotFound

    Raises:
        InvalidCoordinateError: If start or goal is outside the grid
        SearchCancelledError: If cancel_token fires mid-search
    """
    start = grid.validate(start)
    goal = grid.validate(goal)
    heuristic = resolve_heuristic(config.heuristic, config.heuristic_scale)
    oracle = is_walkable or grid.is_walkable or always_walkable

    grid.reset()
    refresh_walkability(grid, oracle)

    start_node = grid.node(start)
    goal_node = grid.node(goal)
    start_node.distance = 0.0
    start_node.score = heuristic(start, goal)

    frontier = PriorityQueue()
    frontier.push(start_node, start_node.score)

    expanded = 0
    pushed = 1
    stale = 0
    reached = False

    while frontier:
        if cancel_token is not None and cancel_token.cancelled:
            logger.info("Search %s -> %s cancelled after %d expansions", start, goal, expanded)
            raise SearchCancelledError(f"Search from {start} to {goal} was cancelled")

        current, priority = frontier.pop()
        if current is goal_node:
            reached = True
            break

        # A better entry for this node was already expanded
        if config.skip_stale_entries and priority > current.score:
            stale += 1
            continue

        expanded += 1
        for coord in grid.neighbors(current.coord):
            neighbor = grid.node(coord)
            candidate = current.distance + edge_cost(neighbor.position, current.position)
            if neighbor.walkable and candidate < neighbor.distance:
                neighbor.parent = current
                neighbor.distance = candidate
                neighbor.score = candidate + heuristic(coord, goal)
                frontier.push(neighbor, neighbor.score)
                pushed += 1

    if not reached:
        logger.debug(
            "No path %s -> %s (expanded=%d, pushed=%d, stale=%d)",
            start, goal, expanded, pushed, stale
        )
        return PathNotFound(start, goal, expanded)

    path = reconstruct_path(grid, goal)
    path.reverse()
    positions = np.array([grid.node(coord).position for coord in path])
    logger.debug(
        "Path %s -> %s: %d nodes, cost %.3f (expanded=%d, pushed=%d, stale=%d)",
        start, goal, len(path), goal_node.distance, expanded, pushed, stale
    )
    return PathFound(path, goal_node.distance, expanded, positions)
