"""
Grid shortest-path search with A* over a reusable node grid.
"""

from .priority_queue import PriorityQueue
from .grid import Node, Grid, build_grid, refresh_walkability, reconstruct_path
from .search import find_path, PathFound, PathNotFound, PathResult, CancellationToken
from .geometry import heuristic, edge_cost, manhattan, octile, euclidean, path_length
from .navigation import occupancy_oracle, clearance_oracle, combine_oracles
from .config import (
    SearchConfig,
    NavigationConfig,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_NAVIGATION_CONFIG
)
from .exceptions import (
    GridPathError,
    EmptyQueueError,
    InvalidCoordinateError,
    SearchCancelledError
)

__all__ = [
    # Priority queue
    'PriorityQueue',
    # Grid
    'Node',
    'Grid',
    'build_grid',
    'refresh_walkability',
    'reconstruct_path',
    # Search
    'find_path',
    'PathFound',
    'PathNotFound',
    'PathResult',
    'CancellationToken',
    # Geometry
    'heuristic',
    'edge_cost',
    'manhattan',
    'octile',
    'euclidean',
    'path_length',
    # Walkability oracles
    'occupancy_oracle',
    'clearance_oracle',
    'combine_oracles',
    # Config
    'SearchConfig',
    'NavigationConfig',
    'DEFAULT_SEARCH_CONFIG',
    'DEFAULT_NAVIGATION_CONFIG',
    # Errors
    'GridPathError',
    'EmptyQueueError',
    'InvalidCoordinateError',
    'SearchCancelledError',
]
