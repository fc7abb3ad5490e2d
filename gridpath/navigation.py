"""
Walkability oracles built from occupancy grids and obstacle point clouds.
"""

import logging
import numpy as np
from scipy.spatial import KDTree

from .config import NavigationConfig, DEFAULT_NAVIGATION_CONFIG
from .grid import Node, WalkabilityFn

logger = logging.getLogger(__name__)


def occupancy_oracle(
    occupancy_grid: np.ndarray,
    config: NavigationConfig = DEFAULT_NAVIGATION_CONFIG
) -> WalkabilityFn:
    """
    Walkability from a 2D occupancy grid indexed like the search grid.

    Args:
        occupancy_grid: 2D array (width, height) where free_value=free
        config: Navigation configuration

    Returns:
        Predicate node -> bool; cells outside the array count as blocked
    """
    occupancy_grid = np.asarray(occupancy_grid)
    if occupancy_grid.ndim != 2:
        raise ValueError(f"Occupancy grid must be 2D, got shape {occupancy_grid.shape}")

    free = occupancy_grid == config.free_value
    nx, nz = free.shape

    def is_walkable(node: Node) -> bool:
        x, y = node.coord
        return 0 <= x < nx and 0 <= y < nz and bool(free[x, y])

    return is_walkable


def clearance_oracle(
    obstacle_points: np.ndarray,
    config: NavigationConfig = DEFAULT_NAVIGATION_CONFIG
) -> WalkabilityFn:
    """
    Walkability from obstacle points: a node is blocked when any obstacle
    lies within clearance_radius of its position.

    Args:
        obstacle_points: Array of obstacle positions (N, D), same space as node positions
        config: Navigation configuration

    Returns:
        Predicate node -> bool
    """
    obstacle_points = np.asarray(obstacle_points, dtype=np.float64)
    radius = config.clearance_radius

    if len(obstacle_points) == 0:
        return lambda node: True

    if obstacle_points.ndim != 2:
        raise ValueError(f"Obstacle points must be (N, D), got shape {obstacle_points.shape}")

    tree = KDTree(obstacle_points)
    logger.debug("Clearance oracle over %d obstacle points, radius %.3f", len(obstacle_points), radius)

    def is_walkable(node: Node) -> bool:
        return not tree.query_ball_point(node.position, radius)

    return is_walkable


def combine_oracles(*oracles: WalkabilityFn) -> WalkabilityFn:
    """Node is walkable only when every oracle agrees."""
    def is_walkable(node: Node) -> bool:
        return all(oracle(node) for oracle in oracles)

    return is_walkable
