"""
Distance functions for grid search: heuristics on grid indices and
edge costs on world positions.
"""

import math
import numpy as np
from typing import Callable, Dict, Tuple, Union

Coord = Tuple[int, int]

_SQRT2_MINUS_1 = math.sqrt(2.0) - 1.0


def manhattan(a: Coord, b: Coord) -> float:
    """Manhattan distance between two grid coordinates."""
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def octile(a: Coord, b: Coord) -> float:
    """
    Octile distance between two grid coordinates.
    
    Exact step count for 8-connected movement where a diagonal step
    costs sqrt(2) times an orthogonal one.
    """
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return float(max(dx, dy) + _SQRT2_MINUS_1 * min(dx, dy))


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance between two grid coordinates."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def zero(a: Coord, b: Coord) -> float:
    """Null heuristic, turns A* into Dijkstra's algorithm."""
    return 0.0


HEURISTICS: Dict[str, Callable[[Coord, Coord], float]] = {
    'manhattan': manhattan,
    'octile': octile,
    'euclidean': euclidean,
    'zero': zero,
}

# Heuristic used by the search unless configured otherwise
heuristic = manhattan


def resolve_heuristic(
    spec: Union[str, Callable[[Coord, Coord], float]],
    scale: float = 1.0
) -> Callable[[Coord, Coord], float]:
    """
    Turn a heuristic name or callable into a callable.
    
    Args:
        spec: Name from HEURISTICS or a callable (a, b) -> float
        scale: Multiplier applied to every estimate
    
    Returns:
        Heuristic callable
    """
    if callable(spec):
        func = spec
    else:
        try:
            func = HEURISTICS[spec]
        except KeyError:
            raise ValueError(
                f"Unknown heuristic {spec!r}, expected one of {sorted(HEURISTICS)}"
            ) from None

    if scale == 1.0:
        return func
    return lambda a, b: scale * func(a, b)


def as_position(value) -> np.ndarray:
    """
    Convert a position-like value to a 1-D float array.
    
    Args:
        value: Sequence or array of coordinates, e.g. (x, y, z)
    
    Returns:
        Float array of shape (D,)
    """
    position = np.asarray(value, dtype=np.float64)
    if position.ndim != 1 or position.size == 0:
        raise ValueError(f"Position must be a non-empty 1-D coordinate, got shape {position.shape}")
    return position


def edge_cost(a: np.ndarray, b: np.ndarray) -> float:
    """
    Euclidean distance between two world positions.
    
    Args:
        a: Position (D,)
        b: Position (D,)
    
    Returns:
        Distance as a Python float
    """
    return float(np.linalg.norm(a - b))


def path_length(positions: np.ndarray) -> float:
    """
    Total length of a polyline through world positions.
    
    Args:
        positions: Array of positions (N, D)
    
    Returns:
        Sum of segment lengths, 0.0 for fewer than two points
    """
    if len(positions) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(positions, axis=0), axis=1).sum())
