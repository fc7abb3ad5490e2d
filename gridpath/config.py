"""
Configuration utilities and default settings.
"""

from dataclasses import dataclass
from typing import Callable, Union

Heuristic = Callable[[tuple, tuple], float]


@dataclass
class SearchConfig:
    """Configuration for the A* search."""
    heuristic: Union[str, Heuristic] = "manhattan"  # "manhattan", "octile", "euclidean", "zero" or a callable
    heuristic_scale: float = 1.0
    skip_stale_entries: bool = True

    def __post_init__(self):
        if self.heuristic_scale < 0:
            raise ValueError(f"heuristic_scale must be >= 0, got {self.heuristic_scale}")


@dataclass
class NavigationConfig:
    """Configuration for walkability oracles."""
    clearance_radius: float = 1.0
    free_value: float = 0  # Occupancy grid value marking a free cell


# Default configurations
DEFAULT_SEARCH_CONFIG = SearchConfig()
DEFAULT_NAVIGATION_CONFIG = NavigationConfig()
