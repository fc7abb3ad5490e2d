"""
Exception types raised by the grid search utilities.
"""


class GridPathError(Exception):
    """Base class for all grid search errors."""


class EmptyQueueError(GridPathError, IndexError):
    """Raised when popping from an empty priority queue."""


class InvalidCoordinateError(GridPathError, IndexError):
    """Raised when a grid coordinate is malformed or out of bounds."""

    def __init__(self, coord, width: int, height: int):
        self.coord = coord
        self.width = width
        self.height = height
        super().__init__(
            f"Coordinate {coord!r} is outside grid of size {width}x{height}"
        )


class SearchCancelledError(GridPathError):
    """Raised when a search is stopped through its cancellation token."""
