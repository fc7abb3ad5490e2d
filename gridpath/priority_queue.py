"""
Binary min-heap priority queue used for the search frontier.
"""

from typing import Any, Iterator, List, Tuple

from .exceptions import EmptyQueueError


class PriorityQueue:
    """
    Min-heap of ``(item, priority)`` pairs.

    There is no decrease-key: to lower an item's priority push it again and
    let the caller ignore the stale entry when it comes out.
    """

    def __init__(self):
        self._items: List[Tuple[Any, float]] = []

    def push(self, item: Any, priority: float) -> None:
        """
        Add an item, sifting it up while its parent has a greater priority.
        
        Args:
            item: Arbitrary payload, duplicates allowed
            priority: Sort key, smallest comes out first
        """
        items = self._items
        items.append((item, priority))

        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent][1] <= items[index][1]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> Tuple[Any, float]:
        """
        Remove and return the pair with the smallest priority.
        
        Returns:
            Tuple of (item, priority)
        
        Raises:
            EmptyQueueError: If the queue holds no elements
        """
        items = self._items
        if not items:
            raise EmptyQueueError("pop from an empty priority queue")

        result = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return result

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index

            if left < count and items[left][1] < items[smallest][1]:
                smallest = left
            if right < count and items[right][1] < items[smallest][1]:
                smallest = right

            if smallest == index:
                break
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def size(self) -> int:
        """Number of queued pairs."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def drain(self) -> Iterator[Tuple[Any, float]]:
        """Yield pairs in ascending priority order, emptying the queue."""
        while self._items:
            yield self.pop()

    def __iter__(self) -> Iterator[Tuple[Any, float]]:
        return self.drain()

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._items)})"
