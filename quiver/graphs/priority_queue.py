"""
Min-priority queue used by Dijkstra's algorithm.

Binary heap of (priority, sequence, value) entries. The sequence number
makes entries with equal priority leave the queue in insertion order and
keeps values that do not support comparison out of the heap ordering.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, List, Tuple, Union

from .results import Status, Weight


class PriorityQueue:
    """
    Priority queue returning the entry with the smallest priority first.

    Complexity:
        - enqueue: O(log n)
        - dequeue: O(log n)
        - peek, size, is_empty: O(1)

    Example:
        >>> pq = PriorityQueue()
        >>> pq.enqueue(3, 'low')
        >>> pq.enqueue(1, 'high')
        >>> pq.dequeue()
        'high'
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Weight, int, Any]] = []
        self._counter = itertools.count()

    def enqueue(self, priority: Weight, value: Any) -> None:
        """Insert value with the given priority."""
        heapq.heappush(self._heap, (priority, next(self._counter), value))

    def dequeue(self) -> Union[Any, Status]:
        """
        Remove and return the value with the smallest priority.

        Returns:
            The value, or Status.EMPTY if the queue holds nothing.
        """
        if not self._heap:
            return Status.EMPTY
        _, _, value = heapq.heappop(self._heap)
        return value

    def dequeue_with_priority(self) -> Union[Tuple[Weight, Any], Status]:
        """Like dequeue, but return a (priority, value) pair."""
        if not self._heap:
            return Status.EMPTY
        priority, _, value = heapq.heappop(self._heap)
        return priority, value

    def peek(self) -> Union[Any, Status]:
        """Return the value dequeue would return, without removing it."""
        if not self._heap:
            return Status.EMPTY
        return self._heap[0][2]

    def size(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        items = [value for _, _, value in sorted(self._heap)]
        return f"PriorityQueue(size={len(items)}, queue={items!r})"
