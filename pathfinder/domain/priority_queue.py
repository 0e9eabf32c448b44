"""Priority queue shared by the weighted and informed searches."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(order=True)
class PriorityItem:
    """
    Heap entry.

    Comparison order:
    1. priority tuple (lower is better)
    2. sequence (earlier insertion first, so equal keys stay FIFO)
    """
    priority: Tuple[float, ...]
    sequence: int
    data: Any = field(compare=False)


class PriorityQueue(Generic[T]):
    """
    Binary heap ordered by a key computed when an item is inserted.

    There is no decrease-key: an item may be pushed more than once and
    callers skip stale entries when they pop them.
    """

    def __init__(self, key: Callable[[T], Tuple[float, ...]]):
        self._key = key
        self._heap: List[PriorityItem] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def put(self, item: T) -> None:
        """Add an item, keyed by its current priority."""
        entry = PriorityItem(tuple(self._key(item)), next(self._counter), item)
        heapq.heappush(self._heap, entry)

    def get(self) -> Optional[T]:
        """
        Remove and return the item with the lowest key.
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap).data

    def peek(self) -> Optional[T]:
        """Look at the next item without removing it."""
        if not self._heap:
            return None
        return self._heap[0].data

    def clear(self) -> None:
        """Remove all items from the queue."""
        self._heap.clear()
