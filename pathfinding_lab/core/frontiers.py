# pathfinding_lab/core/frontiers.py
# Frontier containers: a FIFO queue for level-order search and a keyed min-heap for best-first search.
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Deque, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class FIFOQueue(Generic[T]):
    def __init__(self) -> None:
        self.q: Deque[T] = deque()
    def push(self, x: T) -> None: self.q.append(x)
    def pop(self) -> T: return self.q.popleft()
    def __len__(self) -> int: return len(self.q)


class PriorityQueue(Generic[T]):
    """Min-heap by key(x), evaluated once at push time.

    Pushing an item again with a better key leaves the old entry behind;
    callers skip stale entries when they pop them.
    """
    def __init__(self, key: Callable[[T], Any]) -> None:
        self.key = key
        self.h: List[Tuple[Any, int, T]] = []
        self.counter = 0  # equal keys pop in push order
    def push(self, x: T) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self) -> T:
        return heapq.heappop(self.h)[2]
    def __len__(self) -> int: return len(self.h)
