# pathfinding/frontiers.py
from __future__ import annotations

from collections import deque
from heapq import heappop, heappush
from typing import Deque, List, Protocol, Tuple


class Frontier(Protocol):
    def push(self, priority: float, item: int) -> None:
        ...

    def pop(self) -> int:
        ...

    def __len__(self) -> int:
        ...


class FIFOFrontier:
    """Queue; priority is ignored."""

    def __init__(self) -> None:
        self.q: Deque[int] = deque()

    def push(self, priority: float, item: int) -> None:
        self.q.append(item)

    def pop(self) -> int:
        return self.q.popleft()

    def __len__(self) -> int:
        return len(self.q)


class LIFOFrontier:
    """Stack; priority is ignored."""

    def __init__(self) -> None:
        self.q: List[int] = []

    def push(self, priority: float, item: int) -> None:
        self.q.append(item)

    def pop(self) -> int:
        return self.q.pop()

    def __len__(self) -> int:
        return len(self.q)


class PriorityFrontier:
    """Min-heap on priority; equal priorities come out in insertion order."""

    def __init__(self) -> None:
        self.h: List[Tuple[float, int, int]] = []
        self.counter = 0  # tie-breaker

    def push(self, priority: float, item: int) -> None:
        self.counter += 1
        heappush(self.h, (priority, self.counter, item))

    def pop(self) -> int:
        return heappop(self.h)[2]

    def __len__(self) -> int:
        return len(self.h)
