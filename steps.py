# steps.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from grid import Pos


class StepKind(Enum):
    EXPLORE = "explore"                  # node popped from the frontier and finalized
    EXPAND = "expand"                    # neighbour discovered / relaxed
    FRONTIER_CHANGE = "frontier_change"  # nodes pushed after one expansion
    PATH_FOUND = "path_found"            # final path, start..goal


@dataclass(frozen=True)
class StepEvent:
    kind: StepKind
    positions: Tuple[Pos, ...]
    # (before, after) frontier sizes for FRONTIER_CHANGE
    context: Optional[Tuple[int, int]] = None
    description: str = ""


class StepRecorder:
    """
    Append-only log of search events for a renderer to replay.

    The recorder is a side channel: planners call the emitters below and
    never read anything back, so recording cannot change a result. Use
    one recorder per run; do not share one between concurrent runs.
    """

    def __init__(self) -> None:
        self._events: List[StepEvent] = []

    def record(self, event: StepEvent) -> None:
        self._events.append(event)

    def events(self) -> Iterator[StepEvent]:
        """Fresh iterator over the log; call again to replay from the start."""
        yield from self._events

    def __iter__(self) -> Iterator[StepEvent]:
        return self.events()

    def __len__(self) -> int:
        return len(self._events)

    def count(self, kind: StepKind) -> int:
        return sum(1 for e in self._events if e.kind is kind)

    # ------------------------------------------------------------------ #
    # Emitters used by the search driver                                 #
    # ------------------------------------------------------------------ #
    def explore(self, pos: Pos, algorithm: str) -> None:
        self.record(StepEvent(
            StepKind.EXPLORE, (pos,),
            description=f"[{algorithm}] exploring node ({pos[0]}, {pos[1]})",
        ))

    def expand(self, pos: Pos, parent: Pos, algorithm: str) -> None:
        self.record(StepEvent(
            StepKind.EXPAND, (pos, parent),
            description=f"[{algorithm}] reached ({pos[0]}, {pos[1]}) from ({parent[0]}, {parent[1]})",
        ))

    def frontier_change(self, pushed: Sequence[Pos], before: int, after: int, algorithm: str) -> None:
        self.record(StepEvent(
            StepKind.FRONTIER_CHANGE, tuple(pushed), (before, after),
            description=f"[{algorithm}] frontier {before} -> {after}",
        ))

    def path_found(self, path: Sequence[Pos], algorithm: str) -> None:
        self.record(StepEvent(
            StepKind.PATH_FOUND, tuple(path),
            description=f"[{algorithm}] final path found ({len(path)} cells)",
        ))


class NullRecorder:
    """Same emitters as StepRecorder, all no-ops."""

    def explore(self, pos: Pos, algorithm: str) -> None:
        pass

    def expand(self, pos: Pos, parent: Pos, algorithm: str) -> None:
        pass

    def frontier_change(self, pushed: Sequence[Pos], before: int, after: int, algorithm: str) -> None:
        pass

    def path_found(self, path: Sequence[Pos], algorithm: str) -> None:
        pass


NULL_RECORDER = NullRecorder()
