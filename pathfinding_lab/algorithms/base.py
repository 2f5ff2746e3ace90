# pathfinding_lab/algorithms/base.py
# Shared contract for all strategies: endpoint checks before any search work, and a driver that drains the steps.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generator, List, Optional, Protocol

from ..core.analytics import AnalyticsRecord, AnalyticsSink
from ..core.metrics import SearchResult, Step
from ..core.oracle import GridOracle, Position

SearchSteps = Generator[Step, None, SearchResult]


class PathfindingAlgorithm(Protocol):
    name: str
    def find_path(self, start: Position, end: Position, oracle: GridOracle) -> SearchSteps: ...


def failure(name: str, nodes_explored: int, iterations: int, time_s: float,
            error: Optional[str] = None) -> SearchResult:
    return SearchResult(name, False, (), float("inf"), nodes_explored, iterations, time_s, error)


def check_endpoints(name: str, start: Position, end: Position,
                    oracle: Optional[GridOracle]) -> Optional[SearchResult]:
    """Decide the cases that need no search at all.

    Returns a failed result for invalid input, a one-cell success when start == end,
    or None when the caller should go ahead and search.
    """
    if oracle is None:
        return failure(name, 0, 0, 0.0, "no grid oracle supplied")
    if not oracle.is_walkable(start):
        return failure(name, 0, 0, 0.0, f"start {tuple(start)} is not walkable")
    if not oracle.is_walkable(end):
        return failure(name, 0, 0, 0.0, f"end {tuple(end)} is not walkable")
    if start == end:
        return SearchResult(name, True, (Position(*start),), 0.0, 0, 0, 0.0)
    return None


def trivial_steps(result: SearchResult) -> SearchSteps:
    """Emit what a pre-decided result looks like to a consumer: one final Step on success, nothing on failure."""
    if result.success:
        yield Step(result.algo, result.path, (), result.path[-1], 0, done=True, final=result)
    return result


@dataclass
class SearchRun:
    steps: List[Step]
    result: SearchResult

    @property
    def record(self) -> AnalyticsRecord:
        return AnalyticsRecord.from_result(self.result)


def drain(steps: SearchSteps, sink: Optional[AnalyticsSink] = None,
          on_step: Optional[Callable[[Step], None]] = None) -> SearchRun:
    """Advance a search to completion, collecting its steps and its result."""
    collected: List[Step] = []
    while True:
        try:
            step = next(steps)
        except StopIteration as stop:
            result = stop.value
            break
        collected.append(step)
        if on_step is not None:
            on_step(step)
    if sink is not None:
        sink.record(AnalyticsRecord.from_result(result))
    return SearchRun(collected, result)
