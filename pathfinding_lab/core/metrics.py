# pathfinding_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import time

from .oracle import Position

Path = Tuple[Position, ...]


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search call, produced exactly once whether or not a path was found.

    ``time_s`` is excluded from equality so two runs of a deterministic search compare equal.
    """
    algo: str
    success: bool
    path: Path
    cost: float
    nodes_explored: int
    iterations: int
    time_s: float = field(default=0.0, compare=False)
    error: Optional[str] = None

    @property
    def path_length(self) -> int:
        return len(self.path)

    @property
    def elapsed_ms(self) -> int:
        return int(round(self.time_s * 1000))


@dataclass(frozen=True)
class Step:
    """One observable unit of progress: an expansion, or a generation for the genetic search."""
    algo: str
    path: Path
    neighbors: Tuple[Position, ...]
    current: Optional[Position]
    iteration: int
    fitness: Optional[float] = None
    reached_goal: bool = False
    done: bool = False
    final: Optional[SearchResult] = None

    def info(self) -> str:
        if self.fitness is not None:
            return (f"{self.algo} | Generation: {self.iteration} | Best Fitness: {self.fitness:.3f} | "
                    f"Reached Target: {self.reached_goal} | Path Length: {len(self.path)}")
        return (f"{self.algo} | Path Length: {len(self.path)} | Neighbors: {len(self.neighbors)} | "
                f"Iterations: {self.iteration}")


class Stopwatch:
    """
    Context manager measuring wall-clock time of a search call.
    Safe to query .elapsed *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0
