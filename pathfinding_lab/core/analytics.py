# pathfinding_lab/core/analytics.py
# The per-search analytics tuple and the sinks that receive it. Persisting records is left to the host.
from __future__ import annotations
from dataclasses import astuple, dataclass
from typing import List, Protocol, Tuple

from loguru import logger

from .metrics import SearchResult

CSV_HEADER = ("Algorithm", "Path Length", "Computation Time (ms)", "Nodes Explored",
              "Iterations/Generations", "Reached Target")


@dataclass(frozen=True)
class AnalyticsRecord:
    algorithm: str
    path_length: int
    time_ms: int
    nodes_explored: int
    iterations: int
    reached_target: bool

    @classmethod
    def from_result(cls, result: SearchResult) -> "AnalyticsRecord":
        return cls(
            algorithm=result.algo,
            path_length=result.path_length,
            time_ms=result.elapsed_ms,
            nodes_explored=result.nodes_explored,
            iterations=result.iterations,
            reached_target=result.success,
        )

    def as_row(self) -> Tuple:
        return astuple(self)

    def describe(self) -> str:
        return (f"[Analytics] {self.algorithm} | Path Length: {self.path_length} | Time: {self.time_ms} ms | "
                f"Nodes Explored: {self.nodes_explored} | Iterations: {self.iterations} | "
                f"Reached: {self.reached_target}")


class AnalyticsSink(Protocol):
    def record(self, rec: AnalyticsRecord) -> None: ...


class LoggerSink:
    """Writes each record to the loguru logger."""
    def __init__(self, level: str = "INFO") -> None:
        self.level = level

    def record(self, rec: AnalyticsRecord) -> None:
        logger.log(self.level, rec.describe())


class MemorySink:
    def __init__(self) -> None:
        self.records: List[AnalyticsRecord] = []

    def record(self, rec: AnalyticsRecord) -> None:
        self.records.append(rec)

    def rows(self) -> List[Tuple]:
        return [r.as_row() for r in self.records]
