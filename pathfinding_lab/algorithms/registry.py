# pathfinding_lab/algorithms/registry.py
# Strategies are selected by value: each is a name plus the generator function that runs it.
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from functools import partial
from typing import Callable, Dict, List, Optional, Union

from ..core.oracle import GridOracle, Position
from .base import SearchSteps
from . import astar, bfs, genetic, ucs


class AlgorithmType(IntEnum):
    GENETIC = 0
    ASTAR = 1
    DIJKSTRA = 2
    BRUTE_FORCE = 3


@dataclass(frozen=True)
class Strategy:
    name: str
    search: Callable[[Position, Position, GridOracle], SearchSteps]

    def find_path(self, start: Position, end: Position, oracle: GridOracle) -> SearchSteps:
        return self.search(start, end, oracle)


_ALIASES: Dict[str, AlgorithmType] = {
    "genetic": AlgorithmType.GENETIC,
    "ga": AlgorithmType.GENETIC,
    "astar": AlgorithmType.ASTAR,
    "a*": AlgorithmType.ASTAR,
    "dijkstra": AlgorithmType.DIJKSTRA,
    "ucs": AlgorithmType.DIJKSTRA,
    "bfs": AlgorithmType.BRUTE_FORCE,
    "brute-force": AlgorithmType.BRUTE_FORCE,
    "bruteforce": AlgorithmType.BRUTE_FORCE,
}


def _resolve(kind: Union[AlgorithmType, int, str]) -> AlgorithmType:
    if isinstance(kind, str):
        key = kind.strip().lower()
        if key not in _ALIASES:
            raise KeyError(f"unknown algorithm {kind!r}; expected one of {sorted(_ALIASES)}")
        return _ALIASES[key]
    try:
        return AlgorithmType(kind)
    except ValueError:
        raise ValueError(f"invalid algorithm index: {kind!r}") from None


def get_algorithm(kind: Union[AlgorithmType, int, str],
                  genetic_config: Optional[genetic.GeneticConfig] = None) -> Strategy:
    kind = _resolve(kind)
    if kind is AlgorithmType.ASTAR:
        return Strategy(astar.NAME, astar.a_star_search)
    if kind is AlgorithmType.DIJKSTRA:
        return Strategy(ucs.NAME, ucs.uniform_cost_search)
    if kind is AlgorithmType.BRUTE_FORCE:
        return Strategy(bfs.NAME, bfs.breadth_first_search)
    return Strategy(genetic.NAME, partial(genetic.genetic_search, config=genetic_config))


def all_algorithms(genetic_config: Optional[genetic.GeneticConfig] = None) -> List[Strategy]:
    return [get_algorithm(kind, genetic_config) for kind in AlgorithmType]
