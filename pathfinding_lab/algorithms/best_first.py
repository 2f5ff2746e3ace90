from __future__ import annotations
from typing import Callable, Optional, Set

from loguru import logger

from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult, Step, Stopwatch
from ..core.node import NodeArena
from ..core.oracle import GridOracle, Position
from ..core.utils import reconstruct_path
from .base import SearchSteps, check_endpoints, failure, trivial_steps


def best_first_steps(
    start: Position,
    end: Position,
    oracle: GridOracle,
    name: str = "BestFirst",
    edge_cost: Optional[Callable[[Position, Position], float]] = None,
    h: Optional[Callable[[Position, Position], float]] = None,
) -> SearchSteps:
    """Expand the frontier node with the lowest (g + h), ties to the lower h, then to discovery order.

    One Step is yielded per non-goal expansion, after its neighbors have been relaxed.
    """
    early = check_endpoints(name, start, end, oracle)
    if early is not None:
        return (yield from trivial_steps(early))

    cost = edge_cost or (lambda a, b: 1.0)

    def hval(p: Position) -> float:
        return 0.0 if h is None else float(h(p, end))

    arena = NodeArena()
    frontier: PriorityQueue[int] = PriorityQueue(
        key=lambda i: (arena[i].f, arena[i].h, i))
    closed: Set[int] = set()
    iterations = 0

    with Stopwatch() as meter:
        frontier.push(arena.add(start, 0.0, hval(start)))

        while frontier:
            idx = frontier.pop()
            if idx in closed:
                continue  # stale entry left by a later improvement
            node = arena[idx]
            closed.add(idx)

            if node.position == end:
                path = reconstruct_path(arena, idx)
                res = SearchResult(name, True, path, node.g, len(closed), iterations, meter.elapsed)
                logger.debug(f"{name}: reached {tuple(end)} | length={len(path)} cost={node.g} "
                             f"explored={len(closed)} iterations={iterations}")
                yield Step(name, path, (), node.position, iterations, done=True, final=res)
                return res

            neighbors = tuple(oracle.neighbors(node.position))
            for pos in neighbors:
                nidx = arena.index_of(pos)
                if nidx is not None and nidx in closed:
                    continue
                tentative = node.g + float(cost(node.position, pos))
                if nidx is None:
                    frontier.push(arena.add(pos, tentative, hval(pos), idx))
                elif tentative < arena[nidx].g:
                    arena.relax(nidx, tentative, hval(pos), idx)
                    frontier.push(nidx)

            iterations += 1
            yield Step(name, reconstruct_path(arena, idx), neighbors, node.position, iterations)

    logger.debug(f"{name}: frontier exhausted | explored={len(closed)} iterations={iterations}")
    return failure(name, len(closed), iterations, meter.elapsed)
