from __future__ import annotations
from typing import Set

from loguru import logger

from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult, Step, Stopwatch
from ..core.node import NodeArena
from ..core.oracle import GridOracle, Position
from ..core.utils import reconstruct_path
from .base import SearchSteps, check_endpoints, failure, trivial_steps

NAME = "Brute-Force"


def breadth_first_search(start: Position, end: Position, oracle: GridOracle) -> SearchSteps:
    """Level-order expansion with unit edge cost.

    The goal test runs on each newly discovered neighbor rather than on dequeue,
    which saves one full queue round-trip.
    """
    early = check_endpoints(NAME, start, end, oracle)
    if early is not None:
        return (yield from trivial_steps(early))

    arena = NodeArena()
    frontier: FIFOQueue[int] = FIFOQueue()
    visited: Set[Position] = {start}
    iterations = 0

    with Stopwatch() as meter:
        frontier.push(arena.add(start))

        while frontier:
            idx = frontier.pop()
            node = arena[idx]
            iterations += 1

            fresh = tuple(p for p in oracle.neighbors(node.position) if p not in visited)
            yield Step(NAME, reconstruct_path(arena, idx), fresh, node.position, iterations)

            for pos in fresh:
                visited.add(pos)
                child = arena.add(pos, node.g + 1.0, 0.0, idx)
                if pos == end:
                    path = reconstruct_path(arena, child)
                    res = SearchResult(NAME, True, path, arena[child].g, len(visited), iterations, meter.elapsed)
                    logger.debug(f"{NAME}: reached {tuple(end)} | length={len(path)} "
                                 f"explored={len(visited)} iterations={iterations}")
                    yield Step(NAME, path, (), pos, iterations, done=True, final=res)
                    return res
                frontier.push(child)

    logger.debug(f"{NAME}: queue exhausted | explored={len(visited)} iterations={iterations}")
    return failure(NAME, len(visited), iterations, meter.elapsed)
