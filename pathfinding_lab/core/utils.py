# pathfinding_lab/core/utils.py
# Rebuilds the start-to-node route by following predecessor indices through the arena.
from __future__ import annotations
from typing import Tuple
from .node import NO_PARENT, NodeArena
from .oracle import Position


def reconstruct_path(arena: NodeArena, idx: int) -> Tuple[Position, ...]:
    path = []
    cur = idx
    # A chain can never be longer than the arena; anything longer is a cycle.
    for _ in range(len(arena) + 1):
        node = arena[cur]
        path.append(node.position)
        if node.parent == NO_PARENT:
            path.reverse()
            return tuple(path)
        cur = node.parent
    raise RuntimeError(
        f"predecessor chain from {arena[idx].position!r} exceeds arena size {len(arena)}; "
        "the frontier/closed-set discipline was violated"
    )
