import pytest

from pathfinding_lab.core.frontiers import FIFOQueue, PriorityQueue
from pathfinding_lab.core.node import NO_PARENT, NodeArena
from pathfinding_lab.core.utils import reconstruct_path


def test_arena_one_node_per_position():
    arena = NodeArena()
    a = arena.add((0, 0))
    assert arena.index_of((0, 0)) == a
    assert arena.index_of((1, 0)) is None
    with pytest.raises(ValueError):
        arena.add((0, 0))


def test_reconstruct_follows_parent_indices():
    arena = NodeArena()
    a = arena.add((0, 0))
    b = arena.add((1, 0), g=1, parent=a)
    c = arena.add((1, 1), g=2, parent=b)
    assert reconstruct_path(arena, c) == ((0, 0), (1, 0), (1, 1))
    assert reconstruct_path(arena, a) == ((0, 0),)


def test_relax_updates_cost_and_parent():
    arena = NodeArena()
    a = arena.add((0, 0))
    b = arena.add((0, 1), g=5, h=1, parent=a)
    c = arena.add((1, 1), g=9, parent=b)
    arena.relax(c, g=2, h=0, parent=a)
    assert arena[c].g == 2 and arena[c].f == 2
    assert reconstruct_path(arena, c) == ((0, 0), (1, 1))


def test_cycle_in_predecessors_is_detected():
    arena = NodeArena()
    a = arena.add((0, 0))
    b = arena.add((1, 0), parent=a)
    arena.relax(a, g=0, h=0, parent=b)
    with pytest.raises(RuntimeError):
        reconstruct_path(arena, b)
    assert arena[b].parent != NO_PARENT


def test_priority_queue_orders_by_key_then_push_order():
    pq = PriorityQueue(key=lambda x: x[0])
    for item in [(2, "a"), (1, "b"), (2, "c"), (1, "d")]:
        pq.push(item)
    assert [pq.pop()[1] for _ in range(len(pq))] == ["b", "d", "a", "c"]


def test_fifo_queue():
    q = FIFOQueue()
    q.push(1)
    q.push(2)
    assert len(q) == 2
    assert q.pop() == 1 and len(q) == 1
    assert q.pop() == 2 and len(q) == 0
