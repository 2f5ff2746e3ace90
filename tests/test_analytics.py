from loguru import logger

from pathfinding_lab.algorithms.astar import a_star_search
from pathfinding_lab.algorithms.base import drain
from pathfinding_lab.algorithms.bfs import breadth_first_search
from pathfinding_lab.core.analytics import AnalyticsRecord, LoggerSink, MemorySink
from pathfinding_lab.core.metrics import SearchResult


def test_drain_reports_once_to_sink(open_grid):
    sink = MemorySink()
    run = drain(a_star_search((0, 0), (4, 0), open_grid), sink=sink)
    assert len(sink.records) == 1
    rec = sink.records[0]
    assert rec == run.record
    assert rec.algorithm == "A*"
    assert rec.path_length == 5
    assert rec.nodes_explored == 5
    assert rec.iterations == 4
    assert rec.reached_target is True
    assert rec.time_ms >= 0


def test_failed_search_still_reports(split_grid):
    sink = MemorySink()
    drain(breadth_first_search((0, 0), (4, 0), split_grid), sink=sink)
    (row,) = sink.rows()
    assert row[0] == "Brute-Force"
    assert row[1] == 0
    assert row[-1] is False


def test_on_step_callback_sees_every_step(open_grid):
    seen = []
    run = drain(a_star_search((0, 0), (4, 0), open_grid), on_step=seen.append)
    assert seen == run.steps


def test_record_from_result_converts_time_to_ms():
    result = SearchResult("Dijkstra", True, ((0, 0), (1, 0)), 1.0, 2, 1, time_s=0.0123)
    rec = AnalyticsRecord.from_result(result)
    assert rec.as_row() == ("Dijkstra", 2, 12, 2, 1, True)


def test_logger_sink_writes_one_line():
    messages = []
    handler = logger.add(messages.append, format="{message}", level="INFO")
    try:
        LoggerSink().record(AnalyticsRecord("A*", 5, 3, 5, 4, True))
    finally:
        logger.remove(handler)
    assert len(messages) == 1
    assert messages[0].strip() == (
        "[Analytics] A* | Path Length: 5 | Time: 3 ms | Nodes Explored: 5 | Iterations: 4 | Reached: True")
