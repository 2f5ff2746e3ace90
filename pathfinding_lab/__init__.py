"""Grid pathfinding engine: A*, Dijkstra, breadth-first and genetic search as lazy step generators."""
from .algorithms.astar import a_star_search
from .algorithms.base import PathfindingAlgorithm, SearchRun, drain
from .algorithms.bfs import breadth_first_search
from .algorithms.genetic import GeneticConfig, genetic_search
from .algorithms.registry import AlgorithmType, Strategy, all_algorithms, get_algorithm
from .algorithms.ucs import uniform_cost_search
from .core.analytics import AnalyticsRecord, LoggerSink, MemorySink
from .core.metrics import SearchResult, Step
from .core.oracle import GridOracle, Position, manhattan
from .problems.grid import GridMap

__version__ = "0.1.0"

__all__ = [
    "AlgorithmType", "AnalyticsRecord", "GeneticConfig", "GridMap", "GridOracle", "LoggerSink",
    "MemorySink", "PathfindingAlgorithm", "Position", "SearchResult", "SearchRun", "Step", "Strategy",
    "a_star_search", "all_algorithms", "breadth_first_search", "drain", "genetic_search",
    "get_algorithm", "manhattan", "uniform_cost_search",
]
