"""
Weighted directed/undirected graph storage with shortest path, minimum
spanning tree and an Inver-Over travelling-salesman heuristic.
"""

from .errors import GraphError, GraphFormatError, InvalidArgumentError, InvalidStateError, NotFoundError
from .evolutionary import InverOverConfig, InverOverSearch, TourOptimizer
from .paths import PathFinder, path_weight
from .spanning import SpanningTreeBuilder
from .store import NO_EDGE, NO_PATH, Edge, GraphStore

__all__ = [
    "Edge",
    "GraphStore",
    "NO_EDGE",
    "NO_PATH",
    "PathFinder",
    "path_weight",
    "SpanningTreeBuilder",
    "TourOptimizer",
    "InverOverConfig",
    "InverOverSearch",
    "GraphError",
    "GraphFormatError",
    "InvalidArgumentError",
    "InvalidStateError",
    "NotFoundError",
]
