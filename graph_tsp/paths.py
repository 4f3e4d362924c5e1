import heapq
import itertools
import logging
from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from .errors import NotFoundError
from .store import Edge, GraphStore

_LOGGER = logging.getLogger(__name__)


def path_weight(path: Sequence[Edge]) -> int:
    return sum(edge.weight for edge in path)


class PathFinder:
    """Uniform-cost search over a GraphStore's query interface."""

    def __init__(self, graph: GraphStore):
        self.graph = graph

    def shortest_path_between(self, source: Hashable, destination: Hashable) -> Optional[List[Edge]]:
        """
        Minimum-weight path from source to destination as a list of edges.

        Returns an empty list when source == destination and None when the
        destination cannot be reached. Raises NotFoundError for unknown vertices.
        """
        graph = self.graph
        if not graph.vertex_exists(source) or not graph.vertex_exists(destination):
            raise NotFoundError(f"vertex {source!r} or {destination!r} not found")
        if source == destination:
            return []

        # Each settled vertex maps to the edge that reached it; the edge weight
        # is the cumulative path weight, not the graph weight.
        connected: Dict[Hashable, Edge] = {source: Edge(None, source, 0)}
        frontier: List[Tuple[int, int, Edge]] = []
        counter = itertools.count()
        current = source
        while destination not in connected:
            reached = connected[current].weight
            for nxt in graph.neighbors(current):
                if nxt not in connected:
                    cost = reached + graph.get_edge_weight(current, nxt)
                    heapq.heappush(frontier, (cost, next(counter), Edge(current, nxt, cost)))
            edge = None
            while frontier:
                _, _, candidate = heapq.heappop(frontier)
                if candidate.destination not in connected:
                    edge = candidate
                    break
            if edge is None:
                _LOGGER.debug(
                    "no path from %r to %r (%d vertices settled)", source, destination, len(connected)
                )
                return None
            current = edge.destination
            connected[current] = edge

        path: List[Edge] = []
        vertex = destination
        while vertex != source:
            prev = connected[vertex].source
            path.append(Edge(prev, vertex, graph.get_edge_weight(prev, vertex)))
            vertex = prev
        path.reverse()
        _LOGGER.debug(
            "path %r -> %r: %d edges, weight %d (%d vertices settled)",
            source,
            destination,
            len(path),
            path_weight(path),
            len(connected),
        )
        return path
