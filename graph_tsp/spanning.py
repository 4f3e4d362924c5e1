import heapq
import itertools
import logging
from typing import Hashable, List, Optional, Tuple

from .errors import InvalidStateError
from .store import Edge, GraphStore

_LOGGER = logging.getLogger(__name__)


class SpanningTreeBuilder:
    def __init__(self, graph: GraphStore):
        self.graph = graph

    def minimum_spanning_tree(self) -> Optional[GraphStore]:
        """
        Prim's algorithm grown from the first vertex of the graph.

        Returns a new undirected GraphStore, or None if the graph is
        disconnected. Directed graphs raise InvalidStateError.
        """
        graph = self.graph
        if graph.directed:
            raise InvalidStateError("minimum spanning tree requires an undirected graph")
        tree = GraphStore(directed=False)
        vertices = graph.get_vertices()
        if not vertices:
            return tree

        current: Hashable = vertices[0]
        tree.add_vertex(current)
        frontier: List[Tuple[int, int, Edge]] = []
        counter = itertools.count()
        for _ in range(len(vertices) - 1):
            for nxt in graph.neighbors(current):
                if nxt not in tree:
                    weight = graph.get_edge_weight(current, nxt)
                    heapq.heappush(frontier, (weight, next(counter), Edge(current, nxt, weight)))
            edge = None
            while frontier:
                _, _, candidate = heapq.heappop(frontier)
                if candidate.destination not in tree:
                    edge = candidate
                    break
            if edge is None:
                _LOGGER.debug(
                    "graph is disconnected: tree stopped at %d of %d vertices", len(tree), len(vertices)
                )
                return None
            tree.add_vertex(edge.destination)
            tree.add_edge(edge.source, edge.destination, edge.weight)
            current = edge.destination
        return tree
