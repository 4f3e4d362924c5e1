from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, Hashable, Iterable, List, Optional

from .errors import InvalidArgumentError, NotFoundError


# Sentinel weight returned when an edge does not exist.
NO_EDGE = -1
# Sentinel length returned when a sequence of vertices is not a walk.
NO_PATH = -1


@dataclass(frozen=True)
class Edge:
    """
    Weighted connection from source to destination.

    Equality and hashing use the full (source, destination, weight) triple;
    ordering compares the weight only so edges can be sorted or queued by cost.
    """

    source: Any
    destination: Any
    weight: int

    def __lt__(self, other: "Edge") -> bool:
        return self.weight < other.weight

    def __le__(self, other: "Edge") -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: "Edge") -> bool:
        return self.weight > other.weight

    def __ge__(self, other: "Edge") -> bool:
        return self.weight >= other.weight


def _is_absent(vertex: Any) -> bool:
    return vertex is None or (isinstance(vertex, str) and vertex == "")


class GraphStore:
    """
    Adjacency-map storage for a directed or undirected weighted graph.

    Undirected edges are stored twice (source->destination and
    destination->source) with the same weight; every mutation keeps both
    entries in step. Directedness is fixed at construction.
    """

    def __init__(self, directed: bool = False):
        self._directed = bool(directed)
        self._adj: Dict[Hashable, Dict[Hashable, int]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: Any) -> bool:
        return self.vertex_exists(vertex)

    # ---- vertices ----------------------------------------------------------
    def vertex_exists(self, vertex: Any) -> bool:
        if vertex is None:
            return False
        return vertex in self._adj

    def add_vertex(self, vertex: Hashable) -> None:
        if _is_absent(vertex):
            raise InvalidArgumentError("vertex must not be None or empty")
        if vertex in self._adj:
            raise InvalidArgumentError(f"vertex {vertex!r} already exists")
        self._adj[vertex] = {}

    def remove_vertex(self, vertex: Hashable) -> None:
        if not self.vertex_exists(vertex):
            raise NotFoundError(f"vertex {vertex!r} not found")
        # Incoming edges live in other vertices' maps, also for directed graphs.
        for neighbors in self._adj.values():
            neighbors.pop(vertex, None)
        del self._adj[vertex]

    def get_vertices(self) -> List[Hashable]:
        return list(self._adj)

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        if not self.vertex_exists(vertex):
            raise NotFoundError(f"vertex {vertex!r} not found")
        return list(self._adj[vertex])

    # ---- edges -------------------------------------------------------------
    def add_edge(self, source: Hashable, destination: Hashable, weight: int) -> None:
        if _is_absent(source) or _is_absent(destination):
            raise InvalidArgumentError("edge endpoints must not be None or empty")
        if source == destination:
            raise InvalidArgumentError(f"self-loop on {source!r} is not allowed")
        if isinstance(weight, bool) or not isinstance(weight, Integral):
            raise InvalidArgumentError(f"edge weight must be an integer, got {weight!r}")
        if weight < 0:
            raise InvalidArgumentError(f"edge weight must be non-negative, got {weight}")
        if source not in self._adj or destination not in self._adj:
            raise NotFoundError(f"edge endpoint {source!r} or {destination!r} not found")
        weight = int(weight)
        self._adj[source][destination] = weight
        if not self._directed:
            self._adj[destination][source] = weight

    def remove_edge(self, source: Hashable, destination: Hashable) -> None:
        if not self.vertex_exists(source) or not self.vertex_exists(destination):
            raise NotFoundError(f"edge endpoint {source!r} or {destination!r} not found")
        if destination in self._adj[source]:
            del self._adj[source][destination]
            if not self._directed:
                self._adj[destination].pop(source, None)
        elif not self._directed and source in self._adj[destination]:
            del self._adj[destination][source]
        else:
            raise NotFoundError(f"no edge from {source!r} to {destination!r}")

    def edge_exists(self, source: Any, destination: Any) -> bool:
        if not self.vertex_exists(source) or not self.vertex_exists(destination):
            return False
        return destination in self._adj[source]

    def get_edge_weight(self, source: Any, destination: Any) -> int:
        if not self.edge_exists(source, destination):
            return NO_EDGE
        return self._adj[source][destination]

    def get_edge(self, source: Any, destination: Any) -> Optional[Edge]:
        if not self.edge_exists(source, destination):
            return None
        return Edge(source, destination, self._adj[source][destination])

    def get_edges(self) -> List[Edge]:
        edges: List[Edge] = []
        emitted = set()
        for source, neighbors in self._adj.items():
            for destination, weight in neighbors.items():
                if not self._directed and (destination, source) in emitted:
                    continue
                emitted.add((source, destination))
                edges.append(Edge(source, destination, weight))
        return edges

    def edge_count(self) -> int:
        stored = sum(len(neighbors) for neighbors in self._adj.values())
        return stored if self._directed else stored // 2

    # ---- walks -------------------------------------------------------------
    def path_length(self, vertices: Iterable[Hashable]) -> int:
        """
        Total weight of the walk through ``vertices`` in order.

        Returns NO_PATH for an empty sequence, an unknown vertex, or a
        consecutive pair with no edge between them.
        """
        walk = list(vertices)
        if not walk:
            return NO_PATH
        total = 0
        prev = walk[0]
        if not self.vertex_exists(prev):
            return NO_PATH
        for cur in walk[1:]:
            weight = self.get_edge_weight(prev, cur)
            if weight == NO_EDGE:
                return NO_PATH
            total += weight
            prev = cur
        return total
