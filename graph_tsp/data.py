import csv
import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional, Union

import networkx as nx
import tsplib95

from .errors import GraphFormatError, InvalidArgumentError, NotFoundError
from .solvers.base import tour_length
from .store import GraphStore

_LOGGER = logging.getLogger(__name__)


@dataclass
class Instance:
    name: str
    path: Path
    graph: GraphStore
    optimum: Optional[float]


def _as_weight(value) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError) as exc:
        raise GraphFormatError(f"bad edge weight {value!r}") from exc


# ---- CSV-like text format -------------------------------------------------
#
# <number of vertices>
# <vertex>            (one per line)
# <number of edges>   (optional, may be omitted together with the edges)
# <source>,<destination>,<weight>


def _parse_count(line: str, what: str) -> int:
    try:
        count = int(line.strip())
    except ValueError as exc:
        raise GraphFormatError(f"expected {what}, got {line!r}") from exc
    if count < 0:
        raise GraphFormatError(f"{what} must be non-negative, got {count}")
    return count


def read_csv_graph(source: Union[str, Iterable[str]], directed: bool = False) -> GraphStore:
    if isinstance(source, str):
        lines = source.splitlines()
    else:
        lines = [line.rstrip("\r\n") for line in source]
    it: Iterator[str] = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise GraphFormatError(f"unexpected end of input, expected {what}") from None

    graph = GraphStore(directed=directed)
    try:
        n_vertices = _parse_count(next_line("vertex count"), "vertex count")
        for _ in range(n_vertices):
            graph.add_vertex(next_line("vertex"))

        rest = [line for line in it if line.strip()]
        if not rest:
            return graph
        n_edges = _parse_count(rest[0], "edge count")
        if len(rest) - 1 < n_edges:
            raise GraphFormatError(f"expected {n_edges} edges, found {len(rest) - 1}")
        for row in csv.reader(rest[1 : n_edges + 1]):
            if len(row) != 3:
                raise GraphFormatError(f"malformed edge line {','.join(row)!r}")
            src, dst, weight = row
            try:
                weight = int(weight.strip())
            except ValueError as exc:
                raise GraphFormatError(f"bad edge weight {weight!r}") from exc
            graph.add_edge(src, dst, weight)
    except (InvalidArgumentError, NotFoundError) as exc:
        raise GraphFormatError(str(exc)) from exc
    _LOGGER.debug("read csv graph: %d vertices, %d edges", len(graph), graph.edge_count())
    return graph


def load_csv_graph(path: Path, directed: bool = False) -> GraphStore:
    with Path(path).open("r", encoding="utf-8") as f:
        return read_csv_graph(f, directed=directed)


# ---- TSPLIB XML dialect ---------------------------------------------------


def read_tsp_xml(source: Union[str, Path, IO]) -> GraphStore:
    """
    Build an undirected graph from a TSPLIB XML instance.

    Vertices are named by their ``name`` attribute or, failing that, by their
    0-based position. Each ``<edge cost="...">j</edge>`` child of vertex i is an
    edge i-j; costs are truncated to integers.
    """
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"invalid TSP XML: {exc}") from exc
    graph_el = root if root.tag == "graph" else root.find(".//graph")
    if graph_el is None:
        raise GraphFormatError("no <graph> element found")

    vertex_els = graph_el.findall("vertex")
    names = [el.get("name") or str(i) for i, el in enumerate(vertex_els)]
    graph = GraphStore(directed=False)
    skipped = 0
    try:
        for name in names:
            graph.add_vertex(name)
        for name, vertex_el in zip(names, vertex_els):
            for edge_el in vertex_el.findall("edge"):
                cost = edge_el.get("cost")
                if cost is None:
                    raise GraphFormatError(f"edge of vertex {name!r} has no cost")
                dest = (edge_el.text or "").strip()
                if dest == name:
                    skipped += 1
                    continue
                graph.add_edge(name, dest, _as_weight(cost))
    except ValueError as exc:
        # InvalidArgumentError is a ValueError.
        raise GraphFormatError(str(exc)) from exc
    except NotFoundError as exc:
        raise GraphFormatError(str(exc)) from exc
    if skipped:
        _LOGGER.warning("skipped %d self-loop edges in TSP XML", skipped)
    return graph


def load_tsp_xml(path: Path) -> GraphStore:
    with Path(path).open("rb") as f:
        return read_tsp_xml(f)


# ---- networkx / TSPLIB95 --------------------------------------------------


def graph_from_networkx(nx_graph: nx.Graph, weight: str = "weight", default: int = 1) -> GraphStore:
    graph = GraphStore(directed=nx_graph.is_directed())
    loops = 0
    try:
        for node in nx_graph.nodes():
            graph.add_vertex(node)
        for u, v, w in nx_graph.edges(data=weight, default=default):
            if u == v:
                loops += 1
                continue
            graph.add_edge(u, v, _as_weight(w))
    except (InvalidArgumentError, NotFoundError) as exc:
        raise GraphFormatError(str(exc)) from exc
    if loops:
        _LOGGER.debug("skipped %d self-loops while converting from networkx", loops)
    return graph


def graph_to_networkx(graph: GraphStore) -> nx.Graph:
    out = nx.DiGraph() if graph.directed else nx.Graph()
    out.add_nodes_from(graph.get_vertices())
    for edge in graph.get_edges():
        out.add_edge(edge.source, edge.destination, weight=edge.weight)
    return out


def _solution_candidates(path: Path, name: Optional[str] = None) -> Iterator[Path]:
    """Optimal-tour files for a TSPLIB problem, beside it or under ``solutions/``.

    The problem's NAME is tried after the file stem; renamed copies of the
    library keep the original NAME.
    """
    stems = [path.stem]
    if name and name != path.stem:
        stems.append(name)
    for stem in stems:
        yield path.parent / f"{stem}.opt.tour"
        for ext in (".opt.tour", ".tour"):
            yield path.parent / "solutions" / f"{stem}{ext}"


def _load_optimum(graph: GraphStore, path: Path, name: Optional[str] = None) -> Optional[float]:
    """Length of the first optimal tour found, measured as a closed cycle."""
    for candidate in _solution_candidates(path, name):
        if not candidate.exists():
            continue
        tour_file = tsplib95.parse(candidate.read_text())
        if not tour_file.tours:
            continue
        nodes = list(tour_file.tours[0])
        if sorted(nodes) != sorted(graph.get_vertices()):
            raise GraphFormatError(f"{candidate} does not visit every vertex of {path}")
        length = tour_length(graph, nodes, closed=True)
        if math.isinf(length):
            raise GraphFormatError(f"{candidate} uses an edge missing from {path}")
        return length
    return None


def load_tsplib(path: Path) -> GraphStore:
    problem = tsplib95.load(str(path))
    return graph_from_networkx(problem.get_graph())


def load_instance(path: Path) -> Instance:
    path = Path(path)
    problem = tsplib95.load(str(path))
    graph = graph_from_networkx(problem.get_graph())
    optimum = _load_optimum(graph, path, problem.name)
    return Instance(name=problem.name or path.stem, path=path, graph=graph, optimum=optimum)


def load_tsplib_instances(root: Path, max_instances: Optional[int] = None) -> List[Instance]:
    """Load every ``*.tsp`` file under ``root`` in name order, at most ``max_instances``."""
    instances: List[Instance] = []
    for p in sorted(Path(root).glob("*.tsp")):
        if max_instances is not None and len(instances) >= max_instances:
            break
        instances.append(load_instance(p))
    _LOGGER.info("loaded %d TSPLIB instances from %s", len(instances), root)
    return instances
