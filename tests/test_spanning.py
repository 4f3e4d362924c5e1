import random

import networkx as nx
import pytest

from graph_samples import SENTENCE
from graph_tsp.data import graph_to_networkx
from graph_tsp.errors import InvalidStateError
from graph_tsp.spanning import SpanningTreeBuilder
from graph_tsp.store import GraphStore


def _total(tree):
    return sum(e.weight for e in tree.get_edges())


def test_directed_graph_rejected(sentence_directed):
    with pytest.raises(InvalidStateError):
        SpanningTreeBuilder(sentence_directed).minimum_spanning_tree()
    with pytest.raises(InvalidStateError):
        SpanningTreeBuilder(GraphStore(directed=True)).minimum_spanning_tree()


def test_empty_graph_gives_empty_tree():
    tree = SpanningTreeBuilder(GraphStore()).minimum_spanning_tree()
    assert tree is not None
    assert tree.get_vertices() == []
    assert not tree.directed


def test_single_vertex():
    graph = GraphStore()
    graph.add_vertex("Hello")
    tree = SpanningTreeBuilder(graph).minimum_spanning_tree()
    assert tree.get_vertices() == ["Hello"]
    assert tree.get_edges() == []


def test_sentence_tree(sentence_undirected):
    tree = SpanningTreeBuilder(sentence_undirected).minimum_spanning_tree()
    assert sorted(tree.get_vertices()) == sorted(SENTENCE)
    assert len(tree.get_edges()) == len(SENTENCE) - 1
    # heaviest edge of each cycle is left out
    assert _total(tree) == 1 + 2 + 6 + 11 + 2 + 8 + 7
    assert not tree.edge_exists("Hello", "old")
    assert not tree.edge_exists("friend.", "it")
    assert not tree.edge_exists("Perhaps", "it")
    for edge in tree.get_edges():
        assert sentence_undirected.get_edge_weight(edge.source, edge.destination) == edge.weight


def test_source_graph_untouched(sentence_undirected):
    before = set(sentence_undirected.get_edges())
    tree = SpanningTreeBuilder(sentence_undirected).minimum_spanning_tree()
    assert tree is not sentence_undirected
    assert set(sentence_undirected.get_edges()) == before


def test_disconnected_graph(sentence_undirected):
    sentence_undirected.add_vertex("Below")
    assert SpanningTreeBuilder(sentence_undirected).minimum_spanning_tree() is None


def test_disconnected_components():
    graph = GraphStore()
    for v in "abcd":
        graph.add_vertex(v)
    graph.add_edge("a", "b", 1)
    graph.add_edge("c", "d", 1)
    assert SpanningTreeBuilder(graph).minimum_spanning_tree() is None


@pytest.mark.parametrize("seed", range(6))
def test_matches_networkx_weight(seed):
    rng = random.Random(seed)
    graph = GraphStore()
    n = 15
    for v in range(n):
        graph.add_vertex(v)
    # a random spanning chain keeps the graph connected
    order = list(range(n))
    rng.shuffle(order)
    for u, v in zip(order, order[1:]):
        graph.add_edge(u, v, rng.randint(1, 100))
    for _ in range(30):
        u, v = rng.sample(range(n), 2)
        graph.add_edge(u, v, rng.randint(1, 100))

    tree = SpanningTreeBuilder(graph).minimum_spanning_tree()
    expected = nx.minimum_spanning_tree(graph_to_networkx(graph)).size(weight="weight")
    assert len(tree) == n
    assert len(tree.get_edges()) == n - 1
    assert _total(tree) == expected
