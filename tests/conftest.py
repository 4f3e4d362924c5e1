import pytest

from graph_samples import COMPLETE_EDGES, SENTENCE, SENTENCE_EDGES, build


@pytest.fixture
def sentence_undirected():
    return build(False, SENTENCE, SENTENCE_EDGES)


@pytest.fixture
def sentence_directed():
    return build(True, SENTENCE, SENTENCE_EDGES)


@pytest.fixture
def complete_graph():
    return build(False, SENTENCE, COMPLETE_EDGES)
