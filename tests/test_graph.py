import logging

import pytest

from dictgraph import DictionaryGraph, Edge, GraphException
from dictgraph.core.base import DictionaryGraphBase


@pytest.fixture
def path_graph():
    graph = DictionaryGraph.empty()
    for vertex in (1, 2, 3):
        graph.add_vertex(vertex)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    return graph


def assert_symmetric(graph):
    for a in graph.vertices():
        for b in graph.vertices():
            assert (b in graph.successors(a)) == (a in graph.successors(b))


def test_empty_graph():
    graph = DictionaryGraph.empty()
    assert graph.is_empty()
    assert graph.number_of_vertices() == 0
    assert graph.number_of_edges() == 0
    assert graph.edges() == set()


def test_path_scenario(path_graph):
    assert path_graph.number_of_vertices() == 3
    assert path_graph.number_of_edges() == 2
    assert path_graph.degree(2) == 2
    assert path_graph.degree(1) == 1
    assert path_graph.successors(1) == {2}
    assert path_graph.edges() == {Edge(1, 2), Edge(2, 3)}
    assert_symmetric(path_graph)


def test_add_vertex_is_idempotent(path_graph):
    path_graph.add_vertex(1)
    assert path_graph.number_of_vertices() == 3
    assert path_graph.successors(1) == {2}

    path_graph.add_vertex(4)
    assert 4 in path_graph.vertices()
    assert path_graph.degree(4) == 0


def test_add_edge_is_idempotent(path_graph):
    path_graph.add_edge(1, 2)
    path_graph.add_edge(2, 1)
    assert path_graph.number_of_edges() == 2
    assert path_graph.degree(1) == 1


@pytest.mark.parametrize("vertex1, vertex2, message", [
    (9, 1, "first vertex"),
    (1, 9, "second vertex"),
])
def test_add_edge_requires_both_vertices(path_graph, vertex1, vertex2, message):
    before = path_graph.edges()
    with pytest.raises(GraphException, match=message):
        path_graph.add_edge(vertex1, vertex2)
    assert path_graph.edges() == before
    assert 9 not in path_graph


def test_failed_add_edge_logs_warning(path_graph, caplog):
    with caplog.at_level(logging.WARNING, logger="dictgraph"):
        with pytest.raises(GraphException):
            path_graph.add_edge(1, 42)
    assert "42" in caplog.text


def test_delete_edge(path_graph):
    path_graph.delete_edge(2, 1)
    assert path_graph.edges() == {Edge(2, 3)}
    assert path_graph.successors(1) == set()
    assert_symmetric(path_graph)


def test_delete_missing_edge_is_noop(path_graph):
    path_graph.delete_edge(1, 3)
    assert path_graph.number_of_edges() == 2


def test_delete_edge_requires_both_vertices(path_graph):
    with pytest.raises(GraphException):
        path_graph.delete_edge(1, 7)
    with pytest.raises(GraphException):
        path_graph.delete_edge(7, 1)
    assert path_graph.number_of_edges() == 2


def test_delete_vertex_removes_incident_edges(path_graph):
    path_graph.delete_vertex(2)
    assert_symmetric(path_graph)
    assert 2 not in path_graph.vertices()
    assert path_graph.edges() == set()
    assert all(2 not in edge for edge in path_graph.edges())
    assert path_graph.degree(1) == 0
    assert path_graph.degree(3) == 0


def test_delete_absent_vertex_is_noop(path_graph):
    path_graph.delete_vertex(99)
    assert path_graph.number_of_vertices() == 3
    assert path_graph.number_of_edges() == 2


def test_absent_vertex_lookups(path_graph):
    assert path_graph.successors(99) == set()
    assert path_graph.degree(99) == 0


def test_self_loop(path_graph):
    path_graph.add_edge(3, 3)
    assert Edge(3, 3) in path_graph.edges()
    assert path_graph.number_of_edges() == 3
    assert path_graph.degree(3) == 2
    path_graph.delete_vertex(3)
    assert_symmetric(path_graph)
    assert path_graph.edges() == {Edge(1, 2)}


def test_of_round_trips_edges():
    edges = {Edge(1, 2), Edge(3, 2), Edge(4, 1)}
    graph = DictionaryGraph.of({1, 2, 3, 4, 5}, edges)
    assert graph.edges() == edges
    assert graph.number_of_vertices() == 5
    assert_symmetric(graph)


def test_of_accepts_pairs():
    graph = DictionaryGraph.of(["a", "b"], [("a", "b")])
    assert graph.edges() == {Edge("b", "a")}


def test_of_rejects_unknown_endpoint():
    with pytest.raises(GraphException):
        DictionaryGraph.of({1}, {Edge(1, 2)})


def test_copy_of_is_equal_and_independent(path_graph):
    copy = DictionaryGraph.copy_of(path_graph)
    assert copy.vertices() == path_graph.vertices()
    assert copy.edges() == path_graph.edges()

    copy.add_vertex(4)
    copy.add_edge(4, 1)
    copy.delete_edge(2, 3)
    assert 4 not in path_graph
    assert path_graph.edges() == {Edge(1, 2), Edge(2, 3)}


def test_container_protocol(path_graph):
    assert 1 in path_graph
    assert 7 not in path_graph
    assert len(path_graph) == 3
    assert set(path_graph) == {1, 2, 3}


def test_rendering(path_graph):
    text = str(path_graph)
    assert text.startswith("DictionaryGraph(vertices(")
    assert "edges(" in text
    assert "Edge(" in text
    assert repr(path_graph) == "DictionaryGraph(V=3, E=2)"


def test_unhashable_vertex_is_rejected():
    with pytest.raises(TypeError):
        DictionaryGraph.empty().add_vertex([1, 2])


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        DictionaryGraphBase()
