import pytest

from dictgraph import DiEdge, Edge, GraphException


def test_edge_equality_ignores_order():
    assert Edge(1, 2) == Edge(2, 1)
    assert hash(Edge(1, 2)) == hash(Edge(2, 1))
    assert len({Edge(1, 2), Edge(2, 1)}) == 1


def test_edge_keeps_given_endpoints():
    edge = Edge.of("a", "b")
    assert edge.vertex1 == "a"
    assert edge.vertex2 == "b"
    assert tuple(edge) == ("a", "b")
    assert repr(edge) == "Edge('a', 'b')"


def test_edge_other():
    edge = Edge(1, 2)
    assert edge.other(1) == 2
    assert edge.other(2) == 1
    assert Edge(3, 3).other(3) == 3
    with pytest.raises(GraphException):
        edge.other(5)


def test_diedge_is_order_sensitive():
    assert DiEdge(1, 2) != DiEdge(2, 1)
    assert DiEdge(1, 2) == DiEdge.of(1, 2)
    assert DiEdge(1, 2).reversed() == DiEdge(2, 1)
    source, destination = DiEdge("x", "y")
    assert (source, destination) == ("x", "y")


def test_edge_kinds_never_compare_equal():
    assert Edge(1, 2) != DiEdge(1, 2)
    assert Edge(1, 2) != (1, 2)
    assert DiEdge(1, 2) != (1, 2)
