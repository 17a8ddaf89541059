"""
Edge value types shared by the undirected and directed graphs.

Both types are small immutable pairs. They can be used as set elements and
dictionary keys, and they unpack like a 2-tuple.
"""

from typing import Any, Generic, Hashable, Iterator, TypeVar

from .exceptions import GraphException

V = TypeVar("V", bound=Hashable)


class Edge(Generic[V]):
    """
    Unordered pair of vertices.

    ``Edge(a, b)`` and ``Edge(b, a)`` compare equal and hash identically.
    The endpoints are still reported in the order they were given.
    """

    __slots__ = ("_vertex1", "_vertex2")

    def __init__(self, vertex1: V, vertex2: V):
        self._vertex1 = vertex1
        self._vertex2 = vertex2

    @classmethod
    def of(cls, vertex1: V, vertex2: V) -> "Edge[V]":
        return cls(vertex1, vertex2)

    @property
    def vertex1(self) -> V:
        return self._vertex1

    @property
    def vertex2(self) -> V:
        return self._vertex2

    def other(self, vertex: V) -> V:
        """
        Get the endpoint opposite to the given one.

        Args:
            vertex: One of the endpoints of this edge

        Returns:
            The other endpoint (the same vertex for a self-loop)

        Raises:
            GraphException: If vertex is not an endpoint of this edge
        """
        if vertex == self._vertex1:
            return self._vertex2
        if vertex == self._vertex2:
            return self._vertex1
        raise GraphException(f"{vertex!r} is not an endpoint of {self!r}")

    def __iter__(self) -> Iterator[V]:
        yield self._vertex1
        yield self._vertex2

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self._vertex1 == other._vertex1 and self._vertex2 == other._vertex2) or \
               (self._vertex1 == other._vertex2 and self._vertex2 == other._vertex1)

    def __hash__(self) -> int:
        return hash(frozenset((self._vertex1, self._vertex2)))

    def __repr__(self) -> str:
        return f"Edge({self._vertex1!r}, {self._vertex2!r})"


class DiEdge(Generic[V]):
    """Ordered (source, destination) pair of vertices."""

    __slots__ = ("_source", "_destination")

    def __init__(self, source: V, destination: V):
        self._source = source
        self._destination = destination

    @classmethod
    def of(cls, source: V, destination: V) -> "DiEdge[V]":
        return cls(source, destination)

    @property
    def source(self) -> V:
        return self._source

    @property
    def destination(self) -> V:
        return self._destination

    def reversed(self) -> "DiEdge[V]":
        """Get the edge going the opposite way."""
        return DiEdge(self._destination, self._source)

    def __iter__(self) -> Iterator[V]:
        yield self._source
        yield self._destination

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DiEdge):
            return NotImplemented
        return self._source == other._source and self._destination == other._destination

    def __hash__(self) -> int:
        return hash((self._source, self._destination))

    def __repr__(self) -> str:
        return f"DiEdge({self._source!r}, {self._destination!r})"
