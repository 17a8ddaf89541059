"""
Shared storage for dictionary-backed graphs.

This module holds the parts that the undirected and directed graphs have in
common: the vertex set, the adjacency dictionary and the vertex-level queries.
Edge semantics are left to the subclasses.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Iterator, Set, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)


class DictionaryGraphBase(ABC, Generic[V]):
    """
    Vertex set plus adjacency dictionary.

    Every vertex in ``_vertices`` has an entry in ``_adjacency``, possibly an
    empty set. Subclasses define what an entry means (neighbours or
    destinations) and how edges are materialized.
    """

    def __init__(self):
        self._vertices: Set[V] = set()
        self._adjacency: Dict[V, Set[V]] = {}

    def is_empty(self) -> bool:
        """Check whether the graph has no vertices."""
        return not self._vertices

    def add_vertex(self, vertex: V) -> None:
        """
        Add a vertex to the graph.

        Adding a vertex that is already present changes nothing; its
        adjacency entry is kept as is.

        Args:
            vertex: Vertex to add (must be hashable)
        """
        self._vertices.add(vertex)
        if vertex not in self._adjacency:
            self._adjacency[vertex] = set()

    def vertices(self) -> Set[V]:
        """
        Get the vertex set of the graph.

        Returns:
            The graph's own set, not a copy. Callers must not modify it.
        """
        return self._vertices

    @abstractmethod
    def edges(self) -> set:
        """Materialize the edge set as a new set of edge values."""

    def successors(self, vertex: V) -> Set[V]:
        """
        Get the vertices reachable from vertex through one edge.

        Args:
            vertex: Vertex to look up

        Returns:
            The live adjacency set of vertex, or a new empty set if vertex is
            not in the graph
        """
        if vertex in self._vertices and vertex in self._adjacency:
            return self._adjacency[vertex]
        return set()

    def number_of_vertices(self) -> int:
        """Count vertices."""
        return len(self._vertices)

    def number_of_edges(self) -> int:
        """Count edges. This materializes edges() and costs O(V+E)."""
        return len(self.edges())

    def _strip_vertex(self, vertex: V) -> int:
        """Remove vertex from every adjacency set, returning how many sets held it."""
        removed = 0
        for adjacent in self._adjacency.values():
            if vertex in adjacent:
                adjacent.discard(vertex)
                removed += 1
        return removed

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[V]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __str__(self) -> str:
        vertices = ", ".join(str(vertex) for vertex in self._vertices)
        edges = ", ".join(repr(edge) for edge in self.edges())
        return f"{type(self).__name__}(vertices({vertices}), edges({edges}))"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(V={self.number_of_vertices()}, E={self.number_of_edges()})"
