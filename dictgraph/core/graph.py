"""
Undirected graph backed by a dictionary of adjacency sets.

Every edge is stored twice, once in each endpoint's adjacency set, so that
``b in successors(a)`` holds exactly when ``a in successors(b)``.
"""

import logging
from typing import Iterable, Set, Tuple

from ..classes.edge import Edge
from ..classes.exceptions import GraphException
from .base import DictionaryGraphBase, V

logger = logging.getLogger(__name__)


class DictionaryGraph(DictionaryGraphBase[V]):
    """
    Undirected graph over hashable vertices.

    Example:
        >>> g = DictionaryGraph.empty()
        >>> for v in (1, 2, 3):
        ...     g.add_vertex(v)
        >>> g.add_edge(1, 2)
        >>> g.degree(2)
        1
    """

    @classmethod
    def empty(cls) -> "DictionaryGraph[V]":
        """Create a graph with no vertices and no edges."""
        return cls()

    @classmethod
    def of(cls, vertices: Iterable[V], edges: Iterable[Tuple[V, V]]) -> "DictionaryGraph[V]":
        """
        Build a graph from a collection of vertices and a collection of edges.

        All vertices are inserted before any edge, since an edge needs both of
        its endpoints to be present.

        Args:
            vertices: Vertices to add
            edges: Edge values, or any pairs of vertices

        Returns:
            A new DictionaryGraph

        Raises:
            GraphException: If an edge mentions a vertex not in vertices
        """
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for vertex1, vertex2 in edges:
            graph.add_edge(vertex1, vertex2)

        logger.debug(f"Built {cls.__name__} with {graph.number_of_vertices()} vertices")
        return graph

    @classmethod
    def copy_of(cls, graph: "DictionaryGraph[V]") -> "DictionaryGraph[V]":
        """
        Create an independent graph with the same vertices and edges.

        Args:
            graph: Graph to copy

        Returns:
            A new DictionaryGraph that shares no mutable state with graph
        """
        return cls.of(graph.vertices(), graph.edges())

    def _check_endpoints(self, vertex1: V, vertex2: V) -> None:
        if vertex1 not in self._vertices:
            logger.warning(f"Edge endpoint {vertex1!r} is not in the graph")
            raise GraphException("first vertex is not in the graph")
        if vertex2 not in self._vertices:
            logger.warning(f"Edge endpoint {vertex2!r} is not in the graph")
            raise GraphException("second vertex is not in the graph")

    def add_edge(self, vertex1: V, vertex2: V) -> None:
        """
        Connect two vertices. Adding an existing edge changes nothing.

        Args:
            vertex1: First endpoint
            vertex2: Second endpoint

        Raises:
            GraphException: If either endpoint is not in the graph. The graph
                is left unchanged.
        """
        self._check_endpoints(vertex1, vertex2)
        self._adjacency[vertex1].add(vertex2)
        self._adjacency[vertex2].add(vertex1)

    def delete_edge(self, vertex1: V, vertex2: V) -> None:
        """
        Disconnect two vertices. Deleting a missing edge changes nothing.

        Args:
            vertex1: First endpoint
            vertex2: Second endpoint

        Raises:
            GraphException: If either endpoint is not in the graph
        """
        self._check_endpoints(vertex1, vertex2)
        self._adjacency[vertex1].discard(vertex2)
        self._adjacency[vertex2].discard(vertex1)

    def delete_vertex(self, vertex: V) -> None:
        """
        Remove a vertex together with every edge touching it.

        Removing a vertex that is not in the graph changes nothing.

        Args:
            vertex: Vertex to remove
        """
        if vertex not in self._vertices:
            return

        # A self-loop is counted once
        dropped = len(self._adjacency.get(vertex, ()))
        self._strip_vertex(vertex)
        self._adjacency.pop(vertex, None)
        self._vertices.discard(vertex)
        logger.debug(f"Deleted vertex {vertex!r} and {dropped} incident edges")

    def edges(self) -> Set[Edge[V]]:
        """
        Materialize the edge set.

        Each unordered pair is reported once even though it is stored in both
        directions.

        Returns:
            A new set of Edge values
        """
        edges: Set[Edge[V]] = set()
        for vertex1, adjacent in self._adjacency.items():
            for vertex2 in adjacent:
                # Edge equality ignores order, so the mirrored copy is a duplicate
                edges.add(Edge(vertex1, vertex2))
        return edges

    def degree(self, vertex: V) -> int:
        """
        Count the neighbours of vertex.

        Args:
            vertex: Vertex to look up

        Returns:
            Number of adjacent vertices, or 0 if vertex is not in the graph
        """
        return len(self.successors(vertex))
