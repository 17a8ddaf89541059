"""
Directed graph backed by a dictionary of adjacency sets.

Each edge is stored once, in the adjacency set of its source. There is no
reverse index, so predecessor queries scan the whole dictionary.
"""

import logging
from typing import Iterable, Set, Tuple

from ..classes.edge import DiEdge
from ..classes.exceptions import GraphException
from .base import DictionaryGraphBase, V

logger = logging.getLogger(__name__)


class DictionaryDiGraph(DictionaryGraphBase[V]):
    """
    Directed graph over hashable vertices.

    Example:
        >>> d = DictionaryDiGraph.empty()
        >>> d.add_vertex("a")
        >>> d.add_vertex("b")
        >>> d.add_di_edge("a", "b")
        >>> d.predecessors("b")
        {'a'}
    """

    @classmethod
    def empty(cls) -> "DictionaryDiGraph[V]":
        """Create a directed graph with no vertices and no edges."""
        return cls()

    @classmethod
    def of(cls, vertices: Iterable[V], di_edges: Iterable[Tuple[V, V]]) -> "DictionaryDiGraph[V]":
        """
        Build a directed graph from a collection of vertices and edges.

        Args:
            vertices: Vertices to add
            di_edges: DiEdge values, or any (source, destination) pairs

        Returns:
            A new DictionaryDiGraph

        Raises:
            GraphException: If an edge mentions a vertex not in vertices
        """
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for source, destination in di_edges:
            graph.add_di_edge(source, destination)

        logger.debug(f"Built {cls.__name__} with {graph.number_of_vertices()} vertices")
        return graph

    @classmethod
    def copy_of(cls, graph: "DictionaryDiGraph[V]") -> "DictionaryDiGraph[V]":
        """Create an independent directed graph with the same vertices and edges."""
        return cls.of(graph.vertices(), graph.edges())

    def add_di_edge(self, source: V, destination: V) -> None:
        """
        Add an edge from source to destination.

        Args:
            source: Vertex the edge leaves
            destination: Vertex the edge enters

        Raises:
            GraphException: If either vertex is not in the graph
        """
        if source not in self._vertices:
            logger.warning(f"Edge source {source!r} is not in the graph")
            raise GraphException("source vertex is not in the graph")
        if destination not in self._vertices:
            logger.warning(f"Edge destination {destination!r} is not in the graph")
            raise GraphException("destination vertex is not in the graph")

        if source not in self._adjacency:
            self._adjacency[source] = set()
        self._adjacency[source].add(destination)

    def delete_di_edge(self, source: V, destination: V) -> None:
        """Remove the edge from source to destination, if there is one."""
        if source in self._vertices and destination in self._vertices and source in self._adjacency:
            self._adjacency[source].discard(destination)

    def delete_vertex(self, vertex: V) -> None:
        """
        Remove a vertex, its outgoing edges and every edge pointing to it.

        Args:
            vertex: Vertex to remove; absent vertices are ignored
        """
        if vertex not in self._vertices:
            return

        outgoing = self._adjacency.pop(vertex, set())
        self._vertices.discard(vertex)
        incoming = self._strip_vertex(vertex)
        logger.debug(f"Deleted vertex {vertex!r} with {len(outgoing)} outgoing and {incoming} incoming edges")

    def edges(self) -> Set[DiEdge[V]]:
        """
        Materialize the edge set.

        Returns:
            A new set with one DiEdge per stored (source, destination) pair
        """
        return {DiEdge(source, destination)
                for source, destinations in self._adjacency.items()
                for destination in destinations}

    def predecessors(self, vertex: V) -> Set[V]:
        """
        Get the vertices with an edge into vertex.

        A self-loop does not make vertex its own predecessor.

        Args:
            vertex: Vertex to look up

        Returns:
            A new set of source vertices (empty if vertex is not in the graph)
        """
        return {source for source, destinations in self._adjacency.items()
                if source != vertex and vertex in destinations}

    def in_degree(self, vertex: V) -> int:
        """Count edges entering vertex (0 if vertex is not in the graph)."""
        return len(self.predecessors(vertex))

    def out_degree(self, vertex: V) -> int:
        """Count edges leaving vertex (0 if vertex is not in the graph)."""
        return len(self.successors(vertex))
