"""
Utility functions for dictgraph.

This module provides numpy views of the graph structure: adjacency matrices
and degree sequences. They are computed on demand from the adjacency
dictionary and are not kept in sync with later mutations.
"""

import logging
from typing import Hashable, List, Optional, Sequence

import numpy as np

from .exceptions import GraphException

logger = logging.getLogger(__name__)


def default_vertex_order(graph) -> List[Hashable]:
    """
    Get a stable ordering of the graph's vertices.

    Args:
        graph: DictionaryGraph or DictionaryDiGraph

    Returns:
        Sorted vertices when they are mutually comparable, otherwise the
        set iteration order
    """
    try:
        return sorted(graph.vertices())
    except TypeError:
        logger.debug("Vertices are not sortable, using iteration order")
        return list(graph.vertices())


def adjacency_matrix(graph, vertex_order: Optional[Sequence[Hashable]] = None,
                     dtype=np.int64) -> np.ndarray:
    """
    Build the 0/1 adjacency matrix of a graph.

    Row i, column j is 1 when vertex_order[j] is a successor of
    vertex_order[i]. Undirected graphs therefore give a symmetric matrix.

    Args:
        graph: DictionaryGraph or DictionaryDiGraph
        vertex_order: Row/column order; must list every vertex exactly once
        dtype: numpy dtype of the result

    Returns:
        Square matrix of shape (V, V)

    Raises:
        GraphException: If vertex_order does not match the graph's vertices
    """
    if vertex_order is None:
        vertex_order = default_vertex_order(graph)

    index = {}
    for position, vertex in enumerate(vertex_order):
        if vertex not in graph.vertices():
            raise GraphException(f"vertex {vertex!r} is not in the graph")
        if vertex in index:
            raise GraphException(f"vertex {vertex!r} appears twice in the vertex order")
        index[vertex] = position

    if len(index) != graph.number_of_vertices():
        raise GraphException("vertex order does not cover every vertex in the graph")

    matrix = np.zeros((len(index), len(index)), dtype=dtype)
    for vertex, row in index.items():
        for successor in graph.successors(vertex):
            matrix[row, index[successor]] = 1

    logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} adjacency matrix")
    return matrix


def degree_sequence(graph) -> np.ndarray:
    """
    Get the degree sequence of a graph in non-increasing order.

    Directed graphs report out-degrees.

    Args:
        graph: DictionaryGraph or DictionaryDiGraph

    Returns:
        1-D integer array with one entry per vertex
    """
    degrees = np.array([len(graph.successors(vertex)) for vertex in graph.vertices()],
                       dtype=np.int64)
    return np.sort(degrees)[::-1]


def is_symmetric(matrix: np.ndarray) -> bool:
    """Check whether a square matrix equals its transpose."""
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    return bool(np.array_equal(matrix, matrix.T))
