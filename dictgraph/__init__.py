"""
dictgraph - Dictionary-backed Graph Data Types

A Python library of generic in-memory graphs built from a vertex set and a
dictionary mapping each vertex to its set of adjacent vertices.

Main Classes:
    DictionaryGraph: Undirected graph, edges mirrored in both directions
    DictionaryDiGraph: Directed graph, edges stored from source only
    Edge: Unordered vertex pair
    DiEdge: Ordered (source, destination) vertex pair
    GraphException: Raised when an edge refers to a missing vertex

Example:
    >>> from dictgraph import DictionaryGraph
    >>> graph = DictionaryGraph.of({1, 2, 3}, {(1, 2), (2, 3)})
    >>> graph.degree(2)
    2
"""

import logging

__version__ = "0.1.0"

from dictgraph.classes.edge import Edge, DiEdge
from dictgraph.classes.exceptions import GraphException
from dictgraph.core.graph import DictionaryGraph
from dictgraph.core.digraph import DictionaryDiGraph

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'DictionaryGraph',
    'DictionaryDiGraph',
    'Edge',
    'DiEdge',
    'GraphException',
]
