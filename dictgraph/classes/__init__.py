"""
Value classes shared by the graph implementations.

This module contains the edge pair types, the exception type and the numpy
helpers used throughout the dictgraph library.
"""

from .edge import Edge, DiEdge
from .exceptions import GraphException
from .utils import adjacency_matrix, degree_sequence, is_symmetric

__all__ = [
    'Edge',
    'DiEdge',
    'GraphException',
    'adjacency_matrix',
    'degree_sequence',
    'is_symmetric',
]
