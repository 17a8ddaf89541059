"""
Core graph data structures.

This module contains the dictionary-backed undirected and directed graphs.
"""

from .graph import DictionaryGraph
from .digraph import DictionaryDiGraph

__all__ = [
    'DictionaryGraph',
    'DictionaryDiGraph',
]
