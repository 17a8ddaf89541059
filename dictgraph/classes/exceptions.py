"""
Exception types raised by dictgraph.
"""


class GraphException(Exception):
    """Raised when an edge operation refers to a vertex that is not in the graph."""
