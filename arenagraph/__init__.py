"""
Arenagraph - directed weighted graph storage for arena games.

A pure storage container: nodes keyed by integer, directed weighted edges with
O(1) lookup from either endpoint, and counters for observers. Rendering, game
rules and path finding live in the code that uses it.
"""

__version__ = "0.1.0"

from .config import Config
from .graph import (
    DirectedWeightedGraph,
    SynchronizedGraph,
    NodeData,
    EdgeData,
    GeoLocation,
    GraphState,
    NodeState,
    EdgeState,
    GeoLocationState,
    GraphError,
    DuplicateNodeError,
    NodeNotFoundError,
    SelfLoopError,
    NegativeWeightError,
)
from .loader import GraphLoader, load_graph

__all__ = [
    # Configuration
    "Config",
    # Container
    "DirectedWeightedGraph",
    "SynchronizedGraph",
    # Value types
    "NodeData",
    "EdgeData",
    "GeoLocation",
    # Snapshot schemas
    "GraphState",
    "NodeState",
    "EdgeState",
    "GeoLocationState",
    # Errors (strict mode)
    "GraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "SelfLoopError",
    "NegativeWeightError",
    # Loading
    "GraphLoader",
    "load_graph",
]
