"""Directed weighted graph storage for arenagraph."""

from .container import DirectedWeightedGraph
from .errors import (
    DuplicateNodeError,
    GraphError,
    NegativeWeightError,
    NodeNotFoundError,
    SelfLoopError,
)
from .locking import SynchronizedGraph
from .schemas import EdgeState, GeoLocationState, GraphState, NodeState
from .types import EdgeData, GeoLocation, NodeData

__all__ = [
    "DirectedWeightedGraph",
    "SynchronizedGraph",
    "NodeData",
    "EdgeData",
    "GeoLocation",
    "GraphState",
    "NodeState",
    "EdgeState",
    "GeoLocationState",
    "GraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "SelfLoopError",
    "NegativeWeightError",
]
