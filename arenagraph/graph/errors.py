"""Errors raised by a graph running in strict mode.

By default the container ignores invalid operations and reports them through
its diagnostics channel. With ``strict=True`` the same conditions raise one of
these instead. Lookups of absent keys return ``None`` in both modes.
"""

from __future__ import annotations

from dataclasses import dataclass


class GraphError(Exception):
    """Base class for rejected graph operations."""


@dataclass
class DuplicateNodeError(GraphError):
    """Raised when adding a node whose key is already present."""

    key: int

    def __post_init__(self) -> None:
        super().__init__(f"A node with key {self.key} is already on the graph")


@dataclass
class NodeNotFoundError(GraphError):
    """Raised when an edge operation references a node that does not exist."""

    key: int
    context: str = ""

    def __post_init__(self) -> None:
        msg = f"Node {self.key} not found"
        if self.context:
            msg += f" ({self.context})"
        super().__init__(msg)


@dataclass
class SelfLoopError(GraphError):
    """Raised when connecting a node to itself."""

    key: int

    def __post_init__(self) -> None:
        super().__init__(f"Self-loop on node {self.key} is not allowed")


@dataclass
class NegativeWeightError(GraphError):
    """Raised when connecting with a weight below zero or NaN."""

    src: int
    dest: int
    weight: float

    def __post_init__(self) -> None:
        super().__init__(
            f"Edge {self.src} -> {self.dest} has invalid weight {self.weight}; weights must be >= 0"
        )
