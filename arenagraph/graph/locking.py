"""Coarse-grained locking for sharing a graph between threads.

``DirectedWeightedGraph`` has no internal locks. ``SynchronizedGraph`` holds a
single reentrant lock around every public operation so no thread can observe
a half-applied update. Use ``batch()`` to make several calls appear atomic:

    shared = SynchronizedGraph(graph)
    with shared.batch():
        shared.add_node(NodeData(7))
        shared.connect(1, 7, 2.5)

``batch()`` provides isolation only; there is no rollback.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from .container import DirectedWeightedGraph
from .types import EdgeData, NodeData


class SynchronizedGraph:
    """Thread-safe facade over a ``DirectedWeightedGraph``."""

    def __init__(self, graph: Optional[DirectedWeightedGraph] = None) -> None:
        self._graph = graph if graph is not None else DirectedWeightedGraph()
        self._lock = threading.RLock()

    @contextmanager
    def batch(self) -> Iterator[SynchronizedGraph]:
        """Hold the lock across several operations."""
        with self._lock:
            yield self

    def add_node(self, node: NodeData) -> bool:
        with self._lock:
            return self._graph.add_node(node)

    def get_node(self, key: int) -> Optional[NodeData]:
        with self._lock:
            return self._graph.get_node(key)

    def nodes(self) -> Tuple[NodeData, ...]:
        with self._lock:
            return self._graph.nodes()

    def remove_node(self, key: int) -> Optional[NodeData]:
        with self._lock:
            return self._graph.remove_node(key)

    def connect(self, src: int, dest: int, weight: float) -> bool:
        with self._lock:
            return self._graph.connect(src, dest, weight)

    def get_edge(self, src: int, dest: int) -> Optional[EdgeData]:
        with self._lock:
            return self._graph.get_edge(src, dest)

    def get_outgoing(self, key: int) -> Tuple[EdgeData, ...]:
        with self._lock:
            return self._graph.get_outgoing(key)

    def get_incoming(self, key: int) -> Tuple[EdgeData, ...]:
        with self._lock:
            return self._graph.get_incoming(key)

    def remove_edge(self, src: int, dest: int) -> Optional[EdgeData]:
        with self._lock:
            return self._graph.remove_edge(src, dest)

    def node_count(self) -> int:
        with self._lock:
            return self._graph.node_count()

    def edge_count(self) -> int:
        with self._lock:
            return self._graph.edge_count()

    def mutation_count(self) -> int:
        with self._lock:
            return self._graph.mutation_count()

    def snapshot(self) -> DirectedWeightedGraph:
        """Deep copy of the wrapped graph taken under the lock."""
        with self._lock:
            return self._graph.copy()

    def describe(self) -> str:
        with self._lock:
            return self._graph.describe()

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._graph
