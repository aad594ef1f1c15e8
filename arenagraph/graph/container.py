"""Directed weighted graph container.

The graph keeps every edge exactly once, in an arena keyed by ``(src, dest)``.
Two adjacency indices point into that arena:

- ``_out[src]`` holds the destination keys of edges leaving ``src``
- ``_in[dest]`` holds the source keys of edges entering ``dest``

Because the indices store ids rather than edge values, an edge reached from
its source and the same edge reached from its destination are the same object
and cannot disagree on weight. Every node key has a bucket in both indices,
possibly empty.

The container is single-threaded; wrap it in ``SynchronizedGraph`` to share it
between threads.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, Optional, Set, Tuple

from ..config import Config
from ..logging_utils import log_error
from .errors import (
    DuplicateNodeError,
    GraphError,
    NegativeWeightError,
    NodeNotFoundError,
    SelfLoopError,
)
from .types import EdgeData, NodeData

EdgeKey = Tuple[int, int]
DiagnosticsHook = Callable[[str], None]


class DirectedWeightedGraph:
    """Storage for nodes and directed weighted edges with O(1) lookups.

    Invalid operations (duplicate node, edge to a missing node, self-loop,
    negative weight) are ignored and reported through ``diagnostics`` unless
    the graph is strict, in which case they raise a ``GraphError``.

    Attributes:
        strict: Raise on invalid operations instead of ignoring them.
    """

    def __init__(
        self,
        *,
        strict: Optional[bool] = None,
        diagnostics: Optional[DiagnosticsHook] = None,
    ) -> None:
        """Create an empty graph.

        Args:
            strict: Fail fast on invalid operations. Defaults to
                ``Config.STRICT_MODE``.
            diagnostics: Callable receiving a message for every ignored
                operation. Defaults to the console logger when
                ``Config.DIAGNOSTICS`` is set, otherwise nothing is reported.
        """
        self.strict = Config.STRICT_MODE if strict is None else strict
        self._diagnostics = diagnostics
        self._nodes: Dict[int, NodeData] = {}
        self._edges: Dict[EdgeKey, EdgeData] = {}
        self._out: Dict[int, Set[int]] = {}
        self._in: Dict[int, Set[int]] = {}
        self._mc = 0

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, node: NodeData) -> bool:
        """Insert ``node`` under its key.

        Returns False (and leaves the graph untouched) if the key is taken.
        """
        if node.key in self._nodes:
            self._reject(DuplicateNodeError(node.key))
            return False
        self._nodes[node.key] = node
        self._out[node.key] = set()
        self._in[node.key] = set()
        self._mc += 1
        return True

    def get_node(self, key: int) -> Optional[NodeData]:
        return self._nodes.get(key)

    def nodes(self) -> Tuple[NodeData, ...]:
        """Snapshot of every node in the graph."""
        return tuple(self._nodes.values())

    def remove_node(self, key: int) -> Optional[NodeData]:
        """Delete a node together with every edge touching it.

        Runs in O(degree). Returns the removed node, or None if absent.
        """
        if key not in self._nodes:
            return None
        # Snapshot both buckets first; remove_edge mutates them.
        touching = [(key, dest) for dest in self._out[key]]
        touching.extend((src, key) for src in self._in[key])
        for src, dest in touching:
            self.remove_edge(src, dest)
        del self._out[key]
        del self._in[key]
        self._mc += 1
        return self._nodes.pop(key)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def connect(self, src: int, dest: int, weight: float) -> bool:
        """Create or update the edge ``src -> dest``.

        Re-connecting an existing pair replaces its weight; the edge count only
        grows for a new pair. Returns False if the call was ignored.
        """
        if src not in self._nodes:
            self._reject(NodeNotFoundError(src, context=f"connect {src} -> {dest}"))
            return False
        if dest not in self._nodes:
            self._reject(NodeNotFoundError(dest, context=f"connect {src} -> {dest}"))
            return False
        if src == dest:
            self._reject(SelfLoopError(src))
            return False
        # NaN compares false against everything, so test for the accepted range
        if not weight >= 0:
            self._reject(NegativeWeightError(src, dest, weight))
            return False

        self._edges[(src, dest)] = EdgeData(src, dest, weight)
        self._out[src].add(dest)
        self._in[dest].add(src)
        self._mc += 1
        return True

    def get_edge(self, src: int, dest: int) -> Optional[EdgeData]:
        return self._edges.get((src, dest))

    def get_outgoing(self, key: int) -> Tuple[EdgeData, ...]:
        """Edges leaving ``key`` in O(degree). Empty if the node is absent."""
        return tuple(self._edges[(key, dest)] for dest in self._out.get(key, ()))

    def get_incoming(self, key: int) -> Tuple[EdgeData, ...]:
        """Edges entering ``key`` in O(degree). Empty if the node is absent."""
        return tuple(self._edges[(src, key)] for src in self._in.get(key, ()))

    def remove_edge(self, src: int, dest: int) -> Optional[EdgeData]:
        """Delete the edge ``src -> dest``. Returns it, or None if absent."""
        edge = self._edges.pop((src, dest), None)
        if edge is None:
            return None
        self._out[src].discard(dest)
        self._in[dest].discard(src)
        self._mc += 1
        return edge

    # ------------------------------------------------------------------
    # Counters
    # ------------------------------------------------------------------

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def mutation_count(self) -> int:
        """Number of successful structural changes since creation.

        Every added or removed node, connected (or re-weighted) edge and
        removed edge counts once. Ignored operations do not count.
        """
        return self._mc

    # ------------------------------------------------------------------
    # Copying, equality, rendering
    # ------------------------------------------------------------------

    def copy(self) -> DirectedWeightedGraph:
        """Return an independent deep copy.

        Nodes and edges are value-copied, counters are carried over as-is and
        no container is shared with ``self``.
        """
        clone = DirectedWeightedGraph(strict=self.strict, diagnostics=self._diagnostics)
        clone._nodes = {key: node.copy() for key, node in self._nodes.items()}
        clone._edges = {key: edge.copy() for key, edge in self._edges.items()}
        clone._out = {key: set(bucket) for key, bucket in self._out.items()}
        clone._in = {key: set(bucket) for key, bucket in self._in.items()}
        clone._mc = self._mc
        return clone

    def __deepcopy__(self, memo: dict) -> DirectedWeightedGraph:
        clone = self.copy()
        memo[id(self)] = clone
        return clone

    def __eq__(self, other: object) -> bool:
        # Incoming buckets are derivable from outgoing ones and the mutation
        # counter is an observation aid, so neither takes part.
        if not isinstance(other, DirectedWeightedGraph):
            return NotImplemented
        return (
            self.edge_count() == other.edge_count()
            and self._nodes == other._nodes
            and self._out == other._out
            and self._edges == other._edges
        )

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[NodeData]:
        return iter(self.nodes())

    def describe(self) -> str:
        """Render every node with its outgoing and incoming edges."""
        lines = []
        for key in self._nodes:
            outgoing = ", ".join(f"{e.dest} ({e.weight})" for e in self.get_outgoing(key))
            incoming = ", ".join(f"{e.src} ({e.weight})" for e in self.get_incoming(key))
            lines.append(f"{key} --> out [{outgoing}]")
            lines.append(f"{key} --> in [{incoming}]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"DirectedWeightedGraph(nodes={self.node_count()}, "
            f"edges={self.edge_count()}, mc={self._mc})"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reject(self, error: GraphError) -> None:
        if self.strict:
            raise error
        if self._diagnostics is not None:
            self._diagnostics(str(error))
        elif Config.DIAGNOSTICS:
            log_error(str(error))
