"""Pydantic schemas for graph snapshots.

These models mirror the dataclasses in ``types.py`` but keep graph snapshots
serializable. ``GraphState`` also knows the arena JSON layout emitted by the
game server (``{"Nodes": [...], "Edges": [...]}``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .container import DirectedWeightedGraph
from .types import EdgeData, GeoLocation, NodeData


class GeoLocationState(BaseModel):
    """A point in graph space."""

    x: float
    y: float
    z: float = 0.0

    @classmethod
    def parse_pos(cls, raw: Any) -> Optional[GeoLocationState]:
        """Parse a position in any of the accepted arena forms.

        Accepts ``"x,y,z"`` / ``"x,y"`` strings, ``[x, y]`` / ``[x, y, z]``
        sequences and ``{"x": .., "y": .., "z": ..}`` dicts. ``None`` means the
        node has no location.

        Raises:
            ValueError: If the value is in none of these forms.
        """
        if raw is None:
            return None
        if isinstance(raw, str):
            parts = [part.strip() for part in raw.split(",")]
        elif isinstance(raw, (list, tuple)):
            parts = list(raw)
        elif isinstance(raw, dict):
            if "x" not in raw or "y" not in raw:
                raise ValueError(f"Position dict needs 'x' and 'y': {raw!r}")
            return cls(x=raw["x"], y=raw["y"], z=raw.get("z", 0.0))
        else:
            raise ValueError(f"Unsupported position value: {raw!r}")

        if len(parts) not in (2, 3):
            raise ValueError(f"Position must have 2 or 3 components: {raw!r}")
        try:
            coords = [float(part) for part in parts]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Position components must be numbers: {raw!r}") from exc
        return cls(x=coords[0], y=coords[1], z=coords[2] if len(coords) == 3 else 0.0)

    def to_pos(self) -> str:
        return f"{self.x},{self.y},{self.z}"


class NodeState(BaseModel):
    """Represents a node of a directed weighted graph."""

    key: int
    location: Optional[GeoLocationState] = None
    weight: float = 0.0
    tag: int = 0
    info: str = ""

    @classmethod
    def from_node(cls, node: NodeData) -> NodeState:
        location = None
        if node.location is not None:
            location = GeoLocationState(
                x=node.location.x, y=node.location.y, z=node.location.z
            )
        return cls(
            key=node.key,
            location=location,
            weight=node.weight,
            tag=node.tag,
            info=node.info,
        )

    def to_node(self) -> NodeData:
        location = None
        if self.location is not None:
            location = GeoLocation(self.location.x, self.location.y, self.location.z)
        return NodeData(
            key=self.key,
            location=location,
            weight=self.weight,
            tag=self.tag,
            info=self.info,
        )


class EdgeState(BaseModel):
    """Represents a directed edge ``src -> dest``."""

    src: int
    dest: int
    weight: float = Field(..., description="Traversal cost; the graph rejects values < 0")

    @classmethod
    def from_edge(cls, edge: EdgeData) -> EdgeState:
        return cls(src=edge.src, dest=edge.dest, weight=edge.weight)


class GraphState(BaseModel):
    """Serializable snapshot of a whole graph."""

    nodes: List[NodeState] = Field(default_factory=list)
    edges: List[EdgeState] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: DirectedWeightedGraph) -> GraphState:
        """Snapshot ``graph`` with nodes sorted by key and edges by (src, dest)."""
        nodes = sorted(graph.nodes(), key=lambda node: node.key)
        edges: List[EdgeState] = []
        for node in nodes:
            for edge in sorted(graph.get_outgoing(node.key), key=lambda e: e.dest):
                edges.append(EdgeState.from_edge(edge))
        return cls(nodes=[NodeState.from_node(node) for node in nodes], edges=edges)

    def to_graph(self, *, strict: Optional[bool] = None) -> DirectedWeightedGraph:
        """Build a new graph by adding every node, then connecting every edge."""
        graph = DirectedWeightedGraph(strict=strict)
        for node in self.nodes:
            graph.add_node(node.to_node())
        for edge in self.edges:
            graph.connect(edge.src, edge.dest, edge.weight)
        return graph

    def to_arena_dict(self) -> Dict[str, Any]:
        """Render in the game server layout."""
        nodes: List[Dict[str, Any]] = []
        for node in self.nodes:
            entry: Dict[str, Any] = {"id": node.key}
            if node.location is not None:
                entry["pos"] = node.location.to_pos()
            nodes.append(entry)
        edges = [{"src": e.src, "w": e.weight, "dest": e.dest} for e in self.edges]
        return {"Edges": edges, "Nodes": nodes}

    @classmethod
    def from_arena_dict(cls, data: Dict[str, Any]) -> GraphState:
        """Parse the game server layout.

        Raises:
            ValueError: If ``Nodes``/``Edges`` are missing or an entry lacks a
                required field.
        """
        raw_nodes = data.get("Nodes", data.get("nodes"))
        raw_edges = data.get("Edges", data.get("edges"))
        if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
            raise ValueError("Arena graph must contain 'Nodes' and 'Edges' lists")

        nodes: List[NodeState] = []
        for item in raw_nodes:
            if not isinstance(item, dict) or "id" not in item:
                raise ValueError(f"Arena node entry needs an 'id': {item!r}")
            nodes.append(
                NodeState(
                    key=item["id"],
                    location=GeoLocationState.parse_pos(item.get("pos")),
                )
            )

        edges: List[EdgeState] = []
        for item in raw_edges:
            if not isinstance(item, dict):
                raise ValueError(f"Arena edge entry must be an object: {item!r}")
            missing = [name for name in ("src", "dest", "w") if name not in item]
            if missing:
                raise ValueError(f"Arena edge entry missing fields {missing}: {item!r}")
            edges.append(EdgeState(src=item["src"], dest=item["dest"], weight=item["w"]))

        return cls(nodes=nodes, edges=edges)
