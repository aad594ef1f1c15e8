"""Value types stored in the directed weighted graph.

Nodes carry an integer key plus a payload the container never looks at
(location, weight, tag, info). Edges are immutable so that a value handed
out by a lookup can never drift from what the graph holds.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class GeoLocation:
    """A point in graph space. ``z`` is carried but unused by 2-D consumers."""

    x: float
    y: float
    z: float = 0.0


@dataclass
class NodeData:
    """A graph vertex.

    Only ``key`` matters to the container. The remaining fields are payload
    for consumers (renderers, game logic) and are copied, never interpreted.
    ``key`` is fixed at creation; the payload fields stay writable.
    """

    key: int
    location: Optional[GeoLocation] = None
    weight: float = 0.0
    tag: int = 0
    info: str = ""

    def __setattr__(self, name: str, value: object) -> None:
        # The graph indexes nodes by key; a renamed node would orphan its buckets.
        if name == "key" and "key" in self.__dict__:
            raise AttributeError("NodeData.key cannot change after creation")
        super().__setattr__(name, value)

    def copy(self) -> NodeData:
        """Return a value copy that shares nothing mutable with ``self``."""
        location = replace(self.location) if self.location is not None else None
        return replace(self, location=location)


@dataclass(frozen=True)
class EdgeData:
    """A directed, weighted relation ``src -> dest``."""

    src: int
    dest: int
    weight: float
    tag: int = 0
    info: str = ""

    @property
    def key(self) -> tuple[int, int]:
        return (self.src, self.dest)

    def copy(self) -> EdgeData:
        return replace(self)
