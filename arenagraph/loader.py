"""
Graph loading and saving for JSON arena descriptions.

This module provides GraphLoader for converting the game server's arena JSON
into a DirectedWeightedGraph and back. The loader is a plain client of the
graph: it only calls add_node and connect, so every container rule (no
duplicate keys, no self-loops, no negative weights) applies to loaded data.

Arena file structure:
```json
{
  "Nodes": [{"id": 0, "pos": "35.18,32.10,0.0"}, ...],
  "Edges": [{"src": 0, "w": 1.29, "dest": 1}, ...]
}
```

Usage:
    loader = GraphLoader()
    graph = loader.load("A0")          # reads {graphs_dir}/A0.json
    loader.save(graph, Path("out.json"))
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import Config
from .graph import DirectedWeightedGraph, GraphState
from .logging_utils import log_deterministic, log_error, log_success

PathLike = Union[str, Path]


class GraphLoader:
    """Load and save directed weighted graphs as arena JSON files.

    Directory structure:
    - Default: Config.GRAPHS_DIR ({PROJECT_ROOT}/data unless overridden)
    - Override via constructor: GraphLoader(Path("/custom/graphs"))
    - Graph files: {name}.json (e.g., "A0.json")

    Validation:
    - Required fields: Nodes, Edges; every node needs "id", every edge
      "src", "dest" and "w"
    - Raises ValueError if the file is malformed
    - Edges the graph refuses (self-loop, negative weight, unknown endpoint)
      are skipped and logged, matching the container's own policy
    """

    def __init__(self, graphs_dir: Optional[Path] = None, *, verbose: bool = False):
        """Initialize graph loader.

        Args:
            graphs_dir: Directory containing arena files. Defaults to
                        Config.GRAPHS_DIR
            verbose: Print a summary line after each load
        """
        self.graphs_dir = Path(graphs_dir) if graphs_dir is not None else Config.GRAPHS_DIR
        self.verbose = verbose

    def resolve(self, name_or_path: PathLike) -> Path:
        """Map a graph name or explicit path to a file path.

        Anything with a ``.json`` suffix or a directory component is treated as
        a path; a bare name is looked up in ``graphs_dir``.
        """
        candidate = Path(name_or_path)
        if candidate.suffix == ".json" or len(candidate.parts) > 1:
            return candidate
        return self.graphs_dir / f"{candidate}.json"

    def load(self, name_or_path: PathLike) -> DirectedWeightedGraph:
        """Load a graph by name or path.

        Args:
            name_or_path: Graph name (without .json) or path to a JSON file

        Returns:
            A new DirectedWeightedGraph holding the file's nodes and edges

        Raises:
            FileNotFoundError: If the graph file doesn't exist
            ValueError: If the JSON is missing required fields or malformed
            json.JSONDecodeError: If the file contains invalid JSON
        """
        path = self.resolve(name_or_path)
        if not path.exists():
            raise FileNotFoundError(f"Graph '{name_or_path}' not found at {path}")

        data = json.loads(path.read_text())
        graph = self.parse(data)

        if self.verbose:
            log_deterministic(
                f"Loaded graph {path.stem}: {graph.node_count()} nodes, "
                f"{graph.edge_count()} edges"
            )
        return graph

    def parse(self, data: Dict[str, Any]) -> DirectedWeightedGraph:
        """Build a graph from an already-decoded arena dict.

        Raises:
            ValueError: If required fields are missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError("Arena graph JSON must be an object")

        state = GraphState.from_arena_dict(data)
        graph = DirectedWeightedGraph(strict=False)

        for node in state.nodes:
            graph.add_node(node.to_node())

        skipped: List[str] = []
        for edge in state.edges:
            if not graph.connect(edge.src, edge.dest, edge.weight):
                skipped.append(f"{edge.src}->{edge.dest}")

        if skipped and Config.DIAGNOSTICS:
            log_error(f"Skipped {len(skipped)} invalid edge(s): {', '.join(skipped)}")
        return graph

    def save(self, graph: DirectedWeightedGraph, path: PathLike) -> Path:
        """Write ``graph`` as an arena JSON file.

        Nodes are written sorted by key and edges by (src, dest) so saved files
        diff cleanly.

        Returns:
            The path written
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = GraphState.from_graph(graph).to_arena_dict()
        target.write_text(json.dumps(payload, indent=2))

        if self.verbose:
            log_success(f"Saved graph to {target}")
        return target

    def list_graphs(self) -> List[str]:
        """List all available graph files.

        Returns:
            Sorted list of graph names (without .json extension)
        """
        if not self.graphs_dir.exists():
            return []

        return sorted(
            f.stem for f in self.graphs_dir.glob("*.json")
            if not f.name.startswith("_")
        )


def load_graph(name_or_path: PathLike) -> DirectedWeightedGraph:
    """Convenience function to load a graph.

    Args:
        name_or_path: Graph name or path to load

    Returns:
        The loaded DirectedWeightedGraph
    """
    loader = GraphLoader()
    return loader.load(name_or_path)
