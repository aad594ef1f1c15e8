"""Tests for loading and saving arena graphs via GraphLoader."""

import json
from pathlib import Path

import pytest

from arenagraph.graph import DirectedWeightedGraph, GeoLocation, NodeData
from arenagraph.config import Config
from arenagraph.loader import GraphLoader, load_graph


DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def test_loader_reads_bundled_arena():
    loader = GraphLoader(graphs_dir=DATA_DIR)
    graph = loader.load("A0")

    assert graph.node_count() == 6
    assert graph.edge_count() == 12
    assert graph.get_edge(0, 1).weight == pytest.approx(1.4004465106761335)
    assert graph.get_node(3).location.x == pytest.approx(35.197528356739305)
    assert {e.src for e in graph.get_incoming(0)} == {1, 5}
    assert "A0" in loader.list_graphs()


def test_loader_save_then_load_from_path(tmp_path):
    graph = DirectedWeightedGraph(strict=False)
    graph.add_node(NodeData(key=10, location=GeoLocation(1.5, 2.5)))
    graph.add_node(NodeData(key=11, location=GeoLocation(3.0, 4.0)))
    graph.connect(10, 11, 0.75)

    loader = GraphLoader(graphs_dir=tmp_path)
    written = loader.save(graph, tmp_path / "nested" / "arena.json")

    raw = json.loads(written.read_text())
    assert raw["Edges"] == [{"src": 10, "w": 0.75, "dest": 11}]
    assert raw["Nodes"][0]["pos"] == "1.5,2.5,0.0"

    assert loader.load(written) == graph


def test_loader_resolves_names_in_graphs_dir(tmp_path):
    (tmp_path / "tiny.json").write_text(
        json.dumps({"Nodes": [{"id": 1}, {"id": 2}], "Edges": [{"src": 2, "w": 1, "dest": 1}]})
    )
    (tmp_path / "_draft.json").write_text("{}")

    loader = GraphLoader(graphs_dir=tmp_path)
    assert loader.list_graphs() == ["tiny"]
    assert loader.load("tiny").get_edge(2, 1).weight == 1.0


def test_loader_skips_edges_the_graph_rejects(monkeypatch, capsys):
    monkeypatch.setattr(Config, "DIAGNOSTICS", True)
    loader = GraphLoader()
    graph = loader.parse(
        {
            "Nodes": [{"id": 0}, {"id": 1}, {"id": 1}],
            "Edges": [
                {"src": 0, "w": 1.0, "dest": 1},
                {"src": 0, "w": 2.0, "dest": 0},
                {"src": 1, "w": -3.0, "dest": 0},
                {"src": 1, "w": 1.0, "dest": 9},
            ],
        }
    )

    assert graph.node_count() == 2
    assert graph.edge_count() == 1
    out = capsys.readouterr().out
    assert "Skipped 3 invalid edge(s)" in out
    assert "already on the graph" in out


def test_loader_missing_file(tmp_path):
    loader = GraphLoader(graphs_dir=tmp_path)
    with pytest.raises(FileNotFoundError):
        loader.load("nope")
    assert GraphLoader(graphs_dir=tmp_path / "absent").list_graphs() == []


def test_loader_rejects_non_object_json(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        GraphLoader().load(path)


def test_verbose_loader_reports_summary(monkeypatch, capsys):
    monkeypatch.setenv("ARENAGRAPH_NO_COLOR", "1")
    GraphLoader(graphs_dir=DATA_DIR, verbose=True).load("A0")
    assert "[•] Loaded graph A0: 6 nodes, 12 edges" in capsys.readouterr().out


def test_load_graph_uses_configured_directory(monkeypatch):
    monkeypatch.setattr(Config, "GRAPHS_DIR", DATA_DIR)
    assert load_graph("A0").node_count() == 6


def test_loader_rejects_nan_weight_from_file(tmp_path):
    path = tmp_path / "nan.json"
    path.write_text(
        '{"Nodes": [{"id": 0}, {"id": 1}], '
        '"Edges": [{"src": 0, "w": NaN, "dest": 1}, {"src": 1, "w": 2.0, "dest": 0}]}'
    )

    graph = GraphLoader(graphs_dir=tmp_path).load("nan")

    assert graph.get_edge(0, 1) is None
    assert graph.get_edge(1, 0).weight == 2.0
    assert graph.edge_count() == 1


def test_loader_is_silent_when_diagnostics_disabled(monkeypatch, capsys):
    monkeypatch.setattr(Config, "DIAGNOSTICS", False)
    graph = GraphLoader().parse(
        {
            "Nodes": [{"id": 0}, {"id": 0}, {"id": 1}],
            "Edges": [{"src": 0, "w": 1.0, "dest": 0}, {"src": 0, "w": 1.0, "dest": 1}],
        }
    )

    assert graph.edge_count() == 1
    assert capsys.readouterr().out == ""


def test_loader_reports_each_rejected_edge_once(monkeypatch, capsys):
    monkeypatch.setattr(Config, "DIAGNOSTICS", True)
    monkeypatch.setenv("ARENAGRAPH_NO_COLOR", "1")
    GraphLoader().parse(
        {"Nodes": [{"id": 0}], "Edges": [{"src": 0, "w": 1.0, "dest": 0}]}
    )

    out = capsys.readouterr().out
    assert out.count("Self-loop on node 0") == 1
    assert "[!] Skipped 1 invalid edge(s): 0->0" in out
