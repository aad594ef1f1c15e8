"""Tests for deep copies and structural equality of graphs."""

import copy

from arenagraph.graph import DirectedWeightedGraph, GeoLocation, NodeData


def build_triangle() -> DirectedWeightedGraph:
    graph = DirectedWeightedGraph(strict=False, diagnostics=lambda message: None)
    for key in (1, 2, 3):
        graph.add_node(NodeData(key=key, location=GeoLocation(key, key * 2.0), tag=key))
    graph.connect(1, 2, 4.0)
    graph.connect(2, 3, 1.5)
    graph.connect(3, 1, 10.0)
    return graph


def test_copy_is_equal_and_keeps_counters():
    graph = build_triangle()
    graph.remove_edge(3, 1)
    graph.connect(3, 1, 2.0)

    clone = graph.copy()

    assert clone == graph
    assert clone.edge_count() == graph.edge_count()
    assert clone.mutation_count() == graph.mutation_count()
    assert clone.node_count() == graph.node_count()


def test_copy_creates_fresh_nodes_and_edges():
    graph = build_triangle()
    clone = graph.copy()

    for node in graph.nodes():
        copied = clone.get_node(node.key)
        assert copied == node
        assert copied is not node
    assert clone.get_edge(1, 2) == graph.get_edge(1, 2)
    assert clone.get_edge(1, 2) is not graph.get_edge(1, 2)


def test_mutating_copy_leaves_source_untouched():
    graph = build_triangle()
    clone = graph.copy()

    clone.remove_node(2)
    clone.connect(3, 1, 99.0)
    clone.add_node(NodeData(key=4))
    clone.connect(4, 1, 1.0)
    clone.get_node(1).tag = 500

    assert graph.node_count() == 3
    assert graph.edge_count() == 3
    assert graph.get_edge(1, 2).weight == 4.0
    assert graph.get_edge(3, 1).weight == 10.0
    assert graph.get_node(4) is None
    assert graph.get_node(1).tag == 1
    assert {e.src for e in graph.get_incoming(1)} == {3}


def test_mutating_source_leaves_copy_untouched():
    graph = build_triangle()
    clone = graph.copy()

    graph.remove_edge(1, 2)
    graph.remove_node(3)

    assert clone.edge_count() == 3
    assert clone.get_edge(1, 2).weight == 4.0
    assert clone.get_node(3) is not None
    assert {e.src for e in clone.get_incoming(1)} == {3}


def test_deepcopy_uses_graph_copy():
    graph = build_triangle()
    clone = copy.deepcopy(graph)

    assert clone == graph
    clone.remove_node(1)
    assert graph.get_node(1) is not None


def test_equality_ignores_mutation_counter():
    first = build_triangle()
    second = build_triangle()
    second.connect(1, 2, 7.0)
    second.connect(1, 2, 4.0)

    assert second.mutation_count() != first.mutation_count()
    assert first == second


def test_equality_detects_weight_and_node_differences():
    first = build_triangle()

    reweighted = build_triangle()
    reweighted.connect(2, 3, 1.25)
    assert first != reweighted

    relabelled = build_triangle()
    relabelled.get_node(3).info = "pokestop"
    assert first != relabelled

    extra_node = build_triangle()
    extra_node.add_node(NodeData(key=9))
    assert first != extra_node


def test_equality_with_other_types():
    assert build_triangle() != "graph"
    assert DirectedWeightedGraph() == DirectedWeightedGraph()
