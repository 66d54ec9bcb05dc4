"""Tests for graph partitioning and precondition checks."""

from __future__ import annotations

import pytest

from scngen.errors import GraphError
from scngen.models import CodeEdge, CodeGraph, CodeNode
from scngen.partition import partition_graph
from tests._fixtures.graph_builder import GraphBuilder


def test_partition_groups_entities_under_their_file(graph_builder: GraphBuilder) -> None:
    graph_builder.entity("b.2", "b.ts", "second", start_line=8)
    graph_builder.file("b", "b.ts")
    graph_builder.file("a", "a.ts")
    graph_builder.entity("b.1", "b.ts", "first", start_line=2)

    partition = partition_graph(graph_builder.build())

    assert [group.file.id for group in partition.files] == ["a", "b"]
    assert partition.files[0].entities == ()
    assert [node.id for node in partition.files[1].entities] == ["b.1", "b.2"]


def test_partition_computes_containment_depth(graph_builder: GraphBuilder) -> None:
    graph_builder.file("f", "page.html")
    graph_builder.entity("html", "page.html", "html", type="html-element")
    graph_builder.entity("body", "page.html", "body", type="html-element", parent_id="html")
    graph_builder.entity("div", "page.html", "div", type="html-element", parent_id="body")

    partition = partition_graph(graph_builder.build())

    assert partition.depth_of("html") == 0
    assert partition.depth_of("body") == 1
    assert partition.depth_of("div") == 2


def test_entity_without_file_node_is_rejected(graph_builder: GraphBuilder) -> None:
    graph_builder.file("a", "a.ts")
    graph_builder.entity("orphan", "ghost.ts", "orphan")

    with pytest.raises(GraphError, match="ghost.ts"):
        partition_graph(graph_builder.build())


def test_duplicate_file_paths_are_rejected(graph_builder: GraphBuilder) -> None:
    graph_builder.file("a", "same.ts")
    graph_builder.file("b", "same.ts")

    with pytest.raises(GraphError, match="share path"):
        partition_graph(graph_builder.build())


def test_missing_name_or_path_is_rejected() -> None:
    nameless = CodeGraph.from_nodes([CodeNode(id="a", file_path="a.ts", type="file", name="")])
    pathless = CodeGraph.from_nodes([CodeNode(id="a", file_path="", type="file", name="a")])

    with pytest.raises(GraphError, match="no name"):
        partition_graph(nameless)
    with pytest.raises(GraphError, match="no file path"):
        partition_graph(pathless)


def test_mismatched_mapping_key_is_rejected() -> None:
    node = CodeNode(id="real", file_path="a.ts", type="file", name="a.ts")

    with pytest.raises(GraphError, match="declares id 'real'"):
        partition_graph(CodeGraph(nodes={"alias": node}))


def test_dangling_edge_is_rejected() -> None:
    node = CodeNode(id="a", file_path="a.ts", type="file", name="a.ts")
    graph = CodeGraph.from_nodes([node], [CodeEdge("ghost", "a", "imports")])

    with pytest.raises(GraphError, match="unknown node 'ghost'"):
        partition_graph(graph)


def test_parent_in_other_file_is_rejected(graph_builder: GraphBuilder) -> None:
    graph_builder.file("a", "a.ts")
    graph_builder.file("b", "b.ts")
    graph_builder.entity("outer", "a.ts", "Outer", type="class")
    graph_builder.entity("inner", "b.ts", "inner", parent_id="outer")

    with pytest.raises(GraphError, match="same file"):
        partition_graph(graph_builder.build())


def test_containment_cycle_is_rejected(graph_builder: GraphBuilder) -> None:
    graph_builder.file("a", "a.ts")
    graph_builder.entity("x", "a.ts", "x", parent_id="y")
    graph_builder.entity("y", "a.ts", "y", parent_id="x")

    with pytest.raises(GraphError, match="cycle"):
        partition_graph(graph_builder.build())
