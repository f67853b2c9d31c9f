import pytest

from cyclegraph.config.settings import GraphConfig, OwnershipStrategy
from cyclegraph.errors import UnknownNodeError
from cyclegraph.graph.arena import ArenaNode, NodeArena
from cyclegraph.graph.graph_builder import GraphBuilder, build
from cyclegraph.graph.graph_schema import Node


def _edge_labels(node):
    return [n.label for n in node.edges()]


def test_build_returns_root_a_with_example_edges(builder):
    root = builder.build()

    assert root.label == "A"
    assert _edge_labels(root) == ["B", "C", "D"]
    assert _edge_labels(builder.get("C")) == ["E", "F", "A"]
    for leaf in "BDEF":
        assert builder.get(leaf).is_leaf


def test_back_edge_points_at_the_same_root_object(builder):
    root = builder.build()

    assert builder.get("C").edges()[2] is root


def test_build_creates_six_shared_nodes(builder):
    builder.build()

    nodes = builder.nodes()
    assert [n.label for n in nodes] == ["A", "B", "C", "D", "E", "F"]
    assert all(isinstance(n, Node) for n in nodes)


def test_module_level_build_is_parameterless():
    root = build()

    assert root.label == "A"
    assert root.first_edge().label == "B"


def test_add_node_is_create_or_get(builder):
    first = builder.add_node("X")

    assert builder.add_node("X") is first
    assert len(builder.nodes()) == 1


def test_edges_require_existing_nodes(builder):
    builder.add_node("A")

    with pytest.raises(UnknownNodeError) as info:
        builder.add_edge("A", "missing")

    assert info.value.label == "missing"
    assert isinstance(info.value, KeyError)
    assert builder.get("A").is_leaf


def test_incremental_wiring_supports_back_edges(builder):
    builder.add_nodes(["root", "child"])
    builder.add_edges([("root", "child"), ("child", "root"), ("child", "child")])

    assert _edge_labels(builder.get("child")) == ["root", "child"]


def test_arena_strategy_allocates_from_arena(arena_builder, arena):
    root = arena_builder.build()

    assert isinstance(root, ArenaNode)
    assert len(arena) == 6
    assert root in arena
    assert arena_builder.arena is arena


def test_arena_strategy_creates_arena_when_none_given():
    builder = GraphBuilder(GraphConfig(strategy=OwnershipStrategy.ARENA))
    root = builder.build()

    assert isinstance(builder.arena, NodeArena)
    assert root.first_edge().label == "B"


def test_shared_strategy_rejects_an_arena():
    with pytest.raises(ValueError):
        GraphBuilder(GraphConfig(strategy=OwnershipStrategy.SHARED), arena=NodeArena())


def test_borrow_checks_flag_reaches_nodes():
    builder = GraphBuilder(GraphConfig(borrow_checks=False))
    root = builder.build()

    with root.borrow_edges():
        root.add_edge(builder.get("E"))

    assert root.edge_count() == 4


def test_build_logs_summary(builder, caplog):
    with caplog.at_level("INFO", logger="cyclegraph.build"):
        builder.build()

    assert "strategy=shared nodes=6 edges=6" in caplog.text


def test_build_twice_returns_same_graph(builder, caplog):
    with caplog.at_level("INFO", logger="cyclegraph.build"):
        first = builder.build()
        second = builder.build()

    assert second is first
    assert _edge_labels(first) == ["B", "C", "D"]
    assert _edge_labels(builder.get("C")) == ["E", "F", "A"]
    assert caplog.text.count("graph built") == 1


def test_caller_arena_owns_builder_nodes(arena_builder, arena):
    root = arena_builder.build()
    extra = arena.alloc("G")

    builder_d = arena_builder.get("D")
    builder_d.add_edge(extra)

    assert len(arena) == 7
    assert _edge_labels(builder_d) == ["G"]
    assert root.arena is arena


def test_arena_with_mismatched_borrow_checks_is_rejected():
    with pytest.raises(ValueError, match="borrow checks"):
        GraphBuilder(
            GraphConfig(strategy=OwnershipStrategy.ARENA, borrow_checks=False),
            arena=NodeArena(checked=True),
        )


def test_unchecked_arena_is_accepted_with_unchecked_config():
    arena = NodeArena(checked=False)
    builder = GraphBuilder(
        GraphConfig(strategy=OwnershipStrategy.ARENA, borrow_checks=False),
        arena=arena,
    )

    assert builder.arena is arena
