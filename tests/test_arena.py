import gc

import pytest

from cyclegraph.config.settings import GraphConfig, OwnershipStrategy
from cyclegraph.errors import DanglingReferenceError, MixedOwnershipError
from cyclegraph.graph.arena import NodeArena
from cyclegraph.graph.graph_builder import GraphBuilder
from cyclegraph.graph.graph_query import TraversalEngine


def test_alloc_and_link_within_one_arena(arena):
    a = arena.alloc("A")
    b = arena.alloc("B")

    a.add_edge(b)
    b.add_edge(a)

    assert a.first_edge() is b
    assert b.first_edge() is a
    assert list(arena) == [a, b]


def test_nodes_from_different_arenas_cannot_be_linked(arena):
    with NodeArena() as other:
        with pytest.raises(MixedOwnershipError):
            arena.alloc("A").add_edge(other.alloc("B"))


def test_edges_dangle_after_close():
    arena = NodeArena()
    a = arena.alloc("A")
    a.add_edge(arena.alloc("B"))

    arena.close()

    assert arena.closed
    assert len(arena) == 0
    assert a.label == "A"
    assert a.arena is None
    with pytest.raises(DanglingReferenceError):
        a.first_edge()
    with pytest.raises(DanglingReferenceError):
        a.edges()


def test_traversal_over_closed_arena_fails_loudly():
    arena = NodeArena()
    a = arena.alloc("A")
    a.add_edge(arena.alloc("B"))
    arena.close()

    with pytest.raises(DanglingReferenceError):
        TraversalEngine().labels(a)


def test_closed_arena_refuses_allocation_and_edges():
    arena = NodeArena()
    a = arena.alloc("A")
    arena.close()

    with pytest.raises(DanglingReferenceError):
        arena.alloc("B")
    with pytest.raises(DanglingReferenceError):
        a.add_edge(a)


def test_handle_keeps_its_arena_alive():
    arena = NodeArena()
    a = arena.alloc("A")
    a.add_edge(arena.alloc("B"))

    del arena
    gc.collect()

    assert a.arena is not None
    assert a.first_edge().label == "B"


def test_graph_from_temporary_builder_stays_traversable():
    root = GraphBuilder(GraphConfig(strategy=OwnershipStrategy.ARENA)).build()
    gc.collect()

    assert TraversalEngine().labels(root) == ["A", "B", "C", "E", "F", "D"]


def test_context_manager_bounds_graph_lifetime():
    with NodeArena() as arena:
        root = arena.alloc("A")
        root.add_edge(root)
        assert TraversalEngine().labels(root) == ["A"]

    assert arena.closed
    assert repr(root) == "ArenaNode('A', edges=<unavailable>)"


def test_close_is_idempotent(arena):
    arena.alloc("A")
    arena.close()
    arena.close()

    assert arena.closed
