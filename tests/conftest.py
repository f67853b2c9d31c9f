from __future__ import annotations

import pytest

from cyclegraph.config.settings import GraphConfig, OwnershipStrategy
from cyclegraph.graph.arena import NodeArena
from cyclegraph.graph.graph_builder import GraphBuilder
from cyclegraph.graph.graph_schema import BaseNode


@pytest.fixture()
def builder() -> GraphBuilder:
    return GraphBuilder()


@pytest.fixture()
def root(builder: GraphBuilder) -> BaseNode:
    return builder.build()


@pytest.fixture()
def arena():
    with NodeArena() as arena:
        yield arena


@pytest.fixture()
def arena_builder(arena: NodeArena) -> GraphBuilder:
    return GraphBuilder(
        GraphConfig(strategy=OwnershipStrategy.ARENA),
        arena=arena,
    )


@pytest.fixture(params=[OwnershipStrategy.SHARED, OwnershipStrategy.ARENA])
def any_builder(request) -> GraphBuilder:
    return GraphBuilder(GraphConfig(strategy=request.param))
