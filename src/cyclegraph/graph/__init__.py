"""
Graph subsystem for cyclegraph.

Defines nodes whose edge lists are filled in after construction, the two
ownership strategies that keep them alive, the builder that wires them
(including back-edges), and cycle-safe traversal.
"""

from cyclegraph.graph.edge_cell import EdgeCell
from cyclegraph.graph.graph_schema import BaseNode, Node
from cyclegraph.graph.arena import NodeArena, ArenaNode
from cyclegraph.graph.graph_builder import GraphBuilder, build
from cyclegraph.graph.graph_query import TraversalEngine, traverse
from cyclegraph.graph.graph_store import (
    GraphStore,
    to_digraph,
    is_cyclic,
    find_back_edges,
    reachable_count,
)

__all__ = [
    "EdgeCell",
    "BaseNode",
    "Node",
    "NodeArena",
    "ArenaNode",
    "GraphBuilder",
    "build",
    "TraversalEngine",
    "traverse",
    "GraphStore",
    "to_digraph",
    "is_cyclic",
    "find_back_edges",
    "reachable_count",
]
