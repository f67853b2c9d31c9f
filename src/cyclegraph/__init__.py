"""
cyclegraph
==========

Directed graphs whose edges are discovered after their nodes exist.

Nodes are created first and have edges appended later, including
back-edges that close cycles. Once built, the graph is traversed
read-only with a depth-first walk that visits each reachable label once.

Public API:
- Node, NodeArena
- GraphBuilder, build
- TraversalEngine, traverse
- GraphStore
"""

from cyclegraph.config import CycleGraphConfig, OwnershipStrategy, load_config
from cyclegraph.errors import (
    CycleGraphError,
    EmptyEdgeListError,
    BorrowError,
    ReentrantMutationError,
    AlreadyMutablyBorrowedError,
    MixedOwnershipError,
    DanglingReferenceError,
    UnknownNodeError,
)
from cyclegraph.graph.graph_schema import BaseNode, Node
from cyclegraph.graph.arena import NodeArena, ArenaNode
from cyclegraph.graph.graph_builder import GraphBuilder, build
from cyclegraph.graph.graph_query import TraversalEngine, traverse
from cyclegraph.graph.graph_store import GraphStore

__all__ = [
    "CycleGraphConfig",
    "OwnershipStrategy",
    "load_config",
    "CycleGraphError",
    "EmptyEdgeListError",
    "BorrowError",
    "ReentrantMutationError",
    "AlreadyMutablyBorrowedError",
    "MixedOwnershipError",
    "DanglingReferenceError",
    "UnknownNodeError",
    "BaseNode",
    "Node",
    "NodeArena",
    "ArenaNode",
    "GraphBuilder",
    "build",
    "TraversalEngine",
    "traverse",
    "GraphStore",
]

__version__ = "0.1.0"
