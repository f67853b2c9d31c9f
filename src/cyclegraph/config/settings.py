from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

# ---------------------------------------------------------------------
# Ownership policy
# ---------------------------------------------------------------------


class OwnershipStrategy(str, Enum):
    """
    How nodes are kept alive and how edges refer to them.

    SHARED: every handle and every edge is a counted reference.
    ARENA: a NodeArena owns every node; edges are non-owning references.
    """

    SHARED = "shared"
    ARENA = "arena"


# ---------------------------------------------------------------------
# Graph construction
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how nodes are allocated and how edge lists are guarded.
    """

    strategy: OwnershipStrategy = OwnershipStrategy.SHARED
    borrow_checks: bool = True


# ---------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class TraversalConfig:
    """
    Controls the form of depth-first traversal.

    Both modes produce the same visit order; "iterative" is not bounded
    by the interpreter's recursion limit.
    """

    mode: Literal["iterative", "recursive"] = "iterative"


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class CycleGraphConfig:
    """
    Root configuration object for cyclegraph.

    Constructed explicitly (or via ``load_config``) and passed to the
    builder and traversal engine.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
