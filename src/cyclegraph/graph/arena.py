from __future__ import annotations

import logging
import weakref
from typing import Iterator, List, Optional

from cyclegraph.config.settings import OwnershipStrategy
from cyclegraph.errors import DanglingReferenceError, MixedOwnershipError
from cyclegraph.graph.graph_schema import BaseNode


class NodeArena:
    """
    Bulk owner for every node of one graph.

    The arena holds the owning references to its nodes; edges between nodes
    are weak references into it. Every node handle keeps its arena alive,
    so the graph lasts as long as any handle does. ``close()`` releases
    every node at once; after that, every edge dereference raises
    DanglingReferenceError.

    Use it as a context manager to bound the graph to a block.
    """

    def __init__(self, *, checked: bool = True) -> None:
        self._nodes: List[ArenaNode] = []
        self._checked = checked
        self._closed = False

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def alloc(self, label: str) -> "ArenaNode":
        if self._closed:
            raise DanglingReferenceError("cannot allocate from a closed arena")
        node = ArenaNode(label, arena=self, checked=self._checked)
        self._nodes.append(node)
        return node

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    @property
    def checked(self) -> bool:
        return self._checked

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """
        Release every node at once.

        Handles still held by callers remain usable for their label, but
        their edges no longer resolve.
        """
        if self._closed:
            return
        count = len(self._nodes)
        self._nodes.clear()
        self._closed = True
        logging.getLogger("cyclegraph.arena").debug(
            "arena closed: released %s node(s)", count
        )

    def __enter__(self) -> "NodeArena":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator["ArenaNode"]:
        return iter(list(self._nodes))

    def __contains__(self, node: object) -> bool:
        return any(n is node for n in self._nodes)


class ArenaNode(BaseNode):
    """
    Arena-owned node. Edges are non-owning references into the arena.

    Only nodes allocated from the same arena may be linked.
    """

    strategy = OwnershipStrategy.ARENA

    def __init__(self, label: str, *, arena: NodeArena, checked: bool = True) -> None:
        super().__init__(label, checked=checked)
        self._arena = arena

    @property
    def arena(self) -> Optional[NodeArena]:
        if self._arena.closed:
            return None
        return self._arena

    def _check_compatible(self, target: BaseNode) -> None:
        super()._check_compatible(target)
        own = self._live_arena()
        if target._arena is not own:  # type: ignore[attr-defined]
            raise MixedOwnershipError(
                f"cannot link {self.label!r} to {target.label!r}: "
                "nodes belong to different arenas"
            )

    def _wrap(self, target: BaseNode) -> "weakref.ReferenceType[BaseNode]":
        return weakref.ref(target)

    def _resolve(self, stored: "weakref.ReferenceType[BaseNode]") -> BaseNode:
        self._live_arena()
        target = stored()
        if target is None:
            raise DanglingReferenceError(
                f"edge from {self.label!r} points to a node its arena no longer owns"
            )
        return target

    def _live_arena(self) -> NodeArena:
        arena = self.arena
        if arena is None:
            raise DanglingReferenceError(
                f"arena owning {self.label!r} has been closed"
            )
        return arena
