from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List, Tuple

from cyclegraph.config.settings import OwnershipStrategy
from cyclegraph.errors import (
    CycleGraphError,
    EmptyEdgeListError,
    MixedOwnershipError,
)
from cyclegraph.graph.edge_cell import EdgeCell


class BaseNode(ABC):
    """
    Graph vertex: an immutable label plus an ordered list of outgoing edges.

    Nodes are created empty and have edges appended afterwards, possibly
    after other nodes already refer to them. The edge list lives in an
    ``EdgeCell`` so appends through a shared handle are checked at runtime.

    Subclasses decide what an edge *is* (a counted reference or a
    non-owning one); the public API is identical across strategies.
    """

    strategy: OwnershipStrategy

    def __init__(self, label: str, *, checked: bool = True) -> None:
        self._label = label
        self._edges: EdgeCell[Any] = EdgeCell(checked=checked)

    @property
    def label(self) -> str:
        return self._label

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, target: "BaseNode") -> "BaseNode":
        """
        Append an edge to ``target``.

        ``target`` may be this node or any ancestor; that is how cycles
        are closed. Raises ReentrantMutationError if this node's edges are
        currently borrowed for reading (e.g. mid-traversal) and
        MixedOwnershipError if ``target`` belongs to another strategy.
        """
        self._check_compatible(target)
        self._edges.append(self._wrap(target))
        return self

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def first_edge(self) -> "BaseNode":
        """
        Return the target of the first outgoing edge.

        Raises EmptyEdgeListError when there are no edges.
        """
        with self._edges.borrow() as stored:
            if not stored:
                raise EmptyEdgeListError(self._label)
            return self._resolve(stored[0])

    def edges(self) -> List["BaseNode"]:
        return list(self._acquire_edges_resolved(release=True))

    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def is_leaf(self) -> bool:
        return self.edge_count() == 0

    @contextmanager
    def borrow_edges(self) -> Iterator[Tuple["BaseNode", ...]]:
        """
        Hold a shared borrow of the edge list for the duration of the block.

        Appending to this node inside the block raises ReentrantMutationError.
        """
        targets = self.acquire_edges()
        try:
            yield targets
        finally:
            self.release_edges()

    def acquire_edges(self) -> Tuple["BaseNode", ...]:
        """
        Take a shared borrow and return the resolved edge targets.

        Must be paired with ``release_edges``.
        """
        return self._acquire_edges_resolved(release=False)

    def release_edges(self) -> None:
        self._edges.release_shared()

    def _acquire_edges_resolved(self, *, release: bool) -> Tuple["BaseNode", ...]:
        stored = self._edges.acquire_shared()
        try:
            targets = tuple(self._resolve(s) for s in stored)
        except BaseException:
            self._edges.release_shared()
            raise
        if release:
            self._edges.release_shared()
        return targets

    # ------------------------------------------------------------------
    # Strategy contract
    # ------------------------------------------------------------------

    @abstractmethod
    def _wrap(self, target: "BaseNode") -> Any:
        """
        Turn a target node into the value stored in the edge list.
        """
        raise NotImplementedError

    @abstractmethod
    def _resolve(self, stored: Any) -> "BaseNode":
        """
        Turn a stored edge back into its target node.
        """
        raise NotImplementedError

    def _check_compatible(self, target: "BaseNode") -> None:
        if not isinstance(target, BaseNode):
            raise TypeError(f"edge target must be a node, got {type(target).__name__}")
        if target.strategy is not self.strategy:
            raise MixedOwnershipError(
                f"cannot link {self.strategy.value} node {self._label!r} "
                f"to {target.strategy.value} node {target.label!r}"
            )

    def __repr__(self) -> str:
        try:
            labels = [t.label for t in self.edges()]
        except CycleGraphError:
            return f"{type(self).__name__}({self._label!r}, edges=<unavailable>)"
        return f"{type(self).__name__}({self._label!r}, edges={labels!r})"


class Node(BaseNode):
    """
    Shared-ownership node.

    Every handle and every edge is a counted reference, so a node lives as
    long as anything points to it. Cycles made of such references are
    reclaimed by the interpreter's cycle collector once no external handle
    reaches them.
    """

    strategy = OwnershipStrategy.SHARED

    @staticmethod
    def create(label: str, *, checked: bool = True) -> "Node":
        return Node(label, checked=checked)

    def _wrap(self, target: BaseNode) -> BaseNode:
        return target

    def _resolve(self, stored: BaseNode) -> BaseNode:
        return stored
