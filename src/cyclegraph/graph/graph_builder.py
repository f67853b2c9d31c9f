from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from cyclegraph.config.settings import GraphConfig, OwnershipStrategy
from cyclegraph.errors import UnknownNodeError
from cyclegraph.graph.arena import NodeArena
from cyclegraph.graph.graph_schema import BaseNode, Node

# Example topology: every node first, then edges; C -> A closes the cycle.
EXAMPLE_LABELS: Tuple[str, ...] = ("A", "B", "C", "D", "E", "F")
EXAMPLE_EDGES: Tuple[Tuple[str, str], ...] = (
    ("A", "B"),
    ("A", "C"),
    ("A", "D"),
    ("C", "E"),
    ("C", "F"),
    ("C", "A"),
)


class GraphBuilder:
    """
    Constructs a graph incrementally: nodes first, edges afterwards.

    Edges may point at any node already created, including the source
    itself or one of its ancestors, so cycles are closed without rebuilding
    anything. One ownership strategy is used for every node of a builder.
    """

    def __init__(
        self,
        config: Optional[GraphConfig] = None,
        *,
        arena: Optional[NodeArena] = None,
    ) -> None:
        self.config = config or GraphConfig()
        self._nodes: Dict[str, BaseNode] = {}
        self._edge_count = 0
        self._root: Optional[BaseNode] = None

        if self.config.strategy is OwnershipStrategy.ARENA:
            if arena is None:
                arena = NodeArena(checked=self.config.borrow_checks)
            elif arena.checked != self.config.borrow_checks:
                raise ValueError(
                    f"arena borrow checks ({arena.checked}) do not match "
                    f"config.borrow_checks ({self.config.borrow_checks})"
                )
            self.arena: Optional[NodeArena] = arena
        else:
            if arena is not None:
                raise ValueError("an arena can only be used with the arena strategy")
            self.arena = None

    @property
    def strategy(self) -> OwnershipStrategy:
        return self.config.strategy

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_node(self, label: str) -> BaseNode:
        """
        Create the node for ``label``, or return it if it already exists.
        """
        node = self._nodes.get(label)
        if node is None:
            node = self._allocate(label)
            self._nodes[label] = node
        return node

    def add_nodes(self, labels: Iterable[str]) -> List[BaseNode]:
        return [self.add_node(label) for label in labels]

    def get(self, label: str) -> BaseNode:
        try:
            return self._nodes[label]
        except KeyError:
            raise UnknownNodeError(label) from None

    def nodes(self) -> List[BaseNode]:
        return list(self._nodes.values())

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: str, target: str) -> None:
        """
        Append an edge between two nodes that have already been created.
        """
        self.get(source).add_edge(self.get(target))
        self._edge_count += 1

    def add_edges(self, edges: Iterable[Tuple[str, str]]) -> None:
        for source, target in edges:
            self.add_edge(source, target)

    # ------------------------------------------------------------------
    # Example graph
    # ------------------------------------------------------------------

    def build(self) -> BaseNode:
        """
        Build the six-node example graph and return its root ``A``.

        A -> [B, C, D], C -> [E, F, A]. The C -> A back-edge makes the
        graph cyclic. Calling it again returns the same root without
        adding edges.
        """
        if self._root is not None:
            return self._root

        self.add_nodes(EXAMPLE_LABELS)
        self.add_edges(EXAMPLE_EDGES)

        logging.getLogger("cyclegraph.build").info(
            "graph built: strategy=%s nodes=%s edges=%s",
            self.strategy.value,
            len(self._nodes),
            self._edge_count,
        )
        self._root = self.get(EXAMPLE_LABELS[0])
        return self._root

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def _allocate(self, label: str) -> BaseNode:
        if self.arena is not None:
            return self.arena.alloc(label)
        return Node.create(label, checked=self.config.borrow_checks)


def build() -> BaseNode:
    """
    Build the example graph with the shared strategy and return its root.
    """
    return GraphBuilder().build()
