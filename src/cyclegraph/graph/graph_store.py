from __future__ import annotations

import networkx as nx
from typing import List, Set, Tuple

from cyclegraph.graph.graph_query import TraversalEngine
from cyclegraph.graph.graph_schema import BaseNode


class GraphStore:
    """
    Read-only snapshot of the graph reachable from a root.

    Nodes are keyed by label (the same identity traversal dedups on);
    each edge records the position it held in its source's edge list.
    The snapshot does not track later mutation of the live nodes.
    """

    def __init__(self, root: str) -> None:
        self._graph = nx.DiGraph()
        self.root = root

    @classmethod
    def from_root(cls, root: BaseNode) -> "GraphStore":
        store = cls(root.label)
        nodes = TraversalEngine().walk(root)
        try:
            for node in nodes:
                store._graph.add_node(node.label)
                for position, target in enumerate(node.edges()):
                    store._add_edge(node.label, target.label, position)
        finally:
            nodes.close()
        return store

    def _add_edge(self, source: str, target: str, position: int) -> None:
        if self._graph.has_edge(source, target):
            self._graph.edges[source, target]["count"] += 1
            return
        self._graph.add_edge(source, target, position=position, count=1)

    # -------------------- Access --------------------

    @property
    def digraph(self) -> nx.DiGraph:
        return self._graph

    def labels(self) -> List[str]:
        return list(self._graph.nodes)

    def has_edge(self, source: str, target: str) -> bool:
        return self._graph.has_edge(source, target)

    def neighbors(self, label: str) -> List[str]:
        if label not in self._graph:
            return []
        return list(self._graph.successors(label))

    def predecessors(self, label: str) -> List[str]:
        if label not in self._graph:
            return []
        return list(self._graph.predecessors(label))

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def is_cyclic(self) -> bool:
        return not nx.is_directed_acyclic_graph(self._graph)

    def back_edges(self) -> List[Tuple[str, str]]:
        """
        Edges that point at a node on the current depth-first path from
        the root, i.e. the edges that close cycles.
        """
        on_path: Set[str] = set()
        found: List[Tuple[str, str]] = []

        for u, v, kind in nx.dfs_labeled_edges(self._graph, source=self.root):
            if kind == "forward":
                on_path.add(v)
            elif kind == "reverse":
                on_path.discard(v)
            elif kind == "nontree" and v in on_path:
                found.append((u, v))

        return found


def to_digraph(root: BaseNode) -> nx.DiGraph:
    return GraphStore.from_root(root).digraph


def is_cyclic(root: BaseNode) -> bool:
    return GraphStore.from_root(root).is_cyclic()


def find_back_edges(root: BaseNode) -> List[Tuple[str, str]]:
    return GraphStore.from_root(root).back_edges()


def reachable_count(root: BaseNode) -> int:
    return GraphStore.from_root(root).node_count()
