from __future__ import annotations

import logging
from typing import Callable, Generator, Iterator, List, Optional, Set, Tuple

from cyclegraph.config.settings import TraversalConfig
from cyclegraph.graph.graph_schema import BaseNode

Visitor = Callable[[str], None]


class TraversalEngine:
    """
    Cycle-safe depth-first traversal over a built graph.

    Visits every node reachable from a start node exactly once, pre-order,
    first edge first. Dedup is by label through a single seen set shared by
    the whole walk, so a node reachable along several paths is visited on
    the first path only and later paths stop there silently.

    While a node's edges are being walked the engine holds a shared borrow
    on them; appending to such a node from the visitor raises
    ReentrantMutationError. Borrows are released when the walk ends,
    including when the visitor raises.
    """

    def __init__(self, config: Optional[TraversalConfig] = None) -> None:
        self.config = config or TraversalConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def traverse(
        self,
        start: BaseNode,
        visitor: Visitor,
        *,
        seen: Optional[Set[str]] = None,
    ) -> None:
        """
        Feed the label of every reachable node to ``visitor``.

        The visitor runs before its label is marked seen. If it raises, the
        exception propagates immediately and ``seen`` keeps whatever it
        held at that point.
        """
        logger = logging.getLogger("cyclegraph.traversal")
        visited = 0
        nodes = self.walk(start, seen=seen)

        try:
            for node in nodes:
                visitor(node.label)
                visited += 1
        except Exception:
            logger.warning(
                "traversal from %r aborted after %s node(s)",
                start.label,
                visited,
            )
            raise
        finally:
            nodes.close()

        logger.debug(
            "traversal from %r visited %s node(s) mode=%s",
            start.label,
            visited,
            self.config.mode,
        )

    def walk(
        self,
        start: BaseNode,
        *,
        seen: Optional[Set[str]] = None,
    ) -> Generator[BaseNode, None, None]:
        """
        Yield reachable nodes in visit order.

        A node's label is added to ``seen`` when the consumer asks for the
        next node, so abandoning the iterator leaves the last yielded
        node unmarked.
        """
        if seen is None:
            seen = set()

        if self.config.mode == "recursive":
            return self._walk_recursive(start, seen)
        return self._walk_iterative(start, seen)

    def labels(self, start: BaseNode) -> List[str]:
        order: List[str] = []
        self.traverse(start, order.append)
        return order

    # ------------------------------------------------------------------
    # Walk forms
    # ------------------------------------------------------------------

    def _walk_iterative(
        self, start: BaseNode, seen: Set[str]
    ) -> Generator[BaseNode, None, None]:
        if start.label in seen:
            return

        stack: List[Tuple[BaseNode, Iterator[BaseNode]]] = []
        try:
            stack.append((start, iter(start.acquire_edges())))
            yield start
            seen.add(start.label)

            while stack:
                node, targets = stack[-1]
                child = next(targets, None)

                if child is None:
                    stack.pop()
                    node.release_edges()
                    continue

                if child.label in seen:
                    continue

                stack.append((child, iter(child.acquire_edges())))
                yield child
                seen.add(child.label)
        finally:
            for node, _ in reversed(stack):
                node.release_edges()

    def _walk_recursive(
        self, node: BaseNode, seen: Set[str]
    ) -> Generator[BaseNode, None, None]:
        if node.label in seen:
            return

        with node.borrow_edges() as targets:
            yield node
            seen.add(node.label)
            for target in targets:
                yield from self._walk_recursive(target, seen)


def traverse(
    start: BaseNode,
    visitor: Visitor,
    seen: Optional[Set[str]] = None,
) -> None:
    TraversalEngine().traverse(start, visitor, seen=seen)
