"""
Error taxonomy for cyclegraph.

Every failure raised by the library derives from ``CycleGraphError`` and
also from the closest built-in exception, so callers can catch either.
Visitor failures are never wrapped: the visitor's own exception propagates.
"""

from __future__ import annotations


class CycleGraphError(Exception):
    """
    Base class for all cyclegraph errors.
    """


class EmptyEdgeListError(CycleGraphError, LookupError):
    """
    Raised by ``first_edge()`` on a node without outgoing edges.
    """

    def __init__(self, label: str) -> None:
        super().__init__(f"node {label!r} has no outgoing edges")
        self.label = label


class BorrowError(CycleGraphError, RuntimeError):
    """
    An edge cell was accessed in a way that violates
    "one writer xor many readers".
    """


class ReentrantMutationError(BorrowError):
    """
    An append was attempted while a read borrow of the same edge list is live.
    """


class AlreadyMutablyBorrowedError(BorrowError):
    """
    A read borrow was requested while an append is in progress.
    """


class MixedOwnershipError(CycleGraphError, TypeError):
    """
    Nodes from different ownership strategies (or different arenas)
    were wired into the same graph.
    """


class DanglingReferenceError(CycleGraphError, ReferenceError):
    """
    An arena edge was dereferenced after its arena stopped owning the target.
    """


class UnknownNodeError(CycleGraphError, KeyError):
    """
    A builder edge referenced a label that was never declared.
    """

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.label = label

    def __str__(self) -> str:
        return f"node {self.label!r} has not been created"
