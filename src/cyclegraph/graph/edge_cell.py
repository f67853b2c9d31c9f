from __future__ import annotations

from contextlib import contextmanager
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

from cyclegraph.errors import (
    AlreadyMutablyBorrowedError,
    BorrowError,
    ReentrantMutationError,
)

T = TypeVar("T")


class EdgeCell(Generic[T]):
    """
    Interior-mutability cell guarding a node's edge list.

    The list can be reached through any number of shared handles, so
    access is checked at runtime instead of by ownership:

    - any number of shared borrows, or
    - exactly one mutable borrow,

    never both. Violations raise immediately rather than letting a reader
    observe a list that is being appended to.

    With ``checked=False`` the bookkeeping is skipped; appends still go
    through ``borrow_mut`` and remain whole-list operations.
    """

    __slots__ = ("_items", "_readers", "_writing", "_checked")

    def __init__(self, *, checked: bool = True) -> None:
        self._items: List[T] = []
        self._readers = 0
        self._writing = False
        self._checked = checked

    # ------------------------------------------------------------------
    # Borrow state
    # ------------------------------------------------------------------

    @property
    def checked(self) -> bool:
        return self._checked

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def is_borrowed(self) -> bool:
        return self._readers > 0 or self._writing

    def acquire_shared(self) -> Tuple[T, ...]:
        """
        Take a shared borrow and return a read-only view of the items.

        Must be paired with ``release_shared``. Prefer ``borrow()`` unless
        the borrow has to outlive a single block.
        """
        if self._checked:
            if self._writing:
                raise AlreadyMutablyBorrowedError(
                    "edge list is being mutated; cannot borrow it for reading"
                )
            self._readers += 1
        return tuple(self._items)

    def release_shared(self) -> None:
        if not self._checked:
            return
        if self._readers == 0:
            raise BorrowError("release_shared called without a live read borrow")
        self._readers -= 1

    # ------------------------------------------------------------------
    # Scoped borrows
    # ------------------------------------------------------------------

    @contextmanager
    def borrow(self) -> Iterator[Sequence[T]]:
        items = self.acquire_shared()
        try:
            yield items
        finally:
            self.release_shared()

    @contextmanager
    def borrow_mut(self) -> Iterator[List[T]]:
        if self._checked:
            if self._readers:
                raise ReentrantMutationError(
                    f"edge list has {self._readers} live read borrow(s); "
                    "cannot mutate it"
                )
            if self._writing:
                raise ReentrantMutationError("edge list is already mutably borrowed")
            self._writing = True
        try:
            yield self._items
        finally:
            if self._checked:
                self._writing = False

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def append(self, item: T) -> None:
        with self.borrow_mut() as items:
            items.append(item)

    def snapshot(self) -> List[T]:
        with self.borrow() as items:
            return list(items)

    def __len__(self) -> int:
        with self.borrow() as items:
            return len(items)
