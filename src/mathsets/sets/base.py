"""List-backed mathematical set with equality-based membership."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Set(Generic[T]):
    """Unordered collection holding each distinct element at most once.

    Membership only relies on ``==`` between elements, so unhashable values are
    fine. Lookups scan the backing list, which keeps insertion order but gives
    it no meaning for equality.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        if items is not None:
            self.add_all(items)

    def add(self, item: T) -> None:
        """Add an item unless an equal one is already present."""
        if item not in self._items:
            self._items.append(item)

    def add_all(self, items: Iterable[T]) -> None:
        """Add items in order, absorbing duplicates."""
        for item in items:
            self.add(item)

    def contains(self, item: T) -> bool:
        return item in self._items

    def remove(self, item: T) -> None:
        """Remove every occurrence of an equal item; absent items are ignored."""
        while item in self._items:
            self._items.remove(item)

    def remove_all(self, items: Iterable[T]) -> None:
        for item in list(items):
            self.remove(item)

    @property
    def cardinality(self) -> int:
        """Number of elements in the set."""
        return len(self._items)

    @property
    def size(self) -> int:
        """Alias of ``cardinality``."""
        return self.cardinality

    def to_list(self) -> list[T]:
        """Return a snapshot of the elements in backing order."""
        return list(self._items)

    def elements(self) -> list[T]:
        return self.to_list()

    def is_subset_of(self, other: Set[T]) -> bool:
        """Return whether every element of this set is in ``other``."""
        return all(other.contains(item) for item in self._items)

    def is_proper_subset_of(self, other: Set[T]) -> bool:
        """Return whether this set is a subset of ``other`` and strictly smaller."""
        return other.cardinality > self.cardinality and self.is_subset_of(other)

    def _is_equal_to(self, other: Set[T]) -> bool:
        return self.is_subset_of(other) and other.cardinality == self.cardinality

    def union(self, other: Iterable[T]) -> None:
        """Add every element of ``other`` to this set."""
        self.add_all(other)

    @staticmethod
    def intersection_of(x: Set[T], y: Set[T]) -> Set[T]:
        """Return a new set of the elements of ``x`` also in ``y``, in ``x`` order."""
        result: Set[T] = Set()
        for item in x:
            if y.contains(item):
                result.add(item)
        return result

    def intersection(self, other: Set[T]) -> None:
        """Keep only the elements also contained in ``other``."""
        self._items = Set.intersection_of(self, other)._items

    def to_formatted_string(self) -> str:
        """Format as ``{e1, e2, e3}``; the empty set is ``{}``."""
        return "{" + ", ".join(str(item) for item in self._items) + "}"

    # Comparison operators: < and > are proper subset, <= and >= are equality.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self._is_equal_to(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return not self._is_equal_to(other)

    def __lt__(self, other: Set[T]) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __gt__(self, other: Set[T]) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return other.is_proper_subset_of(self)

    def __le__(self, other: Set[T]) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self._is_equal_to(other)

    def __ge__(self, other: Set[T]) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return other._is_equal_to(self)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return self.to_formatted_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def to_set(items: Iterable[T]) -> Set[T]:
    """Return the given items as a set."""
    return Set(items)
