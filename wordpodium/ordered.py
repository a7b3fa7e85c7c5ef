"""A list that keeps its items in descending order of a key."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class OrderedList(Generic[T]):
    """Items kept from the largest key to the smallest.

    A new item is placed before every item whose key is not greater than
    its own, so among equal keys the most recently inserted comes first.
    """

    def __init__(self, key: Callable[[T], Any]) -> None:
        self._key = key
        self._items: list[T] = []

    def insert(self, item: T) -> None:
        """Insert ``item`` at its place in the order."""
        new_key = self._key(item)
        position = next(
            (
                index
                for index, existing in enumerate(self._items)
                if not self._key(existing) > new_key
            ),
            len(self._items),
        )
        self._items.insert(position, item)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()