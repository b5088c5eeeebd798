from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Iterable, Iterator, List


class Row(Sequence):
    """Ordered, read-only collection of domain objects built from one response."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: List[Any] = list(items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Row(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Row):
            return self._items == other._items
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Row({self._items!r})"
