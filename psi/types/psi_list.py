"""Growable, ordered list value.

A PsiList owns its elements. Storage grows the way a hand-managed array would:
it starts at a small capacity and doubles when full. Growth is refused once
doubling would pass ``max_capacity``; the append then raises
PsiCapacityError and the element is not stored.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TYPE_CHECKING

from psi.errors import PsiCapacityError

if TYPE_CHECKING:
    from psi.types.value import Value


INITIAL_CAPACITY = 4
DEFAULT_MAX_CAPACITY = 1 << 16


class PsiList:
    __slots__ = ("items", "capacity", "max_capacity")

    def __init__(self, items: Iterable[Value] = (), max_capacity: int = DEFAULT_MAX_CAPACITY):
        self.items: list[Value] = []
        self.capacity: int = INITIAL_CAPACITY
        self.max_capacity: int = max(max_capacity, INITIAL_CAPACITY)
        for item in items:
            self.append(item)

    def append(self, item: Value) -> None:
        if len(self.items) >= self.capacity:
            if self.capacity > self.max_capacity // 2:
                raise PsiCapacityError(
                    f"List capacity {self.capacity} cannot grow past {self.max_capacity}"
                )
            self.capacity *= 2
        self.items.append(item)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    def __eq__(self, other: object) -> bool:
        # Compares by tag as well as value, so (#t) != (1)
        from psi.types.value import values_equal
        if isinstance(other, (PsiList, list)):
            return values_equal(self, other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"PsiList({self.items!r})"
