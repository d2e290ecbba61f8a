from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

from pydiverse.bimap._internal.errors import InternalConsistencyError

L = TypeVar("L")
R = TypeVar("R")


@dataclasses.dataclass(frozen=True, slots=True)
class Handle:
    index: int
    generation: int


class Arena(Generic[L, R]):
    """
    Slab holding the left and right value of every pair in a bimap.

    Both stores of a bimap map their key to the `Handle` of the pair's slot.
    Releasing a slot bumps its generation, so a handle that outlived its pair
    no longer resolves, even after the slot has been reused.
    """

    __slots__ = ("_slots", "_generations", "_free", "_len")

    def __init__(self) -> None:
        self._slots: list[tuple[L, R] | None] = []
        self._generations: list[int] = []
        self._free: list[int] = []
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def alloc(self, left: L, right: R) -> Handle:
        if self._free:
            index = self._free.pop()
            self._slots[index] = (left, right)
        else:
            index = len(self._slots)
            self._slots.append((left, right))
            self._generations.append(0)
        self._len += 1
        return Handle(index, self._generations[index])

    def get(self, handle: Handle) -> tuple[L, R]:
        if not (
            0 <= handle.index < len(self._slots)
            and self._generations[handle.index] == handle.generation
        ):
            raise InternalConsistencyError(f"stale handle {handle}")
        slot = self._slots[handle.index]
        assert slot is not None
        return slot

    def release(self, handle: Handle) -> tuple[L, R]:
        slot = self.get(handle)
        self._slots[handle.index] = None
        self._generations[handle.index] += 1
        self._free.append(handle.index)
        self._len -= 1
        return slot

    def handles(self):
        for index, slot in enumerate(self._slots):
            if slot is not None:
                yield Handle(index, self._generations[index])

    def clear(self) -> None:
        # generations survive so handles from before the clear stay stale
        for index, slot in enumerate(self._slots):
            if slot is not None:
                self._slots[index] = None
                self._generations[index] += 1
                self._free.append(index)
        self._len = 0
