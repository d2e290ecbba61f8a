from __future__ import annotations

import operator
from collections.abc import Iterator

from sortedcontainers import SortedKeyList

from pydiverse.bimap._internal.store.base import K, Store, V


class OrderedStore(Store[K, V]):
    """
    Store kept sorted by key. Keys need a total order but do not have to be
    hashable. Iteration yields ascending keys.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: SortedKeyList = SortedKeyList(key=operator.itemgetter(0))

    def _index(self, key: K) -> int | None:
        idx = self._entries.bisect_key_left(key)
        if idx < len(self._entries) and self._entries[idx][0] == key:
            return idx
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def contains_key(self, key: K) -> bool:
        return self._index(key) is not None

    def get(self, key: K) -> V | None:
        idx = self._index(key)
        if idx is None:
            return None
        return self._entries[idx][1]

    def insert(self, key: K, value: V) -> None:
        idx = self._index(key)
        if idx is not None:
            del self._entries[idx]
        self._entries.add((key, value))

    def remove_entry(self, key: K) -> tuple[K, V] | None:
        idx = self._index(key)
        if idx is None:
            return None
        return self._entries.pop(idx)

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._entries)

    def clear(self) -> None:
        self._entries.clear()
