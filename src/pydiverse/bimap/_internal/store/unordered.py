from __future__ import annotations

from collections.abc import Hashable, Iterator

from pydiverse.bimap._internal.store.base import K, Store, V
from pydiverse.bimap._internal.store.hashing import HashStrategy, RandomizedHash


class UnorderedStore(Store[K, V]):
    """
    Hash table store. Keys need equality and a hash under `hash_strategy`.
    Iteration order is insertion order of the underlying dict and carries no
    meaning for callers.
    """

    __slots__ = ("hash_strategy", "_entries")

    hash_strategy: HashStrategy
    # wrapped key -> (owned key, value)
    _entries: dict[Hashable, tuple[K, V]]

    def __init__(self, hash_strategy: HashStrategy | None = None) -> None:
        self.hash_strategy = (
            hash_strategy if hash_strategy is not None else RandomizedHash()
        )
        self._entries = dict()

    def __len__(self) -> int:
        return len(self._entries)

    def contains_key(self, key: K) -> bool:
        return self.hash_strategy.wrap(key) in self._entries

    def get(self, key: K) -> V | None:
        entry = self._entries.get(self.hash_strategy.wrap(key))
        if entry is None:
            return None
        return entry[1]

    def insert(self, key: K, value: V) -> None:
        wrapped = self.hash_strategy.wrap(key)
        # drop the old key object on replace, as a plain dict would keep it
        self._entries.pop(wrapped, None)
        self._entries[wrapped] = (key, value)

    def remove_entry(self, key: K) -> tuple[K, V] | None:
        return self._entries.pop(self.hash_strategy.wrap(key), None)

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()
