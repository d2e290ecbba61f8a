from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Store(ABC, Generic[K, V]):
    """
    A single-direction map from an owned key to a value held elsewhere.

    A bimap owns one store per side. Stores never talk to each other; every
    mutation is driven by the bimap. The values a bimap puts in are arena
    handles, so `None` is free to mean "absent".
    """

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def contains_key(self, key: K) -> bool: ...

    @abstractmethod
    def get(self, key: K) -> V | None: ...

    @abstractmethod
    def insert(self, key: K, value: V) -> None:
        """
        Stores `value` under `key`. An entry with an equal key is replaced and
        its key object is dropped.
        """

    @abstractmethod
    def remove_entry(self, key: K) -> tuple[K, V] | None:
        """
        Removes the entry for `key` and returns the key object the store held
        (which need not be `key` itself) together with its value.
        """

    @abstractmethod
    def items(self) -> Iterator[tuple[K, V]]: ...

    @abstractmethod
    def clear(self) -> None: ...

    def __contains__(self, key: K) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        content = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{self.__class__.__name__}({{{content}}})"
