from __future__ import annotations

import secrets
from collections.abc import Callable, Hashable
from typing import Any


class HashStrategy:
    """
    Computes the hash an unordered store uses to place a key.

    A strategy must agree with key equality: two keys that compare equal must
    hash equal. Subclasses override :meth:`hash`. The store only calls
    :meth:`wrap`, which turns a key into the object used as dict key.
    """

    __slots__ = ()

    def hash(self, key: Any) -> int:
        raise NotImplementedError()

    def wrap(self, key: Any) -> Hashable:
        return HashedKey(key, self.hash(key))


class RandomizedHash(HashStrategy):
    """
    The interpreter's builtin hash. It is salted per process for `str` and
    `bytes` (see PYTHONHASHSEED), so bucket placement of attacker-chosen
    strings is not predictable. Keys are stored as they are.
    """

    __slots__ = ()

    def hash(self, key: Any) -> int:
        return hash(key)

    def wrap(self, key: Any) -> Hashable:
        return key

    def __repr__(self) -> str:
        return "RandomizedHash()"


class SeededHash(HashStrategy):
    """
    Mixes a seed into the builtin hash. Without an explicit seed a random one
    is drawn for every instance.
    """

    __slots__ = ("seed",)

    def __init__(self, seed: int | None = None):
        self.seed = secrets.randbits(64) if seed is None else seed

    def hash(self, key: Any) -> int:
        return hash((self.seed, key))

    def __repr__(self) -> str:
        return f"SeededHash(seed={self.seed})"


class FunctionHash(HashStrategy):
    __slots__ = ("fn",)

    def __init__(self, fn: Callable[[Any], int]):
        if not callable(fn):
            raise TypeError(
                f"argument for parameter `fn` of `FunctionHash` must be callable, "
                f"found `{type(fn).__name__}` instead"
            )
        self.fn = fn

    def hash(self, key: Any) -> int:
        return self.fn(key)

    def __repr__(self) -> str:
        return f"FunctionHash({getattr(self.fn, '__name__', self.fn)!r})"


class HashedKey:
    __slots__ = ("key", "_hash")

    def __init__(self, key: Any, hash_: int):
        self.key = key
        self._hash = hash_

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashedKey):
            return NotImplemented
        return self._hash == other._hash and self.key == other.key

    def __repr__(self) -> str:
        return f"HashedKey({self.key!r})"
