from __future__ import annotations

import dataclasses
from typing import Any


class Overwritten:
    """
    Describes which existing pairs, if any, an insert evicted.

    `Left` and `Right` name the side on which the new pair collided. `Pair`
    means the identical pair was already present. `Both` means two different
    pairs were evicted, one per side.
    """

    __slots__ = ()

    def evicted(self) -> list[tuple[Any, Any]]:
        raise NotImplementedError()


@dataclasses.dataclass(frozen=True, slots=True)
class Neither(Overwritten):
    def evicted(self) -> list[tuple[Any, Any]]:
        return []


@dataclasses.dataclass(frozen=True, slots=True)
class _SinglePair(Overwritten):
    left: Any
    right: Any

    @property
    def pair(self) -> tuple[Any, Any]:
        return (self.left, self.right)

    def evicted(self) -> list[tuple[Any, Any]]:
        return [self.pair]


class Left(_SinglePair):
    __slots__ = ()


class Right(_SinglePair):
    __slots__ = ()


class Pair(_SinglePair):
    __slots__ = ()


@dataclasses.dataclass(frozen=True, slots=True)
class Both(Overwritten):
    left_pair: tuple[Any, Any]
    right_pair: tuple[Any, Any]

    def evicted(self) -> list[tuple[Any, Any]]:
        return [self.left_pair, self.right_pair]


@dataclasses.dataclass(frozen=True, slots=True)
class Conflict:
    """The pair `try_insert` rejected, returned to the caller unchanged."""

    left: Any
    right: Any

    @property
    def pair(self) -> tuple[Any, Any]:
        return (self.left, self.right)
