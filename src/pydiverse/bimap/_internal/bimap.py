# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from pydiverse.bimap._internal.arena import Arena, Handle
from pydiverse.bimap._internal.errors import InternalConsistencyError
from pydiverse.bimap._internal.overwritten import (
    Both,
    Conflict,
    Left,
    Neither,
    Overwritten,
    Pair,
    Right,
)
from pydiverse.bimap._internal.store import Store, StoreKind, make_store
from pydiverse.bimap._internal.store.hashing import HashStrategy
from pydiverse.bimap._internal.store.kinds import Ordered, Unordered
from pydiverse.bimap._internal.util.log import get_logger

L = TypeVar("L")
R = TypeVar("R")

logger = get_logger(__name__)


class BiMap(Generic[L, R]):
    """
    A one-to-one map between left values and right values.

    Every pair lives in exactly one slot of an arena. The left store maps each
    left value to the handle of its slot, the right store does the same for
    right values, so a lookup from either side is a single store lookup plus
    an arena access. All mutation goes through the methods below, which keep
    both stores and the arena in step.

    The side stores are chosen independently with `left` and `right`::

        BiMap(left=Ordered(), right=Unordered())

    A bimap is not safe for concurrent mutation. Guard the whole object with
    one lock if it has to be shared between threads.
    """

    __slots__ = ("_left", "_right", "_arena", "left_kind", "right_kind")

    def __init__(
        self,
        pairs: Iterable[tuple[L, R]] | None = None,
        *,
        left: StoreKind | None = None,
        right: StoreKind | None = None,
    ):
        self.left_kind = left if left is not None else Ordered()
        self.right_kind = right if right is not None else Ordered()
        self._left: Store[L, Handle] = make_store(self.left_kind)
        self._right: Store[R, Handle] = make_store(self.right_kind)
        self._arena: Arena[L, R] = Arena()

        if pairs is not None:
            for left_val, right_val in pairs:
                self.insert(left_val, right_val)

    # --- introspection

    def __len__(self) -> int:
        assert len(self._left) == len(self._right), (
            f"left store has {len(self._left)} entries, "
            f"right store has {len(self._right)}"
        )
        return len(self._left)

    def len(self) -> int:
        return len(self)

    def __bool__(self) -> bool:
        return len(self) > 0

    def contains_left(self, left: L) -> bool:
        return self._left.contains_key(left)

    def contains_right(self, right: R) -> bool:
        return self._right.contains_key(right)

    def contains_pair(self, left: L, right: R) -> bool:
        """
        True if `left` is present on the left side and `right` is present on
        the right side. The two need not be paired with each other.
        """
        return self.contains_left(left) and self.contains_right(right)

    # --- lookup

    def get_by_left(self, left: L) -> R | None:
        handle = self._left.get(left)
        if handle is None:
            return None
        return self._arena.get(handle)[1]

    def get_by_right(self, right: R) -> L | None:
        handle = self._right.get(right)
        if handle is None:
            return None
        return self._arena.get(handle)[0]

    # --- removal

    def remove_by_left(self, left: L) -> tuple[L, R] | None:
        entry = self._left.remove_entry(left)
        if entry is None:
            return None
        _, handle = entry
        pair = self._arena.get(handle)
        self._remove_partner(self._right, pair[1], handle)
        return self._arena.release(handle)

    def remove_by_right(self, right: R) -> tuple[L, R] | None:
        entry = self._right.remove_entry(right)
        if entry is None:
            return None
        _, handle = entry
        pair = self._arena.get(handle)
        self._remove_partner(self._left, pair[0], handle)
        return self._arena.release(handle)

    @staticmethod
    def _remove_partner(store: Store, key: Any, handle: Handle) -> None:
        entry = store.remove_entry(key)
        if entry is None:
            raise InternalConsistencyError(
                f"pair slot {handle} has no record for {key!r} on the other side"
            )
        if entry[1] != handle:
            raise InternalConsistencyError(
                f"record for {key!r} points to {entry[1]}, expected {handle}"
            )

    def clear(self) -> None:
        self._left.clear()
        self._right.clear()
        self._arena.clear()

    # --- insertion

    def insert_unchecked(self, left: L, right: R) -> None:
        """
        Adds the pair without looking for existing pairs that share its left
        or right value. Callers must make sure there are none.
        """
        handle = self._arena.alloc(left, right)
        self._left.insert(left, handle)
        self._right.insert(right, handle)

    def insert(self, left: L, right: R) -> Overwritten:
        """
        Adds the pair, evicting every existing pair that shares its left or
        its right value. Returns which pairs were evicted.
        """
        by_left = self.remove_by_left(left)
        by_right = self.remove_by_right(right)

        if by_left is None and by_right is None:
            overwritten = Neither()
        elif by_left is None:
            overwritten = Right(*by_right)
        elif by_right is None:
            if by_left[1] == right:
                overwritten = Pair(*by_left)
            else:
                overwritten = Left(*by_left)
        else:
            overwritten = Both(by_left, by_right)

        if not isinstance(overwritten, Neither):
            logger.debug(
                "insert evicted existing pairs",
                overwritten=type(overwritten).__name__,
                pairs=overwritten,
            )

        self.insert_unchecked(left, right)
        return overwritten

    def try_insert(self, left: L, right: R) -> Conflict | None:
        """
        Adds the pair if neither value is present yet. Otherwise the bimap is
        left untouched and the rejected pair comes back as a `Conflict`.
        """
        if self.contains_left(left) or self.contains_right(right):
            logger.debug("rejected conflicting pair", left=left, right=right)
            return Conflict(left, right)
        self.insert_unchecked(left, right)
        return None

    # --- iteration

    def __iter__(self) -> Iterator[tuple[L, R]]:
        """Pairs in the order of the left store."""
        return self.items()

    def items(self) -> Iterator[tuple[L, R]]:
        for _, handle in self._left.items():
            yield self._arena.get(handle)

    def left_values(self) -> Iterator[L]:
        return iter(self._left)

    def right_values(self) -> Iterator[R]:
        return iter(self._right)

    def __repr__(self) -> str:
        content = ", ".join(f"{left!r}: {right!r}" for left, right in self.items())
        return f"{self.__class__.__name__}({{{content}}})"

    # --- consistency

    def check_invariants(self) -> None:
        """
        Walks both stores and the arena and raises `InternalConsistencyError`
        on the first disagreement. Meant for tests and debugging.
        """
        n_left, n_right, n_arena = len(self._left), len(self._right), len(self._arena)
        if not n_left == n_right == n_arena:
            raise InternalConsistencyError(
                f"cardinality mismatch: left={n_left}, right={n_right}, "
                f"arena={n_arena}"
            )

        self._check_side(self._left, self._right, 0)
        self._check_side(self._right, self._left, 1)

    def _check_side(self, store: Store, other: Store, side: int) -> None:
        seen: set[Handle] = set()
        for key, handle in store.items():
            if handle in seen:
                raise InternalConsistencyError(f"two records share slot {handle}")
            seen.add(handle)

            pair = self._arena.get(handle)
            if not pair[side] == key:
                raise InternalConsistencyError(
                    f"record {key!r} points to slot holding {pair!r}"
                )
            if other.get(pair[1 - side]) != handle:
                raise InternalConsistencyError(
                    f"slot {pair!r} is not referenced back by the other side"
                )


class OrderedBiMap(BiMap[L, R]):
    """Bimap with an ordered store on both sides."""

    __slots__ = ()

    def __init__(self, pairs: Iterable[tuple[L, R]] | None = None):
        super().__init__(pairs, left=Ordered(), right=Ordered())


class UnorderedBiMap(BiMap[L, R]):
    """Bimap with a hash store on both sides."""

    __slots__ = ()

    def __init__(
        self,
        pairs: Iterable[tuple[L, R]] | None = None,
        *,
        hash_strategy: HashStrategy | Callable[[Any], int] | None = None,
    ):
        super().__init__(
            pairs,
            left=Unordered(hash_strategy),
            right=Unordered(hash_strategy),
        )
