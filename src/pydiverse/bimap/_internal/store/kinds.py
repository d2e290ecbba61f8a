# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

# This module defines the config classes provided to the user to pick the
# backing store of each side of a bimap.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydiverse.bimap._internal.store.hashing import (
    FunctionHash,
    HashStrategy,
    RandomizedHash,
)


class StoreKind: ...


class Ordered(StoreKind):
    def __repr__(self) -> str:
        return "Ordered()"


class Unordered(StoreKind):
    def __init__(self, hash_strategy: HashStrategy | Callable[[Any], int] | None = None):
        if hash_strategy is None:
            hash_strategy = RandomizedHash()
        elif not isinstance(hash_strategy, HashStrategy):
            hash_strategy = FunctionHash(hash_strategy)
        self.hash_strategy = hash_strategy

    def __repr__(self) -> str:
        return f"Unordered(hash_strategy={self.hash_strategy!r})"
