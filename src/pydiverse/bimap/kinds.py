# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.store.hashing import (
    FunctionHash,
    HashStrategy,
    RandomizedHash,
    SeededHash,
)
from ._internal.store.kinds import Ordered, StoreKind, Unordered

__all__ = [
    "StoreKind",
    "Ordered",
    "Unordered",
    "HashStrategy",
    "RandomizedHash",
    "SeededHash",
    "FunctionHash",
]
