# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from ._internal.bimap import BiMap, OrderedBiMap, UnorderedBiMap
from ._internal.overwritten import Both, Conflict, Left, Neither, Overwritten, Pair, Right
from .errors import *
from .errors import __all__ as __errors
from .kinds import *
from .kinds import __all__ as __kinds
from .version import __version__

__all__ = (
    [
        "__version__",
        "BiMap",
        "OrderedBiMap",
        "UnorderedBiMap",
        "Overwritten",
        "Neither",
        "Left",
        "Right",
        "Pair",
        "Both",
        "Conflict",
    ]
    + __kinds
    + __errors
)
