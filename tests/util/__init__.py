# Copyright (c) QuantCo and pydiverse contributors 2025-2025
# SPDX-License-Identifier: BSD-3-Clause

from .assertion import assert_bimap_equal, make_bimap

__all__ = [
    "assert_bimap_equal",
    "make_bimap",
]
