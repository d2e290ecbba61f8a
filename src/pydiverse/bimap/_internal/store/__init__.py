from __future__ import annotations

from pydiverse.bimap._internal.errors import check_arg_type
from pydiverse.bimap._internal.store.base import Store
from pydiverse.bimap._internal.store.kinds import Ordered, StoreKind, Unordered
from pydiverse.bimap._internal.store.ordered import OrderedStore
from pydiverse.bimap._internal.store.unordered import UnorderedStore
from pydiverse.bimap._internal.util.log import get_logger

logger = get_logger(__name__)


def make_store(kind: StoreKind) -> Store:
    check_arg_type(StoreKind, "make_store", "kind", kind)

    if isinstance(kind, Ordered):
        store = OrderedStore()
    elif isinstance(kind, Unordered):
        store = UnorderedStore(kind.hash_strategy)
    else:
        raise TypeError(f"store kind `{type(kind).__name__}` is not supported")

    logger.debug("created backing store", kind=kind, store=type(store).__name__)
    return store


__all__ = [
    "Store",
    "StoreKind",
    "Ordered",
    "Unordered",
    "OrderedStore",
    "UnorderedStore",
    "make_store",
]
