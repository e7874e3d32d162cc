from typing import Optional

from keymeow_data.core.config import StoreConfig
from keymeow_data.storage.store import ResourceStore

_store: Optional[ResourceStore] = None


def get_store(config: Optional[StoreConfig] = None) -> ResourceStore:
    """
    Return the process-wide store, constructing it on first use.

    `config` only matters for the first call.
    """
    global _store
    if _store is None:
        _store = ResourceStore(config)
    return _store


def reset_store() -> None:
    global _store
    _store = None
