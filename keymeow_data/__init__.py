"""
Local, name-keyed store for keymeow datasets: text corpora, keyboard metric
tables and layout definitions.

Typical use:

    store = ResourceStore.with_download()
    corpus = store.get_corpus("english")
"""
from keymeow_data.core.config import VERSION as __version__
from keymeow_data.core.config import StoreConfig
from keymeow_data.domain.errors import (
    DataError,
    DeserializationError,
    DirectoryCreateError,
    DirectoryReadError,
    DownloadError,
    FileReadError,
    FileWriteError,
    NoHomeDirectoryError,
    ResourceNotFoundError,
)
from keymeow_data.domain.models import Corpus, DataKind, LayoutData, MetricData
from keymeow_data.storage.store import ResourceStore

__all__ = [
    "__version__",
    "Corpus",
    "DataError",
    "DataKind",
    "DeserializationError",
    "DirectoryCreateError",
    "DirectoryReadError",
    "DownloadError",
    "FileReadError",
    "FileWriteError",
    "LayoutData",
    "MetricData",
    "NoHomeDirectoryError",
    "ResourceNotFoundError",
    "ResourceStore",
    "StoreConfig",
]
