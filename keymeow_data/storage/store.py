from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

import httpx

from keymeow_data.core.config import StoreConfig
from keymeow_data.data.catalog import build_catalog
from keymeow_data.data.paths import category_dir, create_directories, locate_data_dir
from keymeow_data.domain.errors import FileReadError, ResourceNotFoundError
from keymeow_data.domain.models import Corpus, DataKind, LayoutData, MetricData, SkippedEntry
from keymeow_data.services.bootstrap import download_files
from keymeow_data.storage.codecs import Resource, deserialize

logger = logging.getLogger(__name__)


class ResourceStore:
    """
    Name-keyed access to the corpora, keyboard metrics and layouts installed
    in the data directory.

    Catalogs are built once in the constructor and never refreshed; every
    load reads and decodes the file again.
    """

    def __init__(self, config: Optional[StoreConfig] = None, http_client: Optional[httpx.Client] = None):
        self.config = config or StoreConfig()
        self.data_dir: Path = self.config.data_dir or locate_data_dir()
        self.diagnostics: List[SkippedEntry] = []

        if self.config.download and not self.data_dir.exists():
            logger.info(f"Data directory {self.data_dir} missing, downloading resources")
            download_files(self.data_dir, self.config, http_client, self.diagnostics)

        create_directories(self.data_dir)

        self.corpora: Dict[str, Path] = {}
        self.keyboards: Dict[str, Path] = {}
        self.layouts: Dict[str, Path] = {}
        for kind in self.config.enabled_kinds():
            catalog = build_catalog(category_dir(self.data_dir, kind), self.diagnostics)
            self._catalogs[kind].update(catalog)

    @classmethod
    def open(cls, config: Optional[StoreConfig] = None) -> "ResourceStore":
        return cls(config)

    @classmethod
    def with_download(
        cls,
        config: Optional[StoreConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> "ResourceStore":
        """Construct, bootstrapping the data directory first if it does not exist."""
        config = (config or StoreConfig()).model_copy(update={"download": True})
        return cls(config, http_client)

    @property
    def _catalogs(self) -> Dict[DataKind, Dict[str, Path]]:
        return {
            DataKind.CORPUS: self.corpora,
            DataKind.KEYBOARD: self.keyboards,
            DataKind.LAYOUT: self.layouts,
        }

    def catalog(self, kind: DataKind) -> Dict[str, Path]:
        return self._catalogs[kind]

    def names(self, kind: DataKind) -> List[str]:
        """Sorted names of the installed resources of one kind."""
        return sorted(self._catalogs[kind])

    def lookup(self, kind: DataKind, name: str) -> Path:
        """
        Resolve a resource name to its file. Pure dictionary lookup, no I/O.

        Raises:
            ResourceNotFoundError: nothing called `name` is installed.
        """
        if kind is DataKind.LAYOUT and self.config.legacy_layout_lookup:
            kind = DataKind.KEYBOARD

        path = self._catalogs[kind].get(name)
        if path is None:
            raise ResourceNotFoundError(kind, name)
        return path

    def load(self, kind: DataKind, name: str) -> Resource:
        """
        Look up, read and decode a resource.

        Raises exactly one of ResourceNotFoundError, FileReadError or
        DeserializationError on failure.
        """
        path = self.lookup(kind, name)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise FileReadError(path, e) from e
        logger.debug(f"Loading {kind!s} '{name}' from {path}")
        return deserialize(kind, data, path)

    def get_corpus(self, name: str) -> Corpus:
        return self.load(DataKind.CORPUS, name)

    def get_metrics(self, name: str) -> MetricData:
        return self.load(DataKind.KEYBOARD, name)

    def get_layout(self, name: str) -> LayoutData:
        # With legacy_layout_lookup the file comes from the metrics folder but
        # is still decoded as a JSON layout.
        return self.load(DataKind.LAYOUT, name)
