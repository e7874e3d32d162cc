"""
Error types raised by the resource store.

Every failure the store can produce is one of these, so callers can tell
"dataset not installed" (ResourceNotFoundError) apart from "dataset installed
but unreadable" (FileReadError) or "installed but corrupt"
(DeserializationError).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from keymeow_data.domain.models import DataKind


class DataError(Exception):
    """Base class for all store errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NoHomeDirectoryError(DataError):
    def __init__(self, cause: Optional[BaseException] = None):
        super().__init__("could not find user's home directory", cause)


class DirectoryCreateError(DataError):
    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"could not create data directory {path}", cause)
        self.path = path


class DirectoryReadError(DataError):
    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"could not read data directory {path}", cause)
        self.path = path


class FileReadError(DataError):
    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"could not read data file {path}", cause)
        self.path = path


class FileWriteError(DataError):
    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        super().__init__(f"could not write file {path}", cause)
        self.path = path


class ResourceNotFoundError(DataError):
    def __init__(self, kind: DataKind, name: str):
        super().__init__(f"could not find {kind!s} called `{name}`")
        self.kind = kind
        self.name = name


class DeserializationError(DataError):
    def __init__(self, fmt: str, path: Optional[Path] = None, cause: Optional[BaseException] = None):
        super().__init__(f"error deserializing {fmt} data", cause)
        self.format = fmt
        self.path = path


class DownloadError(DataError):
    def __init__(self, url: str, cause: Optional[BaseException] = None):
        super().__init__(f"error downloading data from {url}", cause)
        self.url = url
