"""
Locate and create the per-user data directory.
"""
from __future__ import annotations

import logging
from pathlib import Path

import platformdirs

from keymeow_data.domain.errors import DirectoryCreateError, NoHomeDirectoryError
from keymeow_data.domain.models import ALL_KINDS, DataKind

logger = logging.getLogger(__name__)

APP_NAME = "keymeow"


def locate_data_dir() -> Path:
    """
    Resolve '<OS user data dir>/keymeow' without touching the filesystem.

    Raises:
        NoHomeDirectoryError: the platform cannot tell where the user profile lives.
    """
    try:
        base = platformdirs.user_data_path()
    except (KeyError, OSError, RuntimeError) as e:
        raise NoHomeDirectoryError(e) from e

    # With no HOME and no passwd entry, "~" is left unexpanded.
    if not base.is_absolute() or "~" in base.parts:
        raise NoHomeDirectoryError()
    return base / APP_NAME


def category_dir(data_dir: Path, kind: DataKind) -> Path:
    return data_dir / kind.subdir


def create_directories(data_dir: Path) -> None:
    """
    Create the data root and all category subdirectories.

    Safe to call repeatedly.
    """
    for path in [category_dir(data_dir, kind) for kind in ALL_KINDS]:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(path, e) from e
    logger.debug(f"Data directories ready under {data_dir}")
