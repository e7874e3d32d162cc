"""
Turn a category directory into a name -> path catalog.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from keymeow_data.domain.errors import DirectoryReadError
from keymeow_data.domain.models import SkippedEntry

logger = logging.getLogger(__name__)


def resource_name(path: Path) -> Optional[str]:
    """
    Derive the lookup key for a data file: its name minus the last extension.

    Returns None for names that cannot identify a resource (empty stem,
    hidden files such as '.DS_Store').
    """
    stem = path.stem
    if not stem or stem.startswith("."):
        return None
    return stem


def _skip(diagnostics: Optional[List[SkippedEntry]], path: Path, reason: str) -> None:
    logger.debug(f"Skipping {path}: {reason}")
    if diagnostics is not None:
        diagnostics.append(SkippedEntry(path_or_name=str(path), reason=reason))


def build_catalog(directory: Path, diagnostics: Optional[List[SkippedEntry]] = None) -> Dict[str, Path]:
    """
    Scan the immediate entries of `directory`.

    Entries are visited in file-name order, so when two files share a stem
    (e.g. 'a.bin' and 'a.json') the lexically later one wins every time.
    Entries that are not readable regular files are skipped, never fatal.

    Raises:
        DirectoryReadError: the directory itself cannot be listed.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DirectoryReadError(directory, e) from e

    catalog: Dict[str, Path] = {}
    for entry in entries:
        try:
            is_file = entry.is_file()
        except OSError as e:
            _skip(diagnostics, entry, f"cannot stat: {e}")
            continue
        if not is_file:
            _skip(diagnostics, entry, "not a regular file")
            continue

        name = resource_name(entry)
        if name is None:
            _skip(diagnostics, entry, "no usable name")
            continue

        if name in catalog:
            _skip(diagnostics, catalog[name], f"shadowed by {entry.name}")
        catalog[name] = entry.absolute()

    logger.debug(f"Catalogued {len(catalog)} resources in {directory}")
    return catalog
