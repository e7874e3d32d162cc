"""
Populate an empty data directory from the remote resource repositories.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from keymeow_data.core.config import StoreConfig
from keymeow_data.data.paths import category_dir
from keymeow_data.domain.errors import DirectoryCreateError, DownloadError, FileWriteError
from keymeow_data.domain.models import RemoteFile, SkippedEntry

logger = logging.getLogger(__name__)

_LISTING = TypeAdapter(List[RemoteFile])


def make_client(config: StoreConfig) -> httpx.Client:
    """HTTP client carrying the fixed User-Agent and timeout."""
    return httpx.Client(
        headers={"User-Agent": config.user_agent},
        timeout=config.timeout,
        follow_redirects=True,
    )


def fetch_listing(client: httpx.Client, url: str) -> List[RemoteFile]:
    """
    Request the file listing of one remote repository.

    Raises:
        DownloadError: the request failed or the body is not a listing.
    """
    try:
        response = client.get(url)
        response.raise_for_status()
        return _LISTING.validate_json(response.content)
    except (httpx.HTTPError, httpx.InvalidURL, ValidationError) as e:
        raise DownloadError(url, e) from e


def _is_plain_file_name(name: str) -> bool:
    return (
        name not in ("", ".", "..")
        and Path(name).name == name
        and "\\" not in name
        and "\x00" not in name
    )


def download_repo(
    directory: Path,
    url: str,
    client: httpx.Client,
    diagnostics: Optional[List[SkippedEntry]] = None,
) -> List[Path]:
    """
    Download every file listed at `url` into `directory`.

    A file whose content cannot be fetched is skipped; the rest still get
    written. No retries.

    Returns:
        Paths of the files written.
    """
    entries = fetch_listing(client, url)
    logger.info(f"Downloading {len(entries)} files from {url}")

    # Created only once the listing succeeded, so a failed first listing
    # leaves nothing behind and the next run bootstraps again.
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(directory, e) from e

    written: List[Path] = []
    for entry in entries:
        if entry.download_url is None:
            _skip(diagnostics, entry.name, "no download url")
            continue
        if not _is_plain_file_name(entry.name):
            _skip(diagnostics, entry.name, "not a plain file name")
            continue

        try:
            response = client.get(entry.download_url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Failed to download {entry.name}: {e}")
            _skip(diagnostics, entry.name, f"download failed: {e}")
            continue

        target = directory / entry.name
        try:
            target.write_bytes(response.content)
        except (OSError, ValueError) as e:
            raise FileWriteError(target, e) from e
        logger.debug(f"Wrote {target}")
        written.append(target)

    return written


def download_files(
    data_dir: Path,
    config: Optional[StoreConfig] = None,
    client: Optional[httpx.Client] = None,
    diagnostics: Optional[List[SkippedEntry]] = None,
) -> List[Path]:
    """
    Fetch every enabled category into `data_dir`, corpora first, then
    metrics, then layouts.

    Stops at the first failed listing (DownloadError) or failed write
    (FileWriteError); whatever was written before that stays on disk.
    """
    config = config or StoreConfig()
    if client is None:
        with make_client(config) as own_client:
            return download_files(data_dir, config, own_client, diagnostics)

    written: List[Path] = []
    for kind in config.enabled_kinds():
        written.extend(
            download_repo(category_dir(data_dir, kind), config.sources[kind], client, diagnostics)
        )
    logger.info(f"Downloaded {len(written)} files into {data_dir}")
    return written


def _skip(diagnostics: Optional[List[SkippedEntry]], name: str, reason: str) -> None:
    if diagnostics is not None:
        diagnostics.append(SkippedEntry(path_or_name=name, reason=reason))


if __name__ == "__main__":
    import sys

    from keymeow_data.data.paths import locate_data_dir

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if len(sys.argv) > 1:
        target_dir = Path(sys.argv[1])
    else:
        target_dir = locate_data_dir()

    print(f"Downloading keymeow data to: {target_dir}")

    try:
        paths = download_files(target_dir)
        print(f"\nSuccess! {len(paths)} files written.")
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)
