"""Release asset download and installation."""
import gzip
import logging
import os
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path
from typing import Dict, Optional, Union

import aiohttp

from cem_lsp_adapter.binaries.constants import DOWNLOAD_CHUNK_SIZE
from cem_lsp_adapter.errors import DownloadError, ExecutablePermissionError
from cem_lsp_adapter.logging import get_logger, log_with_data
from cem_lsp_adapter.types import DownloadedFileType

logger = get_logger(__name__)

STAGING_PREFIX = ".cem-download-"


async def stream_to_file(
    url: str,
    dest: Path,
    headers: Optional[Dict[str, str]] = None
) -> int:
    """Stream the body at ``url`` into ``dest`` and return the byte count.

    Raises:
        DownloadError: If the response status is anything but 200
    """
    async with aiohttp.ClientSession() as session:
        async with session.get(url, headers=headers) as response:
            if response.status != 200:
                log_with_data(logger, logging.ERROR, "Download request failed", {
                    "url": url,
                    "status": response.status,
                    "reason": response.reason,
                })
                response.raise_for_status()
                raise DownloadError(
                    f"unexpected status {response.status} {response.reason}",
                    details={"url": url, "status": response.status},
                )

            downloaded = 0
            with open(dest, "wb") as f:
                async for chunk in response.content.iter_chunked(DOWNLOAD_CHUNK_SIZE):
                    f.write(chunk)
                    downloaded += len(chunk)
            return downloaded


def extract_zip(archive_path: Path, dest: Path) -> None:
    """Extract a zip, refusing members that land outside ``dest``."""
    root = dest.resolve()
    with zipfile.ZipFile(archive_path) as archive:
        for name in archive.namelist():
            target = (root / name).resolve()
            if target != root and root not in target.parents:
                raise ValueError(f"Unsafe path in archive: {name}")
        archive.extractall(root)


def unpack(archive_path: Path, dest: Path, file_type: DownloadedFileType) -> None:
    """Unpack a downloaded archive.

    Gzip payloads inflate to the file ``dest``; tarballs and zips extract
    into the new directory ``dest``.
    """
    if file_type == DownloadedFileType.GZIP:
        with gzip.open(archive_path, "rb") as src, open(dest, "wb") as out:
            shutil.copyfileobj(src, out)
    elif file_type == DownloadedFileType.GZIP_TAR:
        dest.mkdir()
        with tarfile.open(archive_path, "r:gz") as archive:
            archive.extractall(dest, filter="data")
    elif file_type == DownloadedFileType.ZIP:
        dest.mkdir()
        extract_zip(archive_path, dest)
    else:
        raise ValueError(f"Unsupported archive format: {file_type.value}")


async def download_file(
    url: str,
    dest: Union[str, Path],
    file_type: DownloadedFileType = DownloadedFileType.UNCOMPRESSED,
) -> Path:
    """Download ``url`` to ``dest``, unpacking according to ``file_type``.

    The payload is staged in a temporary directory beside ``dest`` and moved
    into place only once complete, so a failed download leaves whatever was
    already at ``dest`` untouched.

    Args:
        url: Asset download URL
        dest: Destination file, or directory for tar and zip archives
        file_type: How the payload is encoded

    Returns:
        The destination path

    Raises:
        DownloadError: If the request, write, unpacking or final move fails
    """
    dest = Path(dest)
    log_with_data(logger, logging.INFO, "Starting download", {
        "url": url,
        "destination": str(dest),
        "file_type": file_type.value,
    })

    try:
        with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX, dir=dest.parent) as tmpdir:
            staged = Path(tmpdir) / "download"
            size = await stream_to_file(url, staged)
            if file_type != DownloadedFileType.UNCOMPRESSED:
                unpacked = Path(tmpdir) / "unpacked"
                unpack(staged, unpacked, file_type)
                staged = unpacked
            os.replace(staged, dest)
    except (aiohttp.ClientError, OSError, ValueError, tarfile.TarError, zipfile.BadZipFile) as e:
        log_with_data(logger, logging.ERROR, "Download failed", {
            "url": url,
            "destination": str(dest),
            "error": str(e),
            "status": getattr(e, "status", None),
        })
        raise DownloadError(str(e), details={"url": url, "destination": str(dest)}) from e

    log_with_data(logger, logging.INFO, "Download complete", {
        "url": url,
        "destination": str(dest),
        "size": size,
    })
    return dest


def make_file_executable(path: Union[str, Path]) -> None:
    """Mark ``path`` executable for the current user.

    Raises:
        ExecutablePermissionError: If the mode cannot be changed
    """
    if os.name == "nt":
        return

    try:
        Path(path).chmod(0o755)
    except OSError as e:
        log_with_data(logger, logging.ERROR, "Failed to set executable bit", {
            "path": str(path),
            "error": str(e),
        })
        raise ExecutablePermissionError(str(path), str(e)) from e

    log_with_data(logger, logging.DEBUG, "Marked file executable", {"path": str(path)})
