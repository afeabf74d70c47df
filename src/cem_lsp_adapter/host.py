"""Host services the resolver depends on.

Each method is one collaborator: search-path lookup, file stat, installation
status reporting, release query, platform query, download and chmod. The
defaults talk to the real filesystem and GitHub; tests substitute a Host with
the relevant methods mocked.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from cem_lsp_adapter.binaries import fetcher, platforms, releases
from cem_lsp_adapter.logging import get_logger, log_with_data
from cem_lsp_adapter.types import (
    DownloadedFileType,
    InstallationStatus,
    InstallationStatusKind,
    Platform,
    Release,
    Worktree,
)

logger = get_logger(__name__)


class Host:
    """Default collaborators for resolving the language server binary."""

    def __init__(self, github_token: Optional[str] = None):
        self.github_token = github_token

    def which(self, binary_name: str, worktree: Worktree) -> Optional[str]:
        return worktree.which(binary_name)

    def is_file(self, path: Union[str, Path]) -> bool:
        try:
            return stat.S_ISREG(os.stat(path).st_mode)
        except OSError:
            return False

    def set_installation_status(
        self, server_id: str, status: InstallationStatus
    ) -> None:
        level = logging.ERROR if status.kind is InstallationStatusKind.FAILED else logging.INFO
        log_with_data(logger, level, "Language server installation status", {
            "server_id": server_id,
            "status": status.kind.value,
            "message": status.message,
        })

    async def latest_github_release(
        self, repo: str, require_assets: bool, pre_release: bool
    ) -> Release:
        return await releases.get_github_latest_release(
            repo,
            require_assets=require_assets,
            pre_release=pre_release,
            token=self.github_token,
        )

    def current_platform(self) -> Platform:
        return platforms.get_platform_info()

    async def download_file(
        self, url: str, dest: Union[str, Path], file_type: DownloadedFileType
    ) -> Path:
        return await fetcher.download_file(url, dest, file_type)

    def make_file_executable(self, path: Union[str, Path]) -> None:
        fetcher.make_file_executable(path)
