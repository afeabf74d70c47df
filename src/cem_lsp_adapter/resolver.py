"""Language server binary resolution.

Produces the command an editor spawns to start the cem language server.
The binary is taken from, in order:

1. the ``CEM_LSP_EXECUTABLE`` setting,
2. the worktree's ``PATH``,
3. the path downloaded earlier in this process, if it is still a file,
4. the latest ``bennypowers/cem`` GitHub release asset for this platform.

Only the last step touches the network, and only its result is remembered.
"""

import logging
from typing import Any, Dict, Optional

from cem_lsp_adapter.binaries.constants import (
    BINARY_NAME,
    BINARY_PREFIX,
    CEM_REPOSITORY,
    LSP_ARGS,
)
from cem_lsp_adapter.binaries.platforms import get_asset_name
from cem_lsp_adapter.config import LspSettings
from cem_lsp_adapter.errors import (
    AssetNotFoundError,
    DownloadError,
    ExecutablePermissionError,
    log_error,
)
from cem_lsp_adapter.host import Host
from cem_lsp_adapter.logging import configure_logging, get_logger, log_with_data
from cem_lsp_adapter.types import (
    Command,
    DownloadedFileType,
    InstallationStatus,
    InstallationStatusKind,
    Release,
    ReleaseAsset,
    Worktree,
)

logger = get_logger(__name__)


def find_asset(release: Release, asset_name: str) -> ReleaseAsset:
    """Return the asset named exactly ``asset_name``."""
    for asset in release.assets:
        if asset.name == asset_name:
            return asset
    raise AssetNotFoundError(asset_name)


class CemLanguageServer:
    """Resolves and launches the cem language server for one host session."""

    def __init__(
        self,
        host: Optional[Host] = None,
        settings: Optional[LspSettings] = None,
    ):
        self.settings = settings or LspSettings.from_env()
        configure_logging(logging.DEBUG if self.settings.debug_logging else logging.INFO)
        self.host = host or Host(github_token=self.settings.github_token)
        self.cached_binary_path: Optional[str] = None

    async def language_server_binary_path(
        self, server_id: str, worktree: Worktree
    ) -> str:
        """Locate the cem binary, downloading it if needed."""
        if self.settings.executable:
            log_with_data(logger, logging.DEBUG, "Using configured executable", {
                "server_id": server_id,
                "path": self.settings.executable,
            })
            return self.settings.executable

        path = self.host.which(BINARY_NAME, worktree)
        if path:
            log_with_data(logger, logging.DEBUG, "Found binary on PATH", {
                "server_id": server_id,
                "path": path,
            })
            return path

        if self.cached_binary_path and self.host.is_file(self.cached_binary_path):
            log_with_data(logger, logging.DEBUG, "Using cached binary", {
                "server_id": server_id,
                "path": self.cached_binary_path,
            })
            return self.cached_binary_path

        try:
            path = await self.install_latest_release(server_id)
        except Exception as e:
            self.host.set_installation_status(
                server_id, InstallationStatus.failed(str(e))
            )
            log_error(e, {"server_id": server_id}, logger)
            raise

        self.cached_binary_path = path
        return path

    async def install_latest_release(self, server_id: str) -> str:
        """Download the latest release asset for this platform."""
        self.host.set_installation_status(
            server_id, InstallationStatus(InstallationStatusKind.CHECKING_FOR_UPDATE)
        )
        release = await self.host.latest_github_release(
            CEM_REPOSITORY, require_assets=True, pre_release=False
        )

        asset_name = get_asset_name(self.host.current_platform())
        asset = find_asset(release, asset_name)

        self.host.set_installation_status(
            server_id, InstallationStatus(InstallationStatusKind.DOWNLOADING)
        )
        binary_path = f"{BINARY_PREFIX}{release.version}"
        try:
            await self.host.download_file(
                asset.download_url, binary_path, DownloadedFileType.UNCOMPRESSED
            )
        except DownloadError:
            raise
        except Exception as e:
            raise DownloadError(
                str(e), details={"url": asset.download_url, "destination": binary_path}
            ) from e

        try:
            self.host.make_file_executable(binary_path)
        except OSError as e:
            raise ExecutablePermissionError(binary_path, str(e)) from e

        log_with_data(logger, logging.INFO, "Installed language server", {
            "server_id": server_id,
            "version": release.version,
            "asset": asset.name,
            "path": binary_path,
        })
        return binary_path

    async def language_server_command(
        self, server_id: str, worktree: Worktree
    ) -> Command:
        """Command line the host spawns to run the language server."""
        return Command(
            command=await self.language_server_binary_path(server_id, worktree),
            args=list(LSP_ARGS),
            env={},
        )

    def language_server_initialization_options(
        self, server_id: str, worktree: Worktree
    ) -> Dict[str, Any]:
        return {"debugLogging": self.settings.debug_logging}
