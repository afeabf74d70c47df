"""Language server launcher for the cem custom elements manifest tooling."""

from cem_lsp_adapter.types import (
    Architecture,
    Command,
    DownloadedFileType,
    InstallationStatus,
    InstallationStatusKind,
    Os,
    Platform,
    Release,
    ReleaseAsset,
    Worktree,
)
from cem_lsp_adapter.config import LspSettings
from cem_lsp_adapter.host import Host
from cem_lsp_adapter.resolver import CemLanguageServer
from cem_lsp_adapter.errors import (
    AdapterError,
    AssetNotFoundError,
    ReleaseQueryError,
    DownloadError,
    ExecutablePermissionError,
    UnsupportedPlatformError,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "Architecture",
    "Command",
    "DownloadedFileType",
    "InstallationStatus",
    "InstallationStatusKind",
    "Os",
    "Platform",
    "Release",
    "ReleaseAsset",
    "Worktree",

    # Resolution
    "CemLanguageServer",
    "Host",
    "LspSettings",

    # Error types
    "AdapterError",
    "AssetNotFoundError",
    "ReleaseQueryError",
    "DownloadError",
    "ExecutablePermissionError",
    "UnsupportedPlatformError",
]
