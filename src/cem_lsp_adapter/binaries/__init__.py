"""Binary acquisition functionality."""
from cem_lsp_adapter.binaries.fetcher import (
    download_file,
    make_file_executable,
)
from cem_lsp_adapter.binaries.platforms import (
    get_platform_info,
    get_asset_name,
    is_platform_supported,
)
from cem_lsp_adapter.binaries.releases import get_github_latest_release

__all__ = [
    "download_file",
    "make_file_executable",
    "get_platform_info",
    "get_asset_name",
    "is_platform_supported",
    "get_github_latest_release",
]
