import pytest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from cem_lsp_adapter.config import LspSettings
from cem_lsp_adapter.host import Host
from cem_lsp_adapter.types import (
    Architecture,
    Os,
    Platform,
    Release,
    ReleaseAsset,
    Worktree,
)

LINUX_URL = "https://github.com/bennypowers/cem/releases/download/v1.2.3/cem-linux-amd64"
DARWIN_URL = "https://github.com/bennypowers/cem/releases/download/v1.2.3/cem-darwin-arm64"


@pytest.fixture
def release() -> Release:
    return Release(
        version="v1.2.3",
        assets=[
            ReleaseAsset(name="cem-darwin-arm64", download_url=DARWIN_URL),
            ReleaseAsset(name="cem-linux-amd64", download_url=LINUX_URL),
        ],
    )


@pytest.fixture
def worktree(tmp_path) -> Worktree:
    """Worktree whose PATH holds nothing"""
    empty_bin = tmp_path / "empty-bin"
    empty_bin.mkdir()
    return Worktree(root_path=tmp_path, env={"PATH": str(empty_bin)})


@pytest.fixture
def host(release) -> MagicMock:
    """Host with no cem on PATH, running on linux/x86_64"""
    host = MagicMock(spec=Host)
    host.which.return_value = None
    host.is_file.return_value = True
    host.current_platform.return_value = Platform(os=Os.LINUX, arch=Architecture.X8664)
    host.latest_github_release = AsyncMock(return_value=release)
    host.download_file = AsyncMock(side_effect=lambda url, dest, file_type: Path(dest))
    return host


@pytest.fixture
def settings() -> LspSettings:
    return LspSettings()


async def iter_chunks(chunks, error=None):
    for chunk in chunks:
        yield chunk
    if error is not None:
        raise error


def mock_response(status=200, json_data=None, chunks=(), chunk_error=None):
    """Response object as seen inside ``async with session.get(...)``."""
    response = MagicMock()
    response.status = status
    response.reason = "OK" if status == 200 else "Error"
    response.json = AsyncMock(return_value=json_data)
    if status >= 400:
        response.raise_for_status = MagicMock(
            side_effect=aiohttp.ClientResponseError(
                request_info=MagicMock(), history=(), status=status, message=response.reason
            )
        )
    else:
        response.raise_for_status = MagicMock()
    response.content.iter_chunked = lambda size: iter_chunks(chunks, chunk_error)
    return response


def mock_session(response):
    """ClientSession replacement whose ``get`` yields ``response``."""
    request = MagicMock()
    request.__aenter__ = AsyncMock(return_value=response)
    request.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=False)
    session.get = MagicMock(return_value=request)
    return session
