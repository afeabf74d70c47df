"""GitHub release lookup."""
import logging
from typing import Any, Dict, List, Optional

import aiohttp

from cem_lsp_adapter.binaries.constants import (
    GITHUB_ACCEPT,
    GITHUB_API_BASE,
    GITHUB_REPOS_PATH,
    RELEASES_PATH,
)
from cem_lsp_adapter.errors import ReleaseQueryError
from cem_lsp_adapter.logging import get_logger, log_with_data
from cem_lsp_adapter.types import Release, ReleaseAsset

logger = get_logger(__name__)


def releases_url(repo: str) -> str:
    """REST endpoint listing the releases of ``owner/name``."""
    return f"{GITHUB_API_BASE}/{GITHUB_REPOS_PATH}/{repo}/{RELEASES_PATH}"


def select_release(
    releases: List[Dict[str, Any]],
    require_assets: bool,
    pre_release: bool,
) -> Optional[Dict[str, Any]]:
    """Pick the newest release matching the filters.

    GitHub lists releases newest first. Drafts are never selected.
    """
    for release in releases:
        if release.get("draft"):
            continue
        if release.get("prerelease") and not pre_release:
            continue
        if require_assets and not release.get("assets"):
            continue
        return release
    return None


def parse_release(data: Dict[str, Any]) -> Release:
    """Build a Release from a GitHub release payload."""
    return Release(
        version=data["tag_name"],
        assets=[
            ReleaseAsset(name=asset["name"], download_url=asset["browser_download_url"])
            for asset in data.get("assets", [])
        ],
    )


async def get_github_latest_release(
    repo: str,
    require_assets: bool = True,
    pre_release: bool = False,
    token: Optional[str] = None,
) -> Release:
    """Fetch the latest release of ``repo`` matching the filters.

    Raises:
        ReleaseQueryError: If the API call fails or no release matches
    """
    url = releases_url(repo)
    headers = {"Accept": GITHUB_ACCEPT}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    log_with_data(logger, logging.DEBUG, "Querying releases", {
        "repo": repo,
        "url": url,
        "require_assets": require_assets,
        "pre_release": pre_release,
    })

    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url, headers=headers) as response:
                response.raise_for_status()
                releases = await response.json()
    except (aiohttp.ClientError, ValueError) as e:
        log_with_data(logger, logging.ERROR, "Release query failed", {
            "repo": repo,
            "error": str(e),
            "status": getattr(e, "status", None),
        })
        raise ReleaseQueryError(str(e), details={"repo": repo}) from e

    selected = select_release(releases, require_assets, pre_release)
    if selected is None:
        raise ReleaseQueryError(
            f"no release found matching the criteria for {repo}",
            details={
                "repo": repo,
                "require_assets": require_assets,
                "pre_release": pre_release,
            },
        )

    release = parse_release(selected)
    log_with_data(logger, logging.INFO, "Found latest release", {
        "repo": repo,
        "version": release.version,
        "assets": [asset.name for asset in release.assets],
    })
    return release
