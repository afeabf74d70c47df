"""Release source and launch constants."""

# GitHub API URL structure
GITHUB_API_BASE = "https://api.github.com"
GITHUB_REPOS_PATH = "repos"
RELEASES_PATH = "releases"
GITHUB_ACCEPT = "application/vnd.github+json"

# Upstream repository
CEM_OWNER = "bennypowers"
CEM_REPO = "cem"
CEM_REPOSITORY = f"{CEM_OWNER}/{CEM_REPO}"

# Executable looked up on PATH, and prefix of both asset names and
# downloaded file names
BINARY_NAME = "cem"
ASSET_PREFIX = "cem"
BINARY_PREFIX = "cem-"

LSP_ARGS = ["lsp"]

DOWNLOAD_CHUNK_SIZE = 8192
