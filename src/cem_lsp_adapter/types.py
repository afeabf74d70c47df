"""Core type definitions"""

import os
import shutil
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class Os(Enum):
    MAC = "darwin"
    LINUX = "linux"
    WINDOWS = "windows"


class Architecture(Enum):
    AARCH64 = "aarch64"
    X8664 = "x86_64"
    X86 = "x86"


class DownloadedFileType(Enum):
    """How a downloaded payload is written to its destination."""

    UNCOMPRESSED = "uncompressed"
    GZIP = "gzip"
    GZIP_TAR = "gzip_tar"
    ZIP = "zip"


class InstallationStatusKind(Enum):
    NONE = "none"
    CHECKING_FOR_UPDATE = "checking_for_update"
    DOWNLOADING = "downloading"
    FAILED = "failed"


@dataclass(frozen=True)
class InstallationStatus:
    """Language server installation status reported to the host.

    Only ``FAILED`` carries a message.
    """

    kind: InstallationStatusKind
    message: Optional[str] = None

    @classmethod
    def failed(cls, message: str) -> "InstallationStatus":
        return cls(InstallationStatusKind.FAILED, message)


@dataclass(frozen=True)
class Platform:
    """Current operating system and CPU architecture"""

    os: Os
    arch: Architecture


@dataclass(frozen=True)
class ReleaseAsset:
    """Downloadable file attached to a release"""

    name: str
    download_url: str


@dataclass(frozen=True)
class Release:
    """Tagged release with its assets"""

    version: str
    assets: list[ReleaseAsset]


@dataclass(frozen=True)
class Command:
    """Command line the host spawns to start the language server.

    Fields cannot be reassigned, but ``args`` and ``env`` are plain lists and
    dicts, so the command is unhashable. Every call to the resolver builds
    fresh containers.
    """

    command: str
    args: list[str]
    env: dict[str, str] = field(default_factory=dict)

    __hash__ = None


@dataclass(frozen=True)
class Worktree:
    """Project the language server is started for"""

    root_path: Path
    env: dict[str, str] = field(default_factory=dict)

    def which(self, binary_name: str) -> Optional[str]:
        """Look up an executable on the worktree's search path."""
        search_path = self.env.get("PATH", os.environ.get("PATH"))
        return shutil.which(binary_name, path=search_path)
