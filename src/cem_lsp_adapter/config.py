"""Adapter settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

EXECUTABLE_VAR = "CEM_LSP_EXECUTABLE"
DEBUG_LOGGING_VAR = "CEM_LSP_DEBUG_LOGGING"
GITHUB_TOKEN_VAR = "CEM_LSP_GITHUB_TOKEN"

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LspSettings:
    """User settings for launching the language server"""

    executable: Optional[str] = None
    debug_logging: bool = False
    github_token: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LspSettings":
        """Build settings from environment variables.

        Empty values count as unset.
        """
        environ = os.environ if environ is None else environ
        return cls(
            executable=environ.get(EXECUTABLE_VAR) or None,
            debug_logging=environ.get(DEBUG_LOGGING_VAR, "").strip().lower() in TRUTHY,
            github_token=environ.get(GITHUB_TOKEN_VAR) or None,
        )
