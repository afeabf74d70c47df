"""Error handling for the cem language server adapter."""
import logging
from typing import Any, Dict, Optional


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None
) -> None:
    """Log an error with context."""
    logger = logger or logging.getLogger(__name__)

    error_info = {
        "error_type": error.__class__.__name__,
        "error_message": str(error)
    }
    if context:
        error_info["context"] = context
    if isinstance(error, AdapterError):
        error_info["details"] = error.details

    logger.error("Language server resolution failed", extra={"data": error_info})


class AdapterError(Exception):
    """Base error class for the adapter."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class AssetNotFoundError(AdapterError):
    """No release asset for the current platform."""
    def __init__(self, asset_name: str):
        super().__init__(
            f'no asset found matching "{asset_name}"',
            details={"asset_name": asset_name}
        )


class ReleaseQueryError(AdapterError):
    """Latest release could not be determined."""


class DownloadError(AdapterError):
    """Release asset download failed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"failed to download file: {message}", details=details)


class ExecutablePermissionError(AdapterError):
    """Downloaded binary could not be marked executable."""
    def __init__(self, path: str, message: str):
        super().__init__(message, details={"path": path})


class UnsupportedPlatformError(AdapterError):
    """Operating system or architecture has no release mapping."""
    def __init__(self, system: str, machine: str):
        super().__init__(
            f"Unsupported platform: {system}/{machine}",
            details={"system": system, "machine": machine}
        )
