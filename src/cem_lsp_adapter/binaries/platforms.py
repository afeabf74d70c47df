"""Platform detection and asset name mapping."""
import platform

from cem_lsp_adapter.binaries.constants import ASSET_PREFIX
from cem_lsp_adapter.errors import UnsupportedPlatformError
from cem_lsp_adapter.types import Architecture, Os, Platform

# platform.system() values
SYSTEM_MAPPINGS = {
    "Darwin": Os.MAC,
    "Linux": Os.LINUX,
    "Windows": Os.WINDOWS,
}

# platform.machine() values, lowercased
MACHINE_MAPPINGS = {
    "arm64": Architecture.AARCH64,
    "aarch64": Architecture.AARCH64,
    "x86_64": Architecture.X8664,
    "amd64": Architecture.X8664,
    "i386": Architecture.X86,
    "i686": Architecture.X86,
    "x86": Architecture.X86,
}

OS_ASSET_NAMES = {
    Os.MAC: "darwin",
    Os.LINUX: "linux",
    Os.WINDOWS: "windows",
}

# X86 maps to the amd64 asset, as published upstream. There is no 32-bit
# x86 asset.
ARCH_ASSET_NAMES = {
    Architecture.AARCH64: "arm64",
    Architecture.X8664: "amd64",
    Architecture.X86: "amd64",
}


def get_platform_info() -> Platform:
    """Get current platform information."""
    system = platform.system()
    machine = platform.machine().lower()

    if system not in SYSTEM_MAPPINGS or machine not in MACHINE_MAPPINGS:
        raise UnsupportedPlatformError(system, machine)

    return Platform(os=SYSTEM_MAPPINGS[system], arch=MACHINE_MAPPINGS[machine])


def get_asset_name(platform_info: Platform) -> str:
    """Name of the release asset built for the given platform."""
    return "{prefix}-{os}-{arch}".format(
        prefix=ASSET_PREFIX,
        os=OS_ASSET_NAMES[platform_info.os],
        arch=ARCH_ASSET_NAMES[platform_info.arch],
    )


def is_platform_supported() -> bool:
    """Check if current platform is supported."""
    try:
        get_platform_info()
        return True
    except UnsupportedPlatformError:
        return False
