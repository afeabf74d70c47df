"""Tests for platform detection and asset naming."""

from unittest.mock import patch

import pytest

from cem_lsp_adapter.binaries.platforms import (
    get_asset_name,
    get_platform_info,
    is_platform_supported,
)
from cem_lsp_adapter.errors import UnsupportedPlatformError
from cem_lsp_adapter.types import Architecture, Os, Platform


@pytest.mark.parametrize(
    "system,machine,expected",
    [
        ("Darwin", "arm64", Platform(Os.MAC, Architecture.AARCH64)),
        ("Linux", "aarch64", Platform(Os.LINUX, Architecture.AARCH64)),
        ("Linux", "x86_64", Platform(Os.LINUX, Architecture.X8664)),
        ("Windows", "AMD64", Platform(Os.WINDOWS, Architecture.X8664)),
        ("Linux", "i686", Platform(Os.LINUX, Architecture.X86)),
    ],
)
def test_get_platform_info(system, machine, expected):
    with patch("platform.system", return_value=system), \
         patch("platform.machine", return_value=machine):
        assert get_platform_info() == expected


def test_unsupported_platform():
    with patch("platform.system", return_value="FreeBSD"), \
         patch("platform.machine", return_value="amd64"):
        with pytest.raises(UnsupportedPlatformError, match="FreeBSD"):
            get_platform_info()
        assert not is_platform_supported()


@pytest.mark.parametrize(
    "os_,arch,expected",
    [
        (Os.MAC, Architecture.AARCH64, "cem-darwin-arm64"),
        (Os.MAC, Architecture.X8664, "cem-darwin-amd64"),
        (Os.LINUX, Architecture.X8664, "cem-linux-amd64"),
        (Os.LINUX, Architecture.X86, "cem-linux-amd64"),
        (Os.WINDOWS, Architecture.AARCH64, "cem-windows-arm64"),
    ],
)
def test_get_asset_name(os_, arch, expected):
    assert get_asset_name(Platform(os=os_, arch=arch)) == expected
