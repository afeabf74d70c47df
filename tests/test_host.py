"""Tests for the default host collaborators."""

import logging
import os
import sys

import pytest

from cem_lsp_adapter.host import Host
from cem_lsp_adapter.types import InstallationStatus, InstallationStatusKind, Worktree


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX executables")
def test_which_searches_worktree_path(tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    cem = bin_dir / "cem"
    cem.write_text("#!/bin/sh\n")
    cem.chmod(0o755)

    worktree = Worktree(root_path=tmp_path, env={"PATH": str(bin_dir)})

    assert Host().which("cem", worktree) == str(cem)


def test_which_not_found(worktree):
    assert Host().which("cem", worktree) is None


def test_is_file(tmp_path):
    binary = tmp_path / "cem-v1.2.3"
    binary.write_bytes(b"content")
    host = Host()

    assert host.is_file(binary)
    assert host.is_file(str(binary))
    assert not host.is_file(tmp_path)
    assert not host.is_file(tmp_path / "missing")


def test_installation_status_logged():
    records = []

    class RecordingHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("cem_lsp_adapter.host")
    handler = RecordingHandler()
    logger.addHandler(handler)
    try:
        Host().set_installation_status("cem", InstallationStatus.failed("boom"))
    finally:
        logger.removeHandler(handler)

    assert records[-1].levelno == logging.ERROR
    assert records[-1].data == {"server_id": "cem", "status": "failed", "message": "boom"}


def test_progress_status_logged_at_info():
    records = []

    class RecordingHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("cem_lsp_adapter.host")
    logger.setLevel(logging.DEBUG)
    handler = RecordingHandler()
    logger.addHandler(handler)
    try:
        Host().set_installation_status(
            "cem", InstallationStatus(InstallationStatusKind.DOWNLOADING)
        )
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    assert records[-1].levelno == logging.INFO
    assert records[-1].data == {"server_id": "cem", "status": "downloading", "message": None}
