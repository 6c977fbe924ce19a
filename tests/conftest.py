# tests/conftest.py
# Keep flavor selection and shared loggers from leaking between tests.

from __future__ import annotations

import os
from pathlib import Path

import pytest

from anchorpath.logging import reset_loggers
from anchorpath.paths import POSIX, WINDOWS, set_current_flavor


@pytest.fixture(autouse=True)
def _reset_global_state():
    set_current_flavor(None)
    yield
    set_current_flavor(None)
    reset_loggers()


@pytest.fixture
def posix():
    return POSIX


@pytest.fixture
def windows():
    return WINDOWS


@pytest.fixture
def sandbox(tmp_path: Path):
    """A directory holding one regular file and one subdirectory."""
    root = tmp_path / "sandbox"
    root.mkdir()
    (root / "dir").mkdir()
    (root / "file.txt").write_text("content")
    return root


def _can_symlink(base: Path) -> bool:
    probe = base / "probe_link"
    try:
        os.symlink(str(base / "probe_target"), str(probe))
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


@pytest.fixture
def symlinks_supported(tmp_path: Path) -> None:
    """Skip the test when the platform or account cannot create symlinks."""
    if not _can_symlink(tmp_path):
        pytest.skip("symlink creation not permitted here")

