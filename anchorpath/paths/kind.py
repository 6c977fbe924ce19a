"""Filesystem entry classification."""

from __future__ import annotations

import os
import stat as _stat
from enum import Enum
from typing import Optional

from ..logging import get_logger
from .errors import PathIoError


class FileEntryKind(Enum):
    """What a filesystem entry is, without following links."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    JUNCTION = "junction"


# Only Windows builds of CPython expose reparse tags.
_MOUNT_POINT_TAG = getattr(_stat, "IO_REPARSE_TAG_MOUNT_POINT", 0xA0000003)


def _is_junction(st: os.stat_result) -> bool:
    return getattr(st, "st_reparse_tag", None) == _MOUNT_POINT_TAG


def read_kind(path: str, *, junctions: bool = True) -> Optional[FileEntryKind]:
    """Classify the entry at ``path`` with a single ``lstat`` call.

    Returns ``None`` when nothing exists at ``path``, including when an
    intermediate segment is missing or is not a directory, and for names
    holding a NUL character. Links are checked before directories because a
    link may point at a directory.

    Args:
        path: Path string handed to the OS unchanged
        junctions: Whether junction reparse points are reported as such

    Raises:
        PathIoError: The entry exists but cannot be inspected
    """
    try:
        st = os.lstat(path)
    except (FileNotFoundError, NotADirectoryError, ValueError):
        # ValueError: embedded NUL, which no entry name can contain
        get_logger("kind").debug("entry kind read", path=path, kind=None)
        return None
    except OSError as exc:
        get_logger("kind").warning("entry kind read failed", path=path, error=exc.strerror)
        raise PathIoError(exc.errno, exc.strerror, path) from exc

    if junctions and _is_junction(st):
        kind = FileEntryKind.JUNCTION
    elif _stat.S_ISLNK(st.st_mode):
        kind = FileEntryKind.SYMLINK
    elif _stat.S_ISDIR(st.st_mode):
        kind = FileEntryKind.DIRECTORY
    else:
        kind = FileEntryKind.FILE

    get_logger("kind").debug("entry kind read", path=path, kind=kind.value)
    return kind


__all__ = ["FileEntryKind", "read_kind"]
