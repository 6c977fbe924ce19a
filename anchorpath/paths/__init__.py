"""Absolute and local path value types."""

from .absolute import AbsolutePath
from .cwd import CurrentDirectoryProvider, FixedCurrentDirectory, OsCurrentDirectory, default_provider
from .errors import InvalidPathError, PathError, PathIoError, PathNotFoundError
from .flavor import (
    POSIX,
    WINDOWS,
    PathFlavor,
    PosixFlavor,
    WindowsFlavor,
    current_flavor,
    flavor_by_name,
    set_current_flavor,
)
from .kind import FileEntryKind, read_kind
from .local import LocalPath

__all__ = [
    "AbsolutePath",
    "LocalPath",
    "FileEntryKind",
    "read_kind",
    "PathError",
    "InvalidPathError",
    "PathIoError",
    "PathNotFoundError",
    "PathFlavor",
    "PosixFlavor",
    "WindowsFlavor",
    "POSIX",
    "WINDOWS",
    "current_flavor",
    "flavor_by_name",
    "set_current_flavor",
    "CurrentDirectoryProvider",
    "OsCurrentDirectory",
    "FixedCurrentDirectory",
    "default_provider",
]
