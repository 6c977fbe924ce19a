"""anchorpath: absolute and local filesystem path value types."""

from .paths import (
    AbsolutePath,
    FileEntryKind,
    InvalidPathError,
    LocalPath,
    PathError,
    PathIoError,
    PathNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "AbsolutePath",
    "LocalPath",
    "FileEntryKind",
    "PathError",
    "InvalidPathError",
    "PathIoError",
    "PathNotFoundError",
    "__version__",
]
