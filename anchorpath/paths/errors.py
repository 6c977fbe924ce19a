"""Exceptions raised by anchorpath path types."""

from __future__ import annotations


class PathError(Exception):
    """Base class for all anchorpath errors."""


class InvalidPathError(PathError, ValueError):
    """Raised when a path string does not satisfy the requested path type."""


class PathIoError(PathError, OSError):
    """Raised when the filesystem cannot answer a query about a path.

    Constructed like ``OSError(errno, strerror, filename)`` so callers can
    inspect ``errno`` and ``filename`` as usual.
    """


class PathNotFoundError(PathIoError):
    """Raised when a path or one of its intermediate segments does not exist."""


__all__ = [
    "PathError",
    "InvalidPathError",
    "PathIoError",
    "PathNotFoundError",
]
