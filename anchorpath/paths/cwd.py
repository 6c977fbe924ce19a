"""Current-directory providers.

The process current directory is mutable global state owned by the OS.
Path resolution reads it through a provider so callers can substitute a
fixed directory without calling ``os.chdir``.
"""

from __future__ import annotations

import os
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class CurrentDirectoryProvider(Protocol):
    def get(self) -> str:
        """Return the current directory as a path string."""
        ...


class OsCurrentDirectory:
    """Reads ``os.getcwd()`` on every call; nothing is cached."""

    def get(self) -> str:
        return os.getcwd()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "OsCurrentDirectory()"


class FixedCurrentDirectory:
    """Always reports the same directory."""

    def __init__(self, directory: Union[str, "os.PathLike[str]"]) -> None:
        self._directory = os.fspath(directory)

    def get(self) -> str:
        return self._directory

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"FixedCurrentDirectory({self._directory!r})"


_DEFAULT = OsCurrentDirectory()


def default_provider() -> CurrentDirectoryProvider:
    """Provider bound to the real process current directory."""
    return _DEFAULT


__all__ = [
    "CurrentDirectoryProvider",
    "OsCurrentDirectory",
    "FixedCurrentDirectory",
    "default_provider",
]
