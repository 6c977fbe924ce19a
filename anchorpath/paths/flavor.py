"""Platform path rules ("flavors") used by the path value types.

A flavor answers the purely syntactic questions a path type needs: which
separator is canonical, which characters are alternates for it, whether a
string is absolute, where its root ends and how two strings are joined.
Nothing in this module touches the filesystem.

Two flavors exist:

- ``PosixFlavor``: ``/`` separator; backslash is an ordinary filename character.
- ``WindowsFlavor``: ``\\`` separator with ``/`` accepted as an alternate;
  drive-rooted (``C:\\``) and UNC (``\\\\server\\share``) paths are absolute;
  junctions exist.

The process-wide default is chosen from ``AP_PATH_FLAVOR`` on first use.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

from .. import config
from ..logging import get_logger
from .errors import InvalidPathError


class PathFlavor(ABC):
    """Syntactic path rules for one platform family."""

    name: str = ""
    sep: str = "/"
    altseps: Tuple[str, ...] = ()
    supports_junctions: bool = False

    def normalize_separators(self, value: str) -> str:
        """Rewrite every alternate separator in ``value`` to ``sep``."""
        for alt in self.altseps:
            value = value.replace(alt, self.sep)
        return value

    @abstractmethod
    def is_absolute(self, value: str) -> bool:
        """Whether ``value`` denotes a fully rooted location."""

    @abstractmethod
    def split_root(self, value: str) -> Tuple[str, str]:
        """Split ``value`` into ``(root, rest)``; ``root`` is empty for relative paths."""

    @abstractmethod
    def _normpath(self, value: str) -> str: ...

    def is_anchored(self, value: str) -> bool:
        """Whether ``value`` carries any root, absolute or not."""
        return bool(self.split_root(value)[0])

    def normpath(self, value: str) -> str:
        """Collapse ``.``/``..`` segments and duplicate separators syntactically."""
        if not value:
            return value
        return self._normpath(value)

    def join(self, left: str, right: str) -> str:
        """Append ``right`` onto ``left``.

        An absolute ``right`` replaces ``left``. A ``right`` that is rooted but
        not absolute (``\\foo`` or ``C:foo`` on Windows) raises ``InvalidPathError``.
        """
        if not right:
            return left
        if self.is_absolute(right):
            return right
        if self.is_anchored(right):
            raise InvalidPathError(f"cannot join partially rooted path: {right!r}")
        if not left:
            return right
        if left.endswith(self.sep):
            return left + right
        return left + self.sep + right

    def parts(self, value: str) -> Tuple[str, ...]:
        """Root (if any) followed by each non-empty segment."""
        root, rest = self.split_root(value)
        segments = tuple(s for s in rest.split(self.sep) if s)
        return ((root,) + segments) if root else segments

    def compose(self, root: str, segments: Tuple[str, ...]) -> str:
        """Inverse of ``parts`` for a root and the segments below it."""
        body = self.sep.join(segments)
        if not root or not body or root.endswith((self.sep, ":")):
            return root + body
        return root + self.sep + body

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PosixFlavor(PathFlavor):
    name = "posix"
    sep = "/"
    altseps = ()
    supports_junctions = False

    def is_absolute(self, value: str) -> bool:
        return value.startswith("/")

    def split_root(self, value: str) -> Tuple[str, str]:
        if value.startswith("/"):
            return "/", value[1:]
        return "", value

    def _normpath(self, value: str) -> str:
        return posixpath.normpath(value)


class WindowsFlavor(PathFlavor):
    name = "windows"
    sep = "\\"
    altseps = ("/",)
    supports_junctions = True

    _DRIVE_ABS_RE = re.compile(r"^[A-Za-z]:[\\/]")
    _DRIVE_RE = re.compile(r"^[A-Za-z]:")
    _UNC_RE = re.compile(r"^[\\/]{2}[^\\/]+[\\/][^\\/]+[\\/]?")

    def is_absolute(self, value: str) -> bool:
        return bool(self._DRIVE_ABS_RE.match(value) or self._UNC_RE.match(value))

    def split_root(self, value: str) -> Tuple[str, str]:
        m = self._DRIVE_ABS_RE.match(value) or self._UNC_RE.match(value)
        if m is None:
            if value[:1] in ("\\", "/"):
                m = re.match(r"^[\\/]", value)
            else:
                m = self._DRIVE_RE.match(value)
        if m is None:
            return "", value
        return value[: m.end()], value[m.end() :]

    def _normpath(self, value: str) -> str:
        return ntpath.normpath(value)


POSIX = PosixFlavor()
WINDOWS = WindowsFlavor()

_FLAVORS = {"posix": POSIX, "windows": WINDOWS}
_current: Optional[PathFlavor] = None


def flavor_by_name(name: str) -> PathFlavor:
    """Return the flavor called ``name``; ``auto`` picks the host platform's."""
    key = name.strip().lower()
    if key == "auto":
        key = "windows" if os.name == "nt" else "posix"
    try:
        return _FLAVORS[key]
    except KeyError as exc:
        raise ValueError(f"unknown path flavor: {name}") from exc


def current_flavor() -> PathFlavor:
    """Return the process-wide default flavor, selecting it on first use."""
    global _current
    if _current is None:
        _current = flavor_by_name(config.settings.path_flavor)
        get_logger("flavor").debug(
            "path flavor selected", flavor=_current.name, setting=config.settings.path_flavor
        )
    return _current


def set_current_flavor(flavor: Union[PathFlavor, str, None]) -> None:
    """Override the default flavor; ``None`` re-reads settings on next use."""
    global _current
    _current = flavor_by_name(flavor) if isinstance(flavor, str) else flavor


__all__ = [
    "PathFlavor",
    "PosixFlavor",
    "WindowsFlavor",
    "POSIX",
    "WINDOWS",
    "flavor_by_name",
    "current_flavor",
    "set_current_flavor",
]
