"""``AbsolutePath``: a path guaranteed to be rooted on its flavor."""

from __future__ import annotations

import errno
import os
from typing import Optional

from ..logging import get_logger
from ._types import PathInput, _PathValue
from .cwd import CurrentDirectoryProvider, default_provider
from .errors import InvalidPathError, PathIoError, PathNotFoundError
from .flavor import PathFlavor
from .kind import FileEntryKind
from .local import LocalPath


class AbsolutePath(_PathValue):
    """A normalized path that denotes an absolute location.

    Accepts the same inputs as ``LocalPath`` plus any ``LocalPath``
    (narrowing); construction fails with ``InvalidPathError`` unless the value
    is drive-rooted, UNC or root-rooted for its flavor.
    """

    __slots__ = ()

    def __init__(self, raw: PathInput, *, flavor: Optional[PathFlavor] = None) -> None:
        super().__init__(raw, flavor=flavor)
        if not self._flavor.is_absolute(self._value):
            raise InvalidPathError(f"path is not absolute: {self._value!r}")

    @classmethod
    def current_working_directory(
        cls,
        provider: Optional[CurrentDirectoryProvider] = None,
        *,
        flavor: Optional[PathFlavor] = None,
    ) -> "AbsolutePath":
        """Current directory of the process, read on every call."""
        provider = provider or default_provider()
        return cls(provider.get(), flavor=flavor)

    @property
    def parent(self) -> Optional["AbsolutePath"]:
        """Containing directory; ``None`` at the root."""
        value = self._parent_value()
        return None if value is None else AbsolutePath(value, flavor=self._flavor)

    def to_local_path(self) -> LocalPath:
        return LocalPath(self)

    def is_prefix_of(self, other: PathInput, *, ignore_case: bool = False) -> bool:
        """Same as ``LocalPath.is_prefix_of``."""
        return self.to_local_path().is_prefix_of(other, ignore_case=ignore_case)

    def relative_to(self, base: "AbsolutePath") -> LocalPath:
        """Relative path leading from ``base`` to this path.

        Raises:
            InvalidPathError: this path is not inside ``base``
        """
        return LocalPath(self._flavor.sep.join(self._relative_segments(base)), flavor=self._flavor)

    def read_kind(self) -> Optional[FileEntryKind]:
        return self.to_local_path().read_kind()

    def canonicalize(self) -> "AbsolutePath":
        """Resolve symlinks and ``.``/``..`` segments against the real filesystem.

        Raises:
            PathNotFoundError: the path or an intermediate link target is missing,
                or the name holds a NUL character
            PathIoError: the filesystem refused the lookup
        """
        log = get_logger("absolute")
        try:
            resolved = os.path.realpath(self._value, strict=True)
        except (FileNotFoundError, NotADirectoryError) as exc:
            log.warning("canonicalize failed", path=self._value, error=exc.strerror)
            raise PathNotFoundError(
                exc.errno or errno.ENOENT, exc.strerror or "No such file or directory", self._value
            ) from exc
        except ValueError as exc:
            # embedded NUL; no entry can have that name
            log.warning("canonicalize failed", path=self._value, error=str(exc))
            raise PathNotFoundError(errno.ENOENT, str(exc), self._value) from exc
        except OSError as exc:
            log.warning("canonicalize failed", path=self._value, error=exc.strerror)
            raise PathIoError(exc.errno, exc.strerror, self._value) from exc

        result = AbsolutePath(resolved, flavor=self._flavor)
        log.debug("canonicalized", path=self._value, resolved=result.value)
        return result

    def __truediv__(self, other: PathInput) -> "AbsolutePath":
        """Join ``other`` onto this path; an absolute ``other`` replaces it."""
        if not isinstance(other, _PathValue):
            other = LocalPath(other, flavor=self._flavor)
        return AbsolutePath(self._flavor.join(self._value, other.value), flavor=self._flavor)


__all__ = ["AbsolutePath"]
