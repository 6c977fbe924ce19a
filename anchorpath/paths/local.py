"""``LocalPath``: a path that may be absolute or relative to an implicit base."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ._types import PathInput, _PathValue
from .cwd import CurrentDirectoryProvider
from .flavor import PathFlavor
from .kind import FileEntryKind, read_kind

if TYPE_CHECKING:
    from .absolute import AbsolutePath


def _segment_prefix(prefix: str, value: str, sep: str) -> bool:
    if not value.startswith(prefix):
        return False
    if len(value) == len(prefix) or prefix.endswith(sep):
        return True
    return value[len(prefix)] == sep


class LocalPath(_PathValue):
    """A path string that has not been resolved against a base directory.

    Construction rewrites alternate separators to the flavor's canonical one
    and never fails for a string; nothing else about the string changes.
    Any ``AbsolutePath`` may be passed to the constructor (widening).
    """

    __slots__ = ()

    def __init__(self, raw: PathInput, *, flavor: Optional[PathFlavor] = None) -> None:
        super().__init__(raw, flavor=flavor)

    @property
    def is_absolute(self) -> bool:
        return self._flavor.is_absolute(self._value)

    @property
    def parent(self) -> Optional["LocalPath"]:
        """Path without its final segment; ``None`` for a single relative segment or a root."""
        value = self._parent_value()
        return None if value is None else LocalPath(value, flavor=self._flavor)

    def is_prefix_of(self, other: PathInput, *, ignore_case: bool = False) -> bool:
        """Whether ``other`` is this path or lies below it.

        The match is a literal string prefix that must end on a segment
        boundary: ``/foo`` is a prefix of ``/foo`` and ``/foo/bar`` but not of
        ``/foo1``. A trailing separator on this path is accepted. The empty
        path is a prefix of every relative path.

        Args:
            other: Path to test; strings are normalized with this path's flavor
            ignore_case: Compare casefolded values, for case-insensitive filesystems
        """
        if not isinstance(other, _PathValue):
            other = LocalPath(other, flavor=self._flavor)
        prefix, value = self._value, other.value
        if not prefix:
            return not self._flavor.is_absolute(value)
        if ignore_case:
            prefix, value = prefix.casefold(), value.casefold()
        return _segment_prefix(prefix, value, self._flavor.sep)

    def relative_to(self, base: PathInput) -> "LocalPath":
        """Segments of this path below ``base``, compared segment by segment.

        Raises:
            InvalidPathError: ``base`` is not a prefix of this path
        """
        if not isinstance(base, _PathValue):
            base = LocalPath(base, flavor=self._flavor)
        return LocalPath(self._flavor.sep.join(self._relative_segments(base)), flavor=self._flavor)

    def read_kind(self) -> Optional[FileEntryKind]:
        """Classify the filesystem entry at this path; ``None`` if it does not exist."""
        return read_kind(self._value, junctions=self._flavor.supports_junctions)

    def try_into_absolute_path(self) -> Optional["AbsolutePath"]:
        """Narrow to ``AbsolutePath`` when the value is absolute, else ``None``."""
        from .absolute import AbsolutePath

        return AbsolutePath(self) if self.is_absolute else None

    def resolve_to_current_directory(
        self, provider: Optional[CurrentDirectoryProvider] = None
    ) -> "AbsolutePath":
        """Anchor this path at the current directory, read at call time.

        Absolute values are returned as-is. ``provider`` defaults to the real
        process current directory.
        """
        from .absolute import AbsolutePath

        if self.is_absolute:
            return AbsolutePath(self)
        return AbsolutePath.current_working_directory(provider, flavor=self._flavor) / self

    def __truediv__(self, other: PathInput) -> "LocalPath":
        if not isinstance(other, _PathValue):
            other = LocalPath(other, flavor=self._flavor)
        return LocalPath(self._flavor.join(self._value, other.value), flavor=self._flavor)


__all__ = ["LocalPath"]
