from __future__ import annotations

import os
from typing import Any, Optional, Tuple, TypeVar, Union

from .errors import InvalidPathError
from .flavor import PathFlavor, current_flavor, flavor_by_name

_P = TypeVar("_P", bound="_PathValue")

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]", "_PathValue"]


def _coerce(raw: Any, flavor: Optional[PathFlavor]) -> Tuple[str, PathFlavor]:
    """Turn constructor input into ``(normalized value, flavor)``."""
    if isinstance(raw, _PathValue):
        # Already normalized, but possibly for another flavor
        text, source_flavor = raw.value, raw.flavor
        flavor = flavor or source_flavor
    elif isinstance(raw, str):
        text = raw
    elif isinstance(raw, (bytes, os.PathLike)):
        text = os.fsdecode(os.fspath(raw))
    else:
        raise TypeError(f"expected str, bytes or os.PathLike, got {type(raw).__name__}")

    flavor = flavor or current_flavor()
    return flavor.normalize_separators(text), flavor


class _PathValue:
    """Immutable normalized path string shared by ``LocalPath`` and ``AbsolutePath``.

    Values of different concrete types never compare equal, even when their
    strings match; convert explicitly first.
    """

    __slots__ = ("_value", "_flavor")

    _value: str
    _flavor: PathFlavor

    def __init__(self, raw: PathInput, *, flavor: Optional[PathFlavor] = None) -> None:
        value, flavor = _coerce(raw, flavor)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_flavor", flavor)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> str:
        """Normalized, platform-native path string."""
        return self._value

    @property
    def flavor(self) -> PathFlavor:
        return self._flavor

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._flavor.parts(self._value)

    @property
    def file_name(self) -> str:
        """Final segment, or ``""`` when the path is empty or a bare root."""
        root, rest = self._flavor.split_root(self._value)
        segments = [s for s in rest.split(self._flavor.sep) if s]
        return segments[-1] if segments else ""

    @property
    def extension(self) -> str:
        """Extension of ``file_name`` including the dot; ``""`` for dot-files and bare names."""
        name = self.file_name
        idx = name.rfind(".")
        if idx <= 0 or idx == len(name) - 1:
            return ""
        return name[idx:]

    @property
    def file_name_without_extension(self) -> str:
        name, ext = self.file_name, self.extension
        return name[: len(name) - len(ext)] if ext else name

    def _parent_value(self) -> Optional[str]:
        root, rest = self._flavor.split_root(self._value)
        segments = tuple(s for s in rest.split(self._flavor.sep) if s)
        if not segments or (not root and len(segments) == 1):
            return None
        return self._flavor.compose(root, segments[:-1])

    def _relative_segments(self, base: "_PathValue") -> Tuple[str, ...]:
        mine, theirs = self.parts, base.parts
        if mine[: len(theirs)] != theirs:
            raise InvalidPathError(f"{self._value!r} is not inside {base._value!r}")
        return mine[len(theirs) :]

    def normalized(self: _P) -> _P:
        """Copy with ``.``/``..`` segments and duplicate separators collapsed.

        Purely syntactic; ``a/link/..`` becomes ``a`` even if ``link`` is a symlink.
        """
        return type(self)(self._flavor.normpath(self._value), flavor=self._flavor)

    def __str__(self) -> str:
        return self._value

    def __fspath__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __reduce__(self):
        return (_restore, (type(self), self._value, self._flavor.name))


def _restore(cls, value, flavor_name):
    return cls(value, flavor=flavor_by_name(flavor_name))
