"""Tests for AbsolutePath validation, joining and canonicalization."""

from __future__ import annotations

import errno
import os
import pickle
import sys
import uuid

import pytest

from anchorpath.paths import (
    AbsolutePath,
    FileEntryKind,
    FixedCurrentDirectory,
    InvalidPathError,
    LocalPath,
    PathError,
    PathIoError,
    PathNotFoundError,
)

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX filesystem semantics")


@pytest.mark.parametrize("raw", ["", "foo", "foo/bar", "./foo", "../foo", "~/foo"])
def test_rejects_relative_posix(raw: str, posix):
    with pytest.raises(InvalidPathError):
        AbsolutePath(raw, flavor=posix)


@pytest.mark.parametrize("raw", ["foo", "\\foo", "C:foo", "C:", "/foo"])
def test_rejects_non_rooted_windows(raw: str, windows):
    with pytest.raises(InvalidPathError):
        AbsolutePath(raw, flavor=windows)


@pytest.mark.parametrize(
    "raw,value",
    [
        ("C:\\", "C:\\"),
        ("c:/Users/John Doe\\Documents", "c:\\Users\\John Doe\\Documents"),
        ("//server/share/dir", "\\\\server\\share\\dir"),
    ],
)
def test_accepts_rooted_windows(raw: str, value: str, windows):
    assert AbsolutePath(raw, flavor=windows).value == value


def test_invalid_path_error_is_a_value_error(posix):
    with pytest.raises(ValueError):
        AbsolutePath("relative", flavor=posix)


def test_narrowing_from_local_path_validates(posix):
    assert AbsolutePath(LocalPath("/a/b", flavor=posix)).value == "/a/b"
    with pytest.raises(InvalidPathError):
        AbsolutePath(LocalPath("a/b", flavor=posix))


@pytest.mark.parametrize("raw", ["/", "/foo", "/foo/bar/", "/a b/c\\d"])
def test_widening_then_narrowing_preserves_value(raw: str, posix):
    absolute = AbsolutePath(raw, flavor=posix)

    assert LocalPath(absolute) == LocalPath(raw, flavor=posix)
    assert AbsolutePath(LocalPath(absolute)) == absolute


def test_current_working_directory_reads_live_state(tmp_path):
    original = AbsolutePath.current_working_directory()
    try:
        os.chdir(tmp_path)
        assert AbsolutePath.current_working_directory() == AbsolutePath(os.getcwd())
    finally:
        os.chdir(original.value)
    assert AbsolutePath.current_working_directory() == original


def test_current_working_directory_from_provider(posix):
    cwd = AbsolutePath.current_working_directory(FixedCurrentDirectory("/srv"), flavor=posix)

    assert cwd == AbsolutePath("/srv", flavor=posix)


def test_current_working_directory_rejects_relative_provider(posix):
    with pytest.raises(InvalidPathError):
        AbsolutePath.current_working_directory(FixedCurrentDirectory("relative"), flavor=posix)


@pytest.mark.parametrize(
    "base,other,expected",
    [
        ("/a", "b/c", "/a/b/c"),
        ("/a/", "b", "/a/b"),
        ("/", "etc", "/etc"),
        ("/a", "", "/a"),
        ("/a", "../b", "/a/../b"),
    ],
)
def test_join_relative(base: str, other: str, expected: str, posix):
    assert (AbsolutePath(base, flavor=posix) / LocalPath(other, flavor=posix)).value == expected
    assert (AbsolutePath(base, flavor=posix) / other).value == expected


def test_join_absolute_right_operand_replaces_base(posix):
    joined = AbsolutePath("/home/user", flavor=posix) / LocalPath("/etc/hosts", flavor=posix)

    assert joined == AbsolutePath("/etc/hosts", flavor=posix)


def test_join_absolute_right_operand_replaces_base_windows(windows):
    joined = AbsolutePath("C:\\Users", flavor=windows) / "D:\\data"

    assert joined.value == "D:\\data"


@pytest.mark.parametrize("other", ["\\temp", "D:temp"])
def test_join_partially_rooted_operand_is_rejected(other: str, windows):
    with pytest.raises(InvalidPathError):
        AbsolutePath("C:\\Users", flavor=windows) / other


def test_parent_and_file_name(posix, windows):
    p = AbsolutePath("/var/log/syslog.1", flavor=posix)
    assert p.parent == AbsolutePath("/var/log", flavor=posix)
    assert p.file_name == "syslog.1"
    assert p.extension == ".1"
    assert AbsolutePath("/", flavor=posix).parent is None

    w = AbsolutePath("C:\\Windows\\System32", flavor=windows)
    assert w.parent == AbsolutePath("C:\\Windows", flavor=windows)
    assert w.parent.parent == AbsolutePath("C:\\", flavor=windows)
    assert w.parent.parent.parent is None


def test_relative_to(posix):
    base = AbsolutePath("/repo", flavor=posix)
    target = AbsolutePath("/repo/src/pkg/mod.py", flavor=posix)

    rel = target.relative_to(base)

    assert rel == LocalPath("src/pkg/mod.py", flavor=posix)
    assert base / rel == target
    with pytest.raises(InvalidPathError):
        base.relative_to(target)


def test_is_prefix_of_delegates_to_local_path(posix):
    assert AbsolutePath("/foo", flavor=posix).is_prefix_of(AbsolutePath("/foo/bar", flavor=posix))
    assert not AbsolutePath("/foo", flavor=posix).is_prefix_of("/foo1")


def test_normalized_is_syntactic(posix):
    p = AbsolutePath("/a/./b//c/../d", flavor=posix)

    assert p.normalized() == AbsolutePath("/a/b/d", flavor=posix)
    assert isinstance(p.normalized(), AbsolutePath)


def test_pickle_round_trip(windows):
    p = AbsolutePath("C:\\x\\y", flavor=windows)
    restored = pickle.loads(pickle.dumps(p))

    assert restored == p
    assert restored.flavor is windows


def test_canonicalize_resolves_dot_segments(sandbox):
    messy = AbsolutePath(str(sandbox)) / "dir" / ".." / "file.txt"

    canonical = messy.canonicalize()

    assert canonical == AbsolutePath(os.path.realpath(sandbox / "file.txt"))
    assert canonical.read_kind() is FileEntryKind.FILE


def test_canonicalize_follows_symlinks(sandbox, symlinks_supported):
    link = sandbox / "link"
    os.symlink(sandbox / "dir", link, target_is_directory=True)

    canonical = AbsolutePath(str(link)).canonicalize()

    assert canonical == AbsolutePath(os.path.realpath(sandbox / "dir"))
    assert canonical.read_kind() is FileEntryKind.DIRECTORY


def test_canonicalize_missing_path_raises_not_found(sandbox):
    missing = AbsolutePath(str(sandbox)) / str(uuid.uuid4())

    with pytest.raises(PathNotFoundError) as info:
        missing.canonicalize()

    assert info.value.filename == missing.value
    assert info.value.errno == errno.ENOENT
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_canonicalize_dangling_symlink_raises_not_found(sandbox, symlinks_supported):
    link = sandbox / "dangling"
    os.symlink(sandbox / "nowhere", link)

    with pytest.raises(PathNotFoundError):
        AbsolutePath(str(link)).canonicalize()


@posix_only
def test_canonicalize_through_file_raises_not_found(sandbox):
    with pytest.raises(PathNotFoundError):
        (AbsolutePath(str(sandbox)) / "file.txt" / "child").canonicalize()


def test_canonicalize_name_with_nul_raises_not_found(sandbox):
    bad = AbsolutePath(str(sandbox)) / "a\x00b"

    with pytest.raises(PathNotFoundError) as info:
        bad.canonicalize()

    assert info.value.errno == errno.ENOENT
    assert isinstance(info.value.__cause__, ValueError)


@posix_only
def test_canonicalize_symlink_loop_raises_io_error(sandbox, symlinks_supported):
    os.symlink(sandbox / "b", sandbox / "a")
    os.symlink(sandbox / "a", sandbox / "b")

    with pytest.raises(PathIoError) as info:
        AbsolutePath(str(sandbox / "a")).canonicalize()

    assert not isinstance(info.value, PathNotFoundError)
    assert info.value.errno == errno.ELOOP


def test_error_hierarchy():
    assert issubclass(PathNotFoundError, PathIoError)
    assert issubclass(PathIoError, OSError)
    assert issubclass(PathIoError, PathError)
    assert issubclass(InvalidPathError, PathError)
    assert not issubclass(InvalidPathError, OSError)
