"""Tests for the synchronous path methods of path values."""

from __future__ import annotations

import os
from pathlib import PurePosixPath

import pytest

from pathnice.core import get_path_module, lowpath
from pathnice.core.errors import IncompatiblePathError, PathArgumentError
from pathnice.core.factory import PathModule
from pathnice.core.io import FakeFileSystem
from pathnice.core.nice import ParsedPathNice


class TestJoin:
    """Tests for join and the / operator."""

    def test_join_matches_lowpath(self, posix_path: PathModule):
        """Test join gives exactly what the implementation gives."""
        value = posix_path("/srv")
        assert value.join("app", "../conf", "x.json").raw == lowpath.posix.join(
            "/srv", "app", "../conf", "x.json"
        )

    def test_join_returns_new_value_on_same_fs(self, posix_path: PathModule):
        """Test the result shares the filesystem and leaves the original alone."""
        value = posix_path("/srv")
        joined = value.join("app")
        assert joined is not value
        assert value.raw == "/srv"
        assert joined.fs is value.fs

    def test_join_accepts_values_and_pathlike(self, posix_path: PathModule):
        """Test compatible values and os.PathLike objects are accepted."""
        value = posix_path("/srv").join(posix_path("app"), PurePosixPath("x"))
        assert value.raw == "/srv/app/x"

    def test_truediv(self, posix_path: PathModule):
        """Test the / operator joins from both sides."""
        assert (posix_path("/srv") / "app").raw == "/srv/app"
        assert ("/root" / posix_path("x")).raw == "/root/x"

    def test_join_invalid_type(self, posix_path: PathModule):
        """Test non path-like parts are rejected as a TypeError."""
        with pytest.raises(PathArgumentError):
            posix_path("/srv").join(42)
        with pytest.raises(TypeError):
            posix_path("/srv").join(None)

    def test_incompatible_flavor(self, posix_path: PathModule, fs: FakeFileSystem):
        """Test combining POSIX and Windows values fails without fs access."""
        windows_value = posix_path.win32("C:\\dir")
        with pytest.raises(IncompatiblePathError):
            posix_path("/srv").join(windows_value)
        assert fs._nodes.keys() == {"/"}

    def test_incompatible_filesystem(self, posix_path: PathModule):
        """Test values bound to another filesystem are rejected."""
        other = get_path_module(lowpath.posix, FakeFileSystem())
        with pytest.raises(IncompatiblePathError) as exc_info:
            posix_path("/srv").join(other("app"))
        assert isinstance(exc_info.value, ValueError)


class TestDirnameAndFilename:
    """Tests for dirname, parent and filename."""

    def test_dirname(self, posix_path: PathModule):
        """Test reading the directory."""
        assert posix_path("/a/b/c.txt").dirname().raw == "/a/b"
        assert posix_path("/a/b/c.txt").parent.raw == "/a/b"

    def test_dirname_replace(self, posix_path: PathModule):
        """Test replacing the directory with a string or a value."""
        assert posix_path("/a/b/c.txt").dirname("/x").raw == "/x/c.txt"
        assert posix_path("/a/b/c.txt").dirname(posix_path("y")).raw == "y/c.txt"

    def test_dirname_callable(self, posix_path: PathModule):
        """Test mapping the directory with a function."""
        assert posix_path("/a/b/c.txt").dirname(lambda d: d + "/sub").raw == "/a/b/sub/c.txt"

    def test_filename(self, posix_path: PathModule):
        """Test reading and replacing the file name."""
        value = posix_path("/a/b/c.txt")
        assert value.filename() == "c.txt"
        assert value.filename("d.md").raw == "/a/b/d.md"
        assert value.filename(str.upper).raw == "/a/b/C.TXT"

    def test_filename_of_relative_path_with_dots(self, posix_path: PathModule):
        """Test the name is read from the resolved path."""
        assert posix_path("a/b/..").filename() == "a"


class TestExtension:
    """Tests for ext, without_ext and the prefix/postfix helpers."""

    def test_ext(self, posix_path: PathModule):
        """Test reading and replacing the extension."""
        value = posix_path("/a/b/c.txt")
        assert value.ext() == ".txt"
        assert value.ext(".md").raw == "/a/b/c.md"
        assert value.ext(lambda e: e + ".bak").raw == "/a/b/c.txt.bak"

    def test_without_ext(self, posix_path: PathModule):
        """Test removing the extension."""
        assert posix_path("/a/b/c.txt").without_ext().raw == "/a/b/c"
        assert posix_path("c.txt").without_ext().raw == "c"

    def test_prefix_filename(self, posix_path: PathModule):
        """Test a prefix lands before the file name."""
        assert posix_path("/a/b/c.txt").prefix_filename("old-").raw == "/a/b/old-c.txt"

    def test_postfix_before_ext(self, posix_path: PathModule):
        """Test a postfix lands before the extension."""
        assert posix_path("/a/b/c.txt").postfix_before_ext("-v2").raw == "/a/b/c-v2.txt"

    def test_postfix(self, posix_path: PathModule):
        """Test a postfix lands after the extension."""
        assert posix_path("/a/b/c.txt").postfix(".bak").raw == "/a/b/c.txt.bak"

    def test_win32_extension(self, posix_path: PathModule):
        """Test extension changes use the Windows separator."""
        assert posix_path.win32("C:\\d\\f.txt").ext(".md").raw == "C:\\d\\f.md"


class TestSeparator:
    """Tests for separator."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("/a/b", "/"), ("a\\b", "\\"), ("a/b\\c", "hybrid"), ("abc", "none")],
    )
    def test_detect(self, posix_path: PathModule, raw: str, expected: str):
        """Test the separator in use is reported."""
        assert posix_path(raw).separator() == expected

    def test_force(self, posix_path: PathModule):
        """Test every separator is replaced."""
        assert posix_path("/a\\b/c").separator("/").raw == "/a/b/c"
        assert posix_path("/a/b").separator("\\").raw == "\\a\\b"


class TestAbsoluteAndRelative:
    """Tests for is_absolute, to_absolute and to_relative."""

    def test_is_absolute(self, posix_path: PathModule):
        """Test absoluteness per flavor."""
        assert posix_path("/a").is_absolute()
        assert not posix_path("a").is_absolute()
        assert posix_path.win32("C:\\a").is_absolute()

    def test_to_absolute_keeps_absolute(self, posix_path: PathModule):
        """Test an absolute value is returned as-is."""
        value = posix_path("/a")
        assert value.to_absolute() is value

    def test_to_absolute_with_base(self, posix_path: PathModule):
        """Test relative values resolve against a base."""
        assert posix_path("x/../y").to_absolute("/base").raw == "/base/y"

    def test_to_absolute_uses_cwd(self, posix_path: PathModule):
        """Test relative values resolve against the working directory."""
        assert posix_path("y").to_absolute().raw == os.path.join(os.getcwd(), "y")

    def test_to_relative(self, posix_path: PathModule):
        """Test relative paths from a directory."""
        assert posix_path("/a/b/c.txt").to_relative("/a").raw == "b/c.txt"
        assert posix_path("/a").to_relative(posix_path("/a/b")).raw == ".."


class TestValueSemantics:
    """Tests for immutability, equality and conversions."""

    def test_immutable(self, posix_path: PathModule):
        """Test attributes cannot be assigned or deleted."""
        value = posix_path("/a")
        with pytest.raises(AttributeError):
            value.raw = "/b"
        with pytest.raises(AttributeError):
            value.extra = 1
        with pytest.raises(AttributeError):
            del value.raw

    def test_equality_and_hash(self, posix_path: PathModule):
        """Test values compare by raw string and binding."""
        assert posix_path("/a") == posix_path("/a")
        assert len({posix_path("/a"), posix_path("/a"), posix_path("/b")}) == 2
        assert posix_path("/a") != posix_path.win32("/a")
        assert posix_path("/a") != "/a"

    def test_conversions(self, posix_path: PathModule):
        """Test fspath, str and repr."""
        value = posix_path("/a/b")
        assert os.fspath(value) == "/a/b"
        assert str(value) == "/a/b"
        assert repr(value) == "PathNicePosix('/a/b')"

    def test_constructor_requires_string(self, posix_path: PathModule):
        """Test the class constructor takes raw strings only."""
        with pytest.raises(PathArgumentError):
            posix_path.PathNice(42)

    def test_constructor_filesystem(self, posix_path: PathModule, fs: FakeFileSystem):
        """Test the module filesystem is the constructor default."""
        assert posix_path.PathNice("/a").fs is fs
        other = FakeFileSystem()
        assert posix_path.PathNice("/a", other).fs is other


class TestParse:
    """Tests for parse and ParsedPathNice."""

    def test_parts(self, posix_path: PathModule):
        """Test every part is exposed."""
        parsed = posix_path("/home/fuu/notes.txt").parse()
        assert isinstance(parsed, ParsedPathNice)
        assert (parsed.root, parsed.dir, parsed.base, parsed.ext, parsed.name) == (
            "/",
            "/home/fuu",
            "notes.txt",
            ".txt",
            "notes",
        )

    def test_format_round(self, posix_path: PathModule):
        """Test formatting an unchanged parse gives the path back."""
        value = posix_path("/home/fuu/notes.txt")
        assert value.parse().format() == value

    def test_replace_ext(self, posix_path: PathModule):
        """Test replacing the extension rebuilds base."""
        parsed = posix_path("/home/fuu/notes.txt").parse().replace(ext=".md")
        assert parsed.base == "notes.md"
        assert parsed.format().raw == "/home/fuu/notes.md"

    def test_replace_base(self, posix_path: PathModule):
        """Test replacing base re-splits name and ext."""
        parsed = posix_path("/home/fuu/notes.txt").parse().replace(base="todo.yaml")
        assert (parsed.name, parsed.ext) == ("todo", ".yaml")

    def test_replace_dir(self, posix_path: PathModule):
        """Test moving to another directory."""
        assert posix_path("/a/f.txt").parse().replace(dir="/b").format().raw == "/b/f.txt"

    def test_replace_unknown_part(self, posix_path: PathModule):
        """Test unknown parts are rejected."""
        with pytest.raises(TypeError):
            posix_path("/a").parse().replace(drive="C:")

    def test_immutable(self, posix_path: PathModule):
        """Test parsed values cannot be changed in place."""
        parsed = posix_path("/a").parse()
        with pytest.raises(AttributeError):
            parsed.name = "b"
