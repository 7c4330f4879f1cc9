"""Tests for ensure_dir and ensure_file."""

from __future__ import annotations

from pathlib import Path

import pytest

from pathnice.core import lowpath
from pathnice.core.errors import PathConflictError
from pathnice.core.fs import EnsureDirOptions, EnsureFileOptions, ensure_dir, ensure_file
from pathnice.core.io import FakeFileSystem, RealFileSystem, is_dir, is_file


class TestEnsureDir:
    """Tests for ensure_dir."""

    async def test_creates_nested_directories(self, fs: FakeFileSystem):
        """Test missing parents are created."""
        await ensure_dir(fs, "/a/b/c")
        assert is_dir(await fs.stat("/a/b/c"))

    async def test_twice_is_idempotent(self, fs: FakeFileSystem):
        """Test a second call on an existing directory succeeds."""
        await ensure_dir(fs, "/a")
        await ensure_dir(fs, "/a")
        assert await fs.listdir("/") == ["a"]

    async def test_existing_file_propagates(self, fs: FakeFileSystem):
        """Test a file in the way is an error."""
        await fs.write_file("/a", b"")
        with pytest.raises(FileExistsError):
            await ensure_dir(fs, "/a")

    async def test_mode(self, fs: FakeFileSystem):
        """Test the requested mode is used."""
        await ensure_dir(fs, "/private", EnsureDirOptions(mode=0o700))
        assert (await fs.stat("/private")).st_mode & 0o777 == 0o700

    async def test_real_filesystem(self, tmp_path: Path):
        """Test against the real filesystem."""
        target = tmp_path / "x" / "y"
        await ensure_dir(RealFileSystem(), str(target))
        await ensure_dir(RealFileSystem(), str(target))
        assert target.is_dir()


class TestEnsureFile:
    """Tests for ensure_file."""

    async def test_existing_file_untouched(self, fs: FakeFileSystem):
        """Test an existing file keeps its content."""
        await fs.write_file("/f.txt", b"keep")
        await ensure_file(lowpath.posix, fs, "/f.txt")
        assert await fs.read_file("/f.txt") == b"keep"

    async def test_existing_directory_conflicts(self, fs: FakeFileSystem):
        """Test a directory at the path is a conflict naming the path."""
        await fs.mkdir("/d")
        with pytest.raises(PathConflictError) as exc_info:
            await ensure_file(lowpath.posix, fs, "/d")
        assert exc_info.value.path == "/d"
        assert str(exc_info.value).startswith(".ensure_file(): /d")

    async def test_missing_parent_created(self, fs: FakeFileSystem):
        """Test the parent chain and an empty file are created."""
        await ensure_file(lowpath.posix, fs, "/a/b/c.txt")
        assert is_dir(await fs.stat("/a/b"))
        assert await fs.read_file("/a/b/c.txt") == b""

    async def test_existing_parent(self, fs: FakeFileSystem):
        """Test the file is created in an existing directory."""
        await fs.mkdir("/d")
        await ensure_file(lowpath.posix, fs, "/d/new.txt")
        assert is_file(await fs.stat("/d/new.txt"))

    async def test_parent_is_file_conflicts(self, fs: FakeFileSystem):
        """Test a file as parent is a conflict naming the parent."""
        await fs.write_file("/p", b"")
        with pytest.raises(PathConflictError) as exc_info:
            await ensure_file(lowpath.posix, fs, "/p/child.txt")
        assert exc_info.value.path == "/p"

    async def test_relative_target(self):
        """Test a bare file name is created in the working directory."""
        fs = FakeFileSystem(cwd="/work")
        await fs.mkdir("/work")
        await ensure_file(lowpath.posix, fs, "notes.txt")
        assert is_file(await fs.stat("/work/notes.txt"))

    async def test_modes(self, fs: FakeFileSystem):
        """Test file and directory modes are applied."""
        options = EnsureFileOptions(file_mode=0o600, dir_mode=0o700)
        await ensure_file(lowpath.posix, fs, "/m/f", options)
        assert (await fs.stat("/m")).st_mode & 0o777 == 0o700
        assert (await fs.stat("/m/f")).st_mode & 0o777 == 0o600

    async def test_other_parent_errors_propagate(self, fs: FakeFileSystem):
        """Test errors other than not-found are not swallowed."""
        await fs.symlink("/loop", "/loop")
        with pytest.raises(OSError) as exc_info:
            await ensure_file(lowpath.posix, fs, "/loop/f.txt")
        assert not isinstance(exc_info.value, FileNotFoundError)
