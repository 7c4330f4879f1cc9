"""Tests for FakeFileSystem (async).

Tests the in-memory fake filesystem implementation.
"""

import errno

import pytest

from pathnice.core.io import FakeFileSystem, is_dir, is_file, is_symlink


@pytest.fixture
def fs():
    """Provide fresh FakeFileSystem instance."""
    return FakeFileSystem()


class TestDirectories:
    """Tests for directory operations."""

    async def test_mkdir_requires_parent(self, fs: FakeFileSystem):
        """Test non-recursive mkdir fails without a parent."""
        with pytest.raises(FileNotFoundError):
            await fs.mkdir("/a/b")

    async def test_mkdir_existing_fails(self, fs: FakeFileSystem):
        """Test non-recursive mkdir fails on an existing directory."""
        await fs.mkdir("/a")
        with pytest.raises(FileExistsError):
            await fs.mkdir("/a")

    async def test_mkdir_recursive(self, fs: FakeFileSystem):
        """Test recursive mkdir creates parents and tolerates existing dirs."""
        await fs.mkdir("/a/b/c", recursive=True)
        await fs.mkdir("/a/b/c", recursive=True)
        assert is_dir(await fs.stat("/a/b"))
        assert await fs.listdir("/a") == ["b"]

    async def test_mkdir_recursive_over_file(self, fs: FakeFileSystem):
        """Test recursive mkdir on an existing file fails."""
        await fs.write_file("/f", b"")
        with pytest.raises(FileExistsError):
            await fs.mkdir("/f", recursive=True)
        with pytest.raises(NotADirectoryError):
            await fs.mkdir("/f/sub", recursive=True)

    async def test_mkdir_applies_umask(self, fs: FakeFileSystem):
        """Test directory permissions are masked."""
        await fs.mkdir("/a", mode=0o777)
        assert (await fs.stat("/a")).st_mode & 0o777 == 0o755

    async def test_rmdir_not_empty(self, fs: FakeFileSystem):
        """Test rmdir refuses a non-empty directory unless recursive."""
        await fs.mkdir("/a/b", recursive=True)
        with pytest.raises(OSError) as exc_info:
            await fs.rmdir("/a")
        assert exc_info.value.errno == errno.ENOTEMPTY

        await fs.rmdir("/a", recursive=True)
        assert await fs.listdir("/") == []

    async def test_listdir_is_sorted_and_shallow(self, fs: FakeFileSystem):
        """Test listdir returns direct children only."""
        await fs.mkdir("/d/z/deep", recursive=True)
        await fs.write_file("/d/a.txt", b"a")
        assert await fs.listdir("/d") == ["a.txt", "z"]

    async def test_listdir_file_fails(self, fs: FakeFileSystem):
        """Test listing a file fails."""
        await fs.write_file("/f", b"")
        with pytest.raises(NotADirectoryError):
            await fs.listdir("/f")


class TestFiles:
    """Tests for file operations."""

    async def test_write_and_read(self, fs: FakeFileSystem):
        """Test bytes round through the filesystem."""
        result = await fs.write_file("/hello.txt", b"Hello")
        assert result.bytes_written == 5
        assert await fs.read_file("/hello.txt") == b"Hello"

    async def test_append(self, fs: FakeFileSystem):
        """Test appending keeps existing content."""
        await fs.write_file("/log", b"a")
        await fs.write_file("/log", b"b", append=True)
        assert await fs.read_file("/log") == b"ab"

    async def test_write_requires_parent(self, fs: FakeFileSystem):
        """Test writing into a missing directory fails."""
        with pytest.raises(FileNotFoundError):
            await fs.write_file("/missing/f", b"")

    async def test_stat_through_file_is_not_a_directory(self, fs: FakeFileSystem):
        """Test a file used as a directory raises ENOTDIR."""
        await fs.write_file("/f", b"")
        with pytest.raises(NotADirectoryError):
            await fs.stat("/f/child")

    async def test_unlink_directory_fails(self, fs: FakeFileSystem):
        """Test unlink refuses directories."""
        await fs.mkdir("/d")
        with pytest.raises(IsADirectoryError):
            await fs.unlink("/d")

    async def test_relative_paths_use_cwd(self):
        """Test relative paths resolve against cwd."""
        fs = FakeFileSystem(cwd="/work")
        await fs.mkdir("/work")
        await fs.write_file("notes.txt", b"x")
        assert is_file(await fs.stat("/work/notes.txt"))


class TestRename:
    """Tests for rename."""

    async def test_rename_directory_moves_children(self, fs: FakeFileSystem):
        """Test descendants follow a renamed directory."""
        await fs.mkdir("/a/b", recursive=True)
        await fs.write_file("/a/b/f.txt", b"x")
        await fs.rename("/a", "/z")
        assert await fs.read_file("/z/b/f.txt") == b"x"
        with pytest.raises(FileNotFoundError):
            await fs.stat("/a")

    async def test_rename_into_itself_fails(self, fs: FakeFileSystem):
        """Test a directory cannot be renamed below itself."""
        await fs.mkdir("/a/b", recursive=True)
        with pytest.raises(OSError) as exc_info:
            await fs.rename("/a", "/a/b/c")
        assert exc_info.value.errno == errno.EINVAL

    async def test_rename_replaces_file(self, fs: FakeFileSystem):
        """Test renaming over a file replaces it."""
        await fs.write_file("/a", b"new")
        await fs.write_file("/b", b"old")
        await fs.rename("/a", "/b")
        assert await fs.read_file("/b") == b"new"


class TestLinks:
    """Tests for symbolic links."""

    async def test_symlink_is_followed_by_stat(self, fs: FakeFileSystem):
        """Test stat follows and lstat does not."""
        await fs.mkdir("/real")
        await fs.symlink("/real", "/link")
        assert is_dir(await fs.stat("/link"))
        assert is_symlink(await fs.lstat("/link"))
        assert await fs.readlink("/link") == "/real"
        assert await fs.realpath("/link") == "/real"

    async def test_relative_symlink(self, fs: FakeFileSystem):
        """Test relative link targets resolve from the link's directory."""
        await fs.mkdir("/d")
        await fs.write_file("/d/target.txt", b"t")
        await fs.symlink("target.txt", "/d/link")
        assert await fs.read_file("/d/link") == b"t"

    async def test_symlink_loop(self, fs: FakeFileSystem):
        """Test link cycles raise ELOOP."""
        await fs.symlink("/b", "/a")
        await fs.symlink("/a", "/b")
        with pytest.raises(OSError) as exc_info:
            await fs.stat("/a")
        assert exc_info.value.errno == errno.ELOOP

    async def test_readlink_on_file(self, fs: FakeFileSystem):
        """Test readlink of a regular file raises EINVAL."""
        await fs.write_file("/f", b"")
        with pytest.raises(OSError) as exc_info:
            await fs.readlink("/f")
        assert exc_info.value.errno == errno.EINVAL


class TestAttributes:
    """Tests for permission, ownership and time changes."""

    async def test_chmod(self, fs: FakeFileSystem):
        """Test permission bits are replaced."""
        await fs.write_file("/f", b"")
        await fs.chmod("/f", 0o600)
        assert (await fs.stat("/f")).st_mode & 0o7777 == 0o600

    async def test_chown(self, fs: FakeFileSystem):
        """Test ownership is updated."""
        await fs.write_file("/f", b"")
        await fs.chown("/f", 1000, 100)
        st = await fs.stat("/f")
        assert (st.st_uid, st.st_gid) == (1000, 100)

    async def test_utime(self, fs: FakeFileSystem):
        """Test access and modification times are set."""
        await fs.write_file("/f", b"")
        await fs.utime("/f", 10.0, 20.0)
        st = await fs.stat("/f")
        assert st.st_atime == 10.0
        assert st.st_mtime == 20.0

    async def test_no_rm_primitive(self, fs: FakeFileSystem):
        """Test the fake exercises the lstat/rmdir/unlink removal path."""
        assert not hasattr(fs, "rm")
