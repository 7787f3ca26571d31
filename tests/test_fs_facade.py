"""
Tests for the shorthand functions in posixfs.fs.
"""
from __future__ import annotations

import os

import pytest

from posixfs import CallFailure, Dir, File, Path
from posixfs import fs


class TestPureHelpers:
    """Helpers that never touch the filesystem."""

    def test_combine_variants(self):
        """Test that combine returns str and combine_to_path returns Path."""
        assert fs.combine("/", "a", ["b"]) == "/a/b"
        assert isinstance(fs.combine("a"), str)
        assert isinstance(fs.combine_to_path("a"), Path)
        assert fs.path("//x", "y") == "//x/y"

    def test_resolve_variants(self):
        """Test resolve, resolve_to_path and realpath."""
        assert fs.resolve("~", "a/../b") == "/home/tester/b"
        assert isinstance(fs.resolve_to_path("a"), Path)
        assert fs.realpath("/x/..") == "/"

    def test_home_and_root(self):
        """Test home and root accessors."""
        assert fs.home() == "/home/tester"
        assert fs.home_path() == "/home/tester"
        assert fs.root_path() == "/"

    def test_element_factories(self):
        """Test dir() and file() factories."""
        assert fs.dir("/a", "b") == Dir("/a/b")
        assert fs.file("/a/b.txt") == File("/a/b.txt")


class TestCreate:
    """Tree creation."""

    def test_create_root_only(self, root):
        """Test that create() without entries creates the root."""
        target = root.append("new/root")
        fs.create(target)
        assert target.is_dir()

    def test_create_folders_and_files(self, root):
        """Test folders are created and files touched below root."""
        fs.create(str(root), folders=["a", "b/c"], files=["b/c/f.txt", "g.txt"])

        assert fs.is_dir(root, "a")
        assert fs.is_dir(root, "b/c")
        assert fs.is_file(root, "b/c/f.txt")
        assert fs.is_file(root, "g.txt")

    def test_create_leaves_existing_files(self, root):
        """Test that existing files keep their content."""
        with open(root.append("keep.txt"), "w") as handle:
            handle.write("data")

        fs.create(root, files=["keep.txt"])

        assert fs.filesize(root, "keep.txt") == 4


class TestFilesystemShorthands:
    """Delegating wrappers around Path methods."""

    def test_touch_all_and_queries(self, root):
        """Test touch_all with exists/is_file/is_link."""
        fs.touch_all([root.append("a/1"), root.append("b/2")])
        os.symlink(root.append("a/1").get(), root.append("link").get())

        assert fs.exists(root, "a/1")
        assert fs.is_file(root, "b", "2")
        assert fs.is_link(root, "link")
        assert not fs.exists(root, "missing")

    def test_mkdir_touch_unlink_rmdir(self, root):
        """Test single-step creation and removal."""
        fs.mkdir(root.append("d"))
        fs.touch(root.append("d/f"))

        fs.unlink(root, "d/f")
        fs.rmdir(root, "d")

        assert fs.scandir(root) == []

    def test_rmdir_missing_raises(self, root):
        """Test that failures propagate from the facade."""
        with pytest.raises(CallFailure):
            fs.rmdir(root, "missing")

    def test_delete_and_clean(self, root):
        """Test delete() and clean_directory()."""
        fs.create(root, files=["x/y/z", "w"])

        fs.delete(root, "x")
        assert fs.scandir(root) == ["w"]

        fs.clean_directory(root)
        assert fs.scandir(root) == []
        assert fs.is_dir(root)

    def test_clean_directory_from_string(self, root):
        """Test clean_directory with plain string fragments."""
        fs.create(root, files=["sub/a"])

        fs.clean_directory(str(root), "sub")

        assert fs.scandir(root.append("sub")) == []
        assert fs.is_dir(root, "sub")

    def test_copy_file_and_content(self, root):
        """Test the copy shorthands."""
        fs.create(root, files=["src/a.txt", "src/b/c.txt"])

        copied = fs.copy_file(root.append("src/a.txt"), root.append("one.txt"))
        fs.copy_content(root.append("src"), root.append("mirror"))

        assert copied == root.append("one.txt")
        assert fs.is_file(root, "one.txt")
        assert fs.is_file(root, "mirror/b/c.txt")
