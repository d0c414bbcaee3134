"""Unit tests for the in-memory filesystem backend."""

import pytest

from dotgirl.api.DotgirlError import IoFailureError
from dotgirl.api.filesystem.Filesystem import Filesystem

pytestmark = pytest.mark.filesystem


class TestMemoryFilesystem:
    def test_starts_with_only_root(self, memory_fs):
        assert memory_fs.is_dir("/")
        assert memory_fs.list_dir("/") == []

    def test_instances_are_isolated(self):
        first = Filesystem.memory()
        second = Filesystem.memory()
        first.write("/only-here", "x")
        assert first.exists("/only-here")
        assert not second.exists("/only-here")

    def test_prefix_sibling_survives_removal(self, memory_fs):
        """Removing /src must not touch /srcOther even though the names share a prefix."""
        memory_fs.make_directory_tree("/src")
        memory_fs.make_directory_tree("/srcOther")
        memory_fs.write("/srcOther/file", "kept")
        memory_fs.remove("/src")
        assert memory_fs.read("/srcOther/file") == "kept"
        assert memory_fs.list_dir("/") == ["srcOther"]

    def test_relative_path_rejected(self, memory_fs):
        with pytest.raises(IoFailureError, match="absolute"):
            memory_fs.write("relative/file", "x")

    def test_remove_root_rejected(self, memory_fs):
        with pytest.raises(IoFailureError):
            memory_fs.remove("/")

    def test_symlink_loop(self, memory_fs):
        memory_fs.symlink("/b", "/a")
        memory_fs.symlink("/a", "/b")
        with pytest.raises(IoFailureError, match="Too many levels"):
            memory_fs.read("/a")
        # Queries never raise
        assert not memory_fs.is_file("/a")
        assert memory_fs.is_symlink("/a")

    def test_path_normalization(self, memory_fs):
        memory_fs.make_directory_tree("/a/b")
        memory_fs.write("/a/b/../file", "normalized")
        assert memory_fs.read("/a/file") == "normalized"
        assert memory_fs.read("//a///file") == "normalized"

    def test_copy_without_destination_parent_fails(self, memory_fs):
        memory_fs.write("/file", "x")
        with pytest.raises(IoFailureError):
            memory_fs.copy("/file", "/missing/dst")
