"""Unit tests for loading and saving lock and bundle metadata."""

import pytest

from dotgirl.api.bundle import Bundle, Entry, Lock
from dotgirl.api.bundle.get_bundle_dir import get_bundle_dir
from dotgirl.api.bundle.load_bundle_metadata import load_bundle_metadata
from dotgirl.api.bundle.load_lock import load_lock
from dotgirl.api.bundle.save_bundle_metadata import save_bundle_metadata
from dotgirl.api.bundle.save_lock import save_lock
from dotgirl.api.DotgirlError import (
    BundleMissingMetadataError,
    BundleNotFoundError,
    SerializationFailureError,
)

from .conftest import STORAGE

pytestmark = pytest.mark.bundle


class TestLockStore:
    def test_missing_lock_is_empty(self, memory_fs):
        assert load_lock(memory_fs, STORAGE) == Lock()

    def test_save_creates_storage_and_roundtrips(self, memory_fs):
        lock = Lock()
        lock.put(Bundle(id="shell", entries=[Entry(local=STORAGE / "bundle/shell/bashrc", remote="/home/u/.bashrc")]))
        save_lock(memory_fs, STORAGE, lock)
        assert memory_fs.is_file(STORAGE / "lock.json")
        assert load_lock(memory_fs, STORAGE) == lock

    def test_malformed_lock(self, memory_fs):
        memory_fs.make_directory_tree(STORAGE)
        memory_fs.write(STORAGE / "lock.json", "{")
        with pytest.raises(SerializationFailureError):
            load_lock(memory_fs, STORAGE)

    def test_lock_with_duplicate_ids(self, memory_fs):
        memory_fs.make_directory_tree(STORAGE)
        memory_fs.write(
            STORAGE / "lock.json",
            '{"bundles": [{"id": "shell", "entries": []}, {"id": "shell", "entries": []}]}',
        )
        with pytest.raises(SerializationFailureError, match="Duplicate bundle ids"):
            load_lock(memory_fs, STORAGE)


class TestBundleMetadataStore:
    def test_bundle_not_found(self, memory_fs):
        with pytest.raises(BundleNotFoundError) as exc_info:
            load_bundle_metadata(memory_fs, get_bundle_dir(STORAGE, "shell"))
        assert exc_info.value.describe().startswith("bundle_not_found: ")

    def test_bundle_missing_metadata(self, memory_fs):
        bundle_dir = get_bundle_dir(STORAGE, "shell")
        memory_fs.make_directory_tree(bundle_dir)
        with pytest.raises(BundleMissingMetadataError):
            load_bundle_metadata(memory_fs, bundle_dir)

    def test_save_then_load(self, memory_fs):
        bundle_dir = get_bundle_dir(STORAGE, "shell")
        memory_fs.make_directory_tree(bundle_dir)
        bundle = Bundle(id="shell", entries=[Entry(local=bundle_dir / "bashrc", remote="/home/u/.bashrc")])
        save_bundle_metadata(memory_fs, bundle_dir, bundle)
        assert memory_fs.is_file(bundle_dir / "bundle.json")
        assert load_bundle_metadata(memory_fs, bundle_dir) == bundle
