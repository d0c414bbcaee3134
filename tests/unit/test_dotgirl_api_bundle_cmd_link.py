"""Unit tests for dotgirl.api.bundle.cmd_link."""

import pytest

from dotgirl.api.bundle.cmd_add import cmd_add
from dotgirl.api.bundle.cmd_link import cmd_link
from dotgirl.api.bundle.LinkChoice import LinkChoice
from dotgirl.api.bundle.load_lock import load_lock
from dotgirl.api.validate_output import validate_output

from .conftest import STORAGE, run_cmd, with_prompt

pytestmark = pytest.mark.bundle

BUNDLE_DIR = STORAGE / "bundle" / "shell"


@pytest.fixture
def added(memory_env):
    """Environment where /home/u/.bashrc and /home/u/.zshrc were added to `shell`."""
    fs = memory_env.filesystem
    fs.make_directory_tree("/home/u")
    fs.write("/home/u/.bashrc", "B")
    fs.write("/home/u/.zshrc", "Z")
    result = run_cmd(cmd_add, "shell", ["/home/u/.bashrc", "/home/u/.zshrc"], env=memory_env)
    assert result.success is True
    return memory_env


def _fresh_machine(env) -> None:
    """Drop the symlinks and the lock, keeping only the stored bundle."""
    env.filesystem.remove("/home/u/.bashrc")
    env.filesystem.remove("/home/u/.zshrc")
    env.filesystem.remove(STORAGE / "lock.json")


class TestCmdLink:
    def test_relink_is_idempotent_and_silent(self, added, prompt):
        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is True
        assert result.result == "Linked 2 of 2 entries of `shell`"
        assert prompt.calls == []
        validate_output(cmd_link, result.output)
        assert len(load_lock(added.filesystem, STORAGE).find("shell").entries) == 2

    def test_links_on_fresh_machine(self, added, prompt):
        _fresh_machine(added)

        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is True
        assert added.filesystem.read("/home/u/.bashrc") == "B"
        assert added.filesystem.read_link("/home/u/.zshrc") == BUNDLE_DIR / "zshrc"
        assert prompt.calls == []

    def test_previously_linked_remote_is_overwritten_without_asking(self, added, prompt):
        fs = added.filesystem
        fs.remove("/home/u/.bashrc")
        fs.write("/home/u/.bashrc", "replaced by an installer")

        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is True
        assert fs.read_link("/home/u/.bashrc") == BUNDLE_DIR / "bashrc"
        assert prompt.calls == []

    def test_skip_is_not_remembered(self, added):
        fs = added.filesystem
        _fresh_machine(added)
        fs.write("/home/u/.bashrc", "machine default")

        first = with_prompt(added, selections=[LinkChoice.SKIP])
        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is True
        assert first.calls == [("select", "/home/u/.bashrc already exists.")]
        assert result.output["skipped"] == [{"path": "/home/u/.bashrc", "reason": "skipped at prompt"}]
        assert result.output["warnings"] == ["Skipped /home/u/.bashrc"]
        record = load_lock(fs, STORAGE).find("shell")
        assert [str(entry.remote) for entry in record.entries] == ["/home/u/.zshrc"]

        second = with_prompt(added, selections=[LinkChoice.OVERWRITE])
        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is True
        assert second.calls == [("select", "/home/u/.bashrc already exists.")]
        assert fs.read("/home/u/.bashrc") == "B"

    def test_conflict_without_terminal_fails(self, added):
        fs = added.filesystem
        _fresh_machine(added)
        fs.write("/home/u/.bashrc", "machine default")

        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is False
        assert result.output["errors"][0].startswith("prompt_unavailable: ")
        validate_output(cmd_link, result.output)
        assert fs.read("/home/u/.bashrc") == "machine default"

    def test_bundle_not_found(self, memory_env):
        result = run_cmd(cmd_link, "nope", env=memory_env)

        assert result.success is False
        assert result.result.startswith("Link of `nope` failed")
        assert result.output["errors"][0].startswith("bundle_not_found: ")

    def test_bundle_missing_metadata(self, memory_env):
        memory_env.filesystem.make_directory_tree(STORAGE / "bundle" / "empty")

        result = run_cmd(cmd_link, "empty", env=memory_env)

        assert result.success is False
        assert result.output["errors"][0].startswith("bundle_missing_metadata: ")

    def test_malformed_metadata(self, added):
        added.filesystem.write(BUNDLE_DIR / "bundle.json", "not json")

        result = run_cmd(cmd_link, "shell", env=added)

        assert result.success is False
        assert result.output["errors"][0].startswith("serialization_failure: ")
