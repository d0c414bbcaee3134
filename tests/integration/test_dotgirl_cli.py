"""End-to-end tests for the dotgirl CLI on the real filesystem."""

import json

from typer.testing import CliRunner

from dotgirl.cli._create_app import _create_app

runner = CliRunner()


def test_add_then_status_then_link(dotgirl_home, user_home):
    bashrc = user_home / ".bashrc"
    nvim = user_home / ".config" / "nvim"

    result = runner.invoke(_create_app(), ["add", "shell", str(bashrc), str(nvim)])
    assert result.exit_code == 0, result.output
    assert "Added 2 paths to `shell`" in result.output

    assert bashrc.is_symlink()
    assert nvim.is_symlink()
    assert bashrc.read_text() == "export EDITOR=vim"
    assert (nvim / "init.lua").read_text() == "set number"
    assert (dotgirl_home / "bundle" / "shell" / "bashrc").is_file()
    assert (dotgirl_home / "bundle" / "shell" / "nvim" / "init.lua").is_file()

    lock = json.loads((dotgirl_home / "lock.json").read_text())
    assert [bundle["id"] for bundle in lock["bundles"]] == ["shell"]
    assert len(lock["bundles"][0]["entries"]) == 2

    result = runner.invoke(_create_app(), ["status", "shell"])
    assert result.exit_code == 0
    assert "state: linked" in result.stdout

    # Linking again is a no-op and needs no terminal
    result = runner.invoke(_create_app(), ["link", "shell"])
    assert result.exit_code == 0, result.output
    assert "Linked 2 of 2 entries of `shell`" in result.output


def test_json_display(dotgirl_home, user_home):
    result = runner.invoke(_create_app(), ["--display", "json", "add", "shell", str(user_home / ".bashrc")])

    assert result.exit_code == 0
    assert '"bundle": "shell"' in result.stdout
    assert '"errors": []' in result.stdout


def test_invalid_display(dotgirl_home):
    result = runner.invoke(_create_app(), ["--display", "xml", "status"])

    assert result.exit_code == 1
    assert "--display must be 'json' or 'yaml'" in result.output


def test_link_conflict_without_terminal(dotgirl_home, user_home):
    bashrc = user_home / ".bashrc"
    runner.invoke(_create_app(), ["add", "shell", str(bashrc)])

    # Simulate a fresh machine: no lock, a default file where the link goes
    (dotgirl_home / "lock.json").unlink()
    bashrc.unlink()
    bashrc.write_text("distro default")

    result = runner.invoke(_create_app(), ["link", "shell"])

    assert result.exit_code == 1
    assert "prompt_unavailable" in result.stdout
    assert bashrc.read_text() == "distro default"
    assert not bashrc.is_symlink()


def test_link_unknown_bundle(dotgirl_home):
    result = runner.invoke(_create_app(), ["link", "nope"])

    assert result.exit_code == 1
    assert "bundle_not_found" in result.stdout


def test_add_missing_path(dotgirl_home, user_home):
    result = runner.invoke(_create_app(), ["add", "shell", str(user_home / ".missing")])

    assert result.exit_code == 1
    assert "source_not_found" in result.stdout
    assert not (dotgirl_home / "bundle").exists()


def test_status_without_bundles(dotgirl_home):
    result = runner.invoke(_create_app(), ["status"])

    assert result.exit_code == 0
    assert "bundles: []" in result.stdout


def test_no_command_prints_help():
    result = runner.invoke(_create_app(), [])

    assert result.exit_code == 0
    assert "add" in result.output
    assert "link" in result.output
