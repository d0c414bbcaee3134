"""Shared pytest configuration and fixtures for all tests."""

import logging
from pathlib import Path

import pytest

from dotgirl.api.Env import Env
from dotgirl.api.filesystem.Filesystem import Filesystem
from dotgirl.api.prompt.ScriptedPrompt import ScriptedPrompt
from dotgirl.utils import logger

STORAGE = Path("/home/u/dotgirl")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    for marker in ("unit", "integration", "filesystem", "bundle", "config", "prompt"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def memory_fs() -> Filesystem:
    """A private in-memory filesystem containing only ``/``."""
    return Filesystem.memory()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    """A prompt with no scripted answers; any question fails the operation."""
    return ScriptedPrompt()


@pytest.fixture
def memory_env(memory_fs: Filesystem, prompt: ScriptedPrompt) -> Env:
    """Environment on an in-memory filesystem with a home at /home/u."""
    memory_fs.make_directory_tree(STORAGE)
    return Env(storage=STORAGE, filesystem=memory_fs, prompt=prompt)


@pytest.fixture
def os_env(tmp_path: Path, prompt: ScriptedPrompt) -> Env:
    """Environment on the real filesystem rooted at tmp_path."""
    storage = tmp_path / "home" / "dotgirl"
    storage.mkdir(parents=True)
    return Env(storage=storage, filesystem=Filesystem.os(), prompt=prompt)


@pytest.fixture
def dotgirl_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DOTGIRL_HOME at a fresh storage root under tmp_path.

    Returns:
        Path to the storage root (not yet created)
    """
    storage = tmp_path / "dotgirl"
    monkeypatch.setenv("DOTGIRL_HOME", str(storage))
    return storage


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach file handlers installed by configure_logging() during a test."""
    yield
    root_logger = logging.getLogger("dotgirl")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    logger._CONFIGURED = False


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def with_prompt(env: Env, **answers) -> ScriptedPrompt:
    """Swap env's prompt for one with the given scripted answers and return it."""
    scripted = ScriptedPrompt(**answers)
    env.prompt = scripted
    return scripted

