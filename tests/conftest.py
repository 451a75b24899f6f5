"""Shared pytest fixtures for gitsandbox tests."""

from datetime import datetime, timezone

import pytest
import structlog

from gitsandbox.commands.interpreter import CommandInterpreter
from gitsandbox.core.config import Config
from gitsandbox.core.ids import sequential_ids
from gitsandbox.core.repository import SandboxRepository

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_TIME


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test (or the CLI) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def repo():
    """Uninitialized repository with deterministic ids and clock."""
    return SandboxRepository(id_factory=sequential_ids(), author="Test User", clock=fixed_clock)


@pytest.fixture
def initialized_repo(repo):
    """Repository after init(): unborn main branch, no files."""
    repo.init()
    return repo


@pytest.fixture
def interpreter(repo):
    """Interpreter over an uninitialized repository."""
    return CommandInterpreter(repo)


@pytest.fixture
def undo_interpreter(repo):
    """Interpreter that records undo snapshots."""
    return CommandInterpreter(repo, undo=True)


@pytest.fixture
def repo_with_commits(initialized_repo):
    """Repository with two commits on main and a clean working tree."""
    repo = initialized_repo

    repo.set_file("README.md", "# Project")
    repo.stage_file("README.md")
    repo.create_commit("First commit")

    repo.set_file("app.py", "print('hi')")
    repo.stage_file("app.py")
    repo.create_commit("Second commit")

    return repo


@pytest.fixture
def run(interpreter):
    """Execute several command lines, returning the last result."""
    def _run(*lines):
        result = None
        for line in lines:
            result = interpreter.execute(line)
        return result
    return _run


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Config whose global file lives in a temp dir, with no env overrides."""
    for name in ('GITSANDBOX_USER_NAME', 'GITSANDBOX_CORE_UNDODEPTH',
                 'GITSANDBOX_LOG_LEVEL', 'GITSANDBOX_DEBUG'):
        monkeypatch.delenv(name, raising=False)
    return Config(global_config_path=tmp_path / 'global.ini')


@pytest.fixture
def commit_file():
    """Write, stage and commit a single file; returns the commit id."""
    def _commit_file(repo, path, content, message="Test commit"):
        repo.set_file(path, content)
        repo.stage_file(path)
        return repo.create_commit(message)
    return _commit_file
