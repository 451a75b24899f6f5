"""Add command - stage files for commit."""

from typing import List

from gitsandbox.commands.results import CommandResult, fail, ok, success
from gitsandbox.core.repository import SandboxRepository


def resolve_pathspecs(repo: SandboxRepository, args: List[str]) -> List[str]:
    """
    Expand pathspecs into concrete paths.

    '.' stands for every modified path followed by every untracked path,
    taken at call time. Duplicates are dropped, first occurrence wins.
    """
    state = repo.state
    paths: List[str] = []
    for arg in args:
        expanded = state.modified + state.untracked if arg == '.' else [arg]
        for path in expanded:
            if path not in paths:
                paths.append(path)
    return paths


def add_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Stage files.

    Fails without touching anything unless at least one resolved path is
    untracked or modified.

    Examples:
        git add index.html
        git add .
    """
    if not args:
        return fail("fatal: pathspec required")

    paths = resolve_pathspecs(repo, args)
    stageable = [path for path in paths if path in repo.state.modified or path in repo.state.untracked]
    if not stageable:
        return fail("fatal: pathspec did not match any files")

    staged = [path for path in stageable if repo.stage_file(path)]
    return ok(success(f"Staged {len(staged)} file(s)"), update_state=True)
