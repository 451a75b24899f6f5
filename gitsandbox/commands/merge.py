"""Merge command - join another branch into the current one."""

from typing import List

from gitsandbox.commands.results import CommandResult, fail, ok, success
from gitsandbox.core.repository import SandboxRepository


def merge_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Merge a branch into the current branch.

    Every successful merge records a new merge commit, even when the other
    branch has nothing new.

    Examples:
        git merge feature
    """
    if not args:
        return fail("fatal: No branch specified for merge")

    name = args[0]
    result = repo.merge_branch(name)
    if not result.success:
        return fail(f"fatal: branch '{name}' not found")

    return ok(
        success(f"Merged branch '{name}' into {repo.state.current_branch}"),
        update_state=True,
    )
