"""Branch command - list or create branches."""

from typing import List

from gitsandbox.commands.results import CommandResult, fail, ok, output, success
from gitsandbox.core.repository import SandboxRepository


def list_branches(repo: SandboxRepository) -> CommandResult:
    """List branches, marking the current one with '*'."""
    state = repo.state
    lines = [
        output(f"{'* ' if branch.name == state.current_branch else '  '}{branch.name}")
        for branch in state.branches
    ]
    return ok(*lines)


def branch_exists_message(name: str) -> str:
    return f"fatal: A branch named '{name}' already exists."


def branch_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    List branches, or create one at the current commit.

    Examples:
        git branch
        git branch feature
    """
    if not args:
        return list_branches(repo)

    name = args[0]
    if name.startswith('-'):
        return fail(f"error: unknown switch '{name.lstrip('-')}'")

    if not repo.create_branch(name):
        return fail(branch_exists_message(name))

    return ok(success(f"Created branch '{name}'"), update_state=True)
