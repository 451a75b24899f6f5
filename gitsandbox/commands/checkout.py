"""Checkout and switch commands - move HEAD to another branch."""

from typing import List

from gitsandbox.commands.branch import branch_exists_message
from gitsandbox.commands.results import CommandResult, fail, ok, success
from gitsandbox.core.repository import SandboxRepository


def switch_to(repo: SandboxRepository, name: str, create: bool = False) -> CommandResult:
    """
    Switch branches, optionally creating the target first.

    With create=True an existing name fails before anything is written.
    """
    if create:
        if repo.state.find_branch(name) is not None:
            return fail(branch_exists_message(name))
        repo.create_branch(name)
        repo.switch_branch(name)
        return ok(success(f"Switched to a new branch '{name}'"), update_state=True)

    if not repo.switch_branch(name):
        return fail(f"fatal: branch '{name}' not found")

    return ok(success(f"Switched to branch '{name}'"), update_state=True)


def _run(repo: SandboxRepository, args: List[str], create_flag: str) -> CommandResult:
    if not args:
        return fail("fatal: you must specify a branch")

    if args[0] == create_flag:
        if len(args) < 2:
            return fail(f"error: switch '{create_flag.lstrip('-')}' requires a value")
        return switch_to(repo, args[1], create=True)

    return switch_to(repo, args[0])


def checkout_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Switch to a branch.

    Uncommitted changes are carried along; there is no safety check.

    Examples:
        git checkout feature
        git checkout -b hotfix
    """
    return _run(repo, args, '-b')


def switch_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Switch to a branch (modern alternative to checkout).

    Examples:
        git switch main
        git switch -c hotfix
    """
    return _run(repo, args, '-c')
