"""Restore command - take files back out of the staging area."""

from typing import List

from gitsandbox.commands.results import CommandResult, fail, ok, success
from gitsandbox.core.repository import SandboxRepository


def restore_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Unstage files.

    Only the --staged form is simulated; '.' means every staged path.

    Examples:
        git restore --staged index.html
        git restore --staged .
    """
    if '--staged' not in args:
        return fail("fatal: only 'git restore --staged <path>' is supported")

    pathspecs = [arg for arg in args if arg != '--staged']
    if not pathspecs:
        return fail("fatal: you must specify path(s) to restore")

    staged = repo.state.staged
    paths = staged if '.' in pathspecs else [p for p in pathspecs if p in staged]
    if not paths:
        return fail("fatal: pathspec did not match any files")

    for path in paths:
        repo.unstage_file(path)

    return ok(success(f"Unstaged {len(paths)} file(s)"), update_state=True)
