"""Init command - create an empty sandbox repository."""

from typing import List

from gitsandbox.commands.results import CommandResult, fail, ok, success
from gitsandbox.core.repository import SandboxRepository


def init_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Initialize the repository.

    Refuses to run on a repository that is already initialized.
    """
    if repo.state.is_initialized:
        return fail("fatal: already a git repository")

    repo.init()
    return ok(success("Initialized empty Git repository"), update_state=True)
