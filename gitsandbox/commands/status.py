"""Status command - show the state of the staging area."""

from typing import List

from gitsandbox.commands.results import CommandResult, TerminalLine, ok, output, success
from gitsandbox.core.repository import SandboxRepository
from gitsandbox.core.state import RepositoryState


def was_committed(state: RepositoryState, path: str) -> bool:
    """Check whether any commit recorded the path."""
    return any(path in commit.tree for commit in state.commits)


def status_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Summarize staged, modified and untracked files.

    Staged paths are labelled 'new file' unless an earlier commit already
    recorded them, in which case they are 'modified'.
    """
    state = repo.state
    lines: List[TerminalLine] = [
        output(f"On branch {state.current_branch}"),
        output(""),
    ]

    staged = state.staged
    if staged:
        lines.append(output("Changes to be committed:"))
        for path in staged:
            label = "modified:" if was_committed(state, path) else "new file:"
            lines.append(output(f"  {label:<12}{path}"))
        lines.append(output(""))

    modified = state.modified
    if modified:
        lines.append(output("Changes not staged for commit:"))
        for path in modified:
            lines.append(output(f"  {'modified:':<12}{path}"))
        lines.append(output(""))

    untracked = state.untracked
    if untracked:
        lines.append(output("Untracked files:"))
        for path in untracked:
            lines.append(output(f"  {path}"))
        lines.append(output(""))

    if not (staged or modified or untracked):
        lines.append(success("nothing to commit, working tree clean"))

    return ok(*lines)
