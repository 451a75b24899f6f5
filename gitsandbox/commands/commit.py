"""Commit command - record staged changes."""

from typing import List, Optional

from gitsandbox.commands.results import CommandResult, fail, ok, output, success
from gitsandbox.core.repository import SandboxRepository

MESSAGE_FLAGS = ('-m', '--message')


def extract_message(args: List[str]) -> Optional[str]:
    """
    Find the commit message among the arguments.

    Accepts '-m <msg>', '--message <msg>', '-m<msg>' and '--message=<msg>'.
    The message is whatever single token follows the flag, so multi-word
    messages must be quoted.

    Returns:
        The message, or None when no flag or no value was given
    """
    for i, arg in enumerate(args):
        if arg in MESSAGE_FLAGS:
            return args[i + 1] if i + 1 < len(args) else None
        if arg.startswith('--message='):
            return arg[len('--message='):]
        if arg.startswith('-m') and not arg.startswith('--'):
            return arg[2:]
    return None


def commit_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Create a commit from the staged files.

    Both preconditions are checked here so the store's create_commit,
    which raises on an empty staging area, is only reached when it
    cannot fail.

    Examples:
        git commit -m "Initial commit"
    """
    state = repo.state
    staged_count = len(state.staged)

    if staged_count == 0:
        return fail("nothing to commit, working tree clean")

    message = extract_message(args)
    if not message or not message.strip():
        return fail("Aborting commit due to empty commit message.")

    sha = repo.create_commit(message)
    commit = repo.state.find_commit(sha)

    return ok(
        success(f"[{commit.branch} {commit.short_sha}] {message}"),
        output(f" {staged_count} file(s) changed"),
        update_state=True,
    )
