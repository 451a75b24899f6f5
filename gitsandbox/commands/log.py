"""Log command - show commit history of the current branch."""

from typing import List

from gitsandbox.commands.results import CommandResult, TerminalLine, ok, output
from gitsandbox.core.objects import Commit
from gitsandbox.core.repository import SandboxRepository


def format_commit(commit: Commit) -> List[TerminalLine]:
    """Full multi-line record of a commit."""
    return [
        output(f"commit {commit.sha}"),
        output(f"Author: {commit.author}"),
        output(f"Date: {commit.date}"),
        output(""),
        output(f"    {commit.message}"),
        output(""),
    ]


def log_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """
    Show the current branch's commits, newest first.

    Examples:
        git log
        git log --oneline
    """
    oneline = '--oneline' in args
    commits = repo.get_branch_commits(repo.state.current_branch)

    if not commits:
        return ok(output("No commits yet"))

    lines: List[TerminalLine] = []
    for commit in reversed(commits):
        if oneline:
            lines.append(output(f"{commit.short_sha} {commit.message}"))
        else:
            lines.extend(format_commit(commit))

    return ok(*lines)
