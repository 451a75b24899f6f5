"""History traversal over the sandbox commit graph."""

from typing import Dict, Iterable, List, Optional

from gitsandbox.core.objects import Branch, Commit


def walk_history(commits: Iterable[Commit], head: Optional[str]) -> List[Commit]:
    """
    Walk parent links from a commit back to the root.

    Stops when a sha repeats (guards against cyclic parent links) or when
    the next sha is not a known commit.

    Args:
        commits: All commits in the repository
        head: Sha to start from; empty or None yields an empty history

    Returns:
        List of commits, oldest first
    """
    by_sha: Dict[str, Commit] = {c.sha: c for c in commits}
    history: List[Commit] = []
    visited = set()
    current = head

    while current and current not in visited:
        visited.add(current)
        commit = by_sha.get(current)
        if commit is None:
            break
        history.append(commit)
        current = commit.parent

    history.reverse()
    return history


def resolve_branch_commits(
    commits: Iterable[Commit],
    branches: Iterable[Branch],
    branch_name: str,
) -> List[Commit]:
    """
    Get the commits reachable from a branch head, oldest first.

    Returns an empty list for unknown or unborn branches.
    """
    for branch in branches:
        if branch.name == branch_name:
            return walk_history(commits, branch.head)
    return []
