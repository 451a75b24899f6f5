"""Repository state: the aggregate root of a sandbox session."""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from gitsandbox.core.objects import Branch, Commit, FileStatus, GitFile

DEFAULT_BRANCH = 'main'


@dataclass
class RepositoryState:
    """
    Full in-memory snapshot of a simulated repository.

    Files are the single source of truth for staging. The staged, modified
    and untracked lists are views computed from each file's status, so a
    path can never sit in two lists at once or disagree with its status.
    Views keep the order in which files were first created.
    """
    current_branch: str = DEFAULT_BRANCH
    branches: List[Branch] = field(default_factory=list)
    commits: List[Commit] = field(default_factory=list)
    files: Dict[str, GitFile] = field(default_factory=dict)
    is_initialized: bool = False
    head: str = ''

    @classmethod
    def initialized(cls) -> 'RepositoryState':
        """Fresh repository with a single unborn main branch."""
        return cls(
            current_branch=DEFAULT_BRANCH,
            branches=[Branch(DEFAULT_BRANCH, '')],
            is_initialized=True,
        )

    def paths_with_status(self, status: FileStatus) -> List[str]:
        return [path for path, f in self.files.items() if f.status == status]

    @property
    def staged(self) -> List[str]:
        return self.paths_with_status(FileStatus.STAGED)

    @property
    def modified(self) -> List[str]:
        return self.paths_with_status(FileStatus.MODIFIED)

    @property
    def untracked(self) -> List[str]:
        return self.paths_with_status(FileStatus.UNTRACKED)

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.modified or self.untracked)

    def find_branch(self, name: str) -> Optional[Branch]:
        for branch in self.branches:
            if branch.name == name:
                return branch
        return None

    def find_commit(self, sha: str) -> Optional[Commit]:
        if not sha:
            return None
        for commit in self.commits:
            if commit.sha == sha:
                return commit
        return None

    @property
    def current(self) -> Optional[Branch]:
        """The branch HEAD is on, if it exists."""
        return self.find_branch(self.current_branch)

    def copy(self) -> 'RepositoryState':
        """Independent deep copy."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the camelCase dictionary format used by sample files.

        The derived bookkeeping lists are included so consumers that expect
        them can read them directly.
        """
        return {
            'currentBranch': self.current_branch,
            'branches': [b.to_dict() for b in self.branches],
            'commits': [c.to_dict() for c in self.commits],
            'files': {path: f.to_dict() for path, f in self.files.items()},
            'staged': self.staged,
            'modified': self.modified,
            'untracked': self.untracked,
            'isInitialized': self.is_initialized,
            'HEAD': self.head,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RepositoryState':
        """
        Build a state from its dictionary form.

        Staging lists in the input are ignored; file status decides. When no
        HEAD is given, it is taken from the current branch's head.
        """
        current_branch = data.get('currentBranch', DEFAULT_BRANCH)
        branches = [Branch.from_dict(b) for b in data.get('branches', [])]
        files = {
            path: GitFile.from_dict(entry, path)
            for path, entry in data.get('files', {}).items()
        }
        head = data.get('HEAD')
        if head is None:
            head = next((b.head for b in branches if b.name == current_branch), '')

        return cls(
            current_branch=current_branch,
            branches=branches,
            commits=[Commit.from_dict(c) for c in data.get('commits', [])],
            files=files,
            is_initialized=bool(data.get('isInitialized', False)),
            head=head or '',
        )
