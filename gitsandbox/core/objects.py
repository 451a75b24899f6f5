"""Sandbox objects: files, commits and branches."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FileStatus(str, Enum):
    """Lifecycle status of a file in the sandbox working tree."""

    UNTRACKED = 'untracked'
    MODIFIED = 'modified'
    STAGED = 'staged'
    TRACKED = 'tracked'
    DELETED = 'deleted'

    def __str__(self) -> str:
        return self.value


@dataclass
class GitFile:
    """
    A file in the simulated working tree.

    The path is the unique key; content is plain text. The status field is
    the only record of where the file sits in the staging lattice.
    """
    path: str
    content: str = ''
    status: FileStatus = FileStatus.UNTRACKED

    def to_dict(self) -> Dict[str, Any]:
        return {'path': self.path, 'content': self.content, 'status': self.status.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[str] = None) -> 'GitFile':
        """
        Build a file from its dictionary form.

        Args:
            data: Mapping with 'content' and 'status' (and usually 'path')
            path: Key the file was stored under, used when 'path' is absent

        Returns:
            GitFile
        """
        return cls(
            path=data.get('path', path),
            content=data.get('content', ''),
            status=FileStatus(data.get('status', FileStatus.UNTRACKED.value)),
        )

    def __repr__(self) -> str:
        return f"GitFile({self.path}, {self.status.value})"


@dataclass(frozen=True)
class Commit:
    """
    Represents a commit in the sandbox history.

    Commits are immutable once created and carry a single parent link,
    merge commits included. The tree is a path -> content snapshot of the
    files that were staged when the commit was made.
    """
    sha: str
    message: str
    author: str
    date: str
    branch: str
    parent: Optional[str] = None
    files: List[str] = field(default_factory=list)
    tree: Dict[str, str] = field(default_factory=dict)

    @property
    def short_sha(self) -> str:
        """First seven characters of the id."""
        return self.sha[:7]

    @property
    def is_root(self) -> bool:
        return not self.parent

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sha': self.sha,
            'message': self.message,
            'author': self.author,
            'date': self.date,
            'branch': self.branch,
            'parent': self.parent,
            'files': list(self.files),
            'tree': dict(self.tree),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Commit':
        return cls(
            sha=data['sha'],
            message=data.get('message', ''),
            author=data.get('author', ''),
            date=data.get('date', ''),
            branch=data.get('branch', ''),
            parent=data.get('parent') or None,
            files=list(data.get('files', [])),
            tree=dict(data.get('tree', {})),
        )

    def __repr__(self) -> str:
        return f"Commit({self.short_sha} {self.message!r})"


@dataclass
class Branch:
    """A named pointer to a commit; an empty head means the branch is unborn."""
    name: str
    head: str = ''

    @property
    def is_unborn(self) -> bool:
        return not self.head

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'head': self.head}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Branch':
        return cls(name=data['name'], head=data.get('head') or '')
