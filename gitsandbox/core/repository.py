"""Repository store for the sandbox engine."""

import copy
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Deque, Dict, Iterator, List, Mapping, Optional, Union

import structlog

from gitsandbox.core.config import Config, DEFAULT_AUTHOR, DEFAULT_UNDO_DEPTH
from gitsandbox.core.errors import NothingToCommitError
from gitsandbox.core.ids import IdFactory, draw_unique_id, random_id
from gitsandbox.core.objects import Branch, Commit, FileStatus, GitFile
from gitsandbox.core.state import RepositoryState
from gitsandbox.operations.history import resolve_branch_commits
from gitsandbox.operations.samples import SampleRepository

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_date(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass
class MergeResult:
    """Result of a merge operation."""
    success: bool
    sha: Optional[str] = None
    conflicts: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        if self.success:
            return f"MergeResult(success, {self.sha})"
        return "MergeResult(failed)"


class SandboxRepository:
    """
    In-memory repository owned by a single sandbox session.

    This is the only component that writes to a RepositoryState. Other
    components read through get_state() and the query methods, or call the
    mutation primitives below.
    """

    def __init__(
        self,
        state: Optional[RepositoryState] = None,
        id_factory: Optional[IdFactory] = None,
        author: str = DEFAULT_AUTHOR,
        clock: Optional[Clock] = None,
        max_snapshots: int = DEFAULT_UNDO_DEPTH,
    ):
        """
        Initialize repository.

        Args:
            state: Starting state (uninitialized empty state if omitted)
            id_factory: Commit id generator (random base-36 ids by default)
            author: Default author for commits
            clock: Source of commit timestamps
            max_snapshots: Depth of the undo stack
        """
        self._state = state if state is not None else RepositoryState()
        self._id_factory = id_factory or random_id
        self._clock = clock or utc_now
        self.author = author
        self._snapshots: Deque[RepositoryState] = deque(maxlen=max_snapshots)

    # Queries

    @property
    def state(self) -> RepositoryState:
        """Live state. Read-only by convention; use get_state() for a copy."""
        return self._state

    def get_state(self) -> RepositoryState:
        """Return an independent copy of the current state."""
        return self._state.copy()

    def get_file(self, path: str) -> Optional[GitFile]:
        file = self._state.files.get(path)
        return copy.copy(file) if file else None

    def get_branch_commits(self, branch_name: str) -> List[Commit]:
        """Commits reachable from a branch head, oldest first."""
        return resolve_branch_commits(self._state.commits, self._state.branches, branch_name)

    def get_all_commits(self) -> List[Commit]:
        return list(self._state.commits)

    def get_file_tree(self) -> Dict[str, Any]:
        """
        Nest files by path segment.

        Directories become dicts, files become GitFile leaves:
        {'src': {'app.py': GitFile(...)}, 'README.md': GitFile(...)}
        """
        tree: Dict[str, Any] = {}
        for path, file in self._state.files.items():
            parts = path.split('/')
            node = tree
            for part in parts[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = node[part] = {}
                node = child
            node[parts[-1]] = copy.copy(file)
        return tree

    # Lifecycle

    def init(self) -> None:
        """Reset to a fresh repository with an unborn main branch."""
        self._state = RepositoryState.initialized()
        logger.info('repository_initialized', branch=self._state.current_branch)

    def reset(self) -> None:
        """Discard everything, including undo history."""
        self._state = RepositoryState()
        self._snapshots.clear()
        logger.info('repository_reset')

    def load_sample(self, sample: Union[SampleRepository, Mapping[str, Any]]) -> None:
        """
        Replace the whole state with a sample snapshot.

        The snapshot is deep-copied and not checked for consistency.

        Args:
            sample: SampleRepository or its dictionary form
        """
        if not isinstance(sample, SampleRepository):
            sample = SampleRepository.from_dict(sample)

        state = RepositoryState.from_dict(copy.deepcopy(sample.initial_state))
        state.is_initialized = True
        self._state = state
        logger.info(
            'sample_loaded',
            sample=sample.name,
            commits=len(state.commits),
            branches=len(state.branches),
        )

    # Working tree and staging

    def set_file(self, path: str, content: str) -> None:
        """
        Create or update a file.

        A new path becomes untracked. Writing to a tracked file marks it
        modified; untracked, modified and staged files keep their status.
        """
        existing = self._state.files.get(path)

        if existing is None:
            self._state.files[path] = GitFile(path, content, FileStatus.UNTRACKED)
            logger.debug('file_created', path=path)
            return

        existing.content = content
        if existing.status == FileStatus.TRACKED:
            existing.status = FileStatus.MODIFIED
        logger.debug('file_updated', path=path, status=existing.status.value)

    def stage_file(self, path: str) -> bool:
        """
        Stage an untracked or modified file.

        Returns:
            True if the file was staged, False otherwise
        """
        file = self._state.files.get(path)
        if file is None or file.status not in (FileStatus.UNTRACKED, FileStatus.MODIFIED):
            return False

        file.status = FileStatus.STAGED
        logger.debug('file_staged', path=path)
        return True

    def unstage_file(self, path: str) -> bool:
        """
        Move a staged file back out of the staging area.

        It becomes modified when the repository already has commits, and
        untracked otherwise.

        Returns:
            True if the file was unstaged, False if it was not staged
        """
        file = self._state.files.get(path)
        if file is None or file.status != FileStatus.STAGED:
            return False

        file.status = FileStatus.MODIFIED if self._state.commits else FileStatus.UNTRACKED
        logger.debug('file_unstaged', path=path, status=file.status.value)
        return True

    # History

    def _new_sha(self) -> str:
        return draw_unique_id(self._id_factory, lambda sha: self._state.find_commit(sha) is not None)

    def _advance(self, commit: Commit) -> None:
        self._state.commits.append(commit)
        self._state.head = commit.sha
        branch = self._state.current
        if branch is not None:
            branch.head = commit.sha

    def create_commit(self, message: str, author: Optional[str] = None) -> str:
        """
        Record the staged files as a new commit on the current branch.

        Args:
            message: Commit message
            author: Author name (repository default if omitted)

        Returns:
            str: Id of the new commit

        Raises:
            NothingToCommitError: If nothing is staged
        """
        staged = self._state.staged
        if not staged:
            raise NothingToCommitError("No changes staged for commit")

        commit = Commit(
            sha=self._new_sha(),
            message=message,
            author=author or self.author,
            date=format_date(self._clock()),
            branch=self._state.current_branch,
            parent=self._state.head or None,
            files=list(staged),
            tree={path: self._state.files[path].content for path in staged},
        )
        self._advance(commit)

        for path in staged:
            self._state.files[path].status = FileStatus.TRACKED

        logger.info(
            'commit_created',
            sha=commit.sha,
            branch=commit.branch,
            parent=commit.parent,
            files=len(commit.files),
        )
        return commit.sha

    def create_branch(self, name: str) -> bool:
        """
        Create a branch at the current commit.

        Returns:
            True if created, False if a branch with that name exists
        """
        if self._state.find_branch(name) is not None:
            return False

        self._state.branches.append(Branch(name, self._state.head))
        logger.info('branch_created', branch=name, head=self._state.head)
        return True

    def switch_branch(self, name: str) -> bool:
        """
        Move HEAD to another branch.

        Uncommitted changes are not checked; switching is always allowed.

        Returns:
            True if switched, False if the branch does not exist
        """
        branch = self._state.find_branch(name)
        if branch is None:
            return False

        self._state.current_branch = name
        self._state.head = branch.head
        logger.info('branch_switched', branch=name, head=branch.head)
        return True

    def merge_branch(self, name: str) -> MergeResult:
        """
        Merge a branch into the current one.

        Always records a new merge commit whose single parent is HEAD. There
        is no fast-forward, divergence or conflict detection.

        Returns:
            MergeResult with the new commit id, or success=False for an
            unknown branch
        """
        if self._state.find_branch(name) is None:
            return MergeResult(success=False)

        commit = Commit(
            sha=self._new_sha(),
            message=f"Merge branch '{name}'",
            author=self.author,
            date=format_date(self._clock()),
            branch=self._state.current_branch,
            parent=self._state.head or None,
        )
        self._advance(commit)

        logger.info('merge_created', sha=commit.sha, source=name, target=commit.branch)
        return MergeResult(success=True, sha=commit.sha)

    # Undo

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Roll the state back if the block raises."""
        saved = self._state.copy()
        try:
            yield
        except Exception:
            self._state = saved
            logger.warning('transaction_rolled_back')
            raise

    def snapshot(self, state: Optional[RepositoryState] = None) -> None:
        """
        Push a state onto the undo stack, dropping the oldest when full.

        Args:
            state: State captured earlier (a copy of the current state if omitted)
        """
        self._snapshots.append(state if state is not None else self._state.copy())

    def restore(self) -> bool:
        """
        Restore the most recent snapshot.

        Returns:
            True if a snapshot was restored, False if the stack was empty
        """
        if not self._snapshots:
            return False
        self._state = self._snapshots.pop()
        logger.info('snapshot_restored', remaining=len(self._snapshots))
        return True

    @property
    def snapshot_count(self) -> int:
        return len(self._snapshots)

    def __repr__(self) -> str:
        return (
            f"SandboxRepository(branch={self._state.current_branch}, "
            f"commits={len(self._state.commits)})"
        )


def create_repository(config: Optional[Config] = None, **kwargs) -> SandboxRepository:
    """
    Build an isolated repository, taking defaults from configuration.

    Args:
        config: Config to read user.name and core.undodepth from
        **kwargs: Passed through to SandboxRepository

    Returns:
        New uninitialized SandboxRepository
    """
    if config is not None:
        kwargs.setdefault('author', config.author)
        kwargs.setdefault('max_snapshots', config.undo_depth)
    return SandboxRepository(**kwargs)
