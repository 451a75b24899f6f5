"""Core functionality for gitsandbox.

This module contains the core data structures:
- Sandbox objects (GitFile, Commit, Branch)
- Repository state and the repository store
- Commit id generation
- Configuration management
- Exceptions

For history traversal, timelines and samples, see gitsandbox.operations
For the command interpreter, see gitsandbox.commands
"""

from gitsandbox.core.objects import Branch, Commit, FileStatus, GitFile
from gitsandbox.core.state import RepositoryState
from gitsandbox.core.repository import MergeResult, SandboxRepository, create_repository
from gitsandbox.core.ids import random_id, sequential_ids
from gitsandbox.core.config import Config, get_config
from gitsandbox.core.errors import (
    InvalidConfigKeyError,
    NothingToCommitError,
    SampleError,
    SandboxError,
    TokenizeError,
)

__all__ = [
    'Branch',
    'Commit',
    'FileStatus',
    'GitFile',
    'RepositoryState',
    'MergeResult',
    'SandboxRepository',
    'create_repository',
    'random_id',
    'sequential_ids',
    'Config',
    'get_config',
    'SandboxError',
    'NothingToCommitError',
    'SampleError',
    'TokenizeError',
    'InvalidConfigKeyError',
]
