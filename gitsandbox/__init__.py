"""gitsandbox - an in-memory Git sandbox for learning version control."""

__version__ = '0.1.0'

from gitsandbox.core.repository import SandboxRepository, create_repository
from gitsandbox.core.state import RepositoryState
from gitsandbox.core.objects import Branch, Commit, FileStatus, GitFile
from gitsandbox.commands.interpreter import CommandInterpreter
from gitsandbox.commands.results import CommandResult, TerminalLine

__all__ = [
    'SandboxRepository',
    'create_repository',
    'RepositoryState',
    'Branch',
    'Commit',
    'FileStatus',
    'GitFile',
    'CommandInterpreter',
    'CommandResult',
    'TerminalLine',
]
