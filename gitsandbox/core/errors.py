"""Exceptions raised by the sandbox engine."""


class SandboxError(Exception):
    """Base exception for gitsandbox."""

    pass


class NothingToCommitError(SandboxError):
    """Raised when a commit is requested with an empty staging area."""

    pass


class SampleError(SandboxError):
    """Raised when a sample repository snapshot is structurally invalid."""

    pass


class TokenizeError(SandboxError):
    """Raised when a command line cannot be split into tokens."""

    pass


class InvalidConfigKeyError(SandboxError):
    """Raised when a config key is not of the form section.option."""

    pass
