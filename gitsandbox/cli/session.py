"""Session setup shared by the interactive and scripted front ends."""

from typing import Optional, Tuple

import click

from gitsandbox.cli.output import error
from gitsandbox.commands.interpreter import CommandInterpreter
from gitsandbox.core.config import Config
from gitsandbox.core.errors import SampleError
from gitsandbox.core.repository import SandboxRepository, create_repository
from gitsandbox.operations.samples import get_sample, load_sample_file


def resolve_sample(name_or_path: str):
    """Find a bundled sample by name, or read one from a JSON file path."""
    if name_or_path.endswith('.json'):
        return load_sample_file(name_or_path)
    return get_sample(name_or_path)


def open_session(
    config: Config,
    sample: Optional[str] = None,
    init_repo: bool = False,
    undo: bool = False,
) -> Tuple[SandboxRepository, CommandInterpreter]:
    """
    Create a fresh repository and interpreter for one session.

    Args:
        config: Configuration (author, undo depth)
        sample: Bundled sample name or path to a sample JSON file
        init_repo: Run init() before handing the session over
        undo: Record undo snapshots for state-changing commands

    Returns:
        (repository, interpreter)
    """
    repo = create_repository(config)

    if sample:
        try:
            repo.load_sample(resolve_sample(sample))
        except SampleError as e:
            click.echo(error(str(e)), err=True)
            raise click.Abort()
    elif init_repo:
        repo.init()

    return repo, CommandInterpreter(repo, undo=undo)
