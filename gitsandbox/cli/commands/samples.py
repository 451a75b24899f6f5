"""Samples command - list bundled sample repositories."""

import click

from gitsandbox.cli.output import info, warning
from gitsandbox.operations.samples import list_samples


@click.command('samples')
@click.option('-v', '--verbose', is_flag=True, help='Show branches and commit counts')
def samples_cmd(verbose):
    """
    List the bundled sample repositories.

    Load one with 'gitsandbox shell --sample <name>'.
    """
    samples = list_samples()
    if not samples:
        click.echo(warning("No samples bundled"))
        return

    for sample in samples:
        click.echo(f"{sample.name}")
        click.echo(info(f"  {sample.description}"))
        if verbose:
            state = sample.initial_state
            branches = ', '.join(b['name'] for b in state.get('branches', []))
            click.echo(info(f"  branches: {branches}"))
            click.echo(info(f"  commits: {len(state.get('commits', []))}"))
