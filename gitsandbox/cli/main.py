"""Main CLI entry point for gitsandbox."""

from pathlib import Path

import click
from colorama import init

from gitsandbox import __version__
from gitsandbox.cli.output import BANNER
from gitsandbox.cli.commands import shell_cmd, run_cmd, samples_cmd, config_cmd
from gitsandbox.core.config import get_config
from gitsandbox.utils.log import LOG_LEVELS, configure_logging

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class SandboxGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=SandboxGroup)
@click.version_option(version=__version__)
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Local config file (overrides ~/.gitsandboxconfig)')
@click.option('--log-level', type=click.Choice(list(LOG_LEVELS)), default=None,
              help='Log level for diagnostics on stderr')
@click.pass_context
def cli(ctx, config_path, log_level):
    config = get_config(config_path)
    configure_logging(log_level or config.log_level)
    ctx.obj = config


# Register commands
cli.add_command(shell_cmd)
cli.add_command(run_cmd)
cli.add_command(samples_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
