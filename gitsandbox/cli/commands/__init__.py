"""CLI commands for gitsandbox."""

from gitsandbox.cli.commands.shell import shell_cmd
from gitsandbox.cli.commands.run import run_cmd
from gitsandbox.cli.commands.samples import samples_cmd
from gitsandbox.cli.commands.config import config_cmd

__all__ = ['shell_cmd', 'run_cmd', 'samples_cmd', 'config_cmd']
