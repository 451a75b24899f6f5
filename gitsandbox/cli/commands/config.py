"""Config command - manage gitsandbox configuration."""

import click

from gitsandbox.cli.output import success, error, info, warning
from gitsandbox.core.config import split_key
from gitsandbox.core.errors import InvalidConfigKeyError


def _split(key):
    try:
        return split_key(key)
    except InvalidConfigKeyError as e:
        click.echo(error(str(e)))
        raise click.Abort()


def _require_local(config, local):
    if local and not config.local_config_path:
        click.echo(error("--local needs a config file (gitsandbox --config PATH config ...)"))
        raise click.Abort()


@click.group('config')
def config_cmd():
    """Get and set gitsandbox options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--local', is_flag=True, help='Write to the file given with --config')
@click.pass_obj
def config_set(config, key, value, local):
    """
    Set a config value.

    Examples:
        gitsandbox config set user.name "Ada Lovelace"
        gitsandbox config set core.undodepth 20
    """
    section, option = _split(key)
    _require_local(config, local)
    config.set(section, option, value, global_config=not local)

    scope = "local" if local else "global"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.pass_obj
def config_get(config, key):
    """Get a config value (environment, local, then global)."""
    section, option = _split(key)
    value = config.get(section, option)
    if value is None:
        click.echo(warning(f"{key} is not set"))
        raise click.exceptions.Exit(1)
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--local', is_flag=True, help='Remove from the file given with --config')
@click.pass_obj
def config_unset(config, key, local):
    """Remove a config value."""
    section, option = _split(key)
    _require_local(config, local)
    if config.unset(section, option, global_config=not local):
        click.echo(success(f"Unset {key}"))
    else:
        click.echo(warning(f"{key} was not set"))


@config_cmd.command('list')
@click.pass_obj
def config_list(config):
    """List all config values."""
    values = config.list_all()
    if not values:
        click.echo(info("No configuration set"))
        return

    for section in sorted(values):
        for option, value in sorted(values[section].items()):
            click.echo(f"{section}.{option}={value}")
