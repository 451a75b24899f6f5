"""Shell command - interactive sandbox session."""

import json

import click

from gitsandbox.cli.output import BANNER, error, info, render_result, success, warning
from gitsandbox.cli.session import open_session, resolve_sample
from gitsandbox.core.errors import SampleError
from gitsandbox.core.repository import SandboxRepository
from gitsandbox.operations.samples import list_samples
from gitsandbox.operations.timeline import build_timeline, render_timeline

META_HELP = [
    ":help            Show this help",
    ":state           Print the repository state as JSON",
    ":graph           Draw the branch timeline",
    ":undo            Undo the last state-changing command",
    ":reset           Discard the repository",
    ":load <sample>   Load a bundled sample (or a .json file)",
    ":samples         List bundled samples",
    ":quit            Leave the sandbox",
]


def prompt_text(repo: SandboxRepository) -> str:
    state = repo.state
    if not state.is_initialized:
        return 'sandbox $'
    return f"sandbox ({state.current_branch}) $"


def run_meta(repo: SandboxRepository, line: str) -> bool:
    """
    Handle a ':' meta command.

    Returns:
        False when the session should end, True otherwise
    """
    name, _, arg = line[1:].strip().partition(' ')
    arg = arg.strip()

    if name in ('q', 'quit', 'exit'):
        return False

    if name == 'help':
        for text in META_HELP:
            click.echo(info(text))
    elif name == 'state':
        click.echo(json.dumps(repo.get_state().to_dict(), indent=2))
    elif name == 'graph':
        lines = render_timeline(build_timeline(repo.state))
        if not lines:
            click.echo(warning("No branches yet - run 'git init' first"))
        for text in lines:
            click.echo(text)
    elif name == 'undo':
        if repo.restore():
            click.echo(success("Undid last command"))
        else:
            click.echo(warning("Nothing to undo"))
    elif name == 'reset':
        repo.reset()
        click.echo(success("Sandbox reset"))
    elif name == 'load':
        if not arg:
            click.echo(error("Usage: :load <sample>"))
            return True
        try:
            sample = resolve_sample(arg)
        except SampleError as e:
            click.echo(error(str(e)))
            return True
        repo.load_sample(sample)
        click.echo(success(f"Loaded sample: {sample.name}"))
    elif name == 'samples':
        for sample in list_samples():
            click.echo(info(f"{sample.name}: {sample.description}"))
    else:
        click.echo(error(f"Unknown meta command: :{name} (try :help)"))

    return True


@click.command('shell')
@click.option('--sample', help='Start from a bundled sample (name or .json path)')
@click.option('--init', 'init_repo', is_flag=True, help='Start with an initialized repository')
@click.pass_obj
def shell_cmd(config, sample, init_repo):
    """
    Start an interactive sandbox session.

    Type git commands (git init, git add, git commit -m "msg", ...) or
    touch/echo to create files. Lines starting with ':' control the
    session itself; ':help' lists them.

    Examples:
        gitsandbox shell
        gitsandbox shell --sample todo-app
    """
    repo, interpreter = open_session(config, sample, init_repo, undo=True)

    click.echo(BANNER)
    click.echo(info("Welcome to Sandbox Mode! Type ':help' for session commands."))
    if sample:
        click.echo(success(f"Loaded sample: {sample}"))
    click.echo()

    while True:
        try:
            line = click.prompt(prompt_text(repo), default='', show_default=False, prompt_suffix=' ')
        except click.Abort:
            click.echo()
            break

        line = line.strip()
        if not line:
            continue
        if line.startswith(':'):
            if not run_meta(repo, line):
                break
            continue

        result = interpreter.execute(line)
        for text in render_result(result):
            click.echo(text)
