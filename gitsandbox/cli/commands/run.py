"""Run command - execute a batch of sandbox commands."""

import json

import click

from gitsandbox.cli.output import error, info, render_line, render_result
from gitsandbox.cli.session import open_session
from gitsandbox.commands.results import LineType, TerminalLine


def read_script(script) -> list:
    """Command lines from a script file, skipping blanks and '#' comments."""
    lines = []
    for raw in script:
        line = raw.strip()
        if line and not line.startswith('#'):
            lines.append(line)
    return lines


@click.command('run')
@click.argument('commands', nargs=-1)
@click.option('-f', '--file', 'script', type=click.File('r'), help='Read commands from a file, one per line')
@click.option('--sample', help='Start from a bundled sample (name or .json path)')
@click.option('--init', 'init_repo', is_flag=True, help='Start with an initialized repository')
@click.option('-k', '--keep-going', is_flag=True, help='Continue after a failed command')
@click.option('--json', 'as_json', is_flag=True, help='Print the final state as JSON')
@click.option('-q', '--quiet', is_flag=True, help='Do not print command output')
@click.pass_context
def run_cmd(ctx, commands, script, sample, init_repo, keep_going, as_json, quiet):
    """
    Run sandbox commands in order against a fresh repository.

    Stops at the first failing command unless --keep-going is given.
    Exits with status 1 if any command failed.

    Examples:
        gitsandbox run "git init" "touch a.txt" "git add ." "git commit -m 'first'"
        gitsandbox run --sample simple-blog "git log --oneline"
        gitsandbox run -f lesson.txt --json
    """
    lines = list(commands)
    if script is not None:
        lines.extend(read_script(script))

    if not lines:
        click.echo(error("No commands given"))
        raise click.Abort()

    repo, interpreter = open_session(ctx.obj, sample, init_repo)
    failures = 0

    for line in lines:
        result = interpreter.execute(line)
        if not quiet:
            click.echo(render_line(TerminalLine(LineType.COMMAND, line)))
            for text in render_result(result):
                click.echo(text)

        if not result.success:
            failures += 1
            if not keep_going:
                break

    if as_json:
        click.echo(json.dumps(repo.get_state().to_dict(), indent=2))

    if failures:
        if not quiet:
            click.echo(info(f"{failures} command(s) failed"), err=True)
        ctx.exit(1)
