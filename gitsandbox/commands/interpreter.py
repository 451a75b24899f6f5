"""Command interpreter: one line of text in, one CommandResult out."""

from typing import Callable, Dict, List, Optional, Tuple

import structlog

from gitsandbox.commands.add import add_cmd
from gitsandbox.commands.branch import branch_cmd
from gitsandbox.commands.checkout import checkout_cmd, switch_cmd
from gitsandbox.commands.commit import commit_cmd
from gitsandbox.commands.init import init_cmd
from gitsandbox.commands.log import log_cmd
from gitsandbox.commands.merge import merge_cmd
from gitsandbox.commands.restore import restore_cmd
from gitsandbox.commands.results import CommandResult, fail, ok, output
from gitsandbox.commands.shell import echo_cmd, touch_cmd
from gitsandbox.commands.status import status_cmd
from gitsandbox.commands.tokenizer import Token, tokenize
from gitsandbox.core.errors import TokenizeError
from gitsandbox.core.repository import SandboxRepository

logger = structlog.get_logger(__name__)

Handler = Callable[[SandboxRepository, List], CommandResult]

GIT_COMMANDS: Dict[str, Handler] = {
    'init': init_cmd,
    'status': status_cmd,
    'add': add_cmd,
    'commit': commit_cmd,
    'branch': branch_cmd,
    'checkout': checkout_cmd,
    'switch': switch_cmd,
    'log': log_cmd,
    'merge': merge_cmd,
    'restore': restore_cmd,
}

SHELL_COMMANDS: Dict[str, Handler] = {
    'touch': touch_cmd,
    'echo': echo_cmd,
}


class CommandInterpreter:
    """
    Turns command lines into validated repository transitions.

    execute() never raises. Rejected commands come back as
    success=False results and leave the repository exactly as it was;
    an unexpected error inside a handler rolls the state back before it
    is reported.
    """

    def __init__(self, repo: SandboxRepository, undo: bool = False):
        """
        Initialize interpreter.

        Args:
            repo: Repository the commands act on
            undo: Snapshot the repository before every state-changing
                command so repo.restore() can step back
        """
        self.repo = repo
        self.undo = undo

    def execute(self, line: str) -> CommandResult:
        """
        Interpret a single command line.

        Args:
            line: Raw input, e.g. 'git commit -m "first"'

        Returns:
            CommandResult
        """
        try:
            tokens = tokenize(line.strip())
        except TokenizeError as e:
            return fail(f"parse error: {e}")

        if not tokens:
            return ok()

        handler, args, name, is_git = self._resolve(tokens)
        if handler is None:
            return self._unknown(name, is_git)

        saved = self.repo.get_state() if self.undo else None

        try:
            with self.repo.transaction():
                result = handler(self.repo, args)
        except Exception as e:
            logger.exception('command_crashed', command=name, line=line)
            result = fail(f"error: {e}")

        if saved is not None and result.success and result.update_state:
            self.repo.snapshot(saved)

        if not result.success:
            logger.info('command_failed', command=name, errors=result.errors)
        else:
            logger.debug('command_executed', command=name, update_state=result.update_state)
        return result

    def _resolve(self, tokens: List[Token]) -> Tuple[Optional[Handler], List, str, bool]:
        """Split tokens into (handler, args, command name, is_git)."""
        first = tokens[0]
        if first == 'git' and not first.quoted:
            if len(tokens) == 1:
                return None, [], '', True
            name = str(tokens[1])
            # git sub-commands see plain strings; quoting only matters to echo
            return GIT_COMMANDS.get(name), [str(t) for t in tokens[2:]], name, True

        name = str(first)
        return SHELL_COMMANDS.get(name), tokens[1:], name, False

    def _unknown(self, name: str, is_git: bool) -> CommandResult:
        hint = output("See 'git --help' for available commands.")
        if is_git and not name:
            return fail("usage: git <command> [<args>]", hint)
        if is_git:
            return fail(f"git: '{name}' is not a git command.", hint)
        return fail(f"Command not found: {name}",
                    output(f"Available commands: {', '.join(SHELL_COMMANDS)}, git"))


def help_cmd(repo: SandboxRepository, args: List[str]) -> CommandResult:
    """List the simulated git sub-commands."""
    lines = [output("usage: git <command> [<args>]"), output("")]
    for name, handler in GIT_COMMANDS.items():
        if name in ('help', '--help'):
            continue
        summary = (handler.__doc__ or '').strip().split('\n', 1)[0]
        lines.append(output(f"   {name:<10}{summary}"))
    return ok(*lines)


GIT_COMMANDS['help'] = help_cmd
GIT_COMMANDS['--help'] = help_cmd
