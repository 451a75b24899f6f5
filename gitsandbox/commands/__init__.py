"""Sandbox commands and the interpreter that dispatches them."""

from gitsandbox.commands.interpreter import CommandInterpreter, GIT_COMMANDS, SHELL_COMMANDS
from gitsandbox.commands.results import CommandResult, LineType, TerminalLine
from gitsandbox.commands.tokenizer import Token, tokenize

__all__ = [
    'CommandInterpreter', 'GIT_COMMANDS', 'SHELL_COMMANDS',
    'CommandResult', 'LineType', 'TerminalLine',
    'Token', 'tokenize',
]
