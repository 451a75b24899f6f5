"""Command results: the renderable output of one interpreted line."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class LineType(str, Enum):
    """How a terminal line should be rendered."""

    COMMAND = 'command'
    OUTPUT = 'output'
    ERROR = 'error'
    SUCCESS = 'success'
    INFO = 'info'


@dataclass(frozen=True)
class TerminalLine:
    """A single line of terminal output."""
    type: LineType
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {'type': self.type.value, 'text': self.text}


@dataclass
class CommandResult:
    """
    Outcome of interpreting a command.

    update_state tells the caller that the repository changed and any view
    of it should be refreshed.
    """
    success: bool
    lines: List[TerminalLine] = field(default_factory=list)
    update_state: bool = False

    @property
    def text(self) -> str:
        """All lines joined with newlines."""
        return '\n'.join(line.text for line in self.lines)

    @property
    def errors(self) -> List[str]:
        return [line.text for line in self.lines if line.type == LineType.ERROR]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'lines': [line.to_dict() for line in self.lines],
            'updateState': self.update_state,
        }


def output(text: str) -> TerminalLine:
    return TerminalLine(LineType.OUTPUT, text)


def success(text: str) -> TerminalLine:
    return TerminalLine(LineType.SUCCESS, text)


def error(text: str) -> TerminalLine:
    return TerminalLine(LineType.ERROR, text)


def info(text: str) -> TerminalLine:
    return TerminalLine(LineType.INFO, text)


def ok(*lines: TerminalLine, update_state: bool = False) -> CommandResult:
    """Successful result."""
    return CommandResult(True, list(lines), update_state)


def fail(message: str, *extra: TerminalLine) -> CommandResult:
    """Failed result: one error line, optional follow-up lines, no state change."""
    return CommandResult(False, [error(message), *extra], False)
