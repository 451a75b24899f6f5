"""Shell commands available next to git: touch and echo."""

from typing import List

from gitsandbox.commands.results import CommandResult, TerminalLine, fail, ok, output, success
from gitsandbox.commands.tokenizer import Token
from gitsandbox.core.repository import SandboxRepository


def touch_cmd(repo: SandboxRepository, args: List[Token]) -> CommandResult:
    """
    Create empty files; existing files are left as they are.

    Examples:
        touch index.html style.css
    """
    if not args:
        return fail("touch: missing file operand")

    lines: List[TerminalLine] = []
    created = 0
    for path in map(str, args):
        if repo.state.files.get(path) is not None:
            lines.append(output(f"Updated: {path}"))
        else:
            repo.set_file(path, "")
            lines.append(success(f"Created: {path}"))
            created += 1

    return ok(*lines, update_state=created > 0)


def echo_cmd(repo: SandboxRepository, args: List[Token]) -> CommandResult:
    """
    Print text, or write it to a file with '>'.

    Only an unquoted '>' redirects, so quoted text may contain '>'.
    Words after the target file are written too, as a shell would.

    Examples:
        echo hello
        echo "a > b" > notes.txt
    """
    if not args:
        return fail("echo: missing arguments")

    redirect_at = next((i for i, token in enumerate(args) if token.is_redirect), None)
    if redirect_at is None:
        return ok(output(' '.join(args)))

    target_at = redirect_at + 1
    if target_at >= len(args):
        return fail("syntax error near unexpected token `newline'")
    if args[target_at].operator:
        return fail(f"syntax error near unexpected token `{args[target_at]}'")

    path = str(args[target_at])
    words = args[:redirect_at] + args[target_at + 1:]
    if any(word.operator for word in words):
        return fail("echo: only one redirect is supported")

    repo.set_file(path, ' '.join(words))
    return ok(success(f"Created file: {path}"), update_state=True)
