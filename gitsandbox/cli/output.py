"""CLI output utilities and formatting."""

from colorama import Fore, Style

from gitsandbox.commands.results import CommandResult, LineType, TerminalLine

BANNER = f"""
{Fore.YELLOW}+--------------------------------------------+{Style.RESET_ALL}
{Fore.YELLOW}|{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}gitsandbox{Style.RESET_ALL}                               {Fore.YELLOW}|{Style.RESET_ALL}
{Fore.YELLOW}|{Style.RESET_ALL}   {Fore.WHITE}A safe place to practise Git{Style.RESET_ALL}             {Fore.YELLOW}|{Style.RESET_ALL}
{Fore.YELLOW}+--------------------------------------------+{Style.RESET_ALL}
"""

LINE_COLORS = {
    LineType.COMMAND: Fore.WHITE + Style.BRIGHT,
    LineType.OUTPUT: '',
    LineType.ERROR: Fore.RED,
    LineType.SUCCESS: Fore.GREEN,
    LineType.INFO: Fore.CYAN,
}


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def render_line(line: TerminalLine) -> str:
    """Colour a terminal line by its type."""
    text = f"$ {line.text}" if line.type == LineType.COMMAND else line.text
    color = LINE_COLORS.get(line.type, '')
    return f"{color}{text}{Style.RESET_ALL}" if color else text


def render_result(result: CommandResult) -> list:
    """Render every line of a result."""
    return [render_line(line) for line in result.lines]
