"""Command line tokenizer.

Splits a line on whitespace the way a POSIX shell would for the small
subset the sandbox needs:

- single quotes keep everything literally
- double quotes keep everything except backslash escapes of " and \\
- a backslash outside quotes escapes the next character
- quoted and unquoted pieces next to each other form one token
- an unquoted ``>`` is the redirect operator, even when glued to a word
"""

from typing import List

from gitsandbox.core.errors import TokenizeError

REDIRECT = '>'


class Token(str):
    """A word of the command line that remembers whether any of it was quoted."""

    quoted: bool
    operator: bool

    def __new__(cls, text: str, quoted: bool = False, operator: bool = False) -> 'Token':
        token = super().__new__(cls, text)
        token.quoted = quoted
        token.operator = operator
        return token

    @property
    def is_redirect(self) -> bool:
        return self.operator and self == REDIRECT

    def __repr__(self) -> str:
        flags = ' quoted' if self.quoted else ''
        flags += ' operator' if self.operator else ''
        return f"Token({str.__repr__(self)}{flags})"


def tokenize(line: str) -> List[Token]:
    """
    Split a command line into tokens.

    Args:
        line: Raw command line

    Returns:
        List of tokens

    Raises:
        TokenizeError: On an unterminated quote or trailing backslash
    """
    tokens: List[Token] = []
    buf: List[str] = []
    quoted = False
    in_word = False
    i = 0
    n = len(line)

    def flush() -> None:
        nonlocal buf, quoted, in_word
        if in_word:
            tokens.append(Token(''.join(buf), quoted=quoted))
        buf, quoted, in_word = [], False, False

    while i < n:
        ch = line[i]

        if ch.isspace():
            flush()
            i += 1
        elif ch == REDIRECT:
            flush()
            tokens.append(Token(REDIRECT, operator=True))
            i += 1
        elif ch == "'":
            end = line.find("'", i + 1)
            if end == -1:
                raise TokenizeError("unterminated single quote")
            buf.append(line[i + 1:end])
            quoted = in_word = True
            i = end + 1
        elif ch == '"':
            i += 1
            while True:
                if i >= n:
                    raise TokenizeError("unterminated double quote")
                ch = line[i]
                if ch == '"':
                    i += 1
                    break
                if ch == '\\' and i + 1 < n and line[i + 1] in '"\\':
                    buf.append(line[i + 1])
                    i += 2
                else:
                    buf.append(ch)
                    i += 1
            quoted = in_word = True
        elif ch == '\\':
            if i + 1 >= n:
                raise TokenizeError("trailing backslash")
            buf.append(line[i + 1])
            quoted = in_word = True
            i += 2
        else:
            buf.append(ch)
            in_word = True
            i += 1

    flush()
    return tokens
