"""Tests for the command line tokenizer."""

import pytest

from gitsandbox.commands.tokenizer import Token, tokenize
from gitsandbox.core.errors import TokenizeError


class TestTokenize:
    """Tests for tokenize()."""

    def test_whitespace_splitting(self):
        assert tokenize("git  add   a.txt") == ['git', 'add', 'a.txt']

    def test_empty_and_blank(self):
        assert tokenize("") == []
        assert tokenize("   \t ") == []

    def test_double_quotes_group_words(self):
        tokens = tokenize('git commit -m "Initial commit"')
        assert tokens == ['git', 'commit', '-m', 'Initial commit']
        assert tokens[3].quoted
        assert not tokens[0].quoted

    def test_single_quotes_are_literal(self):
        assert tokenize(r"echo 'a \"b\" c'") == ['echo', r'a \"b\" c']

    def test_escaped_quote_inside_double_quotes(self):
        assert tokenize(r'echo "say \"hi\""') == ['echo', 'say "hi"']

    def test_other_backslashes_kept_in_double_quotes(self):
        assert tokenize(r'echo "a\nb"') == ['echo', r'a\nb']

    def test_backslash_escapes_outside_quotes(self):
        assert tokenize(r'touch my\ file.txt') == ['touch', 'my file.txt']

    def test_adjacent_pieces_join(self):
        assert tokenize('echo pre"mid"\'post\'') == ['echo', 'premidpost']

    def test_empty_quotes_make_empty_token(self):
        tokens = tokenize('git commit -m ""')
        assert tokens[-1] == ''
        assert tokens[-1].quoted

    def test_redirect_operator(self):
        tokens = tokenize('echo hello > out.txt')
        assert tokens == ['echo', 'hello', '>', 'out.txt']
        assert tokens[2].is_redirect

    def test_glued_redirect(self):
        tokens = tokenize('echo hello>out.txt')
        assert tokens == ['echo', 'hello', '>', 'out.txt']
        assert tokens[2].operator

    def test_quoted_redirect_is_text(self):
        tokens = tokenize('echo "a > b"')
        assert tokens == ['echo', 'a > b']
        assert not any(t.is_redirect for t in tokens)

    def test_escaped_redirect_is_text(self):
        tokens = tokenize(r'echo \>')
        assert tokens[1] == '>'
        assert not tokens[1].is_redirect

    @pytest.mark.parametrize('line', ['echo "open', "echo 'open", 'echo trailing\\'])
    def test_errors(self, line):
        with pytest.raises(TokenizeError):
            tokenize(line)


def test_token_is_a_str():
    token = Token('abc', quoted=True)
    assert isinstance(token, str)
    assert token.upper() == 'ABC'
    assert 'quoted' in repr(token)


def test_unquoted_apostrophe_opens_a_quote():
    with pytest.raises(TokenizeError, match='unterminated single quote'):
        tokenize("echo don't panic > a.txt")


def test_apostrophe_inside_double_quotes():
    assert tokenize('echo "don\'t panic" > a.txt') == ['echo', "don't panic", '>', 'a.txt']
