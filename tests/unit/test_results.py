"""Tests for command results."""

from gitsandbox.commands.results import (
    CommandResult,
    LineType,
    TerminalLine,
    error,
    fail,
    info,
    ok,
    output,
    success,
)


def test_line_helpers():
    assert output('x') == TerminalLine(LineType.OUTPUT, 'x')
    assert success('x').type == LineType.SUCCESS
    assert error('x').type == LineType.ERROR
    assert info('x').type == LineType.INFO


def test_ok():
    result = ok(output('a'), output('b'), update_state=True)
    assert result.success
    assert result.update_state
    assert result.text == 'a\nb'


def test_ok_defaults_to_no_state_change():
    assert not ok().update_state
    assert ok().lines == []


def test_fail():
    result = fail('fatal: nope', output('hint'))
    assert not result.success
    assert not result.update_state
    assert result.errors == ['fatal: nope']
    assert result.lines[1].text == 'hint'


def test_to_dict():
    result = CommandResult(True, [success('done')], True)
    assert result.to_dict() == {
        'success': True,
        'lines': [{'type': 'success', 'text': 'done'}],
        'updateState': True,
    }
