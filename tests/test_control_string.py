import pytest

from qwop_ai.core.exceptions import InvalidControlStringError
from qwop_ai.input.control_string import (
    WAIT, Token, TokenKind, close_control_string, count_ticks, is_well_formed,
    parse_control_string, parse_token, pressed_channels
)

def test_parse_token():
    assert parse_token("Q") == Token(TokenKind.PRESS, 0)
    assert parse_token("p") == Token(TokenKind.RELEASE, 3)
    assert parse_token("+") is WAIT
    assert parse_token("x") is None
    assert parse_token("QW") is None

@pytest.mark.parametrize("symbol", list("QWOPqwop+"))
def test_token_symbol_matches_input(symbol):
    assert parse_token(symbol).symbol == symbol

def test_parse_control_string():
    tokens = parse_control_string("Q+q")

    assert [t.kind for t in tokens] == [TokenKind.PRESS, TokenKind.WAIT, TokenKind.RELEASE]

@pytest.mark.parametrize("text", ["Q+Q", "q", "QqQ+qq", "Q+z+q"])
def test_parse_rejects_bad_strings(text):
    with pytest.raises(InvalidControlStringError):
        parse_control_string(text)

def test_pressed_channels_and_close():
    assert pressed_channels(parse_control_string("QW+wP+")) == [0, 3]
    assert close_control_string("QW+wP+") == "QW+wP+qp"
    assert close_control_string("Q+q") == "Q+q"

def test_is_well_formed():
    assert is_well_formed("")
    assert is_well_formed("Q+q+W+w")
    assert not is_well_formed("Q+")
    assert is_well_formed("Q+", require_released=False)
    assert not is_well_formed("Q+Q+qq", require_released=False)

def test_count_ticks():
    assert count_ticks("Q++q+") == 3
    assert count_ticks("QWqw") == 0
