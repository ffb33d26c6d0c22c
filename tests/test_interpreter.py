import pytest

from calc import (
    DivisionByZeroError,
    Error,
    ErrorCode,
    Interpreter,
    Lexer,
    LexError,
    ParseError,
    TokenType,
    evaluate,
)


@pytest.mark.parametrize('text, expected', [
    ('3+5', 8),
    ('3 + 5', 8),
    ('42', 42),
    ('7-3*2', 8),
    ('2+3*4', 20),
    ('10/2/5', 1),
    ('1-5', -4),
    ('12 * 12 - 44', 100),
    ('3+5\n', 8),
])
def test_evaluate(text, expected):
    assert evaluate(text) == expected


def test_division_floors():
    assert evaluate('7/2') == 3
    assert evaluate('1-8/3') == -3


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError) as excinfo:
        evaluate('5/0')
    assert excinfo.value.error_code == ErrorCode.DIVISION_BY_ZERO
    assert excinfo.value.token.type == TokenType.DIV


def test_division_by_zero_after_reduction():
    with pytest.raises(DivisionByZeroError):
        evaluate('8/2-4/0')
    # a zero result on the left is fine
    assert evaluate('2-2/3') == 0


def test_unknown_character():
    with pytest.raises(LexError):
        evaluate('3+a')


@pytest.mark.parametrize('text', ['+3', '', '   ', '3+', '3 4', '3++4', '*'])
def test_parse_errors(text):
    with pytest.raises(ParseError, match='Error parsing input'):
        evaluate(text)


def test_errors_share_a_base_class():
    for text in ('+3', '1/0', '$'):
        with pytest.raises(Error):
            evaluate(text)


def test_error_message_names_the_class():
    with pytest.raises(ParseError) as excinfo:
        evaluate('+3')
    assert excinfo.value.message.startswith('ParseError: Error parsing input')


@pytest.mark.parametrize('text', ['9-2*3', '5/0', '1+x', '+1'])
def test_evaluate_is_repeatable(text):
    def outcome():
        try:
            return evaluate(text)
        except Error as e:
            return type(e)

    assert outcome() == outcome()


def test_eat_checks_the_token_type():
    interpreter = Interpreter(Lexer('1+2'))
    interpreter.current_token = interpreter.lexer.get_next_token()
    with pytest.raises(ParseError):
        interpreter.eat(TokenType.PLUS)
    interpreter.eat(TokenType.INTEGER)
    assert interpreter.current_token.type == TokenType.PLUS
