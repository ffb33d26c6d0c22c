""" calc - left-to-right integer calculator """
import argparse
import sys
from enum import Enum

_SHOULD_LOG_TOKENS = False
_SHOULD_LOG_STEPS = False


class ErrorCode(Enum):
    SYNTAX_ERROR = 'Syntax Error'
    UNEXPECTED_TOKEN = 'Error parsing input'
    DIVISION_BY_ZERO = 'Division by zero'


class Error(Exception):
    def __init__(self, error_code=None, token=None, message=None):
        super().__init__(message)
        self.error_code = error_code
        self.token = token
        self.message = f'{self.__class__.__name__}: {message}'


class LexError(Error):
    pass


class ParseError(Error):
    pass


class DivisionByZeroError(Error):
    pass


###############################################################################
#                                                                             #
#  LEXER                                                                      #
#                                                                             #
###############################################################################

# Token types
#
# EOF (end-of-file) token is used to indicate that
# there is no more input left for lexical analysis
class TokenType(Enum):
    PLUS = '+'
    MINUS = '-'
    MUL = '*'
    DIV = '/'
    INTEGER = 'INTEGER'
    EOF = 'EOF'


OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.MUL, TokenType.DIV)

LINE_TERMINATORS = ('\n', '\r')


def is_digit(char):
    """True for a single ASCII decimal digit.

    str.isdigit() is not used: it accepts characters such as '²'
    that int() refuses to parse.
    """
    return char is not None and '0' <= char <= '9'


class Token(object):
    def __init__(self, type, value):
        self.type = type
        # token value: an int for INTEGER, the operator character, or None
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __str__(self):
        """String representation of the class instance.

        Examples:
            Token(INTEGER, 3)
            Token(PLUS, '+')
            Token(EOF, None)
        """
        return 'Token({type}, {value})'.format(
            type=self.type.name,
            value=repr(self.value),
        )

    def __repr__(self):
        return self.__str__()


class Lexer(object):
    def __init__(self, text):
        # client string input, e.g. "4 + 2 * 3 - 6 / 2"
        self.text = text
        # self.pos is an index into self.text
        self.pos = 0

    def log(self, msg):
        if _SHOULD_LOG_TOKENS:
            print(msg)

    def error(self, message=None):
        s = ErrorCode.SYNTAX_ERROR.value
        if message:
            s = f'{s} ({message})'
        raise LexError(error_code=ErrorCode.SYNTAX_ERROR, message=s)

    @property
    def current_char(self):
        """Character under the cursor, or None at the end of the line."""
        if self.pos > len(self.text) - 1:
            return None
        char = self.text[self.pos]
        if char in LINE_TERMINATORS:
            return None
        return char

    def advance(self):
        """Move the `pos` pointer one character forward."""
        self.pos += 1

    def skip_whitespace(self):
        while self.current_char == ' ':
            self.advance()

    def integer(self):
        """Return a (multidigit) integer consumed from the input."""
        start_pos = self.pos
        while is_digit(self.current_char):
            self.advance()
        digits = self.text[start_pos:self.pos]
        try:
            value = int(digits)
        except ValueError:
            # the digit run exceeds sys.get_int_max_str_digits()
            self.error(f'integer literal of {len(digits)} digits at column {start_pos + 1}')
        return Token(TokenType.INTEGER, value)

    def get_next_token(self):
        """Lexical analyzer (also known as scanner or tokenizer)

        This method is responsible for breaking a sentence
        apart into tokens. One token at a time.
        """
        token = self._scan()
        self.log(token)
        return token

    def _scan(self):
        while self.current_char is not None:

            if self.current_char == ' ':
                self.skip_whitespace()
                continue

            if is_digit(self.current_char):
                return self.integer()

            try:
                # get enum member by value, e.g.
                # TokenType('*') --> TokenType.MUL
                token_type = TokenType(self.current_char)
            except ValueError:
                # no enum member with value equal to self.current_char
                token_type = None

            if token_type not in OPERATORS:
                self.error(f'unexpected {self.current_char!r} at column {self.pos + 1}')

            token = Token(token_type, token_type.value)
            self.advance()
            return token

        # the cursor stays put, so every further call is EOF as well
        return Token(TokenType.EOF, None)

    def tokens(self):
        """Lazily yield tokens up to and including the first EOF."""
        while True:
            token = self.get_next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def __iter__(self):
        return self.tokens()


###############################################################################
#                                                                             #
#  INTERPRETER                                                                #
#                                                                             #
###############################################################################

class Interpreter(object):
    def __init__(self, lexer):
        self.lexer = lexer
        # current token instance
        self.current_token = None

    def log(self, msg):
        if _SHOULD_LOG_STEPS:
            print(msg)

    def error(self, error_code, token):
        raise ParseError(
            error_code=error_code,
            token=token,
            message=f'{error_code.value} -> {token}',
        )

    def eat(self, token_type):
        # compare the current token type with the passed token
        # type and if they match then "eat" the current token
        # and assign the next token to the self.current_token,
        # otherwise raise an exception.
        if self.current_token.type == token_type:
            self.current_token = self.lexer.get_next_token()
        else:
            self.error(ErrorCode.UNEXPECTED_TOKEN, self.current_token)

    def factor(self):
        """factor : INTEGER"""
        token = self.current_token
        self.eat(TokenType.INTEGER)
        return token.value

    def apply(self, left, op, right):
        if op.type == TokenType.PLUS:
            return left + right
        elif op.type == TokenType.MINUS:
            return left - right
        elif op.type == TokenType.MUL:
            return left * right
        elif op.type == TokenType.DIV:
            if right == 0:
                raise DivisionByZeroError(
                    error_code=ErrorCode.DIVISION_BY_ZERO,
                    token=op,
                    message=f'{ErrorCode.DIVISION_BY_ZERO.value}: {left} / {right}',
                )
            return left // right

    def expr(self):
        """
        expr   : factor ((PLUS | MINUS | MUL | DIV) factor)*
        factor : INTEGER

        No precedence: every operator is applied as soon as its
        right-hand factor is read.
        """
        # set current token to the first token taken from the input
        self.current_token = self.lexer.get_next_token()

        result = self.factor()

        while self.current_token.type in OPERATORS:
            op = self.current_token
            self.eat(op.type)
            right = self.factor()
            value = self.apply(result, op, right)
            self.log(f'{result} {op.value} {right} = {value}')
            result = value

        if self.current_token.type != TokenType.EOF:
            self.error(ErrorCode.UNEXPECTED_TOKEN, self.current_token)

        return result


def evaluate(text):
    """Evaluate one line with a fresh lexer and interpreter."""
    return Interpreter(Lexer(text)).expr()


###############################################################################
#                                                                             #
#  MAIN                                                                       #
#                                                                             #
###############################################################################

def repl(prompt):
    while True:
        try:
            text = input(prompt)
        except EOFError:
            break
        try:
            result = evaluate(text)
        except Error as e:
            print(e.message)
            continue
        print(result)


def run_file(path):
    with open(path, 'r') as f:
        for text in f:
            try:
                result = evaluate(text)
            except Error as e:
                print(e.message)
                sys.exit(1)
            print(result)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='calc - left-to-right integer calculator'
    )
    parser.add_argument(
        'inputfile',
        nargs='?',
        help='file with one expression per line (default: interactive prompt)',
    )
    parser.add_argument(
        '--prompt',
        default='calc> ',
        help='interactive prompt text',
    )
    parser.add_argument(
        '--tokens',
        help='Print every token produced by the lexer',
        action='store_true',
    )
    parser.add_argument(
        '--trace',
        help='Print every reduction step',
        action='store_true',
    )
    args = parser.parse_args(argv)
    global _SHOULD_LOG_TOKENS, _SHOULD_LOG_STEPS
    _SHOULD_LOG_TOKENS = args.tokens
    _SHOULD_LOG_STEPS = args.trace

    if args.inputfile is None:
        repl(args.prompt)
    else:
        run_file(args.inputfile)


if __name__ == '__main__':
    main()
