"""
Safe arithmetic evaluator for bound expressions.

Accepts the small language people type into a bounds field:

- numerals: ``2``, ``2.5``, ``.5``, ``2.``, ``1e-3``
- the constant ``pi`` (any case) or ``π``
- a numeral directly followed by pi, e.g. ``2pi``, ``2 pi``, ``1.5π``,
  meaning the product at the precedence of ``*`` (``3/4pi`` is 3/4 of pi)
- binary ``+ - * /``, unary ``+ -`` and parentheses

Nothing else is recognised: there are no names, calls or attribute
lookups, so an expression can never reach the host environment.

Usage:
    value = evaluate("3pi/2")
    tokens = tokenize("2 * (pi - 1)")
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from sphregion.errors import ExpressionError


class TokenType(Enum):
    """Token types recognised by the expression lexer."""
    NUMBER = auto()     # 2, 2.5, 1e-3
    PI = auto()         # pi, π
    PLUS = auto()       # +
    MINUS = auto()      # -
    STAR = auto()       # *
    SLASH = auto()      # /
    LPAREN = auto()     # (
    RPAREN = auto()     # )
    EOF = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[float]
    lexeme: str
    column: int         # 1-indexed

    def __repr__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name


SINGLE_CHAR_TOKENS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
}


def _is_digit(ch: str) -> bool:
    return ch in '0123456789'


class Lexer:
    """Tokenizer for bound expressions.

    Usage:
        lexer = Lexer("3pi/2")
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        if idx >= len(self.source):
            return '\0'
        return self.source[idx]

    def _advance(self) -> str:
        ch = self._peek()
        self.pos += 1
        return ch

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _error(self, message: str, column: int) -> ExpressionError:
        return ExpressionError(message, self.source, column)

    def _scan_number(self) -> Token:
        start = self.pos
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == '.':
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        # exponent only when digits follow
        if self._peek() in 'eE':
            ahead = 1
            if self._peek(1) in '+-':
                ahead = 2
            if _is_digit(self._peek(ahead)):
                for _ in range(ahead):
                    self._advance()
                while _is_digit(self._peek()):
                    self._advance()
        lexeme = self.source[start:self.pos]
        return Token(TokenType.NUMBER, float(lexeme), lexeme, start + 1)

    def _scan_word(self) -> Token:
        start = self.pos
        while self._peek().isalpha() or self._peek() == '_':
            self._advance()
        lexeme = self.source[start:self.pos]
        if lexeme.lower() == 'pi':
            return Token(TokenType.PI, math.pi, lexeme, start + 1)
        raise self._error(f"unknown name '{lexeme}'", start + 1)

    def next_token(self) -> Token:
        while self._peek() in ' \t\r\n':
            self._advance()

        if self._is_at_end():
            return Token(TokenType.EOF, None, '', self.pos + 1)

        ch = self._peek()
        if _is_digit(ch) or (ch == '.' and _is_digit(self._peek(1))):
            return self._scan_number()
        if ch == 'π':
            self._advance()
            return Token(TokenType.PI, math.pi, ch, self.pos)
        if ch.isalpha() or ch == '_':
            return self._scan_word()
        if ch in SINGLE_CHAR_TOKENS:
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[ch], None, ch, self.pos)
        raise self._error(f"unexpected character '{ch}'", self.pos + 1)

    def tokenize(self) -> List[Token]:
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize ``source`` into a list ending with an EOF token."""
    return Lexer(source).tokenize()


class Evaluator:
    """
    Recursive descent evaluator over a token list.

    Grammar, lowest precedence first:
        expression := term (('+' | '-') term)*
        term       := unary (('*' | '/') unary | PI)*
        unary      := ('+' | '-') unary | primary
        primary    := NUMBER | PI | '(' expression ')'

    A PI directly after a NUMBER (``2pi``) is an implicit ``*`` with the
    same precedence as ``*`` and ``/``, so ``3/4pi`` is ``3/4*pi``.
    All binary operators are left-associative.
    """

    def __init__(self, tokens: List[Token], source: str = ""):
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def _current(self) -> Token:
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def _check(self, *token_types: TokenType) -> bool:
        return self._current().type in token_types

    def _advance(self) -> Token:
        token = self._current()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def _error(self, expected: str) -> ExpressionError:
        token = self._current()
        if token.type == TokenType.EOF:
            return ExpressionError(f"expected {expected}, found end of input",
                                   self.source, token.column)
        return ExpressionError(f"expected {expected}, found '{token.lexeme}'",
                               self.source, token.column)

    def evaluate(self) -> float:
        value = self._expression()
        if not self._check(TokenType.EOF):
            raise self._error("operator or end of input")
        return value

    def _expression(self) -> float:
        value = self._term()
        while self._check(TokenType.PLUS, TokenType.MINUS):
            op = self._advance()
            right = self._term()
            value = value + right if op.type == TokenType.PLUS else value - right
        return value

    def _implicit_product(self) -> bool:
        """True at a pi written straight after a numeral, as in 2pi."""
        return (self._check(TokenType.PI) and self.pos > 0
                and self.tokens[self.pos - 1].type == TokenType.NUMBER)

    def _term(self) -> float:
        value = self._unary()
        while True:
            if self._implicit_product():
                value = value * self._advance().value
                continue
            if not self._check(TokenType.STAR, TokenType.SLASH):
                break
            op = self._advance()
            right = self._unary()
            if op.type == TokenType.STAR:
                value = value * right
            elif right == 0.0:
                raise ExpressionError("division by zero", self.source, op.column)
            else:
                value = value / right
        return value

    def _unary(self) -> float:
        if self._check(TokenType.MINUS):
            self._advance()
            return -self._unary()
        if self._check(TokenType.PLUS):
            self._advance()
            return self._unary()
        return self._primary()

    def _primary(self) -> float:
        token = self._current()

        if token.type in (TokenType.NUMBER, TokenType.PI):
            self._advance()
            return token.value

        if token.type == TokenType.LPAREN:
            self._advance()
            value = self._expression()
            if not self._check(TokenType.RPAREN):
                raise self._error("')'")
            self._advance()
            return value

        raise self._error("number, pi or '('")


def evaluate(source: str) -> float:
    """Evaluate an arithmetic bound expression.

    Raises
    ------
    ExpressionError
        On any character, name or construct outside the expression
        language, on unbalanced parentheses, and on division by zero.
    """
    return Evaluator(tokenize(source), source).evaluate()
