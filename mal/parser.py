"""Recursive-descent parser building mal values from scanner tokens."""

import logging

from .errors import TokenMismatch, UnexpectedToken
from .scanner import tokenize
from .types import EMPTY_FORM, EmptyForm, Token, TokenKind, Value, ValueKind

_LITERALS = {
    "true": (ValueKind.BOOL, True),
    "false": (ValueKind.BOOL, False),
    "nil": (ValueKind.NIL, None),
}


class Parser:
    """Grammar: form := list | atom ; list := '(' form* ')'.

    The whole source is tokenized up front. The final token is always EOF and
    reading at or past it keeps returning it.
    """

    def __init__(self, source: str):
        self.tokens: list[Token] = tokenize(source)
        self.pos = 0

    @property
    def is_empty(self) -> bool:
        return len(self.tokens) == 1

    def parse_form(self) -> Value:
        if self._current().kind is TokenKind.LEFT_PAREN:
            return self.parse_list()
        return self.parse_atom()

    def parse_list(self) -> Value:
        left = self._expect(TokenKind.LEFT_PAREN)
        items: list[Value] = []
        while self._current().kind not in (TokenKind.RIGHT_PAREN, TokenKind.EOF):
            items.append(self.parse_form())
        self._expect(TokenKind.RIGHT_PAREN)
        return Value(ValueKind.LIST, tuple(items), left)

    def parse_atom(self) -> Value:
        tok = self._advance()
        if tok.kind is TokenKind.NUMBER:
            return Value(ValueKind.NUMBER, float(tok.text), tok)
        if tok.kind is TokenKind.STRING:
            return Value(ValueKind.STRING, tok.text, tok)
        if tok.kind is TokenKind.SYMBOL:
            return _symbol(tok)
        raise UnexpectedToken(tok)

    def _expect(self, kind: TokenKind) -> Token:
        if self._current().kind is kind:
            return self._advance()
        raise TokenMismatch(kind, self._current())

    def _current(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]

    def _advance(self) -> Token:
        tok = self._current()
        if self.pos < len(self.tokens):
            self.pos += 1
        return tok


def _symbol(tok: Token) -> Value:
    literal = _LITERALS.get(tok.text)
    if literal is not None:
        kind, payload = literal
        return Value(kind, payload, tok)
    return Value(ValueKind.SYMBOL, tok.text, tok)


def read(src: str) -> Value | EmptyForm:
    """Read the first form of src.

    Returns EMPTY_FORM when src holds only whitespace and comments. Anything
    after the first form is ignored.
    """
    parser = Parser(src)
    logging.debug(f"read {len(parser.tokens)} token(s) from {len(src)} char(s)")
    if parser.is_empty:
        return EMPTY_FORM
    return parser.parse_form()
