"""Lexical scanner turning mal source text into tokens."""

from typing import Iterator

from .errors import LexError, UnterminatedString
from .types import EOF_CHAR, Token, TokenKind

DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" ,\t\r\n")
SPECIAL_CHARS = frozenset("()[]{}'`~^@")
SYMBOL_PUNCTUATION = frozenset("!#$%&*_-+=:<>.|")
COMMENT_CHAR = ";"

_PAREN_KINDS = {"(": TokenKind.LEFT_PAREN, ")": TokenKind.RIGHT_PAREN}


def is_digit(ch: str) -> bool:
    return ch in DIGITS


def is_letter(ch: str) -> bool:
    # Anything with distinct cases counts, so non-ASCII letters are symbols too.
    return ch.lower() != ch.upper()


def is_symbol_char(ch: str) -> bool:
    return is_digit(ch) or is_letter(ch) or ch in SYMBOL_PUNCTUATION


class Scanner:
    """Pull-based scanner with a private cursor over one source string.

    After the end of input every call to next_token() returns EOF again.
    Iterating a Scanner yields tokens up to and including the first EOF.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return

    def next_token(self) -> Token:
        self._skip_whitespace_and_comments()

        ch = self._current()
        if ch == EOF_CHAR:
            return Token(TokenKind.EOF, EOF_CHAR, self.pos)
        if ch == '"':
            return self._read_string()
        if ch in SPECIAL_CHARS:
            return self._read_special()
        if is_digit(ch):
            return self._read_number()
        if is_symbol_char(ch):
            return self._read_symbol()
        raise LexError(ch, self.pos)

    def _read_special(self) -> Token:
        start = self.pos
        ch = self._advance()
        return Token(_PAREN_KINDS.get(ch, TokenKind.SPECIAL), ch, start)

    def _read_symbol(self) -> Token:
        start = self.pos
        while is_symbol_char(self._current()):
            self.pos += 1
        return Token(TokenKind.SYMBOL, self.source[start:self.pos], start)

    def _read_number(self) -> Token:
        start = self.pos
        while is_digit(self._current()):
            self.pos += 1
        # A dot without a digit after it is left for the next token.
        if self._current() == "." and is_digit(self._peek(1)):
            self.pos += 1
            while is_digit(self._current()):
                self.pos += 1
        return Token(TokenKind.NUMBER, self.source[start:self.pos], start)

    def _read_string(self) -> Token:
        start = self.pos
        buf = self._advance()  # opening quote
        while self._current() != EOF_CHAR:
            ch = self._current()
            if ch == '"':
                break
            if ch == "\\" and self._peek(1) in ("\\", '"'):
                buf += self._advance()
                buf += self._advance()
                continue
            buf += self._advance()

        closing = self._advance()
        if closing != '"':
            raise UnterminatedString(start)
        return Token(TokenKind.STRING, buf + closing, start)

    def _skip_whitespace_and_comments(self) -> None:
        skipped = True
        while skipped:
            skipped = False
            while self._current() in WHITESPACE:
                skipped = True
                self.pos += 1
            if self._current() == COMMENT_CHAR:
                skipped = True
                while self._current() != EOF_CHAR:
                    if self._advance() == "\n":
                        break

    def _current(self) -> str:
        return self._peek(0)

    def _peek(self, offset: int) -> str:
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return EOF_CHAR

    def _advance(self) -> str:
        if self.pos >= len(self.source):
            return EOF_CHAR
        ch = self.source[self.pos]
        self.pos += 1
        return ch


def tokenize(src: str) -> list[Token]:
    """Scan src to the end, returning every token including the final EOF."""
    return list(Scanner(src))
