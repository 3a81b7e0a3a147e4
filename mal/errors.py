"""Reader error taxonomy. Every error aborts the current read."""

from .types import Token, TokenKind


class ReaderError(SyntaxError):
    pass


class LexError(ReaderError):
    def __init__(self, char: str, pos: int):
        super().__init__(f"unexpected character {char!r} at position {pos}")
        self.char = char
        self.pos = pos


class UnterminatedString(ReaderError):
    def __init__(self, pos: int):
        super().__init__(f"unterminated string starting at position {pos}")
        self.pos = pos


class UnexpectedToken(ReaderError):
    def __init__(self, token: Token):
        super().__init__(f"unexpected token {token.kind.value}: {token.text!r}")
        self.token = token


class TokenMismatch(ReaderError):
    def __init__(self, expected: TokenKind, token: Token):
        super().__init__(
            f"expected token {expected.value}, got token {token.kind.value}"
        )
        self.expected = expected
        self.token = token
