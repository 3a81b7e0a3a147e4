from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# NUL doubles as the end-of-input sentinel for both scanner and tokens.
EOF_CHAR = "\0"


class TokenKind(Enum):
    EOF = "EOF"
    NUMBER = "Number"
    STRING = "String"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    SPECIAL = "Special"
    SYMBOL = "Symbol"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int = field(default=0, compare=False)


class ValueKind(Enum):
    NIL = "Nil"
    BOOL = "Bool"
    NUMBER = "Number"
    STRING = "String"
    SYMBOL = "Symbol"
    LIST = "List"


@dataclass(frozen=True)
class Value:
    """A read value: kind tag plus payload.

    payload by kind: None (nil), bool, float, str (string lexeme with quotes,
    or symbol name), tuple of Value (list). The originating token is kept for
    diagnostics and does not take part in equality.
    """
    kind: ValueKind
    payload: Any
    token: Token = field(compare=False, repr=False)


@dataclass(frozen=True)
class EmptyForm:
    """Result of reading input that holds no forms."""


EMPTY_FORM = EmptyForm()
