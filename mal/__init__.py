from .errors import LexError, ReaderError, TokenMismatch, UnexpectedToken, UnterminatedString
from .parser import Parser, read
from .printer import pr_str
from .repl import rep, repl
from .scanner import Scanner, tokenize
from .types import EMPTY_FORM, EmptyForm, Token, TokenKind, Value, ValueKind

__all__ = [
    "EMPTY_FORM",
    "EmptyForm",
    "LexError",
    "Parser",
    "ReaderError",
    "Scanner",
    "Token",
    "TokenKind",
    "TokenMismatch",
    "UnexpectedToken",
    "UnterminatedString",
    "Value",
    "ValueKind",
    "pr_str",
    "read",
    "rep",
    "repl",
    "tokenize",
]
