"""Printer rendering mal values back to canonical text."""

from decimal import Decimal

from .types import Value, ValueKind


def pr_str(value: Value) -> str:
    kind = value.kind
    if kind is ValueKind.NIL:
        return "nil"
    if kind is ValueKind.BOOL:
        return "true" if value.payload else "false"
    if kind is ValueKind.NUMBER:
        return _number(value.payload)
    if kind in (ValueKind.STRING, ValueKind.SYMBOL):
        # Strings were never unescaped on read, so the lexeme prints as-is.
        return value.payload
    if kind is ValueKind.LIST:
        return "(" + " ".join(pr_str(item) for item in value.payload) + ")"
    raise TypeError(f"unknown value kind {kind!r}")


def _number(n: float) -> str:
    if n.is_integer():
        return str(int(n))
    # Shortest round-trip digits, never in exponent form.
    return format(Decimal(repr(n)), "f")
