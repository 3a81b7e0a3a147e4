"""Read-eval-print driver around the reader and printer."""

import logging
import sys
from typing import Optional, TextIO

from .config import ReplConfig
from .errors import ReaderError
from .parser import read
from .printer import pr_str
from .types import EmptyForm, Value


def eval_form(form: Value) -> Value:
    # No evaluator yet; forms evaluate to themselves.
    return form


def rep(line: str) -> str:
    """Read, evaluate and print one line. Reader errors propagate."""
    form = read(line)
    if isinstance(form, EmptyForm):
        return ""
    return pr_str(eval_form(form))


def repl(
    config: Optional[ReplConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> None:
    """Prompt, read a line, print its result, until end of input.

    A failed read is reported and the loop goes on with the next line.
    """
    config = config or ReplConfig()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while True:
        stdout.write(config.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        try:
            result = rep(line)
        except ReaderError as e:
            logging.warning(f"read failed: {e}")
            print(f">> ERROR: {e}", file=stderr)
            continue
        if result:
            print(result, file=stdout)
