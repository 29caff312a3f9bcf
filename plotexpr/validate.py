"""Reading an expression line and checking that it can be plotted."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from plotexpr.parser import (
    is_digit_char,
    is_func_char,
    is_operator_char,
    is_space_char,
    read_function,
)

FUNCTION_NAMES = frozenset({"cos", "sin", "tg", "ctg", "sqrt", "ln"})


def is_function_name(name: str) -> bool:
    """Whether ``name`` is one of the supported function names."""
    return name in FUNCTION_NAMES


def is_valid_expression(expr: str) -> bool:
    """Check the characters, function names and parentheses of ``expr``.

    A function name consumes the character right after it, the same way the
    tokenizer does, so that character takes no part in the checks. Empty
    parentheses and unbalanced parentheses make the expression invalid.
    """
    depth = 0
    pos = 0
    length = len(expr)

    while pos < length:
        c = expr[pos]
        if is_space_char(c):
            pos += 1
            continue

        if is_func_char(c) and pos + 2 < length:
            token, pos = read_function(expr, pos)
            if not is_function_name(str(token.value)):
                return False
        elif c == "x":
            pass
        elif not (is_digit_char(c) or is_operator_char(c) or c in "()"):
            return False
        elif c == "(":
            if pos + 1 < length and expr[pos + 1] == ")":
                return False
            depth += 1
        elif c == ")":
            if depth == 0:
                return False
            depth -= 1
        pos += 1

    return depth == 0


def read_expression(stream: Optional[TextIO] = None) -> str:
    """Read one line from ``stream`` (standard input by default), without its newline."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    return line[:-1] if line.endswith("\n") else line