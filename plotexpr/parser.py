"""Tokenising infix expressions into reverse Polish notation and evaluating them."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional, Union

from plotexpr.mathops import apply_binary, apply_function


class TokenType(enum.Enum):
    """Kinds of token produced by the tokenizer."""

    NUM = 0
    OPERATOR = 1
    FUNCTION = 2
    VARIABLE_X = 3
    LEFT_PAREN = 4
    RIGHT_PAREN = 5
    END = 6


@dataclass(frozen=True)
class Token:
    """A token: a number, an operator or parenthesis character, or a function name."""

    type: TokenType
    value: Optional[Union[float, str]] = None


_PRIORITIES = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}
_FUNCTION_PRIORITY = 4

_DIGIT_CHARS = frozenset("0123456789.")
_OPERATOR_CHARS = frozenset("+-*/^")
_NUMBER_PREFIX = re.compile(r"\d*(?:\.\d*)?")


def get_priority(op: str) -> int:
    """Return the precedence of an operator character, 0 if it is not one."""
    return _PRIORITIES.get(op, 0)


def token_priority(token: Token) -> int:
    """Return the precedence of a token on the operator stack."""
    if token.type is TokenType.FUNCTION:
        return _FUNCTION_PRIORITY
    if token.type is TokenType.OPERATOR:
        return get_priority(str(token.value))
    return 0


def is_digit_char(c: str) -> bool:
    """Whether ``c`` may appear in a number literal (a digit or a dot)."""
    return c in _DIGIT_CHARS


def is_space_char(c: str) -> bool:
    """Whether ``c`` is a blank."""
    return c == " "


def is_operator_char(c: str) -> bool:
    """Whether ``c`` is one of the binary operators."""
    return c in _OPERATOR_CHARS


def is_func_char(c: str) -> bool:
    """Whether ``c`` may appear in a function name (lower case, not ``x``)."""
    return len(c) == 1 and "a" <= c <= "z" and c != "x"


def _parse_number(text: str) -> float:
    # Use the longest leading part that forms a number; nothing usable gives 0.
    match = _NUMBER_PREFIX.match(text)
    prefix = match.group(0) if match else ""
    try:
        return float(prefix)
    except ValueError:
        return 0.0


def read_number(expr: str, pos: int) -> tuple[Token, int]:
    """Read a number starting at ``pos``; return it and the position after it."""
    end = pos
    while end < len(expr) and is_digit_char(expr[end]):
        end += 1
    return Token(TokenType.NUM, _parse_number(expr[pos:end])), end


def read_function(expr: str, pos: int) -> tuple[Token, int]:
    """Read a function name starting at ``pos``; return it and the position after it."""
    end = pos
    while end < len(expr) and is_func_char(expr[end]):
        end += 1
    return Token(TokenType.FUNCTION, expr[pos:end]), end


def to_rpn(expr: str) -> list[Token]:
    """Convert an infix expression to a reverse Polish token list ending in END.

    The variable ``x`` goes through the operator stack rather than straight to
    the output, and the character right after a function name is consumed
    together with the name.
    """
    stack: list[Token] = []
    output: list[Token] = []
    pos = 0
    length = len(expr)

    while pos < length:
        c = expr[pos]
        if is_space_char(c):
            pos += 1
            continue

        if is_digit_char(c):
            token, pos = read_number(expr, pos)
            output.append(token)
            continue

        if c == "x":
            stack.append(Token(TokenType.VARIABLE_X, "x"))
        elif is_operator_char(c):
            while (
                stack
                and stack[-1].type is TokenType.OPERATOR
                and token_priority(stack[-1]) >= get_priority(c)
            ):
                output.append(stack.pop())
            stack.append(Token(TokenType.OPERATOR, c))
        elif c == "(":
            stack.append(Token(TokenType.LEFT_PAREN, "("))
        elif c == ")":
            while stack:
                top = stack.pop()
                if top.type is TokenType.LEFT_PAREN:
                    break
                output.append(top)
        elif is_func_char(c) and pos + 2 < length:
            token, pos = read_function(expr, pos)
            stack.append(token)
        pos += 1

    output.extend(reversed(stack))
    output.append(Token(TokenType.END))
    return output


def evaluate_rpn(tokens: Iterable[Token], x: float) -> float:
    """Evaluate a reverse Polish token list at the given ``x``.

    Operations lacking operands, or whose result is undefined, drop their
    operands and push nothing. Returns the value on top of the stack at the
    end, or 0.0 if the stack is empty.
    """
    stack: list[float] = []
    for token in tokens:
        if token.type is TokenType.NUM:
            stack.append(float(token.value))  # type: ignore[arg-type]
        elif token.type is TokenType.VARIABLE_X:
            stack.append(x)
        elif token.type is TokenType.OPERATOR:
            right = stack.pop() if stack else None
            left = stack.pop() if stack else None
            if left is None or right is None:
                continue
            result = apply_binary(str(token.value), left, right)
            if result is not None:
                stack.append(result)
        elif token.type is TokenType.FUNCTION:
            if not stack:
                continue
            result = apply_function(str(token.value), stack.pop())
            if result is not None:
                stack.append(result)
    return stack[-1] if stack else 0.0