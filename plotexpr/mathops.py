"""Arithmetic and elementary functions that yield ``None`` where undefined.

Every operation returns a float, or ``None`` when the result is undefined
(division by zero, logarithm of a non-positive number, and so on).
``apply_binary`` and ``apply_function`` pass ``None`` operands straight
through, so undefined values carry along a chain of calls.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Optional

MaybeFloat = Optional[float]

_NORMALIZE_EPSILON = 1e-6


def add(a: float, b: float) -> float:
    """Return ``a + b``."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return ``a - b``."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return ``a * b``."""
    return a * b


def divide(a: float, b: float) -> MaybeFloat:
    """Return ``a / b``, or ``None`` when ``b`` is zero."""
    if b == 0.0:
        return None
    return a / b


def _periodic(func: Callable[[float], float], a: float) -> float:
    # The trigonometric functions are undefined at infinity: yield NaN.
    if math.isinf(a):
        return math.nan
    return func(a)


def sin(a: float) -> float:
    """Return the sine of ``a``."""
    return _periodic(math.sin, a)


def cos(a: float) -> float:
    """Return the cosine of ``a``."""
    return _periodic(math.cos, a)


def tg(a: float) -> float:
    """Return the tangent of ``a``."""
    return _periodic(math.tan, a)


def ctg(a: float) -> MaybeFloat:
    """Return the cotangent of ``a``, or ``None`` where the tangent is zero."""
    tan_value = tg(a)
    if tan_value == 0.0:
        return None
    return 1.0 / tan_value


def ln(a: float) -> MaybeFloat:
    """Return the natural logarithm of ``a``, or ``None`` if ``a <= 0``."""
    if a <= 0.0:
        return None
    return math.log(a)


def sqrt(a: float) -> MaybeFloat:
    """Return the square root of ``a``, or ``None`` if ``a < 0``."""
    if a < 0.0:
        return None
    return math.sqrt(a)


def normalize(values: Iterable[float]) -> list[float]:
    """Scale ``values`` into ``[0, 1)`` relative to their minimum and maximum.

    Raises ``ValueError`` for an empty input.
    """
    items = list(values)
    if not items:
        raise ValueError("cannot normalize an empty sequence")
    lowest = min(items)
    span = max(items) - lowest + _NORMALIZE_EPSILON
    return [(value - lowest) / span for value in items]


_BINARY: dict[str, Callable[[float, float], MaybeFloat]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}

_UNARY: dict[str, Callable[[float], MaybeFloat]] = {
    "sin": sin,
    "cos": cos,
    "tg": tg,
    "ctg": ctg,
    "ln": ln,
    "sqrt": sqrt,
}


def apply_binary(op: str, a: MaybeFloat, b: MaybeFloat) -> MaybeFloat:
    """Apply the operator ``op`` to ``a`` and ``b``.

    Returns ``None`` if either operand is ``None``, the operator is not
    supported, or the result is undefined.
    """
    if a is None or b is None:
        return None
    func = _BINARY.get(op)
    if func is None:
        return None
    return func(a, b)


def apply_function(name: str, a: MaybeFloat) -> MaybeFloat:
    """Apply the named function to ``a``.

    Returns ``None`` if ``a`` is ``None``, the name is unknown, or the
    result is undefined.
    """
    if a is None:
        return None
    func = _UNARY.get(name)
    if func is None:
        return None
    return func(a)