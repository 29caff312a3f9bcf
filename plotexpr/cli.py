"""Command that reads an expression in ``x`` and draws its graph as text."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from typing import Optional

from plotexpr.canvas import HEIGHT, STEP_X, WIDTH, Canvas
from plotexpr.parser import Token, evaluate_rpn, to_rpn
from plotexpr.validate import is_valid_expression, read_expression

_INVALID_OUTPUT = "n/a"


def sample(tokens: Sequence[Token]) -> list[float]:
    """Evaluate the reverse Polish ``tokens`` at every column's ``x``."""
    return [evaluate_rpn(tokens, col * STEP_X) for col in range(WIDTH)]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def plot(expr: str) -> str:
    """Render the graph of ``expr`` over ``[0, 4*pi]``.

    A value ``y`` lands on row ``round(y * (HEIGHT - 1))``; points that fall
    outside the canvas or are not finite are left out.
    Raises ``ValueError`` if the expression is invalid.
    """
    if not is_valid_expression(expr):
        raise ValueError(f"invalid expression: {expr!r}")
    canvas = Canvas(WIDTH, HEIGHT)
    for col, y in enumerate(sample(to_rpn(expr))):
        if not math.isfinite(y):
            continue
        row = _round_half_away(y * (HEIGHT - 1))
        if 0 <= row < HEIGHT:
            canvas.set(row, col)
    return canvas.render()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Plot the expression given as arguments, or read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    expr = " ".join(args) if args else read_expression()
    try:
        output = plot(expr)
    except ValueError:
        print(_INVALID_OUTPUT, end="")
        return 0
    print(output, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())