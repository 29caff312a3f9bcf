# plotexpr

`plotexpr` draws the graph of a function of `x` as a grid of `*` and `.`
characters in your terminal.

The function is sampled at 80 evenly spaced points from 0 to 4π. Each value
`y` is placed on row `round(y * 24)` of a 25-row grid. Halves round away from
zero. Values that fall outside the grid are left out, and so are values that
are not finite. The chart prints the rows from the top down. The bottom row
(row 0) is not printed, so only values from about 0.02 to 1.02 show up.

## Installation

```
pip install .
```

## Usage

Pass the expression as arguments. The arguments are joined with spaces:

```
plotexpr "0.5 * sin x"
```

With no arguments, `plotexpr` reads one line from standard input:

```
echo "cos (x)" | plotexpr
```

If the expression is not valid, `plotexpr` prints `n/a` and draws nothing.
It exits with status 0 in both cases.

### Expression syntax

- Numbers made of digits and dots: `2`, `0.5`.
- The variable `x`.
- Operators `+`, `-`, `*`, `/` and `^`. `*` and `/` bind tighter than `+`
  and `-`. `^` is accepted, but it never yields a value. Evaluation drops its
  operands.
- Functions `sin`, `cos`, `tg`, `ctg`, `sqrt` and `ln`. The reader consumes
  the character right after a function name along with the name. Put a space
  between the name and its argument, as in `sin x` or `sin (x)`. If you write
  `sin(x)`, the `(` is swallowed, and the expression is rejected as
  unbalanced.
- Parentheses group terms. Empty parentheses `()` are rejected, and so are
  parentheses that do not match.
- Blanks (the space character) are ignored. Any other character not listed
  above makes the expression invalid.

The variable `x` is held on the operator stack until that stack is unwound,
rather than being emitted at once. For example, `2*x` evaluates to `2x`, but
`x*2` evaluates to just `x`.

Evaluation skips any step that has no result. This covers a missing operand,
division by zero, `ctg` where the tangent is zero, `ln` of a number that is
not positive, and `sqrt` of a negative number. If nothing is left at the end,
the value is 0.

## Using it from Python

```python
from plotexpr.parser import to_rpn, evaluate_rpn
from plotexpr.validate import is_valid_expression
from plotexpr.cli import plot

assert is_valid_expression("0.5 * sin x")
tokens = to_rpn("0.5 * sin x")
print(evaluate_rpn(tokens, 1.0))

print(plot("cos (x)"))
```

The modules:

- `plotexpr.parser` holds the tokenizer (`Token`, `TokenType`,
  `read_number`, `read_function`). `to_rpn` turns an infix expression into
  reverse Polish tokens, and `evaluate_rpn` evaluates them at a given `x`.
- `plotexpr.validate` has `is_valid_expression`, `is_function_name` and
  `read_expression`. `read_expression` reads one line from a stream, or from
  standard input by default.
- `plotexpr.mathops` holds the arithmetic and the elementary functions. Each
  one returns `None` when its input is outside its domain. It also holds
  `apply_binary`, `apply_function` and `normalize`.
- `plotexpr.canvas` has `Canvas`, the character grid behind the chart, with
  `set`, `is_set`, `clear` and `render`. It also holds the chart's fixed
  geometry, such as `WIDTH`, `HEIGHT` and `STEP_X`.
- `plotexpr.cli` has `sample`, which evaluates tokens at every column, and
  `plot`, which raises `ValueError` for an invalid expression. The
  `plotexpr` command runs `main`.

## What it does not do

The range of `x`, the chart size and the vertical scale are all fixed. The
command has no options to change them. Values are not rescaled to fit the
chart. Exponentiation is not evaluated.

## Running the tests

```
pip install .[test]
pytest
```