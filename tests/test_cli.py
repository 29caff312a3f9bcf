import io
import math

import pytest

from plotexpr.canvas import END_X, HEIGHT, WIDTH
from plotexpr.cli import main, plot, sample
from plotexpr.parser import to_rpn


def test_sample_has_one_value_per_column():
    values = sample(to_rpn("x"))
    assert len(values) == WIDTH
    assert values[0] == 0.0
    assert values[-1] == pytest.approx(END_X)
    assert values == sorted(values)


def test_sample_of_constant():
    assert sample(to_rpn("1")) == [1.0] * WIDTH


def test_plot_constant_one_fills_top_line():
    lines = plot("1").splitlines()
    assert len(lines) == HEIGHT - 1
    assert lines[0] == "*" * WIDTH
    assert all(set(line) == {"."} for line in lines[1:])


def test_plot_constant_zero_is_not_drawn():
    assert "*" not in plot("0")


def test_plot_constant_half():
    lines = plot("0.5").splitlines()
    starred = [index for index, line in enumerate(lines) if "*" in line]
    assert starred == [12]


def test_plot_has_at_most_one_point_per_column():
    lines = plot("sin x").splitlines()
    for col in range(WIDTH):
        assert sum(line[col] == "*" for line in lines) <= 1


def test_plot_skips_points_off_the_canvas():
    lines = plot("x").splitlines()
    stars = sum(line.count("*") for line in lines)
    values = sample(to_rpn("x"))
    visible = [
        v for v in values if 0 < math.floor(v * (HEIGHT - 1) + 0.5) < HEIGHT
    ]
    assert stars == len(visible)
    assert stars < WIDTH


def test_plot_rejects_invalid_expression():
    with pytest.raises(ValueError):
        plot("(x")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == plot("1")


def test_main_invalid_input_prints_na(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("foo x\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "n/a"


def test_main_takes_expression_from_arguments(capsys):
    assert main(["sin", "x"]) == 0
    assert capsys.readouterr().out == plot("sin x")