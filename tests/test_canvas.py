import pytest

from plotexpr.canvas import HEIGHT, WIDTH, Canvas


def test_default_dimensions():
    canvas = Canvas()
    assert (canvas.width, canvas.height) == (WIDTH, HEIGHT)
    assert (WIDTH, HEIGHT) == (80, 25)


def test_blank_render_shape():
    canvas = Canvas(6, 4)
    lines = canvas.render().splitlines()
    assert len(lines) == canvas.height - 1
    assert all(line == "." * canvas.width for line in lines)
    assert canvas.render().endswith("\n")


def test_set_and_is_set():
    canvas = Canvas(5, 5)
    assert canvas.is_set(2, 3) is False
    canvas.set(2, 3)
    assert canvas.is_set(2, 3) is True
    assert canvas.is_set(3, 2) is False


def test_rows_are_drawn_top_first():
    canvas = Canvas(5, 4)
    canvas.set(3, 0)
    canvas.set(1, 4)
    lines = canvas.render().splitlines()
    assert lines[0][0] == "*"
    assert lines[canvas.height - 1 - 1][4] == "*"
    assert canvas.render().count("*") == 2


def test_bottom_row_is_not_drawn():
    canvas = Canvas(5, 4)
    canvas.set(0, 2)
    assert canvas.is_set(0, 2) is True
    assert "*" not in canvas.render()


def test_clear_blanks_everything():
    canvas = Canvas(4, 4)
    canvas.set(1, 1)
    canvas.set(3, 3)
    canvas.clear()
    assert canvas.is_set(1, 1) is False
    assert "*" not in canvas.render()


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_range_cells(row, col):
    canvas = Canvas(4, 4)
    with pytest.raises(IndexError):
        canvas.set(row, col)
    with pytest.raises(IndexError):
        canvas.is_set(row, col)


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ValueError):
        Canvas(width, height)