import pytest

from wordgrid.errors import InvalidDimensions
from wordgrid.grid import Grid, Position, VisitedMask, neighbors


def test_from_data_lowercases_rows():
    grid = Grid.from_data("ABCDefghIJKLmnop", 4)
    assert grid.n == 4
    assert grid.rows() == ["abcd", "efgh", "ijkl", "mnop"]
    assert grid.get(0, 0) == "a"
    assert grid.get(3, 0) == "d"
    assert grid.get(0, 3) == "m"
    assert grid.get(2, 1) == "g"


@pytest.mark.parametrize("data,n", [
    ("a" * 15, 4),
    ("a" * 17, 4),
    ("", 1),
    ("abcd", 3),
    ("a", 0),
    ("", 0),
])
def test_from_data_rejects_mismatched_length(data, n):
    with pytest.raises(InvalidDimensions):
        Grid.from_data(data, n)


def test_invalid_dimensions_is_a_value_error():
    with pytest.raises(ValueError):
        Grid.from_data("abc", 2)


def test_positions_row_major():
    grid = Grid.from_data("abcd", 2)
    assert list(grid.positions()) == [Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)]


def test_neighbors_corner_edge_and_center():
    assert len(list(neighbors(Position(0, 0), 4))) == 3
    assert len(list(neighbors(Position(3, 3), 4))) == 3
    assert len(list(neighbors(Position(1, 0), 4))) == 5
    center = set(neighbors(Position(1, 1), 4))
    assert len(center) == 8
    assert Position(1, 1) not in center
    assert center == {Position(x, y) for x in range(3) for y in range(3)} - {Position(1, 1)}


def test_neighbors_single_cell_board():
    assert list(neighbors(Position(0, 0), 1)) == []


def test_visited_mask_copy_on_mark():
    mask = VisitedMask(3)
    marked = mask.mark(Position(2, 1))
    assert marked.index(Position(2, 1)) == 5
    assert marked.is_visited(Position(2, 1))
    assert not mask.is_visited(Position(2, 1))
    sibling = mask.mark(Position(0, 0))
    assert not sibling.is_visited(Position(2, 1))
    assert len(marked.mark(Position(0, 0))) == 2
