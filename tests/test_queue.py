import pytest

from muplayer.queue import QueueView


def test_new_view():
    view = QueueView(3)
    assert view.index() == 3
    assert view.range == (3, 3)
    assert view.constraint == [6, 37, 31, 26]


def test_set_index():
    view = QueueView(0)
    view.set_index(5)
    assert view.range == (5, 5)
    assert view.index() == 5


@pytest.mark.parametrize(
    "length, start, amount, expected",
    [(10, 1, 1, 0), (8, 7, 5, 2), (8, 0, 5, 3)],
)
def test_up(length, start, amount, expected):
    view = QueueView(start)
    view.up(length, amount)
    assert view.range == (expected, expected)


@pytest.mark.parametrize(
    "length, start, amount, expected",
    [(8, 7, 5, 4), (8, 1, 5, 6)],
)
def test_down(length, start, amount, expected):
    view = QueueView(start)
    view.down(length, amount)
    assert view.range == (expected, expected)


def test_up_after_select_all_goes_to_top():
    view = QueueView(4)
    view.select_all(8)
    assert view.range == (0, 8)
    view.up(8, 1)
    assert view.range == (0, 0)


def test_down_after_select_all_collapses():
    view = QueueView(4)
    view.select_all(8)
    view.down(8, 1)
    assert view.range == (1, 1)


def test_no_range_is_left_alone():
    view = QueueView(2)
    view.range = None
    view.up(5, 1)
    view.down(5, 1)
    assert view.range is None
    assert view.index() is None


def test_empty_queue_moves_to_zero():
    view = QueueView(3)
    view.down(0, 1)
    assert view.index() == 0


def test_constraint_forward_and_back():
    view = QueueView(0)
    view.adjust_constraint(0, False)
    assert view.constraint[:2] == [7, 36]
    view.adjust_constraint(0, True)
    assert view.constraint == [6, 37, 31, 26]


@pytest.mark.parametrize("row", [0, 1, 2])
@pytest.mark.parametrize("shift", [False, True])
def test_constraint_sum_stays_100(row, shift):
    view = QueueView(0)
    for _ in range(60):
        view.adjust_constraint(row, shift)
        assert sum(view.constraint) == 100
        assert min(view.constraint) >= 0


def test_constraint_stops_at_zero():
    view = QueueView(0)
    for _ in range(10):
        view.adjust_constraint(0, True)
    assert view.constraint[0] == 0
    assert view.constraint[1] == 43


@pytest.mark.parametrize("row", [-1, 3, 4])
def test_constraint_invalid_row(row):
    view = QueueView(0)
    with pytest.raises(IndexError):
        view.adjust_constraint(row, False)