import pytest

from muplayer.index import Index, down, up


def test_up_down_cases():
    assert up(10, 1, 1) == 0
    assert up(8, 7, 5) == 2
    assert up(8, 0, 5) == 3
    assert down(8, 7, 5) == 4
    assert down(8, 1, 5) == 6


def test_empty_length_returns_zero():
    assert up(0, 3, 2) == 0
    assert down(0, 3, 2) == 0


@pytest.mark.parametrize("length", [1, 3, 7])
@pytest.mark.parametrize("amount", [0, 1, 2, 9])
def test_up_then_down_round_trip(length, amount):
    for index in range(length):
        assert down(length, up(length, index, amount), amount) == index


def test_from_items_selects_first():
    idx = Index.from_items(["a", "b"])
    assert idx.index == 0
    assert idx.selected() == "a"


def test_from_items_empty_selects_nothing():
    idx = Index.from_items([])
    assert idx.index is None
    assert idx.selected() is None


def test_default_is_empty():
    idx = Index()
    assert len(idx) == 0
    assert idx.index is None


def test_up_wraps_to_end():
    idx = Index([1, 2, 3], 0)
    idx.up()
    assert idx.index == 2
    idx.up()
    assert idx.index == 1


def test_down_wraps_to_start():
    idx = Index([1, 2, 3], 2)
    idx.down()
    assert idx.index == 0
    idx.down()
    assert idx.index == 1


def test_moves_do_nothing_without_selection():
    idx = Index([1, 2, 3], None)
    idx.up()
    idx.down()
    idx.up_n(2)
    idx.down_n(2)
    assert idx.index is None


def test_moves_do_nothing_when_empty():
    idx = Index([], 4)
    idx.up()
    idx.down_n(3)
    assert idx.index == 4


def test_up_n_and_down_n():
    idx = Index(list(range(8)), 7)
    idx.up_n(5)
    assert idx.index == 2
    idx = Index(list(range(8)), 1)
    idx.down_n(5)
    assert idx.index == 6


def test_selected_out_of_range_is_none():
    idx = Index(["a"], 5)
    assert idx.selected() is None


def test_select():
    idx = Index(["a", "b", "c"], 0)
    idx.select(2)
    assert idx.selected() == "c"
    idx.select(None)
    assert idx.selected() is None


def test_remove_and_move_last_selected():
    idx = Index(["a", "b", "c"], 2)
    idx.remove_and_move(2)
    assert idx.to_list() == ["a", "b"]
    assert idx.index == 1


def test_remove_and_move_first_selected():
    idx = Index(["a", "b", "c"], 0)
    idx.remove_and_move(0)
    assert idx.to_list() == ["b", "c"]
    assert idx.index == 0


def test_remove_and_move_only_item():
    idx = Index(["a"], 0)
    idx.remove_and_move(0)
    assert len(idx) == 0
    assert idx.index == 0


def test_remove_and_move_middle_keeps_index():
    idx = Index(["a", "b", "c"], 1)
    idx.remove_and_move(1)
    assert idx.index == 1
    assert idx.selected() == "c"


def test_remove_and_move_out_of_range_raises():
    idx = Index(["a"], 0)
    with pytest.raises(IndexError):
        idx.remove_and_move(3)


def test_list_operations():
    idx = Index(["a"], 0)
    idx.append("b")
    idx.extend(["c", "d"])
    assert idx.to_list() == ["a", "b", "c", "d"]
    assert idx.pop(1) == "b"
    assert idx[1] == "c"
    assert list(idx) == ["a", "c", "d"]
    assert idx.index == 0
    idx.clear()
    assert len(idx) == 0


def test_to_list_is_a_copy():
    idx = Index(["a"], 0)
    copy = idx.to_list()
    copy.append("b")
    assert len(idx) == 1


def test_equality():
    assert Index([1, 2], 0) == Index.from_items([1, 2])
    assert not (Index([1, 2], 1) == Index([1, 2], 0))